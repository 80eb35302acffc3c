"""Tests for hxkit.http.headers — first-value, case-insensitive Headers."""

import pytest

from hxkit.http.headers import Headers


class TestLookup:
    def test_any_spelling_matches(self) -> None:
        h = Headers([("HX-Request", "true")])
        assert h["hx-request"] == "true"
        assert h["HX-REQUEST"] == "true"
        assert h.get("Hx-Request") == "true"

    def test_first_value_wins(self) -> None:
        h = Headers([("HX-Target", "main"), ("hx-target", "sidebar")])
        assert h["HX-Target"] == "main"
        assert len(h) == 1

    def test_missing(self) -> None:
        h = Headers([("Accept", "*/*")])
        assert h.get("HX-Boosted") is None
        assert h.get("HX-Boosted", "false") == "false"
        with pytest.raises(KeyError):
            h["HX-Boosted"]

    def test_contains(self) -> None:
        h = Headers({"HX-Boosted": "true"})
        assert "hx-boosted" in h
        assert "HX-Request" not in h
        assert 42 not in h  # type: ignore[operator]

    def test_names_are_lowercase(self) -> None:
        h = Headers({"HX-Request": "true", "Accept": "text/html"})
        assert list(h) == ["hx-request", "accept"]

    def test_empty(self) -> None:
        assert len(Headers()) == 0

    def test_repr(self) -> None:
        assert repr(Headers({"HX-Request": "true"})) == "Headers({'hx-request': 'true'})"


class TestFromRaw:
    def test_decodes_asgi_pairs(self) -> None:
        h = Headers.from_raw([(b"hx-request", b"true"), (b"hx-current-url", b"/caf\xe9")])
        assert h["HX-Request"] == "true"
        assert h["HX-Current-URL"] == "/café"

    def test_first_raw_value_wins(self) -> None:
        h = Headers.from_raw([(b"HX-Boosted", b"true"), (b"hx-boosted", b"false")])
        assert h.get("hx-boosted") == "true"
