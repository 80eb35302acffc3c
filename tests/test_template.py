"""Tests for hxkit.routing.template — parse_template, tokenize, TemplateSegment."""

import pytest

from hxkit.routing.template import TemplateSegment, parse_template, tokenize


class TestTemplateSegment:
    def test_literal(self) -> None:
        seg = TemplateSegment(value="users")
        assert seg.is_placeholder is False
        assert seg.name is None
        assert seg.constraint is None

    def test_frozen(self) -> None:
        seg = TemplateSegment(value="users")
        with pytest.raises(AttributeError):
            seg.value = "other"  # type: ignore[misc]


class TestParseTemplate:
    def test_static(self) -> None:
        assert parse_template("/api/v2/users") == [
            TemplateSegment("api"),
            TemplateSegment("v2"),
            TemplateSegment("users"),
        ]

    def test_placeholder(self) -> None:
        segments = parse_template("/users/{id}")
        assert segments[1] == TemplateSegment("{id}", is_placeholder=True, name="id")

    def test_constraint(self) -> None:
        segments = parse_template("/users/{id:int}")
        assert segments[1].name == "id"
        assert segments[1].constraint == "int"
        assert segments[1].value == "{id:int}"

    def test_constraint_split_at_first_colon(self) -> None:
        (seg,) = parse_template("/{when:datetime:iso}")
        assert seg.name == "when"
        assert seg.constraint == "datetime:iso"

    def test_empty_segments_dropped(self) -> None:
        assert [s.value for s in parse_template("//users///{id}/")] == ["users", "{id}"]

    def test_root(self) -> None:
        assert parse_template("/") == []
        assert parse_template("") == []

    @pytest.mark.parametrize("segment", ["{id", "id}", "x{id}", "{id}x"])
    def test_unbalanced_braces_are_literal(self, segment: str) -> None:
        (seg,) = parse_template(f"/{segment}")
        assert seg.is_placeholder is False
        assert seg.value == segment


class TestTokenize:
    def test_placeholders_with_constraint(self) -> None:
        table = tokenize("/users/{id}/posts/{postId:int}")
        assert dict(table) == {"id": "{id}", "postId": "{postId:int}"}

    def test_no_placeholders(self) -> None:
        assert dict(tokenize("/about/team")) == {}

    def test_malformed_template_degrades_to_literals(self) -> None:
        assert dict(tokenize("/files/{name/{id}")) == {"id": "{id}"}

    def test_duplicate_name_later_wins(self) -> None:
        table = tokenize("/{id}/nested/{id:int}")
        assert table["id"] == "{id:int}"

    def test_deterministic(self) -> None:
        template = "/orgs/{org}/repos/{repo:slug}"
        assert tokenize(template) == tokenize(template)

    def test_table_is_read_only(self) -> None:
        table = tokenize("/users/{id}")
        with pytest.raises(TypeError):
            table["id"] = "{other}"  # type: ignore[index]
