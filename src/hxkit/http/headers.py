"""Request headers as a first-value, case-insensitive lookup.

Header names are folded to lowercase once, at construction, and only
the first value of a repeated header is kept. That is all the htmx
classifier needs: ``headers.get("HX-Request")`` regardless of how the
server or the caller spelled the name.
"""

from collections.abc import Callable, Iterable, Iterator, Mapping

type HeaderLookup = Callable[[str], str | None]
"""Returns the first value of a header, or ``None`` when it is absent."""


class Headers(Mapping[str, str]):
    """Immutable request headers keyed by lowercase name.

    Build from decoded string pairs, or from the raw byte pairs of an
    ASGI scope with ``from_raw``::

        headers = Headers([("HX-Request", "true")])
        headers.get("hx-request")  # "true"
    """

    __slots__ = ("_first",)

    def __init__(self, pairs: Iterable[tuple[str, str]] | Mapping[str, str] = ()) -> None:
        items = pairs.items() if isinstance(pairs, Mapping) else pairs
        first: dict[str, str] = {}
        for name, value in items:
            first.setdefault(name.lower(), value)
        object.__setattr__(self, "_first", first)

    @classmethod
    def from_raw(cls, raw: Iterable[tuple[bytes, bytes]]) -> "Headers":
        """Decode ASGI ``(name, value)`` byte pairs (latin-1, per HTTP/1.1)."""
        return cls((name.decode("latin-1"), value.decode("latin-1")) for name, value in raw)

    def __getitem__(self, key: str) -> str:
        return self._first[key.lower()]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._first

    def __iter__(self) -> Iterator[str]:
        return iter(self._first)

    def __len__(self) -> int:
        return len(self._first)

    def __repr__(self) -> str:
        return f"Headers({self._first!r})"

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value for *key*, or *default* if missing."""
        return self._first.get(key.lower(), default)
