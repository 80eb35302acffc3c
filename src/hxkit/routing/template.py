"""Route template parsing.

A template is a ``/``-separated path whose segments are either literal
text or placeholders like ``{id}`` and ``{id:int}``. Constraints are
recognized only so they can be stripped from the name; they are never
validated.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

type PlaceholderTable = Mapping[str, str]
"""Placeholder name -> original token text (braces and constraint included)."""


@dataclass(frozen=True, slots=True)
class TemplateSegment:
    """A parsed segment of a route template.

    Literal:     ``users``     (is_placeholder=False)
    Placeholder: ``{id}``      (is_placeholder=True, name="id")
    Constrained: ``{id:int}``  (is_placeholder=True, name="id", constraint="int")
    """

    value: str
    is_placeholder: bool = False
    name: str | None = None
    constraint: str | None = None


def parse_template(template: str) -> list[TemplateSegment]:
    """Parse a route template into segments.

    Empty segments (leading, trailing, or doubled slashes) are dropped.
    A segment missing either brace is literal text.

    Examples::

        "/users"             -> [TemplateSegment("users")]
        "/users/{id}"        -> [TemplateSegment("users"), TemplateSegment("{id}", True, "id")]
        "/posts/{slug:alpha}" -> [..., TemplateSegment("{slug:alpha}", True, "slug", "alpha")]
        "/files/{broken"     -> [TemplateSegment("files"), TemplateSegment("{broken")]
    """
    segments: list[TemplateSegment] = []
    for part in template.split("/"):
        if not part:
            continue
        if part.startswith("{") and part.endswith("}"):
            inner = part[1:-1]
            if ":" in inner:
                name, constraint = inner.split(":", 1)
            else:
                name, constraint = inner, None
            segments.append(
                TemplateSegment(value=part, is_placeholder=True, name=name, constraint=constraint)
            )
        else:
            segments.append(TemplateSegment(value=part))
    return segments


def tokenize(template: str) -> PlaceholderTable:
    """Build the placeholder table for *template*.

    Pure and deterministic: the same template always yields an equal
    table. When a name repeats, the later token text wins.

    Example::

        >>> dict(tokenize("/users/{id}/posts/{postId:int}"))
        {'id': '{id}', 'postId': '{postId:int}'}
    """
    table: dict[str, str] = {}
    for seg in parse_template(template):
        if seg.is_placeholder and seg.name is not None:
            table[seg.name] = seg.value
    return MappingProxyType(table)
