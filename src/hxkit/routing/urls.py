"""Relative URL generation from route templates.

``build_url`` is the pure function: given a template, its placeholder
table, and named values, it fills the path and appends the rest as a
query string. ``UrlBuilder`` owns the caches and the configuration a
host application needs around it.
"""

from collections.abc import Hashable, Mapping
from typing import Any
from urllib.parse import quote

from hxkit.config import UrlConfig
from hxkit.errors import ConfigurationError
from hxkit.routing.cache import RouteCache
from hxkit.routing.registry import RouteLookup, RouteResolver
from hxkit.routing.template import PlaceholderTable, tokenize


def build_url(
    template: str,
    values: Mapping[str, Any] | None = None,
    path_base: str = "",
    include_path_base: bool = True,
    *,
    placeholders: PlaceholderTable | None = None,
) -> str:
    """Build a relative URL from *template* and *values*.

    Values whose key names a placeholder replace that placeholder's
    token; every other value becomes a ``key=value`` query parameter,
    in iteration order. ``None`` values are skipped. Values are
    percent-encoded (a space becomes ``%20``); keys are not.

    Placeholders without a value are left in the URL verbatim. If a
    template repeats the same token text, only its first occurrence
    is substituted.

    Examples::

        >>> build_url("/users/{id}", {"id": 42, "sort": "name"})
        '/users/42?sort=name'
        >>> build_url("/users/{id}", {"sort": "name"})
        '/users/{id}?sort=name'
        >>> build_url("/items", {"tag": "a b"}, "/app")
        '/app/items?tag=a%20b'
    """
    if placeholders is None:
        placeholders = tokenize(template)

    result = template
    query: list[str] = []

    for key, value in (values or {}).items():
        if value is None:
            continue
        encoded = quote(str(value), safe="")
        token = placeholders.get(key)
        if token is not None:
            result = result.replace(token, encoded, 1)
        else:
            query.append(f"{key}={encoded}")

    if query:
        result = f"{result}?{'&'.join(query)}"

    if include_path_base:
        result = f"{path_base}{result}"

    return result


class UrlBuilder:
    """Builds URLs for route templates and declared route sources.

    Owns the template cache and, when given a route lookup, a resolver
    for route sources. Create one at startup and share it; it is safe
    to call from any thread.

    Usage::

        routes = RouteRegistry()
        urls = UrlBuilder(UrlConfig(path_base="/app"), routes=routes.get)

        urls.url_for_route("/users/{id}", {"id": 42})   # "/app/users/42"
        urls.url_for(UserPage, {"id": 42})              # same, via declaration
    """

    __slots__ = ("_resolver", "_templates", "config")

    def __init__(
        self,
        config: UrlConfig | None = None,
        *,
        routes: RouteLookup | None = None,
    ) -> None:
        self.config = config or UrlConfig()
        self._templates: RouteCache[str, PlaceholderTable] = RouteCache("route template")
        self._resolver = RouteResolver(routes) if routes is not None else None

    def tokenize(self, template: str) -> PlaceholderTable:
        """Return the cached placeholder table for *template*."""
        return self._templates.get_or_add(template, tokenize)

    def resolve(self, source: Hashable) -> str:
        """Return the route template declared for *source*.

        Raises ``ConfigurationError`` if no route lookup was configured,
        or if *source* has no valid declared route.
        """
        if self._resolver is None:
            msg = f"Cannot resolve {source!r}: UrlBuilder was created without a route lookup."
            raise ConfigurationError(msg)
        return self._resolver.resolve(source)

    def url_for_route(
        self,
        template: str,
        values: Mapping[str, Any] | None = None,
        *,
        path_base: str | None = None,
        include_path_base: bool | None = None,
    ) -> str:
        """Build a relative URL for *template*.

        *path_base* and *include_path_base* default to the config; pass
        the current request's mount prefix as *path_base* to override.
        """
        return build_url(
            template,
            values,
            self.config.path_base if path_base is None else path_base,
            self.config.include_path_base if include_path_base is None else include_path_base,
            placeholders=self.tokenize(template),
        )

    def url_for(
        self,
        source: Hashable,
        values: Mapping[str, Any] | None = None,
        *,
        path_base: str | None = None,
        include_path_base: bool | None = None,
    ) -> str:
        """Build a relative URL for the route declared by *source*."""
        return self.url_for_route(
            self.resolve(source),
            values,
            path_base=path_base,
            include_path_base=include_path_base,
        )
