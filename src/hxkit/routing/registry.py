"""Route declarations and resolution by route source.

A *route source* is whatever the host uses to identify a routable
thing, such as a view class, a handler function or a string key. The host
declares each source's template explicitly in a ``RouteRegistry``;
``RouteResolver`` looks templates up through any declaration lookup
and caches the result.

Usage::

    routes = RouteRegistry()

    @routes.route("/users/{id:int}")
    class UserPage: ...

    resolver = RouteResolver(routes.get)
    resolver.resolve(UserPage)  # "/users/{id:int}"
"""

import logging
from collections.abc import Callable, Hashable, Iterator

from hxkit.errors import ConfigurationError
from hxkit.routing.cache import RouteCache

logger = logging.getLogger("hxkit.routing")

type RouteLookup = Callable[[Hashable], str | None]
"""Returns the template declared for a route source, or ``None``."""


def _describe(source: Hashable) -> str:
    qualname = getattr(source, "__qualname__", None)
    if qualname is not None:
        return f"{getattr(source, '__module__', '?')}.{qualname}"
    return repr(source)


class RouteRegistry:
    """Explicit route source -> template declarations.

    Populated by the host at startup. Nothing is discovered by
    introspection; a source has a route only if it was registered.
    """

    __slots__ = ("_routes",)

    def __init__(self) -> None:
        self._routes: dict[Hashable, str] = {}

    def register(self, source: Hashable, template: str) -> None:
        """Declare *template* as the route of *source*.

        Registering the same template twice is a no-op. Registering a
        different template for an already-declared source raises
        ``ConfigurationError``.
        """
        existing = self._routes.get(source)
        if existing is not None and existing != template:
            msg = (
                f"{_describe(source)} is already declared with route {existing!r}; "
                f"cannot redeclare it as {template!r}."
            )
            raise ConfigurationError(msg)
        self._routes[source] = template
        logger.debug("Declared route %r for %s", template, _describe(source))

    def route[T: Hashable](self, template: str) -> Callable[[T], T]:
        """Decorator form of ``register``. Returns the target unchanged.

        Usage::

            @routes.route("/contacts/{id}")
            class ContactPage: ...
        """

        def decorator(source: T) -> T:
            self.register(source, template)
            return source

        return decorator

    def get(self, source: Hashable) -> str | None:
        """Return the template declared for *source*, or ``None``."""
        return self._routes.get(source)

    def __contains__(self, source: object) -> bool:
        return source in self._routes

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._routes)

    def __len__(self) -> int:
        return len(self._routes)


class RouteResolver:
    """Resolves route sources to templates, caching each one forever.

    The lookup is consulted at most once per source in the common case;
    concurrent first lookups may each consult it, and the first result
    stored is the one every caller sees.
    """

    __slots__ = ("_cache", "_lookup")

    def __init__(self, lookup: RouteLookup) -> None:
        self._lookup = lookup
        self._cache: RouteCache[Hashable, str] = RouteCache("route source")

    def resolve(self, source: Hashable) -> str:
        """Return the route template declared for *source*.

        Raises ``ConfigurationError`` if *source* has no declared route,
        or if the declared template is blank.
        """
        return self._cache.get_or_add(source, self._declared_template)

    def _declared_template(self, source: Hashable) -> str:
        template = self._lookup(source)
        if template is None:
            msg = f"{_describe(source)} has no declared route."
            raise ConfigurationError(msg)
        if not isinstance(template, str) or not template.strip():
            msg = f"{_describe(source)} has an invalid route template: {template!r}."
            raise ConfigurationError(msg)
        logger.debug("Resolved %s to route %r", _describe(source), template)
        return template
