"""hxkit — htmx request classification and route URL building.

Basic usage::

    from hxkit import HtmxMode, RouteRegistry, UrlBuilder, UrlConfig, htmx_mode

    routes = RouteRegistry()

    @routes.route("/users/{id:int}")
    class UserPage: ...

    urls = UrlBuilder(UrlConfig(path_base="/app"), routes=routes.get)
    urls.url_for(UserPage, {"id": 42, "tab": "posts"})
    # "/app/users/42?tab=posts"

    if htmx_mode(request.headers) is HtmxMode.HISTORY_RESTORE:
        ...
"""

from importlib import import_module

# Declare free-threading support (PEP 703)
_Py_mod_gil = 0

__version__ = "0.1.0.dev0"
__all__ = [
    "ConfigurationError",
    "Headers",
    "HtmxMode",
    "HxkitError",
    "RouteCache",
    "RouteRegistry",
    "RouteResolver",
    "UrlBuilder",
    "UrlConfig",
    "build_url",
    "htmx_mode",
    "tokenize",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "hxkit.errors",
    "Headers": "hxkit.http.headers",
    "HtmxMode": "hxkit.htmx",
    "HxkitError": "hxkit.errors",
    "RouteCache": "hxkit.routing.cache",
    "RouteRegistry": "hxkit.routing.registry",
    "RouteResolver": "hxkit.routing.registry",
    "UrlBuilder": "hxkit.routing.urls",
    "UrlConfig": "hxkit.config",
    "build_url": "hxkit.routing.urls",
    "htmx_mode": "hxkit.htmx",
    "tokenize": "hxkit.routing.template",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import hxkit`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(import_module(module_name), name)
