"""Request metadata from an ASGI scope.

The host's server owns the request; these helpers read the two things
hxkit needs from it (headers and the mount prefix) without wrapping
or subclassing any host type.
"""

from collections.abc import Mapping
from typing import Any

from hxkit.http.headers import Headers


def headers_from_scope(scope: Mapping[str, Any]) -> Headers:
    """Build case-insensitive ``Headers`` from the scope's raw byte pairs."""
    return Headers.from_raw(scope.get("headers", ()))


def path_base_from_scope(scope: Mapping[str, Any]) -> str:
    """Return the application's mount prefix (``root_path``), or ``""``."""
    return scope.get("root_path") or ""
