"""htmx request classification.

Derives how a request reached the server from the ``HX-*`` request
headers: plain navigation, htmx request, boosted link or form, or
history-restore replay. Used to decide between rendering a full page
and a fragment.

Usage::

    from hxkit.htmx import HtmxMode, htmx_mode

    mode = htmx_mode(request.headers)
    if mode.wants_full_page:
        return render_page()
    return render_fragment()
"""

from collections.abc import Mapping
from enum import Enum

from hxkit.http.headers import HeaderLookup, Headers

HX_REQUEST = "HX-Request"
HX_HISTORY_RESTORE_REQUEST = "HX-History-Restore-Request"
HX_BOOSTED = "HX-Boosted"

_TRUE = "true"


class HtmxMode(Enum):
    """How a request was made, as far as htmx is concerned."""

    NONE = "none"
    """Not an htmx request."""

    REQUEST = "request"
    """Made by htmx (``hx-get``, ``hx-post``, ...)."""

    BOOSTED = "boosted"
    """An ``hx-boost`` enhanced link or form."""

    HISTORY_RESTORE = "history_restore"
    """History cache miss; htmx expects a full page."""

    @property
    def is_htmx(self) -> bool:
        """True for every mode that carries ``HX-Request: true``."""
        return self is not HtmxMode.NONE

    @property
    def wants_full_page(self) -> bool:
        """True when the response must be a complete page, not a fragment."""
        return self in (HtmxMode.NONE, HtmxMode.HISTORY_RESTORE)


def htmx_mode(headers: Mapping[str, str] | HeaderLookup) -> HtmxMode:
    """Classify a request from its htmx headers.

    *headers* is either a mapping, whose names are matched
    case-insensitively, or a callable returning a header's first value
    or ``None``. Missing or malformed headers count as false; this never
    raises.
    """
    if isinstance(headers, Mapping) and not isinstance(headers, Headers):
        headers = Headers(headers)
    lookup = headers.get if isinstance(headers, Headers) else headers

    if lookup(HX_REQUEST) != _TRUE:
        return HtmxMode.NONE

    # History cache miss: htmx wants the full page back
    if lookup(HX_HISTORY_RESTORE_REQUEST) == _TRUE:
        return HtmxMode.HISTORY_RESTORE

    if lookup(HX_BOOSTED) == _TRUE:
        return HtmxMode.BOOSTED
    return HtmxMode.REQUEST
