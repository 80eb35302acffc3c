"""hxkit exception hierarchy.

Shared across the registry, resolver, and URL builder so every module
raises and catches the same types.
"""


class HxkitError(Exception):
    """Base for all hxkit-specific errors."""


class ConfigurationError(HxkitError):
    """Raised when route declarations are missing or invalid.

    Expected at startup or on the first URL built for a route source,
    never as a user-facing runtime failure.
    """
