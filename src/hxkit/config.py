"""URL builder configuration.

UrlConfig is a frozen dataclass — immutable after creation, no string-key
dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class UrlConfig:
    """URL builder configuration. Immutable after creation.

    Override what you need::

        config = UrlConfig(path_base="/app")
    """

    # Mount prefix of the application (ASGI ``root_path``)
    path_base: str = ""

    # Default for ``include_path_base`` when a call doesn't pass one
    include_path_base: bool = True
