"""Where: src/mbquery/config/settings.py
What: Library identity and web service constants.
Why: Expose fixed values to platform layers without file I/O.
"""

from __future__ import annotations

from importlib import metadata
from typing import Final

LIBRARY_NAME: Final[str] = "mbquery"


def _library_version() -> str:
    try:
        return metadata.version(LIBRARY_NAME)
    except metadata.PackageNotFoundError:  # running from a source checkout
        return "0.1.0"


LIBRARY_VERSION: Final[str] = _library_version()


# Root of the WS2 API on every MusicBrainz server.
WEB_SERVICE_ROOT: Final[str] = "/ws/2"

DEFAULT_URL_SCHEME: Final[str] = "https"
DEFAULT_HOST: Final[str] = "musicbrainz.org"

# The official server asks clients to stay at or below one request per second.
# See: https://musicbrainz.org/doc/MusicBrainz_API/Rate_Limiting
DEFAULT_REQUEST_DELAY: Final[float] = 1.0


__all__ = [
    "DEFAULT_HOST",
    "DEFAULT_REQUEST_DELAY",
    "DEFAULT_URL_SCHEME",
    "LIBRARY_NAME",
    "LIBRARY_VERSION",
    "WEB_SERVICE_ROOT",
]
