"""mbquery: a read-only MusicBrainz WS2 client.

Lookups, searches and browses are throttled process-wide, authorized with a
bearer token or HTTP Digest credentials, and decoded into typed entities that
keep every property the decoder does not model in ``unhandled_properties``.
"""

from __future__ import annotations

from mbquery.application import Query
from mbquery.exceptions import (
    AuthenticationError,
    DecodeError,
    EmptyResponseError,
    MusicBrainzError,
    ServiceError,
    TransportError,
)
from mbquery.platform.musicbrainz import (
    DEFAULT_SCHEDULER,
    Credential,
    PayloadFormat,
    RequestScheduler,
)

__all__ = [
    "AuthenticationError",
    "Credential",
    "DEFAULT_SCHEDULER",
    "DecodeError",
    "EmptyResponseError",
    "MusicBrainzError",
    "PayloadFormat",
    "Query",
    "RequestScheduler",
    "ServiceError",
    "TransportError",
]
