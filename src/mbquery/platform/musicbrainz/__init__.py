"""MusicBrainz infrastructure package.

This package provides the network side of the client: request throttling,
User-Agent etiquette, Digest/bearer authorization and the HTTP transport
for the MusicBrainz Web Service (WS2).
"""

from __future__ import annotations

from .digest import Credential, DigestChallenge, compute_authorization
from .http_client import AuthenticatingTransport, HTTPClient, HTTPResult, RequestDescriptor
from .payload import PayloadFormat, read_error_payload
from .rate_limit import DEFAULT_SCHEDULER, RequestScheduler
from .user_agent import compose_user_agent, format_user_agent

__all__ = [
    "AuthenticatingTransport",
    "Credential",
    "DEFAULT_SCHEDULER",
    "DigestChallenge",
    "HTTPClient",
    "HTTPResult",
    "PayloadFormat",
    "RequestDescriptor",
    "RequestScheduler",
    "compose_user_agent",
    "compute_authorization",
    "format_user_agent",
    "read_error_payload",
]
