"""Where: src/mbquery/platform/musicbrainz/http_client.py
What: Authenticating HTTP transport for MusicBrainz WS2 GET requests.
Why: Keep URL building, throttling, authorization and error classification
     away from payload decoding.
"""

from __future__ import annotations

import secrets
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import NoReturn, Protocol
from urllib.parse import quote, urlencode, urlunsplit

import requests

from mbquery.config.settings import DEFAULT_HOST, DEFAULT_URL_SCHEME, WEB_SERVICE_ROOT
from mbquery.exceptions import (
    AuthenticationError,
    EmptyResponseError,
    ServiceError,
    TransportError,
)
from mbquery.platform.logging import logger

from .digest import Credential, DigestChallenge, compute_authorization
from .payload import PayloadFormat, read_error_payload
from .rate_limit import DEFAULT_SCHEDULER, RequestScheduler
from .user_agent import compose_user_agent


@dataclass(frozen=True, slots=True)
class RequestDescriptor:
    """What to ask the web service for.

    ``identifier`` is empty for search and browse requests, which only use
    query modifiers.
    """

    entity: str
    identifier: str = ""
    modifiers: tuple[tuple[str, str], ...] = field(default=())

    @classmethod
    def build(
        cls,
        entity: str,
        identifier: object = "",
        **modifiers: str | int | None,
    ) -> RequestDescriptor:
        """Create a descriptor, dropping modifiers whose value is ``None``.

        Keyword names use underscores where WS2 uses dashes
        (``release_group`` becomes ``release-group``). A ``None`` identifier
        means no identifier, as for searches and browses.
        """

        pairs = tuple(
            (name.replace("_", "-"), str(value))
            for name, value in modifiers.items()
            if value is not None
        )
        text = "" if identifier is None else str(identifier)
        return cls(entity=entity, identifier=text, modifiers=pairs)

    @property
    def path(self) -> str:
        path = f"{WEB_SERVICE_ROOT}/{self.entity}"
        if self.identifier:
            path += f"/{quote(self.identifier, safe='')}"
        return path

    @property
    def query(self) -> str:
        return urlencode(self.modifiers)


@dataclass(slots=True)
class HTTPResult:
    """Represent a successful HTTP response relevant to the decoder."""

    status: int
    headers: dict[str, str]
    body: bytes
    url: str

    @property
    def content_type(self) -> str | None:
        for key, value in self.headers.items():
            if key.lower() == "content-type":
                return value
        return None


class HTTPClient(Protocol):
    """Protocol for transports able to fetch one WS2 payload."""

    payload_format: PayloadFormat

    def fetch(self, request: RequestDescriptor) -> HTTPResult:
        ...


class AuthenticatingTransport:
    """Send throttled GET requests with bearer or Digest authorization.

    Connection settings are plain attributes and are read on every call, so
    they may be changed between requests. A bearer token takes precedence
    over the credential; when it is set no Digest header is ever sent.
    """

    _MAX_ATTEMPTS: int = 2

    def __init__(
        self,
        user_agent: str,
        *,
        url_scheme: str = DEFAULT_URL_SCHEME,
        host: str = DEFAULT_HOST,
        port: int | None = None,
        bearer_token: str | None = None,
        credential: Credential | None = None,
        payload_format: PayloadFormat = PayloadFormat.JSON,
        scheduler: RequestScheduler | None = None,
        session: requests.Session | None = None,
    ) -> None:
        if not user_agent or not user_agent.strip():
            raise ValueError("A user agent is required for MusicBrainz requests.")
        self.user_agent: str = user_agent
        self.url_scheme: str = url_scheme
        self.host: str = host
        self.port: int | None = port
        self.bearer_token: str | None = bearer_token
        self.payload_format: PayloadFormat = payload_format
        self._scheduler: RequestScheduler = scheduler or DEFAULT_SCHEDULER
        self._session: requests.Session = session or requests.Session()
        self._credential: Credential | None = credential
        self._last_digest: str | None = None
        self._cnonce: str = secrets.token_hex(8)

    @property
    def credential(self) -> Credential | None:
        """Credential used to answer Digest challenges."""

        return self._credential

    @credential.setter
    def credential(self, value: Credential | None) -> None:
        self._credential = value
        self._last_digest = None
        self._cnonce = secrets.token_hex(8)

    @property
    def cached_authorization(self) -> str | None:
        """The Digest header replayed on every request, once computed."""

        return self._last_digest

    @property
    def scheduler(self) -> RequestScheduler:
        return self._scheduler

    @property
    def base_url(self) -> str:
        return urlunsplit((self.url_scheme, self._netloc(), WEB_SERVICE_ROOT, "", ""))

    def build_url(self, request: RequestDescriptor) -> str:
        """Compose ``scheme://host[:port]/ws/2/entity[/id][?modifiers]``."""

        return urlunsplit((self.url_scheme, self._netloc(), request.path, request.query, ""))

    def fetch(self, request: RequestDescriptor) -> HTTPResult:
        """Perform the request, answering at most one Digest challenge.

        Raises:
            TransportError: The request failed at the network level, or the
                server answered with an error that is not a WS2 error payload.
            AuthenticationError: A 401 could not be resolved.
            ServiceError: The server answered with a WS2 error payload.
            EmptyResponseError: A successful response carried no body.
        """

        url = self.build_url(request)
        target = request.path + (f"?{request.query}" if request.query else "")
        logger.debug("WEB SERVICE REQUEST: %s", url)

        for attempt in range(self._MAX_ATTEMPTS):
            self._scheduler.admit()
            response = self._send(url)

            if response.status_code == HTTPStatus.UNAUTHORIZED:
                if attempt == 0 and self._answer_challenge(response, target):
                    logger.info("MusicBrainz requested authentication; retrying %s with Digest", url)
                    continue
                self._raise_authentication_error(response, url, retried=attempt > 0)

            if response.status_code >= 400:
                self._raise_for_error(response, url)

            body = response.content
            if not body:
                logger.warning("MusicBrainz returned an empty body (status=%s)", response.status_code)
                raise EmptyResponseError(url)

            return HTTPResult(
                status=int(response.status_code),
                headers={str(key): str(value) for key, value in response.headers.items()},
                body=body,
                url=url,
            )

        raise AuthenticationError("Authentication retry limit reached", url=url)  # pragma: no cover

    def close(self) -> None:
        self._session.close()

    def _netloc(self) -> str:
        if self.port is None or self.port < 0:
            return self.host
        return f"{self.host}:{self.port}"

    def _headers(self) -> dict[str, str]:
        headers = {
            "Accept": self.payload_format.mime_type,
            "User-Agent": compose_user_agent(self.user_agent),
        }
        if self.bearer_token:
            headers["Authorization"] = f"Bearer {self.bearer_token}"
        elif self._last_digest is not None:
            headers["Authorization"] = self._last_digest
        return headers

    def _send(self, url: str) -> requests.Response:
        try:
            return self._session.get(url, headers=self._headers())
        except requests.RequestException as exc:
            logger.warning("MusicBrainz request error: %s", exc)
            raise TransportError(str(exc), url=url) from exc

    def _answer_challenge(self, response: requests.Response, target: str) -> bool:
        """Cache a fresh Digest answer; return True when a retry is worthwhile."""

        if self.bearer_token:
            return False
        credential = self._credential
        if credential is None:
            return False
        challenge = DigestChallenge.parse(response.headers.get("WWW-Authenticate"))
        if challenge is None:
            return False
        authorization = compute_authorization(
            challenge,
            credential,
            method="GET",
            uri=target,
            cnonce=self._cnonce,
        )
        if authorization is None or authorization == self._last_digest:
            return False
        self._last_digest = authorization
        return True

    def _raise_authentication_error(
        self,
        response: requests.Response,
        url: str,
        *,
        retried: bool,
    ) -> NoReturn:
        if retried:
            reason = "Digest authorization was rejected"
        elif self.bearer_token:
            reason = "Bearer token was rejected"
        elif self._credential is None:
            reason = "Authentication required but no credential is configured"
        else:
            reason = "Authentication challenge could not be satisfied"
        if response.content and self.payload_format.matches(response.headers.get("Content-Type")):
            message, _ = read_error_payload(response.content, self.payload_format)
            reason = f"{reason}: {message}"
        logger.warning("MusicBrainz authentication failed for %s: %s", url, reason)
        raise AuthenticationError(reason, url=url)

    def _raise_for_error(self, response: requests.Response, url: str) -> NoReturn:
        status = int(response.status_code)
        # Heuristic: WS2 error documents are non-empty and use the requested format.
        if response.content and self.payload_format.matches(response.headers.get("Content-Type")):
            message, help_text = read_error_payload(response.content, self.payload_format)
            logger.warning("MusicBrainz error (status=%s): %s", status, message)
            raise ServiceError(status, message, help_text)
        logger.warning("MusicBrainz HTTP error: status=%s", status)
        try:
            response.raise_for_status()
        except requests.HTTPError as exc:
            raise TransportError(str(exc), url=url) from exc
        raise TransportError(f"Unexpected HTTP status {status}", url=url)


__all__ = [
    "AuthenticatingTransport",
    "HTTPClient",
    "HTTPResult",
    "RequestDescriptor",
]
