"""Where: src/mbquery/application/query.py
What: Facade exposing MusicBrainz WS2 lookups, searches and browses.
Why: Compose the transport and the decoder behind one read-only client.

The facade delegates specialised responsibilities to focused collaborators:
- ``AuthenticatingTransport`` throttles, authorizes and sends each request
- ``ResponseDecoder`` turns the body into typed entities via the registry
- ``Config`` (optional) supplies connection and identity settings
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, ClassVar
from uuid import UUID

import requests

from mbquery.config.config import Config
from mbquery.config.settings import DEFAULT_HOST, DEFAULT_URL_SCHEME
from mbquery.features.decoding import ResponseDecoder
from mbquery.features.entities import (
    Area,
    Artist,
    EntityList,
    Event,
    Label,
    Recording,
    Release,
    ReleaseGroup,
    Series,
    Url,
    Work,
)
from mbquery.platform.logging import setup_logger
from mbquery.platform.musicbrainz import (
    DEFAULT_SCHEDULER,
    AuthenticatingTransport,
    Credential,
    HTTPClient,
    PayloadFormat,
    RequestDescriptor,
    RequestScheduler,
    format_user_agent,
)

Includes = Sequence[str] | str | None


def _joined(inc: Includes) -> str | None:
    """WS2 expects ``inc`` values joined with ``+``."""

    if inc is None or isinstance(inc, str):
        return inc or None
    return "+".join(inc) or None


def _mbid(value: UUID | str) -> str:
    return str(value if isinstance(value, UUID) else UUID(str(value)))


class Query:
    """Read-only MusicBrainz client.

    Connection settings live on :attr:`transport` and can be changed at any
    time (for example ``query.transport.bearer_token = token``); they are
    read on every request.
    """

    default_user_agent: ClassVar[str | None] = None

    def __init__(
        self,
        user_agent: str | None = None,
        *,
        transport: HTTPClient | None = None,
        decoder: ResponseDecoder | None = None,
        url_scheme: str = DEFAULT_URL_SCHEME,
        host: str = DEFAULT_HOST,
        port: int | None = None,
        bearer_token: str | None = None,
        credential: Credential | None = None,
        payload_format: PayloadFormat = PayloadFormat.JSON,
        scheduler: RequestScheduler | None = None,
        session: requests.Session | None = None,
    ) -> None:
        if transport is None:
            agent = user_agent or Query.default_user_agent
            if not agent:
                raise ValueError("A user agent is required (argument or Query.default_user_agent).")
            transport = AuthenticatingTransport(
                agent,
                url_scheme=url_scheme,
                host=host,
                port=port,
                bearer_token=bearer_token,
                credential=credential,
                payload_format=payload_format,
                scheduler=scheduler,
                session=session,
            )
        self.transport: HTTPClient = transport
        self.decoder: ResponseDecoder = decoder or ResponseDecoder()

    @classmethod
    def from_config(
        cls,
        config: Config | None = None,
        *,
        scheduler: RequestScheduler | None = None,
        session: requests.Session | None = None,
    ) -> Query:
        """Build a client from persisted configuration.

        ``request_delay`` is applied to ``scheduler`` (the process-wide one by
        default), so it affects every client sharing it.
        """

        settings = config or Config.load()
        if settings.log_file is not None:
            setup_logger(log_file=settings.log_file)

        agent = settings.user_agent
        if not agent and settings.app_name:
            agent = format_user_agent(
                settings.app_name, settings.app_version or "0", settings.contact or ""
            )

        credential = None
        if settings.has_credential:
            credential = Credential(settings.username or "", settings.password or "")

        shared = scheduler or DEFAULT_SCHEDULER
        shared.delay = settings.request_delay

        return cls(
            agent,
            url_scheme=settings.url_scheme,
            host=settings.host,
            port=settings.port,
            bearer_token=settings.bearer_token,
            credential=credential,
            payload_format=PayloadFormat(settings.payload_format.strip().lower()),
            scheduler=shared,
            session=session,
        )

    # Generic operations ------------------------------------------------------

    def lookup(self, entity: str, identifier: UUID | str, inc: Includes = None) -> Any:
        """Look up one entity by its identifier.

        Args:
            entity: Entity kind, e.g. ``"artist"``.
            identifier: The entity's MBID (or other WS2 identifier).
            inc: Subqueries to include, e.g. ``["aliases", "tags"]``.

        Returns:
            The decoded entity.
        """

        request = RequestDescriptor.build(entity, identifier, inc=_joined(inc))
        return self._perform(request, entity)

    def search(
        self,
        entity: str,
        query: str,
        *,
        limit: int | None = None,
        offset: int | None = None,
    ) -> EntityList[Any]:
        """Run a Lucene search; results carry a relevance ``score``."""

        request = RequestDescriptor.build(entity, query=query, limit=limit, offset=offset)
        return self._perform(request, f"{entity}-list")

    def browse(
        self,
        entity: str,
        related_entity: str,
        related_id: UUID | str,
        *,
        inc: Includes = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> EntityList[Any]:
        """List the ``entity`` items linked to one ``related_entity``."""

        modifiers: dict[str, str | int | None] = {related_entity: str(related_id)}
        request = RequestDescriptor.build(
            entity, inc=_joined(inc), limit=limit, offset=offset, **modifiers
        )
        return self._perform(request, f"{entity}-list")

    # Typed shortcuts ---------------------------------------------------------

    def lookup_area(self, mbid: UUID | str, inc: Includes = None) -> Area:
        return self.lookup("area", _mbid(mbid), inc)

    def lookup_artist(self, mbid: UUID | str, inc: Includes = None) -> Artist:
        return self.lookup("artist", _mbid(mbid), inc)

    def lookup_event(self, mbid: UUID | str, inc: Includes = None) -> Event:
        return self.lookup("event", _mbid(mbid), inc)

    def lookup_label(self, mbid: UUID | str, inc: Includes = None) -> Label:
        return self.lookup("label", _mbid(mbid), inc)

    def lookup_recording(self, mbid: UUID | str, inc: Includes = None) -> Recording:
        return self.lookup("recording", _mbid(mbid), inc)

    def lookup_release(self, mbid: UUID | str, inc: Includes = None) -> Release:
        return self.lookup("release", _mbid(mbid), inc)

    def lookup_release_group(self, mbid: UUID | str, inc: Includes = None) -> ReleaseGroup:
        return self.lookup("release-group", _mbid(mbid), inc)

    def lookup_series(self, mbid: UUID | str, inc: Includes = None) -> Series:
        return self.lookup("series", _mbid(mbid), inc)

    def lookup_url(self, mbid: UUID | str, inc: Includes = None) -> Url:
        return self.lookup("url", _mbid(mbid), inc)

    def lookup_url_resource(self, resource: str, inc: Includes = None) -> Url:
        """Look up a URL entity by the address itself rather than its MBID."""

        request = RequestDescriptor.build("url", resource=resource, inc=_joined(inc))
        return self._perform(request, "url")

    def lookup_work(self, mbid: UUID | str, inc: Includes = None) -> Work:
        return self.lookup("work", _mbid(mbid), inc)

    def lookup_iswc(self, iswc: str, inc: Includes = None) -> EntityList[Work]:
        """Find the works registered under an ISWC."""

        request = RequestDescriptor.build("iswc", iswc, inc=_joined(inc))
        return self._perform(request, "work-list")

    def search_artists(
        self, query: str, *, limit: int | None = None, offset: int | None = None
    ) -> EntityList[Artist]:
        return self.search("artist", query, limit=limit, offset=offset)

    def search_recordings(
        self, query: str, *, limit: int | None = None, offset: int | None = None
    ) -> EntityList[Recording]:
        return self.search("recording", query, limit=limit, offset=offset)

    def search_releases(
        self, query: str, *, limit: int | None = None, offset: int | None = None
    ) -> EntityList[Release]:
        return self.search("release", query, limit=limit, offset=offset)

    def search_release_groups(
        self, query: str, *, limit: int | None = None, offset: int | None = None
    ) -> EntityList[ReleaseGroup]:
        return self.search("release-group", query, limit=limit, offset=offset)

    def search_works(
        self, query: str, *, limit: int | None = None, offset: int | None = None
    ) -> EntityList[Work]:
        return self.search("work", query, limit=limit, offset=offset)

    def browse_artist_releases(
        self,
        artist: UUID | str,
        *,
        inc: Includes = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> EntityList[Release]:
        return self.browse("release", "artist", _mbid(artist), inc=inc, limit=limit, offset=offset)

    def close(self) -> None:
        close = getattr(self.transport, "close", None)
        if callable(close):
            close()

    def _perform(self, request: RequestDescriptor, shape: str) -> Any:
        if shape not in self.decoder.registry:
            raise ValueError(f"Unsupported result shape '{shape}'.")
        result = self.transport.fetch(request)
        return self.decoder.decode(result.body, self.transport.payload_format, shape)


__all__ = ["Query"]
