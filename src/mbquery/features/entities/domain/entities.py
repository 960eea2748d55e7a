"""
Summary: Core MusicBrainz entities returned by lookups, searches and browses.
Why: Give callers typed attribute bags with explicit absent values.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Generic, TypeAlias, TypeVar
from uuid import UUID

from .components import (
    Alias,
    LabelInfo,
    LifeSpan,
    Medium,
    NameCredit,
    Rating,
    Relationship,
    Tag,
    UserRating,
    UserTag,
    WorkAttribute,
)
from .values import Gender, PartialDate, ReleaseQuality, ReleaseStatus, UnhandledProperties


def _describe(score: int | None, name: str | None, *qualifiers: str | None) -> str:
    text = ""
    if score is not None:
        text += f"[Score: {score}] "
    text += name or ""
    for qualifier in qualifiers:
        if qualifier:
            text += f" ({qualifier})"
    return text


@dataclass(slots=True, kw_only=True)
class Area:
    id: UUID
    name: str | None = None
    sort_name: str | None = None
    disambiguation: str | None = None
    type: str | None = None
    type_id: UUID | None = None
    iso_3166_1_codes: list[str] | None = None
    iso_3166_2_codes: list[str] | None = None
    iso_3166_3_codes: list[str] | None = None
    life_span: LifeSpan | None = None
    aliases: list[Alias] | None = None
    annotation: str | None = None
    genres: list[Tag] | None = None
    tags: list[Tag] | None = None
    relationships: list[Relationship] | None = None
    score: int | None = None
    user_genres: list[UserTag] | None = None
    user_tags: list[UserTag] | None = None
    unhandled_properties: UnhandledProperties = field(default_factory=dict)

    def __str__(self) -> str:
        return _describe(self.score, self.name, self.disambiguation)


@dataclass(slots=True, kw_only=True)
class Artist:
    """A person, group or other entity credited on recordings and releases."""

    id: UUID
    name: str | None = None
    sort_name: str | None = None
    disambiguation: str | None = None
    type: str | None = None
    type_id: UUID | None = None
    gender: Gender | str | None = None
    gender_id: UUID | None = None
    country: str | None = None
    area: Area | None = None
    begin_area: Area | None = None
    end_area: Area | None = None
    ipis: list[str] | None = None
    isnis: list[str] | None = None
    life_span: LifeSpan | None = None
    aliases: list[Alias] | None = None
    annotation: str | None = None
    genres: list[Tag] | None = None
    tags: list[Tag] | None = None
    rating: Rating | None = None
    relationships: list[Relationship] | None = None
    releases: list[Release] | None = None
    works: list[Work] | None = None
    score: int | None = None
    user_genres: list[UserTag] | None = None
    user_rating: UserRating | None = None
    user_tags: list[UserTag] | None = None
    unhandled_properties: UnhandledProperties = field(default_factory=dict)

    def __str__(self) -> str:
        return _describe(self.score, self.name, self.disambiguation, self.type)


@dataclass(slots=True, kw_only=True)
class Event:
    id: UUID
    name: str | None = None
    disambiguation: str | None = None
    type: str | None = None
    type_id: UUID | None = None
    cancelled: bool | None = None
    life_span: LifeSpan | None = None
    time: str | None = None
    setlist: str | None = None
    aliases: list[Alias] | None = None
    annotation: str | None = None
    genres: list[Tag] | None = None
    tags: list[Tag] | None = None
    rating: Rating | None = None
    relationships: list[Relationship] | None = None
    score: int | None = None
    user_genres: list[UserTag] | None = None
    user_rating: UserRating | None = None
    user_tags: list[UserTag] | None = None
    unhandled_properties: UnhandledProperties = field(default_factory=dict)

    def __str__(self) -> str:
        return _describe(self.score, self.name, self.disambiguation, self.type)


@dataclass(slots=True, kw_only=True)
class Label:
    id: UUID
    name: str | None = None
    sort_name: str | None = None
    disambiguation: str | None = None
    type: str | None = None
    type_id: UUID | None = None
    label_code: int | None = None
    country: str | None = None
    area: Area | None = None
    ipis: list[str] | None = None
    isnis: list[str] | None = None
    life_span: LifeSpan | None = None
    aliases: list[Alias] | None = None
    annotation: str | None = None
    genres: list[Tag] | None = None
    tags: list[Tag] | None = None
    rating: Rating | None = None
    relationships: list[Relationship] | None = None
    releases: list[Release] | None = None
    score: int | None = None
    user_genres: list[UserTag] | None = None
    user_rating: UserRating | None = None
    user_tags: list[UserTag] | None = None
    unhandled_properties: UnhandledProperties = field(default_factory=dict)

    def __str__(self) -> str:
        return _describe(self.score, self.name, self.disambiguation)


@dataclass(slots=True, kw_only=True)
class Recording:
    """A distinct audio mix or edit; ``length`` is in milliseconds."""

    id: UUID
    title: str | None = None
    disambiguation: str | None = None
    length: int | None = None
    video: bool | None = None
    first_release_date: PartialDate | None = None
    isrcs: list[str] | None = None
    artist_credit: list[NameCredit] | None = None
    releases: list[Release] | None = None
    aliases: list[Alias] | None = None
    annotation: str | None = None
    genres: list[Tag] | None = None
    tags: list[Tag] | None = None
    rating: Rating | None = None
    relationships: list[Relationship] | None = None
    score: int | None = None
    user_genres: list[UserTag] | None = None
    user_rating: UserRating | None = None
    user_tags: list[UserTag] | None = None
    unhandled_properties: UnhandledProperties = field(default_factory=dict)

    def __str__(self) -> str:
        return _describe(self.score, self.title, self.disambiguation)


@dataclass(slots=True, kw_only=True)
class Release:
    """A unique issue of a product, e.g. one CD pressing of an album."""

    id: UUID
    title: str | None = None
    disambiguation: str | None = None
    status: ReleaseStatus | str | None = None
    status_id: UUID | None = None
    quality: ReleaseQuality | str | None = None
    packaging: str | None = None
    packaging_id: UUID | None = None
    barcode: str | None = None
    asin: str | None = None
    date: PartialDate | None = None
    country: str | None = None
    annotation: str | None = None
    artist_credit: list[NameCredit] | None = None
    label_info: list[LabelInfo] | None = None
    release_group: ReleaseGroup | None = None
    media: list[Medium] | None = None
    aliases: list[Alias] | None = None
    genres: list[Tag] | None = None
    tags: list[Tag] | None = None
    relationships: list[Relationship] | None = None
    score: int | None = None
    user_genres: list[UserTag] | None = None
    user_tags: list[UserTag] | None = None
    unhandled_properties: UnhandledProperties = field(default_factory=dict)

    @property
    def artist_credit_text(self) -> str | None:
        """The credit as printed: names joined by their join phrases."""

        if self.artist_credit is None:
            return None
        return "".join(
            (credit.name or "") + (credit.join_phrase or "") for credit in self.artist_credit
        )

    @property
    def track_count(self) -> int | None:
        if self.media is None:
            return None
        return sum(medium.track_count or 0 for medium in self.media)

    def __str__(self) -> str:
        return _describe(self.score, self.title, self.disambiguation)


@dataclass(slots=True, kw_only=True)
class ReleaseGroup:
    """The releases of one album, single or other product, grouped together."""

    id: UUID
    title: str | None = None
    disambiguation: str | None = None
    primary_type: str | None = None
    primary_type_id: UUID | None = None
    secondary_types: list[str] | None = None
    secondary_type_ids: list[UUID] | None = None
    first_release_date: PartialDate | None = None
    artist_credit: list[NameCredit] | None = None
    releases: list[Release] | None = None
    aliases: list[Alias] | None = None
    annotation: str | None = None
    genres: list[Tag] | None = None
    tags: list[Tag] | None = None
    rating: Rating | None = None
    relationships: list[Relationship] | None = None
    score: int | None = None
    user_genres: list[UserTag] | None = None
    user_rating: UserRating | None = None
    user_tags: list[UserTag] | None = None
    unhandled_properties: UnhandledProperties = field(default_factory=dict)

    def __str__(self) -> str:
        return _describe(self.score, self.title, self.disambiguation, self.primary_type)


@dataclass(slots=True, kw_only=True)
class Series:
    id: UUID
    name: str | None = None
    disambiguation: str | None = None
    type: str | None = None
    type_id: UUID | None = None
    aliases: list[Alias] | None = None
    annotation: str | None = None
    genres: list[Tag] | None = None
    tags: list[Tag] | None = None
    relationships: list[Relationship] | None = None
    score: int | None = None
    user_genres: list[UserTag] | None = None
    user_tags: list[UserTag] | None = None
    unhandled_properties: UnhandledProperties = field(default_factory=dict)

    def __str__(self) -> str:
        return _describe(self.score, self.name, self.disambiguation, self.type)


@dataclass(slots=True, kw_only=True)
class Url:
    id: UUID
    resource: str | None = None
    relationships: list[Relationship] | None = None
    score: int | None = None
    unhandled_properties: UnhandledProperties = field(default_factory=dict)

    def __str__(self) -> str:
        return self.resource or ""


@dataclass(slots=True, kw_only=True)
class Work:
    """A distinct intellectual or artistic creation, such as a song."""

    id: UUID
    title: str | None = None
    disambiguation: str | None = None
    type: str | None = None
    type_id: UUID | None = None
    iswcs: list[str] | None = None
    language: str | None = None
    languages: list[str] | None = None
    attributes: list[WorkAttribute] | None = None
    aliases: list[Alias] | None = None
    annotation: str | None = None
    genres: list[Tag] | None = None
    tags: list[Tag] | None = None
    rating: Rating | None = None
    relationships: list[Relationship] | None = None
    score: int | None = None
    user_genres: list[UserTag] | None = None
    user_rating: UserRating | None = None
    user_tags: list[UserTag] | None = None
    unhandled_properties: UnhandledProperties = field(default_factory=dict)

    def __str__(self) -> str:
        return _describe(self.score, self.title, self.disambiguation, self.type)


Entity: TypeAlias = (
    Area | Artist | Event | Label | Recording | Release | ReleaseGroup | Series | Url | Work
)

T = TypeVar("T")


@dataclass(slots=True, kw_only=True)
class EntityList(Generic[T]):
    """One page of a search or browse result.

    ``count`` is the size of the full result set and ``offset`` the position
    of ``items`` within it. Both are ``None`` when the service returned the
    complete result in one go.
    """

    kind: str
    items: list[T]
    count: int | None = None
    offset: int | None = None
    created: str | None = None
    unhandled_properties: UnhandledProperties = field(default_factory=dict)

    @property
    def is_complete(self) -> bool:
        return self.count is None and self.offset is None

    @property
    def next_offset(self) -> int | None:
        """Offset of the following page, or ``None`` when nothing remains."""

        if self.count is None or not self.items:
            return None
        following = (self.offset or 0) + len(self.items)
        return following if following < self.count else None

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


__all__ = [
    "Area",
    "Artist",
    "Entity",
    "EntityList",
    "Event",
    "Label",
    "Recording",
    "Release",
    "ReleaseGroup",
    "Series",
    "Url",
    "Work",
]
