"""
Summary: Composite values embedded in many MusicBrainz entities.
Why: Aliases, tags, ratings, life-spans and relationships share one shape everywhere.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING
from uuid import UUID

from .values import Direction, PartialDate, UnhandledProperties

if TYPE_CHECKING:
    from .entities import Entity


@dataclass(slots=True, kw_only=True)
class Alias:
    """An alternate name for an entity, optionally tied to a locale."""

    name: str
    sort_name: str | None = None
    locale: str | None = None
    primary: bool | None = None
    type: str | None = None
    type_id: UUID | None = None
    begin: PartialDate | None = None
    end: PartialDate | None = None
    ended: bool | None = None
    unhandled_properties: UnhandledProperties = field(default_factory=dict)

    def __str__(self) -> str:
        return self.name


@dataclass(slots=True, kw_only=True)
class Tag:
    """A folksonomy tag (or genre) with its vote count."""

    name: str
    count: int | None = None
    unhandled_properties: UnhandledProperties = field(default_factory=dict)

    def __str__(self) -> str:
        if self.count is None:
            return self.name
        return f"{self.name} ({self.count})"


@dataclass(slots=True, kw_only=True)
class UserTag:
    """A tag applied by the authenticated user."""

    name: str
    unhandled_properties: UnhandledProperties = field(default_factory=dict)


@dataclass(slots=True, kw_only=True)
class Rating:
    """Aggregate rating: ``value`` is 0-5 and ``None`` when nobody voted."""

    value: float | None = None
    votes_count: int | None = None
    unhandled_properties: UnhandledProperties = field(default_factory=dict)


@dataclass(slots=True, kw_only=True)
class UserRating:
    value: int | None = None
    unhandled_properties: UnhandledProperties = field(default_factory=dict)


@dataclass(slots=True, kw_only=True)
class LifeSpan:
    begin: PartialDate | None = None
    end: PartialDate | None = None
    ended: bool | None = None
    unhandled_properties: UnhandledProperties = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return self.begin is None and self.end is None and not self.ended


@dataclass(slots=True, kw_only=True)
class Relationship:
    """A typed link from the owning entity to another entity.

    ``target`` holds the decoded entity when its kind is known; otherwise
    the nested object stays in ``unhandled_properties`` under its kind.
    """

    target_type: str
    type: str | None = None
    type_id: UUID | None = None
    direction: Direction | str | None = None
    target: Entity | None = None
    attributes: list[str] | None = None
    attribute_ids: dict[str, UUID] | None = None
    attribute_values: dict[str, str] | None = None
    attribute_credits: dict[str, str] | None = None
    begin: PartialDate | None = None
    end: PartialDate | None = None
    ended: bool | None = None
    ordering_key: int | None = None
    source_credit: str | None = None
    target_credit: str | None = None
    unhandled_properties: UnhandledProperties = field(default_factory=dict)

    def __str__(self) -> str:
        text = self.type or "relationship"
        if self.target is not None:
            text += f" -> {self.target}"
        return text


@dataclass(slots=True, kw_only=True)
class WorkAttribute:
    type: str
    type_id: UUID | None = None
    value: str | None = None
    value_id: UUID | None = None
    unhandled_properties: UnhandledProperties = field(default_factory=dict)


@dataclass(slots=True, kw_only=True)
class LabelInfo:
    """Label and catalog number under which a release was issued."""

    catalog_number: str | None = None
    label: Entity | None = None
    unhandled_properties: UnhandledProperties = field(default_factory=dict)

    def __str__(self) -> str:
        text = ""
        if self.label is not None:
            text += str(self.label)
            if self.catalog_number is not None:
                text += ": "
        if self.catalog_number is not None:
            text += self.catalog_number
        return text


@dataclass(slots=True, kw_only=True)
class NameCredit:
    """One artist in an artist credit, with the text joining it to the next."""

    name: str | None = None
    join_phrase: str | None = None
    artist: Entity | None = None
    unhandled_properties: UnhandledProperties = field(default_factory=dict)


@dataclass(slots=True, kw_only=True)
class Track:
    """One track of a medium, linked to the recording it plays."""

    id: UUID
    number: str | None = None
    position: int | None = None
    title: str | None = None
    length: int | None = None
    recording: Entity | None = None
    artist_credit: list[NameCredit] | None = None
    unhandled_properties: UnhandledProperties = field(default_factory=dict)


@dataclass(slots=True, kw_only=True)
class Medium:
    """A disc, side or file set of a release; ``tracks`` may be a single page."""

    position: int | None = None
    title: str | None = None
    format: str | None = None
    format_id: UUID | None = None
    track_count: int | None = None
    track_offset: int | None = None
    tracks: list[Track] | None = None
    unhandled_properties: UnhandledProperties = field(default_factory=dict)


__all__ = [
    "Alias",
    "LabelInfo",
    "LifeSpan",
    "Medium",
    "NameCredit",
    "Rating",
    "Relationship",
    "Tag",
    "Track",
    "UserRating",
    "UserTag",
    "WorkAttribute",
]
