"""
Summary: Domain exports for the MusicBrainz entity model.
Why: Offer one import path for entities, composite values and scalar types.
"""

from __future__ import annotations

from .components import (
    Alias,
    LabelInfo,
    LifeSpan,
    Medium,
    NameCredit,
    Rating,
    Relationship,
    Tag,
    Track,
    UserRating,
    UserTag,
    WorkAttribute,
)
from .entities import (
    Area,
    Artist,
    Entity,
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
from .values import (
    Direction,
    Gender,
    PartialDate,
    ReleaseQuality,
    ReleaseStatus,
    UnhandledProperties,
    WeakValue,
    coerce_enum,
)

__all__ = [
    "Alias",
    "Area",
    "Artist",
    "Direction",
    "Entity",
    "EntityList",
    "Event",
    "Gender",
    "Label",
    "LabelInfo",
    "LifeSpan",
    "Medium",
    "NameCredit",
    "PartialDate",
    "Rating",
    "Recording",
    "Relationship",
    "Release",
    "ReleaseGroup",
    "ReleaseQuality",
    "ReleaseStatus",
    "Series",
    "Tag",
    "Track",
    "UnhandledProperties",
    "Url",
    "UserRating",
    "UserTag",
    "WeakValue",
    "Work",
    "WorkAttribute",
    "coerce_enum",
]
