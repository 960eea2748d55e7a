# Where: mbquery.features.entities.__init__
# What: Expose the entity model used by decoders and the query facade.
# Why: Provide a cohesive import surface for application code.

from .domain import (
    Alias,
    Area,
    Artist,
    Direction,
    Entity,
    EntityList,
    Event,
    Gender,
    Label,
    LabelInfo,
    LifeSpan,
    Medium,
    NameCredit,
    PartialDate,
    Rating,
    Recording,
    Relationship,
    Release,
    ReleaseGroup,
    ReleaseQuality,
    ReleaseStatus,
    Series,
    Tag,
    Track,
    UnhandledProperties,
    Url,
    UserRating,
    UserTag,
    WeakValue,
    Work,
    WorkAttribute,
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
]
