"""
Summary: Readers for composite values embedded in many entity shapes.
Why: Aliases, tags, ratings, life-spans and relationships are decoded once, not per entity.
"""

from __future__ import annotations

from typing import Final

from mbquery.features.entities.domain import (
    Alias,
    Direction,
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

from .framework import (
    EntityReaderRegistry,
    Field,
    ObjectReader,
    dict_of,
    enum_of,
    list_of,
    read_bool,
    read_float,
    read_int,
    read_partial_date,
    read_string,
    read_uuid,
)

# Fields shared by every shape that has a begin/end period.
PERIOD_FIELDS: Final[dict[str, Field]] = {
    "begin": Field("begin", read_partial_date),
    "end": Field("end", read_partial_date),
    "ended": Field("ended", read_bool),
}

ALIAS: Final[ObjectReader[Alias]] = ObjectReader(
    "alias",
    Alias,
    {
        "name": Field("name", read_string),
        "sort-name": Field("sort_name", read_string),
        "locale": Field("locale", read_string),
        "primary": Field("primary", read_bool),
        "type": Field("type", read_string),
        "type-id": Field("type_id", read_uuid),
        **PERIOD_FIELDS,
    },
    required="name",
)

TAG: Final[ObjectReader[Tag]] = ObjectReader(
    "tag",
    Tag,
    {
        "name": Field("name", read_string),
        "count": Field("count", read_int),
    },
    required="name",
)

USER_TAG: Final[ObjectReader[UserTag]] = ObjectReader(
    "user-tag",
    UserTag,
    {"name": Field("name", read_string)},
    required="name",
)

RATING: Final[ObjectReader[Rating]] = ObjectReader(
    "rating",
    Rating,
    {
        "value": Field("value", read_float),
        "votes-count": Field("votes_count", read_int),
    },
    required=None,
)

USER_RATING: Final[ObjectReader[UserRating]] = ObjectReader(
    "user-rating",
    UserRating,
    {"value": Field("value", read_int)},
    required=None,
)

LIFE_SPAN: Final[ObjectReader[LifeSpan]] = ObjectReader(
    "life-span",
    LifeSpan,
    PERIOD_FIELDS,
    required=None,
)

WORK_ATTRIBUTE: Final[ObjectReader[WorkAttribute]] = ObjectReader(
    "work-attribute",
    WorkAttribute,
    {
        "type": Field("type", read_string),
        "type-id": Field("type_id", read_uuid),
        "value": Field("value", read_string),
        "value-id": Field("value_id", read_uuid),
    },
    required="type",
)


def relationship_reader(registry: EntityReaderRegistry) -> ObjectReader[Relationship]:
    """Build the relationship reader for ``registry``.

    The related entity sits under a property named after its kind
    (``"artist": {...}``, ``"release_group": {...}``); any kind the registry
    can read becomes ``target``, anything else stays unhandled.
    """

    def resolve_target(name: str) -> Field | None:
        kind = name.replace("_", "-")
        if kind in registry and not kind.endswith("-list"):
            return Field("target", registry.delegate(kind))
        return None

    return ObjectReader(
        "relationship",
        Relationship,
        {
            "target-type": Field("target_type", read_string),
            "type": Field("type", read_string),
            "type-id": Field("type_id", read_uuid),
            "direction": Field("direction", enum_of(Direction)),
            "attributes": Field("attributes", list_of(read_string)),
            "attribute-ids": Field("attribute_ids", dict_of(read_uuid)),
            "attribute-values": Field("attribute_values", dict_of(read_string)),
            "attribute-credits": Field("attribute_credits", dict_of(read_string)),
            "ordering-key": Field("ordering_key", read_int),
            "source-credit": Field("source_credit", read_string),
            "target-credit": Field("target_credit", read_string),
            **PERIOD_FIELDS,
        },
        required="target-type",
        resolver=resolve_target,
    )


def label_info_reader(registry: EntityReaderRegistry) -> ObjectReader[LabelInfo]:
    return ObjectReader(
        "label-info",
        LabelInfo,
        {
            "catalog-number": Field("catalog_number", read_string),
            "label": Field("label", registry.delegate("label")),
        },
        required=None,
    )


def name_credit_reader(registry: EntityReaderRegistry) -> ObjectReader[NameCredit]:
    return ObjectReader(
        "name-credit",
        NameCredit,
        {
            "name": Field("name", read_string),
            "joinphrase": Field("join_phrase", read_string),
            "artist": Field("artist", registry.delegate("artist")),
        },
        required="artist",
    )


def track_reader(registry: EntityReaderRegistry) -> ObjectReader[Track]:
    return ObjectReader(
        "track",
        Track,
        {
            "id": Field("id", read_uuid),
            "number": Field("number", read_string),
            "position": Field("position", read_int),
            "title": Field("title", read_string),
            "length": Field("length", read_int),
            "recording": Field("recording", registry.delegate("recording")),
            "artist-credit": Field("artist_credit", list_of(name_credit_reader(registry).read)),
        },
    )


def medium_reader(registry: EntityReaderRegistry) -> ObjectReader[Medium]:
    """Media carry no identifier; browse results page their tracks via ``track-offset``."""

    return ObjectReader(
        "medium",
        Medium,
        {
            "position": Field("position", read_int),
            "title": Field("title", read_string),
            "format": Field("format", read_string),
            "format-id": Field("format_id", read_uuid),
            "track-count": Field("track_count", read_int),
            "track-offset": Field("track_offset", read_int),
            "tracks": Field("tracks", list_of(track_reader(registry).read)),
        },
        required=None,
    )


__all__ = [
    "ALIAS",
    "LIFE_SPAN",
    "PERIOD_FIELDS",
    "RATING",
    "TAG",
    "USER_RATING",
    "USER_TAG",
    "WORK_ATTRIBUTE",
    "label_info_reader",
    "medium_reader",
    "name_credit_reader",
    "relationship_reader",
    "track_reader",
]
