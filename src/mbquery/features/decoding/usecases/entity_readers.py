"""
Summary: Root entity readers and their paginated list counterparts.
Why: Assemble the shared sub-shape readers into one registry keyed by entity kind.
"""

from __future__ import annotations

from functools import partial
from typing import Any, Final

from mbquery.features.entities.domain import (
    Area,
    Artist,
    EntityList,
    Event,
    Gender,
    Label,
    Recording,
    Release,
    ReleaseGroup,
    ReleaseQuality,
    ReleaseStatus,
    Series,
    Url,
    Work,
)

from .framework import (
    EntityReaderRegistry,
    Field,
    ObjectReader,
    ValueReader,
    enum_of,
    list_of,
    read_bool,
    read_int,
    read_partial_date,
    read_string,
    read_uuid,
)
from .shared_readers import (
    ALIAS,
    LIFE_SPAN,
    RATING,
    TAG,
    USER_RATING,
    USER_TAG,
    WORK_ATTRIBUTE,
    label_info_reader,
    medium_reader,
    name_credit_reader,
    relationship_reader,
)

# Plural property under which each kind's items appear in list payloads.
PLURALS: Final[dict[str, str]] = {
    "area": "areas",
    "artist": "artists",
    "event": "events",
    "label": "labels",
    "recording": "recordings",
    "release": "releases",
    "release-group": "release-groups",
    "series": "series",
    "url": "urls",
    "work": "works",
}


def list_reader(kind: str, item: ValueReader, plural: str | None = None) -> ObjectReader[EntityList[Any]]:
    """Build the ``<kind>-list`` reader used for search, browse and ISWC results.

    Searches report ``count``/``offset``; browses report
    ``<kind>-count``/``<kind>-offset``. Both map onto the same fields.
    """

    items = plural or PLURALS.get(kind, f"{kind}s")
    return ObjectReader(
        f"{kind}-list",
        partial(EntityList, kind=kind),
        {
            items: Field("items", list_of(item)),
            "count": Field("count", read_int),
            "offset": Field("offset", read_int),
            f"{kind}-count": Field("count", read_int),
            f"{kind}-offset": Field("offset", read_int),
            "created": Field("created", read_string),
        },
        required=items,
    )


def build_registry() -> EntityReaderRegistry:
    """Create a registry holding every supported entity and list reader."""

    registry = EntityReaderRegistry()
    relationship = relationship_reader(registry)

    common = {
        "id": Field("id", read_uuid),
        "disambiguation": Field("disambiguation", read_string),
        "annotation": Field("annotation", read_string),
        "aliases": Field("aliases", list_of(ALIAS.read)),
        "genres": Field("genres", list_of(TAG.read)),
        "tags": Field("tags", list_of(TAG.read)),
        "relations": Field("relationships", list_of(relationship.read)),
        "score": Field("score", read_int),
        "user-genres": Field("user_genres", list_of(USER_TAG.read)),
        "user-tags": Field("user_tags", list_of(USER_TAG.read)),
    }
    typed = {
        "type": Field("type", read_string),
        "type-id": Field("type_id", read_uuid),
    }
    named = {
        "name": Field("name", read_string),
        "sort-name": Field("sort_name", read_string),
    }
    rated = {
        "rating": Field("rating", RATING.read),
        "user-rating": Field("user_rating", USER_RATING.read),
    }
    identified = {
        "ipis": Field("ipis", list_of(read_string)),
        "isnis": Field("isnis", list_of(read_string)),
    }
    life_span = {"life-span": Field("life_span", LIFE_SPAN.read)}
    area = registry.delegate("area")
    credited = {"artist-credit": Field("artist_credit", list_of(name_credit_reader(registry).read))}
    releases = {"releases": Field("releases", list_of(registry.delegate("release")))}

    registry.register(
        ObjectReader(
            "area",
            Area,
            {
                **common,
                **typed,
                **named,
                **life_span,
                "iso-3166-1-codes": Field("iso_3166_1_codes", list_of(read_string)),
                "iso-3166-2-codes": Field("iso_3166_2_codes", list_of(read_string)),
                "iso-3166-3-codes": Field("iso_3166_3_codes", list_of(read_string)),
            },
        )
    )

    registry.register(
        ObjectReader(
            "artist",
            Artist,
            {
                **common,
                **typed,
                **named,
                **rated,
                **identified,
                **life_span,
                "gender": Field("gender", enum_of(Gender)),
                "gender-id": Field("gender_id", read_uuid),
                "country": Field("country", read_string),
                "area": Field("area", area),
                "begin-area": Field("begin_area", area),
                "end-area": Field("end_area", area),
                **releases,
                "works": Field("works", list_of(registry.delegate("work"))),
            },
        )
    )

    registry.register(
        ObjectReader(
            "event",
            Event,
            {
                **common,
                **typed,
                **rated,
                **life_span,
                "name": Field("name", read_string),
                "cancelled": Field("cancelled", read_bool),
                "time": Field("time", read_string),
                "setlist": Field("setlist", read_string),
            },
        )
    )

    registry.register(
        ObjectReader(
            "label",
            Label,
            {
                **common,
                **typed,
                **named,
                **rated,
                **identified,
                **life_span,
                "label-code": Field("label_code", read_int),
                "country": Field("country", read_string),
                "area": Field("area", area),
                **releases,
            },
        )
    )

    registry.register(
        ObjectReader(
            "recording",
            Recording,
            {
                **common,
                **rated,
                **credited,
                **releases,
                "title": Field("title", read_string),
                "length": Field("length", read_int),
                "video": Field("video", read_bool),
                "first-release-date": Field("first_release_date", read_partial_date),
                "isrcs": Field("isrcs", list_of(read_string)),
            },
        )
    )

    registry.register(
        ObjectReader(
            "release",
            Release,
            {
                **common,
                "title": Field("title", read_string),
                "status": Field("status", enum_of(ReleaseStatus)),
                "status-id": Field("status_id", read_uuid),
                "quality": Field("quality", enum_of(ReleaseQuality)),
                "packaging": Field("packaging", read_string),
                "packaging-id": Field("packaging_id", read_uuid),
                "barcode": Field("barcode", read_string),
                "asin": Field("asin", read_string),
                "date": Field("date", read_partial_date),
                "country": Field("country", read_string),
                **credited,
                "label-info": Field("label_info", list_of(label_info_reader(registry).read)),
                "release-group": Field("release_group", registry.delegate("release-group")),
                "media": Field("media", list_of(medium_reader(registry).read)),
            },
        )
    )

    registry.register(
        ObjectReader(
            "release-group",
            ReleaseGroup,
            {
                **common,
                **rated,
                **credited,
                **releases,
                "title": Field("title", read_string),
                "primary-type": Field("primary_type", read_string),
                "primary-type-id": Field("primary_type_id", read_uuid),
                "secondary-types": Field("secondary_types", list_of(read_string)),
                "secondary-type-ids": Field("secondary_type_ids", list_of(read_uuid)),
                "first-release-date": Field("first_release_date", read_partial_date),
            },
        )
    )

    registry.register(
        ObjectReader(
            "series",
            Series,
            {**common, **typed, "name": Field("name", read_string)},
        )
    )

    registry.register(
        ObjectReader(
            "url",
            Url,
            {
                "id": common["id"],
                "resource": Field("resource", read_string),
                "relations": common["relations"],
                "score": common["score"],
            },
        )
    )

    registry.register(
        ObjectReader(
            "work",
            Work,
            {
                **common,
                **typed,
                **rated,
                "title": Field("title", read_string),
                "iswcs": Field("iswcs", list_of(read_string)),
                "language": Field("language", read_string),
                "languages": Field("languages", list_of(read_string)),
                "attributes": Field("attributes", list_of(WORK_ATTRIBUTE.read)),
            },
        )
    )

    for kind in PLURALS:
        registry.register(list_reader(kind, registry.delegate(kind)))

    return registry


DEFAULT_REGISTRY: Final[EntityReaderRegistry] = build_registry()


__all__ = [
    "DEFAULT_REGISTRY",
    "PLURALS",
    "build_registry",
    "list_reader",
]
