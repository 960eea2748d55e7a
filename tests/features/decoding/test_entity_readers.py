"""
Summary: Decode realistic WS2 JSON payloads into entities and entity lists.
Why: Verify field mapping, forward compatibility and pagination metadata end to end.
"""

from __future__ import annotations

import json
from typing import Any
from uuid import UUID

import pytest

from mbquery.exceptions import DecodeError
from mbquery.features.decoding import ResponseDecoder
from mbquery.features.entities import (
    Area,
    Artist,
    Direction,
    EntityList,
    Gender,
    PartialDate,
    Recording,
    Release,
    ReleaseGroup,
    ReleaseStatus,
    Url,
    Work,
)
from mbquery.platform.musicbrainz import PayloadFormat

NIRVANA_ID = "5b11f4ce-a62d-471e-81fc-a69a8278c7da"
KURT_ID = "5b11f4ce-a62d-471e-81fc-a69a8278c7db"
SEATTLE_ID = "10cb2ebd-1bc7-4c11-b10d-54f60c421d20"
RELEASE_ID = "1b022e01-4da6-387b-8658-8678046e4cef"
GROUP_ID = "1b022e01-4da6-387b-8658-8678046e4ce0"
RECORDING_ID = "fdf2e2a3-6d6d-4b3f-9e1c-6e1f0a9d1a2b"
TRACK_ID = "fdf2e2a3-6d6d-4b3f-9e1c-6e1f0a9d1a2c"

ARTIST_PAYLOAD: dict[str, Any] = {
    "id": NIRVANA_ID,
    "name": "Nirvana",
    "sort-name": "Nirvana",
    "type": "Group",
    "type-id": "e431f5f6-b5d2-343d-8b36-72607fffb74b",
    "disambiguation": "90s US grunge band",
    "country": "US",
    "gender": None,
    "area": {"id": SEATTLE_ID, "name": "Seattle", "sort-name": "Seattle", "iso-3166-2-codes": ["US-WA"]},
    "life-span": {"begin": "1987", "end": "1994-04-05", "ended": True},
    "isnis": ["0000000123486830"],
    "aliases": [{"name": "Nirvana US", "sort-name": "Nirvana US", "locale": None, "primary": None, "type": None}],
    "tags": [{"name": "grunge", "count": 42}],
    "rating": {"value": 4.6, "votes-count": 120},
    "relations": [
        {
            "type": "member of band",
            "type-id": "5be4c609-9afa-4ea0-910b-12ffb71e3821",
            "target-type": "artist",
            "direction": "backward",
            "begin": "1987",
            "ended": True,
            "attributes": ["guitar", "lead vocals"],
            "attribute-ids": {"guitar": "63021302-86cd-4aee-80df-2270d54f4978"},
            "attribute-values": {},
            "artist": {"id": KURT_ID, "name": "Kurt Cobain", "sort-name": "Cobain, Kurt", "gender": "male"},
        },
        {
            "type": "wikidata",
            "target-type": "url",
            "direction": "forward",
            "url": {"id": "9d2a2ff9-2a3b-4f3b-8a0b-0f0f0f0f0f0f", "resource": "https://www.wikidata.org/wiki/Q11649"},
        },
    ],
}


def _decode(payload: Any, shape: str) -> Any:
    return ResponseDecoder().decode(json.dumps(payload).encode(), PayloadFormat.JSON, shape)


class TestArtist:
    def test_known_fields_are_typed(self) -> None:
        artist = _decode(ARTIST_PAYLOAD, "artist")

        assert isinstance(artist, Artist)
        assert artist.id == UUID(NIRVANA_ID)
        assert artist.name == "Nirvana"
        assert artist.gender is None
        assert isinstance(artist.area, Area) and artist.area.iso_3166_2_codes == ["US-WA"]
        assert artist.life_span is not None
        assert artist.life_span.begin == PartialDate(text="1987", year=1987)
        assert artist.life_span.end is not None and artist.life_span.end.day == 5
        assert artist.life_span.ended is True
        assert artist.aliases is not None and artist.aliases[0].name == "Nirvana US"
        assert artist.tags is not None and str(artist.tags[0]) == "grunge (42)"
        assert artist.rating is not None and artist.rating.votes_count == 120
        assert str(artist) == "Nirvana (90s US grunge band) (Group)"

    def test_unknown_property_is_preserved(self) -> None:
        artist = _decode({**ARTIST_PAYLOAD, "foo": 42}, "artist")

        assert artist.unhandled_properties == {"foo": 42}

    def test_relationship_targets_are_decoded_by_kind(self) -> None:
        artist = _decode(ARTIST_PAYLOAD, "artist")

        assert artist.relationships is not None
        member, wikidata = artist.relationships
        assert member.direction is Direction.BACKWARD
        assert member.attributes == ["guitar", "lead vocals"]
        assert member.attribute_ids == {"guitar": UUID("63021302-86cd-4aee-80df-2270d54f4978")}
        assert isinstance(member.target, Artist)
        assert member.target.gender is Gender.MALE
        assert member.begin == PartialDate(text="1987", year=1987)
        assert isinstance(wikidata.target, Url)
        assert wikidata.target.resource == "https://www.wikidata.org/wiki/Q11649"
        assert wikidata.unhandled_properties == {}

    def test_relationship_to_unreadable_kind_stays_weakly_typed(self) -> None:
        relation = {"type": "main instrument", "target-type": "instrument", "instrument": {"id": KURT_ID}}

        artist = _decode({**ARTIST_PAYLOAD, "relations": [relation]}, "artist")

        assert artist.relationships is not None
        assert artist.relationships[0].target is None
        assert artist.relationships[0].unhandled_properties == {"instrument": {"id": KURT_ID}}

    def test_decoding_is_deterministic(self) -> None:
        assert _decode(ARTIST_PAYLOAD, "artist") == _decode(ARTIST_PAYLOAD, "artist")

    def test_missing_id_is_rejected(self) -> None:
        payload = {key: value for key, value in ARTIST_PAYLOAD.items() if key != "id"}

        with pytest.raises(DecodeError, match="Expected property 'id' not found or null."):
            _ = _decode(payload, "artist")

    def test_relationship_without_target_type_reports_its_position(self) -> None:
        relation = {key: value for key, value in ARTIST_PAYLOAD["relations"][0].items() if key != "target-type"}

        with pytest.raises(DecodeError) as excinfo:
            _ = _decode({**ARTIST_PAYLOAD, "relations": [relation]}, "artist")

        assert excinfo.value.location == "relations[0]"

    def test_bad_nested_value_reports_full_path(self) -> None:
        relation = {**ARTIST_PAYLOAD["relations"][0], "artist": {"id": "not-a-uuid"}}

        with pytest.raises(DecodeError) as excinfo:
            _ = _decode({**ARTIST_PAYLOAD, "relations": [relation]}, "artist")

        assert excinfo.value.location == "relations[0].artist.id"


class TestRelease:
    def test_release_fields(self) -> None:
        payload = {
            "id": RELEASE_ID,
            "title": "Nevermind",
            "status": "Official",
            "quality": "normal",
            "date": "1991-09-24",
            "barcode": "720642442524",
            "artist-credit": [
                {"name": "Nirvana", "joinphrase": " & ", "artist": {"id": NIRVANA_ID, "name": "Nirvana"}},
                {"name": "Friends", "joinphrase": "", "artist": {"id": KURT_ID, "name": "Friends"}},
            ],
            "label-info": [
                {"catalog-number": "DGC-24425", "label": {"id": SEATTLE_ID, "name": "DGC", "label-code": 7461}},
                {"catalog-number": "[none]", "label": None},
            ],
        }

        release = _decode(payload, "release")

        assert isinstance(release, Release)
        assert release.status is ReleaseStatus.OFFICIAL
        assert release.date is not None and (release.date.year, release.date.month) == (1991, 9)
        assert release.artist_credit_text == "Nirvana & Friends"
        assert release.label_info is not None
        assert release.label_info[0].label is not None and release.label_info[0].label.label_code == 7461
        assert release.label_info[1].label is None

    def test_release_group_and_media_are_typed(self) -> None:
        payload = {
            "id": RELEASE_ID,
            "title": "Nevermind",
            "release-group": {
                "id": GROUP_ID,
                "title": "Nevermind",
                "primary-type": "Album",
                "secondary-types": [],
                "first-release-date": "1991-09-24",
            },
            "media": [
                {
                    "position": 1,
                    "format": "CD",
                    "track-count": 13,
                    "track-offset": 0,
                    "tracks": [
                        {
                            "id": TRACK_ID,
                            "number": "1",
                            "position": 1,
                            "title": "Smells Like Teen Spirit",
                            "length": 301920,
                            "recording": {"id": RECORDING_ID, "title": "Smells Like Teen Spirit", "video": False},
                        }
                    ],
                    "discs": [],
                }
            ],
        }

        release = _decode(payload, "release")

        assert isinstance(release.release_group, ReleaseGroup)
        assert release.release_group.primary_type == "Album"
        assert release.release_group.secondary_types == []
        assert release.release_group.first_release_date == PartialDate(text="1991-09-24", year=1991, month=9, day=24)
        assert release.media is not None and release.track_count == 13
        medium = release.media[0]
        assert medium.format == "CD"
        assert medium.unhandled_properties == {"discs": []}
        track = medium.tracks[0]
        assert (track.number, track.length) == ("1", 301920)
        assert isinstance(track.recording, Recording) and track.recording.video is False

    def test_relationship_to_release_group_uses_underscored_kind(self) -> None:
        recording = {
            "id": RECORDING_ID,
            "relations": [
                {
                    "type": "single from",
                    "target-type": "release_group",
                    "release_group": {"id": GROUP_ID, "title": "Nevermind"},
                }
            ],
        }

        result = _decode(recording, "recording")

        assert isinstance(result, Recording) and result.relationships is not None
        assert isinstance(result.relationships[0].target, ReleaseGroup)

    def test_unknown_enumeration_value_is_kept_as_text(self) -> None:
        release = _decode({"id": RELEASE_ID, "status": "Expunged"}, "release")

        assert release.status == "Expunged"
        assert not isinstance(release.status, ReleaseStatus)


class TestLists:
    def test_search_results_carry_count_offset_and_score(self) -> None:
        payload = {
            "created": "2024-01-01T00:00:00.000Z",
            "count": 2,
            "offset": 0,
            "artists": [
                {"id": NIRVANA_ID, "name": "Nirvana", "score": 100},
                {"id": KURT_ID, "name": "Nirvana (UK)", "score": "87"},
            ],
        }

        result = _decode(payload, "artist-list")

        assert isinstance(result, EntityList)
        assert result.kind == "artist"
        assert (result.count, result.offset) == (2, 0)
        assert [artist.score for artist in result] == [100, 87]
        assert result.created == "2024-01-01T00:00:00.000Z"
        assert not result.is_complete
        assert result.next_offset is None

    def test_browse_results_use_kind_specific_counters(self) -> None:
        payload = {
            "release-count": 30,
            "release-offset": 25,
            "releases": [{"id": RELEASE_ID, "title": "Nevermind"}],
        }

        result = _decode(payload, "release-list")

        assert (result.count, result.offset) == (30, 25)
        assert result.next_offset == 26

    def test_unpaged_list_is_complete(self) -> None:
        result = _decode({"works": [{"id": RELEASE_ID, "title": "Smells Like Teen Spirit"}]}, "work-list")

        assert result.is_complete
        assert isinstance(result.items[0], Work)
        assert len(result) == 1

    def test_list_without_items_property_is_rejected(self) -> None:
        with pytest.raises(DecodeError, match="'works'"):
            _ = _decode({"count": 0}, "work-list")
