"""
Summary: Tests for entity value types, display strings and list paging.
Why: Callers rely on partial dates, permissive enums and page arithmetic directly.
"""

from __future__ import annotations

from uuid import uuid4

import pytest

from mbquery.features.entities import (
    Artist,
    EntityList,
    Gender,
    Label,
    LabelInfo,
    LifeSpan,
    PartialDate,
    Relationship,
    ReleaseQuality,
)
from mbquery.features.entities.domain.values import coerce_enum


@pytest.mark.parametrize(
    ("text", "parts"),
    [
        ("1991", (1991, None, None)),
        ("1991-09", (1991, 9, None)),
        ("1991-09-24", (1991, 9, 24)),
        ("????-09-24", (None, 9, 24)),
        ("sometime", (None, None, None)),
    ],
)
def test_partial_date_parse(text: str, parts: tuple[int | None, ...]) -> None:
    date = PartialDate.parse(text)

    assert (date.year, date.month, date.day) == parts
    assert str(date) == text


def test_partial_date_is_empty_only_without_parts() -> None:
    assert PartialDate.parse("garbage").is_empty
    assert not PartialDate.parse("2001").is_empty


def test_coerce_enum_is_case_insensitive_and_permissive() -> None:
    assert coerce_enum(Gender, "NON-BINARY") is Gender.NON_BINARY
    assert coerce_enum(ReleaseQuality, "high") is ReleaseQuality.HIGH
    assert coerce_enum(Gender, "Unknown") == "Unknown"


def test_life_span_is_empty() -> None:
    assert LifeSpan().is_empty
    assert not LifeSpan(ended=True).is_empty


def test_display_strings() -> None:
    artist = Artist(id=uuid4(), name="Nirvana", score=100, type="Group")
    label = Label(id=uuid4(), name="DGC")

    assert str(artist) == "[Score: 100] Nirvana (Group)"
    assert str(Relationship(target_type="artist", type="member of band", target=artist)) == (
        "member of band -> [Score: 100] Nirvana (Group)"
    )
    assert str(LabelInfo(catalog_number="DGC-24425", label=label)) == "DGC: DGC-24425"
    assert str(LabelInfo(catalog_number="DGC-24425")) == "DGC-24425"


class TestEntityListPaging:
    def test_next_offset_advances_by_page_size(self) -> None:
        page = EntityList(kind="artist", items=["a", "b"], count=5, offset=2)

        assert page.next_offset == 4
        assert list(page) == ["a", "b"]

    def test_last_page_has_no_next_offset(self) -> None:
        page = EntityList(kind="artist", items=["a"], count=5, offset=4)

        assert page.next_offset is None

    def test_empty_page_stops_paging(self) -> None:
        page = EntityList(kind="artist", items=[], count=5, offset=0)

        assert page.next_offset is None
        assert not page.is_complete

    def test_list_without_counters_is_complete(self) -> None:
        page = EntityList(kind="work", items=["w"])

        assert page.is_complete
        assert page.next_offset is None
