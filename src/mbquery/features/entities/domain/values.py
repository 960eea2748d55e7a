"""
Summary: Scalar value types shared by the MusicBrainz entity model.
Why: Keep weakly-typed, partial-date and enumerated values in one place.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum
from typing import Final, TypeAlias, TypeVar

# Tagged union used for properties no reader models (yet).
WeakValue: TypeAlias = (
    None | bool | int | float | str | list["WeakValue"] | dict[str, "WeakValue"]
)

UnhandledProperties: TypeAlias = dict[str, WeakValue]


class Gender(StrEnum):
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"
    NON_BINARY = "Non-binary"
    NOT_APPLICABLE = "Not applicable"


class ReleaseStatus(StrEnum):
    OFFICIAL = "Official"
    PROMOTION = "Promotion"
    BOOTLEG = "Bootleg"
    PSEUDO_RELEASE = "Pseudo-Release"
    WITHDRAWN = "Withdrawn"
    CANCELLED = "Cancelled"


class ReleaseQuality(StrEnum):
    """Data quality rating of a release."""

    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"


class Direction(StrEnum):
    """Direction of a relationship as seen from the entity that owns it."""

    FORWARD = "forward"
    BACKWARD = "backward"


E = TypeVar("E", bound=StrEnum)


def coerce_enum(enum_type: type[E], text: str) -> E | str:
    """Map ``text`` to a member of ``enum_type``, case-insensitively.

    Values the enumeration does not know are returned unchanged so that new
    vocabulary introduced by the service survives decoding.
    """

    folded = text.strip().casefold()
    for member in enum_type:
        if member.value.casefold() == folded:
            return member
    return text


_PARTIAL_DATE: Final[re.Pattern[str]] = re.compile(
    r"^(?P<year>\d{4}|\?{4})(?:-(?P<month>\d{2}|\?\?)(?:-(?P<day>\d{2}|\?\?))?)?$"
)


def _part(text: str | None) -> int | None:
    if text is None or not text.isdigit():
        return None
    return int(text)


@dataclass(frozen=True, slots=True)
class PartialDate:
    """A date where the month and day (or everything) may be unknown.

    MusicBrainz writes these as ``YYYY``, ``YYYY-MM`` or ``YYYY-MM-DD``;
    unknown leading parts appear as question marks. Text that does not
    follow the pattern is kept in ``text`` with every part set to ``None``.
    """

    text: str
    year: int | None = None
    month: int | None = None
    day: int | None = None

    @classmethod
    def parse(cls, text: str) -> PartialDate:
        match = _PARTIAL_DATE.match(text.strip())
        if match is None:
            return cls(text=text)
        return cls(
            text=text,
            year=_part(match.group("year")),
            month=_part(match.group("month")),
            day=_part(match.group("day")),
        )

    @property
    def is_empty(self) -> bool:
        return self.year is None and self.month is None and self.day is None

    def __str__(self) -> str:
        return self.text


__all__ = [
    "Direction",
    "Gender",
    "PartialDate",
    "ReleaseQuality",
    "ReleaseStatus",
    "UnhandledProperties",
    "WeakValue",
    "coerce_enum",
]
