"""
Summary: Declarative per-shape object readers and the registry that dispatches them.
Why: Every WS2 shape shares one reading loop, one unknown-field policy and one error policy.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Final, Generic, TypeVar
from uuid import UUID

from mbquery.exceptions import DecodeError
from mbquery.features.entities.domain import PartialDate, WeakValue, coerce_enum

T = TypeVar("T")
E = TypeVar("E", bound=StrEnum)

PropertyStream = Iterator[tuple[str, Any]]
ValueReader = Callable[[Any], Any]

_TRUE_WORDS: Final[frozenset[str]] = frozenset({"true", "1", "yes", "y", "t", "primary"})
_FALSE_WORDS: Final[frozenset[str]] = frozenset({"false", "0", "no", "n", "f", ""})


def _type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, list):
        return "array"
    return type(value).__name__


# Scalar readers -------------------------------------------------------------
#
# JSON payloads carry typed scalars; XML payloads carry text. Every reader
# accepts both forms.


def read_string(value: Any) -> str:
    if not isinstance(value, str):
        raise DecodeError(f"Expected a string, found {_type_name(value)}.")
    return value


def read_int(value: Any) -> int:
    if isinstance(value, bool):
        raise DecodeError("Expected an integer, found bool.")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as exc:
            raise DecodeError(f"Expected an integer, found '{value}'.") from exc
    raise DecodeError(f"Expected an integer, found {_type_name(value)}.")


def read_float(value: Any) -> float:
    if isinstance(value, bool):
        raise DecodeError("Expected a number, found bool.")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError as exc:
            raise DecodeError(f"Expected a number, found '{value}'.") from exc
    raise DecodeError(f"Expected a number, found {_type_name(value)}.")


def read_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        folded = value.strip().lower()
        if folded in _TRUE_WORDS:
            return True
        if folded in _FALSE_WORDS:
            return False
    raise DecodeError(f"Expected a boolean, found {value!r}.")


def read_uuid(value: Any) -> UUID:
    text = read_string(value)
    try:
        return UUID(text)
    except ValueError as exc:
        raise DecodeError(f"Expected a UUID, found '{text}'.") from exc


def read_partial_date(value: Any) -> PartialDate:
    return PartialDate.parse(read_string(value))


def enum_of(enum_type: type[E]) -> Callable[[Any], E | str]:
    """Read a member of ``enum_type``, keeping unknown text as-is."""

    def read(value: Any) -> E | str:
        return coerce_enum(enum_type, read_string(value))

    return read


def read_weak_value(value: Any) -> WeakValue:
    """Copy a decoded payload value into the weakly-typed union.

    Objects keep their property order; anything that is not a scalar, list
    or string-keyed mapping is rejected.
    """

    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, list):
        return [read_weak_value(item) for item in value]
    if isinstance(value, Mapping):
        return {str(key): read_weak_value(item) for key, item in value.items()}
    raise DecodeError(f"Unsupported value of type {type(value).__name__}.")


# Composite readers ----------------------------------------------------------


def _guarded(segment: str, reader: ValueReader, value: Any) -> Any:
    try:
        return reader(value)
    except DecodeError as exc:
        raise exc.within(segment) from exc
    except Exception as exc:
        raise DecodeError(str(exc) or type(exc).__name__, (segment,)) from exc


def list_of(reader: ValueReader) -> Callable[[Any], list[Any]]:
    """Read a homogeneous array, delegating each element to ``reader``."""

    def read(value: Any) -> list[Any]:
        if not isinstance(value, list):
            raise DecodeError(f"Expected an array, found {_type_name(value)}.")
        return [
            None if item is None else _guarded(f"[{index}]", reader, item)
            for index, item in enumerate(value)
        ]

    return read


def dict_of(reader: ValueReader) -> Callable[[Any], dict[str, Any]]:
    """Read an object used as a string-keyed dictionary."""

    def read(value: Any) -> dict[str, Any]:
        if not isinstance(value, Mapping):
            raise DecodeError(f"Expected an object, found {_type_name(value)}.")
        return {
            str(key): None if item is None else _guarded(str(key), reader, item)
            for key, item in value.items()
        }

    return read


@dataclass(frozen=True, slots=True)
class Field:
    """Where a known property goes and how its value is read."""

    attribute: str
    read: ValueReader


FieldResolver = Callable[[str], Field | None]


class ObjectReader(Generic[T]):
    """Read one object shape from a stream of ``(name, value)`` pairs.

    Known properties are converted by their ``Field``; every other property
    is kept, weakly typed, in the result's ``unhandled_properties``. When
    ``required`` names a property, a payload without it (or with ``null``)
    is rejected.
    """

    def __init__(
        self,
        shape: str,
        factory: Callable[..., T],
        fields: Mapping[str, Field],
        *,
        required: str | None = "id",
        resolver: FieldResolver | None = None,
    ) -> None:
        if required is not None and required not in fields:
            raise ValueError(f"Required property '{required}' of '{shape}' has no field.")
        self.shape: str = shape
        self.required: str | None = required
        self._factory: Callable[..., T] = factory
        self._fields: dict[str, Field] = dict(fields)
        self._resolver: FieldResolver | None = resolver

    @property
    def known_properties(self) -> frozenset[str]:
        return frozenset(self._fields)

    def field_for(self, name: str) -> Field | None:
        known = self._fields.get(name)
        if known is not None or self._resolver is None:
            return known
        return self._resolver(name)

    def read(self, value: Any) -> T:
        """Read a decoded object (a mapping) of this shape."""

        if not isinstance(value, Mapping):
            raise DecodeError(f"Expected an object for '{self.shape}', found {_type_name(value)}.")
        return self.read_contents(iter(value.items()))

    def read_contents(self, stream: PropertyStream) -> T:
        """Consume ``stream`` up to its end and build the object."""

        values: dict[str, Any] = {}
        rest: dict[str, WeakValue] = {}
        for name, raw in stream:
            field = self.field_for(name)
            if field is None:
                rest[name] = _guarded(name, read_weak_value, raw)
            elif raw is None:
                values.setdefault(field.attribute, None)
            else:
                values[field.attribute] = _guarded(name, field.read, raw)

        if self.required is not None:
            attribute = self._fields[self.required].attribute
            if values.get(attribute) is None:
                raise DecodeError(f"Expected property '{self.required}' not found or null.")

        return self._factory(**values, unhandled_properties=rest)


class EntityReaderRegistry:
    """Readers keyed by the entity kind (or ``<kind>-list``) they decode."""

    def __init__(self) -> None:
        self._readers: dict[str, ObjectReader[Any]] = {}

    def register(self, reader: ObjectReader[T]) -> ObjectReader[T]:
        self._readers[reader.shape] = reader
        return reader

    def __contains__(self, kind: object) -> bool:
        return kind in self._readers

    def kinds(self) -> list[str]:
        return sorted(self._readers)

    def reader_for(self, kind: str) -> ObjectReader[Any]:
        try:
            return self._readers[kind]
        except KeyError:
            raise DecodeError(f"No reader registered for '{kind}'.") from None

    def delegate(self, kind: str) -> ValueReader:
        """Return a value reader resolving ``kind`` at read time.

        Late binding lets shapes refer to each other (an artist's
        relationships may point at artists).
        """

        def read(value: Any) -> Any:
            return self.reader_for(kind).read(value)

        return read


__all__ = [
    "EntityReaderRegistry",
    "Field",
    "FieldResolver",
    "ObjectReader",
    "PropertyStream",
    "ValueReader",
    "dict_of",
    "enum_of",
    "list_of",
    "read_bool",
    "read_float",
    "read_int",
    "read_partial_date",
    "read_string",
    "read_uuid",
    "read_weak_value",
]
