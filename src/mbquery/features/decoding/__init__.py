# Where: mbquery.features.decoding.__init__
# What: Expose the response decoder and the reader registry machinery.
# Why: Provide a cohesive import surface for the query facade and extensions.

from .adapters.xml_payload import parse_document
from .usecases.decoder import ResponseDecoder
from .usecases.entity_readers import DEFAULT_REGISTRY, build_registry, list_reader
from .usecases.framework import (
    EntityReaderRegistry,
    Field,
    ObjectReader,
    list_of,
    read_weak_value,
)

__all__ = [
    "DEFAULT_REGISTRY",
    "EntityReaderRegistry",
    "Field",
    "ObjectReader",
    "ResponseDecoder",
    "build_registry",
    "list_of",
    "list_reader",
    "parse_document",
    "read_weak_value",
]
