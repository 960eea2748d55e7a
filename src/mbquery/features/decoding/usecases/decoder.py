"""
Summary: Turn raw WS2 response bodies into typed entities or entity lists.
Why: Keep format parsing and reader dispatch behind one call used by the query facade.
"""

from __future__ import annotations

import json
from typing import Any

from mbquery.exceptions import DecodeError
from mbquery.features.entities.domain import EntityList
from mbquery.platform.logging import logger
from mbquery.platform.musicbrainz.payload import PayloadFormat

from ..adapters.xml_payload import parse_document
from .entity_readers import DEFAULT_REGISTRY
from .framework import EntityReaderRegistry


class ResponseDecoder:
    """Dispatch a payload to the registry entry for the requested shape."""

    def __init__(self, registry: EntityReaderRegistry | None = None) -> None:
        self.registry: EntityReaderRegistry = registry or DEFAULT_REGISTRY

    def decode(self, body: bytes, payload_format: PayloadFormat, shape: str) -> Any:
        """Decode ``body`` as the root ``shape`` (``"artist"``, ``"work-list"``, ...).

        Raises:
            DecodeError: The payload is malformed, lacks the requested root,
                or one of its properties could not be read.
        """

        reader = self.registry.reader_for(shape)
        root = self._root(body, payload_format, shape)
        try:
            return reader.read(root)
        except DecodeError as exc:
            logger.warning("Failed to decode %s payload: %s", shape, exc)
            raise

    def decode_entity(self, body: bytes, payload_format: PayloadFormat, kind: str) -> Any:
        return self.decode(body, payload_format, kind)

    def decode_list(self, body: bytes, payload_format: PayloadFormat, kind: str) -> EntityList[Any]:
        return self.decode(body, payload_format, f"{kind}-list")

    @staticmethod
    def _root(body: bytes, payload_format: PayloadFormat, shape: str) -> Any:
        if payload_format is PayloadFormat.JSON:
            try:
                return json.loads(body)
            except ValueError as exc:
                raise DecodeError(f"Malformed JSON payload: {exc}") from exc

        document = parse_document(body)
        if shape not in document:
            raise DecodeError(f"Expected element '{shape}' not found in the XML payload.")
        return document[shape]


__all__ = ["ResponseDecoder"]
