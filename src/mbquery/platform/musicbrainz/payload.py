"""Where: src/mbquery/platform/musicbrainz/payload.py
What: Payload formats understood by WS2 and the parsing of its error bodies.
Why: Both the transport (Accept header, error detection) and the decoder
     (format dispatch) need the same notion of format.
"""

from __future__ import annotations

import json
import xml.etree.ElementTree as ElementTree
from enum import StrEnum
from typing import Any

from mbquery.platform.logging import logger


class PayloadFormat(StrEnum):
    """Serialization formats offered by the web service."""

    JSON = "json"
    XML = "xml"

    @property
    def mime_type(self) -> str:
        return f"application/{self.value}"

    def matches(self, content_type: str | None) -> bool:
        """Return True when a ``Content-Type`` header names this format."""

        return bool(content_type) and content_type.strip().lower().startswith(self.mime_type)


def local_name(tag: str) -> str:
    """Strip an ElementTree ``{namespace}`` prefix."""

    return tag.rsplit("}", 1)[-1]


def read_error_payload(body: bytes, payload_format: PayloadFormat) -> tuple[str, str | None]:
    """Extract ``(message, help)`` from a WS2 error document.

    Falls back to the raw text when the body does not have the expected
    shape; the service does not formally guarantee one.
    """

    text = body.decode("utf-8", errors="replace").strip()
    try:
        if payload_format is PayloadFormat.JSON:
            document: Any = json.loads(text)
            if isinstance(document, dict):
                message = document.get("error")
                help_text = document.get("help")
                if isinstance(message, str):
                    return message, help_text if isinstance(help_text, str) else None
        else:
            root = ElementTree.fromstring(text)
            if local_name(root.tag) == "error":
                lines = [
                    (child.text or "").strip()
                    for child in root
                    if local_name(child.tag) == "text"
                ]
                if lines:
                    return lines[0], "\n".join(lines[1:]) or None
    except (ValueError, ElementTree.ParseError) as exc:
        logger.debug("Unparseable %s error body: %s", payload_format.value, exc)
    return text, None


__all__ = [
    "PayloadFormat",
    "local_name",
    "read_error_payload",
]
