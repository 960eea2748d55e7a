"""
Summary: Map WS2 XML documents onto the property layout of WS2 JSON.
Why: One set of readers serves both formats when XML arrives as the same name/value tree.

The XML schema differs from JSON in a few systematic ways, each handled here:

- ``<x-list>`` containers become an array under the JSON plural (``aliases``,
  ``iswcs``); ``relation-list`` containers are merged into one ``relations``
  array with ``target-type`` copied onto every relationship.
- text content of an element that also carries attributes or children goes
  under ``name`` (aliases) or ``value`` (ratings, work attributes).
- ``<status id="...">Official</status>`` becomes ``status`` plus ``status-id``.
- relationship ``<attribute type-id="...">guitar</attribute>`` entries become
  ``attributes`` plus the ``attribute-ids``/``attribute-values``/
  ``attribute-credits`` dictionaries.
- namespaced attributes (``ext:score``) lose their namespace.
"""

from __future__ import annotations

import xml.etree.ElementTree as ElementTree
from typing import Any, Final

from mbquery.exceptions import DecodeError
from mbquery.platform.musicbrainz.payload import local_name

_LIST_SUFFIX: Final[str] = "-list"

# Container names whose JSON plural is not "<item>s" (or "<item>es" after an s).
_PLURALS: Final[dict[str, str]] = {
    "label-info-list": "label-info",
    "medium-list": "media",
    "release-event-list": "release-events",
    "series-list": "series",
}

# Containers that are arrays without the "-list" suffix.
_ARRAY_ELEMENTS: Final[frozenset[str]] = frozenset({"artist-credit"})

_TEXT_PROPERTIES: Final[dict[str, str]] = {"alias": "name"}

_ATTRIBUTE_RENAMES: Final[dict[str, str]] = {"begin-date": "begin", "end-date": "end"}

# Elements that are objects in JSON even when the XML carries only text.
_ALWAYS_OBJECTS: Final[frozenset[str]] = frozenset({"rating", "user-rating"})

# Elements whose single child holds the JSON value.
_UNWRAP: Final[dict[str, str]] = {"annotation": "text"}

_RELATION_ATTRIBUTE_MAPS: Final[dict[str, str]] = {
    "type-id": "attribute-ids",
    "value": "attribute-values",
    "credited-as": "attribute-credits",
}


def list_property(container: str) -> str:
    """Return the JSON property name for an XML ``<x-list>`` container."""

    if container in _PLURALS:
        return _PLURALS[container]
    stem = container.removesuffix(_LIST_SUFFIX)
    return stem + ("es" if stem.endswith("s") else "s")


def _is_list(name: str) -> bool:
    return name.endswith(_LIST_SUFFIX) or name in _ARRAY_ELEMENTS


def _text(element: ElementTree.Element) -> str:
    return (element.text or "").strip()


def convert_list(container: ElementTree.Element) -> dict[str, Any]:
    """Convert a root-level ``<x-list>`` into a JSON list payload."""

    name = local_name(container.tag)
    result: dict[str, Any] = {}
    for key, value in container.attrib.items():
        result[local_name(key)] = value
    result[list_property(name)] = [convert_element(child) for child in container]
    return result


def _relation_attributes(container: ElementTree.Element, target: dict[str, Any]) -> None:
    names: list[str] = []
    for attribute in container:
        text = _text(attribute)
        names.append(text)
        for key, value in attribute.attrib.items():
            mapping = _RELATION_ATTRIBUTE_MAPS.get(local_name(key))
            if mapping is not None:
                target.setdefault(mapping, {})[text] = value
    target["attributes"] = names


def convert_element(element: ElementTree.Element) -> Any:
    """Convert one element into a string (leaf) or an ordered mapping."""

    name = local_name(element.tag)
    children = list(element)

    if name in _UNWRAP:
        wanted = _UNWRAP[name]
        for child in children:
            if local_name(child.tag) == wanted:
                return _text(child)

    if not element.attrib and not children and name not in _ALWAYS_OBJECTS:
        return _text(element)

    result: dict[str, Any] = {}
    repeated: set[str] = set()

    def put(key: str, value: Any) -> None:
        # Repeated child elements become an array.
        if key not in result:
            result[key] = value
        elif key in repeated:
            result[key].append(value)
        else:
            result[key] = [result[key], value]
            repeated.add(key)

    for key, value in element.attrib.items():
        attribute = local_name(key)
        result[_ATTRIBUTE_RENAMES.get(attribute, attribute)] = value

    text = _text(element)
    if text:
        result[_TEXT_PROPERTIES.get(name, "value")] = text

    for child in children:
        child_name = local_name(child.tag)
        if child_name == "relation-list":
            target_type = child.get("target-type")
            relations = result.setdefault("relations", [])
            for relation in child:
                converted = convert_element(relation)
                if isinstance(converted, dict) and target_type is not None:
                    converted.setdefault("target-type", target_type)
                relations.append(converted)
        elif child_name == "attribute-list" and name == "relation":
            _relation_attributes(child, result)
        elif _is_list(child_name):
            prop = list_property(child_name) if child_name.endswith(_LIST_SUFFIX) else child_name
            result[prop] = [convert_element(item) for item in child]
            # <track-list count="12" offset="0"> becomes track-count/track-offset.
            stem = child_name.removesuffix(_LIST_SUFFIX)
            for key, value in child.attrib.items():
                result[f"{stem}-{local_name(key)}"] = value
        elif set(child.attrib) == {"id"} and not list(child) and _text(child):
            put(child_name, _text(child))
            result[f"{child_name}-id"] = child.attrib["id"]
        else:
            put(child_name, convert_element(child))

    return result


def parse_document(body: bytes) -> dict[str, Any]:
    """Parse a ``<metadata>`` document into ``{element name: value}``.

    Root-level lists are converted with :func:`convert_list`; the document's
    ``created`` attribute is copied onto each of them.
    """

    try:
        root = ElementTree.fromstring(body)
    except ElementTree.ParseError as exc:
        raise DecodeError(f"Malformed XML payload: {exc}") from exc

    if local_name(root.tag) != "metadata":
        raise DecodeError(f"Expected a 'metadata' root element, found '{local_name(root.tag)}'.")

    document: dict[str, Any] = {}
    created = root.get("created")
    for child in root:
        name = local_name(child.tag)
        if name.endswith(_LIST_SUFFIX):
            converted = convert_list(child)
            if created is not None:
                converted.setdefault("created", created)
            document[name] = converted
        else:
            document[name] = convert_element(child)
    return document


__all__ = [
    "convert_element",
    "convert_list",
    "list_property",
    "parse_document",
]
