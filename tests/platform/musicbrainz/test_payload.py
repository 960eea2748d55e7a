from __future__ import annotations

import pytest

from mbquery.platform.musicbrainz import PayloadFormat, read_error_payload


@pytest.mark.parametrize(
    ("fmt", "content_type", "expected"),
    [
        (PayloadFormat.JSON, "application/json; charset=utf-8", True),
        (PayloadFormat.JSON, "Application/JSON", True),
        (PayloadFormat.JSON, "text/html", False),
        (PayloadFormat.XML, "application/xml", True),
        (PayloadFormat.XML, None, False),
    ],
)
def test_matches_content_type_prefix(fmt: PayloadFormat, content_type: str | None, expected: bool) -> None:
    assert fmt.matches(content_type) is expected


def test_read_json_error_payload() -> None:
    body = b'{"error": "Your requests are exceeding the allowable rate limit.", "help": "See rate limiting."}'

    message, help_text = read_error_payload(body, PayloadFormat.JSON)

    assert message == "Your requests are exceeding the allowable rate limit."
    assert help_text == "See rate limiting."


def test_read_xml_error_payload_splits_message_and_help() -> None:
    body = b"<error><text>Not Found</text><text>For usage, please see:</text><text>https://musicbrainz.org/development/mmd</text></error>"

    message, help_text = read_error_payload(body, PayloadFormat.XML)

    assert message == "Not Found"
    assert help_text == "For usage, please see:\nhttps://musicbrainz.org/development/mmd"


def test_unexpected_error_body_falls_back_to_text() -> None:
    assert read_error_payload(b"  overloaded ", PayloadFormat.JSON) == ("overloaded", None)
    assert read_error_payload(b"<oops/>", PayloadFormat.XML) == ("<oops/>", None)
