from __future__ import annotations

from mbquery.config.settings import LIBRARY_VERSION
from mbquery.platform.musicbrainz.user_agent import compose_user_agent, format_user_agent, library_token


def test_format_user_agent_with_contact() -> None:
    assert format_user_agent("app", "1.2.3", "mailto:test@example.com") == "app/1.2.3 (mailto:test@example.com)"


def test_format_user_agent_without_contact() -> None:
    assert format_user_agent("app", "1.2.3", "") == "app/1.2.3"


def test_library_token_names_this_library() -> None:
    assert library_token() == f"mbquery/v{LIBRARY_VERSION}"


def test_compose_user_agent_appends_library_token() -> None:
    assert compose_user_agent(" myapp/0.2.0 ") == f"myapp/0.2.0 mbquery/v{LIBRARY_VERSION}"
