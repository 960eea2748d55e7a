"""Where: src/mbquery/platform/musicbrainz/user_agent.py
What: Build MusicBrainz-compliant User-Agent strings.
Why: Centralise etiquette logic shared by the transport and the query facade.
"""

from __future__ import annotations

from mbquery.config.settings import LIBRARY_NAME, LIBRARY_VERSION


def format_user_agent(app_name: str, app_version: str, contact: str) -> str:
    """Return ``App/Version (contact)`` when contact information is available."""

    stripped = contact.strip()
    if stripped:
        return f"{app_name}/{app_version} ({stripped})"
    return f"{app_name}/{app_version}"


def library_token() -> str:
    """Identify this library as ``mbquery/v<version>``."""

    return f"{LIBRARY_NAME}/v{LIBRARY_VERSION}"


def compose_user_agent(caller_agent: str) -> str:
    """Append the library token to the agent supplied by the application."""

    return f"{caller_agent.strip()} {library_token()}"


__all__ = [
    "compose_user_agent",
    "format_user_agent",
    "library_token",
]
