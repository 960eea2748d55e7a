"""Shared pytest fixtures for configuration-focused tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture
def portable_repo_root(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Provide a temporary repository root for portable path detection."""

    _ = (tmp_path / "pyproject.toml").write_text("[project]\nname='tmp'\n")

    import mbquery.config.paths as paths

    def _fake_detect_repo_root(_start: Path | None = None) -> Path:
        return tmp_path

    monkeypatch.setattr(paths, "_detect_repo_root", _fake_detect_repo_root, raising=True)
    monkeypatch.delenv("MBQUERY_CONFIG", raising=False)
    monkeypatch.delenv("MUSICBRAINZ_USER_AGENT", raising=False)
    return tmp_path


@pytest.fixture(autouse=True)
def reset_config_cache() -> Iterator[None]:
    """Forget the cached configuration around each test."""

    from mbquery.config.config import Config

    Config.reset()
    yield None
    Config.reset()
