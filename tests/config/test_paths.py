from __future__ import annotations

from pathlib import Path

from mbquery.config.paths import CONFIG_ENV_VAR, _detect_repo_root, default_config_path


def test_default_config_path_uses_repo_root(portable_repo_root: Path) -> None:
    assert default_config_path({}) == (portable_repo_root / "config" / "config.toml").resolve()


def test_environment_overrides_default(portable_repo_root: Path, tmp_path: Path) -> None:
    custom = tmp_path / "elsewhere" / "mb.toml"

    assert default_config_path({CONFIG_ENV_VAR: f"  {custom}  "}) == custom.resolve()


def test_blank_override_falls_back_to_default(portable_repo_root: Path) -> None:
    assert default_config_path({CONFIG_ENV_VAR: "   "}).parent == (portable_repo_root / "config").resolve()


def test_repo_root_detection_stops_at_marker(tmp_path: Path) -> None:
    _ = (tmp_path / "pyproject.toml").write_text("[project]\nname='tmp'\n")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)

    assert _detect_repo_root(nested / "module.py") == tmp_path
