"""Configuration management for mbquery."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from mbquery.config.paths import default_config_path
from mbquery.platform.logging import logger

_ENV_USER_AGENT = "MUSICBRAINZ_USER_AGENT"


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Connection, identity and throttling settings for the query client."""

    # Web service location
    url_scheme: str = "https"
    host: str = "musicbrainz.org"
    port: int | None = None

    # Application identity (User-Agent)
    user_agent: str | None = None
    app_name: str | None = None
    app_version: str | None = None
    contact: str | None = None

    # Authentication; a bearer token takes precedence over username/password
    bearer_token: str | None = None
    username: str | None = None
    password: str | None = None

    # Seconds between requests across the whole process; <= 0 disables throttling
    request_delay: float = 1.0

    # "json" or "xml"
    payload_format: str = "json"

    # Log file path
    log_file: Path | None = _path_field()

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value else None)

    @property
    def has_credential(self) -> bool:
        """Return True when both halves of a Digest credential are configured."""

        return bool(self.username) and self.password is not None

    def save(self, path: Path | None = None) -> Path:
        """Save configuration to file."""

        config_dict = asdict(self)
        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        target = path or default_config_path()
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            _ = target.write_text(self._render_toml(config_dict), encoding="utf-8")
            logger.info("Configuration saved to %s", target)
        except Exception as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        return target

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# mbquery configuration file")
        lines.append("")

        lines.append("# Web service location")
        lines.append(f"url_scheme = {self._format_toml_value(config['url_scheme'])}")
        lines.append(f"host = {self._format_toml_value(config['host'])}")
        lines.append("# Explicit port (optional)")
        if config["port"] is not None:
            lines.append(f"port = {self._format_toml_value(config['port'])}")
        lines.append("")

        lines.append("# Application identity sent in the User-Agent header")
        lines.append('# Either a full agent ("MyApp/1.0 (me@example.com)") or its parts')
        for key in ("user_agent", "app_name", "app_version", "contact"):
            if config.get(key):
                lines.append(f"{key} = {self._format_toml_value(config[key])}")
        lines.append("")

        lines.append("# Authentication (optional); bearer_token wins over username/password")
        for key in ("bearer_token", "username", "password"):
            if config.get(key) is not None:
                lines.append(f"{key} = {self._format_toml_value(config[key])}")
        lines.append("")

        lines.append("# Minimum seconds between requests (0 disables throttling)")
        lines.append(f"request_delay = {self._format_toml_value(config['request_delay'])}")
        lines.append("")

        lines.append('# Payload format requested from the service: "json" or "xml"')
        lines.append(f"payload_format = {self._format_toml_value(config['payload_format'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls, path: Path | None = None, env: Mapping[str, str] | None = None) -> "Config":
        """Load configuration from file.

        Args:
            path: Explicit config file; defaults to ``default_config_path()``.
            env: Environment mapping used for overrides; defaults to ``os.environ``.

        Returns:
            Config: Loaded configuration object. A missing file yields defaults.
        """
        config_file = path or default_config_path(env)
        if cls._instance is not None and cls._loaded_from == config_file:
            return cls._instance

        mapping = env if env is not None else os.environ
        try:
            config_dict: dict[str, Any] = {}
            if config_file.exists():
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
                logger.info("Configuration loaded from %s", config_file)

            known = {f.name for f in fields(cls)}
            unknown = sorted(set(config_dict) - known)
            for key in unknown:
                logger.warning("Ignoring unknown configuration key '%s'", key)
                del config_dict[key]

            if not config_dict.get("user_agent"):
                env_agent = (mapping.get(_ENV_USER_AGENT) or "").strip()
                if env_agent:
                    config_dict["user_agent"] = env_agent

            instance = cls(**config_dict)
        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise

        cls._instance = instance
        cls._loaded_from = config_file
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance so the next ``load`` rereads the file."""

        cls._instance = None
        cls._loaded_from = None


__all__ = ["Config"]
