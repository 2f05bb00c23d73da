"""Configuration loaded from config.toml with PL_* env overrides."""

import os
import tomllib
from pathlib import Path
from typing import Any

from pl.discovery import home_dir
from pl.errors import ConfigError

CONFIG_FILENAME = "config.toml"

# Module-level cache for singleton pattern
_config_cache: "Config | None" = None


def clear_config_cache() -> None:
    """Clear the config cache. Useful for testing."""
    global _config_cache
    _config_cache = None


def get_default_config_dir() -> Path:
    """Get default config directory, respecting PL_CONFIG_DIR and XDG_CONFIG_HOME.

    This is the single source of truth for config directory resolution.
    """
    config_dir = os.environ.get("PL_CONFIG_DIR")
    if config_dir:
        return Path(config_dir)
    xdg_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_home:
        return Path(xdg_home) / "pl"
    return home_dir() / ".config" / "pl"


class Config:
    """Read-only runtime configuration with env override support."""

    DEFAULTS: dict[str, Any] = {
        "project_dirs": ["~/Projects"],
        "editor_command": "nvim",
    }

    def __init__(self, config_dir: Path | None = None):
        self._config_dir = config_dir or get_default_config_dir()
        self._config_file = self._config_dir / CONFIG_FILENAME
        self._data: dict[str, Any] = {}

    @property
    def config_dir(self) -> Path:
        return self._config_dir

    @property
    def config_file(self) -> Path:
        return self._config_file

    @classmethod
    def load(cls, config_dir: Path | None = None) -> "Config":
        """Factory method - explicit loading with caching.

        Raises:
            ConfigError: If the config file exists but cannot be parsed.
        """
        global _config_cache

        if _config_cache is not None and config_dir is None:
            return _config_cache

        config = cls(config_dir)
        config._load_from_file()
        config._apply_env_overrides()

        if config_dir is None:
            _config_cache = config

        return config

    def __getattr__(self, name: str) -> Any:
        """Access config values as attributes."""
        if name.startswith("_"):
            raise AttributeError(name)
        if name in self._data:
            return self._data[name]
        if name in self.DEFAULTS:
            value = self.DEFAULTS[name]
            return list(value) if isinstance(value, list) else value
        raise AttributeError(f"Config has no attribute '{name}'")

    def _load_from_file(self) -> None:
        try:
            content = self.config_file.read_text(encoding="utf-8")
        except FileNotFoundError:
            return
        except OSError as e:
            raise ConfigError(f"cannot read config at {self.config_file}: {e}") from e

        if not content.strip():
            return

        try:
            raw = tomllib.loads(content)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"invalid config at {self.config_file}: {e}") from e

        self._data = self._validate(raw)

    def _validate(self, raw: dict[str, Any]) -> dict[str, Any]:
        """Keep known keys, checking they have the expected shape. Unknown keys are ignored."""
        data: dict[str, Any] = {}
        if "project_dirs" in raw:
            dirs = raw["project_dirs"]
            if not isinstance(dirs, list) or not all(isinstance(d, str) for d in dirs):
                raise ConfigError(
                    f"invalid config at {self.config_file}: "
                    "'project_dirs' must be a list of strings"
                )
            data["project_dirs"] = dirs
        if "editor_command" in raw:
            editor = raw["editor_command"]
            if not isinstance(editor, str) or not editor.strip():
                raise ConfigError(
                    f"invalid config at {self.config_file}: "
                    "'editor_command' must be a non-empty string"
                )
            data["editor_command"] = editor
        return data

    def _apply_env_overrides(self) -> None:
        """Apply PL_* env vars (highest priority)."""
        for key, default in self.DEFAULTS.items():
            env_key = f"PL_{key.upper()}"
            value = os.environ.get(env_key)
            if value:
                self._data[key] = self._coerce(value, type(default))

    @staticmethod
    def _coerce(value: str, target_type: type) -> Any:
        """Coerce string env value to target type."""
        if target_type is list:
            return [part for part in value.split(os.pathsep) if part]
        return value
