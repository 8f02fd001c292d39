"""Configuration loading and management."""

from __future__ import annotations

import os
import re
import tomllib
from dataclasses import dataclass, field
from datetime import timedelta, timezone
from pathlib import Path
from typing import Any

from intervalle.core.exceptions import ConfigError
from intervalle.core.types import PathLike

CONFIG_FILENAME = "intervalle.toml"
UTC_OFFSET_ENV = "INTERVALLE_UTC_OFFSET"
OUTPUT_FORMATS = ("text", "json")

_OFFSET_RE = re.compile(r"^([+-])(\d{2}):(\d{2})$")


@dataclass
class IntervalleConfig:
    """Loaded configuration."""

    defaults: dict[str, Any] = field(default_factory=dict)

    _source_path: Path | None = field(default=None, repr=False)

    @property
    def source_path(self) -> Path | None:
        return self._source_path

    def utc_offset(self) -> timezone | None:
        """Fixed offset used to resolve "now", or None for the local zone.

        ``INTERVALLE_UTC_OFFSET`` takes precedence over ``defaults.utc_offset``.
        Accepts ``+HH:MM``, ``-HH:MM`` or ``Z``.
        """
        raw = os.environ.get(UTC_OFFSET_ENV) or self.defaults.get("utc_offset")
        if raw is None:
            return None
        return parse_utc_offset(str(raw))

    def output_format(self) -> str:
        fmt = self.defaults.get("output", "text")
        if fmt not in OUTPUT_FORMATS:
            raise ConfigError(
                f"Invalid output format {fmt!r}; expected one of {', '.join(OUTPUT_FORMATS)}"
            )
        return fmt


def parse_utc_offset(value: str) -> timezone:
    """Parse ``+HH:MM`` / ``-HH:MM`` / ``Z`` into a fixed-offset timezone."""
    value = value.strip()
    if value.upper() == "Z":
        return timezone.utc

    match = _OFFSET_RE.match(value)
    if not match:
        raise ConfigError(f"Invalid UTC offset {value!r}; use +HH:MM, -HH:MM or Z")

    sign, hours, minutes = match.groups()
    if int(hours) > 23 or int(minutes) > 59:
        raise ConfigError(f"UTC offset out of range: {value!r}")

    delta = timedelta(hours=int(hours), minutes=int(minutes))
    return timezone(-delta if sign == "-" else delta)


def find_config_file() -> Path | None:
    """Find configuration file in priority order.

    Search order:
    1. ./intervalle.toml (current directory)
    2. ./pyproject.toml [tool.intervalle] section
    3. Git repository root intervalle.toml
    4. ~/.config/intervalle/config.toml
    """
    cwd = Path.cwd()
    if (cwd / CONFIG_FILENAME).exists():
        return cwd / CONFIG_FILENAME

    if (cwd / "pyproject.toml").exists():
        try:
            with open(cwd / "pyproject.toml", "rb") as f:
                pyproject = tomllib.load(f)
            if "intervalle" in pyproject.get("tool", {}):
                return cwd / "pyproject.toml"
        except tomllib.TOMLDecodeError:
            pass

    # Git root
    git_root = _find_git_root(cwd)
    if git_root and (git_root / CONFIG_FILENAME).exists():
        return git_root / CONFIG_FILENAME

    # User config
    user_config = Path.home() / ".config" / "intervalle" / "config.toml"
    if user_config.exists():
        return user_config

    return None


def _find_git_root(start: Path) -> Path | None:
    """Find git repository root."""
    current = start.resolve()
    while current != current.parent:
        if (current / ".git").exists():
            return current
        current = current.parent
    return None


def load_config(path: PathLike | None = None) -> IntervalleConfig:
    """Load configuration from file.

    Args:
        path: Explicit config path or None to auto-discover
    """
    if path is None:
        path = find_config_file()

    if path is None:
        return IntervalleConfig()  # Empty config, use defaults

    path = Path(path)

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    # Handle pyproject.toml
    if path.name == "pyproject.toml":
        data = data.get("tool", {}).get("intervalle", {})

    config = IntervalleConfig(defaults=data.get("defaults", {}))
    config._source_path = path

    return config


# Global config cache
_cached_config: IntervalleConfig | None = None


def get_config() -> IntervalleConfig:
    """Get the global configuration (cached)."""
    global _cached_config
    if _cached_config is None:
        _cached_config = load_config()
    return _cached_config


def reload_config(path: PathLike | None = None) -> IntervalleConfig:
    """Reload configuration (clears cache)."""
    global _cached_config
    _cached_config = load_config(path)
    return _cached_config
