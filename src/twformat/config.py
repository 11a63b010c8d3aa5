"""User configuration: YAML file loading and boundary validation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from twformat.model.config import FormatConfig, WrapIndentStyle

__all__ = [
    "DEFAULT_CONFIG_FILE",
    "ConfigError",
    "config_from_mapping",
    "load_config",
    "merge_overrides",
]

DEFAULT_CONFIG_FILE = ".twformat.yaml"

_yaml = YAML(typ="safe")

_KNOWN_KEYS = {"close_quote_on_new_line", "max_line_width", "wrap_indent_style"}


class ConfigError(Exception):
    """Raised when a configuration value is missing its expected type or range."""

    def __init__(self, message: str, key: str | None = None) -> None:
        self.key = key
        super().__init__(message)


def _check_width(value: Any) -> int:
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(
            f"max_line_width must be an integer, got {value!r}", key="max_line_width"
        )
    if value < 0:
        raise ConfigError(
            f"max_line_width must be >= 0 (0 disables wrapping), got {value}",
            key="max_line_width",
        )
    return value


def _check_style(value: Any) -> WrapIndentStyle:
    try:
        return WrapIndentStyle(value)
    except (ValueError, TypeError):
        choices = ", ".join(style.value for style in WrapIndentStyle)
        raise ConfigError(
            f"wrap_indent_style must be one of: {choices}; got {value!r}",
            key="wrap_indent_style",
        ) from None


def _check_flag(value: Any) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(
            f"close_quote_on_new_line must be true or false, got {value!r}",
            key="close_quote_on_new_line",
        )
    return value


def config_from_mapping(raw: Mapping[str, Any]) -> FormatConfig:
    """Build a validated :class:`FormatConfig` from a plain mapping.

    Keys that are absent keep their defaults; unknown keys and keys without
    a value are rejected.
    """
    unknown = sorted(set(raw) - _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"Unknown configuration key(s): {', '.join(unknown)}", key=unknown[0])
    for key in sorted(raw):
        if raw[key] is None:
            raise ConfigError(f"{key} must have a value", key=key)

    config = FormatConfig()
    return merge_overrides(
        config,
        close_quote_on_new_line=raw.get("close_quote_on_new_line"),
        max_line_width=raw.get("max_line_width"),
        wrap_indent_style=raw.get("wrap_indent_style"),
    )


def merge_overrides(
    config: FormatConfig,
    *,
    close_quote_on_new_line: bool | None = None,
    max_line_width: int | None = None,
    wrap_indent_style: str | None = None,
) -> FormatConfig:
    """Return *config* with every non-None override validated and applied."""
    updates: dict[str, object] = {}
    if close_quote_on_new_line is not None:
        updates["close_quote_on_new_line"] = _check_flag(close_quote_on_new_line)
    if max_line_width is not None:
        updates["max_line_width"] = _check_width(max_line_width)
    if wrap_indent_style is not None:
        updates["wrap_indent_style"] = _check_style(wrap_indent_style)
    return replace(config, **updates) if updates else config


def load_config(path: Path | None = None) -> FormatConfig:
    """Load configuration from *path* (default ``.twformat.yaml`` in cwd).

    A missing file yields the defaults.  An empty file is treated the same.
    """
    path = path or Path(DEFAULT_CONFIG_FILE)
    if not path.is_file():
        return FormatConfig()

    try:
        raw = _yaml.load(path.read_text(encoding="utf-8")) or {}
    except YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigError(f"YAML must be a mapping: {path}")
    return config_from_mapping(raw)
