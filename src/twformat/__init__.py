"""twformat: group, order and wrap Tailwind utility classes in markup."""

from __future__ import annotations

__version__ = "0.1.0"

from twformat.classifier import classify
from twformat.config import ConfigError, load_config
from twformat.document import format_document, format_text
from twformat.layout import group_responsive, pack, pack_with_config
from twformat.model import Category, FormatConfig, WrapIndentStyle

__all__ = [
    "__version__",
    "Category",
    "ConfigError",
    "FormatConfig",
    "WrapIndentStyle",
    "classify",
    "format_document",
    "format_text",
    "group_responsive",
    "load_config",
    "pack",
    "pack_with_config",
]
