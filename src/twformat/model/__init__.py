"""twformat model layer -- public type re-exports."""

from twformat.model.category import EMIT_ORDER, MATCH_ORDER, Category
from twformat.model.config import FormatConfig, WrapIndentStyle
from twformat.model.edit import ClassTag, TextEdit

__all__ = [
    # category
    "Category",
    "MATCH_ORDER",
    "EMIT_ORDER",
    # config
    "WrapIndentStyle",
    "FormatConfig",
    # edit
    "ClassTag",
    "TextEdit",
]
