"""Formatting options consumed by a single formatting call."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class WrapIndentStyle(StrEnum):
    """Indentation of continuation lines within one category."""

    SAME = "same"
    EXTRA = "extra"


@dataclass(frozen=True)
class FormatConfig:
    """Options for packing one class attribute.

    Attributes:
        close_quote_on_new_line: Put the closing quote on its own line at the
            attribute indent instead of right after the last class.
        max_line_width: Soft character budget per line, indentation
            included.  0 disables wrapping.
        wrap_indent_style: ``same`` keeps continuation lines at the class
            indent, ``extra`` indents them two more spaces.
    """

    close_quote_on_new_line: bool = True
    max_line_width: int = 80
    wrap_indent_style: WrapIndentStyle = WrapIndentStyle.SAME
