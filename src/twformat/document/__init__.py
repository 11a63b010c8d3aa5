from twformat.document.rewriter import (
    apply_edits,
    dominant_newline,
    format_document,
    format_text,
    rebuild_tag,
)
from twformat.document.scanner import find_class_tags, line_indent

__all__ = [
    "apply_edits",
    "dominant_newline",
    "find_class_tags",
    "format_document",
    "format_text",
    "line_indent",
    "rebuild_tag",
]
