"""Rewrite class-bearing tags with one attribute per line."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from twformat.document.scanner import find_class_tags, line_indent
from twformat.layout.packer import pack_with_config
from twformat.model.config import FormatConfig
from twformat.model.edit import ClassTag, TextEdit

__all__ = ["apply_edits", "dominant_newline", "format_document", "format_text", "rebuild_tag"]

logger = logging.getLogger(__name__)

_ATTRIBUTE_INDENT = "  "


def dominant_newline(text: str) -> str:
    """Return the line ending used by most line breaks in *text* (CRLF or LF)."""
    crlf = text.count("\r\n")
    return "\r\n" if crlf > text.count("\n") - crlf else "\n"


def rebuild_tag(
    tag: ClassTag,
    formatted: str,
    base_indent: str,
    attribute_indent: str,
    newline: str = "\n",
) -> str:
    """Build the replacement text for *tag* around the packed class value.

    The tag name stays on the first line; surrounding attributes and the
    class attribute each get their own line, and ``>`` closes the tag at
    *base_indent*.  Attribute spelling and quote character are preserved.
    Lines are joined with *newline*.
    """
    parts = [f"<{tag.tag_name}"]
    before = tag.before.strip()
    if before:
        parts.append(f"{attribute_indent}{before}")
    parts.append(f"{attribute_indent}{tag.attribute}={tag.quote}{formatted}{tag.quote}")
    after = tag.after.strip()
    if after:
        parts.append(f"{attribute_indent}{after}")
    parts.append(f"{base_indent}>")
    return newline.join(parts)


def format_document(text: str, config: FormatConfig | None = None) -> list[TextEdit]:
    """Compute the edits that format every class attribute in *text*.

    Tags whose packed class value is already identical are left alone, so
    running this on formatted text yields no edits.
    """
    config = config or FormatConfig()
    newline = dominant_newline(text)
    edits: list[TextEdit] = []
    for tag in find_class_tags(text):
        base_indent = line_indent(text, tag.start)
        attribute_indent = base_indent + _ATTRIBUTE_INDENT
        formatted = pack_with_config(tag.value, base_indent, attribute_indent, config)
        formatted = formatted.replace("\n", newline)
        if formatted == tag.value:
            continue
        logger.debug("Rewriting <%s> at offset %d", tag.tag_name, tag.start)
        edits.append(
            TextEdit(
                start=tag.start,
                end=tag.end,
                new_text=rebuild_tag(tag, formatted, base_indent, attribute_indent, newline),
            )
        )
    logger.info("Found %d edit(s)", len(edits))
    return edits


def apply_edits(text: str, edits: Iterable[TextEdit]) -> str:
    """Apply non-overlapping *edits* to *text*.

    Edits are applied from the end of the text backwards so the offsets of
    the remaining edits stay valid.
    """
    result = text
    for edit in sorted(edits, key=lambda e: e.start, reverse=True):
        result = result[: edit.start] + edit.new_text + result[edit.end :]
    return result


def format_text(text: str, config: FormatConfig | None = None) -> str:
    """Return *text* with every class attribute formatted."""
    return apply_edits(text, format_document(text, config))
