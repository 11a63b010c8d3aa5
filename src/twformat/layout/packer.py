"""Line packer: order classes by category and wrap them into lines.

Every category starts on a fresh line.  With a positive width budget the
responsive clusters of one category are packed greedily onto as few lines
as fit; with a budget of 0 each cluster gets its own line.
"""

from __future__ import annotations

from collections.abc import Iterable

from twformat.classifier.classify import classify
from twformat.layout.grouper import group_responsive
from twformat.model.category import EMIT_ORDER, Category
from twformat.model.config import FormatConfig, WrapIndentStyle
from twformat.parser.tokens import split_classes

__all__ = ["category_buckets", "pack", "pack_with_config"]

# Classes sit two spaces deeper than the attribute that holds them.
_CLASS_INDENT = "  "
_EXTRA_WRAP_INDENT = "  "


def category_buckets(tokens: Iterable[str]) -> list[tuple[Category, list[str]]]:
    """Bucket *tokens* by category, returning non-empty buckets in emit order."""
    buckets: dict[Category, list[str]] = {}
    for token in tokens:
        buckets.setdefault(classify(token), []).append(token)
    return [(category, buckets[category]) for category in EMIT_ORDER if category in buckets]


def _category_lines(
    clusters: list[str], class_indent: str, wrap_indent: str, max_line_width: int
) -> list[str]:
    """Lay out the joined clusters of one category."""
    if max_line_width == 0:
        return [class_indent + cluster for cluster in clusters]

    lines: list[str] = []
    current = class_indent + clusters[0]
    for cluster in clusters[1:]:
        candidate = f"{current} {cluster}"
        if len(candidate) <= max_line_width:
            current = candidate
        else:
            lines.append(current)
            current = wrap_indent + cluster
    lines.append(current)
    return lines


def pack(
    class_string: str,
    base_indent: str,
    attribute_indent: str,
    close_quote_on_new_line: bool = True,
    max_line_width: int = 80,
    wrap_indent_style: str = WrapIndentStyle.SAME,
) -> str:
    """Return the formatted replacement for a class attribute value.

    The result starts with a newline, holds one line per category (more
    when a category wraps), and ends either right after the last class or,
    with *close_quote_on_new_line*, with a newline plus *attribute_indent*
    so the closing quote lines up with the attribute.

    *base_indent* is the indentation of the tag itself; it does not affect
    the class lines, which are derived from *attribute_indent*.
    """
    class_indent = attribute_indent + _CLASS_INDENT
    if wrap_indent_style == WrapIndentStyle.EXTRA:
        wrap_indent = class_indent + _EXTRA_WRAP_INDENT
    else:
        wrap_indent = class_indent

    lines: list[str] = []
    for _category, tokens in category_buckets(split_classes(class_string)):
        clusters = [" ".join(cluster) for cluster in group_responsive(tokens)]
        lines.extend(_category_lines(clusters, class_indent, wrap_indent, max_line_width))

    body = "\n" + "\n".join(lines)
    if close_quote_on_new_line:
        return body + "\n" + attribute_indent
    return body


def pack_with_config(
    class_string: str, base_indent: str, attribute_indent: str, config: FormatConfig
) -> str:
    """:func:`pack` with its options taken from a :class:`FormatConfig`."""
    return pack(
        class_string,
        base_indent,
        attribute_indent,
        close_quote_on_new_line=config.close_quote_on_new_line,
        max_line_width=config.max_line_width,
        wrap_indent_style=config.wrap_indent_style,
    )
