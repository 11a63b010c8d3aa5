"""Locate opening tags with a class attribute in markup or JSX text.

Matches tags such as::

    <div id="main" class="flex p-4" data-x="1">
    <Button className='px-2 sm:px-4' onClick={go}>
"""

from __future__ import annotations

import re

from twformat.model.edit import ClassTag

__all__ = ["find_class_tags", "line_indent"]

_TAG_RE = re.compile(
    r"""
    <(?P<tag>\w+)                  # tag name
    (?P<before>[^>]*?)             # attributes before the class attribute
    (?P<attr>class(?:Name)?)       # class or className
    =(?P<quote>["'])               # opening quote
    (?P<value>[^"']+)              # class list
    ["']                           # closing quote
    (?P<after>[^>]*?)              # attributes after the class attribute
    >
    """,
    re.VERBOSE,
)

_INDENT_RE = re.compile(r"[ \t]*")


def find_class_tags(text: str) -> list[ClassTag]:
    """Return every class-bearing opening tag in *text*, in source order."""
    tags: list[ClassTag] = []
    for match in _TAG_RE.finditer(text):
        tags.append(
            ClassTag(
                start=match.start(),
                end=match.end(),
                tag_name=match.group("tag"),
                before=match.group("before"),
                attribute=match.group("attr"),
                quote=match.group("quote"),
                value=match.group("value"),
                after=match.group("after"),
            )
        )
    return tags


def line_indent(text: str, offset: int) -> str:
    """Return the leading whitespace of the line containing *offset*."""
    line_start = text.rfind("\n", 0, offset) + 1
    match = _INDENT_RE.match(text, line_start)
    return match.group(0) if match else ""
