"""Document-level models: matched class tags and text edits."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ClassTag:
    """An opening tag that carries a ``class`` or ``className`` attribute.

    ``start``/``end`` delimit the whole tag (``<`` through ``>``) in the
    source text.  ``before`` and ``after`` are the raw attribute text on
    either side of the class attribute.
    """

    start: int
    end: int
    tag_name: str
    before: str
    attribute: str  # "class" or "className"
    quote: str  # '"' or "'"
    value: str
    after: str


@dataclass(frozen=True)
class TextEdit:
    """Replace the half-open range ``[start, end)`` with ``new_text``."""

    start: int
    end: int
    new_text: str
