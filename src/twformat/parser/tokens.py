"""Token parsing: variant prefixes, breakpoints, and base properties.

A token is one whitespace-separated class such as ``sm:hover:bg-gray-100``.
Leading ``name:`` segments are variant prefixes; the remainder is the base
class.  Only the very first prefix is checked for a responsive breakpoint.
"""

from __future__ import annotations

import re

__all__ = [
    "BREAKPOINTS",
    "breakpoint_of",
    "breakpoint_rank",
    "class_property",
    "split_classes",
    "strip_variants",
]

# Responsive breakpoints, smallest first.  The index is the sort rank.
BREAKPOINTS: tuple[str, ...] = ("sm", "md", "lg", "xl", "2xl")

_VARIANT_RE = re.compile(r"^[a-z0-9]+:")
_BREAKPOINT_RE = re.compile(r"^(sm|md|lg|xl|2xl):")
_PROPERTY_RE = re.compile(r"^[a-z]+")
_WHITESPACE_RE = re.compile(r"\s+")


def split_classes(value: str) -> list[str]:
    """Split a raw attribute value into tokens, dropping empty pieces."""
    return [token for token in _WHITESPACE_RE.split(value) if token]


def strip_variants(token: str) -> str:
    """Remove every leading variant prefix from *token*."""
    base = token
    while True:
        match = _VARIANT_RE.match(base)
        if match is None:
            return base
        base = base[match.end():]


def breakpoint_of(token: str) -> str | None:
    """Return the breakpoint named by the first prefix, or None.

    ``md:hover:pt-4`` gives ``md``; ``hover:md:pt-4`` gives None because
    the first prefix is not a breakpoint.
    """
    match = _BREAKPOINT_RE.match(token)
    return match.group(1) if match else None


def breakpoint_rank(token: str) -> int:
    """Sort weight: -1 without a breakpoint, else its index in BREAKPOINTS."""
    bp = breakpoint_of(token)
    if bp is None:
        return -1
    return BREAKPOINTS.index(bp)


def class_property(token: str) -> str:
    """Return the leading lowercase-letter run of the variant-stripped token.

    Multi-part utilities are truncated on purpose: ``min-w-full`` gives
    ``min``.  A base class without leading letters is returned whole.
    """
    base = strip_variants(token)
    match = _PROPERTY_RE.match(base)
    return match.group(0) if match else base
