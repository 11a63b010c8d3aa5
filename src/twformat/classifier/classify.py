"""Map a class token to its semantic category."""

from __future__ import annotations

import re

from twformat.classifier.rules import CATEGORY_RULES
from twformat.model.category import Category

# The whole variant chain in one pass; the base must be non-empty.
_VARIANT_CHAIN_RE = re.compile(r"^(?:[a-z0-9]+:)+(.+)$")


def variant_base(token: str) -> str:
    """Return *token* without its variant chain, or unchanged if none."""
    match = _VARIANT_CHAIN_RE.match(token)
    return match.group(1) if match else token


def _rule_matches(base: str, prefix: str) -> bool:
    # A bare utility ("border", "grayscale") also matches its "x-" rule.
    return base.startswith(prefix) or base == prefix.removesuffix("-")


def classify(token: str) -> Category:
    """Return the first category whose rules match *token*.

    Categories are tried in ``MATCH_ORDER`` and rules in declaration order.
    Unrecognized tokens fall back to ``Category.OTHER``.
    """
    base = variant_base(token)
    for category, prefixes in CATEGORY_RULES:
        for prefix in prefixes:
            if _rule_matches(base, prefix):
                return category
    return Category.OTHER
