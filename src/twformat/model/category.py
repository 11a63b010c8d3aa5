"""Semantic class categories and the two orders they are used in."""

from __future__ import annotations

from enum import StrEnum


class Category(StrEnum):
    LAYOUT = "layout"
    SIZING = "sizing"
    SPACING = "spacing"
    TYPOGRAPHY = "typography"
    BACKGROUND = "background"
    BORDERS = "borders"
    EFFECTS = "effects"
    FILTERS = "filters"
    INTERACTIVITY = "interactivity"
    SVG = "svg"
    ACCESSIBILITY = "accessibility"
    TRANSFORMS = "transforms"
    OTHER = "other"


# Order in which the classifier tries each category's rules.  OTHER is the
# fallback and has no rules.
MATCH_ORDER: tuple[Category, ...] = (
    Category.LAYOUT,
    Category.SIZING,
    Category.SPACING,
    Category.TYPOGRAPHY,
    Category.BACKGROUND,
    Category.BORDERS,
    Category.EFFECTS,
    Category.FILTERS,
    Category.INTERACTIVITY,
    Category.SVG,
    Category.ACCESSIBILITY,
    Category.TRANSFORMS,
)

# Order in which categories are written out.  Transforms come before
# interactivity here, unlike MATCH_ORDER.
EMIT_ORDER: tuple[Category, ...] = (
    Category.LAYOUT,
    Category.SIZING,
    Category.SPACING,
    Category.TYPOGRAPHY,
    Category.BACKGROUND,
    Category.BORDERS,
    Category.EFFECTS,
    Category.FILTERS,
    Category.TRANSFORMS,
    Category.INTERACTIVITY,
    Category.SVG,
    Category.ACCESSIBILITY,
    Category.OTHER,
)
