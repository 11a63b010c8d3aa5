"""Prefix rule table used to classify utility classes.

Pairs are listed in match order and prefixes in declaration order; both
orders decide ties, so the table must not be re-sorted.
"""

from __future__ import annotations

from twformat.model.category import Category

CATEGORY_RULES: tuple[tuple[Category, tuple[str, ...]], ...] = (
    (Category.LAYOUT, (
        "container", "box-", "block", "inline", "flex", "grid", "table",
        "hidden", "float-", "clear-", "object-", "overflow-", "overscroll-",
        "static", "fixed", "absolute", "relative", "sticky", "isolate",
        "isolation-", "inset-", "top-", "right-", "bottom-", "left-",
        "visible", "invisible", "z-", "items-", "justify-", "self-",
    )),
    (Category.SIZING, (
        "w-", "h-", "min-w-", "min-h-", "max-w-", "max-h-", "size-",
    )),
    (Category.SPACING, (
        "p-", "px-", "py-", "pt-", "pr-", "pb-", "pl-", "ps-", "pe-",
        "m-", "mx-", "my-", "mt-", "mr-", "mb-", "ml-", "ms-", "me-",
        "space-",
    )),
    (Category.TYPOGRAPHY, (
        "font-", "text-", "antialiased", "subpixel-", "italic", "not-italic",
        "normal-nums", "ordinal", "slashed-zero", "lining-nums",
        "oldstyle-nums", "proportional-nums", "tabular-nums",
        "diagonal-fractions", "stacked-fractions", "leading-", "tracking-",
        "line-clamp-", "break-", "truncate", "text-ellipsis", "text-clip",
        "hyphens-", "uppercase", "lowercase", "capitalize", "normal-case",
        "underline", "overline", "line-through", "no-underline",
        "decoration-", "underline-offset-", "indent-", "align-",
        "whitespace-", "text-wrap", "text-nowrap", "text-balance",
        "text-pretty",
    )),
    (Category.BACKGROUND, (
        "bg-", "from-", "via-", "to-", "background-",
    )),
    (Category.BORDERS, (
        "border", "rounded", "divide-", "outline-", "ring-",
    )),
    (Category.EFFECTS, (
        "shadow-", "opacity-", "mix-", "blur-", "brightness-", "contrast-",
        "grayscale", "hue-rotate-", "invert", "saturate-", "sepia",
        "backdrop-", "transition", "duration-", "ease-", "delay-",
        "animate-",
    )),
    (Category.FILTERS, (
        "filter", "backdrop-filter",
    )),
    (Category.INTERACTIVITY, (
        "appearance-", "cursor-", "caret-", "pointer-events-", "resize-",
        "scroll-", "snap-", "touch-", "select-", "will-change-",
    )),
    (Category.SVG, (
        "fill-", "stroke-",
    )),
    (Category.ACCESSIBILITY, (
        "sr-only", "not-sr-only", "forced-color-adjust-",
    )),
    (Category.TRANSFORMS, (
        "scale-", "rotate-", "translate-", "skew-", "transform", "origin-",
    )),
)
