from twformat.parser.tokens import (
    BREAKPOINTS,
    breakpoint_of,
    breakpoint_rank,
    class_property,
    split_classes,
    strip_variants,
)

__all__ = [
    "BREAKPOINTS",
    "breakpoint_of",
    "breakpoint_rank",
    "class_property",
    "split_classes",
    "strip_variants",
]
