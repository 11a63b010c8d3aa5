"""Responsive grouping: cluster tokens that style the same property."""

from __future__ import annotations

from collections.abc import Iterable

from twformat.parser.tokens import breakpoint_rank, class_property


def group_responsive(tokens: Iterable[str]) -> list[list[str]]:
    """Cluster *tokens* by base property, ordered by breakpoint.

    Clusters come out in the order their property was first seen.  Inside a
    cluster the unprefixed token leads, followed by ``sm`` through ``2xl``;
    equal ranks keep their input order.

    >>> group_responsive(["md:pt-8", "pt-4", "sm:pt-6"])
    [['pt-4', 'sm:pt-6', 'md:pt-8']]
    """
    clusters: dict[str, list[str]] = {}
    for token in tokens:
        clusters.setdefault(class_property(token), []).append(token)
    return [sorted(cluster, key=breakpoint_rank) for cluster in clusters.values()]
