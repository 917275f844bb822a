"""Align Otenki elements on a shared, sorted set of forecast dates."""

from collections.abc import Iterable
from datetime import datetime

from zutool.models.forecast import Element


def available_instants(elements: list[Element]) -> list[datetime]:
    """Sorted series keys of the first element.

    All elements are assumed to share the same keys; this is not checked.
    Elements missing a key render a placeholder instead.
    """
    if not elements:
        return []
    return sorted(elements[0].series)


def select_by_offsets(
    instants: list[datetime], offsets: Iterable[int]
) -> list[datetime]:
    """Pick instants by zero-based position. Out-of-range offsets are dropped."""
    wanted = {n for n in offsets if 0 <= n < len(instants)}
    return [instants[n] for n in sorted(wanted)]
