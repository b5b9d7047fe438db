"""
Orientation generation and placement modes.

An orientation is one axis-aligned permutation of an item's (w, h, d) that
the item may be realized in.  Two policies exist:

    FREE           all 6 permutations, deduplicated by value
    VERTICAL_ONLY  height stays on the y axis; only the two horizontal axes
                   may be swapped (fragile items that must stand upright)
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple

from loadopt.core.models import Dims


class PlacementMode(str, Enum):
    FREE = "free"
    VERTICAL_ONLY = "vertical-only"


# Product categories whose items must keep their designated up face up.
VERTICAL_ONLY_CATEGORIES = frozenset({"tiles"})


def mode_for_category(category: Optional[str]) -> PlacementMode:
    """Placement mode for a product category; anything unknown rotates freely."""
    if category is None:
        return PlacementMode.FREE
    if category.strip().lower() in VERTICAL_ONLY_CATEGORIES:
        return PlacementMode.VERTICAL_ONLY
    return PlacementMode.FREE


class Orientation:
    """
    Produces the realized (w, h, d) triples an item may occupy.

    All results are tuples in a fixed order with the identity first, so
    the engine's first-found tie-break is stable across runs.
    """

    @staticmethod
    def get_all(w: float, h: float, d: float) -> Tuple[Dims, ...]:
        """Return all unique orthogonal orientations (up to 6)."""
        return _unique([
            (w, h, d), (w, d, h),
            (h, w, d), (h, d, w),
            (d, w, h), (d, h, w),
        ])

    @staticmethod
    def get_upright(w: float, h: float, d: float) -> Tuple[Dims, ...]:
        """Return the upright orientations (height pinned, up to 2)."""
        return _unique([(w, h, d), (d, h, w)])

    @staticmethod
    def for_mode(dims: Dims, mode: PlacementMode) -> Tuple[Dims, ...]:
        w, h, d = dims
        if mode is PlacementMode.VERTICAL_ONLY:
            return Orientation.get_upright(w, h, d)
        return Orientation.get_all(w, h, d)


def _unique(candidates: list[Dims]) -> Tuple[Dims, ...]:
    seen: set = set()
    orientations: list[Dims] = []
    for dims in candidates:
        if dims not in seen:
            seen.add(dims)
            orientations.append(dims)
    return tuple(orientations)
