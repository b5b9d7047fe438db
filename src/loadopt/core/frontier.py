"""
Extreme point frontier.

The frontier holds the candidate anchor corners at which a new item may be
tried.  It starts at the origin.  Committing a box at (x, y, z) with
realized dims (w, h, d) adds the three far-corner projections

    (x + w, y, z)   right of the box
    (x, y + h, z)   on top of the box
    (x, y, z + d)   behind the box

when they lie inside the container and are not already known, then removes
the consumed anchor.  Points are never merged or pruned otherwise.

References:
    Crainic, T.G., Perboli, G., & Tadei, R. (2008).
    "Extreme Point-Based Heuristics for Three-Dimensional Bin Packing."
    INFORMS Journal on Computing, 20(3), 368-384.
"""

from __future__ import annotations

from typing import Dict, Iterator, Tuple

from loadopt.core.models import Container, Dims, Point

ORIGIN: Point = (0, 0, 0)


class ExtremePointFrontier:
    """Insertion-ordered set of anchor points keyed by coordinate tuple."""

    __slots__ = ("_container", "_points")

    def __init__(self, container: Container) -> None:
        self._container = container
        # dict as an ordered set: O(1) membership, stable iteration order
        self._points: Dict[Point, None] = {ORIGIN: None}

    def __contains__(self, point: Point) -> bool:
        return tuple(point) in self._points

    def __iter__(self) -> Iterator[Point]:
        return iter(tuple(self._points))

    def __len__(self) -> int:
        return len(self._points)

    @property
    def points(self) -> Tuple[Point, ...]:
        """Snapshot of the current anchors in iteration order."""
        return tuple(self._points)

    def update(self, anchor: Point, dims: Dims) -> None:
        """Record a commit at *anchor* with realized *dims*."""
        x, y, z = anchor
        w, h, d = dims
        for point in ((x + w, y, z), (x, y + h, z), (x, y, z + d)):
            if self._container.contains(point) and point not in self._points:
                self._points[point] = None
        self._points.pop(tuple(anchor), None)

    def __repr__(self) -> str:
        return f"ExtremePointFrontier(points={len(self._points)})"
