"""
Occupancy grid: a boolean 3D lattice with one cell per unit of length.

A box at origin (x, y, z) with dims (w, h, d) covers the cells
[floor(x), ceil(x + w)) on the x axis, and likewise on y and z.  For
integer inputs that is exactly the unit cells inside the box; fractional
boxes are rounded outwards so two committed boxes can never share space.

Cells are only ever set, never cleared.
"""

from __future__ import annotations

import math
from typing import Tuple

import numpy as np

from loadopt.core.models import Dims, Point

# Upper bound on lattice size (one byte per cell).  A 40ft container in
# centimeters is ~67.5M cells; the same container in millimeters is not
# representable and must be planned in a coarser unit.
MAX_GRID_CELLS: int = 128_000_000


def grid_shape(extent: Dims) -> Tuple[int, int, int]:
    """Number of cells along each axis for a container of *extent*."""
    w, h, d = extent
    return (math.ceil(w), math.ceil(h), math.ceil(d))


class OccupancyGrid:
    """
    Tracks which unit cells of a container are filled.

    Attributes:
        extent: Container (width, height, depth) in the run's unit.
        cells:  np.ndarray of bool, shape ``grid_shape(extent)``.
    """

    __slots__ = ("extent", "cells")

    def __init__(self, extent: Dims) -> None:
        self.extent: Dims = extent
        self.cells: np.ndarray = np.zeros(grid_shape(extent), dtype=bool)

    # ── Coordinate conversion ────────────────────────────────────────────

    @staticmethod
    def _span(start: float, length: float) -> Tuple[int, int]:
        return math.floor(start), math.ceil(start + length)

    # ── Queries ──────────────────────────────────────────────────────────

    def fits(self, origin: Point, dims: Dims) -> bool:
        """
        True if a box of *dims* at *origin* is inside the container and
        every cell it covers is free.
        """
        if any(v <= 0 for v in dims):
            return False
        for start, length, limit in zip(origin, dims, self.extent):
            if start < 0 or start + length > limit:
                return False

        (x0, x1), (y0, y1), (z0, z1) = (
            self._span(s, n) for s, n in zip(origin, dims)
        )
        return not bool(self.cells[x0:x1, y0:y1, z0:z1].any())

    def is_occupied(self, cell: Tuple[int, int, int]) -> bool:
        """State of a single cell; cells outside the grid read as free."""
        if any(c < 0 or c >= n for c, n in zip(cell, self.cells.shape)):
            return False
        return bool(self.cells[cell])

    @property
    def occupied_cells(self) -> int:
        return int(np.count_nonzero(self.cells))

    @property
    def size(self) -> int:
        return int(self.cells.size)

    # ── Mutation (packing state only) ────────────────────────────────────

    def occupy(self, origin: Point, dims: Dims) -> None:
        """
        Mark every covered in-bounds cell as filled.

        Idempotent on already-filled cells.  Parts of the box outside the
        grid are clamped away silently.
        """
        bounds = []
        for (start, end), n in zip(
            (self._span(s, l) for s, l in zip(origin, dims)),
            self.cells.shape,
        ):
            start, end = max(start, 0), min(end, n)
            if start >= end:
                return
            bounds.append(slice(start, end))
        self.cells[tuple(bounds)] = True

    def __repr__(self) -> str:
        return (
            f"OccupancyGrid(shape={self.cells.shape}, "
            f"occupied={self.occupied_cells}/{self.size})"
        )
