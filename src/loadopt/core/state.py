"""
Packing state: everything one optimization run accumulates.

The PackingState is owned by exactly one OptimizationEngine.  Callers get
it back through ``engine.state`` for inspection:

  Read accessors:
    .placed_items          tuple of PlacedItem, in placement order
    .volume_used           sum of realized volumes
    .weight_used           sum of placed weights
    .extreme_points        current frontier snapshot
    .fits(origin, dims)    collision / containment query
    .occupied_cells        number of filled grid cells
    .get_fill_rate()       volume_used / container volume

  Mutation (engine only):
    .commit(item, position, rotation)
"""

from __future__ import annotations

from typing import List, Tuple

from loadopt.core.frontier import ExtremePointFrontier
from loadopt.core.models import Container, Dims, Item, PlacedItem, Point
from loadopt.core.occupancy import OccupancyGrid


class PackingState:
    """Committed placements plus the grid and frontier they produced."""

    __slots__ = ("container", "_placed", "_volume_used", "_weight_used",
                 "_frontier", "_grid")

    def __init__(self, container: Container) -> None:
        self.container: Container = container
        self._placed: List[PlacedItem] = []
        self._volume_used: float = 0.0
        self._weight_used: float = 0.0
        self._frontier = ExtremePointFrontier(container)
        self._grid = OccupancyGrid(container.dims)

    # ── Read accessors ───────────────────────────────────────────────────

    @property
    def placed_items(self) -> Tuple[PlacedItem, ...]:
        return tuple(self._placed)

    @property
    def volume_used(self) -> float:
        return self._volume_used

    @property
    def weight_used(self) -> float:
        return self._weight_used

    @property
    def extreme_points(self) -> Tuple[Point, ...]:
        return self._frontier.points

    @property
    def occupied_cells(self) -> int:
        return self._grid.occupied_cells

    def fits(self, origin: Point, dims: Dims) -> bool:
        return self._grid.fits(origin, dims)

    def can_carry(self, weight: float) -> bool:
        """True if *weight* more still respects the container limit."""
        return self._weight_used + weight <= self.container.max_weight

    def get_fill_rate(self) -> float:
        return self._volume_used / self.container.volume

    # ── Mutation (engine only) ───────────────────────────────────────────

    def commit(self, item: Item, position: Point, rotation: Dims) -> PlacedItem:
        """
        Record a feasible placement and update totals, grid and frontier.

        **Called by the OptimizationEngine only**, after it has checked
        feasibility.  Placements are permanent.
        """
        placed = PlacedItem(item=item, position=tuple(position),
                            rotation=tuple(rotation))
        self._placed.append(placed)
        self._volume_used += placed.volume
        self._weight_used += item.weight
        self._grid.occupy(position, rotation)
        self._frontier.update(position, rotation)
        return placed

    def __repr__(self) -> str:
        return (
            f"PackingState(items={len(self._placed)}, "
            f"fill={self.get_fill_rate():.1%}, "
            f"weight={self._weight_used:.1f}/{self.container.max_weight}, "
            f"frontier={len(self._frontier)})"
        )
