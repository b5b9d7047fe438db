"""
Extreme point optimization engine for single-container loading.

Algorithm overview:
    Items are sorted by decreasing intrinsic volume so the large ones are
    placed while the frontier is still simple.  For each item, every
    (extreme point × allowed orientation) pair is tested for feasibility:

      - the box lies inside the container
      - the running weight plus the item's weight stays within the limit
      - the occupancy grid reports every covered cell free

    Among feasible pairs the one with the lowest fitness x + y + z wins
    (bottom-left-back fill).  Ties keep the first pair found, so iteration
    order over the frontier breaks them.  Items with no feasible pair are
    excluded without error.

Usage:
    engine = OptimizationEngine(Container(589, 239, 235, 28230), "tiles")
    result = engine.optimize_packing(items)
    result.space_utilization, result.excluded_items
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, List, Optional, Tuple

from loadopt.core.errors import ConfigurationError
from loadopt.core.models import Container, Dims, Item, PackingResult, Point
from loadopt.core.occupancy import MAX_GRID_CELLS, grid_shape
from loadopt.core.orientation import Orientation, PlacementMode, mode_for_category
from loadopt.core.state import PackingState

logger = logging.getLogger(__name__)


class OptimizationEngine:
    """
    Greedy extreme-point packer for one container and one run.

    The engine owns its PackingState exclusively.  It is single-use:
    construct, call ``optimize_packing`` once, then read ``result`` or
    ``state``.  A new run needs a new engine.

    Args:
        container:        Target container (already validated on creation).
        product_category: Caller's product category.  Categories that must
                          stand upright (see ``VERTICAL_ONLY_CATEGORIES``)
                          select vertical-only placement; anything else,
                          including None, allows free rotation.
        max_grid_cells:   Ceiling on the occupancy lattice size.

    Raises:
        ConfigurationError: if the container needs more grid cells than
            ``max_grid_cells``.
    """

    def __init__(
        self,
        container: Container,
        product_category: Optional[str] = None,
        *,
        max_grid_cells: int = MAX_GRID_CELLS,
    ) -> None:
        cells = math.prod(grid_shape(container.dims))
        if cells > max_grid_cells:
            raise ConfigurationError(
                f"Container {container.width}×{container.height}×{container.depth} "
                f"needs {cells:,} grid cells (limit {max_grid_cells:,}); "
                f"express the job in a coarser unit"
            )
        self._container = container
        self._mode = mode_for_category(product_category)
        self._state = PackingState(container)
        self._result: Optional[PackingResult] = None

    # ── Accessors ────────────────────────────────────────────────────────

    @property
    def container(self) -> Container:
        return self._container

    @property
    def placement_mode(self) -> PlacementMode:
        return self._mode

    @property
    def state(self) -> PackingState:
        """Packing state; treat as read-only."""
        return self._state

    @property
    def result(self) -> Optional[PackingResult]:
        """Result of the run, or None before ``optimize_packing``."""
        return self._result

    # ── Public API ───────────────────────────────────────────────────────

    def optimize_packing(self, items: Iterable[Item]) -> PackingResult:
        """
        Place as many *items* as possible and report utilization.

        Returns:
            PackingResult with placed items in placement order, the count
            placed, space/weight utilization (percent, 2 decimals), their
            mean as efficiency, and the excluded items.

        Raises:
            RuntimeError: if this engine has already run.
        """
        if self._result is not None:
            raise RuntimeError(
                "OptimizationEngine already ran; create a new engine for another run"
            )

        ordered = sorted(items, key=lambda it: it.volume, reverse=True)
        logger.info(
            "Packing %d items into %s×%s×%s (max %s kg, %s mode)",
            len(ordered), self._container.width, self._container.height,
            self._container.depth, self._container.max_weight, self._mode.value,
        )

        excluded: List[Item] = []
        for item in ordered:
            best = self._find_best_placement(item)
            if best is None:
                logger.debug("Excluded %s: no feasible position", item.id)
                excluded.append(item)
                continue
            position, rotation = best
            self._state.commit(item, position, rotation)
            logger.debug("Placed %s at %s as %s", item.id, position, rotation)

        self._result = self._summarize(excluded)
        logger.info(
            "Placed %d/%d items: space %.2f%%, weight %.2f%%",
            self._result.total_items, len(ordered),
            self._result.space_utilization, self._result.weight_utilization,
        )
        return self._result

    # ── Internals ────────────────────────────────────────────────────────

    def _find_best_placement(self, item: Item) -> Optional[Tuple[Point, Dims]]:
        state = self._state
        if not state.can_carry(item.weight):
            return None

        orientations = Orientation.for_mode(item.dims, self._mode)
        best_fitness = math.inf
        best: Optional[Tuple[Point, Dims]] = None

        for point in state.extreme_points:
            fitness = sum(point)
            if fitness >= best_fitness:
                continue
            for rotation in orientations:
                if state.fits(point, rotation):
                    best_fitness = fitness
                    best = (point, rotation)
                    break
        return best

    def _summarize(self, excluded: List[Item]) -> PackingResult:
        state = self._state
        space = _round_pct(state.volume_used / self._container.volume * 100)
        weight = _round_pct(state.weight_used / self._container.max_weight * 100)
        placed = state.placed_items
        return PackingResult(
            placed_items=placed,
            total_items=len(placed),
            space_utilization=space,
            weight_utilization=weight,
            efficiency=(space + weight) / 2,
            excluded_items=tuple(excluded),
        )


def _round_pct(value: float) -> float:
    """Round a non-negative percentage to 2 decimals, halves up (42.1875 -> 42.19)."""
    return math.floor(value * 100 + 0.5) / 100
