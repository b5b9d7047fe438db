"""
Unit and integration tests for the extreme-point OptimizationEngine.

Run with:
    python -m pytest tests/test_engine.py -v

Tests cover:
- Reference scenarios (full cube, no room, weight limit, bad container)
- Sorting, tie-breaking and orientation choice
- Invariants over random item sets (bounds, overlap, weight, metrics)
- Vertical-only placement for upright categories
- Single-use lifecycle and grid-size ceiling
"""

import pytest

from conftest import make_items, replay_into_grid
from loadopt.algorithms.engine import OptimizationEngine
from loadopt.core.errors import ConfigurationError
from loadopt.core.models import Container, Item, PlacedItem
from loadopt.core.orientation import PlacementMode
from loadopt.runner.dataset import generate_items


# ---------------------------------------------------------------------------
# 1. Reference scenarios
# ---------------------------------------------------------------------------

class TestScenarios:
    def test_single_item_fills_container(self, cube_container):
        """A 10-cube in a 10-cube container lands at the origin and fills it."""
        engine = OptimizationEngine(cube_container)
        result = engine.optimize_packing(make_items([(10, 10, 10, 5)]))

        assert result.total_items == 1
        assert result.placed_items[0].position == (0, 0, 0)
        assert result.space_utilization == 100.0
        assert result.weight_utilization == 0.5
        assert result.efficiency == pytest.approx(50.25)

    def test_second_item_has_no_room(self):
        """Two 3-cubes cannot share a 4-cube container."""
        engine = OptimizationEngine(Container(4, 4, 4, 100))
        items = make_items([(3, 3, 3, 1), (3, 3, 3, 1)])
        result = engine.optimize_packing(items)

        assert result.total_items == 1
        assert len(result.excluded_items) == 1
        assert result.excluded_items[0].id == "1"
        assert result.space_utilization == 42.19

    def test_weight_limit_excludes_second_item(self):
        """The second item is rejected on weight alone despite free space."""
        engine = OptimizationEngine(Container(10, 10, 10, 10))
        result = engine.optimize_packing(make_items([(2, 2, 2, 6), (2, 2, 2, 6)]))

        assert [p.id for p in result.placed_items] == ["0"]
        assert [i.id for i in result.excluded_items] == ["1"]
        assert result.weight_utilization == 60.0
        assert engine.state.weight_used == 6

    @pytest.mark.parametrize("dims", [
        (0, 10, 10, 100),
        (10, -1, 10, 100),
        (10, 10, 0, 100),
        (10, 10, 10, 0),
        (10, 10, 10, float("nan")),
    ])
    def test_non_positive_container_rejected(self, dims):
        with pytest.raises(ConfigurationError):
            Container(*dims)

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            Container(width=0, height=1, depth=1, max_weight=1)

    @pytest.mark.parametrize("weight", [-0.5, float("nan")])
    def test_invalid_item_weight_rejected(self, weight):
        with pytest.raises(ConfigurationError, match="weight"):
            Item(id="bad", width=1, height=1, depth=1, weight=weight)

    def test_zero_size_item_is_excluded_not_rejected(self, cube_container):
        result = OptimizationEngine(cube_container).optimize_packing(
            [Item(id="flat", width=0, height=1, depth=1, weight=1)]
        )

        assert result.total_items == 0
        assert [i.id for i in result.excluded_items] == ["flat"]

    def test_eight_half_cubes_fill_container(self, cube_container):
        """Eight 5-cubes tile a 10-cube exactly via the extreme points."""
        engine = OptimizationEngine(cube_container)
        result = engine.optimize_packing(make_items([(5, 5, 5, 1)] * 8))

        assert result.total_items == 8
        assert result.space_utilization == 100.0
        corners = {p.position for p in result.placed_items}
        assert corners == {
            (x, y, z) for x in (0, 5) for y in (0, 5) for z in (0, 5)
        }


# ---------------------------------------------------------------------------
# 2. Search behaviour
# ---------------------------------------------------------------------------

class TestSearch:
    def test_items_processed_largest_first(self, cube_container):
        engine = OptimizationEngine(cube_container)
        items = make_items([(1, 1, 1, 1), (4, 4, 4, 1), (2, 2, 2, 1)])
        result = engine.optimize_packing(items)

        assert [p.id for p in result.placed_items] == ["1", "2", "0"]

    def test_equal_volumes_keep_input_order(self, cube_container):
        engine = OptimizationEngine(cube_container)
        items = [Item("b", 2, 3, 4), Item("a", 4, 3, 2), Item("c", 3, 4, 2)]
        result = engine.optimize_packing(items)

        assert [p.id for p in result.placed_items] == ["b", "a", "c"]

    def test_tie_goes_to_first_frontier_point(self, cube_container):
        """After the first commit, (5,0,0) is the first of three equal-fitness anchors."""
        engine = OptimizationEngine(cube_container)
        result = engine.optimize_packing(make_items([(5, 5, 5, 1), (5, 5, 5, 1)]))

        assert result.placed_items[1].position == (5, 0, 0)

    def test_free_mode_rotates_to_fit(self):
        engine = OptimizationEngine(Container(10, 2, 2, 100), "tools")
        result = engine.optimize_packing([Item("rod", 2, 10, 2, 1)])

        assert result.total_items == 1
        assert result.placed_items[0].rotation == (10, 2, 2)

    def test_vertical_only_never_lays_item_down(self):
        engine = OptimizationEngine(Container(10, 2, 2, 100), "tiles")
        result = engine.optimize_packing([Item("tall-tile", 2, 10, 2, 1)])

        assert result.total_items == 0
        assert result.excluded_items[0].id == "tall-tile"

    def test_vertical_only_swaps_horizontal_axes(self):
        engine = OptimizationEngine(Container(10, 2, 2, 100), "tiles")
        result = engine.optimize_packing([Item("long-tile", 2, 2, 10, 1)])

        assert result.placed_items[0].rotation == (10, 2, 2)

    def test_oversized_item_excluded(self, cube_container):
        engine = OptimizationEngine(cube_container)
        result = engine.optimize_packing([Item("giant", 11, 11, 11, 1)])

        assert result.total_items == 0
        assert result.space_utilization == 0.0
        excluded = result.excluded_items[0]
        assert not isinstance(excluded, PlacedItem)

    def test_empty_input(self, cube_container):
        result = OptimizationEngine(cube_container).optimize_packing([])

        assert result.total_items == 0
        assert result.efficiency == 0.0

    def test_frontier_after_run(self, cube_container):
        engine = OptimizationEngine(cube_container)
        engine.optimize_packing(make_items([(10, 10, 10, 1)]))

        assert set(engine.state.extreme_points) == {(10, 0, 0), (0, 10, 0), (0, 0, 10)}


# ---------------------------------------------------------------------------
# 3. Invariants over random item sets
# ---------------------------------------------------------------------------

class TestInvariants:
    @pytest.mark.parametrize("seed", [1, 7, 42])
    @pytest.mark.parametrize("category", [None, "tiles"])
    def test_placements_are_valid(self, pallet_container, seed, category):
        items = generate_items(40, seed=seed, min_dim=10, max_dim=60)
        engine = OptimizationEngine(pallet_container, category)
        result = engine.optimize_packing(items)
        state = engine.state

        replay_into_grid(pallet_container, result.placed_items)
        assert state.weight_used <= pallet_container.max_weight
        assert all(pallet_container.contains(p.max_corner) for p in result.placed_items)
        assert result.total_items <= len(items)
        assert result.total_items + len(result.excluded_items) == len(items)
        assert state.volume_used == pytest.approx(
            sum(p.rotation[0] * p.rotation[1] * p.rotation[2] for p in result.placed_items)
        )
        assert state.weight_used == pytest.approx(sum(p.weight for p in result.placed_items))
        assert 0.0 <= result.space_utilization <= 100.0
        assert 0.0 <= result.weight_utilization <= 100.0
        assert result.efficiency == (result.space_utilization + result.weight_utilization) / 2

    @pytest.mark.parametrize("seed", [3, 11])
    def test_weight_limit_binds(self, seed):
        container = Container(80, 150, 120, max_weight=100)
        items = generate_items(30, seed=seed, min_dim=10, max_dim=30, max_weight=40)
        engine = OptimizationEngine(container)
        result = engine.optimize_packing(items)

        assert engine.state.weight_used <= 100
        assert result.weight_utilization <= 100.0
        assert result.excluded_items, "weight limit should exclude some items"

    def test_vertical_only_keeps_height(self, pallet_container):
        items = generate_items(40, seed=5, min_dim=10, max_dim=60)
        result = OptimizationEngine(pallet_container, "Tiles").optimize_packing(items)

        assert result.placed_items
        for p in result.placed_items:
            assert p.rotation[1] == p.item.height, (
                f"{p.id}: height {p.item.height} realized as {p.rotation}"
            )

    def test_rotation_is_permutation_of_item(self, pallet_container):
        items = generate_items(30, seed=9)
        result = OptimizationEngine(pallet_container).optimize_packing(items)

        for p in result.placed_items:
            assert sorted(p.rotation) == sorted(p.item.dims)

    def test_deterministic_output(self, pallet_container):
        """Same items and container always produce the same placements."""
        runs = []
        for _ in range(3):
            items = generate_items(30, seed=21)
            result = OptimizationEngine(pallet_container).optimize_packing(items)
            runs.append([(p.id, p.position, p.rotation) for p in result.placed_items])

        assert runs[0] == runs[1] == runs[2]


# ---------------------------------------------------------------------------
# 4. Lifecycle
# ---------------------------------------------------------------------------

class TestLifecycle:
    def test_result_none_before_run(self, cube_container):
        engine = OptimizationEngine(cube_container)

        assert engine.result is None
        assert engine.state.placed_items == ()
        assert engine.state.extreme_points == ((0, 0, 0),)

    def test_second_run_rejected(self, cube_container):
        engine = OptimizationEngine(cube_container)
        first = engine.optimize_packing(make_items([(1, 1, 1, 1)]))

        with pytest.raises(RuntimeError):
            engine.optimize_packing(make_items([(1, 1, 1, 1)]))
        assert engine.result is first

    @pytest.mark.parametrize("category,mode", [
        (None, PlacementMode.FREE),
        ("tools", PlacementMode.FREE),
        ("tiles", PlacementMode.VERTICAL_ONLY),
    ])
    def test_placement_mode_from_category(self, cube_container, category, mode):
        assert OptimizationEngine(cube_container, category).placement_mode is mode

    def test_grid_ceiling(self):
        container = Container(100, 100, 100, 1)

        with pytest.raises(ConfigurationError):
            OptimizationEngine(container, max_grid_cells=999_999)
        OptimizationEngine(container, max_grid_cells=1_000_000)
