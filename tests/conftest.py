"""Shared fixtures for the loadopt test-suite."""

import os
import sys

import pytest

# Make the src/ layout importable without an installed package
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from loadopt.core.models import Container, Item  # noqa: E402
from loadopt.core.occupancy import OccupancyGrid  # noqa: E402

JOBS_DIR = os.path.join(os.path.dirname(__file__), "..", "jobs")


@pytest.fixture
def cube_container():
    """10×10×10 container with a generous weight limit."""
    return Container(width=10, height=10, depth=10, max_weight=1000)


@pytest.fixture
def pallet_container():
    """EUR pallet footprint in cm."""
    return Container(width=80, height=150, depth=120, max_weight=1000)


@pytest.fixture
def jobs_dir():
    return JOBS_DIR


def replay_into_grid(container, placed_items):
    """
    Re-commit placements into a fresh grid; fails on the first shared cell
    or out-of-bounds box.
    """
    grid = OccupancyGrid(container.dims)
    for p in placed_items:
        assert grid.fits(p.position, p.rotation), (
            f"{p.id} at {p.position} {p.rotation} overlaps or leaves the container"
        )
        grid.occupy(p.position, p.rotation)
    return grid


def make_items(dims_weights):
    """Items from (w, h, d, weight) tuples, ids '0', '1', ..."""
    return [Item(id=str(i), width=w, height=h, depth=d, weight=wt)
            for i, (w, h, d, wt) in enumerate(dims_weights)]
