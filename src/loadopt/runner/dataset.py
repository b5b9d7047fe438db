"""Synthetic item generation for demos and benchmarks."""

from __future__ import annotations

import random

from loadopt.core.errors import ConfigurationError
from loadopt.core.models import Item


def generate_items(
    count: int = 50,
    seed: int | None = None,
    min_dim: int = 10,
    max_dim: int = 60,
    min_weight: float = 0.5,
    max_weight: float = 50.0,
) -> list[Item]:
    """
    Generate random items for experimentation.

    Dimensions are whole units so every item covers exact grid cells.

    Args:
        count: Number of items to generate
        seed: Random seed for reproducibility (default: None)
        min_dim, max_dim: Inclusive range for each dimension
        min_weight, max_weight: Range for the weight in kg

    Returns:
        List of Item objects with ids "0", "1", ...

    Raises:
        ConfigurationError: if a count or range is invalid.
    """
    if count < 0:
        raise ConfigurationError(f"Item count must be non-negative, got {count}")
    if not 0 < min_dim <= max_dim:
        raise ConfigurationError(
            f"Dimension range must satisfy 0 < min <= max, got {min_dim}-{max_dim}"
        )
    if not 0 <= min_weight <= max_weight:
        raise ConfigurationError(
            f"Weight range must satisfy 0 <= min <= max, got {min_weight}-{max_weight}"
        )

    rng = random.Random(seed)

    items = []
    for i in range(count):
        width = rng.randint(min_dim, max_dim)
        height = rng.randint(min_dim, max_dim)
        depth = rng.randint(min_dim, max_dim)
        weight = round(rng.uniform(min_weight, max_weight), 1)

        items.append(Item(id=str(i), width=width, height=height, depth=depth, weight=weight))

    return items
