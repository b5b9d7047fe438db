"""Core data models for load planning.

Axis convention used throughout the package:
    x  runs along the container width
    y  runs along the container height (up)
    z  runs along the container depth

All linear figures of one run must share a unit; the engine never converts.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Tuple

from loadopt.core.errors import ConfigurationError

Dims = Tuple[float, float, float]
Point = Tuple[float, float, float]


@dataclass(frozen=True)
class Item:
    """
    A box-shaped item in its intrinsic (unrotated) orientation.

    Raises:
        ConfigurationError: if the weight is negative.
    """

    id: str
    width: float
    height: float
    depth: float
    weight: float = 0.0

    def __post_init__(self) -> None:
        if not self.weight >= 0:
            raise ConfigurationError(
                f"Item {self.id} weight must be non-negative, got {self.weight!r}"
            )

    @property
    def dims(self) -> Dims:
        return (self.width, self.height, self.depth)

    @property
    def volume(self) -> float:
        """Intrinsic volume, independent of orientation."""
        return self.width * self.height * self.depth

    def __repr__(self) -> str:
        return (
            f"Item(id={self.id!r}, "
            f"{self.width}×{self.height}×{self.depth}, "
            f"{self.weight}kg)"
        )


@dataclass(frozen=True)
class PlacedItem:
    """
    An item committed to the container.

    Attributes:
        item:     The original item (intrinsic dimensions untouched).
        position: (x, y, z) of the corner closest to the origin.
        rotation: Realized (w, h, d) actually occupied by the item.
    """

    item: Item
    position: Point
    rotation: Dims

    @property
    def id(self) -> str:
        return self.item.id

    @property
    def weight(self) -> float:
        return self.item.weight

    @property
    def volume(self) -> float:
        w, h, d = self.rotation
        return w * h * d

    @property
    def max_corner(self) -> Point:
        x, y, z = self.position
        w, h, d = self.rotation
        return (x + w, y + h, z + d)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.item.id,
            "position": list(self.position),
            "dims": list(self.rotation),
            "weight": self.item.weight,
        }


@dataclass(frozen=True)
class Container:
    """
    A rectangular container with a weight limit.

    Fixed for the lifetime of one optimization run.

    Raises:
        ConfigurationError: if any dimension or the weight limit is not
            strictly positive.
    """

    width: float
    height: float
    depth: float
    max_weight: float

    def __post_init__(self) -> None:
        for name in ("width", "height", "depth", "max_weight"):
            value = getattr(self, name)
            if not value > 0:
                raise ConfigurationError(
                    f"Container {name} must be positive, got {value!r}"
                )

    @property
    def dims(self) -> Dims:
        return (self.width, self.height, self.depth)

    @property
    def volume(self) -> float:
        return self.width * self.height * self.depth

    def contains(self, point: Point) -> bool:
        """True when *point* lies in the closed box [0, extent] on every axis."""
        return all(0 <= c <= extent for c, extent in zip(point, self.dims))


@dataclass(frozen=True)
class PackingResult:
    """
    Outcome of one optimization run.

    ``total_items`` counts placed items only.  Compare with the number of
    requested items, or read ``excluded_items``, to learn what was left out.
    """

    placed_items: Tuple[PlacedItem, ...]
    total_items: int
    space_utilization: float
    weight_utilization: float
    efficiency: float
    excluded_items: Tuple[Item, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "placed_items": [p.to_dict() for p in self.placed_items],
            "total_items": self.total_items,
            "space_utilization": self.space_utilization,
            "weight_utilization": self.weight_utilization,
            "efficiency": self.efficiency,
            "excluded_item_ids": [i.id for i in self.excluded_items],
        }
