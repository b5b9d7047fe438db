"""
loadopt — 3D load planning for cartons, pallets and shipping containers.

Public API:
    from loadopt import Container, Item, OptimizationEngine
    engine = OptimizationEngine(Container(120, 150, 80, 1000), "tools")
    result = engine.optimize_packing(items)
"""

from loadopt.algorithms.engine import OptimizationEngine
from loadopt.core.errors import ConfigurationError, LoadOptError
from loadopt.core.models import Container, Item, PackingResult, PlacedItem
from loadopt.core.orientation import PlacementMode

__all__ = [
    "OptimizationEngine",
    "Container",
    "Item",
    "PlacedItem",
    "PackingResult",
    "PlacementMode",
    "ConfigurationError",
    "LoadOptError",
]

__version__ = "0.1.0"
