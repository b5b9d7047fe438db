"""
Linear unit conversion.

Every conversion goes through the canonical unit (millimeter).  The engine
itself is unit-agnostic: convert item and container figures to one unit
before building an engine.

Usage:
    from loadopt.core.units import Unit, convert
    convert(120, "cm", Unit.INCH)   # 47.24...
"""

from __future__ import annotations

from enum import Enum

from loadopt.core.errors import ConfigurationError


class Unit(str, Enum):
    MILLIMETER = "mm"
    CENTIMETER = "cm"
    INCH = "inch"


# Millimeters per unit
_MM_PER_UNIT: dict[Unit, float] = {
    Unit.MILLIMETER: 1.0,
    Unit.CENTIMETER: 10.0,
    Unit.INCH: 25.4,
}

_ALIASES: dict[str, Unit] = {
    "mm": Unit.MILLIMETER,
    "millimeter": Unit.MILLIMETER,
    "millimeters": Unit.MILLIMETER,
    "cm": Unit.CENTIMETER,
    "centimeter": Unit.CENTIMETER,
    "centimeters": Unit.CENTIMETER,
    "in": Unit.INCH,
    "inch": Unit.INCH,
    "inches": Unit.INCH,
}

CANONICAL_UNIT = Unit.MILLIMETER


def parse_unit(unit: Unit | str) -> Unit:
    """
    Resolve a unit given as enum member, symbol or long name.

    Raises:
        ConfigurationError: for unknown units.
    """
    if isinstance(unit, Unit):
        return unit
    key = str(unit).strip().lower()
    if key not in _ALIASES:
        raise ConfigurationError(
            f"Unknown unit {unit!r}.  Available: {[u.value for u in Unit]}"
        )
    return _ALIASES[key]


def to_canonical(value: float, unit: Unit | str) -> float:
    """Convert *value* expressed in *unit* to millimeters."""
    return value * _MM_PER_UNIT[parse_unit(unit)]


def from_canonical(value: float, unit: Unit | str) -> float:
    """Convert *value* in millimeters to *unit*."""
    return value / _MM_PER_UNIT[parse_unit(unit)]


def convert(value: float, from_unit: Unit | str, to_unit: Unit | str) -> float:
    """Convert between any two supported units."""
    src, dst = parse_unit(from_unit), parse_unit(to_unit)
    if src is dst:
        return value
    return from_canonical(to_canonical(value, src), dst)
