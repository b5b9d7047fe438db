"""
Standard container profiles.

Profiles live in ``data/profiles.yaml`` next to this module so new sizes
can be added without code changes.

Usage:
    from loadopt.profiles import get_profile
    container = get_profile("20ft").to_container("cm")
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

from loadopt.core.errors import ConfigurationError
from loadopt.core.models import Container
from loadopt.core.units import Unit, convert, parse_unit

PROFILES_PATH = Path(__file__).parent / "data" / "profiles.yaml"


@dataclass(frozen=True)
class ContainerProfile:
    """A named standard container; linear figures are in ``unit``."""

    name: str
    width: float
    height: float
    depth: float
    max_weight: float
    unit: Unit
    description: str = ""

    def to_container(self, unit: Unit | str | None = None) -> Container:
        """Container in *unit* (defaults to the profile's own unit)."""
        target = self.unit if unit is None else parse_unit(unit)
        return Container(
            width=convert(self.width, self.unit, target),
            height=convert(self.height, self.unit, target),
            depth=convert(self.depth, self.unit, target),
            max_weight=self.max_weight,
        )

    @classmethod
    def from_dict(cls, name: str, d: dict[str, Any]) -> "ContainerProfile":
        try:
            return cls(
                name=name,
                width=float(d["width"]),
                height=float(d["height"]),
                depth=float(d["depth"]),
                max_weight=float(d["max_weight"]),
                unit=parse_unit(d.get("unit", "mm")),
                description=d.get("description", ""),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid profile {name!r}: {e}") from e


def load_profiles(path: Path | str = PROFILES_PATH) -> dict[str, ContainerProfile]:
    """Read a profile table from a YAML file."""
    with Path(path).open("r") as f:
        data = yaml.safe_load(f) or {}
    return {
        str(name): ContainerProfile.from_dict(str(name), spec)
        for name, spec in data.get("profiles", {}).items()
    }


@lru_cache(maxsize=1)
def _default_profiles() -> dict[str, ContainerProfile]:
    return load_profiles(PROFILES_PATH)


def list_profiles() -> list[ContainerProfile]:
    """All bundled profiles, in file order."""
    return list(_default_profiles().values())


def get_profile(name: str) -> ContainerProfile:
    """
    Look up a bundled profile by name.

    Raises:
        ConfigurationError: for unknown names.
    """
    profiles = _default_profiles()
    if name not in profiles:
        available = ", ".join(profiles)
        raise ConfigurationError(f"Unknown profile '{name}'.  Available: [{available}]")
    return profiles[name]
