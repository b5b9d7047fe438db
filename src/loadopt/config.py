"""
Run configuration for the job runner and CLI.

The engine itself takes its few knobs as constructor arguments; RunConfig
bundles them with output settings so a whole run can be described in one
YAML file:

    max_grid_cells: 64000000
    output_dir: results/
    export_csv: true
    verbose: false
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

import yaml

from loadopt.core.errors import ConfigurationError
from loadopt.core.occupancy import MAX_GRID_CELLS


@dataclass
class RunConfig:
    """
    All tuneable parameters for a single job run.

    Attributes:
        max_grid_cells: Occupancy lattice ceiling passed to the engine.
        output_dir:     If set, the report (and layout CSV) are written here.
        export_csv:     Also write the per-item layout CSV.
        verbose:        Log every placement decision.
    """
    max_grid_cells: int = MAX_GRID_CELLS
    output_dir: Optional[str] = None
    export_csv: bool = True
    verbose: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "max_grid_cells": self.max_grid_cells,
            "output_dir": self.output_dir,
            "export_csv": self.export_csv,
            "verbose": self.verbose,
        }

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "RunConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(d) - known
        if unknown:
            raise ConfigurationError(f"Unknown config keys: {sorted(unknown)}")
        config = cls(**d)
        try:
            config.max_grid_cells = int(config.max_grid_cells)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(
                f"max_grid_cells must be an integer, got {d['max_grid_cells']!r}"
            ) from e
        if config.max_grid_cells <= 0:
            raise ConfigurationError("max_grid_cells must be positive")
        for name in ("export_csv", "verbose"):
            if not isinstance(getattr(config, name), bool):
                raise ConfigurationError(
                    f"{name} must be true or false, got {getattr(config, name)!r}"
                )
        if config.output_dir is not None:
            config.output_dir = str(config.output_dir)
        return config


def load_config(path: Path | str) -> RunConfig:
    """Read a RunConfig from a YAML file; an empty file gives the defaults."""
    try:
        with Path(path).open("r") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Cannot read config {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path}: expected a mapping at top level")
    return RunConfig.from_dict(data)
