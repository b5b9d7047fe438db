"""
Job loader — read packing jobs from JSON or YAML files.

Expected schema (YAML shown)::

    unit: cm
    category: tiles
    profile: 20ft            # or: container: {width, height, depth, max_weight}
    items:
      - {id: carton-a, width: 60, height: 40, depth: 40, weight: 12, quantity: 30}

Usage:
    from loadopt.io.loader import load_request, build_job
    container, items = build_job(load_request("jobs/tiles.yaml"))
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, List, Tuple

import yaml
from pydantic import ValidationError

from loadopt.core.errors import ConfigurationError
from loadopt.core.models import Container, Item
from loadopt.io.schemas import ItemLineSchema, PackingRequestSchema
from loadopt.profiles import get_profile

_YAML_SUFFIXES = (".yaml", ".yml")


def parse_request(data: Any) -> PackingRequestSchema:
    """
    Validate a decoded job mapping.

    Raises:
        ConfigurationError: with pydantic's error report when invalid.
    """
    try:
        return PackingRequestSchema.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid packing job: {e}") from e


def load_request(path: Path | str) -> PackingRequestSchema:
    """
    Load and validate a job file (``.json``, ``.yaml`` or ``.yml``).

    Raises:
        ConfigurationError: for an unsupported suffix, an unreadable file,
            malformed JSON/YAML or a job that fails validation.
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix != ".json" and suffix not in _YAML_SUFFIXES:
        raise ConfigurationError(
            f"Unsupported job file type '{suffix}' (use .json, .yaml or .yml)"
        )
    try:
        with path.open("r") as f:
            data = json.load(f) if suffix == ".json" else yaml.safe_load(f)
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Cannot read job {path}: {e}") from e
    return parse_request(data)


def expand_items(lines: Iterable[ItemLineSchema]) -> List[Item]:
    """One Item per unit of quantity, keeping line order."""
    items: List[Item] = []
    for n, line in enumerate(lines, start=1):
        base_id = line.id or f"item-{n}"
        for k in range(1, line.quantity + 1):
            items.append(Item(
                id=base_id if line.quantity == 1 else f"{base_id}-{k}",
                width=line.width,
                height=line.height,
                depth=line.depth,
                weight=line.weight,
            ))
    return items


def build_job(request: PackingRequestSchema) -> Tuple[Container, List[Item]]:
    """Resolve the container (in the job unit) and expand the items."""
    if request.profile is not None:
        container = get_profile(request.profile).to_container(request.unit)
    else:
        c = request.container
        container = Container(width=c.width, height=c.height,
                              depth=c.depth, max_weight=c.max_weight)
    return container, expand_items(request.items)
