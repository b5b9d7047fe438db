"""Packing reports and their export.

Provides a dataclass summarizing one packing run, rule-based loading
recommendations derived from its metrics, and utilities for exporting
results to JSON and CSV formats.
"""

from __future__ import annotations

import csv
import json
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Sequence

from loadopt.core.models import Container, Item, PackingResult
from loadopt.core.orientation import PlacementMode

# Thresholds for recommendations (percent)
NEAR_OPTIMAL_PCT = 90.0
UNDERUSED_PCT = 50.0
WEIGHT_BOUND_PCT = 95.0

LAYOUT_FIELDS = ["id", "x", "y", "z", "width", "height", "depth", "weight"]


@dataclass
class PackingReport:
    """Metrics for a single packing run.

    Attributes:
        items_requested: Number of items handed to the engine.
        items_loaded: Number of items placed.
        excluded_ids: Ids of items that could not be placed.
        space_utilization: Used volume over container volume (0-100).
        weight_utilization: Used weight over weight limit (0-100).
        efficiency: Mean of the two utilizations.
        volume_used: Sum of placed volumes, in cubed job units.
        container_volume: Container volume, in cubed job units.
        weight_used: Sum of placed weights in kg.
        placement_mode: "free" or "vertical-only".
        unit: Linear unit of the run, if known.
        runtime_seconds: Wall time spent in the engine.
        recommendations: Human-readable loading advice.
        created_at: Report timestamp.
    """

    items_requested: int
    items_loaded: int
    excluded_ids: list[str]
    space_utilization: float
    weight_utilization: float
    efficiency: float
    volume_used: float
    container_volume: float
    weight_used: float
    placement_mode: str
    unit: str | None = None
    runtime_seconds: float = 0.0
    recommendations: list[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def items_excluded(self) -> int:
        return self.items_requested - self.items_loaded

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary with ISO timestamp.

        Example:
            >>> r = PackingReport(2, 1, ["b"], 50.0, 10.0, 30.0, 500, 1000, 10, "free")
            >>> r.to_dict()["items_excluded"]
            1
        """
        d = asdict(self)
        d["items_excluded"] = self.items_excluded
        d["created_at"] = self.created_at.isoformat()
        return d


def build_report(
    result: PackingResult,
    container: Container,
    items_requested: int,
    placement_mode: PlacementMode = PlacementMode.FREE,
    unit: str | None = None,
    runtime_seconds: float = 0.0,
) -> PackingReport:
    """Assemble a PackingReport (with recommendations) from an engine result."""
    weight_used = sum(p.weight for p in result.placed_items)
    report = PackingReport(
        items_requested=items_requested,
        items_loaded=result.total_items,
        excluded_ids=[i.id for i in result.excluded_items],
        space_utilization=result.space_utilization,
        weight_utilization=result.weight_utilization,
        efficiency=result.efficiency,
        volume_used=sum(p.volume for p in result.placed_items),
        container_volume=container.volume,
        weight_used=weight_used,
        placement_mode=placement_mode.value,
        unit=unit,
        runtime_seconds=runtime_seconds,
    )
    report.recommendations = recommend(result, container, placement_mode)
    return report


def recommend(
    result: PackingResult,
    container: Container,
    placement_mode: PlacementMode = PlacementMode.FREE,
) -> list[str]:
    """Loading advice derived from the result's utilization and exclusions."""
    tips: list[str] = []
    excluded: Sequence[Item] = result.excluded_items
    weight_used = sum(p.weight for p in result.placed_items)
    remaining_weight = container.max_weight - weight_used

    if excluded:
        too_heavy = [i for i in excluded if i.weight > remaining_weight]
        no_room = len(excluded) - len(too_heavy)
        if too_heavy:
            tips.append(
                f"{len(too_heavy)} item(s) exceed the remaining weight allowance "
                f"of {remaining_weight:g} kg; split the load or use a container "
                f"with a higher weight limit"
            )
        if no_room:
            tips.append(
                f"{no_room} item(s) did not fit in the remaining space; consider "
                f"smaller packaging units or a larger container"
            )
        if placement_mode is PlacementMode.VERTICAL_ONLY and no_room:
            tips.append(
                "Vertical-only placement limits rotation; allowing items to lie "
                "flat may fit more of them"
            )
    elif result.space_utilization >= NEAR_OPTIMAL_PCT:
        tips.append("Near-optimal loading achieved with the current configuration")
    else:
        tips.append("All items loaded")

    if result.weight_utilization >= WEIGHT_BOUND_PCT:
        tips.append("Load is weight-bound; volume cannot be used further")
    elif (result.space_utilization < UNDERUSED_PCT
            and result.weight_utilization < UNDERUSED_PCT and not excluded):
        tips.append(
            f"Only {result.space_utilization:.0f}% of the volume is used; a smaller "
            f"container profile may be more economical"
        )
    return tips


def export_to_json(
    report: PackingReport,
    output_path: Path | str,
    result: PackingResult | None = None,
) -> None:
    """Export a report (and optionally the full placement list) to JSON.

    Args:
        report: PackingReport to export.
        output_path: Path to output JSON file.
        result: If given, its ``to_dict`` (placements and excluded ids) is
            included under "result".
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    data = report.to_dict()
    if result is not None:
        data["result"] = result.to_dict()

    with output_path.open("w") as f:
        json.dump(data, f, indent=2)


def export_layout_csv(result: PackingResult, output_path: Path | str) -> None:
    """Export one CSV row per placed item, in placement order.

    An empty result still produces a file with the header row.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with output_path.open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=LAYOUT_FIELDS)
        writer.writeheader()
        for p in result.placed_items:
            (x, y, z), (w, h, d) = p.position, p.rotation
            writer.writerow({
                "id": p.id, "x": x, "y": y, "z": z,
                "width": w, "height": h, "depth": d, "weight": p.weight,
            })


def format_summary(report: PackingReport) -> str:
    """Generate a human-readable summary of a packing report.

    Returns:
        Formatted multi-line summary string.
    """
    unit = report.unit or "units"
    lines = [
        "=" * 60,
        f"Packing summary ({report.placement_mode} placement)",
        "=" * 60,
        f"Items loaded:       {report.items_loaded} / {report.items_requested}",
        f"Items excluded:     {report.items_excluded}",
        f"Space utilization:  {report.space_utilization:.2f}%",
        f"Weight utilization: {report.weight_utilization:.2f}%",
        f"Efficiency:         {report.efficiency:.2f}%",
        f"Volume used:        {report.volume_used:,.1f} / {report.container_volume:,.1f} {unit}³",
        f"Weight used:        {report.weight_used:,.1f} kg",
        f"Runtime:            {report.runtime_seconds:.2f} seconds",
    ]
    if report.recommendations:
        lines.append("")
        lines.append("Recommendations:")
        lines.extend(f"  - {tip}" for tip in report.recommendations)
    lines.append("=" * 60)
    return "\n".join(lines)
