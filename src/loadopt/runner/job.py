"""
Job runner — one container, one engine, one report.

Orchestrates the full pipeline:
  1. Resolve the container and expand item lines (``build_job``)
  2. Run a fresh OptimizationEngine over the items
  3. Build the PackingReport with recommendations
  4. Optionally write report.json and layout.csv under the output directory

Usage:
    from loadopt.runner.job import run_job
    result, report = run_job(load_request("job.yaml"), RunConfig(output_dir="out"))
"""

from __future__ import annotations

import logging
import time
from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence, Tuple

from loadopt.algorithms.engine import OptimizationEngine
from loadopt.config import RunConfig
from loadopt.core.models import Container, Item, PackingResult
from loadopt.io.loader import build_job
from loadopt.io.schemas import PackingRequestSchema
from loadopt.monitoring.metrics import (
    PackingReport,
    build_report,
    export_layout_csv,
    export_to_json,
)

logger = logging.getLogger(__name__)


def run_job(
    request: PackingRequestSchema,
    config: Optional[RunConfig] = None,
) -> Tuple[PackingResult, PackingReport]:
    """Run a validated packing job and return its result and report."""
    container, items = build_job(request)
    return run_items(
        container, items,
        category=request.category,
        unit=request.unit.value,
        config=config,
    )


def run_items(
    container: Container,
    items: Sequence[Item],
    category: Optional[str] = None,
    unit: Optional[str] = None,
    config: Optional[RunConfig] = None,
) -> Tuple[PackingResult, PackingReport]:
    """Pack *items* into *container* with a fresh engine."""
    config = config or RunConfig()

    engine = OptimizationEngine(
        container, category, max_grid_cells=config.max_grid_cells,
    )
    t0 = time.perf_counter()
    result = engine.optimize_packing(items)
    elapsed = time.perf_counter() - t0

    report = build_report(
        result, container,
        items_requested=len(items),
        placement_mode=engine.placement_mode,
        unit=unit,
        runtime_seconds=elapsed,
    )
    if report.items_excluded:
        logger.warning(
            "%d of %d items could not be loaded",
            report.items_excluded, report.items_requested,
        )
    logger.info("Run finished in %.2fs (efficiency %.2f%%)", elapsed, result.efficiency)

    if config.output_dir:
        save_outputs(result, report, config.output_dir, export_csv=config.export_csv)
    return result, report


def save_outputs(
    result: PackingResult,
    report: PackingReport,
    output_dir: Path | str,
    export_csv: bool = True,
) -> Path:
    """
    Write report.json (with placements) and layout.csv.

    Outputs go to ``<output_dir>/<timestamp>/``, suffixed ``_1``, ``_2``, ...
    when a run in the same second already claimed the name.  The directory
    is returned.
    """
    run_dir = _claim_run_dir(Path(output_dir), datetime.now().strftime("%Y%m%d_%H%M%S"))
    export_to_json(report, run_dir / "report.json", result=result)
    if export_csv:
        export_layout_csv(result, run_dir / "layout.csv")
    logger.info("Results saved to %s", run_dir)
    return run_dir


def _claim_run_dir(output_dir: Path, stamp: str) -> Path:
    output_dir.mkdir(parents=True, exist_ok=True)
    run_dir = output_dir / stamp
    n = 0
    while True:
        try:
            run_dir.mkdir()
            return run_dir
        except FileExistsError:
            n += 1
            run_dir = output_dir / f"{stamp}_{n}"
