"""
Command-line entry point: ``loadopt-run``.

Usage (CLI):
    loadopt-run jobs/tiles.yaml --output-dir results -v
    loadopt-run --generate 40 --profile eur-pallet --category tools
    loadopt-run --list-profiles
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from loadopt.config import RunConfig, load_config
from loadopt.core.errors import ConfigurationError
from loadopt.core.units import Unit
from loadopt.io.loader import load_request
from loadopt.monitoring.metrics import format_summary
from loadopt.profiles import get_profile, list_profiles
from loadopt.runner.dataset import generate_items
from loadopt.runner.job import run_items, run_job

logger = logging.getLogger("loadopt")

EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="loadopt-run",
        description="3D load planner for cartons, pallets and containers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  loadopt-run jobs/tiles.yaml --output-dir results
  loadopt-run --generate 40 --profile eur-pallet --category tools -v
  loadopt-run --list-profiles
        """,
    )

    # Job
    src = parser.add_mutually_exclusive_group()
    src.add_argument("job", nargs="?", help="Path to a job file (.json/.yaml)")
    src.add_argument("--generate", type=int, metavar="N",
                     help="Generate N random items instead of reading a job")
    src.add_argument("--list-profiles", action="store_true",
                     help="List the standard container profiles and exit")

    # Generated jobs
    parser.add_argument("--profile", default="eur-pallet",
                        help="Container profile for --generate (default: eur-pallet)")
    parser.add_argument("--unit", default=Unit.CENTIMETER.value,
                        choices=[u.value for u in Unit],
                        help="Working unit for --generate (default: cm)")
    parser.add_argument("--category", default=None,
                        help="Product category for --generate, e.g. tiles or tools")
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--gen-min", type=int, default=10)
    parser.add_argument("--gen-max", type=int, default=60)

    # Output
    parser.add_argument("--config", default=None, help="RunConfig YAML file")
    parser.add_argument("--output-dir", default=None,
                        help="Write report.json and layout.csv here")
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config) if args.config else RunConfig()
        if args.output_dir:
            config.output_dir = args.output_dir
        if args.verbose:
            config.verbose = True

        logging.basicConfig(
            level=logging.DEBUG if config.verbose else logging.INFO,
            format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
        )

        if args.list_profiles:
            for p in list_profiles():
                print(f"  {p.name:<12} {p.width:g}×{p.height:g}×{p.depth:g} "
                      f"{p.unit.value}  max {p.max_weight:g} kg  {p.description}")
            return 0

        if args.job:
            logger.info("Loading job: %s", args.job)
            _, report = run_job(load_request(args.job), config)
        else:
            count = 50 if args.generate is None else args.generate
            logger.info("Generating %d items (dims %d-%d, seed=%d)",
                        count, args.gen_min, args.gen_max, args.seed)
            container = get_profile(args.profile).to_container(args.unit)
            items = generate_items(count, seed=args.seed,
                                   min_dim=args.gen_min, max_dim=args.gen_max)
            _, report = run_items(container, items, category=args.category,
                                  unit=args.unit, config=config)
    except ConfigurationError as e:
        logger.error("%s", e)
        return EXIT_CONFIG_ERROR

    print(format_summary(report))
    return 0


if __name__ == "__main__":
    sys.exit(main())
