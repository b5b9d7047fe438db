"""Monitoring module for loadopt.

Provides packing reports, recommendations and their JSON/CSV export.
"""

from .metrics import (
    PackingReport,
    build_report,
    export_layout_csv,
    export_to_json,
    format_summary,
    recommend,
)

__all__ = [
    "PackingReport",
    "build_report",
    "export_layout_csv",
    "export_to_json",
    "format_summary",
    "recommend",
]
