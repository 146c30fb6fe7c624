"""
Application layer: Use cases and workflow orchestration.

This layer coordinates between domain logic and infrastructure,
implementing the upload, course view, and comparison workflows.
"""

from application.dashboard import (
    Dashboard,
    build_dashboard,
    describe_entity,
    load_coverage_rows,
    load_dashboard,
    search_rows,
)
from application.selection import Selection, available_entities, compare_selection
from application.summary import dashboard_stats, log_dashboard_summary, log_region_summary
from application.tables import (
    coverage_heatmap_table,
    coverage_heatmap_table_and_save,
    entity_coverage_table,
    hierarchy_spans,
    region_summary,
    region_table,
    region_table_and_save,
    rows_table,
    save_table,
)

__all__ = [
    # Main workflows
    "load_coverage_rows",
    "build_dashboard",
    "load_dashboard",
    "describe_entity",
    "search_rows",
    "Dashboard",
    # Comparison
    "Selection",
    "available_entities",
    "compare_selection",
    # Tables
    "coverage_heatmap_table",
    "coverage_heatmap_table_and_save",
    "entity_coverage_table",
    "hierarchy_spans",
    "region_table",
    "region_table_and_save",
    "region_summary",
    "rows_table",
    "save_table",
    # Summaries
    "dashboard_stats",
    "log_dashboard_summary",
    "log_region_summary",
]
