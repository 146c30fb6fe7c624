"""
CLI entrypoint for the curriculum coverage dashboard.

This script performs the following steps:
- loads .env (optional) and configs/dashboard.yaml
- creates a per-run output folder under outputs/
- reads and parses the coverage CSV, builds the coverage index
- writes the heatmap table (every Area/Category/Subcategory x depth cell)
- optionally writes a single-course table (--entity) and a Venn region table (--compare)
- optionally writes rows matching a free-text search (--search)
- saves a JSON summary and logs a human-readable summary
"""

import argparse
import logging
import os
import sys
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

from application import (
    Selection,
    compare_selection,
    coverage_heatmap_table_and_save,
    dashboard_stats,
    describe_entity,
    entity_coverage_table,
    load_dashboard,
    log_dashboard_summary,
    log_region_summary,
    region_summary,
    region_table_and_save,
    rows_table,
    save_table,
    search_rows,
)
from application.constants import (
    ENTITY_FILENAME,
    HEATMAP_FILENAME,
    LOG_FILENAME,
    REGIONS_FILENAME,
    SEARCH_FILENAME,
    SUMMARY_FILENAME,
)
from infrastructure.config import load_dashboard_config
from infrastructure.constants import DASHBOARD_FILE, ENV_CONFIG_FILE
from infrastructure.io import write_json
from infrastructure.observability import (
    clear_selection_context,
    configure_logging,
    get_log_context,
    make_run_tag,
    set_log_context,
)

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Build curriculum coverage tables from a CSV export")
    p.add_argument(
        "--config",
        type=str,
        default=None,
        help=f"Path to dashboard.yaml (default: ${ENV_CONFIG_FILE} or {DASHBOARD_FILE})",
    )
    p.add_argument(
        "--input",
        type=str,
        default=None,
        help="Coverage CSV to load (overrides input_file in the config)",
    )
    p.add_argument(
        "--env",
        type=str,
        default=".env",
        help="Path to .env file, loaded if present (default: .env)",
    )
    p.add_argument(
        "--entity",
        type=str,
        default=None,
        help="Course ('Number - Name') to export a single-course coverage table for",
    )
    p.add_argument(
        "--compare",
        nargs="+",
        metavar="COURSE",
        default=None,
        help="Two or three courses to compare (Venn regions)",
    )
    p.add_argument(
        "--search",
        type=str,
        default=None,
        help="Export raw rows containing this text (case-insensitive)",
    )
    p.add_argument(
        "--console-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Console log level",
    )
    p.add_argument(
        "--file-level",
        type=str,
        default="DEBUG",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="File log level",
    )
    return p.parse_args(argv)


def _resolve_config_path(arg: str | None) -> Path | None:
    if arg:
        return Path(arg)
    env_path = os.environ.get(ENV_CONFIG_FILE)
    if env_path:
        return Path(env_path)
    return DASHBOARD_FILE if DASHBOARD_FILE.exists() else None


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    env_file = Path(args.env)
    if env_file.exists():
        load_dotenv(env_file, override=True)

    cfg = load_dashboard_config(_resolve_config_path(args.config))
    input_path = Path(args.input) if args.input else cfg.input_path
    if input_path is None:
        raise SystemExit("No input file: pass --input or set input_file in dashboard.yaml")

    # ---- Per-run output folder ----
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    run_id = f"{ts}_{input_path.stem}"
    run_dir = cfg.output_root / run_id
    run_dir.mkdir(parents=True, exist_ok=True)

    log_path = run_dir / LOG_FILENAME
    configure_logging(
        log_file=log_path,
        console_level=getattr(logging, args.console_level),
        file_level=getattr(logging, args.file_level),
    )
    set_log_context(run_id_full=run_id, input_file=str(input_path))

    logger.info("Starting run: run_id=%s (run_tag=%s)", run_id, make_run_tag(run_id))
    logger.info("Run output directory: %s", run_dir)

    # Failures here are the user-visible "upload failed" cases
    try:
        dashboard = load_dashboard(input_path, cfg)
    except (OSError, ValueError) as e:
        logger.error("Could not load coverage data: %s", e)
        return 1

    artifacts: dict[str, Path] = {}
    artifacts["Heatmap CSV"] = coverage_heatmap_table_and_save(
        dashboard.index,
        cfg.taxonomy,
        output_dir=run_dir,
        filename=HEATMAP_FILENAME,
        overlap_threshold=cfg.overlap_threshold,
    )

    if args.entity:
        try:
            detail = describe_entity(dashboard, args.entity.strip(), cfg)
        except KeyError as e:
            logger.error("%s", e)
            return 1
        logger.info("Course %s: %d covered cells, tags=%s", detail.name, len(detail.covered_cells()), detail.tags)
        artifacts["Course CSV"] = save_table(entity_coverage_table(detail, cfg.taxonomy), run_dir, ENTITY_FILENAME)

    summary_regions: list[dict] | None = None
    if args.compare:
        try:
            selection = Selection.from_list(args.compare)
        except ValueError as e:
            logger.error("Invalid selection: %s", e)
            return 1
        set_log_context(selection=selection.as_list())
        logger.info("Comparing %s: %s", "three courses" if selection.is_three_way else "two courses", selection.as_list())
        regions = compare_selection(dashboard, selection, cfg)
        log_region_summary(regions)
        artifacts["Venn regions CSV"] = region_table_and_save(regions, selection, run_dir, REGIONS_FILENAME)
        summary_regions = region_summary(regions).to_dict(orient="records")
        clear_selection_context()

    if args.search is not None:
        matches = search_rows(dashboard.rows, args.search)
        logger.info("Search %r: %d of %d rows", args.search, len(matches), len(dashboard.rows))
        artifacts["Search CSV"] = save_table(rows_table(matches, dashboard.rows), run_dir, SEARCH_FILENAME)

    stats = dashboard_stats(dashboard, cfg.taxonomy, cfg.overlap_threshold)
    artifacts["Summary JSON"] = write_json(
        run_dir / SUMMARY_FILENAME,
        {
            "context": get_log_context(),
            "stats": stats,
            "courses": dashboard.entities,
            "regions": summary_regions,
        },
    )

    log_dashboard_summary(stats, artifacts)
    logger.info("Detailed log: %s", log_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
