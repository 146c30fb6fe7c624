"""Human-readable run summaries."""

import logging
from pathlib import Path

from application.constants import REGION_LABELS
from application.dashboard import Dashboard
from domain.coverage import region_counts, region_union
from domain.schemas import VennRegionMap
from domain.taxonomy import TaxonomySchema

logger = logging.getLogger(__name__)


def dashboard_stats(dashboard: Dashboard, taxonomy: TaxonomySchema, overlap_threshold: int) -> dict[str, int]:
    """Counts for the summary JSON and log output."""
    cells = list(dashboard.index.cells())
    covered_leaves = {(k.area, k.category, k.subcategory) for k, ents in cells if ents}
    return {
        "rows": len(dashboard.rows),
        "courses": len(dashboard.entities),
        "courses_with_valid_coverage": len(dashboard.entity_maps),
        "indexed_assignments": dashboard.index.total_assignments(),
        "cells_total": len(cells),
        "cells_covered": sum(1 for _, ents in cells if ents),
        "cells_potential_overlap": sum(1 for _, ents in cells if len(ents) >= overlap_threshold),
        "subcategories_total": taxonomy.leaf_count(),
        "subcategories_uncovered": taxonomy.leaf_count() - len(covered_leaves),
    }


def log_dashboard_summary(stats: dict[str, int], artifacts: dict[str, Path]) -> None:
    """
    Log a concise summary of the upload.

    Args:
        stats: Output of dashboard_stats()
        artifacts: Label -> written file
    """
    logger.info("=== Coverage Summary ===")
    logger.info(
        "Rows: %d, courses: %d (%d with valid coverage)",
        stats["rows"],
        stats["courses"],
        stats["courses_with_valid_coverage"],
    )
    logger.info(
        "Cells covered: %d/%d; potential overlap cells: %d",
        stats["cells_covered"],
        stats["cells_total"],
        stats["cells_potential_overlap"],
    )
    logger.info(
        "Subcategories with no course: %d of %d",
        stats["subcategories_uncovered"],
        stats["subcategories_total"],
    )

    logger.info("--- Artifacts ---")
    for label, path in artifacts.items():
        logger.info("%s: %s", label, path)


def log_region_summary(regions: VennRegionMap) -> None:
    """Log the non-empty Venn regions and their sizes."""
    counts = region_counts(regions)
    for region, n in counts.items():
        if n:
            logger.info("%s: %d subcategor%s", REGION_LABELS[region], n, "y" if n == 1 else "ies")
    if not any(counts.values()):
        logger.info("Selected courses have no valid coverage to compare.")
    else:
        logger.info("Subcategories covered by any selected course: %d", len(region_union(regions)))
