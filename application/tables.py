"""Tabular views of the coverage index, one course, and Venn regions."""

from pathlib import Path

import pandas as pd

from application.constants import (
    AREA_COL,
    CATEGORY_COL,
    COUNT_SUFFIX,
    DEPTH_COL,
    COURSES_SUFFIX,
    ENTITY_COL,
    ENTITY_LIST_SEPARATOR,
    JUSTIFICATION_COL,
    OVERLAP_SUFFIX,
    REGION_COL,
    REGION_LABELS,
    SUBCATEGORY_COL,
)
from application.selection import Selection
from domain.coverage import CoverageIndex, EntityDetail
from domain.schemas import RawRow, VennRegion, VennRegionMap
from domain.taxonomy import TaxonomySchema

HIERARCHY_COLS = [AREA_COL, CATEGORY_COL, SUBCATEGORY_COL]
REGION_TABLE_COLS = [REGION_COL, SUBCATEGORY_COL, ENTITY_COL, DEPTH_COL, JUSTIFICATION_COL]


def depth_header(depth: str) -> str:
    """Short column label for a depth level, e.g. 'Level 1 (Primary | >40%)' -> 'Level 1'."""
    parts = depth.split(" ")
    return " ".join(parts[:2]) if len(parts) >= 2 else depth


def coverage_heatmap_table(index: CoverageIndex, taxonomy: TaxonomySchema, overlap_threshold: int = 3) -> pd.DataFrame:
    """
    One row per subcategory in taxonomy order, with per-depth course counts.

    Columns in the result:
      - Area, Category, Subcategory
      - for each depth: '<Level N> count', '<Level N> courses' (joined list),
        '<Level N> potential overlap' (count >= overlap_threshold)

    Args:
        index: CoverageIndex from the current upload
        taxonomy: Schema driving row order
        overlap_threshold: Course count at which a cell is flagged

    Returns:
        DataFrame with one row per taxonomy leaf
    """
    rows: list[dict[str, object]] = []
    for area, category, subcategory in taxonomy.iter_leaves():
        row: dict[str, object] = {AREA_COL: area, CATEGORY_COL: category, SUBCATEGORY_COL: subcategory}
        for depth in taxonomy.depths:
            entities = index.entities_at(area, category, subcategory, depth)
            label = depth_header(depth)
            row[f"{label} {COUNT_SUFFIX}"] = len(entities)
            row[f"{label} {COURSES_SUFFIX}"] = ENTITY_LIST_SEPARATOR.join(entities)
            row[f"{label} {OVERLAP_SUFFIX}"] = len(entities) >= overlap_threshold
        rows.append(row)

    return pd.DataFrame(rows)


def hierarchy_spans(taxonomy: TaxonomySchema) -> pd.DataFrame:
    """
    Row spans for a merged Area/Category/Subcategory table.

    Columns: Area, Category, Subcategory, area_rowspan, category_rowspan.
    A span is non-zero only on the first row of its group (0 means 'merged into above').
    """
    rows: list[dict[str, object]] = []
    prev_area = prev_category = None
    for area, category, subcategory in taxonomy.iter_leaves():
        rows.append(
            {
                AREA_COL: area,
                CATEGORY_COL: category,
                SUBCATEGORY_COL: subcategory,
                "area_rowspan": taxonomy.area_row_count(area) if area != prev_area else 0,
                "category_rowspan": taxonomy.category_row_count(category) if category != prev_category else 0,
            }
        )
        prev_area, prev_category = area, category
    return pd.DataFrame(rows)


def entity_coverage_table(detail: EntityDetail, taxonomy: TaxonomySchema) -> pd.DataFrame:
    """
    Single-course grid: one row per subcategory, one justification column per depth.

    Cells the course does not cover are empty strings.
    """
    rows: list[dict[str, object]] = []
    for area, category, subcategory in taxonomy.iter_leaves():
        row: dict[str, object] = {AREA_COL: area, CATEGORY_COL: category, SUBCATEGORY_COL: subcategory}
        for depth in taxonomy.depths:
            row[depth_header(depth)] = detail.coverage.get((area, category, subcategory, depth)) or ""
        rows.append(row)
    return pd.DataFrame(rows)


def region_table(regions: VennRegionMap, selection: Selection) -> pd.DataFrame:
    """
    Long table of Venn regions: one row per (region, subcategory, contributing course).

    Empty regions are omitted; regions appear in fixed order (unique, pairwise, all three).
    """
    names = selection.by_slot()
    rows: list[dict[str, object]] = []
    for region in VennRegion:
        for subcategory, contributions in regions.get(region, {}).items():
            for slot, info in contributions.items():
                rows.append(
                    {
                        REGION_COL: REGION_LABELS[region],
                        SUBCATEGORY_COL: subcategory,
                        ENTITY_COL: names.get(slot, ""),
                        DEPTH_COL: info.depth,
                        JUSTIFICATION_COL: info.justification,
                    }
                )

    if not rows:
        return pd.DataFrame(columns=REGION_TABLE_COLS)
    return pd.DataFrame(rows, columns=REGION_TABLE_COLS)


def region_summary(regions: VennRegionMap) -> pd.DataFrame:
    """Region label and subcategory count for every region (including empty ones)."""
    return pd.DataFrame(
        [{REGION_COL: REGION_LABELS[r], "count": len(regions.get(r, {}))} for r in VennRegion],
        columns=[REGION_COL, "count"],
    )


def save_table(table_df: pd.DataFrame, output_dir: Path, filename: str) -> Path:
    """
    Save a table as CSV under output_dir.

    Returns:
        Path to the saved CSV file
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    out_path = output_dir / filename
    table_df.to_csv(out_path, index=False)
    return out_path


def coverage_heatmap_table_and_save(
    index: CoverageIndex,
    taxonomy: TaxonomySchema,
    output_dir: Path,
    filename: str,
    overlap_threshold: int = 3,
) -> Path:
    """Convenience wrapper: compute the heatmap table, attach hierarchy row spans and save it as CSV."""
    table_df = coverage_heatmap_table(index, taxonomy, overlap_threshold=overlap_threshold).merge(
        hierarchy_spans(taxonomy), on=HIERARCHY_COLS, how="left", sort=False
    )
    out_path = save_table(table_df, output_dir, filename)
    del table_df
    return out_path


def region_table_and_save(
    regions: VennRegionMap,
    selection: Selection,
    output_dir: Path,
    filename: str,
) -> Path:
    """Convenience wrapper: compute the region table and save it as CSV."""
    return save_table(region_table(regions, selection), output_dir, filename)


def rows_table(rows: list[RawRow], all_rows: list[RawRow]) -> pd.DataFrame:
    """Raw rows as a DataFrame, with the upload's header order even when `rows` is empty."""
    columns = list(all_rows[0].keys()) if all_rows else []
    return pd.DataFrame(rows, columns=columns)
