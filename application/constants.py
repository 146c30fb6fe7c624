"""Application-level constants."""

from pathlib import Path

from domain.schemas import VennRegion

# Table column names
AREA_COL = "Area"
CATEGORY_COL = "Category"
SUBCATEGORY_COL = "Subcategory"
REGION_COL = "Region"
ENTITY_COL = "Number - Name"
DEPTH_COL = "Level of Depth"
JUSTIFICATION_COL = "Justification"

# Suffixes for per-depth heatmap columns
COUNT_SUFFIX = "count"
COURSES_SUFFIX = "courses"
OVERLAP_SUFFIX = "potential overlap"
ENTITY_LIST_SEPARATOR = "; "

# Region headings, in display order
REGION_LABELS: dict[VennRegion, str] = {
    VennRegion.UNIQUE_A: "Unique to Course 1",
    VennRegion.UNIQUE_B: "Unique to Course 2",
    VennRegion.UNIQUE_C: "Unique to Course 3",
    VennRegion.OVERLAP_AB: "Overlap (Course 1 & 2)",
    VennRegion.OVERLAP_AC: "Overlap (Course 1 & 3)",
    VennRegion.OVERLAP_BC: "Overlap (Course 2 & 3)",
    VennRegion.OVERLAP_ALL: "All Three (1 & 2 & 3)",
}

# Output filenames
HEATMAP_FILENAME = "coverage_heatmap.csv"
ENTITY_FILENAME = "course_coverage.csv"
REGIONS_FILENAME = "venn_regions.csv"
SEARCH_FILENAME = "row_search.csv"
SUMMARY_FILENAME = "summary.json"

# Output directory structure
OUTPUT_ROOT = Path("outputs")
LOG_FILENAME = "run.log"
