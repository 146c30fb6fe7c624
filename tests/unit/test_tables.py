from pathlib import Path

import pandas as pd

from application.constants import ENTITY_COL, REGION_COL, SUBCATEGORY_COL
from application.selection import Selection
from application.tables import (
    coverage_heatmap_table,
    coverage_heatmap_table_and_save,
    depth_header,
    entity_coverage_table,
    hierarchy_spans,
    region_summary,
    region_table,
    rows_table,
)
from domain.coverage import CoverageAggregator, SetRegionComputer, entity_detail
from domain.schemas import CoverageInfo
from domain.taxonomy import DEPTH_MINOR, DEPTH_PRIMARY, default_taxonomy

AREA = "Foundational"
CATEGORY = "2. AI & ML Methods"
DL = "2.2 Deep Learning"


def _mk_row(entity: str, depth: str = DEPTH_PRIMARY) -> dict[str, str]:
    return {
        "Number - Name": entity,
        "Area": AREA,
        "Category": CATEGORY,
        "Subcategory": DL,
        "Depth of Coverage": depth,
        "Justification": f"{entity} covers it",
    }


def test_depth_header() -> None:
    assert depth_header(DEPTH_PRIMARY) == "Level 1"
    assert depth_header("single") == "single"


def test_heatmap_table_counts_and_overlap_flag() -> None:
    tax = default_taxonomy()
    rows = [_mk_row("A"), _mk_row("B"), _mk_row("C"), _mk_row("D", depth=DEPTH_MINOR)]
    index, _ = CoverageAggregator(tax).build_index(rows)

    df = coverage_heatmap_table(index, tax, overlap_threshold=3)
    assert len(df) == tax.leaf_count()
    assert list(df.columns[:3]) == ["Area", "Category", "Subcategory"]

    dl = df[df[SUBCATEGORY_COL] == DL].iloc[0]
    assert dl["Level 1 count"] == 3
    assert dl["Level 1 courses"] == "A; B; C"
    assert bool(dl["Level 1 potential overlap"]) is True
    assert dl["Level 3 count"] == 1
    assert bool(dl["Level 3 potential overlap"]) is False
    assert int(df["Level 2 count"].sum()) == 0


def test_heatmap_table_and_save(tmp_path: Path) -> None:
    tax = default_taxonomy()
    index, _ = CoverageAggregator(tax).build_index([])
    out = coverage_heatmap_table_and_save(index, tax, output_dir=tmp_path, filename="heatmap.csv")
    assert out == tmp_path / "heatmap.csv"
    assert out.read_text(encoding="utf-8").startswith("Area,Category,Subcategory")

    saved = pd.read_csv(out)
    assert len(saved) == tax.leaf_count()
    assert int(saved["area_rowspan"].sum()) == tax.leaf_count()
    assert int(saved["category_rowspan"].sum()) == tax.leaf_count()
    assert "Level 1 courses" in saved.columns


def test_hierarchy_spans_mark_first_row_only() -> None:
    tax = default_taxonomy()
    spans = hierarchy_spans(tax)
    assert spans["area_rowspan"].iloc[0] == tax.area_row_count(AREA)
    assert spans["category_rowspan"].iloc[0] == tax.category_row_count("1. Operations Research & Mathematical Foundations")
    assert spans["area_rowspan"].iloc[1] == 0
    assert int(spans["area_rowspan"].sum()) == tax.leaf_count()
    assert int(spans["category_rowspan"].sum()) == tax.leaf_count()


def test_entity_coverage_table() -> None:
    tax = default_taxonomy()
    rows = [_mk_row("A")]
    detail = entity_detail(CoverageAggregator(tax), rows, "A")
    df = entity_coverage_table(detail, tax)
    dl = df[df[SUBCATEGORY_COL] == DL].iloc[0]
    assert dl["Level 1"] == "A covers it"
    assert dl["Level 2"] == ""


def test_region_table_rows_per_contributor() -> None:
    tax = default_taxonomy()
    a = {DL: CoverageInfo(depth=DEPTH_PRIMARY, justification="a")}
    b = {
        DL: CoverageInfo(depth=DEPTH_MINOR, justification="b"),
        "2.3 Reinforcement Learning": CoverageInfo(depth=DEPTH_MINOR, justification="b2"),
    }
    regions = SetRegionComputer(tax).compute_regions(a, b)

    df = region_table(regions, Selection(a="Course A", b="Course B"))
    assert list(df[REGION_COL]) == ["Unique to Course 2", "Overlap (Course 1 & 2)", "Overlap (Course 1 & 2)"]
    assert list(df[ENTITY_COL]) == ["Course B", "Course A", "Course B"]

    summary = region_summary(regions)
    assert len(summary) == 7
    assert int(summary["count"].sum()) == 2


def test_region_table_empty() -> None:
    regions = SetRegionComputer(default_taxonomy()).compute_regions({}, {})
    df = region_table(regions, Selection(a="A", b="B"))
    assert df.empty
    assert REGION_COL in df.columns


def test_rows_table_keeps_header_order() -> None:
    all_rows = [{"b": "1", "a": "2"}]
    df = rows_table([], all_rows)
    assert list(df.columns) == ["b", "a"]
