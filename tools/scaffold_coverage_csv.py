"""Scaffold a coverage CSV template listing every taxonomy leaf for one course."""

from __future__ import annotations

import argparse
from pathlib import Path

from domain.parsing import format_line
from domain.schemas import CoverageColumns
from domain.taxonomy import default_taxonomy


def scaffold_template(dest: Path, course: str, force: bool) -> int:
    if dest.exists() and not force:
        raise SystemExit(f"Destination exists: {dest} (use --force to overwrite)")

    cols = CoverageColumns()
    taxonomy = default_taxonomy()
    header = [cols.entity, cols.tags, cols.area, cols.category, cols.subcategory, cols.depth, cols.justification]

    lines = [format_line(header)]
    for area, category, subcategory in taxonomy.iter_leaves():
        # Depth left blank: rows stay unindexed until someone fills them in
        lines.append(format_line([course, "[]", area, category, subcategory, "", ""]))

    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return len(lines) - 1


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--course", required=True, help="Course identifier, e.g. '15.071 - The Analytics Edge'")
    ap.add_argument("--out", default="data/template.csv", help="Output CSV path (default: data/template.csv)")
    ap.add_argument("--force", action="store_true", help="Overwrite if destination exists")
    args = ap.parse_args()

    dest = Path(args.out)
    n = scaffold_template(dest, args.course, args.force)
    print(f"Wrote {n} template rows to: {dest}")
    print("Valid depth values:")
    for depth in default_taxonomy().depth_levels_in_order():
        print(f"  {depth}")


if __name__ == "__main__":
    main()
