import json
import logging
from pathlib import Path

import pytest

import main
from domain.taxonomy import DEPTH_PRIMARY

HEADER = "Number - Name,Tags,Area,Category,Subcategory,Depth of Coverage,Justification"


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        handler.close()
        root.removeHandler(handler)


def _write_inputs(tmp_path: Path) -> tuple[Path, Path]:
    csv_path = tmp_path / "coverage.csv"
    csv_path.write_text(
        "\n".join(
            [
                HEADER,
                f"A,[],Foundational,2. AI & ML Methods,2.2 Deep Learning,{DEPTH_PRIMARY},x",
                f"B,[],Foundational,2. AI & ML Methods,2.2 Deep Learning,{DEPTH_PRIMARY},y",
                f"B,[],Foundational,2. AI & ML Methods,2.3 Reinforcement Learning,{DEPTH_PRIMARY},z",
            ]
        ),
        encoding="utf-8",
    )
    cfg_path = tmp_path / "dashboard.yaml"
    cfg_path.write_text(f"output_root: {tmp_path / 'out'}\n", encoding="utf-8")
    return csv_path, cfg_path


def test_main_writes_artifacts(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv("COVERAGE_INPUT_FILE", raising=False)
    csv_path, cfg_path = _write_inputs(tmp_path)

    rc = main.main(
        [
            "--config",
            str(cfg_path),
            "--input",
            str(csv_path),
            "--env",
            str(tmp_path / "missing.env"),
            "--entity",
            "B",
            "--compare",
            "A",
            "B",
            "--search",
            "reinforcement",
        ]
    )
    assert rc == 0

    (run_dir,) = list((tmp_path / "out").iterdir())
    for name in ["coverage_heatmap.csv", "course_coverage.csv", "venn_regions.csv", "row_search.csv", "run.log"]:
        assert (run_dir / name).exists(), name

    summary = json.loads((run_dir / "summary.json").read_text(encoding="utf-8"))
    assert summary["courses"] == ["A", "B"]
    assert summary["stats"]["indexed_assignments"] == 3
    counts = {r["Region"]: r["count"] for r in summary["regions"]}
    assert counts["Unique to Course 2"] == 1
    assert counts["Overlap (Course 1 & 2)"] == 1

    log_text = (run_dir / "run.log").read_text(encoding="utf-8")
    assert "Comparing two courses" in log_text
    assert "Subcategories covered by any selected course: 2" in log_text


def test_main_reports_empty_upload(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv("COVERAGE_INPUT_FILE", raising=False)
    _, cfg_path = _write_inputs(tmp_path)
    empty = tmp_path / "empty.csv"
    empty.write_text(HEADER + "\n", encoding="utf-8")

    rc = main.main(["--config", str(cfg_path), "--input", str(empty), "--env", str(tmp_path / "none.env")])
    assert rc == 1


def test_main_rejects_single_course_comparison(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv("COVERAGE_INPUT_FILE", raising=False)
    csv_path, cfg_path = _write_inputs(tmp_path)
    rc = main.main(
        ["--config", str(cfg_path), "--input", str(csv_path), "--env", str(tmp_path / "none.env"), "--compare", "A"]
    )
    assert rc == 1
