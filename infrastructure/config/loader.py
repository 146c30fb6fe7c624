"""Configuration loading from YAML files."""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from domain.schemas import CoverageColumns
from infrastructure.config.models import DashboardConfig
from infrastructure.constants import DATA_DIR, ENV_INPUT_FILE

logger = logging.getLogger(__name__)


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def load_dashboard_config(path: Path | None = None) -> DashboardConfig:
    """
    Load dashboard.yaml and construct a fully-resolved DashboardConfig.

    A missing path yields the defaults. The COVERAGE_INPUT_FILE environment variable
    (e.g. from .env) overrides `input_file`.

    Raises:
        FileNotFoundError: If an explicit path does not exist
        ValueError: If the YAML is not a mapping or `columns` is not a mapping
    """
    data = _load_yaml(path) if path is not None else {}

    columns_raw = data.get("columns") or {}
    if not isinstance(columns_raw, dict):
        raise ValueError("columns must be a mapping")
    unknown = set(columns_raw) - set(CoverageColumns.model_fields)
    if unknown:
        raise ValueError(f"Unknown column keys in config: {sorted(unknown)}")
    columns = CoverageColumns(**{k: str(v) for k, v in columns_raw.items()})

    input_file = os.environ.get(ENV_INPUT_FILE) or data.get("input_file")
    if os.environ.get(ENV_INPUT_FILE):
        logger.debug("input_file overridden from %s", ENV_INPUT_FILE)

    kwargs: dict[str, Any] = {
        "input_file": Path(input_file) if input_file else None,
        "data_dir": Path(data.get("data_dir", str(DATA_DIR))),
        "columns": columns,
    }
    if data.get("output_root"):
        kwargs["output_root"] = Path(data["output_root"])
    if "overlap_threshold" in data:
        kwargs["overlap_threshold"] = data["overlap_threshold"]
    if data.get("justification_placeholder") is not None:
        kwargs["justification_placeholder"] = data["justification_placeholder"]

    return DashboardConfig(**kwargs)
