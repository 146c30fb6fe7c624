"""Configuration models (Pydantic classes)."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from domain.schemas import NO_JUSTIFICATION, CoverageColumns
from domain.taxonomy import TaxonomySchema, default_taxonomy
from infrastructure.constants import DATA_DIR


class DashboardConfig(BaseModel):
    """
    Runtime configuration.
    - Loaded from dashboard.yaml
    - Validated and enriched by configuration loader
    - Consumed by the dashboard use cases and the CLI entrypoint
    """

    input_file: Path | None = Field(
        default=None,
        description="Coverage CSV export (Number - Name, Tags, Area, Category, Subcategory, Depth, Justification).",
    )
    data_dir: Path = Field(default_factory=lambda: DATA_DIR)
    output_root: Path = Field(default_factory=lambda: Path("outputs"))

    columns: CoverageColumns = Field(default_factory=CoverageColumns)

    justification_placeholder: str = Field(
        default=NO_JUSTIFICATION,
        description="Text stored when a row has an empty Justification cell.",
    )
    overlap_threshold: int = Field(
        default=3,
        description="Heatmap cells with at least this many courses are flagged as potential overlap.",
    )

    # Fixed and embedded; not read from YAML
    taxonomy: TaxonomySchema = Field(default_factory=default_taxonomy)

    @field_validator("overlap_threshold")
    @classmethod
    def _positive_threshold(cls, v: int) -> int:
        if v < 1:
            raise ValueError("overlap_threshold must be >= 1")
        return v

    @field_validator("justification_placeholder")
    @classmethod
    def _non_empty_placeholder(cls, v: str) -> str:
        if not str(v).strip():
            raise ValueError("justification_placeholder must not be empty")
        return str(v).strip()

    @property
    def input_path(self) -> Path | None:
        """input_file resolved against data_dir (absolute paths are kept as-is)."""
        if self.input_file is None:
            return None
        return self.input_file if self.input_file.is_absolute() else self.data_dir / self.input_file
