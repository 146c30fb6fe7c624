"""
Domain layer: Business logic with minimal external dependencies.

Contains:
- schemas: Pydantic models for coverage records and Venn regions
- parsing: tolerant CSV text parser
- taxonomy: fixed curriculum hierarchy and validation predicates
- coverage: index building, entity views, set comparison
"""

from domain.parsing import parse_rows, split_line
from domain.schemas import (
    NO_JUSTIFICATION,
    CoverageColumns,
    CoverageInfo,
    CoverageRecord,
    EntityCoverageMap,
    RawRow,
    Slot,
    VennRegion,
    VennRegionMap,
)

__all__ = [
    "parse_rows",
    "split_line",
    "RawRow",
    "CoverageColumns",
    "CoverageInfo",
    "CoverageRecord",
    "EntityCoverageMap",
    "NO_JUSTIFICATION",
    "Slot",
    "VennRegion",
    "VennRegionMap",
]
