"""
Coverage aggregation and set comparison.

Provides:
- CoverageAggregator / CoverageIndex: validated leaf x depth index
- Entity views: tag extraction and single-course coverage grid
- SetRegionComputer: Venn-region decomposition for 2-3 entities

All functions are pure; structures are rebuilt from scratch per upload.
"""

from domain.coverage.aggregator import CoverageAggregator, CoverageIndex, LeafKey, list_entities
from domain.coverage.entities import EntityDetail, collect_entity_tags, entity_detail, extract_tags
from domain.coverage.regions import SetRegionComputer, region_counts, region_union

__all__ = [
    "CoverageAggregator",
    "CoverageIndex",
    "LeafKey",
    "list_entities",
    "EntityDetail",
    "entity_detail",
    "extract_tags",
    "collect_entity_tags",
    "SetRegionComputer",
    "region_counts",
    "region_union",
]
