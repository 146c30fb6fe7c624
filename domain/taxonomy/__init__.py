"""
Taxonomy definition: ordered hierarchy lookups and validation predicates.

The curriculum taxonomy is fixed and embedded (see defaults.py).
All functions in this module are pure (no file I/O).
"""

from domain.taxonomy.defaults import (
    DEFAULT_TAXONOMY_DATA,
    DEPTH_MINOR,
    DEPTH_PRIMARY,
    DEPTH_SIGNIFICANT,
    default_taxonomy,
)
from domain.taxonomy.loader import parse_taxonomy_config
from domain.taxonomy.schema import TaxonomySchema

__all__ = [
    "TaxonomySchema",
    "parse_taxonomy_config",
    "default_taxonomy",
    "DEFAULT_TAXONOMY_DATA",
    "DEPTH_PRIMARY",
    "DEPTH_SIGNIFICANT",
    "DEPTH_MINOR",
]
