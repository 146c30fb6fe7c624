"""Build a TaxonomySchema from a plain mapping."""

from typing import Any

from domain.taxonomy.schema import TaxonomySchema


def _as_str_list(value: Any, what: str) -> list[str]:
    if not isinstance(value, list):
        raise ValueError(f"{what} must be a list")
    return [str(v).strip() for v in value]


def parse_taxonomy_config(data: dict[str, Any]) -> TaxonomySchema:
    """
    Parse a taxonomy mapping into an immutable TaxonomySchema.

    This is a pure function - it does NOT perform file I/O.

    Expected shape:
        {
            "areas": {area: [category, ...], ...},          # ordered mapping
            "subcategories": {category: [subcategory, ...]},
            "depths": [depth1, depth2, depth3],
        }

    Args:
        data: Mapping with areas, subcategories and depths

    Returns:
        TaxonomySchema

    Raises:
        ValueError: If required keys are missing, have wrong types, or break taxonomy invariants
    """
    areas_raw = data.get("areas")
    subcats_raw = data.get("subcategories")
    depths_raw = data.get("depths")

    if not isinstance(areas_raw, dict):
        raise ValueError("areas must be a mapping of area -> categories")
    if not isinstance(subcats_raw, dict):
        raise ValueError("subcategories must be a mapping of category -> subcategories")

    categories = {
        str(area).strip(): _as_str_list(cats, f"categories of area {area!r}") for area, cats in areas_raw.items()
    }
    subcategories = {
        str(cat).strip(): _as_str_list(subs, f"subcategories of category {cat!r}") for cat, subs in subcats_raw.items()
    }
    depths = _as_str_list(depths_raw, "depths")

    return TaxonomySchema(
        areas=list(categories),
        categories=categories,
        subcategories=subcategories,
        depths=depths,
    )
