"""Per-entity views: tag lists and the single-course coverage grid."""

from collections.abc import Iterable

from pydantic import BaseModel, Field

from domain.coverage.aggregator import CoverageAggregator, LeafKey
from domain.schemas import RawRow

_QUOTES = "\"'"


def extract_tags(raw: str | None) -> list[str]:
    """
    Parse a bracketed tag list such as '["NLP", "Python"]'.

    Examples:
        >>> extract_tags('["NLP", "Python", "NLP"]')
        ['NLP', 'Python']
        >>> extract_tags("")
        []

    Args:
        raw: Raw Tags cell (may be None or empty)

    Returns:
        Tags in first-seen order, without duplicates
    """
    if raw is None:
        return []
    s = str(raw).strip()
    if not s:
        return []
    if s.startswith("["):
        s = s[1:]
    if s.endswith("]"):
        s = s[:-1]

    tags: list[str] = []
    for token in s.strip().split(","):
        tag = token.strip()
        if tag[:1] in _QUOTES:
            tag = tag[1:]
        if tag[-1:] in _QUOTES:
            tag = tag[:-1]
        tag = tag.strip()
        if tag and tag not in tags:
            tags.append(tag)
    return tags


def collect_entity_tags(
    rows: Iterable[RawRow],
    entity_id: str,
    tags_col: str = "Tags",
    entity_col: str = "Number - Name",
) -> list[str]:
    """Merge tags across all rows of one entity, first-seen order."""
    merged: list[str] = []
    for row in rows:
        if (row.get(entity_col) or "").strip() != entity_id:
            continue
        for tag in extract_tags(row.get(tags_col)):
            if tag not in merged:
                merged.append(tag)
    return merged


class EntityDetail(BaseModel):
    """Everything the single-course view shows for one entity."""

    name: str
    tags: list[str] = Field(default_factory=list)
    # (area, category, subcategory, depth) -> justification, None where not covered
    coverage: dict[tuple[str, str, str, str], str | None] = Field(default_factory=dict)

    def covered_cells(self) -> list[LeafKey]:
        return [LeafKey(*key) for key, just in self.coverage.items() if just]


def entity_detail(aggregator: CoverageAggregator, rows: Iterable[RawRow], entity_id: str) -> EntityDetail:
    """
    Build the coverage grid and tag list for one entity.

    Every taxonomy cell is present; a later row for the same cell overwrites an earlier one.
    Tags are collected from all of the entity's rows, valid or not.
    """
    rows = list(rows)
    taxonomy = aggregator.taxonomy
    cols = aggregator.columns

    coverage: dict[tuple[str, str, str, str], str | None] = {
        LeafKey(area, category, subcategory, depth): None
        for area, category, subcategory in taxonomy.iter_leaves()
        for depth in taxonomy.depths
    }
    for rec in aggregator.iter_records(rows):
        if rec.entity_id == entity_id:
            coverage[LeafKey(rec.area, rec.category, rec.subcategory, rec.depth)] = rec.justification

    return EntityDetail(
        name=entity_id,
        tags=collect_entity_tags(rows, entity_id, tags_col=cols.tags, entity_col=cols.entity),
        coverage=coverage,
    )
