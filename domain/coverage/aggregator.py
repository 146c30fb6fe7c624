"""Validate raw rows against the taxonomy and index them by leaf and depth."""

from collections.abc import Iterable, Iterator, Sequence
from typing import NamedTuple

from domain.schemas import (
    NO_JUSTIFICATION,
    CoverageColumns,
    CoverageInfo,
    CoverageRecord,
    EntityCoverageMap,
    RawRow,
)
from domain.taxonomy.schema import TaxonomySchema


class LeafKey(NamedTuple):
    """Flat key for one cell of the coverage grid."""

    area: str
    category: str
    subcategory: str
    depth: str


class CoverageIndex:
    """
    Every (area, category, subcategory, depth) cell mapped to the entities reporting it.

    All schema cells exist from construction, so lookups for valid cells never miss.
    Treated as read-only once built by CoverageAggregator.
    """

    def __init__(self, taxonomy: TaxonomySchema) -> None:
        self.taxonomy = taxonomy
        self._cells: dict[LeafKey, list[str]] = {
            LeafKey(area, category, subcategory, depth): []
            for area, category, subcategory in taxonomy.iter_leaves()
            for depth in taxonomy.depths
        }

    def _add(self, key: LeafKey, entity_id: str) -> None:
        self._cells[key].append(entity_id)

    def entities_at(self, area: str, category: str, subcategory: str, depth: str) -> list[str]:
        """
        Entities that reported `depth` for the given leaf, in input order.

        Raises:
            KeyError: If the cell is not part of the taxonomy
        """
        key = LeafKey(area, category, subcategory, depth)
        if key not in self._cells:
            raise KeyError(f"Not a taxonomy cell: {key}")
        return list(self._cells[key])

    def count_at(self, area: str, category: str, subcategory: str, depth: str) -> int:
        return len(self.entities_at(area, category, subcategory, depth))

    def keys(self) -> list[LeafKey]:
        return list(self._cells)

    def cells(self) -> Iterator[tuple[LeafKey, list[str]]]:
        """Yield (key, entities) in taxonomy order."""
        for key, entities in self._cells.items():
            yield key, list(entities)

    def total_assignments(self) -> int:
        """Number of indexed (row -> cell) assignments."""
        return sum(len(v) for v in self._cells.values())

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, key: object) -> bool:
        return key in self._cells


class CoverageAggregator:
    """Build the coverage index and per-entity subcategory maps from raw rows."""

    def __init__(
        self,
        taxonomy: TaxonomySchema,
        columns: CoverageColumns | None = None,
        placeholder: str = NO_JUSTIFICATION,
    ) -> None:
        self.taxonomy = taxonomy
        self.columns = columns or CoverageColumns()
        self.placeholder = placeholder

    def to_record(self, row: RawRow) -> CoverageRecord | None:
        """
        Extract a CoverageRecord from a raw row, or None if the row cannot be indexed.

        A row is indexable when identifier, area, category, subcategory and depth are
        all non-empty and the path resolves in the taxonomy.
        """
        cols = self.columns
        entity_id = (row.get(cols.entity) or "").strip()
        area = (row.get(cols.area) or "").strip()
        category = (row.get(cols.category) or "").strip()
        subcategory = (row.get(cols.subcategory) or "").strip()
        depth = (row.get(cols.depth) or "").strip()
        justification = (row.get(cols.justification) or "").strip() or self.placeholder

        if not (entity_id and area and category and subcategory and depth):
            return None
        if not self.taxonomy.is_valid_leaf(area, category, subcategory, depth):
            return None

        return CoverageRecord(
            entity_id=entity_id,
            area=area,
            category=category,
            subcategory=subcategory,
            depth=depth,
            justification=justification,
        )

    def iter_records(self, rows: Iterable[RawRow]) -> Iterator[CoverageRecord]:
        for row in rows:
            record = self.to_record(row)
            if record is not None:
                yield record

    def build_index(self, rows: Sequence[RawRow]) -> tuple[CoverageIndex, dict[str, EntityCoverageMap]]:
        """
        Build a fresh CoverageIndex and per-entity coverage maps.

        Invalid rows are skipped without error. For a repeated (entity, subcategory)
        pair the later row overwrites the earlier one in the entity map, while the
        index keeps every contributing row.

        Args:
            rows: Parsed rows in input order

        Returns:
            Tuple of (CoverageIndex, entity_id -> EntityCoverageMap)
        """
        index = CoverageIndex(self.taxonomy)
        entity_maps: dict[str, EntityCoverageMap] = {}

        for rec in self.iter_records(rows):
            index._add(LeafKey(rec.area, rec.category, rec.subcategory, rec.depth), rec.entity_id)
            entity_maps.setdefault(rec.entity_id, {})[rec.subcategory] = CoverageInfo(
                depth=rec.depth,
                justification=rec.justification,
            )

        return index, entity_maps

    def list_entities(self, rows: Iterable[RawRow]) -> list[str]:
        """All non-empty identifiers across rows, independent of taxonomy validity, sorted."""
        return list_entities(rows, self.columns)


def list_entities(rows: Iterable[RawRow], columns: CoverageColumns | None = None) -> list[str]:
    """Sorted unique entity identifiers from every row (valid or not)."""
    col = (columns or CoverageColumns()).entity
    found = {(row.get(col) or "").strip() for row in rows}
    found.discard("")
    return sorted(found)
