"""Upload workflow: read, parse, index, and summarise a coverage export."""

import logging
from collections.abc import Sequence
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from domain.coverage import CoverageAggregator, CoverageIndex, EntityDetail, entity_detail
from domain.parsing import count_data_lines, parse_rows
from domain.schemas import EntityCoverageMap, RawRow
from infrastructure.config.models import DashboardConfig
from infrastructure.io import read_coverage_text

logger = logging.getLogger(__name__)


class Dashboard(BaseModel):
    """
    Everything derived from one upload.

    Rebuilt from scratch for every new file and never mutated afterwards.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    rows: list[RawRow]
    index: CoverageIndex
    entity_maps: dict[str, EntityCoverageMap]
    entities: list[str]

    def coverage_of(self, entity_id: str) -> EntityCoverageMap:
        """Subcategory coverage of one entity; empty when none of its rows validated."""
        return dict(self.entity_maps.get(entity_id, {}))


def make_aggregator(cfg: DashboardConfig) -> CoverageAggregator:
    return CoverageAggregator(
        taxonomy=cfg.taxonomy,
        columns=cfg.columns,
        placeholder=cfg.justification_placeholder,
    )


def load_coverage_rows(path: Path) -> list[RawRow]:
    """
    Read and parse a coverage export.

    Malformed lines are dropped silently by the parser; only a file that yields no
    rows at all is treated as a failure.

    Args:
        path: CSV file to read

    Returns:
        Parsed rows

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is unsupported or yields zero rows
    """
    text = read_coverage_text(path)
    rows = parse_rows(text)
    data_lines = count_data_lines(text)

    if not rows:
        raise ValueError(f"No rows could be parsed from {path} ({data_lines} non-blank data lines)")

    dropped = data_lines - len(rows)
    if dropped:
        logger.debug("Dropped %d malformed line(s) from %s", dropped, path)
    logger.info("Parsed %d rows from %s", len(rows), path)
    return rows


def build_dashboard(rows: Sequence[RawRow], cfg: DashboardConfig) -> Dashboard:
    """
    Build the coverage index, per-entity maps and the entity list for one upload.

    Args:
        rows: Parsed rows
        cfg: DashboardConfig instance

    Returns:
        Dashboard
    """
    aggregator = make_aggregator(cfg)
    rows = list(rows)
    index, entity_maps = aggregator.build_index(rows)
    entities = aggregator.list_entities(rows)

    indexed = index.total_assignments()
    logger.info(
        "Indexed %d of %d rows across %d courses (%d with valid coverage)",
        indexed,
        len(rows),
        len(entities),
        len(entity_maps),
    )
    if indexed < len(rows):
        logger.debug("%d rows did not resolve against the taxonomy", len(rows) - indexed)

    return Dashboard(rows=rows, index=index, entity_maps=entity_maps, entities=entities)


def load_dashboard(path: Path, cfg: DashboardConfig) -> Dashboard:
    """Convenience wrapper: read + parse + index."""
    return build_dashboard(load_coverage_rows(path), cfg)


def describe_entity(dashboard: Dashboard, entity_id: str, cfg: DashboardConfig) -> EntityDetail:
    """
    Single-course view: tags and justification per covered cell.

    Raises:
        KeyError: If the entity does not appear in the upload
    """
    if entity_id not in dashboard.entities:
        raise KeyError(f"Unknown course: {entity_id!r}")
    return entity_detail(make_aggregator(cfg), dashboard.rows, entity_id)


def search_rows(rows: Sequence[RawRow], term: str) -> list[RawRow]:
    """
    Rows where any value contains `term` (case-insensitive).

    An empty term returns all rows.
    """
    if not term:
        return list(rows)
    needle = term.lower()
    return [row for row in rows if any(needle in (value or "").lower() for value in row.values())]
