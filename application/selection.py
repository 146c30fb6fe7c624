"""Course selection for 2- or 3-way comparisons."""

import logging
from collections.abc import Sequence

from pydantic import BaseModel, model_validator

from application.dashboard import Dashboard
from domain.coverage import SetRegionComputer
from domain.schemas import Slot, VennRegionMap
from infrastructure.config.models import DashboardConfig

logger = logging.getLogger(__name__)


class Selection(BaseModel):
    """Courses picked for comparison; the third slot is optional."""

    a: str
    b: str
    c: str | None = None

    @model_validator(mode="after")
    def _validate(self) -> "Selection":
        self.a = self.a.strip()
        self.b = self.b.strip()
        if self.c is not None and not self.c.strip():
            self.c = None
        elif self.c is not None:
            self.c = self.c.strip()

        if not self.a or not self.b:
            raise ValueError("Select at least two courses to compare")
        chosen = [e for e in (self.a, self.b, self.c) if e]
        if len(set(chosen)) != len(chosen):
            raise ValueError(f"A course can only be selected once: {chosen}")
        return self

    @classmethod
    def from_list(cls, entities: Sequence[str]) -> "Selection":
        if not 2 <= len(entities) <= 3:
            raise ValueError(f"Expected 2 or 3 courses, got {len(entities)}")
        return cls(a=entities[0], b=entities[1], c=entities[2] if len(entities) == 3 else None)

    def by_slot(self) -> dict[Slot, str]:
        out = {Slot.A: self.a, Slot.B: self.b}
        if self.c:
            out[Slot.C] = self.c
        return out

    def as_list(self) -> list[str]:
        return list(self.by_slot().values())

    @property
    def is_three_way(self) -> bool:
        return self.c is not None


def available_entities(
    all_entities: Sequence[str],
    selected: Sequence[str | None],
    slot_index: int,
    search: str = "",
) -> list[str]:
    """
    Options for one selector: courses not chosen in the other slots, filtered by search.

    Args:
        all_entities: Sorted course list
        selected: Current value of each slot (None/"" for empty)
        slot_index: Slot being edited (0-based)
        search: Case-insensitive substring filter

    Returns:
        Matching course ids in input order
    """
    used_elsewhere = {s for i, s in enumerate(selected) if i != slot_index and s}
    needle = search.lower()
    return [e for e in all_entities if e not in used_elsewhere and needle in e.lower()]


def compare_selection(dashboard: Dashboard, selection: Selection, cfg: DashboardConfig) -> VennRegionMap:
    """
    Compute Venn regions for the selected courses.

    Courses with no valid coverage contribute an empty map.
    """
    computer = SetRegionComputer(cfg.taxonomy)
    maps = {slot: dashboard.coverage_of(entity) for slot, entity in selection.by_slot().items()}

    for slot, entity in selection.by_slot().items():
        if entity not in dashboard.entities:
            logger.warning("Selected course %r (slot %s) is not in the current upload", entity, slot.value)

    return computer.compute_regions(maps[Slot.A], maps[Slot.B], maps.get(Slot.C))
