"""Pydantic models for coverage records and comparison results."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# One parsed data line: header column name -> raw string value
RawRow = dict[str, str]

NO_JUSTIFICATION = "No justification provided"


class CoverageColumns(BaseModel):
    """Column names of the coverage CSV export."""

    model_config = ConfigDict(frozen=True)

    entity: str = "Number - Name"
    tags: str = "Tags"
    area: str = "Area"
    category: str = "Category"
    subcategory: str = "Subcategory"
    depth: str = "Depth of Coverage"
    justification: str = "Justification"


class CoverageInfo(BaseModel):
    """Depth and justification one entity reported for one subcategory."""

    model_config = ConfigDict(frozen=True)

    depth: str
    justification: str


class CoverageRecord(BaseModel):
    """A raw row with the fields the aggregator cares about, trimmed."""

    model_config = ConfigDict(frozen=True)

    entity_id: str = Field(..., description="Course identifier, e.g. '15.072 - Advanced Analytics Edge'.")
    area: str
    category: str
    subcategory: str
    depth: str
    justification: str


# Per entity: subcategory -> coverage info (single-valued, last row wins)
EntityCoverageMap = dict[str, CoverageInfo]


class Slot(str, Enum):
    """Position of an entity in a 2- or 3-way comparison."""

    A = "a"
    B = "b"
    C = "c"


class VennRegion(str, Enum):
    """The seven disjoint regions of a three-set Venn decomposition."""

    UNIQUE_A = "unique_a"
    UNIQUE_B = "unique_b"
    UNIQUE_C = "unique_c"
    OVERLAP_AB = "overlap_ab"
    OVERLAP_AC = "overlap_ac"
    OVERLAP_BC = "overlap_bc"
    OVERLAP_ALL = "overlap_all"

    @property
    def members(self) -> tuple[Slot, ...]:
        return REGION_MEMBERS[self]


REGION_MEMBERS: dict[VennRegion, tuple[Slot, ...]] = {
    VennRegion.UNIQUE_A: (Slot.A,),
    VennRegion.UNIQUE_B: (Slot.B,),
    VennRegion.UNIQUE_C: (Slot.C,),
    VennRegion.OVERLAP_AB: (Slot.A, Slot.B),
    VennRegion.OVERLAP_AC: (Slot.A, Slot.C),
    VennRegion.OVERLAP_BC: (Slot.B, Slot.C),
    VennRegion.OVERLAP_ALL: (Slot.A, Slot.B, Slot.C),
}

# region -> subcategory -> contributing slot -> coverage info
VennRegionMap = dict[VennRegion, dict[str, dict[Slot, CoverageInfo]]]
