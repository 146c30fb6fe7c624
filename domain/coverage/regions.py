"""Venn decomposition of 2-3 entities' subcategory coverage."""

from domain.schemas import CoverageInfo, EntityCoverageMap, Slot, VennRegion, VennRegionMap
from domain.taxonomy.schema import TaxonomySchema


class SetRegionComputer:
    """
    Split the union of selected entities' subcategories into the seven Venn regions.

    Stateless: every call recomputes from its arguments. The taxonomy only drives
    the order of subcategories inside each region.
    """

    def __init__(self, taxonomy: TaxonomySchema) -> None:
        self.taxonomy = taxonomy

    def _sort_key(self, subcategory: str) -> tuple[int, str]:
        # Unknown subcategories go after known ones, alphabetically
        pos = self.taxonomy.subcategory_position(subcategory)
        return (pos if pos is not None else self.taxonomy.leaf_count(), subcategory)

    def compute_regions(
        self,
        a: EntityCoverageMap | None,
        b: EntityCoverageMap | None,
        c: EntityCoverageMap | None = None,
    ) -> VennRegionMap:
        """
        Compute the seven disjoint regions for two or three coverage maps.

        Region sets (with C treated as empty when absent):
            unique_a    = A - B - C
            overlap_ab  = (A & B) - C
            overlap_all = A & B & C
        and symmetrically for the other slots.

        Each region entry carries the CoverageInfo of the member slots only,
        e.g. overlap_ab entries hold A's and B's info, never C's.

        Args:
            a: Coverage map of the first entity (required)
            b: Coverage map of the second entity (required)
            c: Coverage map of the optional third entity

        Returns:
            VennRegionMap with all seven keys present (possibly empty)

        Raises:
            ValueError: If a or b is missing
        """
        if a is None or b is None:
            raise ValueError("At least two coverage maps (a and b) are required")

        maps: dict[Slot, EntityCoverageMap] = {Slot.A: a, Slot.B: b, Slot.C: c or {}}
        ka, kb, kc = (set(maps[s]) for s in (Slot.A, Slot.B, Slot.C))

        overlap_all = ka & kb & kc
        region_keys: dict[VennRegion, set[str]] = {
            VennRegion.UNIQUE_A: ka - kb - kc,
            VennRegion.UNIQUE_B: kb - ka - kc,
            VennRegion.UNIQUE_C: kc - ka - kb,
            VennRegion.OVERLAP_AB: (ka & kb) - overlap_all,
            VennRegion.OVERLAP_AC: (ka & kc) - overlap_all,
            VennRegion.OVERLAP_BC: (kb & kc) - overlap_all,
            VennRegion.OVERLAP_ALL: overlap_all,
        }

        regions: VennRegionMap = {}
        for region in VennRegion:
            entries: dict[str, dict[Slot, CoverageInfo]] = {}
            for sub in sorted(region_keys[region], key=self._sort_key):
                entries[sub] = {slot: maps[slot][sub] for slot in region.members}
            regions[region] = entries
        return regions


def region_counts(regions: VennRegionMap) -> dict[VennRegion, int]:
    """Number of subcategories per region (the Venn diagram badge counts)."""
    return {region: len(regions.get(region, {})) for region in VennRegion}


def region_union(regions: VennRegionMap) -> set[str]:
    """All subcategories appearing in any region."""
    out: set[str] = set()
    for entries in regions.values():
        out.update(entries)
    return out
