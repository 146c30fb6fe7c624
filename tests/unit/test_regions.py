from itertools import combinations

import pytest

from domain.coverage import SetRegionComputer, region_counts, region_union
from domain.schemas import CoverageInfo, Slot, VennRegion
from domain.taxonomy import default_taxonomy, parse_taxonomy_config

TAX = parse_taxonomy_config(
    {
        "areas": {"Area": ["Cat"]},
        "subcategories": {"Cat": ["w", "x", "y", "z"]},
        "depths": ["d1", "d2", "d3"],
    }
)


def _mk_map(*subs: str, depth: str = "d1", tag: str = "") -> dict[str, CoverageInfo]:
    return {s: CoverageInfo(depth=depth, justification=f"{tag}{s}") for s in subs}


def _keys(regions, region: VennRegion) -> set[str]:
    return set(regions[region])


def test_two_entities() -> None:
    regions = SetRegionComputer(TAX).compute_regions(_mk_map("x", "y"), _mk_map("y", "z"))

    assert _keys(regions, VennRegion.UNIQUE_A) == {"x"}
    assert _keys(regions, VennRegion.UNIQUE_B) == {"z"}
    assert _keys(regions, VennRegion.OVERLAP_AB) == {"y"}
    for region in (VennRegion.UNIQUE_C, VennRegion.OVERLAP_AC, VennRegion.OVERLAP_BC, VennRegion.OVERLAP_ALL):
        assert regions[region] == {}


def test_three_entities_triple_overlap_takes_precedence() -> None:
    regions = SetRegionComputer(TAX).compute_regions(_mk_map("x", "y"), _mk_map("y", "z"), _mk_map("y"))

    assert _keys(regions, VennRegion.OVERLAP_ALL) == {"y"}
    assert _keys(regions, VennRegion.UNIQUE_A) == {"x"}
    assert _keys(regions, VennRegion.UNIQUE_B) == {"z"}
    assert _keys(regions, VennRegion.UNIQUE_C) == set()
    assert _keys(regions, VennRegion.OVERLAP_AB) == set()
    assert _keys(regions, VennRegion.OVERLAP_AC) == set()
    assert _keys(regions, VennRegion.OVERLAP_BC) == set()


def test_entries_carry_member_coverage_only() -> None:
    a = _mk_map("w", "x", tag="A:")
    b = _mk_map("x", "y", depth="d2", tag="B:")
    c = _mk_map("y", "w", depth="d3", tag="C:")
    regions = SetRegionComputer(TAX).compute_regions(a, b, c)

    assert regions[VennRegion.OVERLAP_AB]["x"] == {Slot.A: a["x"], Slot.B: b["x"]}
    assert regions[VennRegion.OVERLAP_BC]["y"] == {Slot.B: b["y"], Slot.C: c["y"]}
    assert regions[VennRegion.OVERLAP_AC]["w"] == {Slot.A: a["w"], Slot.C: c["w"]}
    assert regions[VennRegion.OVERLAP_AB]["x"][Slot.B].depth == "d2"


@pytest.mark.parametrize(
    "a, b, c",
    [
        ({"w", "x"}, {"x", "y"}, {"y", "z", "w"}),
        ({"w", "x", "y", "z"}, {"x"}, set()),
        (set(), set(), {"z"}),
        ({"w"}, {"w"}, {"w"}),
        ({"x", "q"}, {"q", "r"}, None),
    ],
)
def test_regions_partition_the_union(a, b, c) -> None:
    maps = [_mk_map(*sorted(s)) if s is not None else None for s in (a, b, c)]
    regions = SetRegionComputer(TAX).compute_regions(*maps)

    key_sets = [set(regions[r]) for r in VennRegion]
    for left, right in combinations(key_sets, 2):
        assert not (left & right)

    union = a | b | (c or set())
    assert region_union(regions) == union
    assert sum(region_counts(regions).values()) == len(union)


def test_entries_follow_taxonomy_order_then_alpha() -> None:
    regions = SetRegionComputer(TAX).compute_regions(_mk_map("z", "beta", "w", "alpha", "x"), {})
    assert list(regions[VennRegion.UNIQUE_A]) == ["w", "x", "z", "alpha", "beta"]


def test_first_taxonomy_subcategory_sorts_first() -> None:
    tax = default_taxonomy()
    first = next(tax.iter_leaves())[2]
    regions = SetRegionComputer(tax).compute_regions(_mk_map("6.4 AI Agents", first), {})
    assert list(regions[VennRegion.UNIQUE_A]) == [first, "6.4 AI Agents"]


def test_missing_required_map_raises() -> None:
    with pytest.raises(ValueError):
        SetRegionComputer(TAX).compute_regions(_mk_map("x"), None)


def test_inputs_are_not_mutated() -> None:
    a = _mk_map("x", "y")
    b = _mk_map("y")
    SetRegionComputer(TAX).compute_regions(a, b)
    assert set(a) == {"x", "y"}
    assert set(b) == {"y"}


def test_all_seven_keys_present() -> None:
    regions = SetRegionComputer(TAX).compute_regions({}, {})
    assert set(regions) == set(VennRegion)
    assert region_counts(regions) == {r: 0 for r in VennRegion}
