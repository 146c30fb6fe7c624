import pytest
from pydantic import ValidationError

from application.selection import Selection, available_entities
from domain.schemas import Slot


def test_two_way_selection() -> None:
    sel = Selection(a="A", b="B")
    assert not sel.is_three_way
    assert sel.by_slot() == {Slot.A: "A", Slot.B: "B"}


def test_blank_third_slot_means_none() -> None:
    sel = Selection(a=" A ", b="B", c="  ")
    assert sel.c is None
    assert sel.a == "A"


def test_from_list_three_way() -> None:
    sel = Selection.from_list(["A", "B", "C"])
    assert sel.is_three_way
    assert sel.as_list() == ["A", "B", "C"]


@pytest.mark.parametrize("entities", [["A"], ["A", "B", "C", "D"]])
def test_from_list_wrong_size(entities) -> None:
    with pytest.raises(ValueError):
        Selection.from_list(entities)


def test_requires_two_courses() -> None:
    with pytest.raises(ValidationError):
        Selection(a="A", b="")


def test_duplicate_course_rejected() -> None:
    with pytest.raises(ValidationError):
        Selection(a="A", b="B", c="A")


def test_available_entities_excludes_other_slots() -> None:
    all_entities = ["15.071 Analytics", "15.072 Advanced", "15.095 ML", "6.036 Intro ML"]
    selected = ["15.071 Analytics", "", "15.095 ML"]
    assert available_entities(all_entities, selected, 1) == ["15.072 Advanced", "6.036 Intro ML"]
    # a slot's own current value stays available
    assert "15.095 ML" in available_entities(all_entities, selected, 2)


def test_available_entities_search_is_case_insensitive() -> None:
    all_entities = ["15.095 ML", "6.036 Intro ML", "15.071 Analytics"]
    assert available_entities(all_entities, [None, None, None], 0, search="ml") == ["15.095 ML", "6.036 Intro ML"]
