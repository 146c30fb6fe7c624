"""Immutable curriculum taxonomy: Areas -> Categories -> Subcategories, plus depth levels."""

from collections.abc import Iterator
from functools import cached_property

from pydantic import BaseModel, ConfigDict, Field, model_validator

EXPECTED_DEPTH_COUNT = 3


class TaxonomySchema(BaseModel):
    """
    Fixed classification hierarchy used for validation and deterministic ordering.

    The schema is frozen: there are no mutation operations and consumers receive it
    at construction time instead of reading module-level constants.
    """

    model_config = ConfigDict(frozen=True)

    areas: list[str] = Field(..., description="Areas in display order.")
    categories: dict[str, list[str]] = Field(..., description="Area -> ordered categories.")
    subcategories: dict[str, list[str]] = Field(..., description="Category -> ordered subcategories.")
    depths: list[str] = Field(..., description="Depth levels in order (primary, significant, minor).")

    @model_validator(mode="after")
    def _validate(self) -> "TaxonomySchema":
        if not self.areas:
            raise ValueError("taxonomy must define at least one area")
        if len(set(self.areas)) != len(self.areas):
            raise ValueError("duplicate area names in taxonomy")

        unknown_areas = set(self.categories) - set(self.areas)
        if unknown_areas:
            raise ValueError(f"categories defined for unknown areas: {sorted(unknown_areas)}")

        seen_categories: set[str] = set()
        for area in self.areas:
            cats = self.categories.get(area) or []
            if not cats:
                raise ValueError(f"area {area!r} has no categories")
            for cat in cats:
                if cat in seen_categories:
                    raise ValueError(f"category {cat!r} appears more than once")
                seen_categories.add(cat)

        unknown_cats = set(self.subcategories) - seen_categories
        if unknown_cats:
            raise ValueError(f"subcategories defined for unknown categories: {sorted(unknown_cats)}")

        # EntityCoverageMap is keyed by subcategory alone, so names must be globally unique
        seen_subcats: set[str] = set()
        for cat in seen_categories:
            subs = self.subcategories.get(cat) or []
            if not subs:
                raise ValueError(f"category {cat!r} has no subcategories")
            for sub in subs:
                if sub in seen_subcats:
                    raise ValueError(f"subcategory {sub!r} appears more than once")
                seen_subcats.add(sub)

        if len(self.depths) != EXPECTED_DEPTH_COUNT:
            raise ValueError(f"taxonomy must define exactly {EXPECTED_DEPTH_COUNT} depth levels, got {len(self.depths)}")
        if len(set(self.depths)) != len(self.depths):
            raise ValueError("duplicate depth levels in taxonomy")

        return self

    # ---- Ordered lookups ----

    def areas_in_order(self) -> list[str]:
        return list(self.areas)

    def categories_of(self, area: str) -> list[str]:
        return list(self.categories.get(area, []))

    def subcategories_of(self, category: str) -> list[str]:
        return list(self.subcategories.get(category, []))

    def depth_levels_in_order(self) -> list[str]:
        return list(self.depths)

    # ---- Membership predicates ----

    def is_valid_area(self, area: str) -> bool:
        return area in self.categories

    def is_valid_category(self, area: str, category: str) -> bool:
        return category in self.categories.get(area, [])

    def is_valid_subcategory(self, category: str, subcategory: str) -> bool:
        return subcategory in self.subcategories.get(category, [])

    def is_valid_depth(self, depth: str) -> bool:
        return depth in self.depths

    def is_valid_leaf(self, area: str, category: str, subcategory: str, depth: str) -> bool:
        """True when the full path resolves with correct parent-child relationships."""
        return (
            self.is_valid_area(area)
            and self.is_valid_category(area, category)
            and self.is_valid_subcategory(category, subcategory)
            and self.is_valid_depth(depth)
        )

    # ---- Iteration helpers for table builders ----

    def iter_leaves(self) -> Iterator[tuple[str, str, str]]:
        """Yield (area, category, subcategory) in taxonomy order."""
        for area in self.areas:
            for category in self.categories[area]:
                for subcategory in self.subcategories[category]:
                    yield area, category, subcategory

    def area_row_count(self, area: str) -> int:
        """Number of subcategory rows spanned by an area in the merged hierarchy table."""
        return sum(len(self.subcategories[c]) for c in self.categories.get(area, []))

    def category_row_count(self, category: str) -> int:
        return len(self.subcategories.get(category, []))

    @cached_property
    def _positions(self) -> dict[str, int]:
        return {sub: idx for idx, (_, _, sub) in enumerate(self.iter_leaves())}

    def leaf_count(self) -> int:
        return len(self._positions)

    def subcategory_position(self, subcategory: str) -> int | None:
        """Index of a subcategory in taxonomy order, or None if unknown."""
        return self._positions.get(subcategory)
