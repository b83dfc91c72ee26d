"""
Filter editing helpers.

These sit at the boundary between user input and the filter engine: every
edit returns a new ``FilterState`` whose ranges lie inside the domain bounds
with ``min <= max``. Out-of-range input is clamped, never rejected.
"""

from __future__ import annotations

from typing import Literal

from .config import DEFAULT_FILTER_BOUNDS, FilterBounds
from .models import Difficulty, FilterState, SortKey

RangeField = Literal["prep_time_range", "cook_time_range", "servings_range"]

_BOUNDS_FOR: dict[str, str] = {
    "prep_time_range": "prep_time",
    "cook_time_range": "cook_time",
    "servings_range": "servings",
}


def clamp_range(lo: int, hi: int, bounds: tuple[int, int]) -> tuple[int, int]:
    floor, ceiling = bounds
    lo = max(floor, min(ceiling, lo))
    hi = max(floor, min(ceiling, hi))
    if lo > hi:
        lo = hi
    return lo, hi


def with_range(
    filters: FilterState,
    field: RangeField,
    lo: int,
    hi: int,
    bounds: FilterBounds = DEFAULT_FILTER_BOUNDS,
) -> FilterState:
    domain = getattr(bounds, _BOUNDS_FOR[field])
    return filters.model_copy(update={field: clamp_range(lo, hi, domain)})


def clamp_filters(
    filters: FilterState, bounds: FilterBounds = DEFAULT_FILTER_BOUNDS,
) -> FilterState:
    """Bring every range of *filters* inside *bounds*; unchanged state is returned as is."""
    update = {}
    for field, name in _BOUNDS_FOR.items():
        current = tuple(getattr(filters, field))
        clamped = clamp_range(*current, getattr(bounds, name))
        if clamped != current:
            update[field] = clamped
    if not update:
        return filters
    return filters.model_copy(update=update)


def _toggle(values: list, item) -> list:
    if item in values:
        return [v for v in values if v != item]
    return [*values, item]


def toggle_category(filters: FilterState, category: str) -> FilterState:
    return filters.model_copy(update={"categories": _toggle(filters.categories, category)})


def toggle_difficulty(filters: FilterState, difficulty: Difficulty) -> FilterState:
    return filters.model_copy(
        update={"difficulties": _toggle(filters.difficulties, Difficulty(difficulty))}
    )


def toggle_ingredient(filters: FilterState, ingredient: str) -> FilterState:
    return filters.model_copy(
        update={"available_ingredients": _toggle(filters.available_ingredients, ingredient)}
    )


def set_search(filters: FilterState, term: str) -> FilterState:
    return filters.model_copy(update={"search_term": term})


def set_sort(filters: FilterState, sort_by: SortKey) -> FilterState:
    return filters.model_copy(update={"sort_by": SortKey(sort_by)})


def clear_filters() -> FilterState:
    return FilterState()
