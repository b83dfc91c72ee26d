from __future__ import annotations

from typing import Callable, Iterable, Sequence

from .config import DEFAULT_FILTER_BOUNDS, FilterBounds
from .filter_state import clamp_filters
from .models import (
    DIFFICULTY_RANK,
    Difficulty,
    FilterState,
    Recipe,
    RecipeSearchResult,
    SortKey,
)

_SORT_KEYS: dict[SortKey, Callable[[Recipe], object]] = {
    SortKey.name: lambda r: r.title.casefold(),
    SortKey.newest: lambda r: r.created_at,
    SortKey.prep_time: lambda r: r.prep_time,
    SortKey.cook_time: lambda r: r.cook_time,
    SortKey.total_time: lambda r: r.total_time,
    SortKey.difficulty: lambda r: DIFFICULTY_RANK[r.difficulty],
    SortKey.servings: lambda r: r.servings,
}


def _matches_search(recipe: Recipe, term_lower: str) -> bool:
    return (
        term_lower in recipe.title.lower()
        or term_lower in recipe.description.lower()
        or term_lower in recipe.category.lower()
        or any(term_lower in ing.lower() for ing in recipe.ingredients)
    )


def _uses_any(recipe: Recipe, wanted_lower: list[str]) -> bool:
    return any(
        available in ing.lower()
        for ing in recipe.ingredients
        for available in wanted_lower
    )


def _in_range(value: int, bounds: tuple[int, int]) -> bool:
    return bounds[0] <= value <= bounds[1]


def apply_filters(recipes: Sequence[Recipe], filters: FilterState) -> list[Recipe]:
    """Return the recipes matching *filters*, sorted by ``filters.sort_by``.

    All stages are AND-combined. The sort is stable, so recipes with equal
    keys keep their input order.
    """
    filtered = list(recipes)

    # --- Search ---
    if filters.search_term.strip():
        term_lower = filters.search_term.lower()
        filtered = [r for r in filtered if _matches_search(r, term_lower)]

    # --- Ingredients on hand ---
    if filters.available_ingredients:
        wanted_lower = [a.lower() for a in filters.available_ingredients]
        filtered = [r for r in filtered if _uses_any(r, wanted_lower)]

    # --- Set membership ---
    if filters.categories:
        categories = set(filters.categories)
        filtered = [r for r in filtered if r.category in categories]

    if filters.difficulties:
        difficulties = set(filters.difficulties)
        filtered = [r for r in filtered if r.difficulty in difficulties]

    # --- Ranges ---
    filtered = [
        r
        for r in filtered
        if _in_range(r.prep_time, filters.prep_time_range)
        and _in_range(r.cook_time, filters.cook_time_range)
        and _in_range(r.servings, filters.servings_range)
    ]

    # sorted() is stable, and reverse=True keeps equal items in input order
    reverse = filters.sort_by == SortKey.newest
    return sorted(filtered, key=_SORT_KEYS[filters.sort_by], reverse=reverse)


def available_categories(
    recipes: Iterable[Recipe], difficulties: Iterable[Difficulty] = (),
) -> list[str]:
    """Categories offered by the recipes in the selected difficulties."""
    selected = set(difficulties)
    return sorted({
        r.category for r in recipes if not selected or r.difficulty in selected
    })


def reconcile_categories(recipes: Sequence[Recipe], filters: FilterState) -> FilterState:
    """Deselect categories that the difficulty selection no longer offers."""
    if not filters.categories:
        return filters
    available = set(available_categories(recipes, filters.difficulties))
    valid = [c for c in filters.categories if c in available]
    if len(valid) == len(filters.categories):
        return filters
    return filters.model_copy(update={"categories": valid})


def active_filter_count(
    filters: FilterState, bounds: FilterBounds = DEFAULT_FILTER_BOUNDS,
) -> int:
    checks = [
        bool(filters.categories),
        bool(filters.difficulties),
        tuple(filters.prep_time_range) != bounds.prep_time,
        tuple(filters.cook_time_range) != bounds.cook_time,
        tuple(filters.servings_range) != bounds.servings,
        filters.sort_by != SortKey.name,
        filters.search_term.strip() != "",
        bool(filters.available_ingredients),
    ]
    return sum(1 for c in checks if c)


def all_ingredients(recipes: Iterable[Recipe]) -> list[str]:
    return sorted({ing for r in recipes for ing in r.ingredients})


def search_recipes(recipes: Sequence[Recipe], filters: FilterState) -> RecipeSearchResult:
    """Clamp the ranges and reconcile the category selection, then filter and sort."""
    filters = reconcile_categories(recipes, clamp_filters(filters))
    matches = apply_filters(recipes, filters)
    return RecipeSearchResult(
        recipes=matches,
        total_recipes=len(recipes),
        total_matches=len(matches),
        available_categories=available_categories(recipes, filters.difficulties),
        active_filter_count=active_filter_count(filters),
        filters=filters,
    )
