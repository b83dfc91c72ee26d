from __future__ import annotations

from recipe_site.catalog.filter_state import (
    clamp_filters,
    clamp_range,
    clear_filters,
    set_search,
    set_sort,
    toggle_category,
    toggle_difficulty,
    toggle_ingredient,
    with_range,
)
from recipe_site.catalog.filters import active_filter_count
from recipe_site.catalog.models import Difficulty, FilterState, SortKey


class TestClampRange:
    def test_inside_bounds_unchanged(self):
        assert clamp_range(10, 60, (0, 120)) == (10, 60)

    def test_clamps_to_domain(self):
        assert clamp_range(-5, 500, (0, 120)) == (0, 120)

    def test_inverted_range_collapses(self):
        assert clamp_range(90, 30, (0, 120)) == (30, 30)

    def test_servings_floor_is_one(self):
        assert clamp_range(0, 0, (1, 12)) == (1, 1)


def test_with_range_uses_field_bounds():
    filters = with_range(FilterState(), "cook_time_range", 10, 999)
    assert filters.cook_time_range == (10, 300)


def test_with_range_never_rejects():
    filters = with_range(FilterState(), "servings_range", 20, -3)
    lo, hi = filters.servings_range
    assert 1 <= lo <= hi <= 12


def test_toggle_category_adds_then_removes():
    filters = toggle_category(FilterState(), "Dessert")
    assert filters.categories == ["Dessert"]
    filters = toggle_category(filters, "Salad")
    assert filters.categories == ["Dessert", "Salad"]
    filters = toggle_category(filters, "Dessert")
    assert filters.categories == ["Salad"]


def test_toggle_difficulty_accepts_plain_string():
    filters = toggle_difficulty(FilterState(), "Hard")
    assert filters.difficulties == [Difficulty.hard]
    assert toggle_difficulty(filters, Difficulty.hard).difficulties == []


def test_toggle_ingredient():
    filters = toggle_ingredient(FilterState(), "egg")
    assert filters.available_ingredients == ["egg"]


def test_edits_do_not_mutate_previous_state():
    original = FilterState()
    set_search(original, "pie")
    set_sort(original, SortKey.newest)
    assert original == FilterState()


def test_clear_filters_resets_count():
    filters = set_sort(set_search(toggle_category(FilterState(), "Soup"), "tomato"), "cookTime")
    assert active_filter_count(filters) == 3
    assert active_filter_count(clear_filters()) == 0


class TestClampFilters:
    def test_inverted_and_out_of_domain_ranges(self):
        filters = FilterState(prep_time_range=(90, 30), cook_time_range=(-50, 9999), servings_range=(0, 40))
        clamped = clamp_filters(filters)
        assert clamped.prep_time_range == (30, 30)
        assert clamped.cook_time_range == (0, 300)
        assert clamped.servings_range == (1, 12)

    def test_valid_state_is_returned_unchanged(self):
        filters = FilterState(prep_time_range=(5, 60))
        assert clamp_filters(filters) is filters

    def test_clamped_domain_range_no_longer_counts_as_active(self):
        filters = FilterState(cook_time_range=(-50, 9999))
        assert active_filter_count(filters) == 1
        assert active_filter_count(clamp_filters(filters)) == 0
