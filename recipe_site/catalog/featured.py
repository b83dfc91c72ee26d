from __future__ import annotations

import itertools
import logging
import random
from dataclasses import dataclass
from datetime import date

from .data_store import RecipeStore
from .models import FeaturedRecipe, Recipe

logger = logging.getLogger(__name__)


@dataclass
class _Entry:
    id: int
    recipe_id: str
    position: int


class FeaturedStore:
    """Ordered featured-recipe picks that reference recipes in a ``RecipeStore``.

    Entries whose recipe has since been deleted are dropped before every
    operation, the same way a cascading foreign key would remove them.
    """

    def __init__(self, recipes: RecipeStore) -> None:
        self.recipes = recipes
        self._entries: list[_Entry] = []
        self._ids = itertools.count(1)

    def _prune(self) -> None:
        kept = [e for e in self._entries if self.recipes.get_by_id(e.recipe_id) is not None]
        if len(kept) != len(self._entries):
            logger.info("Dropped %d featured entries for deleted recipes", len(self._entries) - len(kept))
            self._entries = kept

    def list_featured(self) -> list[FeaturedRecipe]:
        self._prune()
        # Lowest position first, newest entry first on ties
        ordered = sorted(
            self._entries,
            key=lambda e: (e.position, -e.id),
        )
        return [
            FeaturedRecipe(
                id=entry.id,
                recipe_id=entry.recipe_id,
                position=entry.position,
                recipe=self.recipes.get_by_id(entry.recipe_id),
            )
            for entry in ordered
        ]

    def add(self, recipe_id: str, position: int = 0) -> FeaturedRecipe | None:
        self._prune()
        recipe = self.recipes.get_by_id(recipe_id)
        if recipe is None:
            return None
        entry_id = next(self._ids)
        self._entries.append(_Entry(
            id=entry_id, recipe_id=recipe_id, position=position,
        ))
        logger.info("Featured recipe %s at position %d", recipe_id, position)
        return FeaturedRecipe(id=entry_id, recipe_id=recipe_id, position=position, recipe=recipe)

    def remove(self, recipe_id: str) -> bool:
        self._prune()
        remaining = [e for e in self._entries if e.recipe_id != recipe_id]
        if len(remaining) == len(self._entries):
            return False
        self._entries = remaining
        return True

    def update_position(self, entry_id: int, position: int) -> bool:
        self._prune()
        for entry in self._entries:
            if entry.id == entry_id:
                entry.position = position
                return True
        return False


def daily_shuffled(recipes: list[Recipe], count: int, today: date) -> list[Recipe]:
    """Shuffle *recipes* with a seed derived from *today*; stable for the day."""
    rng = random.Random(today.isoformat())
    shuffled = list(recipes)
    rng.shuffle(shuffled)
    return shuffled[:count]


def home_featured(
    recipes: RecipeStore,
    featured: FeaturedStore,
    today: date | None = None,
    count: int = 6,
) -> list[Recipe]:
    """Recipes for the home page: admin picks, or the daily shuffle without any."""
    picks = [f.recipe for f in featured.list_featured()]
    if picks:
        return picks[:count]
    return daily_shuffled(recipes.list_all(), count, today or date.today())


_featured: FeaturedStore | None = None


def get_featured_store(recipes: RecipeStore) -> FeaturedStore:
    """Return the featured store bound to *recipes*; picks start over when the recipe store is replaced."""
    global _featured
    if _featured is None or _featured.recipes is not recipes:
        _featured = FeaturedStore(recipes)
    return _featured


def reset_featured_store() -> None:
    global _featured
    _featured = None
