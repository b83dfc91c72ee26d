from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

import pandas as pd

from .config import BUNDLED_RECIPES_CSV, DEFAULT_CATALOG_CONFIG, CatalogConfig
from .models import Recipe, RecipeCreate, RecipeUpdate

logger = logging.getLogger(__name__)

LIST_SEPARATOR = "|"


def _split(value) -> list[str]:
    if pd.isna(value):
        return []
    return [part.strip() for part in str(value).split(LIST_SEPARATOR) if part.strip()]


def _optional_text(value) -> str | None:
    if pd.isna(value) or not str(value).strip():
        return None
    return str(value)


def _read_csv(path: Path) -> list[Recipe]:
    df = pd.read_csv(path, dtype={"id": str})

    recipes: list[Recipe] = []
    for _, row in df.iterrows():
        recipes.append(Recipe(
            id=str(row["id"]),
            title=row["title"],
            description=row.get("description") if pd.notna(row.get("description")) else "",
            image=row.get("image") if pd.notna(row.get("image")) else "",
            prep_time=int(row["prep_time"]),
            cook_time=int(row["cook_time"]),
            servings=int(row["servings"]),
            difficulty=row["difficulty"],
            category=row["category"],
            ingredients=_split(row["ingredients"]),
            instructions=_split(row["instructions"]),
            created_at=date.fromisoformat(str(row["created_at"])),
            story=_optional_text(row.get("story")),
        ))
    return recipes


def load_recipes(path: Path) -> list[Recipe]:
    """Read recipes from *path*, falling back to the bundled dataset."""
    try:
        return _read_csv(path)
    except (OSError, ValueError, KeyError):
        if path == BUNDLED_RECIPES_CSV:
            raise
        logger.warning(
            "Could not load recipes from %s, using bundled dataset", path, exc_info=True,
        )
        return _read_csv(BUNDLED_RECIPES_CSV)


class RecipeStore:
    """In-memory recipe rows with create/read/update/delete."""

    def __init__(self, recipes: list[Recipe] | None = None) -> None:
        self._recipes: list[Recipe] = list(recipes or [])
        # Ids are never reused after a delete
        self._last_id = max((int(r.id) for r in self._recipes if r.id.isdigit()), default=0)

    def list_all(self) -> list[Recipe]:
        return list(self._recipes)

    def get_by_id(self, recipe_id: str) -> Recipe | None:
        for recipe in self._recipes:
            if recipe.id == recipe_id:
                return recipe
        return None

    def _next_id(self) -> str:
        self._last_id += 1
        return str(self._last_id)

    def create(self, data: RecipeCreate, today: date | None = None) -> Recipe:
        recipe = Recipe(
            id=self._next_id(),
            created_at=today or date.today(),
            **data.model_dump(),
        )
        self._recipes.append(recipe)
        logger.info("Created recipe %s (%s)", recipe.id, recipe.title)
        return recipe

    def update(self, recipe_id: str, changes: RecipeUpdate) -> Recipe | None:
        for index, recipe in enumerate(self._recipes):
            if recipe.id == recipe_id:
                # story is the only field that may be cleared with an explicit null
                update = {
                    k: v for k, v in changes.model_dump(exclude_unset=True).items()
                    if v is not None or k == "story"
                }
                merged = recipe.model_copy(update=update)
                self._recipes[index] = merged
                logger.info("Updated recipe %s", recipe_id)
                return merged
        return None

    def delete(self, recipe_id: str) -> bool:
        remaining = [r for r in self._recipes if r.id != recipe_id]
        if len(remaining) == len(self._recipes):
            return False
        self._recipes = remaining
        logger.info("Deleted recipe %s", recipe_id)
        return True


_store: RecipeStore | None = None


def get_recipe_store(config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> RecipeStore:
    """Return the process-wide recipe store, loading it on first call."""
    global _store
    if _store is None:
        _store = RecipeStore(load_recipes(config.data_path))
    return _store


def reset_recipe_store() -> None:
    global _store
    _store = None
