from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import pandas as pd

from .config import BUNDLED_GAME_CSV, DEFAULT_GAME_CONFIG, GameConfig
from .models import GameRecipe

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameDataset:
    """Immutable game recipes plus the flattened ingredient vocabulary."""

    recipes: tuple[GameRecipe, ...]
    vocabulary: tuple[str, ...]

    @classmethod
    def from_recipes(cls, recipes: list[GameRecipe]) -> GameDataset:
        vocabulary = sorted({ing for r in recipes for ing in r.ingredients})
        return cls(recipes=tuple(recipes), vocabulary=tuple(vocabulary))

    def find(self, name: str) -> GameRecipe | None:
        for recipe in self.recipes:
            if recipe.name == name:
                return recipe
        return None


def _read_csv(path: Path) -> list[GameRecipe]:
    df = pd.read_csv(path)

    # Pre-parse the ingredient column into lists
    df["ingredients_list"] = (
        df["ingredients"]
        .fillna("")
        .apply(lambda s: [i.strip() for i in s.split("|") if i.strip()])
    )
    df["description"] = df["description"].fillna("")

    return [
        GameRecipe(
            name=row["name"],
            category=row["category"],
            difficulty=row["difficulty"],
            cook_time=int(row["cook_time"]),
            description=row["description"],
            ingredients=row["ingredients_list"],
        )
        for _, row in df.iterrows()
    ]


def load_game_dataset(path: Path) -> GameDataset:
    """Read the game dataset, falling back to the bundled copy."""
    try:
        recipes = _read_csv(path)
    except (OSError, ValueError, KeyError):
        if path == BUNDLED_GAME_CSV:
            raise
        logger.warning(
            "Could not load game recipes from %s, using bundled dataset", path, exc_info=True,
        )
        recipes = _read_csv(BUNDLED_GAME_CSV)
    return GameDataset.from_recipes(recipes)


_dataset: GameDataset | None = None


def get_game_dataset(config: GameConfig = DEFAULT_GAME_CONFIG) -> GameDataset:
    """Return the game dataset, loading it on first call."""
    global _dataset
    if _dataset is None:
        _dataset = load_game_dataset(config.data_path)
    return _dataset
