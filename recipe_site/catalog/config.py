from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

BUNDLED_RECIPES_CSV = Path(__file__).resolve().parent.parent / "data" / "recipes.csv"


@dataclass(frozen=True)
class FilterBounds:
    """Domain bounds for the numeric filter sliders (inclusive)."""

    prep_time: tuple[int, int] = (0, 120)
    cook_time: tuple[int, int] = (0, 300)
    servings: tuple[int, int] = (1, 12)


@dataclass(frozen=True)
class CatalogConfig:
    data_path: Path = Path(os.getenv("RECIPE_DATA_PATH", str(BUNDLED_RECIPES_CSV)))
    home_featured_count: int = 6


DEFAULT_FILTER_BOUNDS = FilterBounds()
DEFAULT_CATALOG_CONFIG = CatalogConfig()
