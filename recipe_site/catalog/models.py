from __future__ import annotations

from datetime import date
from enum import Enum

from pydantic import BaseModel, Field, field_validator

from .config import DEFAULT_FILTER_BOUNDS


class Difficulty(str, Enum):
    easy = "Easy"
    medium = "Medium"
    hard = "Hard"


DIFFICULTY_RANK: dict[Difficulty, int] = {
    Difficulty.easy: 1,
    Difficulty.medium: 2,
    Difficulty.hard: 3,
}


class SortKey(str, Enum):
    name = "name"
    newest = "newest"
    prep_time = "prepTime"
    cook_time = "cookTime"
    total_time = "totalTime"
    difficulty = "difficulty"
    servings = "servings"


class Recipe(BaseModel):
    id: str
    title: str
    description: str = ""
    image: str = ""
    prep_time: int = Field(default=0, ge=0)
    cook_time: int = Field(default=0, ge=0)
    servings: int = Field(default=1, ge=1)
    difficulty: Difficulty = Difficulty.easy
    category: str = "Main Course"
    ingredients: list[str] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)
    created_at: date
    story: str | None = None

    @property
    def total_time(self) -> int:
        return self.prep_time + self.cook_time


class RecipeCreate(BaseModel):
    title: str = Field(..., min_length=1)
    description: str = ""
    image: str = ""
    prep_time: int = Field(default=0, ge=0)
    cook_time: int = Field(default=0, ge=0)
    servings: int = Field(default=1, ge=1)
    difficulty: Difficulty = Difficulty.easy
    category: str = "Main Course"
    ingredients: list[str] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)
    story: str | None = None


class RecipeUpdate(BaseModel):
    """Partial update; only fields explicitly sent are merged."""

    title: str | None = Field(default=None, min_length=1)
    description: str | None = None
    image: str | None = None
    prep_time: int | None = Field(default=None, ge=0)
    cook_time: int | None = Field(default=None, ge=0)
    servings: int | None = Field(default=None, ge=1)
    difficulty: Difficulty | None = None
    category: str | None = None
    ingredients: list[str] | None = None
    instructions: list[str] | None = None
    story: str | None = None


class FilterState(BaseModel):
    categories: list[str] = Field(default_factory=list)
    difficulties: list[Difficulty] = Field(default_factory=list)
    prep_time_range: tuple[int, int] = DEFAULT_FILTER_BOUNDS.prep_time
    cook_time_range: tuple[int, int] = DEFAULT_FILTER_BOUNDS.cook_time
    servings_range: tuple[int, int] = DEFAULT_FILTER_BOUNDS.servings
    sort_by: SortKey = SortKey.name
    search_term: str = ""
    available_ingredients: list[str] = Field(default_factory=list)

    @field_validator("categories", "difficulties", "available_ingredients")
    @classmethod
    def _dedupe(cls, values: list) -> list:
        # Selections behave as sets but keep the order they were picked in
        return list(dict.fromkeys(values))


class RecipeSearchResult(BaseModel):
    recipes: list[Recipe]
    total_recipes: int
    total_matches: int
    available_categories: list[str]
    active_filter_count: int
    filters: FilterState


class FeaturedRecipe(BaseModel):
    id: int
    recipe_id: str
    position: int
    recipe: Recipe


class FeaturedActionType(str, Enum):
    add = "add"
    remove = "remove"
    update_position = "updatePosition"


class FeaturedAction(BaseModel):
    action: FeaturedActionType
    recipe_id: str | None = None
    id: int | None = None
    position: int = 0
