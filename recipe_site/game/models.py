from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator

from ..catalog.models import Difficulty
from .config import DEFAULT_GAME_CONFIG


class GameMode(str, Enum):
    random = "random"
    difficulty = "difficulty"
    specific = "specific"


class GameState(str, Enum):
    idle = "idle"
    in_round = "in_round"
    round_transition = "round_transition"
    ended = "ended"


class GameRecipe(BaseModel):
    name: str
    category: str
    difficulty: Difficulty
    cook_time: int = Field(default=0, ge=0)
    description: str = ""
    ingredients: list[str] = Field(..., min_length=1)

    @field_validator("ingredients")
    @classmethod
    def _unique(cls, values: list[str]) -> list[str]:
        return list(dict.fromkeys(values))


class GameSession(BaseModel):
    mode: GameMode = GameMode.random
    selected_difficulty: Difficulty | None = None
    selected_recipe: str | None = None
    state: GameState = GameState.idle
    current_recipe: GameRecipe | None = None
    guessed_ingredients: list[str] = Field(default_factory=list)
    pool: list[str] = Field(default_factory=list)
    score: int = Field(default=0, ge=0)
    time_left: int = Field(default=DEFAULT_GAME_CONFIG.round_seconds, ge=0)
    streak: int = 0
    best_streak: int = 0
    recipes_completed: int = 0

    @property
    def running(self) -> bool:
        return self.state in (GameState.in_round, GameState.round_transition)

    @property
    def distractors(self) -> list[str]:
        if self.current_recipe is None:
            return []
        correct = set(self.current_recipe.ingredients)
        return [i for i in self.pool if i not in correct]

    @property
    def correct_guesses(self) -> list[str]:
        if self.current_recipe is None:
            return []
        correct = set(self.current_recipe.ingredients)
        return [i for i in self.guessed_ingredients if i in correct]


class GuessResult(BaseModel):
    ingredient: str
    accepted: bool = True
    correct: bool = False
    points: int = 0
    completion_bonus: int = 0
    round_complete: bool = False
    advance_scheduled: bool = False


class ScoreRating(BaseModel):
    label: str
    tier: int


# ── API bodies ───────────────────────────────────────────────────────────


class GameStartRequest(BaseModel):
    mode: GameMode = GameMode.random
    difficulty: Difficulty | None = None
    recipe_name: str | None = None


class GuessRequest(BaseModel):
    ingredient: str = Field(..., min_length=1)


class GameRecipeOut(BaseModel):
    name: str
    category: str
    difficulty: Difficulty
    cook_time: int
    description: str
    ingredient_count: int


class GameView(BaseModel):
    """Client-facing session; the answer set stays hidden until the game ends."""

    mode: GameMode
    selected_difficulty: Difficulty | None
    selected_recipe: str | None
    state: GameState
    recipe: GameRecipeOut | None
    pool: list[str]
    guessed_ingredients: list[str]
    correct_guesses: list[str]
    score: int
    time_left: int
    streak: int
    best_streak: int
    recipes_completed: int
    answers: list[str] | None = None
    rating: ScoreRating | None = None
