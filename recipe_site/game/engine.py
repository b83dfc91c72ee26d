"""
Cooking game rules.

A game is a 60 second run of rounds. Each round shows the ingredients of one
recipe mixed with distractors; the player picks the ones that belong.

Scoring per correct pick::

    base(difficulty) + 2 × streak + time_bonus(time_left)

with base 5/10/15 for Easy/Medium/Hard and a time bonus of 5 (>45s left),
3 (>30s) or 1. Finding the whole set adds ``floor(time_left / 2) × 10``.
A wrong pick resets the streak and costs 5 seconds.

These functions mutate the ``GameSession`` they are given. Scheduling (the
countdown and the pause between rounds) belongs to ``game.runner``.
"""

from __future__ import annotations

import logging
import random

from ..catalog.models import Difficulty
from .config import DEFAULT_GAME_CONFIG, GameConfig
from .dataset import GameDataset
from .models import (
    GameMode,
    GameRecipe,
    GameSession,
    GameState,
    GuessResult,
    ScoreRating,
)

logger = logging.getLogger(__name__)

_rng = random.Random()

SCORE_TIERS: list[tuple[int, str]] = [
    (500, "Legendary Chef!"),
    (400, "Master Chef!"),
    (300, "Expert Cook!"),
    (200, "Skilled Chef!"),
    (100, "Good Cook!"),
    (50, "Kitchen Helper!"),
]
FALLBACK_RATING = "Keep Practicing!"


# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------


def base_points(difficulty: Difficulty, config: GameConfig = DEFAULT_GAME_CONFIG) -> int:
    return config.base_points[Difficulty(difficulty).value]


def time_bonus(time_left: int) -> int:
    if time_left > 45:
        return 5
    if time_left > 30:
        return 3
    return 1


def completion_bonus(time_left: int) -> int:
    return (time_left // 2) * 10


def score_rating(score: int) -> ScoreRating:
    """Map a final score onto a praise tier; tier 0 is below the first threshold."""
    for index, (threshold, label) in enumerate(SCORE_TIERS):
        if score >= threshold:
            return ScoreRating(label=label, tier=len(SCORE_TIERS) - index)
    return ScoreRating(label=FALLBACK_RATING, tier=0)


# ---------------------------------------------------------------------------
# Rounds
# ---------------------------------------------------------------------------


def _pick_recipe(session: GameSession, dataset: GameDataset, rng: random.Random) -> GameRecipe:
    recipes = dataset.recipes
    if session.mode == GameMode.specific:
        return dataset.find(session.selected_recipe or "") or recipes[0]
    if session.mode == GameMode.difficulty and session.selected_difficulty is not None:
        matching = [r for r in recipes if r.difficulty == session.selected_difficulty]
        return rng.choice(matching or list(recipes))
    return rng.choice(recipes)


def build_pool(
    recipe: GameRecipe,
    vocabulary: tuple[str, ...] | list[str],
    rng: random.Random,
    config: GameConfig = DEFAULT_GAME_CONFIG,
) -> list[str]:
    """All correct ingredients plus sampled distractors, shuffled."""
    correct = recipe.ingredients
    correct_set = set(correct)
    candidates = [ing for ing in dict.fromkeys(vocabulary) if ing not in correct_set]
    wanted = max(0, min(config.max_distractors, config.pool_size - len(correct)))
    distractors = rng.sample(candidates, min(wanted, len(candidates)))
    pool = [*correct, *distractors]
    rng.shuffle(pool)
    return pool


def start_new_round(
    session: GameSession,
    dataset: GameDataset,
    rng: random.Random | None = None,
    config: GameConfig = DEFAULT_GAME_CONFIG,
) -> GameSession:
    """Deal a new recipe. Score, streak and time carry over."""
    rng = rng or _rng
    recipe = _pick_recipe(session, dataset, rng)
    session.current_recipe = recipe
    session.guessed_ingredients = []
    session.pool = build_pool(recipe, dataset.vocabulary, rng, config)
    session.state = GameState.in_round
    logger.info("New round: %s (%s)", recipe.name, recipe.difficulty.value)
    return session


def start_game(
    dataset: GameDataset,
    mode: GameMode = GameMode.random,
    difficulty: Difficulty | None = None,
    recipe_name: str | None = None,
    rng: random.Random | None = None,
    config: GameConfig = DEFAULT_GAME_CONFIG,
) -> GameSession:
    session = GameSession(
        mode=mode,
        selected_difficulty=difficulty,
        selected_recipe=recipe_name,
        time_left=config.round_seconds,
    )
    if mode == GameMode.specific and dataset.find(recipe_name or "") is None:
        logger.warning("Unknown game recipe %r, starting with %s", recipe_name, dataset.recipes[0].name)
    return start_new_round(session, dataset, rng, config)


def advance_round(
    session: GameSession,
    dataset: GameDataset,
    rng: random.Random | None = None,
    config: GameConfig = DEFAULT_GAME_CONFIG,
) -> bool:
    """Scheduled continuation after a completed recipe.

    Returns False when the session moved on in the meantime (ended or reset).
    """
    if session.state != GameState.round_transition:
        return False
    start_new_round(session, dataset, rng, config)
    return True


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------


def guess(
    session: GameSession,
    ingredient: str,
    config: GameConfig = DEFAULT_GAME_CONFIG,
) -> GuessResult:
    recipe = session.current_recipe
    if (
        session.state != GameState.in_round
        or recipe is None
        or ingredient in session.guessed_ingredients
    ):
        return GuessResult(ingredient=ingredient, accepted=False)

    session.guessed_ingredients.append(ingredient)

    if ingredient not in recipe.ingredients:
        session.streak = 0
        session.time_left = max(0, session.time_left - config.wrong_guess_penalty)
        return GuessResult(ingredient=ingredient)

    points = (
        base_points(recipe.difficulty, config)
        + session.streak * config.streak_bonus
        + time_bonus(session.time_left)
    )
    session.score += points
    session.streak += 1
    session.best_streak = max(session.best_streak, session.streak)
    result = GuessResult(ingredient=ingredient, correct=True, points=points)

    if len(session.correct_guesses) == len(recipe.ingredients):
        bonus = completion_bonus(session.time_left)
        session.score += bonus
        session.recipes_completed += 1
        result.completion_bonus = bonus
        result.round_complete = True
        if session.time_left > config.min_time_to_advance:
            session.state = GameState.round_transition
            result.advance_scheduled = True

    return result


def tick(session: GameSession) -> GameSession:
    """One elapsed second. Ends the game once no time is left."""
    if not session.running:
        return session
    if session.time_left > 0:
        session.time_left -= 1
    if session.time_left == 0:
        session.state = GameState.ended
        logger.info(
            "Game over: score=%d recipes=%d", session.score, session.recipes_completed,
        )
    return session


def reset_game(config: GameConfig = DEFAULT_GAME_CONFIG) -> GameSession:
    return GameSession(time_left=config.round_seconds)
