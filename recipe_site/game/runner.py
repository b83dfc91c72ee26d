from __future__ import annotations

import logging
import random
import time
import uuid
from typing import Any

from ..catalog.models import Difficulty
from . import engine
from .config import DEFAULT_GAME_CONFIG, GameConfig
from .dataset import GameDataset
from .models import (
    GameMode,
    GameRecipeOut,
    GameSession,
    GameState,
    GameView,
    GuessResult,
)
from .timer import Handle, PeriodicTask, Scheduler

logger = logging.getLogger(__name__)


class GameRunner:
    """Owns one game session together with its countdown and round pause.

    The countdown only runs while the session is in a round; it is cancelled
    as soon as the game ends, restarts, resets or the runner is closed.
    """

    def __init__(
        self,
        dataset: GameDataset,
        scheduler: Scheduler,
        config: GameConfig = DEFAULT_GAME_CONFIG,
        rng: random.Random | None = None,
    ) -> None:
        self.dataset = dataset
        self.config = config
        self.session = engine.reset_game(config)
        self._scheduler = scheduler
        self._rng = rng or random.Random()
        self._countdown = PeriodicTask(config.tick_interval, self._on_tick, scheduler)
        self._pending_advance: Handle | None = None

    @property
    def countdown_running(self) -> bool:
        return self._countdown.running

    @property
    def advance_pending(self) -> bool:
        return self._pending_advance is not None

    def start(
        self,
        mode: GameMode = GameMode.random,
        difficulty: Difficulty | None = None,
        recipe_name: str | None = None,
    ) -> GameSession:
        self._stop()
        self.session = engine.start_game(
            self.dataset, mode, difficulty, recipe_name, self._rng, self.config,
        )
        self._countdown.start()
        return self.session

    def guess(self, ingredient: str) -> GuessResult:
        result = engine.guess(self.session, ingredient, self.config)
        if result.advance_scheduled:
            self._pending_advance = self._scheduler.call_later(
                self.config.advance_delay, self._on_advance,
            )
        return result

    def reset(self) -> GameSession:
        self._stop()
        self.session = engine.reset_game(self.config)
        return self.session

    def close(self) -> None:
        self._stop()

    def _stop(self) -> None:
        self._countdown.cancel()
        if self._pending_advance is not None:
            self._pending_advance.cancel()
            self._pending_advance = None

    def _on_tick(self) -> None:
        engine.tick(self.session)
        if self.session.state == GameState.ended:
            self._stop()

    def _on_advance(self) -> None:
        self._pending_advance = None
        engine.advance_round(self.session, self.dataset, self._rng, self.config)

    def view(self) -> GameView:
        return build_view(self.session)


def build_view(session: GameSession) -> GameView:
    recipe = session.current_recipe
    ended = session.state == GameState.ended
    return GameView(
        mode=session.mode,
        selected_difficulty=session.selected_difficulty,
        selected_recipe=session.selected_recipe,
        state=session.state,
        recipe=GameRecipeOut(
            name=recipe.name,
            category=recipe.category,
            difficulty=recipe.difficulty,
            cook_time=recipe.cook_time,
            description=recipe.description,
            ingredient_count=len(recipe.ingredients),
        ) if recipe else None,
        pool=list(session.pool),
        guessed_ingredients=list(session.guessed_ingredients),
        correct_guesses=session.correct_guesses,
        score=session.score,
        time_left=session.time_left,
        streak=session.streak,
        best_streak=session.best_streak,
        recipes_completed=session.recipes_completed,
        answers=list(recipe.ingredients) if ended and recipe else None,
        rating=engine.score_rating(session.score) if ended else None,
    )


class GameRegistry:
    """Active game runners keyed by an opaque game id.

    A runner that has not been touched for ``ttl`` seconds is closed and
    dropped, both on lookup and whenever a new game is created.
    """

    def __init__(self, ttl: float = DEFAULT_GAME_CONFIG.session_ttl) -> None:
        self.ttl = ttl
        self._runners: dict[str, dict[str, Any]] = {}

    def _expired(self, entry: dict[str, Any], now: float) -> bool:
        return now - entry["last_used"] >= self.ttl

    def get(self, game_id: str | None) -> GameRunner | None:
        if not game_id:
            return None
        entry = self._runners.get(game_id)
        if entry is None:
            return None
        now = time.time()
        if self._expired(entry, now):
            self.discard(game_id)
            return None
        entry["last_used"] = now
        return entry["runner"]

    def create(self, dataset: GameDataset, scheduler: Scheduler) -> tuple[str, GameRunner]:
        self.evict_stale()
        game_id = uuid.uuid4().hex
        runner = GameRunner(dataset, scheduler)
        self._runners[game_id] = {"runner": runner, "last_used": time.time()}
        return game_id, runner

    def evict_stale(self) -> int:
        now = time.time()
        stale = [gid for gid, entry in self._runners.items() if self._expired(entry, now)]
        for game_id in stale:
            self.discard(game_id)
        if stale:
            logger.info("Evicted %d idle games", len(stale))
        return len(stale)

    def discard(self, game_id: str) -> None:
        entry = self._runners.pop(game_id, None)
        if entry is not None:
            entry["runner"].close()

    def close_all(self) -> None:
        for entry in self._runners.values():
            entry["runner"].close()
        self._runners.clear()

    def __len__(self) -> int:
        return len(self._runners)
