from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

BUNDLED_GAME_CSV = Path(__file__).resolve().parent.parent / "data" / "game_recipes.csv"


@dataclass(frozen=True)
class GameConfig:
    data_path: Path = Path(os.getenv("GAME_DATA_PATH", str(BUNDLED_GAME_CSV)))
    round_seconds: int = 60
    wrong_guess_penalty: int = 5
    pool_size: int = 15
    max_distractors: int = 8
    streak_bonus: int = 2
    base_points: dict[str, int] = field(
        default_factory=lambda: {"Easy": 5, "Medium": 10, "Hard": 15}
    )
    # Pause after a completed recipe, and the minimum time left to get another
    advance_delay: float = 1.5
    min_time_to_advance: int = 10
    tick_interval: float = 1.0
    # Idle games are dropped after this many seconds
    session_ttl: float = float(os.getenv("GAME_SESSION_TTL", "1800"))


DEFAULT_GAME_CONFIG = GameConfig()
