from __future__ import annotations

from collections import Counter
from typing import Any

from .models import Difficulty, Recipe


def compute_dashboard_stats(recipes: list[Recipe]) -> dict[str, Any]:
    total = len(recipes)

    # Category breakdown
    category_counter: Counter[str] = Counter(r.category for r in recipes)
    top_categories = [{"name": n, "count": c} for n, c in category_counter.most_common()]

    # Difficulty breakdown, always listing every level
    difficulty_counter: Counter[str] = Counter(r.difficulty.value for r in recipes)
    by_difficulty = {d.value: difficulty_counter.get(d.value, 0) for d in Difficulty}

    avg_total = round(sum(r.total_time for r in recipes) / total, 1) if total else 0.0

    return {
        "total_recipes": total,
        "total_categories": len(category_counter),
        "latest_recipe": recipes[-1].title if recipes else None,
        "categories": top_categories,
        "by_difficulty": by_difficulty,
        "avg_total_time": avg_total,
    }
