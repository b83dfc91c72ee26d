from __future__ import annotations

from unittest.mock import patch

from fastapi.testclient import TestClient

from recipe_site.app import app
from recipe_site.catalog.data_store import reset_recipe_store
from recipe_site.catalog.featured import reset_featured_store
from recipe_site.content.pages import reset_page_store
from recipe_site.settings.registry import clear_settings

client = TestClient(app)


def _fresh():
    reset_recipe_store()
    reset_featured_store()
    reset_page_store()
    clear_settings()


def _admin() -> TestClient:
    c = TestClient(app)
    c.post("/auth/login", json={"email": "admin@example.com", "password": "admin123"})
    return c


# ── Public catalogue ─────────────────────────────────────────────────────


def test_health():
    assert client.get("/health").json() == {"status": "ok"}


def test_metadata():
    _fresh()
    body = client.get("/metadata").json()
    assert body["difficulties"] == ["Easy", "Medium", "Hard"]
    assert "Main Course" in body["categories"]
    assert body["ingredients"] == sorted(body["ingredients"])


def test_list_and_get_recipes():
    _fresh()
    recipes = client.get("/recipes").json()
    assert len(recipes) == 12
    resp = client.get("/recipes/1")
    assert resp.status_code == 200
    assert resp.json()["title"] == "Classic Spaghetti Carbonara"


def test_get_missing_recipe_404():
    _fresh()
    assert client.get("/recipes/999").status_code == 404


def test_search_defaults_return_everything():
    _fresh()
    body = client.post("/recipes/search", json={}).json()
    assert body["total_recipes"] == 12
    assert body["total_matches"] == 12
    assert body["active_filter_count"] == 0
    titles = [r["title"] for r in body["recipes"]]
    assert titles == sorted(titles, key=str.casefold)


def test_search_with_filters():
    _fresh()
    body = client.post("/recipes/search", json={
        "difficulties": ["Hard"],
        "sort_by": "totalTime",
    }).json()
    assert body["total_matches"] == 3
    assert all(r["difficulty"] == "Hard" for r in body["recipes"])
    totals = [r["prep_time"] + r["cook_time"] for r in body["recipes"]]
    assert totals == sorted(totals)
    assert body["active_filter_count"] == 2


def test_search_rejects_unknown_sort():
    resp = client.post("/recipes/search", json={"sort_by": "popularity"})
    assert resp.status_code == 422


def test_search_clamps_inverted_range():
    _fresh()
    body = client.post("/recipes/search", json={"prep_time_range": [90, 30]}).json()
    lo, hi = body["filters"]["prep_time_range"]
    assert lo <= hi
    assert (lo, hi) == (30, 30)
    assert all(r["prep_time"] == 30 for r in body["recipes"])


def test_search_clamps_out_of_domain_range():
    _fresh()
    body = client.post("/recipes/search", json={"cook_time_range": [-50, 9999]}).json()
    assert body["filters"]["cook_time_range"] == [0, 300]
    assert body["active_filter_count"] == 0
    assert body["total_matches"] == 12


def test_search_deselects_category_missing_from_difficulty():
    _fresh()
    body = client.post("/recipes/search", json={
        "categories": ["Soup", "Dessert"],
        "difficulties": ["Hard"],
    }).json()
    assert body["filters"]["categories"] == ["Dessert"]
    assert "Soup" not in body["available_categories"]
    assert [r["title"] for r in body["recipes"]] == ["Berry Tart"]
    assert body["active_filter_count"] == 2


def test_home_returns_content_and_featured():
    _fresh()
    body = client.get("/home").json()
    assert body["content"]["hero"]["title"] == "Discover Amazing Recipes"
    assert len(body["featured"]) == 6


# ── Recipe administration ────────────────────────────────────────────────


def test_admin_recipe_lifecycle():
    _fresh()
    c = _admin()
    created = c.post("/recipes", json={
        "title": "Flatbread",
        "difficulty": "Easy",
        "category": "Bread",
        "ingredients": ["Flour", "Water", "Salt"],
        "instructions": ["Mix.", "Rest.", "Fry."],
    })
    assert created.status_code == 200
    recipe = created.json()
    assert recipe["id"] == "13"

    updated = c.put("/recipes/13", json={"servings": 2})
    assert updated.json()["servings"] == 2
    assert updated.json()["title"] == "Flatbread"

    assert c.delete("/recipes/13").json() == {"status": "deleted"}
    assert c.get("/recipes/13").status_code == 404
    assert c.delete("/recipes/13").status_code == 404


def test_update_missing_recipe_404():
    _fresh()
    assert _admin().put("/recipes/999", json={"title": "Ghost"}).status_code == 404


# ── Featured recipes ─────────────────────────────────────────────────────


def test_featured_add_reorder_remove():
    _fresh()
    c = _admin()
    assert c.post("/featured-recipes", json={"action": "add", "recipe_id": "3", "position": 1}).json() == {
        "success": True,
    }
    c.post("/featured-recipes", json={"action": "add", "recipe_id": "7", "position": 0})

    featured = client.get("/featured-recipes").json()
    assert [f["recipe_id"] for f in featured] == ["7", "3"]
    assert featured[0]["recipe"]["id"] == "7"

    entry_id = featured[0]["id"]
    c.post("/featured-recipes", json={"action": "updatePosition", "id": entry_id, "position": 9})
    assert [f["recipe_id"] for f in client.get("/featured-recipes").json()] == ["3", "7"]

    c.post("/featured-recipes", json={"action": "remove", "recipe_id": "3"})
    assert [f["recipe_id"] for f in client.get("/featured-recipes").json()] == ["7"]

    # Picks replace the daily shuffle on the home page
    assert [r["id"] for r in client.get("/home").json()["featured"]] == ["7"]


def test_featured_errors():
    _fresh()
    c = _admin()
    assert c.post("/featured-recipes", json={"action": "add", "recipe_id": "999"}).status_code == 404
    assert c.post("/featured-recipes", json={"action": "remove", "recipe_id": "1"}).status_code == 404
    assert c.post("/featured-recipes", json={"action": "updatePosition", "position": 1}).status_code == 404
    assert c.post("/featured-recipes", json={"action": "pin"}).status_code == 422


# ── Page content & i18n ──────────────────────────────────────────────────


def test_page_content_update_round_trip():
    _fresh()
    c = _admin()
    resp = c.post("/page-content", json={
        "page_name": "home", "section_name": "hero", "content_key": "title",
        "content_text": "Cook Something New",
    })
    assert resp.status_code == 200
    rows = client.get("/page-content", params={"page": "home"}).json()
    hero = [r for r in rows if r["section_name"] == "hero" and r["content_key"] == "title"]
    assert hero[0]["content_text"] == "Cook Something New"
    assert client.get("/home").json()["content"]["hero"]["title"] == "Cook Something New"


def test_page_content_unknown_page_is_empty():
    _fresh()
    assert client.get("/page-content", params={"page": "nowhere"}).json() == []


def test_translations():
    assert client.get("/i18n/es").json()["nav.home"] == "Inicio"
    assert client.get("/i18n/de").status_code == 404


# ── Settings ─────────────────────────────────────────────────────────────


def test_background_settings_round_trip():
    _fresh()
    assert client.get("/settings/background").json()["type"] == "gradient"
    c = _admin()
    resp = c.put("/settings/background", json={
        "type": "image", "image_url": "/uploads/bg.jpg", "opacity": 80,
    })
    assert resp.status_code == 200
    assert client.get("/settings/background").json()["image_url"] == "/uploads/bg.jpg"

    style = client.get("/settings/background/style").json()
    assert style["style"]["background-image"] == "url(/uploads/bg.jpg)"
    assert style["overlay"]["opacity"] == "0.2"


def test_background_settings_validated():
    _fresh()
    resp = _admin().put("/settings/background", json={"gradient_direction": "sideways"})
    assert resp.status_code == 422


def test_instagram_settings_drive_feed():
    _fresh()
    assert len(client.get("/instagram/feed").json()) == 6
    c = _admin()
    c.put("/settings/instagram", json={"display_count": 3})
    assert len(client.get("/instagram/feed").json()) == 3
    c.put("/settings/instagram", json={"enabled": False})
    assert client.get("/instagram/feed").json() == []


# ── Cooking game ─────────────────────────────────────────────────────────


def test_game_recipes_counts():
    body = client.get("/game/recipes").json()
    assert body["total"] == 15
    assert body["counts"] == {"Easy": 5, "Medium": 5, "Hard": 5}


def test_game_requires_a_started_game():
    c = TestClient(app)
    assert c.get("/game").status_code == 404
    assert c.post("/game/guess", json={"ingredient": "Salt"}).status_code == 404


def test_game_round_flow():
    c = TestClient(app)
    view = c.post("/game/start", json={"mode": "specific", "recipe_name": "Scrambled Eggs"}).json()
    assert view["state"] == "in_round"
    assert view["recipe"]["name"] == "Scrambled Eggs"
    assert view["recipe"]["ingredient_count"] == 4
    assert view["answers"] is None
    assert {"Eggs", "Butter", "Salt", "Black Pepper"} <= set(view["pool"])

    wrong = next(i for i in view["pool"] if i not in {"Eggs", "Butter", "Salt", "Black Pepper"})
    miss = c.post("/game/guess", json={"ingredient": wrong}).json()
    assert miss["accepted"] and not miss["correct"]

    results = [
        c.post("/game/guess", json={"ingredient": ing}).json()
        for ing in ["Eggs", "Butter", "Salt", "Black Pepper"]
    ]
    assert all(r["correct"] for r in results)
    assert results[-1]["round_complete"]

    state = c.get("/game").json()
    assert state["recipes_completed"] == 1
    assert state["streak"] == 4
    assert state["score"] == sum(r["points"] + r["completion_bonus"] for r in results)


def test_game_reset():
    c = TestClient(app)
    c.post("/game/start", json={"mode": "difficulty", "difficulty": "Hard"})
    view = c.post("/game/reset").json()
    assert view["state"] == "idle"
    assert view["score"] == 0
    assert view["recipe"] is None


def test_game_start_validates_mode():
    c = TestClient(app)
    assert c.post("/game/start", json={"mode": "blitz"}).status_code == 422


# ── Admin ────────────────────────────────────────────────────────────────


def test_admin_stats():
    _fresh()
    body = _admin().get("/admin/stats").json()
    assert body["total_recipes"] == 12
    assert body["total_categories"] == 7


def test_upload_stores_image():
    c = _admin()
    with patch("recipe_site.app.LocalBlobStore") as store_cls:
        store_cls.return_value.put.return_value = "/uploads/recipe-1-a.png"
        resp = c.post("/upload", files={"file": ("a.png", b"\x89PNG", "image/png")})
    assert resp.status_code == 200
    assert resp.json() == {"url": "/uploads/recipe-1-a.png"}
    filename, data = store_cls.return_value.put.call_args.args
    assert filename.startswith("recipe-") and filename.endswith("-a.png")
    assert data == b"\x89PNG"


def test_upload_rejects_non_images():
    resp = _admin().post("/upload", files={"file": ("notes.txt", b"hello", "text/plain")})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "File must be an image"
