from __future__ import annotations

import contextlib
from datetime import date

from fastapi import Depends, FastAPI, File, HTTPException, Request, UploadFile
from fastapi.staticfiles import StaticFiles
from starlette.middleware.sessions import SessionMiddleware

from .auth.config import DEFAULT_AUTH_CONFIG
from .auth.dependencies import get_current_user, require_admin
from .auth.models import LoginRequest
from .auth.users import authenticate
from .catalog.config import DEFAULT_CATALOG_CONFIG
from .catalog.data_store import get_recipe_store
from .catalog.featured import get_featured_store, home_featured
from .catalog.filters import all_ingredients, available_categories, search_recipes
from .catalog.models import (
    Difficulty,
    FeaturedAction,
    FeaturedActionType,
    FeaturedRecipe,
    FilterState,
    Recipe,
    RecipeCreate,
    RecipeSearchResult,
    RecipeUpdate,
)
from .catalog.stats import compute_dashboard_stats
from .content.i18n import SUPPORTED_LANGUAGES, TRANSLATIONS
from .content.instagram import InstagramPost, InstagramSettings, get_feed
from .content.pages import PageContent, PageContentUpdate, get_page_store
from .game.dataset import get_game_dataset
from .game.models import GameStartRequest, GameView, GuessRequest, GuessResult
from .game.runner import GameRegistry, GameRunner
from .game.timer import AsyncioScheduler
from .media.config import DEFAULT_UPLOAD_CONFIG
from .media.uploads import LocalBlobStore, blob_filename, validate_image
from .settings.background import BackgroundSettings, background_overlay, background_style
from .settings.registry import background_settings, instagram_settings

_games = GameRegistry()


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Orphaned countdowns must not outlive the app
    _games.close_all()


app = FastAPI(title="Recipe Site API", version="1.0.0", lifespan=lifespan)
app.add_middleware(SessionMiddleware, secret_key=DEFAULT_AUTH_CONFIG.session_secret)


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata() -> dict:
    recipes = get_recipe_store().list_all()
    return {
        "categories": available_categories(recipes),
        "difficulties": [d.value for d in Difficulty],
        "ingredients": all_ingredients(recipes),
    }


@app.get("/home")
def home() -> dict:
    store = get_recipe_store()
    return {
        "content": get_page_store().section_map("home"),
        "featured": home_featured(
            store, get_featured_store(store), date.today(), DEFAULT_CATALOG_CONFIG.home_featured_count,
        ),
    }


# ── Auth endpoints ───────────────────────────────────────────────────────


@app.post("/auth/login")
def login(body: LoginRequest, request: Request) -> dict:
    user = authenticate(body.email, body.password)
    if not user:
        raise HTTPException(status_code=401, detail="Invalid credentials")
    request.session["user"] = user
    return {"status": "ok", "user": user}


@app.post("/auth/logout")
def logout(request: Request) -> dict:
    request.session.pop("user", None)
    return {"status": "logged_out"}


@app.get("/auth/me")
def auth_me(user: dict | None = Depends(get_current_user)) -> dict:
    if not user:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return user


# ── Recipes ──────────────────────────────────────────────────────────────


@app.get("/recipes", response_model=list[Recipe])
def list_recipes() -> list[Recipe]:
    return get_recipe_store().list_all()


@app.post("/recipes/search", response_model=RecipeSearchResult)
def search(body: FilterState) -> RecipeSearchResult:
    return search_recipes(get_recipe_store().list_all(), body)


@app.get("/recipes/{recipe_id}", response_model=Recipe)
def get_recipe(recipe_id: str) -> Recipe:
    recipe = get_recipe_store().get_by_id(recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return recipe


@app.post("/recipes", response_model=Recipe)
def create_recipe(body: RecipeCreate, user: dict = Depends(require_admin)) -> Recipe:
    return get_recipe_store().create(body)


@app.put("/recipes/{recipe_id}", response_model=Recipe)
def update_recipe(
    recipe_id: str, body: RecipeUpdate, user: dict = Depends(require_admin),
) -> Recipe:
    recipe = get_recipe_store().update(recipe_id, body)
    if recipe is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return recipe


@app.delete("/recipes/{recipe_id}")
def delete_recipe(recipe_id: str, user: dict = Depends(require_admin)) -> dict:
    if not get_recipe_store().delete(recipe_id):
        raise HTTPException(status_code=404, detail="Recipe not found")
    return {"status": "deleted"}


# ── Featured recipes ─────────────────────────────────────────────────────


@app.get("/featured-recipes", response_model=list[FeaturedRecipe])
def featured_recipes() -> list[FeaturedRecipe]:
    return get_featured_store(get_recipe_store()).list_featured()


@app.post("/featured-recipes")
def featured_action(body: FeaturedAction, user: dict = Depends(require_admin)) -> dict:
    featured = get_featured_store(get_recipe_store())

    if body.action == FeaturedActionType.add:
        if not body.recipe_id or featured.add(body.recipe_id, body.position) is None:
            raise HTTPException(status_code=404, detail="Recipe not found")
    elif body.action == FeaturedActionType.remove:
        if not body.recipe_id or not featured.remove(body.recipe_id):
            raise HTTPException(status_code=404, detail="Featured recipe not found")
    elif body.id is None or not featured.update_position(body.id, body.position):
        raise HTTPException(status_code=404, detail="Featured recipe not found")

    return {"success": True}


# ── Page content & i18n ──────────────────────────────────────────────────


@app.get("/page-content", response_model=list[PageContent])
def page_content(page: str) -> list[PageContent]:
    return get_page_store().get_page(page)


@app.post("/page-content", response_model=PageContent)
def update_page_content(
    body: PageContentUpdate, user: dict = Depends(require_admin),
) -> PageContent:
    return get_page_store().update(
        body.page_name, body.section_name, body.content_key, body.content_text,
    )


@app.get("/i18n/{language}")
def translations(language: str) -> dict[str, str]:
    if language not in SUPPORTED_LANGUAGES:
        raise HTTPException(status_code=404, detail="Unsupported language")
    return TRANSLATIONS[language]


# ── Settings ─────────────────────────────────────────────────────────────


@app.get("/settings/background", response_model=BackgroundSettings)
def get_background() -> BackgroundSettings:
    return background_settings.get()


@app.put("/settings/background", response_model=BackgroundSettings)
def save_background(
    body: BackgroundSettings, user: dict = Depends(require_admin),
) -> BackgroundSettings:
    return background_settings.save(body)


@app.get("/settings/background/style")
def get_background_style() -> dict:
    current = background_settings.get()
    return {"style": background_style(current), "overlay": background_overlay(current)}


@app.get("/settings/instagram", response_model=InstagramSettings)
def get_instagram() -> InstagramSettings:
    return instagram_settings.get()


@app.put("/settings/instagram", response_model=InstagramSettings)
def save_instagram(
    body: InstagramSettings, user: dict = Depends(require_admin),
) -> InstagramSettings:
    return instagram_settings.save(body)


@app.get("/instagram/feed", response_model=list[InstagramPost])
def instagram_feed() -> list[InstagramPost]:
    return get_feed(instagram_settings.get())


# ── Cooking game ─────────────────────────────────────────────────────────


def _current_game(request: Request) -> GameRunner:
    runner = _games.get(request.session.get("game_id"))
    if runner is None:
        raise HTTPException(status_code=404, detail="No game in progress")
    return runner


@app.get("/game/recipes")
def game_recipes() -> dict:
    dataset = get_game_dataset()
    counts = {d.value: 0 for d in Difficulty}
    for r in dataset.recipes:
        counts[r.difficulty.value] += 1
    return {
        "recipes": [
            {"name": r.name, "category": r.category, "difficulty": r.difficulty.value}
            for r in dataset.recipes
        ],
        "counts": counts,
        "total": len(dataset.recipes),
    }


@app.post("/game/start", response_model=GameView)
async def game_start(body: GameStartRequest, request: Request) -> GameView:
    runner = _games.get(request.session.get("game_id"))
    if runner is None:
        game_id, runner = _games.create(get_game_dataset(), AsyncioScheduler())
        request.session["game_id"] = game_id
    runner.start(body.mode, body.difficulty, body.recipe_name)
    return runner.view()


@app.get("/game", response_model=GameView)
async def game_state(request: Request) -> GameView:
    return _current_game(request).view()


@app.post("/game/guess", response_model=GuessResult)
async def game_guess(body: GuessRequest, request: Request) -> GuessResult:
    return _current_game(request).guess(body.ingredient)


@app.post("/game/reset", response_model=GameView)
async def game_reset(request: Request) -> GameView:
    runner = _current_game(request)
    runner.reset()
    return runner.view()


# ── Admin ────────────────────────────────────────────────────────────────


@app.get("/admin/stats")
def admin_stats(user: dict = Depends(require_admin)) -> dict:
    return compute_dashboard_stats(get_recipe_store().list_all())


@app.post("/upload")
async def upload(file: UploadFile = File(...), user: dict = Depends(require_admin)) -> dict:
    data = await file.read()
    error = validate_image(file.content_type, len(data))
    if error:
        raise HTTPException(status_code=400, detail=error)
    url = LocalBlobStore().put(blob_filename(file.filename or "upload"), data)
    return {"url": url}


app.mount(
    DEFAULT_UPLOAD_CONFIG.public_prefix,
    StaticFiles(directory=str(DEFAULT_UPLOAD_CONFIG.upload_dir), check_dir=False),
    name="uploads",
)
