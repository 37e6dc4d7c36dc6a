"""FastAPI application for What To Eat."""

import asyncio
import logging
from typing import Optional
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from cachetools import TTLCache

from config.settings import get_settings
from whattoeat.models.schemas import (
    PreferencesIn,
    MealConfigIn,
    DishResult,
    RecommendRequest,
    RecommendResponse,
    ReplaceRequest,
    ReplaceResponse,
    SearchResponse,
    IngredientsResponse,
    HealthResponse
)
from whattoeat.core.data_loader import Category, CatalogError
from whattoeat.core.dishes import GeneratedDish, prepare_dishes
from whattoeat.core.history import merge_exclusions, update_seen
from whattoeat.core.matching import tokenize
from whattoeat.core.ranking import UserPreferences
from whattoeat.core.recommender import MealConfig, NoRecipesAvailable, slot_category
from whattoeat.service import RecipeEngine

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

settings = get_settings()

search_cache: TTLCache = TTLCache(maxsize=settings.cache_maxsize, ttl=settings.cache_ttl)

engine: Optional[RecipeEngine] = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    global engine

    logger.info("Starting What To Eat application...")

    try:
        engine = RecipeEngine.from_settings(settings)
        logger.info(f"Loaded {engine.catalog.recipe_count} dishes")
        logger.info(
            f"Scoring: like_bonus={engine.ranker.config.like_bonus} "
            f"jitter={engine.ranker.config.jitter} overlap={engine.ranker.config.zones_overlap}"
        )
    except (FileNotFoundError, CatalogError) as e:
        logger.error(f"Failed to load catalog: {e}")

    yield

    search_cache.clear()
    logger.info("Shutting down What To Eat application...")


app = FastAPI(
    title="What To Eat API",
    description="Local dish recommendation and fuzzy search",
    version=settings.app_version,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _require_engine() -> RecipeEngine:
    if engine is None:
        raise HTTPException(status_code=503, detail="Recipe catalog not loaded")
    return engine


def _to_preferences(prefs: PreferencesIn) -> UserPreferences:
    return UserPreferences.from_lists(prefs.likes, prefs.dislikes)


def _to_config(config: Optional[MealConfigIn]) -> Optional[MealConfig]:
    if config is None:
        return None
    return MealConfig(
        meat_count=config.meat_count,
        veg_count=config.veg_count,
        soup_count=config.soup_count
    )


def _dish_result(dish: GeneratedDish) -> DishResult:
    return DishResult(**dish.to_dict())


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """Check service health and status."""
    return HealthResponse(
        status="healthy",
        recipes_loaded=engine.catalog.recipe_count if engine else 0,
        zones_overlap=engine.ranker.config.zones_overlap if engine else False,
        version=settings.app_version
    )


@app.post("/api/v1/recommend", response_model=RecommendResponse, tags=["Recommendation"])
async def recommend(request: RecommendRequest):
    """
    Recommend a breakfast, lunch or dinner.

    - **meal_type**: breakfast, lunch or dinner
    - **preferences**: liked and disliked ingredients
    - **config**: meat/veg/soup counts for lunch and dinner
    - **seen**: recently shown dish names, returned updated
    - **excluded_names**: extra names to avoid for this call
    """
    current = _require_engine()

    if settings.recommend_delay > 0:
        await asyncio.sleep(settings.recommend_delay)

    exclusions = merge_exclusions(request.seen, request.excluded_names)
    try:
        recipes = current.generate_recipe(
            request.meal_type,
            _to_preferences(request.preferences),
            _to_config(request.config),
            exclusions
        )
    except NoRecipesAvailable as e:
        logger.warning(f"Empty recommendation for {request.meal_type}: {e}")
        raise HTTPException(status_code=503, detail="No dishes available right now, please try again")

    dishes = prepare_dishes(recipes)
    return RecommendResponse(
        meal_type=request.meal_type,
        dishes=[_dish_result(d) for d in dishes],
        seen=update_seen(request.seen, [r.dish_name for r in recipes], settings.seen_limit)
    )


@app.post("/api/v1/replace", response_model=ReplaceResponse, tags=["Recommendation"])
async def replace_dish(request: ReplaceRequest):
    """
    Replace one dish of a recommended meal.

    Give either **category** directly, or **meal_type** with **slot_index**
    (and **config** for lunch/dinner) to resolve the slot's category.
    """
    current = _require_engine()

    config = _to_config(request.config)
    if request.category is not None:
        category = Category(request.category)
    elif request.meal_type is not None and request.slot_index is not None:
        slot_config = config or current.recommender.default_config
        slot_count = 1 if request.meal_type == "breakfast" else slot_config.total
        if request.slot_index >= slot_count:
            raise HTTPException(status_code=422, detail="slot_index is outside the meal")
        category = slot_category(request.meal_type, slot_config, request.slot_index)
    else:
        raise HTTPException(status_code=422, detail="Provide category, or meal_type with slot_index")

    if settings.replace_delay > 0:
        await asyncio.sleep(settings.replace_delay)

    exclusions = merge_exclusions(request.seen, request.current_names)
    try:
        recipe = current.generate_single_side_dish(
            category, _to_preferences(request.preferences), exclusions
        )
    except NoRecipesAvailable as e:
        logger.warning(f"Replacement failed: {e}")
        raise HTTPException(status_code=503, detail=f"No dishes in category '{category.value}'")

    dish = prepare_dishes([recipe])[0]
    return ReplaceResponse(
        category=category.value,
        dish=_dish_result(dish),
        seen=update_seen(request.seen, [recipe.dish_name], settings.seen_limit)
    )


@app.get("/api/v1/search", response_model=SearchResponse, tags=["Search"])
async def search(q: str = Query("", description="Space-separated keywords, typos tolerated")):
    """Fuzzy search dish names and ingredients. Every keyword must match."""
    current = _require_engine()

    terms = tokenize(q)
    cache_key = tuple(terms)

    if cache_key in search_cache:
        logger.info("Returning cached search")
        results = search_cache[cache_key]
    else:
        results = [_dish_result(d) for d in prepare_dishes(current.search_recipes(q))]
        search_cache[cache_key] = results

    return SearchResponse(query=q, terms=terms, results=results, total=len(results))


@app.get("/api/v1/ingredients", response_model=IngredientsResponse, tags=["Ingredients"])
async def list_ingredients():
    """List the common ingredient vocabulary."""
    current = _require_engine()

    ingredients = current.common_ingredients
    return IngredientsResponse(total=len(ingredients), ingredients=ingredients)


@app.get("/api/v1/recipes", tags=["Recipes"])
async def list_recipes(
    category: Optional[Category] = Query(None, description="Filter by category"),
    limit: int = Query(50, ge=1, le=200, description="Maximum results")
):
    """List catalog dishes with optional category filter."""
    current = _require_engine()

    if category is not None:
        recipes = current.catalog.for_category(category)
    else:
        recipes = current.catalog.all_recipes

    return {
        "total": len(recipes),
        "recipes": [r.to_dict() for r in recipes[:limit]]
    }


@app.get("/api/v1/recipes/{dish_name}", tags=["Recipes"])
async def get_recipe(dish_name: str):
    """Get a specific dish by name."""
    current = _require_engine()

    recipe = current.catalog.get_recipe(dish_name)
    if not recipe:
        raise HTTPException(status_code=404, detail="Recipe not found")

    return recipe.to_dict()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "whattoeat.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
