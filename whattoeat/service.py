"""Engine boundary used by the HTTP app, the CLI and other callers."""

import logging
import random
from typing import List, Optional, Iterable
from functools import lru_cache

from config.settings import Settings, get_settings
from whattoeat.core.data_loader import Catalog, Recipe, get_data_loader
from whattoeat.core.ranking import DishRanker, ScoringConfig, UserPreferences
from whattoeat.core.recommender import MealConfig, MealRecommender
from whattoeat.core.search import SearchIndex

logger = logging.getLogger(__name__)


class RecipeEngine:
    """Bundles a catalog with its recommender and search index."""

    def __init__(self, catalog: Catalog, scoring: Optional[ScoringConfig] = None,
                 default_config: Optional[MealConfig] = None):
        self.catalog = catalog
        self.ranker = DishRanker(scoring)
        self.recommender = MealRecommender(catalog, self.ranker, default_config)
        self.search_index = SearchIndex(catalog)

    @classmethod
    def from_settings(cls, settings: Settings) -> "RecipeEngine":
        loader = get_data_loader(settings.data_dir, settings.catalog_file)
        default_config = MealConfig(
            meat_count=settings.default_meat_count,
            veg_count=settings.default_veg_count,
            soup_count=settings.default_soup_count
        )
        return cls(loader.catalog, ScoringConfig.from_settings(settings), default_config)

    @property
    def common_ingredients(self) -> List[str]:
        return list(self.catalog.common_ingredients)

    def generate_recipe(self, meal_type, preferences: UserPreferences,
                        config: Optional[MealConfig] = None,
                        excluded_names: Iterable[str] = (),
                        rng: Optional[random.Random] = None) -> List[Recipe]:
        return self.recommender.generate_recipe(meal_type, preferences, config, excluded_names, rng=rng)

    def generate_single_side_dish(self, category, preferences: UserPreferences,
                                  excluded_names: Iterable[str] = (),
                                  rng: Optional[random.Random] = None) -> Recipe:
        return self.recommender.generate_single_side_dish(category, preferences, excluded_names, rng=rng)

    def search_recipes(self, query: str) -> List[Recipe]:
        results = self.search_index.search(query)
        logger.debug(f"Search '{query}' matched {len(results)} dishes")
        return results


@lru_cache(maxsize=1)
def get_engine() -> RecipeEngine:
    """Get the engine over the configured catalog."""
    return RecipeEngine.from_settings(get_settings())


def generate_recipe(meal_type, preferences: UserPreferences,
                    config: Optional[MealConfig] = None,
                    excluded_names: Iterable[str] = ()) -> List[Recipe]:
    return get_engine().generate_recipe(meal_type, preferences, config, excluded_names)


def generate_single_side_dish(category, preferences: UserPreferences,
                              excluded_names: Iterable[str] = ()) -> Recipe:
    return get_engine().generate_single_side_dish(category, preferences, excluded_names)


def search_recipes(query: str) -> List[Recipe]:
    return get_engine().search_recipes(query)


def get_common_ingredients() -> List[str]:
    """Read-only ingredient vocabulary for suggestion chips."""
    return get_engine().common_ingredients
