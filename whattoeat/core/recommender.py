"""Meal composition on top of the per-category sampler."""

import logging
import random
from enum import Enum
from typing import List, Optional, Iterable
from dataclasses import dataclass

from .data_loader import Catalog, Category, Recipe
from .ranking import DishRanker, UserPreferences

logger = logging.getLogger(__name__)


class MealType(str, Enum):
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SEARCH = "search"


class NoRecipesAvailable(RuntimeError):
    """Raised when a recommendation comes back empty."""


@dataclass(frozen=True)
class MealConfig:
    """How many dishes of each category a lunch or dinner should have."""
    meat_count: int = 1
    veg_count: int = 1
    soup_count: int = 1

    @property
    def total(self) -> int:
        return sum(max(0, n) for n in (self.meat_count, self.veg_count, self.soup_count))


def slot_category(meal_type, config: Optional[MealConfig], index: int) -> Category:
    """Map a position in a recommended meal back to its category."""
    if MealType(meal_type) == MealType.BREAKFAST:
        return Category.BREAKFAST

    config = config or MealConfig()
    meat = max(0, config.meat_count)
    veg = max(0, config.veg_count)
    if index < meat:
        return Category.MEAT
    if index < meat + veg:
        return Category.VEG
    return Category.SOUP


class MealRecommender:
    """Recommends breakfasts and lunch/dinner sets from a catalog."""

    def __init__(
        self,
        catalog: Catalog,
        ranker: Optional[DishRanker] = None,
        default_config: Optional[MealConfig] = None
    ):
        self.catalog = catalog
        self.ranker = ranker or DishRanker()
        self.default_config = default_config or MealConfig()

    def recommend_meal(
        self,
        meal_type,
        preferences: UserPreferences,
        config: Optional[MealConfig] = None,
        excluded_names: Iterable[str] = (),
        rng: Optional[random.Random] = None
    ) -> List[Recipe]:
        """
        Recommend a meal.

        Breakfast is a single dish. Lunch and dinner sample meat, veg and
        soup independently with the counts in ``config`` and return them in
        that order. A count of zero skips the category.
        """
        meal_type = MealType(meal_type)
        excluded = list(excluded_names)

        if meal_type == MealType.BREAKFAST:
            return self.ranker.sample(
                self.catalog.breakfast, preferences, 1, excluded, rng=rng
            )
        if meal_type == MealType.SEARCH:
            raise ValueError("Search results are not a recommendable meal")

        config = config or self.default_config
        meats = self.ranker.sample(self.catalog.meat, preferences, config.meat_count, excluded, rng=rng)
        vegs = self.ranker.sample(self.catalog.veg, preferences, config.veg_count, excluded, rng=rng)
        soups = self.ranker.sample(self.catalog.soup, preferences, config.soup_count, excluded, rng=rng)

        logger.info(
            f"Recommended {meal_type.value}: {len(meats)} meat, {len(vegs)} veg, {len(soups)} soup"
        )
        return meats + vegs + soups

    def generate_recipe(
        self,
        meal_type,
        preferences: UserPreferences,
        config: Optional[MealConfig] = None,
        excluded_names: Iterable[str] = (),
        rng: Optional[random.Random] = None
    ) -> List[Recipe]:
        """Like recommend_meal, but an empty result is an error."""
        recipes = self.recommend_meal(meal_type, preferences, config, excluded_names, rng=rng)
        if not recipes:
            raise NoRecipesAvailable("No recipes generated")
        return recipes

    def generate_single_side_dish(
        self,
        category,
        preferences: UserPreferences,
        excluded_names: Iterable[str] = (),
        rng: Optional[random.Random] = None
    ) -> Recipe:
        """Draw one replacement dish from a single category."""
        category = Category(category)
        results = self.ranker.sample(
            self.catalog.for_category(category), preferences, 1, excluded_names, rng=rng
        )
        if not results:
            raise NoRecipesAvailable(f"No dishes in category '{category.value}'")
        return results[0]
