"""Tests for the module-level engine boundary."""

import random
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from config.settings import Settings
from whattoeat import service
from whattoeat.core.data_loader import Category
from whattoeat.core.ranking import ScoringConfig, UserPreferences
from whattoeat.core.recommender import MealConfig, NoRecipesAvailable


class TestBoundaryFunctions:
    """Tests against the bundled catalog."""

    def test_generate_recipe(self):
        recipes = service.generate_recipe("breakfast", UserPreferences())

        assert len(recipes) == 1
        assert recipes[0].category == Category.BREAKFAST

    def test_generate_recipe_empty_raises(self):
        with pytest.raises(NoRecipesAvailable):
            service.generate_recipe("lunch", UserPreferences(), MealConfig(0, 0, 0))

    def test_generate_single_side_dish(self):
        recipe = service.generate_single_side_dish("meat", UserPreferences(likes=("排骨",)))

        assert recipe.category == Category.MEAT

    def test_search_recipes(self):
        assert "番茄鸡蛋汤" in [r.dish_name for r in service.search_recipes("鸡蛋 番茄")]
        assert service.search_recipes("") == []

    def test_common_ingredients_copy(self):
        ingredients = service.get_common_ingredients()
        ingredients.append("不存在")

        assert "不存在" not in service.get_common_ingredients()


class TestRecipeEngine:
    """Tests for RecipeEngine wiring."""

    def test_engine_uses_scoring_config(self):
        catalog = service.get_engine().catalog
        engine = service.RecipeEngine(catalog, ScoringConfig(like_bonus=40.0))

        assert engine.ranker.config.zones_overlap is True

    def test_seeded_dinner(self):
        engine = service.get_engine()
        first = engine.generate_recipe("dinner", UserPreferences(), rng=random.Random(5))
        second = engine.generate_recipe("dinner", UserPreferences(), rng=random.Random(5))

        assert first == second

    def test_settings_defaults_match_scoring_defaults(self):
        """Test that unconfigured settings give the stock scoring regime."""
        settings = Settings(_env_file=None)

        assert ScoringConfig.from_settings(settings) == ScoringConfig()
