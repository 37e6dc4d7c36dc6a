"""Unit tests for meal recommendation."""

import random
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from whattoeat.core.data_loader import Catalog, Category
from whattoeat.core.ranking import UserPreferences
from whattoeat.core.recommender import (
    MealConfig,
    MealRecommender,
    MealType,
    NoRecipesAvailable,
    slot_category
)


def _section(prefix, n, ingredient):
    return [
        {"dish_name": f"{prefix}{i}", "description": "", "ingredients": [ingredient], "steps": []}
        for i in range(n)
    ]


@pytest.fixture
def catalog():
    """Small catalog with a few dishes per category."""
    return Catalog.from_dict({
        "breakfast": _section("早餐", 3, "面粉"),
        "meat": _section("肉菜", 5, "猪肉"),
        "veg": _section("素菜", 4, "白菜"),
        "soup": _section("汤", 3, "冬瓜")
    })


@pytest.fixture
def recommender(catalog):
    return MealRecommender(catalog)


class TestRecommendMeal:
    """Tests for MealRecommender.recommend_meal."""

    def test_breakfast_single_dish(self, recommender):
        result = recommender.recommend_meal("breakfast", UserPreferences(), rng=random.Random(1))

        assert len(result) == 1
        assert result[0].category == Category.BREAKFAST

    def test_breakfast_ignores_config(self, recommender):
        config = MealConfig(meat_count=3, veg_count=3, soup_count=3)
        result = recommender.recommend_meal(MealType.BREAKFAST, UserPreferences(), config)

        assert len(result) == 1

    def test_lunch_order_and_counts(self, recommender):
        config = MealConfig(meat_count=2, veg_count=1, soup_count=1)
        result = recommender.recommend_meal("lunch", UserPreferences(), config, rng=random.Random(2))

        assert [r.category for r in result] == [Category.MEAT, Category.MEAT, Category.VEG, Category.SOUP]

    def test_zero_count_skips_category(self, recommender):
        config = MealConfig(meat_count=0, veg_count=2, soup_count=0)
        result = recommender.recommend_meal("dinner", UserPreferences(), config)

        assert [r.category for r in result] == [Category.VEG, Category.VEG]

    def test_negative_count_skips_category(self, recommender):
        config = MealConfig(meat_count=-1, veg_count=1, soup_count=0)
        result = recommender.recommend_meal("dinner", UserPreferences(), config)

        assert [r.category for r in result] == [Category.VEG]

    def test_default_config(self, recommender):
        result = recommender.recommend_meal("dinner", UserPreferences())

        assert [r.category for r in result] == [Category.MEAT, Category.VEG, Category.SOUP]

    def test_exclusions_stay_within_category(self, recommender, catalog):
        """Test that exhausting meat never pulls a dish from another category."""
        excluded = [r.dish_name for r in catalog.meat]
        config = MealConfig(meat_count=1, veg_count=0, soup_count=0)
        result = recommender.recommend_meal("lunch", UserPreferences(), config, excluded)

        assert len(result) == 1
        assert result[0].category == Category.MEAT

    def test_exclusions_apply_to_all_categories(self, recommender, catalog):
        excluded = [catalog.meat[0].dish_name, catalog.veg[0].dish_name, catalog.soup[0].dish_name]
        for seed in range(30):
            result = recommender.recommend_meal(
                "lunch", UserPreferences(), None, excluded, rng=random.Random(seed)
            )
            assert not {r.dish_name for r in result} & set(excluded)

    def test_unknown_meal_type(self, recommender):
        with pytest.raises(ValueError):
            recommender.recommend_meal("brunch", UserPreferences())

    def test_search_is_not_a_meal(self, recommender):
        with pytest.raises(ValueError):
            recommender.recommend_meal(MealType.SEARCH, UserPreferences())


class TestGenerateRecipe:
    """Tests for the failing boundary."""

    def test_empty_result_raises(self, recommender):
        config = MealConfig(meat_count=0, veg_count=0, soup_count=0)

        with pytest.raises(NoRecipesAvailable):
            recommender.generate_recipe("lunch", UserPreferences(), config)

    def test_returns_dishes(self, recommender):
        assert len(recommender.generate_recipe("dinner", UserPreferences())) == 3


class TestSingleSideDish:
    """Tests for single slot replacement."""

    def test_returns_category_dish(self, recommender):
        recipe = recommender.generate_single_side_dish("veg", UserPreferences(), rng=random.Random(3))

        assert recipe.category == Category.VEG

    def test_avoids_current_dishes(self, recommender, catalog):
        keep = catalog.soup[2].dish_name
        excluded = [catalog.soup[0].dish_name, catalog.soup[1].dish_name]

        recipe = recommender.generate_single_side_dish(Category.SOUP, UserPreferences(), excluded)

        assert recipe.dish_name == keep

    def test_reuses_when_all_excluded(self, recommender, catalog):
        excluded = [r.dish_name for r in catalog.soup]

        recipe = recommender.generate_single_side_dish("soup", UserPreferences(), excluded)

        assert recipe.dish_name in excluded

    def test_empty_category_raises(self):
        recommender = MealRecommender(Catalog.from_dict({"meat": _section("肉", 2, "猪肉")}))

        with pytest.raises(NoRecipesAvailable):
            recommender.generate_single_side_dish("soup", UserPreferences())

    def test_unknown_category(self, recommender):
        with pytest.raises(ValueError):
            recommender.generate_single_side_dish("dessert", UserPreferences())


class TestSlotCategory:
    """Tests for mapping a meal position back to its category."""

    def test_breakfast(self):
        assert slot_category("breakfast", None, 0) == Category.BREAKFAST

    def test_lunch_slots(self):
        config = MealConfig(meat_count=2, veg_count=1, soup_count=1)

        assert [slot_category("lunch", config, i) for i in range(4)] == [
            Category.MEAT, Category.MEAT, Category.VEG, Category.SOUP
        ]

    def test_skipped_meat(self):
        config = MealConfig(meat_count=0, veg_count=1, soup_count=1)

        assert slot_category(MealType.DINNER, config, 0) == Category.VEG
        assert slot_category(MealType.DINNER, config, 1) == Category.SOUP

    def test_default_config(self):
        assert slot_category("dinner", None, 1) == Category.VEG

    def test_total(self):
        assert MealConfig(meat_count=2, veg_count=-1, soup_count=1).total == 3
