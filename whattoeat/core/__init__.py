"""Core recommendation and search modules."""

from .data_loader import Catalog, Category, CatalogError, DataLoader, Recipe
from .matching import is_fuzzy_match, tokenize
from .ranking import DishRanker, ScoringConfig, UserPreferences, VETO
from .recommender import MealConfig, MealRecommender, MealType, NoRecipesAvailable, slot_category
from .search import SearchIndex

__all__ = [
    "Catalog",
    "Category",
    "CatalogError",
    "DataLoader",
    "Recipe",
    "is_fuzzy_match",
    "tokenize",
    "DishRanker",
    "ScoringConfig",
    "UserPreferences",
    "VETO",
    "MealConfig",
    "MealRecommender",
    "MealType",
    "NoRecipesAvailable",
    "slot_category",
    "SearchIndex"
]
