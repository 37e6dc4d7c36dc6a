"""API models for the What To Eat service."""

from .schemas import (
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

__all__ = [
    "PreferencesIn",
    "MealConfigIn",
    "DishResult",
    "RecommendRequest",
    "RecommendResponse",
    "ReplaceRequest",
    "ReplaceResponse",
    "SearchResponse",
    "IngredientsResponse",
    "HealthResponse"
]
