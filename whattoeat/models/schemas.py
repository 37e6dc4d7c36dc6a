"""Pydantic models for API request/response schemas."""

from typing import List, Optional, Literal
from pydantic import BaseModel, Field


class PreferencesIn(BaseModel):
    """Taste preferences sent with every recommendation request."""
    likes: List[str] = Field(default_factory=list, description="Liked ingredients or keywords")
    dislikes: List[str] = Field(default_factory=list, description="Disliked ingredients; any hit vetoes a dish")


class MealConfigIn(BaseModel):
    """Lunch/dinner composition."""
    meat_count: int = Field(default=1, ge=0, le=5, description="Number of meat dishes")
    veg_count: int = Field(default=1, ge=0, le=5, description="Number of vegetable dishes")
    soup_count: int = Field(default=1, ge=0, le=5, description="Number of soups")


class DishResult(BaseModel):
    """A recommended or searched dish."""
    dish_name: str = Field(description="Dish name, unique across the catalog")
    description: str = Field(description="Short description")
    ingredients: List[str] = Field(description="Ordered ingredient list")
    steps: List[str] = Field(description="Ordered cooking steps")
    category: Optional[str] = Field(default=None, description="Catalog category")
    image_url: Optional[str] = Field(default=None, description="Image reference derived from the dish name")


class RecommendRequest(BaseModel):
    """Request body for the /recommend endpoint."""
    meal_type: Literal["breakfast", "lunch", "dinner"] = Field(description="Meal to recommend")
    preferences: PreferencesIn = Field(default_factory=PreferencesIn)
    config: Optional[MealConfigIn] = Field(default=None, description="Lunch/dinner composition")
    seen: List[str] = Field(default_factory=list, description="Recently shown dish names")
    excluded_names: List[str] = Field(
        default_factory=list,
        description="Extra names to avoid for this call, e.g. the dishes on screen"
    )


class RecommendResponse(BaseModel):
    """Response body for the /recommend endpoint."""
    meal_type: str = Field(description="Meal recommended")
    dishes: List[DishResult] = Field(description="Dishes in meat, veg, soup order")
    seen: List[str] = Field(description="Updated recently-shown buffer")


class ReplaceRequest(BaseModel):
    """Request body for the /replace endpoint."""
    category: Optional[Literal["breakfast", "meat", "veg", "soup"]] = Field(
        default=None,
        description="Category to draw from"
    )
    meal_type: Optional[Literal["breakfast", "lunch", "dinner"]] = Field(
        default=None,
        description="Meal the slot belongs to, used with slot_index"
    )
    config: Optional[MealConfigIn] = Field(default=None, description="Composition the slot belongs to")
    slot_index: Optional[int] = Field(default=None, ge=0, description="Position of the dish being replaced")
    preferences: PreferencesIn = Field(default_factory=PreferencesIn)
    current_names: List[str] = Field(default_factory=list, description="Dishes currently on screen")
    seen: List[str] = Field(default_factory=list, description="Recently shown dish names")


class ReplaceResponse(BaseModel):
    """Response body for the /replace endpoint."""
    category: str = Field(description="Category the dish was drawn from")
    dish: DishResult = Field(description="Replacement dish")
    seen: List[str] = Field(description="Updated recently-shown buffer")


class SearchResponse(BaseModel):
    """Response body for the /search endpoint."""
    query: str = Field(description="Original query")
    terms: List[str] = Field(description="Normalised search terms")
    results: List[DishResult] = Field(description="Matching dishes in catalog order")
    total: int = Field(description="Number of matches")


class IngredientsResponse(BaseModel):
    """Response body for the /ingredients endpoint."""
    total: int
    ingredients: List[str]


class HealthResponse(BaseModel):
    """Response body for the /health endpoint."""
    status: str = Field(description="Service status")
    recipes_loaded: int = Field(description="Number of dishes in the catalog")
    zones_overlap: bool = Field(description="Whether neutral dishes can outscore liked ones")
    version: str = Field(description="API version")
