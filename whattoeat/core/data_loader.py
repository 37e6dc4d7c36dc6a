"""Catalog loading and recipe management."""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Tuple
from dataclasses import dataclass, field
from functools import lru_cache

logger = logging.getLogger(__name__)


class Category(str, Enum):
    """Catalog sections, in search order."""
    BREAKFAST = "breakfast"
    MEAT = "meat"
    VEG = "veg"
    SOUP = "soup"


class CatalogError(ValueError):
    """Raised when the catalog file is malformed."""


def _string_list(value, field_name: str, dish_name: str) -> Tuple[str, ...]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise CatalogError(f"'{field_name}' of {dish_name or '<unnamed>'} must be a list of strings")
    return tuple(value)


@dataclass(frozen=True)
class Recipe:
    """Immutable catalog entry. ``dish_name`` is the identity key."""
    dish_name: str
    description: str
    ingredients: Tuple[str, ...]
    steps: Tuple[str, ...]
    category: Optional[Category] = None

    @property
    def instructions_short(self) -> str:
        """Return a short version of the instructions."""
        if not self.steps:
            return ""
        return " ".join(self.steps[:3])

    def mentions(self, term: str) -> bool:
        """True if ``term`` is a substring of the name or of any ingredient."""
        return term in self.dish_name or any(term in ing for ing in self.ingredients)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "dish_name": self.dish_name,
            "description": self.description,
            "ingredients": list(self.ingredients),
            "steps": list(self.steps),
            "category": self.category.value if self.category else None
        }

    @classmethod
    def from_dict(cls, data: dict, category: Optional[Category] = None) -> "Recipe":
        """Create Recipe from dictionary."""
        if not isinstance(data, dict):
            raise CatalogError(f"Catalog entry must be an object: {data!r}")

        name = data.get("dish_name", "")
        return cls(
            dish_name=name,
            description=data.get("description", ""),
            ingredients=_string_list(data.get("ingredients", []), "ingredients", name),
            steps=_string_list(data.get("steps", []), "steps", name),
            category=category
        )


@dataclass(frozen=True)
class Catalog:
    """The static dish catalog, split by category."""
    breakfast: Tuple[Recipe, ...] = ()
    meat: Tuple[Recipe, ...] = ()
    veg: Tuple[Recipe, ...] = ()
    soup: Tuple[Recipe, ...] = ()
    common_ingredients: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        seen = set()
        for recipe in self.all_recipes:
            if not recipe.dish_name:
                raise CatalogError("Recipe without dish_name in catalog")
            if recipe.dish_name in seen:
                raise CatalogError(f"Duplicate dish_name in catalog: {recipe.dish_name}")
            seen.add(recipe.dish_name)

    def for_category(self, category) -> Tuple[Recipe, ...]:
        """Get the recipes of one category."""
        return getattr(self, Category(category).value)

    @property
    def all_recipes(self) -> Tuple[Recipe, ...]:
        """All recipes in catalog order: breakfast, meat, veg, soup."""
        return self.breakfast + self.meat + self.veg + self.soup

    @property
    def recipe_count(self) -> int:
        return len(self.all_recipes)

    def get_recipe(self, dish_name: str) -> Optional[Recipe]:
        """Get a recipe by its dish name."""
        for recipe in self.all_recipes:
            if recipe.dish_name == dish_name:
                return recipe
        return None

    @classmethod
    def from_dict(cls, data: dict) -> "Catalog":
        """Build a catalog from the JSON document layout."""
        if not isinstance(data, dict):
            raise CatalogError("Catalog document must be a JSON object")

        sections: Dict[str, Tuple[Recipe, ...]] = {}
        for category in Category:
            items = data.get(category.value, [])
            if not isinstance(items, list):
                raise CatalogError(f"Catalog section '{category.value}' must be a list")
            sections[category.value] = tuple(
                Recipe.from_dict(item, category) for item in items
            )

        return cls(
            common_ingredients=_string_list(data.get("common_ingredients", []), "common_ingredients", "catalog"),
            **sections
        )


class DataLoader:
    """Loads and manages the dish catalog."""

    def __init__(self, data_dir: str = "data"):
        self.data_dir = Path(data_dir)
        self._catalog: Optional[Catalog] = None

    def load_catalog(self, filename: str = "catalog.json") -> Catalog:
        """Load the catalog from a JSON file."""
        file_path = self.data_dir / filename

        if not file_path.exists():
            raise FileNotFoundError(f"Catalog file not found: {file_path}")

        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)

        self._catalog = Catalog.from_dict(data)
        logger.info(f"Loaded {self._catalog.recipe_count} dishes from {file_path}")
        return self._catalog

    @property
    def catalog(self) -> Catalog:
        """Get the loaded catalog."""
        if self._catalog is None:
            self.load_catalog()
        return self._catalog

    @property
    def recipes(self) -> List[Recipe]:
        """Get all loaded recipes."""
        return list(self.catalog.all_recipes)

    @property
    def recipe_count(self) -> int:
        """Get number of loaded recipes."""
        return self._catalog.recipe_count if self._catalog else 0

    def get_recipe_by_name(self, dish_name: str) -> Optional[Recipe]:
        """Get a recipe by its dish name."""
        return self.catalog.get_recipe(dish_name)

    def get_recipes_by_category(self, category) -> List[Recipe]:
        """Get recipes of one category."""
        return list(self.catalog.for_category(category))


@lru_cache(maxsize=1)
def get_data_loader(data_dir: str, filename: str = "catalog.json") -> DataLoader:
    """Get cached data loader instance."""
    loader = DataLoader(data_dir)
    loader.load_catalog(filename)
    return loader
