"""Display decoration for recommended recipes."""

from typing import List, Sequence
from urllib.parse import quote
from dataclasses import dataclass

from config.settings import IMAGE_URL_TEMPLATE, IMAGE_QUERY_SUFFIX
from .data_loader import Recipe


@dataclass(frozen=True)
class GeneratedDish:
    """A recipe with the image reference shown next to it."""
    recipe: Recipe
    image_url: str

    @property
    def dish_name(self) -> str:
        return self.recipe.dish_name

    def to_dict(self) -> dict:
        data = self.recipe.to_dict()
        data["image_url"] = self.image_url
        return data


def build_image_url(dish_name: str) -> str:
    """Deterministic image search URL for a dish name."""
    return IMAGE_URL_TEMPLATE.format(query=quote(dish_name + IMAGE_QUERY_SUFFIX))


def prepare_dishes(recipes: Sequence[Recipe]) -> List[GeneratedDish]:
    return [GeneratedDish(recipe=r, image_url=build_image_url(r.dish_name)) for r in recipes]
