"""Multi-term fuzzy search over the whole catalog."""

from typing import List

from .data_loader import Catalog, Recipe
from .matching import is_fuzzy_match, tokenize


def recipe_matches(recipe: Recipe, term: str) -> bool:
    """True if the term fuzzy-matches the dish name or any ingredient."""
    if is_fuzzy_match(recipe.dish_name, term):
        return True
    return any(is_fuzzy_match(ing, term) for ing in recipe.ingredients)


class SearchIndex:
    """Searches every category, ignoring preferences and exclusions."""

    def __init__(self, catalog: Catalog):
        self.catalog = catalog

    def search(self, query: str) -> List[Recipe]:
        """Return recipes matching every whitespace-separated term, in catalog order."""
        terms = tokenize(query)
        if not terms:
            return []

        return [
            recipe for recipe in self.catalog.all_recipes
            if all(recipe_matches(recipe, term) for term in terms)
        ]
