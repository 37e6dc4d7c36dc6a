"""Dish recommendation and fuzzy search over a local catalog."""

__version__ = "1.0.0"
