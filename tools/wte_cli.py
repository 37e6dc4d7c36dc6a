#!/usr/bin/env python3
"""
CLI tool for recommending and searching dishes from the command line.
Usage: python tools/wte_cli.py --meal lunch --like 鸡蛋 --dislike 香菜
"""

import argparse
import json
import random
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from config.settings import get_settings
from whattoeat.core.data_loader import Category, CatalogError
from whattoeat.core.dishes import prepare_dishes
from whattoeat.core.ranking import UserPreferences
from whattoeat.core.recommender import MealConfig, MealType, NoRecipesAvailable
from whattoeat.service import RecipeEngine


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Recommend dishes from the local catalog",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python tools/wte_cli.py --meal breakfast
  python tools/wte_cli.py --meal dinner --meat 2 --veg 1 --soup 0 --like 排骨
  python tools/wte_cli.py --replace veg --exclude 西红柿炒蛋
  python tools/wte_cli.py --search "鸡蛋 番茄"
  python tools/wte_cli.py --list-ingredients
        """
    )

    parser.add_argument(
        "-m", "--meal",
        type=str,
        choices=[MealType.BREAKFAST.value, MealType.LUNCH.value, MealType.DINNER.value],
        help="Meal to recommend"
    )

    parser.add_argument("--meat", type=int, default=None, help="Meat dishes for lunch/dinner")
    parser.add_argument("--veg", type=int, default=None, help="Vegetable dishes for lunch/dinner")
    parser.add_argument("--soup", type=int, default=None, help="Soups for lunch/dinner")

    parser.add_argument(
        "--like",
        action="append",
        default=[],
        help="Liked ingredient (repeatable)"
    )

    parser.add_argument(
        "--dislike",
        action="append",
        default=[],
        help="Disliked ingredient, vetoes any dish containing it (repeatable)"
    )

    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        help="Dish name to avoid (repeatable)"
    )

    parser.add_argument(
        "--replace",
        type=str,
        choices=[c.value for c in Category],
        help="Draw a single replacement dish from a category"
    )

    parser.add_argument(
        "-s", "--search",
        type=str,
        help="Fuzzy search query, space-separated keywords"
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for a repeatable draw"
    )

    parser.add_argument(
        "--data-dir",
        type=str,
        default=None,
        help="Path to data directory (default: bundled catalog)"
    )

    parser.add_argument(
        "--list-ingredients",
        action="store_true",
        help="List the common ingredient vocabulary"
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Output results as JSON"
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show ingredients and steps"
    )

    return parser.parse_args()


def format_dish(dish, verbose=False):
    """Format a dish for display."""
    recipe = dish.recipe

    output = []
    output.append(f"\n{'='*60}")
    category = recipe.category.value if recipe.category else "-"
    output.append(f"  {recipe.dish_name}  [{category}]")
    output.append(f"{'='*60}")
    output.append(f"  {recipe.description}")

    if verbose:
        output.append(f"\n  Ingredients: {', '.join(recipe.ingredients)}")
        output.append(f"\n  Steps:")
        for i, step in enumerate(recipe.steps, 1):
            output.append(f"    {i}. {step}")
        output.append(f"\n  Image: {dish.image_url}")
    else:
        output.append(f"\n  {recipe.instructions_short}")

    return "\n".join(output)


def print_dishes(recipes, args, header):
    dishes = prepare_dishes(recipes)
    if args.json:
        print(json.dumps({"results": [d.to_dict() for d in dishes]}, indent=2, ensure_ascii=False))
        return

    print(header)
    if not dishes:
        print("\nNo matching dishes found.")
    for dish in dishes:
        print(format_dish(dish, verbose=args.verbose))


def main():
    """Main CLI entry point."""
    args = parse_args()
    settings = get_settings()
    if args.data_dir:
        settings = settings.model_copy(update={"data_dir": args.data_dir})

    try:
        engine = RecipeEngine.from_settings(settings)
    except (FileNotFoundError, CatalogError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if not args.json:
        print(f"Loaded {engine.catalog.recipe_count} dishes\n")

    if args.list_ingredients:
        ingredients = engine.common_ingredients
        if args.json:
            print(json.dumps({"ingredients": ingredients}, indent=2, ensure_ascii=False))
        else:
            print("Common ingredients:")
            for ing in ingredients:
                print(f"  - {ing}")
        return

    if args.search is not None:
        results = engine.search_recipes(args.search)
        print_dishes(results, args, f"Search: {args.search} ({len(results)} found)")
        return

    rng = random.Random(args.seed) if args.seed is not None else None
    preferences = UserPreferences.from_lists(args.like, args.dislike)

    if args.replace:
        try:
            recipe = engine.generate_single_side_dish(args.replace, preferences, args.exclude, rng=rng)
        except NoRecipesAvailable as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        print_dishes([recipe], args, f"Replacement {args.replace} dish:")
        return

    if not args.meal:
        print("Error: --meal is required (or use --search/--replace/--list-ingredients)")
        sys.exit(1)

    default = engine.recommender.default_config
    config = MealConfig(
        meat_count=default.meat_count if args.meat is None else args.meat,
        veg_count=default.veg_count if args.veg is None else args.veg,
        soup_count=default.soup_count if args.soup is None else args.soup
    )

    try:
        recipes = engine.generate_recipe(args.meal, preferences, config, args.exclude, rng=rng)
    except NoRecipesAvailable as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print_dishes(recipes, args, f"Recommended {args.meal}:")


if __name__ == "__main__":
    main()
