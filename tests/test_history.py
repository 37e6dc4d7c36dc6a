"""Unit tests for the seen-dish buffer and dish decoration."""

import sys
from pathlib import Path
from urllib.parse import quote

sys.path.insert(0, str(Path(__file__).parent.parent))

from whattoeat.core.data_loader import Recipe
from whattoeat.core.dishes import build_image_url, prepare_dishes
from whattoeat.core.history import merge_exclusions, update_seen


class TestSeenBuffer:
    """Tests for update_seen and merge_exclusions."""

    def test_update_keeps_most_recent(self):
        seen = [f"d{i}" for i in range(11)]

        result = update_seen(seen, ["x", "y"], limit=12)

        assert len(result) == 12
        assert result[-2:] == ["x", "y"]
        assert "d0" not in result

    def test_update_does_not_mutate(self):
        seen = ["a"]
        update_seen(seen, ["b"])

        assert seen == ["a"]

    def test_zero_limit(self):
        assert update_seen(["a"], ["b"], limit=0) == []

    def test_merge_dedupes_in_order(self):
        assert merge_exclusions(["a", "b"], ["b", "c"], ["a"]) == ["a", "b", "c"]

    def test_merge_empty(self):
        assert merge_exclusions() == []


class TestDishes:
    """Tests for GeneratedDish decoration."""

    def test_image_url_deterministic(self):
        assert build_image_url("红烧肉") == build_image_url("红烧肉")
        assert build_image_url("红烧肉") != build_image_url("回锅肉")

    def test_image_url_encodes_name(self):
        url = build_image_url("红烧肉")

        assert url.startswith("https://")
        assert quote("红烧肉") in url
        assert " " not in url

    def test_prepare_dishes(self):
        recipe = Recipe(dish_name="葱油饼", description="", ingredients=("面粉",), steps=())

        dishes = prepare_dishes([recipe])

        assert dishes[0].dish_name == "葱油饼"
        data = dishes[0].to_dict()
        assert data["image_url"] == build_image_url("葱油饼")
        assert data["ingredients"] == ["面粉"]
