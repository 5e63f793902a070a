"""Filtering, searching and scaling recipes. Pure functions, no state."""

from decimal import ROUND_HALF_UP, Decimal
import math
import re
from typing import Iterable, Self, Sequence

from kitchen.models import DIFFICULTIES, DerivedItem, InventoryItem, Recipe


ALL = "all"

MIN_SCALE = 0.25
MAX_SCALE = 5.0

CENTS = Decimal("0.01")

LEADING_NUMBER = re.compile(r"^\s*([0-9]+(?:\.[0-9]+)?)(\s*)(.*)$", re.DOTALL)


def _matches(value: str, selector: str) -> bool:
    return selector == ALL or value.lower() == selector.lower()


def filter_recipes(
    recipes: Iterable[Recipe],
    *,
    meal_type: str = ALL,
    cuisine_type: str = ALL,
    difficulty: str = ALL,
) -> list[Recipe]:
    return [
        r
        for r in recipes
        if _matches(r.meal_type, meal_type)
        and _matches(r.cuisine_type, cuisine_type)
        and _matches(r.difficulty.value, difficulty)
    ]


def filter_options(recipes: Sequence[Recipe]) -> dict[str, list[str]]:
    return {
        "meal_types": sorted({r.meal_type for r in recipes if r.meal_type}),
        "cuisine_types": sorted({r.cuisine_type for r in recipes if r.cuisine_type}),
        "difficulties": list(DIFFICULTIES),
    }


def _contains(haystack: str, needle: str) -> bool:
    return needle.lower() in haystack.lower()


def matches_query(recipe: Recipe, query: str) -> bool:
    if not query:
        return True
    fields = (recipe.title, recipe.chef, recipe.meal_type, recipe.cuisine_type)
    return (
        any(_contains(f, query) for f in fields)
        or any(_contains(line, query) for line in recipe.ingredients)
        or any(_contains(line, query) for line in recipe.instructions)
    )


def search_recipes(recipes: Iterable[Recipe], query: str) -> list[Recipe]:
    return [r for r in recipes if matches_query(r, query)]


def clamp_scale(raw: str | float | None) -> float:
    """Scale factor within [MIN_SCALE, MAX_SCALE], 1 when unusable."""
    try:
        scale = float(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 1.0
    if not math.isfinite(scale):
        return 1.0
    return min(MAX_SCALE, max(MIN_SCALE, scale))


def format_quantity(value: float) -> str:
    """Two decimals at most, ties rounded up, no trailing zeros.

    100.0 -> "100", 1.50 -> "1.5", 0.125 -> "0.13".
    """
    rounded = Decimal(repr(value)).quantize(CENTS, rounding=ROUND_HALF_UP)
    text = f"{rounded:f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def scale_line(line: str, scale: float) -> str:
    """`scale_line("200g flour", 0.5)` -> `"100g flour"`.

    Lines that do not start with a number come back untouched.
    """
    match = LEADING_NUMBER.match(line)
    if not match:
        return line
    qty, gap, rest = match.groups()
    separator = " " if gap else ""
    return f"{format_quantity(float(qty) * scale)}{separator}{rest}".strip()


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


class ScaledRecipe:
    def __init__(
        self,
        recipe: Recipe,
        *,
        scale: float,
        servings_scaled: int,
        ingredients_scaled: list[str],
    ) -> None:
        self.recipe = recipe
        self.scale = scale
        self.servings_scaled = servings_scaled
        self.ingredients_scaled = ingredients_scaled

    def __repr__(self) -> str:
        return f"<ScaledRecipe(recipe_id={self.recipe.recipe_id}, scale={self.scale})>"


def scale_recipe(recipe: Recipe, scale: float) -> ScaledRecipe:
    return ScaledRecipe(
        recipe,
        scale=scale,
        servings_scaled=max(1, round_half_up(recipe.servings * scale)),
        ingredients_scaled=[scale_line(line, scale) for line in recipe.ingredients],
    )


class RecipeSearch:
    """A search request. `performed` is False until a query or scale is sent.

    An explicit empty query is still a search, and matches every recipe.
    """

    def __init__(self, *, query: str = "", scale: float = 1.0, performed: bool) -> None:
        self.query = query
        self.scale = scale
        self.performed = performed

    @classmethod
    def from_params(cls, query: str | None, scale: str | float | None) -> Self:
        return cls(
            query=(query or "").strip(),
            scale=clamp_scale(scale),
            performed=query is not None or scale is not None,
        )

    def run(self, recipes: Iterable[Recipe]) -> list[ScaledRecipe]:
        if not self.performed:
            return []
        return [scale_recipe(r, self.scale) for r in search_recipes(recipes, self.query)]


def kitchen_summary(
    recipes: Sequence[Recipe],
    items: Sequence[InventoryItem | DerivedItem],
) -> dict[str, int | float]:
    return {
        "total_recipes": len(recipes),
        "total_inventory_items": len(items),
        "cuisine_type_count": len({r.cuisine_type for r in recipes}),
        "inventory_value": sum(i.quantity * i.cost for i in items),
    }
