"""Shape checks on submitted forms, before anything reaches a repository.

These are looser than the entity rules and word their messages for people
filling in a form. A failure here is answered with the generic 400 page.
"""

import math
from typing import Mapping, TypeAlias

from kitchen.models import DIFFICULTIES
from kitchen.payloads import resolve_aliases
from kitchen.validation import YMD


Form: TypeAlias = Mapping[str, str]


def _blank(value: object) -> bool:
    return not str(value if value is not None else "").strip()


def _number(value: object) -> float | None:
    text = str(value).strip() if value is not None else ""
    if not text or "_" in text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def _positive(value: object) -> bool:
    number = _number(value)
    return number is not None and number > 0


def _non_negative(value: object) -> bool:
    number = _number(value)
    return number is not None and number >= 0


def check_recipe_form(form: Form) -> str | None:
    """First problem with a recipe form, or None."""
    if _blank(form.get("title")):
        return "Title is required"
    if _blank(form.get("chef")):
        return "Chef is required"
    if _blank(form.get("mealType")):
        return "Meal type is required"
    if _blank(form.get("cuisineType")):
        return "Cuisine type is required"
    if not _positive(form.get("prepTime")):
        return "prepTime must be a positive number"
    if form.get("difficulty") not in DIFFICULTIES:
        return "difficulty must be Easy/Medium/Hard"
    if not _positive(form.get("servings")):
        return "servings must be a positive number"
    if _blank(form.get("ingredients")):
        return "ingredients is required"
    if _blank(form.get("instructions")):
        return "instructions is required"
    return None


def check_inventory_form(form: Form) -> str | None:
    """First problem with an inventory form, or None. Aliases are accepted."""
    resolved = resolve_aliases(form)
    if _blank(resolved.get("ingredientName")):
        return "ingredientName is required"
    if _blank(resolved.get("category")):
        return "category is required"
    if _blank(resolved.get("unit")):
        return "unit is required"
    if _blank(resolved.get("location")):
        return "location is required"
    if not _non_negative(resolved.get("quantity")):
        return "quantity must be >= 0"
    if not _non_negative(resolved.get("cost")):
        return "cost must be >= 0"
    expiration_date = resolved.get("expirationDate")
    if expiration_date and not YMD.match(str(expiration_date)):
        return "expirationDate must be YYYY-MM-DD"
    return None
