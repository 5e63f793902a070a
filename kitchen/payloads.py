"""Turn raw, form-shaped payloads into candidates the validators understand.

A raw payload uses the external camelCase names, may use aliases, and carries
strings where numbers and lists are expected. Normalisation resolves aliases,
fills defaults and coerces types. It never decides whether the result is
valid.
"""

from datetime import date
import math
import re
from typing import Any, Iterable, Mapping, TypeAlias


RawValue: TypeAlias = str | int | float | Iterable[str] | None
RawPayload: TypeAlias = Mapping[str, RawValue]


DEFAULT_USER_ID = "kitchen-demo-user"
DEFAULT_LOCATION = "Unknown"


INVENTORY_ALIASES: dict[str, str] = {
    "ingredientName": "name",
    "cost": "pricePerUnit",
    "expirationDate": "expiry",
}


LIST_SEPARATORS = re.compile(r"\r?\n|,")


def is_present(value: object) -> bool:
    return value is not None and value != ""


def first_present(raw: RawPayload, *keys: str) -> RawValue:
    for key in keys:
        value = raw.get(key)
        if is_present(value):
            return value
    return None


def resolve_aliases(raw: RawPayload) -> dict[str, RawValue]:
    """Copy of `raw` with every alias folded into its canonical field."""
    resolved = dict(raw)
    for canonical, alias in INVENTORY_ALIASES.items():
        resolved[canonical] = first_present(raw, canonical, alias)
        resolved.pop(alias, None)
    return resolved


def split_lines(value: RawValue) -> list[str]:
    """Free text split on newlines or commas, trimmed, blanks dropped."""
    if value is None:
        return []
    if isinstance(value, str):
        pieces: Iterable[Any] = LIST_SEPARATORS.split(value)
    elif isinstance(value, (int, float)):
        pieces = [str(value)]
    else:
        pieces = value
    return [s for s in (str(p).strip() for p in pieces) if s]


def to_number(value: RawValue) -> float:
    """Numbers pass through, numeric strings are parsed, anything else is NaN.

    Integral values come back as `int` so `"4"` servings stays `4`.
    """
    if isinstance(value, bool) or value is None:
        return math.nan
    if isinstance(value, (int, float)):
        return value
    if not isinstance(value, str):
        return math.nan
    text = value.strip()
    if "_" in text:
        return math.nan
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return math.nan


def text(value: RawValue, default: str = "") -> str:
    return str(value).strip() if is_present(value) else default


def optional_text(value: RawValue) -> str | None:
    return str(value).strip() if is_present(value) else None


def normalize_recipe(
    raw: RawPayload,
    *,
    recipe_id: str,
    today: date,
) -> dict[str, Any]:
    """Candidate for a new recipe. Any caller supplied `createdDate` is ignored."""
    return {
        "recipe_id": recipe_id,
        "title": text(raw.get("title")),
        "chef": text(raw.get("chef")),
        "meal_type": text(raw.get("mealType")),
        "cuisine_type": text(raw.get("cuisineType")),
        "prep_time": to_number(raw.get("prepTime")),
        "difficulty": text(raw.get("difficulty")),
        "servings": to_number(raw.get("servings")),
        "created_date": today.isoformat(),
        "ingredients": split_lines(raw.get("ingredients")),
        "instructions": split_lines(raw.get("instructions")),
    }


def normalize_inventory_item(
    raw: RawPayload,
    *,
    inventory_id: str,
    today: date,
    default_user_id: str = DEFAULT_USER_ID,
) -> dict[str, Any]:
    resolved = resolve_aliases(raw)
    cost = resolved.get("cost")
    return {
        "inventory_id": inventory_id,
        "user_id": text(resolved.get("userId"), default_user_id),
        "ingredient_name": text(resolved.get("ingredientName")),
        "quantity": to_number(resolved.get("quantity")),
        "unit": text(resolved.get("unit")),
        "category": text(resolved.get("category")),
        "location": text(resolved.get("location"), DEFAULT_LOCATION),
        "cost": to_number(cost) if is_present(cost) else 0,
        "purchase_date": optional_text(resolved.get("purchaseDate"))
        or today.isoformat(),
        "expiration_date": optional_text(resolved.get("expirationDate")),
        "created_date": text(resolved.get("createdDate"), today.isoformat()),
    }
