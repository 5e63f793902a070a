"""Validation rules for recipes and inventory items.

Validators look at a candidate, a mapping of snake_case field names to values
already coerced to native types, and report the first rule it breaks. They
never raise and never look at a repository. `ValidationError` only appears at
the repository boundary, see `unwrap`.
"""

from datetime import date
import math
import re
from typing import Any, Mapping, TypeAlias, TypeVar

from kitchen.identifiers import Kind, is_valid_id
from kitchen.models import DIFFICULTIES, Difficulty, InventoryItem, Recipe


Candidate: TypeAlias = Mapping[str, Any]


YMD = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")


class ValidationError(ValueError):
    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class Invalid:
    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message

    def __repr__(self) -> str:
        return f"<Invalid(field={self.field}, message={self.message!r})>"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Invalid):
            return NotImplemented
        return (self.field, self.message) == (other.field, other.message)

    def error(self) -> ValidationError:
        return ValidationError(self.field, self.message)


T = TypeVar("T")


def unwrap(result: T | Invalid) -> T:
    if isinstance(result, Invalid):
        raise result.error()
    return result


def is_ymd(value: object) -> bool:
    """`YYYY-MM-DD` and a real calendar date."""
    if not isinstance(value, str) or not YMD.match(value):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


def _is_number(value: object) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


def _positive(value: object) -> bool:
    return _is_number(value) and value > 0  # type: ignore[operator]


def _non_negative(value: object) -> bool:
    return _is_number(value) and value >= 0  # type: ignore[operator]


def _filled(value: object) -> bool:
    return isinstance(value, str) and bool(value.strip())


def validate_recipe(candidate: Candidate) -> Invalid | None:
    if not is_valid_id(Kind.recipe, candidate.get("recipe_id")):
        return Invalid("recipeId", "recipeId must be in 'R-00001' format")
    if not _filled(candidate.get("title")):
        return Invalid("title", "title is required")
    if not _filled(candidate.get("chef")):
        return Invalid("chef", "chef is required")
    if not _positive(candidate.get("prep_time")):
        return Invalid("prepTime", "prepTime must be a number > 0")
    difficulty = candidate.get("difficulty")
    if isinstance(difficulty, Difficulty):
        difficulty = difficulty.value
    if difficulty not in DIFFICULTIES:
        return Invalid(
            "difficulty", "difficulty must be one of 'Easy' | 'Medium' | 'Hard'"
        )
    if not _positive(candidate.get("servings")):
        return Invalid("servings", "servings must be a number > 0")
    if not isinstance(candidate.get("ingredients"), list):
        return Invalid("ingredients", "ingredients must be a list")
    if not isinstance(candidate.get("instructions"), list):
        return Invalid("instructions", "instructions must be a list")
    if not is_ymd(candidate.get("created_date")):
        return Invalid("createdDate", "createdDate must be in 'YYYY-MM-DD' format")
    return None


def validate_inventory_item(candidate: Candidate) -> Invalid | None:
    if not is_valid_id(Kind.inventory, candidate.get("inventory_id")):
        return Invalid("inventoryId", "inventoryId must be in 'I-00001' format")
    for key, field in (
        ("user_id", "userId"),
        ("ingredient_name", "ingredientName"),
        ("unit", "unit"),
        ("category", "category"),
        ("location", "location"),
    ):
        if not _filled(candidate.get(key)):
            return Invalid(field, f"{field} is required")
    if not _non_negative(candidate.get("quantity")):
        return Invalid("quantity", "quantity must be a non-negative number")
    if not _non_negative(candidate.get("cost")):
        return Invalid("cost", "cost must be a number >= 0")

    purchase_date = candidate.get("purchase_date")
    expiration_date = candidate.get("expiration_date")
    if purchase_date is not None and not is_ymd(purchase_date):
        return Invalid("purchaseDate", "purchaseDate must be in 'YYYY-MM-DD' format")
    if expiration_date is not None and not is_ymd(expiration_date):
        return Invalid(
            "expirationDate", "expirationDate must be in 'YYYY-MM-DD' format"
        )
    if not is_ymd(candidate.get("created_date")):
        return Invalid("createdDate", "createdDate must be in 'YYYY-MM-DD' format")
    # Same format on both sides, so string order is date order.
    if purchase_date and expiration_date and expiration_date < purchase_date:
        return Invalid(
            "expirationDate", "expirationDate must not be earlier than purchaseDate"
        )
    return None


def build_recipe(candidate: Candidate) -> Recipe | Invalid:
    invalid = validate_recipe(candidate)
    if invalid is not None:
        return invalid
    return Recipe(
        recipe_id=candidate["recipe_id"],
        title=candidate["title"].strip(),
        chef=candidate["chef"].strip(),
        ingredients=candidate["ingredients"],
        instructions=candidate["instructions"],
        meal_type=str(candidate.get("meal_type") or "").strip(),
        cuisine_type=str(candidate.get("cuisine_type") or "").strip(),
        prep_time=candidate["prep_time"],
        difficulty=Difficulty(candidate["difficulty"]),
        servings=candidate["servings"],
        created_date=candidate["created_date"],
    )


def build_inventory_item(candidate: Candidate) -> InventoryItem | Invalid:
    invalid = validate_inventory_item(candidate)
    if invalid is not None:
        return invalid
    return InventoryItem(
        inventory_id=candidate["inventory_id"],
        user_id=candidate["user_id"].strip(),
        ingredient_name=candidate["ingredient_name"].strip(),
        quantity=candidate["quantity"],
        unit=candidate["unit"].strip(),
        category=candidate["category"].strip(),
        location=candidate["location"].strip(),
        cost=candidate["cost"],
        purchase_date=candidate.get("purchase_date"),
        expiration_date=candidate.get("expiration_date"),
        created_date=candidate["created_date"],
    )
