from enum import Enum
from typing import Any


class Difficulty(Enum):
    easy = "Easy"
    medium = "Medium"
    hard = "Hard"


DIFFICULTIES = tuple(d.value for d in Difficulty)


class Recipe:
    def __init__(
        self,
        *,
        recipe_id: str,
        title: str,
        chef: str,
        ingredients: list[str],
        instructions: list[str],
        meal_type: str,
        cuisine_type: str,
        prep_time: float,
        difficulty: Difficulty,
        servings: float,
        created_date: str,
    ) -> None:
        self.recipe_id = recipe_id
        self.title = title
        self.chef = chef
        self.ingredients = list(ingredients)
        self.instructions = list(instructions)
        self.meal_type = meal_type
        self.cuisine_type = cuisine_type
        self.prep_time = prep_time
        self.difficulty = difficulty
        self.servings = servings
        self.created_date = created_date

    def __repr__(self) -> str:
        return f"<Recipe(recipe_id={self.recipe_id}, title={self.title})>"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Recipe):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def to_dict(self) -> dict[str, Any]:
        return {
            "recipeId": self.recipe_id,
            "title": self.title,
            "chef": self.chef,
            "ingredients": list(self.ingredients),
            "instructions": list(self.instructions),
            "mealType": self.meal_type,
            "cuisineType": self.cuisine_type,
            "prepTime": self.prep_time,
            "difficulty": self.difficulty.value,
            "servings": self.servings,
            "createdDate": self.created_date,
        }


class InventoryItem:
    def __init__(
        self,
        *,
        inventory_id: str,
        user_id: str,
        ingredient_name: str,
        quantity: float,
        unit: str,
        category: str,
        location: str,
        cost: float,
        purchase_date: str | None,
        expiration_date: str | None,
        created_date: str,
    ) -> None:
        self.inventory_id = inventory_id
        self.user_id = user_id
        self.ingredient_name = ingredient_name
        self.quantity = quantity
        self.unit = unit
        self.category = category
        self.location = location
        self.cost = cost
        self.purchase_date = purchase_date
        self.expiration_date = expiration_date
        self.created_date = created_date

    def __repr__(self) -> str:
        return (
            f"<InventoryItem(inventory_id={self.inventory_id}, "
            f"ingredient_name={self.ingredient_name})>"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InventoryItem):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def to_dict(self) -> dict[str, Any]:
        return {
            "inventoryId": self.inventory_id,
            "userId": self.user_id,
            "ingredientName": self.ingredient_name,
            "quantity": self.quantity,
            "unit": self.unit,
            "category": self.category,
            "location": self.location,
            "cost": self.cost,
            "purchaseDate": self.purchase_date,
            "expirationDate": self.expiration_date,
            "createdDate": self.created_date,
        }


class DerivedItem:
    """An inventory item seen on a given day. Never stored."""

    def __init__(
        self,
        item: InventoryItem,
        *,
        days_left: int | None,
        line_value: float,
    ) -> None:
        self.item = item
        self.days_left = days_left
        self.line_value = line_value

    def __getattr__(self, name: str) -> Any:
        # Only reached for names missing here, including `item` before __init__.
        if name == "item" or name.startswith("__"):
            raise AttributeError(name)
        return getattr(self.item, name)

    @property
    def expired(self) -> bool:
        return self.days_left is not None and self.days_left < 0

    def to_dict(self) -> dict[str, Any]:
        return self.item.to_dict() | {
            "daysLeft": self.days_left,
            "lineValue": self.line_value,
        }
