from datetime import date

import pytest

from kitchen.repository import InventoryRepository, RecipeRepository
from kitchen.seed import seed_inventory, seed_recipes


TODAY = date(2025, 7, 22)


def today() -> date:
    return TODAY


@pytest.fixture
def recipes() -> RecipeRepository:
    return RecipeRepository(seed_recipes(), clock=today)


@pytest.fixture
def inventory() -> InventoryRepository:
    return InventoryRepository(seed_inventory(), clock=today, default_user_id="tester")


@pytest.fixture
def recipe_payload() -> dict[str, str]:
    return {
        "title": "Bread and butter pudding",
        "chef": "Nigella",
        "mealType": "Dessert",
        "cuisineType": "British",
        "prepTime": "50",
        "difficulty": "Easy",
        "servings": "6",
        "ingredients": "8 slices bread\n50g butter, 3 eggs\n\n",
        "instructions": "Butter the bread\nLayer in a dish\nBake",
    }


@pytest.fixture
def item_payload() -> dict[str, str]:
    return {
        "ingredientName": "Butter",
        "quantity": "2",
        "unit": "blocks",
        "category": "Dairy",
        "location": "Fridge",
        "cost": "2.5",
        "purchaseDate": "2025-07-20",
        "expirationDate": "2025-08-20",
    }
