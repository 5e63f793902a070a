"""The records every fresh process starts with."""

from kitchen.models import InventoryItem, Recipe
from kitchen.validation import build_inventory_item, build_recipe, unwrap


RECIPES = [
    {
        "recipe_id": "R-00001",
        "title": "Classic Spaghetti Carbonara",
        "chef": "TakumiWatanabe",
        "ingredients": [
            "400g spaghetti",
            "200g pancetta",
            "4 large eggs",
            "100g Pecorino Romano",
            "Black pepper",
        ],
        "instructions": [
            "Boil salted water for pasta",
            "Cook pancetta until crispy",
            "Whisk eggs with cheese",
            "Combine hot pasta with pancetta",
            "Add egg mixture off heat",
        ],
        "meal_type": "Dinner",
        "cuisine_type": "Italian",
        "prep_time": 25,
        "difficulty": "Medium",
        "servings": 4,
        "created_date": "2025-07-20",
    },
    {
        "recipe_id": "R-00002",
        "title": "Avocado Toast Supreme",
        "chef": "TakumiWatanabe",
        "ingredients": [
            "2 slices sourdough bread",
            "1 ripe avocado",
            "1 tomato",
            "Feta cheese",
            "Olive oil",
            "Lemon juice",
        ],
        "instructions": [
            "Toast bread until golden",
            "Mash avocado with lemon",
            "Slice tomato",
            "Spread avocado on toast",
            "Top with tomato and feta",
        ],
        "meal_type": "Breakfast",
        "cuisine_type": "Mediterranean",
        "prep_time": 10,
        "difficulty": "Easy",
        "servings": 2,
        "created_date": "2025-07-21",
    },
]


INVENTORY = [
    {
        "inventory_id": "I-00001",
        "user_id": "TakumiWatanabe",
        "ingredient_name": "Fresh Tomatoes",
        "quantity": 8,
        "unit": "pieces",
        "category": "Vegetables",
        "purchase_date": "2025-07-18",
        "expiration_date": "2025-07-25",
        "location": "Fridge",
        "cost": 6.4,
        "created_date": "2025-07-18",
    },
    {
        "inventory_id": "I-00002",
        "user_id": "TakumiWatanabe",
        "ingredient_name": "Spaghetti Pasta",
        "quantity": 2,
        "unit": "kg",
        "category": "Grains",
        "purchase_date": "2025-07-15",
        "expiration_date": "2025-12-15",
        "location": "Pantry",
        "cost": 8.9,
        "created_date": "2025-07-22",
    },
]


def seed_recipes() -> list[Recipe]:
    return [unwrap(build_recipe(r)) for r in RECIPES]


def seed_inventory() -> list[InventoryItem]:
    return [unwrap(build_inventory_item(i)) for i in INVENTORY]
