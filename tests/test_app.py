from typing import AsyncIterator

import httpx
import pytest
import pytest_asyncio

from app.app import create_app
from app.config import Config
from kitchen.repository import InventoryRepository, RecipeRepository


@pytest_asyncio.fixture
async def client(
    recipes: RecipeRepository, inventory: InventoryRepository
) -> AsyncIterator[httpx.AsyncClient]:
    app = create_app(Config(), recipes=recipes, inventory=inventory)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.mark.asyncio
async def test_homepage(client: httpx.AsyncClient) -> None:
    resp = await client.get("/")
    assert resp.status_code == 200
    assert "Recipe Hub" in resp.text
    assert "69.00" in resp.text


@pytest.mark.asyncio
async def test_recipe_list(client: httpx.AsyncClient) -> None:
    resp = await client.get("/recipes")
    assert resp.status_code == 200
    assert "Classic Spaghetti Carbonara" in resp.text
    assert "Avocado Toast Supreme" in resp.text


@pytest.mark.asyncio
async def test_add_recipe(
    client: httpx.AsyncClient,
    recipes: RecipeRepository,
    recipe_payload: dict[str, str],
) -> None:
    resp = await client.post("/recipes", data=recipe_payload)
    assert resp.status_code == 303
    assert resp.headers["location"] == "/recipes"
    added = recipes.find_by_id("R-00003")
    assert added is not None
    assert added.title == "Bread and butter pudding"


@pytest.mark.asyncio
async def test_add_recipe_bad_form(
    client: httpx.AsyncClient,
    recipes: RecipeRepository,
    recipe_payload: dict[str, str],
) -> None:
    resp = await client.post("/recipes", data=recipe_payload | {"title": ""})
    assert resp.status_code == 400
    assert "400 Bad Request" in resp.text
    assert "Title is required" in resp.text
    assert len(recipes) == 2


@pytest.mark.asyncio
async def test_add_inventory_rejected_by_entity_rules(
    client: httpx.AsyncClient,
    inventory: InventoryRepository,
    item_payload: dict[str, str],
) -> None:
    resp = await client.post(
        "/inventory", data=item_payload | {"expirationDate": "2025-07-01"}
    )
    assert resp.status_code == 400
    assert resp.text == "expirationDate must not be earlier than purchaseDate"
    assert len(inventory) == 2


@pytest.mark.asyncio
async def test_add_inventory(
    client: httpx.AsyncClient,
    inventory: InventoryRepository,
    item_payload: dict[str, str],
) -> None:
    resp = await client.post("/inventory", data=item_payload)
    assert resp.status_code == 303
    added = inventory.find_by_id("I-00003")
    assert added is not None
    assert added.user_id == "tester"


@pytest.mark.asyncio
async def test_recipe_delete_needs_confirmation(
    client: httpx.AsyncClient, recipes: RecipeRepository
) -> None:
    resp = await client.post("/recipes/delete", data={"recipeId": "R-00001"})
    assert resp.status_code == 303
    assert "type=warning" in resp.headers["location"]
    assert recipes.find_by_id("R-00001") is not None

    page = await client.get(resp.headers["location"])
    assert "Please tick the confirmation checkbox to proceed." in page.text


@pytest.mark.asyncio
async def test_recipe_delete_confirmed(
    client: httpx.AsyncClient, recipes: RecipeRepository
) -> None:
    resp = await client.post(
        "/recipes/delete", data={"recipeId": "R-00001", "confirm": "on"}
    )
    assert resp.status_code == 303
    assert resp.headers["location"] == "/recipes"
    assert recipes.find_by_id("R-00001") is None


@pytest.mark.asyncio
async def test_recipe_delete_unknown(client: httpx.AsyncClient) -> None:
    resp = await client.post(
        "/recipes/delete", data={"recipeId": "R-00099", "confirm": "on"}
    )
    assert resp.status_code == 303
    assert "type=danger" in resp.headers["location"]


@pytest.mark.asyncio
async def test_recipe_direct_delete(
    client: httpx.AsyncClient, recipes: RecipeRepository
) -> None:
    resp = await client.post("/recipes/R-00002/delete")
    assert resp.status_code == 303
    assert recipes.find_by_id("R-00002") is None


@pytest.mark.asyncio
async def test_recipe_filter(client: httpx.AsyncClient) -> None:
    resp = await client.get("/recipes/filter", params={"difficulty": "Easy"})
    assert resp.status_code == 200
    assert "Showing 1 of 2" in resp.text
    assert "Avocado Toast Supreme" in resp.text


@pytest.mark.asyncio
async def test_recipe_search_page_before_search(client: httpx.AsyncClient) -> None:
    resp = await client.get("/recipes/search")
    assert resp.status_code == 200
    assert "No recipes found." not in resp.text
    assert "200g pancetta" not in resp.text


@pytest.mark.asyncio
async def test_recipe_search(client: httpx.AsyncClient) -> None:
    resp = await client.get(
        "/recipes/search", params={"query": "carbonara", "scale": "0.5"}
    )
    assert resp.status_code == 200
    assert "1 result" in resp.text
    assert "100g pancetta" in resp.text
    assert "Avocado Toast Supreme" not in resp.text


@pytest.mark.asyncio
async def test_recipe_search_no_hits(client: httpx.AsyncClient) -> None:
    resp = await client.get("/recipes/search", params={"query": "chocolate"})
    assert "No recipes found." in resp.text


@pytest.mark.asyncio
async def test_inventory_dashboard(client: httpx.AsyncClient) -> None:
    resp = await client.get("/inventory")
    assert resp.status_code == 200
    assert "Fresh Tomatoes" in resp.text
    assert "51.20" in resp.text
    assert "Vegetables, Grains" in resp.text


@pytest.mark.asyncio
async def test_inventory_delete_flow(
    client: httpx.AsyncClient, inventory: InventoryRepository
) -> None:
    resp = await client.post("/inventory/delete", data={"itemId": "I-00002"})
    assert resp.status_code == 307
    assert resp.headers["location"] == "/inventory/I-00002/delete"

    resp = await client.post(resp.headers["location"])
    assert resp.status_code == 303
    assert inventory.find_by_id("I-00002") is None

    page = await client.get(resp.headers["location"])
    assert "Deleted: Spaghetti Pasta (ID: I-00002)" in page.text


@pytest.mark.asyncio
async def test_inventory_delete_unknown(client: httpx.AsyncClient) -> None:
    resp = await client.post("/inventory/I-00042/delete")
    assert resp.status_code == 303
    page = await client.get(resp.headers["location"])
    assert "Inventory ID not found." in page.text


@pytest.mark.asyncio
async def test_not_found(client: httpx.AsyncClient) -> None:
    resp = await client.get("/nowhere")
    assert resp.status_code == 404
    assert "Nothing lives here." in resp.text
