import functools
import logging
from pathlib import Path
from typing import Any, Awaitable, Callable
from urllib.parse import quote, urlencode

from jinja2 import Environment, FileSystemLoader, select_autoescape
from starlette.applications import Starlette
from starlette.exceptions import HTTPException
from starlette.requests import Request
from starlette.responses import HTMLResponse, PlainTextResponse, RedirectResponse
from starlette.routing import Mount, Route
from starlette.staticfiles import StaticFiles

from app import config
from app.forms import check_inventory_form, check_recipe_form
from app.html.inventory_dashboard import InventoryDashboard
from app.html.recipe_search import RecipeSearchPage
from kitchen.models import InventoryItem, Recipe
from kitchen.queries import (
    ALL,
    RecipeSearch,
    filter_options,
    filter_recipes,
    format_quantity,
    kitchen_summary,
)
from kitchen.repository import InventoryRepository, RecipeRepository
from kitchen.seed import seed_inventory, seed_recipes
from kitchen.validation import Invalid


logger = logging.getLogger(__name__)


def aHTMLResponse(route: Callable[..., Awaitable[str | tuple[str, int]]]):
    @functools.wraps(route)
    async def wrapper(*args: Any, **kwargs: Any) -> HTMLResponse:
        resp = await route(*args, **kwargs)
        if not isinstance(resp, tuple):
            html, code = resp, 200
        else:
            html, code = resp
        return HTMLResponse(html, status_code=code)

    return wrapper


def templates_factory(html_dir: Path) -> Environment:
    env = Environment(
        loader=FileSystemLoader(html_dir),
        autoescape=select_autoescape(),
    )
    env.filters["qty"] = format_quantity
    env.filters["money"] = lambda v: f"{v:.2f}"
    return env


def render(request: Request, template: str, **context: Any) -> str:
    env: Environment = request.app.state.templates
    return env.get_template(template).render(
        site_name=request.app.state.config.site_name, **context
    )


def recipes_repo(request: Request) -> RecipeRepository:
    return request.app.state.recipes


def inventory_repo(request: Request) -> InventoryRepository:
    return request.app.state.inventory


def flash(request: Request) -> dict[str, str] | None:
    msg = request.query_params.get("msg")
    if not msg:
        return None
    return {"msg": msg, "type": request.query_params.get("type") or "info"}


def with_flash(path: str, msg: str, type: str, **params: str) -> str:
    return f"{path}?{urlencode(params | {'type': type, 'msg': msg})}"


async def form_data(request: Request) -> dict[str, str]:
    async with request.form() as form:
        # Uploads have no place in these forms.
        return {k: v for k, v in form.items() if isinstance(v, str)}


def bad_request(request: Request, message: str) -> HTMLResponse:
    return HTMLResponse(render(request, "400.html", message=message), status_code=400)


@aHTMLResponse
async def homepage(request: Request) -> str:
    metrics = kitchen_summary(
        recipes_repo(request).list(), inventory_repo(request).list()
    )
    return render(request, "index.html", metrics=metrics)


@aHTMLResponse
async def recipe_list(request: Request) -> str:
    return render(
        request,
        "recipes/list.html",
        recipes=recipes_repo(request).list(),
        flash=flash(request),
    )


@aHTMLResponse
async def recipe_add_page(request: Request) -> str:
    return render(request, "recipes/add.html")


async def recipe_add(request: Request) -> HTMLResponse | PlainTextResponse | RedirectResponse:
    form = await form_data(request)
    problem = check_recipe_form(form)
    if problem is not None:
        logger.warning("Rejected recipe form: %s", problem)
        return bad_request(request, problem)

    match recipes_repo(request).try_add(form):
        case Invalid(message=message):
            logger.warning("Rejected recipe: %s", message)
            return PlainTextResponse(message, status_code=400)
        case Recipe(recipe_id=recipe_id, title=title):
            logger.info("Added recipe %s (%s)", recipe_id, title)
            return RedirectResponse("/recipes", status_code=303)
        case _:
            raise RuntimeError("Unexpected result adding a recipe.")


@aHTMLResponse
async def recipe_delete_page(request: Request) -> str:
    repo = recipes_repo(request)
    selected_id = request.query_params.get("id", "")
    return render(
        request,
        "recipes/delete.html",
        recipes=repo.list(),
        selected=repo.find_by_id(selected_id),
        selected_id=selected_id,
        flash=flash(request),
    )


async def recipe_delete_confirm(request: Request) -> RedirectResponse:
    form = await form_data(request)
    recipe_id = form.get("recipeId", "")
    if form.get("confirm") != "on":
        return RedirectResponse(
            with_flash(
                "/recipes/delete",
                "Please tick the confirmation checkbox to proceed.",
                "warning",
                id=recipe_id,
            ),
            status_code=303,
        )

    removed = recipes_repo(request).delete_by_id(recipe_id)
    if removed is None:
        logger.warning("No recipe %r to delete", recipe_id)
        return RedirectResponse(
            with_flash("/recipes/delete", "Invalid recipe ID selected.", "danger"),
            status_code=303,
        )
    logger.info("Deleted recipe %s", removed.recipe_id)
    return RedirectResponse("/recipes", status_code=303)


async def recipe_delete(request: Request) -> RedirectResponse:
    recipe_id = request.path_params["recipe_id"]
    removed = recipes_repo(request).delete_by_id(recipe_id)
    if removed is None:
        logger.warning("No recipe %r to delete", recipe_id)
        return RedirectResponse(
            with_flash("/recipes", f"Recipe {recipe_id} not found.", "danger"),
            status_code=303,
        )
    logger.info("Deleted recipe %s", removed.recipe_id)
    return RedirectResponse("/recipes", status_code=303)


@aHTMLResponse
async def recipe_filter(request: Request) -> str:
    recipes = recipes_repo(request).list()
    selected = {
        "meal_type": request.query_params.get("mealType", ALL),
        "cuisine_type": request.query_params.get("cuisineType", ALL),
        "difficulty": request.query_params.get("difficulty", ALL),
    }
    filtered = filter_recipes(recipes, **selected)
    return render(
        request,
        "recipes/filter.html",
        recipes=filtered,
        meta={"total": len(recipes), "shown": len(filtered)},
        options=filter_options(recipes),
        selected=selected,
    )


@aHTMLResponse
async def recipe_search(request: Request) -> str:
    search = RecipeSearch.from_params(
        request.query_params.get("query"),
        request.query_params.get("scale"),
    )
    page = RecipeSearchPage(
        search,
        recipes_repo(request).list(),
        environment=request.app.state.templates,
    )
    return page.render(site_name=request.app.state.config.site_name)


@aHTMLResponse
async def inventory_list(request: Request) -> str:
    dashboard = InventoryDashboard(
        inventory_repo(request).with_derived(),
        environment=request.app.state.templates,
    )
    return dashboard.render(
        site_name=request.app.state.config.site_name,
        flash=flash(request),
    )


@aHTMLResponse
async def inventory_add_page(request: Request) -> str:
    return render(request, "inventory/add.html")


async def inventory_add(
    request: Request,
) -> HTMLResponse | PlainTextResponse | RedirectResponse:
    form = await form_data(request)
    problem = check_inventory_form(form)
    if problem is not None:
        logger.warning("Rejected inventory form: %s", problem)
        return bad_request(request, problem)

    match inventory_repo(request).try_add(form):
        case Invalid(message=message):
            logger.warning("Rejected inventory item: %s", message)
            return PlainTextResponse(message, status_code=400)
        case InventoryItem(inventory_id=inventory_id, ingredient_name=name):
            logger.info("Added inventory item %s (%s)", inventory_id, name)
            return RedirectResponse("/inventory", status_code=303)
        case _:
            raise RuntimeError("Unexpected result adding an inventory item.")


@aHTMLResponse
async def inventory_delete_page(request: Request) -> str:
    repo = inventory_repo(request)
    selected_id = request.query_params.get("id", "")
    return render(
        request,
        "inventory/delete.html",
        items=repo.list(),
        selected=repo.find_by_id(selected_id),
        selected_id=selected_id,
        flash=flash(request),
    )


async def inventory_delete_confirm(request: Request) -> RedirectResponse:
    form = await form_data(request)
    item_id = form.get("itemId", "").strip()
    if not item_id:
        return RedirectResponse(
            with_flash("/inventory", "Inventory ID not found.", "danger"),
            status_code=303,
        )
    # 307 keeps the POST.
    return RedirectResponse(
        f"/inventory/{quote(item_id, safe='')}/delete", status_code=307
    )


async def inventory_delete(request: Request) -> RedirectResponse:
    inventory_id = request.path_params["inventory_id"]
    removed = inventory_repo(request).delete_by_id(inventory_id)
    if removed is None:
        logger.warning("No inventory item %r to delete", inventory_id)
        return RedirectResponse(
            with_flash("/inventory", "Inventory ID not found.", "danger"),
            status_code=303,
        )
    logger.info("Deleted inventory item %s", removed.inventory_id)
    return RedirectResponse(
        with_flash(
            "/inventory",
            f"Deleted: {removed.ingredient_name} (ID: {removed.inventory_id})",
            "success",
        ),
        status_code=303,
    )


async def not_found(request: Request, exc: HTTPException) -> HTMLResponse:
    return HTMLResponse(render(request, "404.html"), status_code=404)


def create_app(
    cfg: config.Config | None = None,
    *,
    recipes: RecipeRepository | None = None,
    inventory: InventoryRepository | None = None,
) -> Starlette:
    cfg = config.Config() if cfg is None else cfg

    app = Starlette(
        debug=True if cfg.env == config.Env.local else False,
        routes=[
            Route("/", homepage),
            Route("/recipes", recipe_list, methods=["GET"]),
            Route("/recipes", recipe_add, methods=["POST"]),
            Route("/recipes/add", recipe_add_page),
            Route("/recipes/delete", recipe_delete_page, methods=["GET"]),
            Route("/recipes/delete", recipe_delete_confirm, methods=["POST"]),
            Route("/recipes/filter", recipe_filter),
            Route("/recipes/search", recipe_search),
            Route("/recipes/{recipe_id}/delete", recipe_delete, methods=["POST"]),
            Route("/inventory", inventory_list, methods=["GET"]),
            Route("/inventory", inventory_add, methods=["POST"]),
            Route("/inventory/add", inventory_add_page),
            Route("/inventory/delete", inventory_delete_page, methods=["GET"]),
            Route("/inventory/delete", inventory_delete_confirm, methods=["POST"]),
            Route(
                "/inventory/{inventory_id}/delete", inventory_delete, methods=["POST"]
            ),
            Mount("/assets", app=StaticFiles(directory=cfg.assets_dir), name="assets"),
        ],
        exception_handlers={404: not_found},
    )

    app.state.config = cfg
    app.state.templates = templates_factory(cfg.html_dir)
    app.state.recipes = RecipeRepository(seed_recipes()) if recipes is None else recipes
    app.state.inventory = (
        InventoryRepository(seed_inventory(), default_user_id=cfg.default_user_id)
        if inventory is None
        else inventory
    )
    return app
