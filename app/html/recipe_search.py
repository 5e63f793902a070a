from jinja2 import Environment

from kitchen.models import Recipe
from kitchen.queries import MAX_SCALE, MIN_SCALE, RecipeSearch, ScaledRecipe


class RecipeSearchPage:
    def __init__(
        self,
        search: RecipeSearch,
        recipes: tuple[Recipe, ...],
        *,
        environment: Environment,
        template_name: str = "recipes/search.html",
    ) -> None:
        self.search = search
        self.results: list[ScaledRecipe] = search.run(recipes)
        self.env = environment
        self.name = template_name

    @property
    def count(self) -> int:
        return len(self.results)

    @property
    def scale_bounds(self) -> tuple[float, float]:
        return MIN_SCALE, MAX_SCALE

    def render(self, **context: object) -> str:
        return self.env.get_template(self.name).render(page=self, **context)
