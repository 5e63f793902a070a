from jinja2 import Environment

from kitchen.models import DerivedItem


class InventoryDashboard:
    def __init__(
        self,
        items: list[DerivedItem],
        *,
        environment: Environment,
        template_name: str = "inventory/list.html",
    ) -> None:
        self.items = items
        self.env = environment
        self.name = template_name

    @property
    def total_value(self) -> float:
        return sum(i.line_value for i in self.items)

    @property
    def categories(self) -> list[str]:
        return list(dict.fromkeys(i.category or "Uncategorized" for i in self.items))

    @property
    def locations(self) -> list[str]:
        return list(dict.fromkeys(i.location or "Unknown" for i in self.items))

    @property
    def expired(self) -> list[DerivedItem]:
        return [i for i in self.items if i.expired]

    def render(self, **context: object) -> str:
        return self.env.get_template(self.name).render(dashboard=self, **context)
