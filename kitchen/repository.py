from datetime import date, datetime
import logging
from typing import Callable, Generic, Iterable, TypeAlias, TypeVar

from kitchen.identifiers import Kind, next_id
from kitchen.models import DerivedItem, InventoryItem, Recipe
from kitchen.payloads import (
    DEFAULT_USER_ID,
    RawPayload,
    normalize_inventory_item,
    normalize_recipe,
)
from kitchen.validation import (
    Invalid,
    build_inventory_item,
    build_recipe,
    unwrap,
)


logger = logging.getLogger(__name__)


Clock: TypeAlias = Callable[[], date]
T = TypeVar("T")


class InMemoryRepository(Generic[T]):
    """Ordered records behind list/find/delete. Subclasses know how to add.

    The container never leaves the repository, `list` hands out a snapshot.
    No locking: mutations are expected one at a time.
    """

    kind: Kind
    id_attr: str

    def __init__(self, seed: Iterable[T] = (), *, clock: Clock = date.today) -> None:
        self._records: list[T] = list(seed)
        self.clock = clock

    def __len__(self) -> int:
        return len(self._records)

    def _id_of(self, record: T) -> str:
        return getattr(record, self.id_attr)

    def _next_id(self) -> str:
        return next_id(self.kind, (self._id_of(r) for r in self._records))

    def list(self) -> tuple[T, ...]:
        return tuple(self._records)

    def find_by_id(self, id: str) -> T | None:
        for record in self._records:
            if self._id_of(record) == id:
                return record
        return None

    def delete_by_id(self, id: str) -> T | None:
        for idx, record in enumerate(self._records):
            if self._id_of(record) == id:
                logger.debug("Deleting %s", id)
                return self._records.pop(idx)
        return None

    def _store(self, result: T | Invalid) -> T | Invalid:
        if not isinstance(result, Invalid):
            self._records.append(result)
            logger.debug("Stored %s", self._id_of(result))
        return result


class RecipeRepository(InMemoryRepository[Recipe]):
    kind = Kind.recipe
    id_attr = "recipe_id"

    def try_add(self, raw: RawPayload) -> Recipe | Invalid:
        candidate = normalize_recipe(raw, recipe_id=self._next_id(), today=self.clock())
        return self._store(build_recipe(candidate))

    def add(self, raw: RawPayload) -> Recipe:
        """Store a new recipe or raise `ValidationError`, storing nothing."""
        return unwrap(self.try_add(raw))


class InventoryRepository(InMemoryRepository[InventoryItem]):
    kind = Kind.inventory
    id_attr = "inventory_id"

    def __init__(
        self,
        seed: Iterable[InventoryItem] = (),
        *,
        clock: Clock = date.today,
        default_user_id: str = DEFAULT_USER_ID,
    ) -> None:
        super().__init__(seed, clock=clock)
        self.default_user_id = default_user_id

    def try_add(self, raw: RawPayload) -> InventoryItem | Invalid:
        candidate = normalize_inventory_item(
            raw,
            inventory_id=self._next_id(),
            today=self.clock(),
            default_user_id=self.default_user_id,
        )
        return self._store(build_inventory_item(candidate))

    def add(self, raw: RawPayload) -> InventoryItem:
        """Store a new item or raise `ValidationError`, storing nothing."""
        return unwrap(self.try_add(raw))

    def with_derived(self, as_of: date | datetime | None = None) -> list[DerivedItem]:
        """Every item with `days_left` and `line_value` as seen on `as_of`."""
        if as_of is None:
            as_of = self.clock()
        return [derive(item, as_of) for item in self._records]


def derive(item: InventoryItem, as_of: date | datetime) -> DerivedItem:
    # Whole calendar days, whatever the time of day.
    today = as_of.date() if isinstance(as_of, datetime) else as_of
    days_left = None
    if item.expiration_date:
        days_left = (date.fromisoformat(item.expiration_date) - today).days
    return DerivedItem(
        item,
        days_left=days_left,
        line_value=item.quantity * item.cost,
    )
