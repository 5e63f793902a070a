import re
from enum import Enum
from typing import Iterable


ID_DIGITS = 5


class Kind(Enum):
    recipe = "R"
    inventory = "I"

    @property
    def pattern(self) -> re.Pattern[str]:
        return re.compile(rf"^{self.value}-([0-9]{{{ID_DIGITS}}})$")


def format_id(kind: Kind, n: int) -> str:
    """`format_id(Kind.recipe, 1)` -> `"R-00001"`."""
    return f"{kind.value}-{n:0{ID_DIGITS}d}"


def is_valid_id(kind: Kind, value: object) -> bool:
    return isinstance(value, str) and kind.pattern.match(value) is not None


def id_number(kind: Kind, value: str | None) -> int:
    """Numeric suffix of a well formed id, 0 for anything else."""
    match = kind.pattern.match(value or "")
    return int(match.group(1)) if match else 0


def next_id(kind: Kind, existing: Iterable[str]) -> str:
    return format_id(kind, max((id_number(kind, i) for i in existing), default=0) + 1)
