"""Field-scoped validation messages."""

from collections.abc import Iterable
from dataclasses import dataclass

from .value_object import ValueObject


@dataclass(frozen=True)
class FieldError(ValueObject):
    """One violated rule, attributed to the request field that broke it."""

    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


def first_message_per_field(errors: Iterable[FieldError]) -> dict[str, str]:
    """
    Collapse errors into an ordered field -> message mapping.

    The first message reported for a field wins; later ones for the
    same field are dropped.
    """
    collapsed: dict[str, str] = {}
    for error in errors:
        collapsed.setdefault(error.field, error.message)
    return collapsed
