"""Explicit outcome values for validation and collection operations.

Validation predicates return a ``Failure`` (or ``None`` when the value is
fine) and every Inventory operation returns a ``Result``. Callers branch on
these values instead of catching exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ims.domain.model.item import Item


class ErrorKind(Enum):
    EMPTY_NAME = "EMPTY_NAME"
    NON_POSITIVE_QUANTITY = "NON_POSITIVE_QUANTITY"
    NEGATIVE_PRICE = "NEGATIVE_PRICE"
    INVALID_STATUS = "INVALID_STATUS"
    NOT_FOUND = "NOT_FOUND"


@dataclass(frozen=True)
class Failure:
    """Which constraint was violated, with a message fit for the user."""

    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return self.message


NOT_FOUND = Failure(ErrorKind.NOT_FOUND, "Item not found!")


@dataclass(frozen=True)
class Result:
    """Outcome of an Inventory operation."""

    ok: bool
    message: str
    error: ErrorKind | None = None
    item: Item | None = None

    @staticmethod
    def success(message: str, item: Item | None = None) -> Result:
        return Result(ok=True, message=message, item=item)

    @staticmethod
    def failure(failure: Failure, item: Item | None = None) -> Result:
        return Result(ok=False, message=failure.message, error=failure.kind, item=item)

    def __bool__(self) -> bool:
        return self.ok
