"""Item entity and its validation predicates.

The predicates are plain functions so the interactive shell can check raw
input before building typed values. They return a ``Failure`` describing
the violated constraint, or ``None`` when the value is acceptable.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Mapping, Union

from ims.domain.exceptions import ValidationError
from ims.domain.model.ids import IdSequence
from ims.domain.results import ErrorKind, Failure

Price = Union[int, float, Decimal]


class ItemStatus(Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


_STATUS_VALUES = {status.value: status for status in ItemStatus}


# ---------------------------------------------------------------------------
# Validation predicates
# ---------------------------------------------------------------------------


def validate_name(name: Any) -> Failure | None:
    if not isinstance(name, str) or not name.strip():
        return Failure(ErrorKind.EMPTY_NAME, "Item name cannot be empty.")
    return None


def validate_quantity(quantity: Any) -> Failure | None:
    # bool is a subclass of int but never a quantity
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
        return Failure(ErrorKind.NON_POSITIVE_QUANTITY, "Quantity must be a positive integer.")
    return None


def validate_price(price: Any) -> Failure | None:
    failure = Failure(ErrorKind.NEGATIVE_PRICE, "Price must be a non-negative number.")
    if isinstance(price, bool) or not isinstance(price, (int, float, Decimal)):
        return failure
    if isinstance(price, Decimal) and price.is_nan():
        return failure
    if not price >= 0:  # also rejects float NaN
        return failure
    return None


def validate_status(status: Any) -> Failure | None:
    if isinstance(status, ItemStatus):
        return None
    if not isinstance(status, str) or status.lower() not in _STATUS_VALUES:
        return Failure(
            ErrorKind.INVALID_STATUS, 'Status must be either "active" or "inactive".'
        )
    return None


def validate(name: Any, quantity: Any, price: Any, status: Any) -> Failure | None:
    """Check all four fields, returning the first failure."""
    for failure in (
        validate_name(name),
        validate_quantity(quantity),
        validate_price(price),
        validate_status(status),
    ):
        if failure is not None:
            return failure
    return None


def _to_status(status: str | ItemStatus) -> ItemStatus:
    if isinstance(status, ItemStatus):
        return status
    return _STATUS_VALUES[status.lower()]


# ---------------------------------------------------------------------------
# Entity
# ---------------------------------------------------------------------------


class Item:
    """A single inventory record.

    Every field is read-only from the outside. Changes go through
    ``update()``, which validates each value before assigning it, so an
    Item can never hold an invalid value.

    Use ``Item.create()`` for new items: it validates without raising and
    draws the id from the owning inventory's sequence. The constructor is
    for seeding known records and raises ``ValidationError`` on bad data.
    """

    def __init__(
        self,
        id: int,
        name: str,
        quantity: int,
        price: Price,
        status: str | ItemStatus,
    ) -> None:
        if isinstance(id, bool) or not isinstance(id, int):
            raise ValidationError(f"Item id must be an integer, got {id!r}")
        self._id = id
        for field, value in (
            ("name", name),
            ("quantity", quantity),
            ("price", price),
            ("status", status),
        ):
            failure = _SETTERS[field](self, value)
            if failure is not None:
                raise ValidationError(failure.message)

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(
        ids: IdSequence,
        name: str,
        quantity: int,
        price: Price,
        status: str | ItemStatus,
    ) -> Item | Failure:
        """Build a new item, or return the first validation failure.

        The id is drawn only once validation has passed, so rejected
        input does not use up ids.
        """
        failure = validate(name, quantity, price, status)
        if failure is not None:
            return failure
        return Item(ids.next(), name, quantity, price, status)

    # --- Read access ----------------------------------------------------------

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def quantity(self) -> int:
        return self._quantity

    @property
    def price(self) -> Price:
        return self._price

    @property
    def status(self) -> ItemStatus:
        return self._status

    @property
    def is_active(self) -> bool:
        return self._status == ItemStatus.ACTIVE

    # --- Mutation -------------------------------------------------------------

    def update(self, attributes: Mapping[str, Any]) -> Failure | None:
        """Apply the given field values one at a time.

        ``id`` and unknown keys are ignored and ``None`` values are skipped.
        Processing stops at the first invalid value and that failure is
        returned. Fields applied before it keep their new values; the
        update is not atomic.
        """
        for field, value in attributes.items():
            setter = _SETTERS.get(field)
            if setter is None or value is None:
                continue
            failure = setter(self, value)
            if failure is not None:
                return failure
        return None

    def _set_name(self, name: Any) -> Failure | None:
        failure = validate_name(name)
        if failure is None:
            self._name = name.strip()
        return failure

    def _set_quantity(self, quantity: Any) -> Failure | None:
        failure = validate_quantity(quantity)
        if failure is None:
            self._quantity = quantity
        return failure

    def _set_price(self, price: Any) -> Failure | None:
        failure = validate_price(price)
        if failure is None:
            self._price = price
        return failure

    def _set_status(self, status: Any) -> Failure | None:
        failure = validate_status(status)
        if failure is None:
            self._status = _to_status(status)
        return failure

    # --- Display --------------------------------------------------------------

    def details(self) -> str:
        return (
            f"ID: {self._id}, Name: {self._name}, Quantity: {self._quantity}, "
            f"Price: {self._price}, Status: {self._status.value}"
        )

    def __repr__(self) -> str:
        return (
            f"Item(id={self._id!r}, name={self._name!r}, quantity={self._quantity!r}, "
            f"price={self._price!r}, status={self._status.value!r})"
        )


# Closed set of editable fields; ``id`` is not one of them.
_SETTERS: dict[str, Callable[[Item, Any], Failure | None]] = {
    "name": Item._set_name,
    "quantity": Item._set_quantity,
    "price": Item._set_price,
    "status": Item._set_status,
}
