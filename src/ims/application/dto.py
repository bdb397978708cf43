"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing the mutable Item entity to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ims.domain.model.item import Item, ItemStatus, Price


@dataclass(frozen=True)
class ItemChanges:
    """Input: the fields to edit. ``None`` means keep the current value."""

    name: str | None = None
    quantity: int | None = None
    price: Price | None = None
    status: str | ItemStatus | None = None

    def as_attributes(self) -> dict[str, Any]:
        attributes = {
            "name": self.name,
            "quantity": self.quantity,
            "price": self.price,
            "status": self.status,
        }
        return {key: value for key, value in attributes.items() if value is not None}

    @property
    def is_empty(self) -> bool:
        return not self.as_attributes()


@dataclass(frozen=True)
class ItemDTO:
    """Output: a single item as displayed to the user."""

    id: int
    name: str
    quantity: int
    price: Price
    status: str  # "active" / "inactive"
    details: str

    @staticmethod
    def from_item(item: Item) -> ItemDTO:
        return ItemDTO(
            id=item.id,
            name=item.name,
            quantity=item.quantity,
            price=item.price,
            status=item.status.value,
            details=item.details(),
        )
