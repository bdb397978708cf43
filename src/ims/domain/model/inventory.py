"""Inventory aggregate: the ordered, in-memory collection of Items.

Every operation returns a ``Result`` rather than raising, so a rejected
add or edit leaves the collection exactly as it was.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Mapping

from ims.domain.model.ids import IdSequence
from ims.domain.model.item import Item, ItemStatus, Price
from ims.domain.results import NOT_FOUND, Failure, Result


class Inventory:
    """Aggregate root for the item collection.

    Invariants:
    - items keep their insertion order
    - ids come from the inventory's own ``IdSequence`` and are never reused
    """

    def __init__(
        self,
        items: Iterable[Item] | None = None,
        ids: IdSequence | None = None,
    ) -> None:
        self._items: list[Item] = list(items or [])
        self._ids = ids if ids is not None else IdSequence()
        for item in self._items:
            self._ids.advance_past(item.id)

    @property
    def items(self) -> tuple[Item, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    # --- Commands -------------------------------------------------------------

    def add_item(
        self,
        name: str,
        quantity: int,
        price: Price,
        status: str | ItemStatus,
    ) -> Result:
        created = Item.create(self._ids, name, quantity, price, status)
        if isinstance(created, Failure):
            return Result.failure(created)
        self._items.append(created)
        return Result.success("Item added successfully!", item=created)

    def remove_item(self, item_id: int) -> Result:
        item = self.find_item(item_id)
        if item is None:
            return Result.failure(NOT_FOUND)
        self._items.remove(item)
        return Result.success(f"Item with ID '{item_id}' removed successfully!", item=item)

    def edit_item(self, item_id: int, attributes: Mapping[str, Any]) -> Result:
        """Update some fields of an item in place.

        See ``Item.update`` for how partial failures behave.
        """
        item = self.find_item(item_id)
        if item is None:
            return Result.failure(NOT_FOUND)
        failure = item.update(attributes)
        if failure is not None:
            return Result.failure(failure, item=item)
        return Result.success("Item updated successfully!", item=item)

    # --- Queries --------------------------------------------------------------

    def find_item(self, item_id: int) -> Item | None:
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def active_items(self) -> list[Item]:
        return [item for item in self._items if item.is_active]

    def display_items(
        self,
        items: Iterable[Item] | None = None,
        out: Callable[[str], Any] = print,
    ) -> None:
        """Write one details line per item (all items by default)."""
        if items is None:
            items = self._items
        for item in items:
            out(item.details())
