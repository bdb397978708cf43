"""Application service: Add Item use case."""

from __future__ import annotations

import structlog

from ims.domain.model.inventory import Inventory
from ims.domain.model.item import ItemStatus, Price
from ims.domain.results import Result

logger = structlog.get_logger(__name__)


class AddItemHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(
        self,
        name: str,
        quantity: int,
        price: Price,
        status: str | ItemStatus,
    ) -> Result:
        """Add a new item; a rejected item leaves the inventory unchanged."""
        result = self._inventory.add_item(name, quantity, price, status)
        if result.ok:
            logger.info(
                "item_added",
                item_id=result.item.id,
                name=result.item.name,
                size=len(self._inventory),
            )
        else:
            logger.warning("item_rejected", reason=result.error.value, detail=result.message)
        return result
