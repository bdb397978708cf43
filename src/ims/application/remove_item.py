"""Application service: Remove Item use case."""

from __future__ import annotations

import structlog

from ims.domain.model.inventory import Inventory
from ims.domain.results import Result

logger = structlog.get_logger(__name__)


class RemoveItemHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(self, item_id: int) -> Result:
        result = self._inventory.remove_item(item_id)
        if result.ok:
            logger.info("item_removed", item_id=item_id, size=len(self._inventory))
        else:
            logger.warning("item_not_found", item_id=item_id, action="remove")
        return result
