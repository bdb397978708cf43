"""Application service: Edit Item use case."""

from __future__ import annotations

import structlog

from ims.application.dto import ItemChanges
from ims.domain.model.inventory import Inventory
from ims.domain.results import ErrorKind, Result

logger = structlog.get_logger(__name__)


class EditItemHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(self, item_id: int, changes: ItemChanges) -> Result:
        """Edit the given fields of an item, leaving the rest untouched.

        Fields are applied in the order name, quantity, price, status. If
        one is rejected, the ones before it stay applied.
        """
        attributes = changes.as_attributes()
        result = self._inventory.edit_item(item_id, attributes)
        if result.ok:
            logger.info("item_updated", item_id=item_id, fields=sorted(attributes))
        elif result.error == ErrorKind.NOT_FOUND:
            logger.warning("item_not_found", item_id=item_id, action="edit")
        else:
            logger.warning(
                "item_update_rejected",
                item_id=item_id,
                reason=result.error.value,
                detail=result.message,
            )
        return result
