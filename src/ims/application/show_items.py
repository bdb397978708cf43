"""Application service: Show Items use case (query)."""

from __future__ import annotations

from ims.application.dto import ItemDTO
from ims.domain.model.inventory import Inventory


class ShowItemsHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(self, active_only: bool = False) -> list[ItemDTO]:
        items = self._inventory.active_items() if active_only else self._inventory.items
        return [ItemDTO.from_item(item) for item in items]
