"""The numbered text menu driving the inventory."""

from __future__ import annotations

import click

from ims.application.add_item import AddItemHandler
from ims.application.dto import ItemChanges, ItemDTO
from ims.application.edit_item import EditItemHandler
from ims.application.remove_item import RemoveItemHandler
from ims.application.show_items import ShowItemsHandler
from ims.domain.model.inventory import Inventory
from ims.infrastructure.cli.prompts import (
    parse_int,
    prompt_existing_id,
    prompt_name,
    prompt_price,
    prompt_quantity,
    prompt_status,
)

MENU_ENTRIES = (
    "Add Item",
    "Remove Item",
    "Update Item",
    "View Inventory",
    "View Active Items",
    "Exit",
)
EXIT_ACTION = len(MENU_ENTRIES)


class InventoryMenu:
    """Reads an action number, runs it, and repeats until Exit."""

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory
        self._add = AddItemHandler(inventory)
        self._remove = RemoveItemHandler(inventory)
        self._edit = EditItemHandler(inventory)
        self._show = ShowItemsHandler(inventory)
        self._actions = {
            1: self.add_item,
            2: self.remove_item,
            3: self.update_item,
            4: self.view_inventory,
            5: self.view_active_items,
        }

    def run(self) -> None:
        while True:
            self._display_menu()
            action = parse_int(click.prompt("Enter the action number"))
            if action == EXIT_ACTION:
                click.echo("Exiting...")
                return
            handler = self._actions.get(action)
            if handler is None:
                click.echo("Invalid action, please try again.")
                continue
            handler()

    # --- Actions --------------------------------------------------------------

    def add_item(self) -> None:
        name = prompt_name()
        quantity = prompt_quantity()
        price = prompt_price()
        status = prompt_status()
        result = self._add.handle(name, quantity, price, status)
        click.echo(result.message)

    def remove_item(self) -> None:
        if not self._list_available():
            return
        item_id = prompt_existing_id(self._inventory, "Enter the ID of the item to remove")
        click.echo(self._remove.handle(item_id).message)

    def update_item(self) -> None:
        if not self._list_available():
            return
        item_id = prompt_existing_id(self._inventory, "Enter the ID of the item to update")
        changes = ItemChanges(
            name=prompt_name(optional=True),
            quantity=prompt_quantity(optional=True),
            price=prompt_price(optional=True),
            status=prompt_status(optional=True),
        )
        if changes.is_empty:
            click.echo("Nothing to update.")
            return
        click.echo(self._edit.handle(item_id, changes).message)

    def view_inventory(self) -> None:
        items = self._show.handle()
        click.echo(f"You have {len(items)} items in the inventory:")
        _echo_items(items)

    def view_active_items(self) -> None:
        click.echo("Active Items:")
        _echo_items(self._show.handle(active_only=True))

    # --- Internal helpers -----------------------------------------------------

    def _display_menu(self) -> None:
        click.echo("Available inventory actions:")
        for number, entry in enumerate(MENU_ENTRIES, start=1):
            click.echo(f"{number}. {entry}")

    def _list_available(self) -> bool:
        if not len(self._inventory):
            click.echo("No items in the inventory.")
            return False
        click.echo("Available items:")
        self._inventory.display_items(out=click.echo)
        return True


def _echo_items(items: list[ItemDTO]) -> None:
    for item in items:
        click.echo(item.details)
