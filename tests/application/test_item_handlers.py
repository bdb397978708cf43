"""Integration tests for the item use-case handlers."""

from structlog.testing import capture_logs

from ims.application.add_item import AddItemHandler
from ims.application.dto import ItemChanges, ItemDTO
from ims.application.edit_item import EditItemHandler
from ims.application.remove_item import RemoveItemHandler
from ims.application.show_items import ShowItemsHandler
from ims.domain.model.inventory import Inventory
from ims.domain.model.item import ItemStatus
from ims.domain.results import ErrorKind
from tests.fakes import make_inventory


class TestAddItemHandler:

    def test_adds_and_logs(self):
        inv = Inventory()
        with capture_logs() as logs:
            result = AddItemHandler(inv).handle("Widget", 10, 2.5, "active")

        assert result.ok
        assert len(inv) == 1
        assert logs == [
            {"event": "item_added", "log_level": "info", "item_id": 1, "name": "Widget", "size": 1}
        ]

    def test_rejection_logged_as_warning(self):
        inv = Inventory()
        with capture_logs() as logs:
            result = AddItemHandler(inv).handle("Widget", 10, -1, "active")

        assert result.error == ErrorKind.NEGATIVE_PRICE
        assert len(inv) == 0
        assert logs[0]["event"] == "item_rejected"
        assert logs[0]["log_level"] == "warning"
        assert logs[0]["reason"] == "NEGATIVE_PRICE"


class TestRemoveItemHandler:

    def test_removes(self):
        inv = make_inventory()
        with capture_logs() as logs:
            result = RemoveItemHandler(inv).handle(3)
        assert result.ok
        assert inv.find_item(3) is None
        assert logs[0]["event"] == "item_removed"
        assert logs[0]["size"] == 2

    def test_missing_item(self):
        inv = make_inventory()
        with capture_logs() as logs:
            result = RemoveItemHandler(inv).handle(11)
        assert result.error == ErrorKind.NOT_FOUND
        assert logs[0]["event"] == "item_not_found"
        assert logs[0]["action"] == "remove"


class TestEditItemHandler:

    def test_applies_only_set_fields(self):
        inv = make_inventory()
        with capture_logs() as logs:
            result = EditItemHandler(inv).handle(2, ItemChanges(quantity=8, status="ACTIVE"))

        assert result.ok
        item = inv.find_item(2)
        assert item.quantity == 8
        assert item.status == ItemStatus.ACTIVE
        assert item.name == "Gadget"
        assert item.price == 12.0
        assert logs[0]["fields"] == ["quantity", "status"]

    def test_rejected_value(self):
        inv = make_inventory()
        with capture_logs() as logs:
            result = EditItemHandler(inv).handle(2, ItemChanges(status="lost"))
        assert result.error == ErrorKind.INVALID_STATUS
        assert inv.find_item(2).status == ItemStatus.INACTIVE
        assert logs[0]["event"] == "item_update_rejected"

    def test_missing_item(self):
        with capture_logs() as logs:
            result = EditItemHandler(make_inventory()).handle(9, ItemChanges(price=1))
        assert result.error == ErrorKind.NOT_FOUND
        assert logs[0]["event"] == "item_not_found"
        assert logs[0]["action"] == "edit"


class TestItemChanges:

    def test_unset_fields_are_dropped(self):
        assert ItemChanges(price=0).as_attributes() == {"price": 0}

    def test_empty(self):
        assert ItemChanges().is_empty
        assert not ItemChanges(name="Bolt").is_empty


class TestShowItemsHandler:

    def test_all_items(self):
        dtos = ShowItemsHandler(make_inventory()).handle()
        assert [dto.id for dto in dtos] == [1, 2, 3]
        assert dtos[1] == ItemDTO(
            id=2,
            name="Gadget",
            quantity=3,
            price=12.0,
            status="inactive",
            details="ID: 2, Name: Gadget, Quantity: 3, Price: 12.0, Status: inactive",
        )

    def test_active_only(self):
        dtos = ShowItemsHandler(make_inventory()).handle(active_only=True)
        assert [dto.name for dto in dtos] == ["Widget", "Bolt"]
        assert all(dto.status == "active" for dto in dtos)
