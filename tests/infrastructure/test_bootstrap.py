"""Tests for the composition root."""

import pytest
import structlog

from ims.infrastructure.bootstrap import configure_logging, inventory


class TestConfigureLogging:

    def test_lines_go_to_stderr(self, capsys):
        configure_logging("info")
        structlog.get_logger("ims.test").info("item_added", item_id=3)
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "item_added" in captured.err
        assert "item_id=3" in captured.err

    def test_lines_below_level_are_dropped(self, capsys):
        configure_logging("WARNING")
        structlog.get_logger("ims.test").info("item_added")
        assert capsys.readouterr().err == ""

    def test_unknown_level_rejected(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            configure_logging("chatty")


class TestInventoryFactory:

    def test_empty_with_default_ids(self):
        inv = inventory()
        assert len(inv) == 0
        assert inv.add_item("Widget", 1, 1, "active").item.id == 1

    def test_first_id(self):
        assert inventory(first_id=40).add_item("Widget", 1, 1, "active").item.id == 40
