"""Interactive prompts that re-ask until the input is valid.

Raw strings are coerced to the expected type and then checked with the
domain predicates. A rejected value raises ``click.BadParameter``, which
makes ``click.prompt`` print the message and ask again.
"""

from __future__ import annotations

from typing import Any, Callable

import click

from ims.domain.model.inventory import Inventory
from ims.domain.model.item import (
    validate_name,
    validate_price,
    validate_quantity,
    validate_status,
)
from ims.domain.results import Failure

KEEP_CURRENT = " (leave blank to keep current)"


def parse_int(raw: str) -> int | str:
    """Coerce to int, handing back the raw string when it is not one."""
    try:
        return int(raw.strip())
    except ValueError:
        return raw


def _parse_price(raw: str) -> float | str:
    try:
        return float(raw.strip())
    except ValueError:
        return raw


def _parse_status(raw: str) -> str:
    return raw.strip().lower()


def _checked(
    predicate: Callable[[Any], Failure | None],
    convert: Callable[[str], Any],
    optional: bool,
) -> Callable[[str], Any]:
    def value_proc(raw: str) -> Any:
        if optional and not raw.strip():
            return None
        value = convert(raw)
        failure = predicate(value)
        if failure is not None:
            raise click.BadParameter(failure.message)
        return value

    return value_proc


def _prompt(text: str, value_proc: Callable[[str], Any], optional: bool) -> Any:
    if optional:
        return click.prompt(text + KEEP_CURRENT, default="", show_default=False, value_proc=value_proc)
    return click.prompt(text, value_proc=value_proc)


def prompt_name(optional: bool = False) -> str | None:
    return _prompt("Enter item name", _checked(validate_name, str, optional), optional)


def prompt_quantity(optional: bool = False) -> int | None:
    return _prompt(
        "Enter item quantity", _checked(validate_quantity, parse_int, optional), optional
    )


def prompt_price(optional: bool = False) -> float | None:
    return _prompt("Enter item price", _checked(validate_price, _parse_price, optional), optional)


def prompt_status(optional: bool = False) -> str | None:
    return _prompt(
        "Enter item status", _checked(validate_status, _parse_status, optional), optional
    )


def prompt_existing_id(inventory: Inventory, text: str) -> int:
    """Ask for the id of an item that is currently in the inventory."""

    def value_proc(raw: str) -> int:
        item_id = parse_int(raw)
        if not isinstance(item_id, int) or inventory.find_item(item_id) is None:
            raise click.BadParameter("Item not found.")
        return item_id

    return click.prompt(text, value_proc=value_proc)
