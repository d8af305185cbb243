"""Fetching inventories page by page from the community web API."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import requests

from .inventory import Inventory, _bool, _int, _lookup, _str

__all__ = [
    "InventoryRequestError",
    "PartialInventory",
    "do_inventory_request",
    "get_full_inventory",
    "merge",
    "get_partial_own_inventory",
    "get_own_inventory",
]


class InventoryRequestError(Exception):
    """The inventory API reported a failure."""


@dataclass
class PartialInventory:
    """One page of an inventory as sent by the API."""

    success: bool = False
    error: str = ""
    inventory: Inventory = field(default_factory=Inventory)
    more: bool = False
    more_start: int = 0

    @classmethod
    def from_json(cls, data: Any) -> PartialInventory:
        more_start = _lookup(data, "more_start")
        return cls(
            success=_bool(_lookup(data, "Success")),
            error=_str(_lookup(data, "Error")),
            inventory=Inventory.from_json(data),
            more=_bool(_lookup(data, "More")),
            more_start=0 if more_start is False else _int(more_start),
        )


def do_inventory_request(session: requests.Session, url: str) -> PartialInventory:
    """GET ``url`` and decode the response as a partial inventory."""
    response = session.get(url)
    return PartialInventory.from_json(response.json())


def _check(page: PartialInventory) -> None:
    if not page.success:
        raise InventoryRequestError("GetFullInventory API call failed: " + page.error)


def get_full_inventory(
    get_first: Callable[[], PartialInventory],
    get_next: Callable[[int], PartialInventory],
) -> Inventory:
    """Fetch the first page and follow ``more_start`` until no pages remain."""
    latest = get_first()
    _check(latest)
    result = latest.inventory
    while latest.more:
        latest = get_next(latest.more_start)
        _check(latest)
        result = merge(result, latest.inventory)
    return result


def merge(*inventories: Inventory) -> Inventory:
    """Merge the inventories into the first one, which is modified and returned."""
    if not inventories:
        raise ValueError("merge needs at least one inventory")
    target, *others = inventories
    for other in others:
        target.items.update(other.items)
        target.descriptions.update(other.descriptions)
        target.currencies.update(other.currencies)
    return target


def get_partial_own_inventory(
    session: requests.Session, context_id: int, app_id: int, start: int | None = None
) -> PartialInventory:
    """Fetch one page of the logged-in user's tradable inventory."""
    url = f"http://steamcommunity.com/my/inventory/json/{app_id}/{context_id}?trading=1"
    if start is not None:
        url += f"&start={start}"
    return do_inventory_request(session, url)


def get_own_inventory(
    session: requests.Session, context_id: int, app_id: int
) -> Inventory:
    """Fetch every page of the logged-in user's tradable inventory."""
    return get_full_inventory(
        lambda: get_partial_own_inventory(session, context_id, app_id),
        lambda start: get_partial_own_inventory(session, context_id, app_id, start),
    )