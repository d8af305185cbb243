import pytest
import requests
import responses
from responses import matchers

from steamwire.inventory import Inventory, Item
from steamwire.inventory_fetch import (
    InventoryRequestError,
    PartialInventory,
    do_inventory_request,
    get_full_inventory,
    get_own_inventory,
    get_partial_own_inventory,
    merge,
)

BASE = "http://steamcommunity.com/my/inventory/json/440/2"


def _page(asset_ids, more=False, more_start=False, success=True, error=""):
    return {
        "success": success,
        "Error": error,
        "rgInventory": {
            str(a): {"id": str(a), "classid": "1", "instanceid": "0", "amount": "1", "pos": 0}
            for a in asset_ids
        },
        "rgCurrency": [],
        "rgDescriptions": {},
        "more": more,
        "more_start": more_start,
    }


def test_more_start_false_is_zero():
    page = PartialInventory.from_json(_page([1], more_start=False))
    assert page.more_start == 0
    assert page.success is True
    assert set(page.inventory.items) == {"1"}


def test_more_start_true_rejected():
    with pytest.raises(ValueError):
        PartialInventory.from_json(_page([1], more_start=True))


def test_merge_modifies_first():
    first = Inventory(items={"1": Item(id=1)})
    second = Inventory(items={"2": Item(id=2)})
    result = merge(first, second)
    assert result is first
    assert set(first.items) == {"1", "2"}


def test_merge_requires_inventory():
    with pytest.raises(ValueError):
        merge()


def test_full_inventory_follows_pages():
    pages = {
        5: PartialInventory.from_json(_page([6, 7], more=True, more_start=7)),
        7: PartialInventory.from_json(_page([8])),
    }
    starts = []

    def get_next(start):
        starts.append(start)
        return pages[start]

    result = get_full_inventory(
        lambda: PartialInventory.from_json(_page([1, 2], more=True, more_start=5)),
        get_next,
    )
    assert starts == [5, 7]
    assert set(result.items) == {"1", "2", "6", "7", "8"}


def test_full_inventory_first_failure():
    with pytest.raises(InventoryRequestError, match="GetFullInventory API call failed: boom"):
        get_full_inventory(
            lambda: PartialInventory.from_json(_page([], success=False, error="boom")),
            lambda start: pytest.fail("should not fetch more"),
        )


def test_full_inventory_next_failure():
    with pytest.raises(InventoryRequestError, match="later"):
        get_full_inventory(
            lambda: PartialInventory.from_json(_page([1], more=True, more_start=1)),
            lambda start: PartialInventory.from_json(
                _page([], success=False, error="later")
            ),
        )


def test_do_inventory_request():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, "http://example.com/inv", json=_page([3]))
        page = do_inventory_request(requests.Session(), "http://example.com/inv")
    assert set(page.inventory.items) == {"3"}


def test_partial_own_inventory_with_start():
    with responses.RequestsMock() as rsps:
        rsps.add(
            responses.GET,
            BASE,
            json=_page([4]),
            match=[matchers.query_param_matcher({"trading": "1", "start": "10"})],
        )
        page = get_partial_own_inventory(requests.Session(), 2, 440, 10)
    assert set(page.inventory.items) == {"4"}


def test_own_inventory_all_pages():
    with responses.RequestsMock() as rsps:
        rsps.add(
            responses.GET,
            BASE,
            json=_page([1], more=True, more_start=1),
            match=[matchers.query_param_matcher({"trading": "1"})],
        )
        rsps.add(
            responses.GET,
            BASE,
            json=_page([2]),
            match=[matchers.query_param_matcher({"trading": "1", "start": "1"})],
        )
        inventory = get_own_inventory(requests.Session(), 2, 440)
    assert set(inventory.items) == {"1", "2"}