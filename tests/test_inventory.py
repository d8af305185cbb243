import pytest

from steamwire.inventory import Description, GenericInventory, Inventory, Item

SAMPLE = {
    "rgInventory": {
        "111": {"id": "111", "classid": "222", "instanceid": "0", "amount": "1", "pos": 1}
    },
    "rgCurrency": [],
    "rgDescriptions": {
        "222_0": {
            "appid": "440",
            "classid": "222",
            "instanceid": "0",
            "icon_url": "icon",
            "name": "Key",
            "market_name": "Market Key",
            "market_hash_name": "Hash Key",
            "name_color": "B2B2B2",
            "background_color": "3C352E",
            "type": "Tool",
            "tradable": 1,
            "marketable": 0,
            "commodity": 1,
            "market_tradable_restriction": "7",
            "descriptions": "",
            "actions": [{"name": "Inspect", "link": "steam://inspect"}],
            "AppData": {"def_index": "5021"},
            "tags": [
                {
                    "InternalName": "tool",
                    "name": "Tool",
                    "category": "Type",
                    "CategoryName": "Type",
                }
            ],
        }
    },
    "rgAppInfo": {"appid": 440, "name": "Game", "icon": "i", "link": "l"},
}


def test_items_parsed():
    inv = Inventory.from_json(SAMPLE)
    item = inv.get_item(111)
    assert item == Item(id=111, class_id=222, instance_id=0, amount=1, pos=1)


def test_missing_item_raises():
    inv = Inventory.from_json(SAMPLE)
    with pytest.raises(KeyError, match="item not found"):
        inv.get_item(999)


def test_empty_array_currencies_become_empty_map():
    inv = Inventory.from_json(SAMPLE)
    assert inv.currencies == {}


def test_description_parsed():
    inv = Inventory.from_json(SAMPLE)
    desc = inv.get_description(222, 0)
    assert desc.app_id == 440
    assert desc.name == "Key"
    assert desc.market_hash_name == "Hash Key"
    assert desc.tradable is True
    assert desc.marketable is False
    assert desc.commodity is True
    assert desc.market_tradable_restriction == 7
    assert desc.descriptions == []
    assert desc.actions[0].link == "steam://inspect"
    assert desc.app_data == {"def_index": "5021"}
    assert desc.tags[0].internal_name == "tool"
    assert desc.tags[0].category_name == "Type"


def test_missing_description_raises():
    inv = Inventory.from_json(SAMPLE)
    with pytest.raises(KeyError, match="description not found"):
        inv.get_description(1, 2)


def test_app_info_parsed():
    inv = Inventory.from_json(SAMPLE)
    assert inv.app_info.app_id == 440
    assert inv.app_info.name == "Game"


def test_absent_sections_are_empty():
    inv = Inventory.from_json({})
    assert inv.items == {}
    assert inv.descriptions == {}
    assert inv.app_info is None


def test_description_lines_list():
    desc = Description.from_json(
        {"descriptions": [{"value": "Level 1", "type": "html", "color": "ffffff"}, {"value": "x"}]}
    )
    assert [line.value for line in desc.descriptions] == ["Level 1", "x"]
    assert desc.descriptions[0].type == "html"
    assert desc.descriptions[1].color is None


def test_unquoted_number_for_string_field_rejected():
    with pytest.raises(ValueError):
        Item.from_json({"id": 5})


def test_generic_inventory_round_trip():
    generic = GenericInventory()
    inv = Inventory()
    generic.add(440, 2, inv)
    assert generic.get(440, 2) is inv


def test_generic_inventory_missing_app():
    generic = GenericInventory()
    with pytest.raises(KeyError, match="appId"):
        generic.get(440, 2)


def test_generic_inventory_missing_context():
    generic = GenericInventory()
    generic.add(440, 2, Inventory())
    with pytest.raises(KeyError, match="contextId"):
        generic.get(440, 3)