"""Inventory data as returned by the community web API."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, TypeVar

from .jsont import parse_uint_bool

__all__ = [
    "GenericInventory",
    "Inventory",
    "Item",
    "Currency",
    "Description",
    "DescriptionLine",
    "Action",
    "AppInfo",
    "Tag",
]

_T = TypeVar("_T")


def _lookup(data: Any, key: str) -> Any:
    """Fetch ``key`` from a JSON object, matching names case-insensitively."""
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {data!r}")
    if key in data:
        return data[key]
    folded = key.casefold()
    for name, value in data.items():
        if name.casefold() == folded:
            return value
    return None


def _str(value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"expected a string, got {value!r}")
    return value


def _optional_str(value: Any) -> str | None:
    return None if value is None else _str(value)


def _int(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"expected an integer, got {value!r}")
    return value


def _string_int(value: Any) -> int:
    """Parse an integer that the JSON carries as a quoted string."""
    if value is None:
        return 0
    if not isinstance(value, str):
        raise ValueError(f"expected an integer in a string, got {value!r}")
    return int(value)


def _bool(value: Any) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"expected a boolean, got {value!r}")
    return value


def _object_map(value: Any, build: Callable[[Any], _T]) -> dict[str, _T | None]:
    """Build a map from a JSON object; an empty JSON array counts as empty."""
    if value is None or value == []:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"expected a JSON object, got {value!r}")
    return {key: None if item is None else build(item) for key, item in value.items()}


def _list(value: Any, build: Callable[[Any], _T]) -> list[_T]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"expected a JSON array, got {value!r}")
    return [build(item) for item in value]


@dataclass
class Item:
    id: int = 0
    class_id: int = 0
    instance_id: int = 0
    amount: int = 0
    pos: int = 0

    @classmethod
    def from_json(cls, data: Any) -> Item:
        return cls(
            id=_string_int(_lookup(data, "Id")),
            class_id=_string_int(_lookup(data, "ClassId")),
            instance_id=_string_int(_lookup(data, "InstanceId")),
            amount=_string_int(_lookup(data, "Amount")),
            pos=_int(_lookup(data, "Pos")),
        )


@dataclass
class Currency:
    id: int = 0
    class_id: int = 0
    is_currency: bool = False
    pos: int = 0

    @classmethod
    def from_json(cls, data: Any) -> Currency:
        return cls(
            id=_string_int(_lookup(data, "Id")),
            class_id=_string_int(_lookup(data, "ClassId")),
            is_currency=_bool(_lookup(data, "is_currency")),
            pos=_int(_lookup(data, "Pos")),
        )


@dataclass
class DescriptionLine:
    value: str = ""
    type: str | None = None  # "html" for HTML descriptions
    color: str | None = None


@dataclass
class Action:
    name: str = ""
    link: str = ""


@dataclass
class AppInfo:
    app_id: int = 0
    name: str = ""
    icon: str = ""
    link: str = ""


@dataclass
class Tag:
    internal_name: str = ""
    name: str = ""
    category: str = ""
    category_name: str = ""


def _description_line(data: Any) -> DescriptionLine:
    return DescriptionLine(
        value=_str(_lookup(data, "Value")),
        type=_optional_str(_lookup(data, "Type")),
        color=_optional_str(_lookup(data, "Color")),
    )


def _action(data: Any) -> Action:
    return Action(name=_str(_lookup(data, "Name")), link=_str(_lookup(data, "Link")))


def _app_info(data: Any) -> AppInfo:
    return AppInfo(
        app_id=_int(_lookup(data, "AppId")),
        name=_str(_lookup(data, "Name")),
        icon=_str(_lookup(data, "Icon")),
        link=_str(_lookup(data, "Link")),
    )


def _tag(data: Any) -> Tag:
    return Tag(
        internal_name=_str(_lookup(data, "InternalName")),
        name=_str(_lookup(data, "Name")),
        category=_str(_lookup(data, "Category")),
        category_name=_str(_lookup(data, "CategoryName")),
    )


def _string_map(value: Any) -> dict[str, str]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"expected a JSON object, got {value!r}")
    return {key: _str(item) for key, item in value.items()}


@dataclass
class Description:
    app_id: int = 0
    class_id: int = 0
    instance_id: int = 0
    icon_url: str = ""
    icon_url_large: str = ""
    icon_drag_url: str = ""
    name: str = ""
    market_name: str = ""
    market_hash_name: str = ""
    name_color: str = ""  # hex, for example "B2B2B2"
    background_color: str = ""
    type: str = ""
    tradable: bool = False
    marketable: bool = False
    commodity: bool = False
    market_tradable_restriction: int = 0
    descriptions: list[DescriptionLine] = field(default_factory=list)
    actions: list[Action] = field(default_factory=list)
    app_data: dict[str, str] = field(default_factory=dict)
    tags: list[Tag] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Any) -> Description:
        lines = _lookup(data, "Descriptions")
        return cls(
            app_id=_string_int(_lookup(data, "AppId")),
            class_id=_string_int(_lookup(data, "ClassId")),
            instance_id=_string_int(_lookup(data, "InstanceId")),
            icon_url=_str(_lookup(data, "icon_url")),
            icon_url_large=_str(_lookup(data, "icon_url_large")),
            icon_drag_url=_str(_lookup(data, "icon_drag_url")),
            name=_str(_lookup(data, "Name")),
            market_name=_str(_lookup(data, "market_name")),
            market_hash_name=_str(_lookup(data, "market_hash_name")),
            name_color=_str(_lookup(data, "name_color")),
            background_color=_str(_lookup(data, "background_color")),
            type=_str(_lookup(data, "Type")),
            tradable=parse_uint_bool(_lookup(data, "Tradable")),
            marketable=parse_uint_bool(_lookup(data, "Marketable")),
            commodity=parse_uint_bool(_lookup(data, "Commodity")),
            market_tradable_restriction=_string_int(
                _lookup(data, "market_tradable_restriction")
            ),
            descriptions=[] if lines == "" else _list(lines, _description_line),
            actions=_list(_lookup(data, "Actions"), _action),
            app_data=_string_map(_lookup(data, "AppData")),
            tags=_list(_lookup(data, "Tags"), _tag),
        )


@dataclass
class Inventory:
    """Items keyed by asset id and descriptions keyed by ``"<class>_<instance>"``."""

    items: dict[str, Item | None] = field(default_factory=dict)
    currencies: dict[str, Currency | None] = field(default_factory=dict)
    descriptions: dict[str, Description | None] = field(default_factory=dict)
    app_info: AppInfo | None = None

    @classmethod
    def from_json(cls, data: Any) -> Inventory:
        app_info = _lookup(data, "rgAppInfo")
        return cls(
            items=_object_map(_lookup(data, "rgInventory"), Item.from_json),
            currencies=_object_map(_lookup(data, "rgCurrency"), Currency.from_json),
            descriptions=_object_map(
                _lookup(data, "rgDescriptions"), Description.from_json
            ),
            app_info=None if app_info is None else _app_info(app_info),
        )

    def get_item(self, asset_id: int) -> Item | None:
        try:
            return self.items[str(asset_id)]
        except KeyError:
            raise KeyError("item not found") from None

    def get_description(self, class_id: int, instance_id: int) -> Description | None:
        try:
            return self.descriptions[f"{class_id}_{instance_id}"]
        except KeyError:
            raise KeyError("description not found") from None


@dataclass
class GenericInventory:
    """Inventories grouped by app id and then by context id."""

    inventories: dict[int, dict[int, Inventory]] = field(default_factory=dict)

    def get(self, app_id: int, context_id: int) -> Inventory:
        contexts = self.inventories.get(app_id)
        if contexts is None:
            raise KeyError("inventory for specified appId not found")
        inventory = contexts.get(context_id)
        if inventory is None:
            raise KeyError("inventory for specified contextId not found")
        return inventory

    def add(self, app_id: int, context_id: int, inventory: Inventory) -> None:
        self.inventories.setdefault(app_id, {})[context_id] = inventory