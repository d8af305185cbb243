"""Apps and contexts listed on a profile's inventory page."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from typing import Any

import requests

from .inventory import _int, _lookup, _str, _string_int

__all__ = [
    "InventoryApps",
    "InventoryApp",
    "Context",
    "parse_inventory_apps",
    "get_inventory_apps",
]

_APP_CONTEXT_RE = re.compile(r"var g_rgAppContextData = (.*?);")


def _object(value: Any) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"expected a JSON object, got {value!r}")
    return value


@dataclass
class Context:
    context_id: int = 0
    asset_count: int = 0
    name: str = ""


def _context(data: Any) -> Context:
    return Context(
        context_id=_string_int(_lookup(data, "id")),
        asset_count=_int(_lookup(data, "asset_count")),
        name=_str(_lookup(data, "Name")),
    )


@dataclass
class InventoryApp:
    app_id: int = 0
    name: str = ""
    icon: str = ""
    link: str = ""
    asset_count: int = 0
    inventory_logo: str = ""
    trade_permissions: str = ""
    contexts: dict[str, Context] = field(default_factory=dict)

    def get_context(self, context_id: int) -> Context:
        try:
            return self.contexts[str(context_id)]
        except KeyError:
            raise KeyError("context not found") from None


def _inventory_app(data: Any) -> InventoryApp:
    return InventoryApp(
        app_id=_int(_lookup(data, "AppId")),
        name=_str(_lookup(data, "Name")),
        icon=_str(_lookup(data, "Icon")),
        link=_str(_lookup(data, "Link")),
        asset_count=_int(_lookup(data, "asset_count")),
        inventory_logo=_str(_lookup(data, "inventory_logo")),
        trade_permissions=_str(_lookup(data, "trade_permissions")),
        contexts={
            key: _context(value)
            for key, value in _object(_lookup(data, "rgContexts")).items()
        },
    )


@dataclass
class InventoryApps:
    """Inventory apps keyed by app id."""

    apps: dict[str, InventoryApp] = field(default_factory=dict)

    def get(self, app_id: int) -> InventoryApp:
        try:
            return self.apps[str(app_id)]
        except KeyError:
            raise KeyError("inventory app not found") from None

    @classmethod
    def from_json(cls, data: Any) -> InventoryApps:
        return cls({key: _inventory_app(value) for key, value in _object(data).items()})


def parse_inventory_apps(page: str | bytes) -> InventoryApps:
    """Extract the app context data embedded in an inventory page."""
    text = page.decode("utf-8", errors="replace") if isinstance(page, bytes) else page
    match = _APP_CONTEXT_RE.search(text)
    if match is None:
        raise ValueError("profile inventory not found in steam response")
    return InventoryApps.from_json(json.loads(match.group(1)))


def get_inventory_apps(session: requests.Session, steam_id: int | str) -> InventoryApps:
    """Fetch a profile's inventory page and parse its app list."""
    response = session.get(f"http://steamcommunity.com/profiles/{steam_id}/inventory/")
    return parse_inventory_apps(response.text)