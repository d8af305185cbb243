"""Address parsing and small HTTP helpers."""

from __future__ import annotations

import ipaddress
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from urllib.parse import quote_plus

import requests

__all__ = ["PortAddr", "parse_port_addr", "new_post_form", "to_url_values"]

_PORT_RE = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class PortAddr:
    """An IP address with a port, usable for either TCP or UDP."""

    ip: ipaddress.IPv4Address | ipaddress.IPv6Address
    port: int

    @classmethod
    def parse(cls, addr: str) -> PortAddr | None:
        """Parse ``"ip:port"``, for example ``"209.197.29.196:27017"``.

        Returns None if the string is not valid.
        """
        parts = addr.split(":")
        if len(parts) != 2:
            return None
        host, port_text = parts
        try:
            ip = ipaddress.ip_address(host)
        except ValueError:
            return None
        if not _PORT_RE.fullmatch(port_text):
            return None
        port = int(port_text)
        if port > 0xFFFF:
            return None
        return cls(ip, port)

    def to_tcp_addr(self) -> tuple[str, int]:
        """Return a ``(host, port)`` pair for a TCP socket."""
        return (str(self.ip), self.port)

    def to_udp_addr(self) -> tuple[str, int]:
        """Return a ``(host, port)`` pair for a UDP socket."""
        return (str(self.ip), self.port)

    def __str__(self) -> str:
        return f"{self.ip}:{self.port}"


def parse_port_addr(addr: str) -> PortAddr | None:
    """Parse ``"ip:port"``; returns None if the string is not valid."""
    return PortAddr.parse(addr)


def _encode_values(data: Mapping[str, str | Sequence[str]]) -> str:
    pairs = []
    for key in sorted(data):
        values = data[key]
        if isinstance(values, str):
            values = [values]
        pairs.extend(f"{quote_plus(key)}={quote_plus(value)}" for value in values)
    return "&".join(pairs)


def new_post_form(
    url: str, data: Mapping[str, str | Sequence[str]]
) -> requests.PreparedRequest:
    """Build, without sending, a form-encoded POST request."""
    return requests.Request(
        "POST",
        url,
        data=_encode_values(data),
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    ).prepare()


def to_url_values(mapping: Mapping[str, str]) -> dict[str, list[str]]:
    """Turn a flat mapping into form values with one value per key."""
    return {key: [value] for key, value in mapping.items()}