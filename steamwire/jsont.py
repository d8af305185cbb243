"""Helpers for loosely typed JSON values."""

from __future__ import annotations

from typing import Any

__all__ = ["parse_uint_bool"]

_UINT64_MAX = 2**64 - 1


def parse_uint_bool(value: Any) -> bool:
    """Interpret a decoded JSON unsigned number as a boolean (non-zero is true).

    A JSON null counts as zero. Anything that is not an unsigned integer
    raises ValueError.
    """
    if value is None:
        return False
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"cannot interpret {value!r} as an unsigned integer")
    if value < 0 or value > _UINT64_MAX:
        raise ValueError(f"{value} is out of range for an unsigned integer")
    return value != 0