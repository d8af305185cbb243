"""Basic protocol types shared by messages and packets."""

from __future__ import annotations

from typing import NewType

__all__ = [
    "JobId",
    "NO_JOB_ID",
    "TargetJobName",
    "Realm",
    "EErrorMessage",
    "DEFAULT_AVATAR",
    "valid_avatar",
]

NO_JOB_ID = 2**64 - 1

TargetJobName = NewType("TargetJobName", str)
Realm = NewType("Realm", int)
EErrorMessage = NewType("EErrorMessage", str)

DEFAULT_AVATAR = "fef49e7fa7e1997310d705b2a6158ff8dc1cdfeb"

_EMPTY_AVATAR = "0" * 40


class JobId(int):
    """Identifier of a job; the largest 64-bit value means no job."""

    def __str__(self) -> str:
        if self == NO_JOB_ID:
            return "(none)"
        return int.__str__(self)

    def __repr__(self) -> str:
        return f"JobId({int.__repr__(self)})"


def valid_avatar(avatar: bytes) -> bool:
    """Tell whether ``avatar`` is a 20-byte hash that is not all zeros."""
    text = bytes(avatar).hex()
    return not (text == _EMPTY_AVATAR or len(text) != 40)