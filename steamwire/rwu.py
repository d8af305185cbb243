"""Little-endian readers and writers for binary protocol fields."""

from __future__ import annotations

import struct
from typing import BinaryIO

__all__ = [
    "read_bool",
    "read_uint8",
    "read_uint16",
    "read_uint32",
    "read_uint64",
    "read_int8",
    "read_int16",
    "read_int32",
    "read_int64",
    "read_string",
    "read_bytes",
    "write_bool",
]


def _read_exact(r: BinaryIO, size: int) -> bytes:
    """Read exactly ``size`` bytes or raise EOFError."""
    chunks = []
    remaining = size
    while remaining > 0:
        chunk = r.read(remaining)
        if not chunk:
            got = size - remaining
            if got == 0:
                raise EOFError("end of stream")
            raise EOFError(f"unexpected end of stream: wanted {size} bytes, got {got}")
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def _read_struct(r: BinaryIO, fmt: str) -> int:
    codec = struct.Struct(fmt)
    (value,) = codec.unpack(_read_exact(r, codec.size))
    return value


def read_bool(r: BinaryIO) -> bool:
    """Read one byte; any non-zero value is true."""
    return _read_struct(r, "<B") != 0


def read_uint8(r: BinaryIO) -> int:
    return _read_struct(r, "<B")


def read_uint16(r: BinaryIO) -> int:
    return _read_struct(r, "<H")


def read_uint32(r: BinaryIO) -> int:
    return _read_struct(r, "<I")


def read_uint64(r: BinaryIO) -> int:
    return _read_struct(r, "<Q")


def read_int8(r: BinaryIO) -> int:
    return _read_struct(r, "<b")


def read_int16(r: BinaryIO) -> int:
    return _read_struct(r, "<h")


def read_int32(r: BinaryIO) -> int:
    return _read_struct(r, "<i")


def read_int64(r: BinaryIO) -> int:
    return _read_struct(r, "<q")


def read_string(r: BinaryIO) -> str:
    """Read a NUL-terminated string; the terminator is consumed but not returned."""
    collected = bytearray()
    while True:
        byte = r.read(1)
        if not byte:
            raise EOFError("end of stream before string terminator")
        if byte == b"\x00":
            break
        collected += byte
    return collected.decode("utf-8", errors="replace")


def read_bytes(r: BinaryIO, num: int) -> bytes:
    """Read exactly ``num`` bytes."""
    if num < 0:
        raise ValueError(f"cannot read a negative number of bytes: {num}")
    if num == 0:
        return b""
    return _read_exact(r, num)


def write_bool(w: BinaryIO, value: bool) -> None:
    """Write a boolean as a single 0 or 1 byte."""
    w.write(b"\x01" if value else b"\x00")