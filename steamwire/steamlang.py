"""Message-type masks and the base class for fixed-layout binary structures."""

from __future__ import annotations

import io
import struct
from typing import BinaryIO, ClassVar, TypeVar

from .rwu import read_bytes

__all__ = [
    "PROTO_MASK",
    "EMSG_MASK",
    "new_emsg",
    "is_proto",
    "BinaryStruct",
]

PROTO_MASK = 0x80000000
EMSG_MASK = ~PROTO_MASK & 0xFFFFFFFF

_T = TypeVar("_T", bound="BinaryStruct")


def new_emsg(e: int) -> int:
    """Return the message type of a raw value with the protobuf flag removed."""
    return e & EMSG_MASK


def is_proto(e: int) -> bool:
    """Tell whether a raw message type carries the protobuf flag."""
    return e & PROTO_MASK != 0


class BinaryStruct:
    """A structure written field by field in little-endian order.

    Subclasses list their fields in ``_layout`` as ``(attribute, format)``
    pairs, where ``format`` is a :mod:`struct` format code without byte
    order. Booleans use ``"?"``: written as 0 or 1, read as non-zero.
    """

    _layout: ClassVar[tuple[tuple[str, str], ...]] = ()
    _codecs: ClassVar[tuple[tuple[str, struct.Struct], ...]] = ()

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        cls._codecs = tuple(
            (name, struct.Struct("<" + fmt)) for name, fmt in cls._layout
        )

    def serialize(self, w: BinaryIO) -> None:
        """Write every field to ``w``."""
        for name, codec in self._codecs:
            w.write(codec.pack(getattr(self, name)))

    def deserialize(self, r: BinaryIO) -> None:
        """Read every field from ``r``; raises EOFError if the data runs out."""
        for name, codec in self._codecs:
            (value,) = codec.unpack(read_bytes(r, codec.size))
            setattr(self, name, value)

    def to_bytes(self) -> bytes:
        """Return the serialized form."""
        buffer = io.BytesIO()
        self.serialize(buffer)
        return buffer.getvalue()

    @classmethod
    def from_bytes(cls: type[_T], data: bytes) -> _T:
        """Build an instance from its serialized form."""
        obj = cls()
        obj.deserialize(io.BytesIO(data))
        return obj