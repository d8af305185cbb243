"""Packet and message headers of the Steam wire protocol."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import BinaryIO

from .rwu import read_bytes, read_int32, read_uint32
from .steamlang import PROTO_MASK, BinaryStruct, new_emsg

__all__ = [
    "UDP_HEADER_MAGIC",
    "CHALLENGE_MASK",
    "NO_JOB",
    "UdpHeader",
    "ChallengeData",
    "ConnectData",
    "Accept",
    "Datagram",
    "Disconnect",
    "MsgHdr",
    "ExtendedClientMsgHdr",
    "MsgHdrProtoBuf",
    "MsgGCHdrProtoBuf",
    "MsgGCHdr",
]

UDP_HEADER_MAGIC = 0x31305356
CHALLENGE_MASK = 0xA426DF2B
NO_JOB = 2**64 - 1

_PROTO_PREFIX = struct.Struct("<Ii")


@dataclass
class UdpHeader(BinaryStruct):
    magic: int = UDP_HEADER_MAGIC
    payload_size: int = 0
    packet_type: int = 0
    flags: int = 0
    source_conn_id: int = 512
    dest_conn_id: int = 0
    seq_this: int = 0
    seq_ack: int = 0
    packets_in_msg: int = 0
    msg_start_seq: int = 0
    msg_size: int = 0

    _layout = (
        ("magic", "I"),
        ("payload_size", "H"),
        ("packet_type", "B"),
        ("flags", "B"),
        ("source_conn_id", "I"),
        ("dest_conn_id", "I"),
        ("seq_this", "I"),
        ("seq_ack", "I"),
        ("packets_in_msg", "I"),
        ("msg_start_seq", "I"),
        ("msg_size", "I"),
    )


@dataclass
class ChallengeData(BinaryStruct):
    challenge_value: int = 0
    server_load: int = 0

    _layout = (("challenge_value", "I"), ("server_load", "I"))


@dataclass
class ConnectData(BinaryStruct):
    challenge_value: int = 0

    _layout = (("challenge_value", "I"),)


@dataclass
class Accept(BinaryStruct):
    pass


@dataclass
class Datagram(BinaryStruct):
    pass


@dataclass
class Disconnect(BinaryStruct):
    pass


@dataclass
class MsgHdr(BinaryStruct):
    """Header of messages exchanged before logging on."""

    msg: int = 0
    target_job_id: int = NO_JOB
    source_job_id: int = NO_JOB

    _layout = (("msg", "i"), ("target_job_id", "Q"), ("source_job_id", "Q"))


@dataclass
class ExtendedClientMsgHdr(BinaryStruct):
    """Header of non-protobuf client messages carrying session data."""

    msg: int = 0
    header_size: int = 36
    header_version: int = 2
    target_job_id: int = NO_JOB
    source_job_id: int = NO_JOB
    header_canary: int = 239
    steam_id: int = 0
    session_id: int = 0

    _layout = (
        ("msg", "i"),
        ("header_size", "B"),
        ("header_version", "H"),
        ("target_job_id", "Q"),
        ("source_job_id", "Q"),
        ("header_canary", "B"),
        ("steam_id", "Q"),
        ("session_id", "i"),
    )


@dataclass
class MsgHdrProtoBuf(BinaryStruct):
    """Header of protobuf messages; ``proto`` holds the encoded header message."""

    msg: int = 0
    header_length: int = 0
    proto: bytes = b""

    def serialize(self, w: BinaryIO) -> None:
        self.header_length = len(self.proto)
        w.write(
            _PROTO_PREFIX.pack((self.msg | PROTO_MASK) & 0xFFFFFFFF, self.header_length)
        )
        w.write(self.proto)

    def deserialize(self, r: BinaryIO) -> None:
        self.msg = new_emsg(read_int32(r) & 0xFFFFFFFF)
        self.header_length = read_int32(r)
        if self.header_length < 0:
            raise ValueError("negative header length")
        self.proto = read_bytes(r, self.header_length)


@dataclass
class MsgGCHdrProtoBuf(BinaryStruct):
    """Header of protobuf Game Coordinator messages."""

    msg: int = 0
    header_length: int = 0
    proto: bytes = b""

    def serialize(self, w: BinaryIO) -> None:
        self.header_length = len(self.proto)
        w.write(
            _PROTO_PREFIX.pack((self.msg | PROTO_MASK) & 0xFFFFFFFF, self.header_length)
        )
        w.write(self.proto)

    def deserialize(self, r: BinaryIO) -> None:
        self.msg = new_emsg(read_uint32(r))
        self.header_length = read_int32(r)
        self.proto = read_bytes(r, self.header_length)


@dataclass
class MsgGCHdr(BinaryStruct):
    """Header of non-protobuf Game Coordinator messages."""

    header_version: int = 1
    target_job_id: int = NO_JOB
    source_job_id: int = NO_JOB

    _layout = (
        ("header_version", "H"),
        ("target_job_id", "Q"),
        ("source_job_id", "Q"),
    )