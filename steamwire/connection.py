"""Framed, optionally encrypted TCP connection to a connection manager."""

from __future__ import annotations

import socket
import struct
import threading

from .cryptoutil import symmetric_decrypt, symmetric_encrypt

__all__ = ["TCP_CONNECTION_MAGIC", "TcpConnection"]

TCP_CONNECTION_MAGIC = 0x31305456  # "VT01"

_FRAME_HEADER = struct.Struct("<II")


class TcpConnection:
    """A TCP stream carrying length-prefixed frames tagged with a magic value."""

    def __init__(self, sock: socket.socket) -> None:
        self._sock = sock
        self._key: bytes | None = None
        self._key_lock = threading.Lock()

    @classmethod
    def dial(
        cls, host: str, port: int, local_address: tuple[str, int] | None = None
    ) -> TcpConnection:
        """Open a connection to ``host:port``, optionally bound to a local address."""
        sock = socket.create_connection((host, port), source_address=local_address)
        return cls(sock)

    def _recv_exact(self, size: int) -> bytes:
        buffer = bytearray()
        while len(buffer) < size:
            chunk = self._sock.recv(size - len(buffer))
            if not chunk:
                raise EOFError("connection closed")
            buffer += chunk
        return bytes(buffer)

    def read(self) -> bytes:
        """Read one frame and return its payload, decrypted if a key is set."""
        length, magic = _FRAME_HEADER.unpack(self._recv_exact(_FRAME_HEADER.size))
        if magic != TCP_CONNECTION_MAGIC:
            raise ValueError(
                f"Invalid connection magic! Expected {TCP_CONNECTION_MAGIC}, got {magic}!"
            )
        data = self._recv_exact(length)
        with self._key_lock:
            key = self._key
        if key is not None:
            data = symmetric_decrypt(key, data)
        return data

    def write(self, message: bytes) -> None:
        """Send ``message`` as one frame, encrypted if a key is set."""
        with self._key_lock:
            key = self._key
        payload = symmetric_encrypt(key, message) if key is not None else bytes(message)
        self._sock.sendall(_FRAME_HEADER.pack(len(payload), TCP_CONNECTION_MAGIC) + payload)

    def close(self) -> None:
        self._sock.close()

    def set_encryption_key(self, key: bytes | None) -> None:
        """Set the 32-byte AES session key, or disable encryption with None."""
        if key is not None and len(key) != 32:
            raise ValueError("Connection AES key is not 32 bytes long!")
        with self._key_lock:
            self._key = None if key is None else bytes(key)

    def is_encrypted(self) -> bool:
        with self._key_lock:
            return self._key is not None

    def __enter__(self) -> TcpConnection:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()