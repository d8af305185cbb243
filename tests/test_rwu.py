import io
import struct

import pytest

from steamwire import rwu


def stream(data: bytes) -> io.BytesIO:
    return io.BytesIO(data)


def test_uint16_is_little_endian():
    assert rwu.read_uint16(stream(b"\x01\x02")) == 0x0201


def test_int8_negative():
    assert rwu.read_int8(stream(b"\xff")) == -1


@pytest.mark.parametrize(
    "reader, fmt, value",
    [
        (rwu.read_uint8, "<B", 200),
        (rwu.read_uint16, "<H", 65535),
        (rwu.read_uint32, "<I", 2**32 - 1),
        (rwu.read_uint64, "<Q", 2**64 - 1),
        (rwu.read_int8, "<b", -128),
        (rwu.read_int16, "<h", -32768),
        (rwu.read_int32, "<i", -(2**31)),
        (rwu.read_int64, "<q", -(2**63)),
    ],
)
def test_integer_readers_match_packed_values(reader, fmt, value):
    r = stream(struct.pack(fmt, value) + b"tail")
    assert reader(r) == value
    assert r.read() == b"tail"


@pytest.mark.parametrize(
    "reader",
    [rwu.read_uint16, rwu.read_uint32, rwu.read_uint64, rwu.read_int32, rwu.read_int64],
)
def test_short_input_raises_eof(reader):
    with pytest.raises(EOFError):
        reader(stream(b"\x01"))


def test_empty_input_raises_eof():
    with pytest.raises(EOFError):
        rwu.read_uint8(stream(b""))


def test_read_bool_nonzero_is_true():
    assert rwu.read_bool(stream(b"\x02")) is True
    assert rwu.read_bool(stream(b"\x00")) is False


def test_read_string_stops_at_terminator():
    r = stream(b"abc\x00rest")
    assert rwu.read_string(r) == "abc"
    assert r.read() == b"rest"


def test_read_string_empty():
    assert rwu.read_string(stream(b"\x00xyz")) == ""


def test_read_string_without_terminator_raises():
    with pytest.raises(EOFError):
        rwu.read_string(stream(b"abc"))


def test_read_bytes_exact():
    r = stream(b"hello world")
    assert rwu.read_bytes(r, 5) == b"hello"
    assert r.read() == b" world"


def test_read_bytes_short_raises():
    with pytest.raises(EOFError):
        rwu.read_bytes(stream(b"abc"), 4)


def test_read_bytes_negative_raises():
    with pytest.raises(ValueError):
        rwu.read_bytes(stream(b"abc"), -1)


@pytest.mark.parametrize("value", [True, False])
def test_write_bool_round_trip(value):
    buf = io.BytesIO()
    rwu.write_bool(buf, value)
    assert len(buf.getvalue()) == 1
    buf.seek(0)
    assert rwu.read_bool(buf) is value