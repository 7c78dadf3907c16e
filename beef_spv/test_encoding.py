"""
Tests for VarInt and byte-order helpers.
"""
import pytest
from bsv.utils import unsigned_to_varint

from beef_spv.errors import DecodeError
from beef_spv.utils.encoding import (
    ByteReader, hex_to_wire, read_var_int, reverse_hex
)


@pytest.mark.parametrize("value, encoded", [
    (0, "00"),
    (0xFC, "fc"),
    (0xFD, "fdfd00"),
    (0xFFFF, "fdffff"),
    (0x10000, "fe00000100"),
    (0xFFFFFFFF, "feffffffff"),
    (0x100000000, "ff0000000001000000"),
])
def test_var_int_boundaries(value, encoded):
    assert unsigned_to_varint(value).hex() == encoded
    assert read_var_int(bytes.fromhex(encoded)) == (value, len(encoded) // 2)


def test_truncated_var_int():
    with pytest.raises(DecodeError) as exc:
        read_var_int(bytes.fromhex("fe0100"))
    assert exc.value.tag == 'truncated'

    with pytest.raises(DecodeError):
        read_var_int(b"", 0)


def test_read_var_int_at_offset():
    data = bytes.fromhex("aabbfd3412")
    assert read_var_int(data, 2) == (0x1234, 3)


def test_byte_order_helpers():
    wire = bytes(range(32))
    display = reverse_hex(wire)
    assert display.startswith("1f1e1d")
    assert hex_to_wire(display) == wire


class TestByteReader:
    def test_sequential_reads(self):
        reader = ByteReader(bytes.fromhex("01fd0001") + bytes(33))
        assert reader.read_uint8() == 1
        assert reader.read_var_int() == 256
        assert reader.remaining() == 33
        reader.read(1)
        assert reader.read_hash() == "00" * 32
        assert reader.eof()

    def test_read_past_end(self):
        reader = ByteReader(b"\x01\x02")
        with pytest.raises(DecodeError) as exc:
            reader.read(3, "leaf hash")
        assert exc.value.tag == 'truncated'
        assert "leaf hash" in exc.value.message
        # a failed read does not move the cursor
        assert reader.position == 0

    def test_var_int_at_end(self):
        reader = ByteReader(b"\x05", position=1)
        with pytest.raises(DecodeError):
            reader.read_var_int("BUMP count")
