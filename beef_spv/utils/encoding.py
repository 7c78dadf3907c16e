"""
VarInt and byte-order helpers for the BEEF wire format.
"""
from beef_spv.errors import DecodeError


def read_var_int(data: bytes, offset: int = 0) -> tuple[int, int]:
    """
    Decode a VarInt starting at `offset`.
    Returns a tuple of (value, bytes_used).
    """
    if offset >= len(data):
        raise DecodeError('truncated', "cannot read VarInt - no bytes left")

    prefix = data[offset]
    if prefix < 0xFD:
        return prefix, 1

    width = {0xFD: 2, 0xFE: 4, 0xFF: 8}[prefix]
    if offset + 1 + width > len(data):
        raise DecodeError('truncated', f"cannot read {width}-byte VarInt - stream ends early")
    return int.from_bytes(data[offset + 1:offset + 1 + width], 'little'), 1 + width


def reverse_hex(data: bytes) -> str:
    """Bytes in wire order to a display-order hex string."""
    return data[::-1].hex()


def hex_to_wire(hash_hex: str) -> bytes:
    """Display-order hex string back to wire-order bytes."""
    return bytes.fromhex(hash_hex)[::-1]


class ByteReader:
    """Cursor over an in-memory byte string that refuses to read past the end."""

    def __init__(self, data: bytes, position: int = 0):
        self.data = data
        self.position = position

    def remaining(self) -> int:
        return len(self.data) - self.position

    def eof(self) -> bool:
        return self.remaining() <= 0

    def read(self, length: int, what: str = "bytes") -> bytes:
        if length > self.remaining():
            raise DecodeError(
                'truncated',
                f"cannot read {what} - need {length} bytes, {self.remaining()} left"
            )
        chunk = self.data[self.position:self.position + length]
        self.position += length
        return chunk

    def read_uint8(self, what: str = "byte") -> int:
        return self.read(1, what)[0]

    def read_var_int(self, what: str = "VarInt") -> int:
        if self.eof():
            raise DecodeError('truncated', f"cannot read {what} - no bytes left")
        value, used = read_var_int(self.data, self.position)
        self.position += used
        return value

    def read_hash(self, what: str = "hash") -> str:
        """Read 32 wire-order bytes and return them as display-order hex."""
        return reverse_hex(self.read(32, what))
