from typing import BinaryIO

from shaderpak.errors import FormatError

__all__ = [
    "MAX_VARINT_BYTES",
    "MAX_VARINT_VALUE",
    "encode_varint",
    "decode_varint",
    "read_varint",
    "write_varint",
    "varint_size",
]

MAX_VARINT_VALUE = 0xFFFFFFFF
MAX_VARINT_BYTES = 5

CONTINUATION_BIT = 0x80
PAYLOAD_MASK = 0x7F


def encode_varint(value: int) -> bytes:
    """Encode an unsigned 32-bit value as 7-bit groups, low group first."""
    if not 0 <= value <= MAX_VARINT_VALUE:
        raise ValueError(f"Value out of unsigned 32-bit range: {value}")
    out = bytearray()
    while value >= CONTINUATION_BIT:
        out.append((value & PAYLOAD_MASK) | CONTINUATION_BIT)
        value >>= 7
    out.append(value)
    return bytes(out)


def varint_size(value: int) -> int:
    return len(encode_varint(value))


def _accumulate(result: int, byte: int, index: int) -> int:
    result |= (byte & PAYLOAD_MASK) << (7 * index)
    if byte & CONTINUATION_BIT:
        if index == MAX_VARINT_BYTES - 1:
            raise FormatError("encoded integer too long")
    elif result > MAX_VARINT_VALUE:
        raise FormatError("encoded integer too large")
    return result


def decode_varint(data: bytes, offset: int = 0) -> tuple[int, int]:
    """Decode one value from ``data`` starting at ``offset``.

    Returns the value and the offset just past its last byte.
    """
    result = 0
    for index in range(MAX_VARINT_BYTES):
        if offset >= len(data):
            raise FormatError("truncated encoded integer")
        byte = data[offset]
        offset += 1
        result = _accumulate(result, byte, index)
        if not byte & CONTINUATION_BIT:
            break
    return result, offset


def read_varint(stream: BinaryIO) -> int:
    result = 0
    for index in range(MAX_VARINT_BYTES):
        chunk = stream.read(1)
        if not chunk:
            raise FormatError("truncated encoded integer")
        byte = chunk[0]
        result = _accumulate(result, byte, index)
        if not byte & CONTINUATION_BIT:
            break
    return result


def write_varint(stream: BinaryIO, value: int) -> int:
    """Write ``value`` to ``stream``, return the number of bytes written."""
    return stream.write(encode_varint(value))
