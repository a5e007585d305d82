import os
import struct
from typing import BinaryIO

from shaderpak.errors import FormatError
from shaderpak.varint import read_varint

__all__ = ["BinaryReader", "pack_u32", "read_name"]

U32 = struct.Struct("<I")


def pack_u32(value: int) -> bytes:
    try:
        return U32.pack(value)
    except struct.error as e:
        raise ValueError(f"Value out of unsigned 32-bit range: {value}") from e


class BinaryReader:
    """Bounds-checked reads over a seekable binary file.

    Every read is checked against the bytes left in the file before it is
    issued, so a corrupt length field fails fast instead of allocating.
    """

    def __init__(self, stream: BinaryIO):
        self.stream = stream
        self.size = os.fstat(stream.fileno()).st_size

    @property
    def position(self) -> int:
        return self.stream.tell()

    @property
    def remaining(self) -> int:
        return self.size - self.position

    def seek(self, position: int):
        if not 0 <= position <= self.size:
            raise FormatError(f"Seek to {position} is outside the file ({self.size} bytes)")
        self.stream.seek(position)

    def read_exact(self, length: int, *, what: str = "data") -> bytes:
        if length > self.remaining:
            raise FormatError(
                f"Truncated file: {what} needs {length} bytes, {self.remaining} left"
            )
        data = self.stream.read(length)
        if len(data) != length:
            raise FormatError(f"Truncated file while reading {what}")
        return data

    def read_u8(self) -> int:
        return self.read_exact(1)[0]

    def read_u32(self) -> int:
        (value,) = U32.unpack(self.read_exact(U32.size, what="32-bit integer"))
        return value

    def read_varint(self) -> int:
        return read_varint(self.stream)


def read_name(raw: bytes) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise FormatError("Entry name is not valid UTF-8") from e
