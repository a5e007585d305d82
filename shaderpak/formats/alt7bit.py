from shaderpak.formats.base import SequentialPak
from shaderpak.varint import write_varint

__all__ = ["Alt7BitPak"]


class Alt7BitPak(SequentialPak):
    """Same layout as DefaultPak with 7-bit encoded counts and lengths."""

    def write_int(self, f, value):
        write_varint(f, value)

    def read_int(self, reader):
        return reader.read_varint()
