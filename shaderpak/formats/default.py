from shaderpak.formats.base import SequentialPak
from shaderpak.utils import pack_u32

__all__ = ["DefaultPak"]


class DefaultPak(SequentialPak):
    """Plain layout: every count and length is a little-endian uint32.

    ::

        u32 count
        count * (u32 name_len, name, u32 data_len, gzip data)
    """

    def write_int(self, f, value):
        f.write(pack_u32(value))

    def read_int(self, reader):
        return reader.read_u32()
