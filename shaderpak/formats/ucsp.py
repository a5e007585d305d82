import io
import logging
import pathlib
from enum import IntEnum

from shaderpak.compression import decompress
from shaderpak.errors import FormatError, UnsupportedFeatureError
from shaderpak.formats.base import ShaderPakFormat
from shaderpak.models import LutEntry, ShaderPak
from shaderpak.utils import BinaryReader, read_name
from shaderpak.varint import write_varint

__all__ = ["UCSPak", "Compression", "MAGIC", "VERSION"]

logger = logging.getLogger("shaderpak.formats.ucsp")

MAGIC = b"UCSP"
VERSION = 1


class Compression(IntEnum):
    GZIP = 1


class UCSPak(ShaderPakFormat):
    """Indexed layout with a lookup table in front of one data block.

    ::

        "UCSP" u8 version u8 compression
        varint count
        count * (varint name_len, name, varint offset, varint length)
        data block: every gzip payload back to back

    Offsets are relative to the start of the data block, so a single
    shader can be read without touching any other payload.
    """

    def save(self, path, pak):
        path = pathlib.Path(path)
        data = io.BytesIO()
        table = []
        for name, bytecode in pak.items():
            name_bytes = name.encode("utf-8")
            start = data.tell()
            data.write(self.compress(bytecode))
            entry = LutEntry(name=name, offset=start, length=data.tell() - start)
            table.append((name_bytes, entry))

        with path.open("wb") as f:
            f.write(MAGIC)
            f.write(bytes([VERSION, Compression.GZIP]))
            write_varint(f, len(table))
            for name_bytes, entry in table:
                write_varint(f, len(name_bytes))
                f.write(name_bytes)
                write_varint(f, entry.offset)
                write_varint(f, entry.length)
            f.write(data.getbuffer())
            size = f.tell()
        logger.debug(
            "Saved %d shaders to %s (%d bytes, data block %d bytes)",
            len(table), path, size, data.tell(),
        )

    def load(self, path):
        path = pathlib.Path(path)
        pak = ShaderPak()
        with path.open("rb") as f:
            reader = BinaryReader(f)
            table = self._read_table(reader)
            data_start = reader.position
            for entry in table:
                pak.add(entry.name, self._read_entry(reader, data_start, entry))
        logger.debug("Loaded %d shaders from %s", len(pak), path)
        return pak

    def read_table(self, path) -> list[LutEntry]:
        """Return the lookup table without reading any payload."""
        with pathlib.Path(path).open("rb") as f:
            return self._read_table(BinaryReader(f))

    def load_shader(self, path, name: str) -> bytes | None:
        """Read and decompress a single shader, or None if it isn't there."""
        with pathlib.Path(path).open("rb") as f:
            reader = BinaryReader(f)
            table = self._read_table(reader)
            data_start = reader.position
            # the last entry wins, as it does when loading the whole package
            for entry in reversed(table):
                if entry.name == name:
                    return self._read_entry(reader, data_start, entry)
        return None

    @staticmethod
    def _read_header(reader: BinaryReader):
        if reader.remaining < len(MAGIC) or reader.read_exact(len(MAGIC)) != MAGIC:
            raise FormatError("not a valid indexed package")
        version = reader.read_u8()
        if version != VERSION:
            raise UnsupportedFeatureError(
                f"UCSP version {version} is not supported", value=version
            )
        compression = reader.read_u8()
        try:
            Compression(compression)
        except ValueError:
            raise UnsupportedFeatureError(
                f"Compression type {compression} is not supported", value=compression
            ) from None

    def _read_table(self, reader: BinaryReader) -> list[LutEntry]:
        self._read_header(reader)
        count = reader.read_varint()
        table = []
        for _ in range(count):
            name_length = reader.read_varint()
            name = read_name(reader.read_exact(name_length, what="shader name"))
            offset = reader.read_varint()
            length = reader.read_varint()
            table.append(LutEntry(name=name, offset=offset, length=length))

        data_size = reader.remaining
        for entry in table:
            if entry.end > data_size:
                raise FormatError(
                    f"Shader {entry.name!r} at {entry.offset}+{entry.length} "
                    f"exceeds the data block ({data_size} bytes)"
                )
        return table

    @staticmethod
    def _read_entry(reader: BinaryReader, data_start: int, entry: LutEntry) -> bytes:
        reader.seek(data_start + entry.offset)
        compressed = reader.read_exact(entry.length, what=f"shader {entry.name!r}")
        return decompress(compressed)
