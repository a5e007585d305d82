import logging
import pathlib
from abc import ABC, abstractmethod
from os import PathLike
from typing import BinaryIO

from shaderpak.compression import DEFAULT_COMPRESSLEVEL, compress, decompress
from shaderpak.errors import FormatError
from shaderpak.models import ShaderPak
from shaderpak.utils import BinaryReader, read_name

__all__ = ["ShaderPakFormat", "SequentialPak"]

logger = logging.getLogger("shaderpak.formats")


class ShaderPakFormat(ABC):
    """Saves and loads a ShaderPak in one specific on-disk layout."""

    def __init__(self, *, compresslevel: int = DEFAULT_COMPRESSLEVEL):
        self.compresslevel = compresslevel

    @abstractmethod
    def save(self, path: str | PathLike, pak: ShaderPak):
        ...

    @abstractmethod
    def load(self, path: str | PathLike) -> ShaderPak:
        ...

    def compress(self, data: bytes) -> bytes:
        return compress(data, level=self.compresslevel)


class SequentialPak(ShaderPakFormat):
    """Count followed by inline (name, compressed payload) records.

    Subclasses only decide how the count and length fields are encoded.
    """

    @abstractmethod
    def write_int(self, f: BinaryIO, value: int):
        ...

    @abstractmethod
    def read_int(self, reader: BinaryReader) -> int:
        ...

    def save(self, path, pak):
        path = pathlib.Path(path)
        records = [(name.encode("utf-8"), bytecode) for name, bytecode in pak.items()]
        with path.open("wb") as f:
            self.write_int(f, len(records))
            for name_bytes, bytecode in records:
                compressed = self.compress(bytecode)
                self.write_int(f, len(name_bytes))
                f.write(name_bytes)
                self.write_int(f, len(compressed))
                f.write(compressed)
            size = f.tell()
        logger.debug("Saved %d shaders to %s (%d bytes)", len(pak), path, size)

    def load(self, path):
        path = pathlib.Path(path)
        pak = ShaderPak()
        with path.open("rb") as f:
            reader = BinaryReader(f)
            count = self.read_int(reader)
            for _ in range(count):
                name_length = self.read_int(reader)
                name = read_name(reader.read_exact(name_length, what="shader name"))
                compressed_length = self.read_int(reader)
                compressed = reader.read_exact(compressed_length, what=f"shader {name!r}")
                pak.add(name, decompress(compressed))
            if reader.remaining:
                raise FormatError(f"{reader.remaining} trailing bytes after the last shader")
        logger.debug("Loaded %d shaders from %s", len(pak), path)
        return pak
