from enum import StrEnum, auto
from os import PathLike

from shaderpak.formats import Alt7BitPak, DefaultPak, ShaderPakFormat, UCSPak
from shaderpak.models import ShaderPak

__all__ = ["PakFormat", "SPak", "load", "save"]


class PakFormat(StrEnum):
    DEFAULT = auto()
    ALT7BIT = auto()
    UCSP = auto()

    @property
    def codec(self) -> type[ShaderPakFormat]:
        match self:
            case PakFormat.DEFAULT:
                return DefaultPak
            case PakFormat.ALT7BIT:
                return Alt7BitPak
            case PakFormat.UCSP:
                return UCSPak
            case _:
                raise ValueError(f"Invalid PakFormat: {self}")

    def create(self, **options) -> ShaderPakFormat:
        return self.codec(**options)


class SPak:
    """Entry point that picks a format and hands the call to it."""

    @staticmethod
    def load(
        path: str | PathLike, fmt: PakFormat | str = PakFormat.DEFAULT, **options
    ) -> ShaderPak:
        return PakFormat(fmt).create(**options).load(path)

    @staticmethod
    def save(
        path: str | PathLike,
        pak: ShaderPak,
        fmt: PakFormat | str = PakFormat.DEFAULT,
        **options,
    ):
        PakFormat(fmt).create(**options).save(path, pak)


load = SPak.load
save = SPak.save
