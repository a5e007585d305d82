from dataclasses import dataclass

__all__ = ["LutEntry"]


@dataclass(frozen=True, kw_only=True)
class LutEntry:
    name: str
    offset: int
    length: int

    @property
    def end(self):
        return self.offset + self.length
