from collections.abc import Iterator, Mapping

__all__ = ["ShaderPak"]


class ShaderPak:
    """A named collection of compiled shader bytecode blobs.

    Names are unique; adding an existing name replaces its bytecode.
    Iteration follows insertion order, which is also the order every
    format writes entries to disk.
    """

    def __init__(self, shaders: Mapping[str, bytes] | None = None):
        self._shaders: dict[str, bytes] = {}
        if shaders:
            for name, bytecode in shaders.items():
                self.add(name, bytecode)

    def add(self, name: str, bytecode: bytes):
        if not isinstance(name, str):
            raise TypeError(f"Shader name must be str, got {type(name).__name__}")
        self._shaders[name] = memoryview(bytecode).tobytes()

    def try_get(self, name: str) -> bytes | None:
        return self._shaders.get(name)

    @property
    def names(self) -> list[str]:
        return list(self._shaders)

    def items(self) -> Iterator[tuple[str, bytes]]:
        yield from self._shaders.items()

    def __len__(self):
        return len(self._shaders)

    def __iter__(self):
        return iter(self._shaders)

    def __contains__(self, name):
        return name in self._shaders

    def __eq__(self, other):
        if not isinstance(other, ShaderPak):
            return NotImplemented
        return self._shaders == other._shaders

    def __repr__(self):
        return f"{type(self).__name__}({self.names!r})"
