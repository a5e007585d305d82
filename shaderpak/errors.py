__all__ = ["ShaderPakError", "FormatError", "UnsupportedFeatureError"]


class ShaderPakError(Exception):
    pass


class FormatError(ShaderPakError, ValueError):
    """The file is structurally broken: bad magic, truncation, bad lengths."""


class UnsupportedFeatureError(ShaderPakError, NotImplementedError):
    """The file is recognized but uses a version or tag this build can't read."""

    def __init__(self, message: str, *, value: int | None = None):
        super().__init__(message)
        self.value = value
