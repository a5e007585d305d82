from shaderpak.errors import FormatError, ShaderPakError, UnsupportedFeatureError
from shaderpak.formats import Alt7BitPak, DefaultPak, ShaderPakFormat, UCSPak
from shaderpak.main import PakFormat, SPak, load, save
from shaderpak.models import LutEntry, ShaderPak

__all__ = [
    "ShaderPak",
    "LutEntry",
    "ShaderPakFormat",
    "DefaultPak",
    "Alt7BitPak",
    "UCSPak",
    "PakFormat",
    "SPak",
    "load",
    "save",
    "ShaderPakError",
    "FormatError",
    "UnsupportedFeatureError",
]
