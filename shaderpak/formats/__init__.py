from shaderpak.formats.alt7bit import Alt7BitPak
from shaderpak.formats.base import SequentialPak, ShaderPakFormat
from shaderpak.formats.default import DefaultPak
from shaderpak.formats.ucsp import UCSPak

__all__ = ["ShaderPakFormat", "SequentialPak", "DefaultPak", "Alt7BitPak", "UCSPak"]
