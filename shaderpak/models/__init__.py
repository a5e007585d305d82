from shaderpak.models.lut import LutEntry
from shaderpak.models.shader_pak import ShaderPak

__all__ = ["LutEntry", "ShaderPak"]
