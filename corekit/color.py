"""RGBA color value with a hex codec.

Hex strings are ``AARRGGBB`` when encoding. Decoding also accepts ``RGB``
(each nibble doubled) and ``RRGGBB``, both fully opaque; any other length
decodes to opaque black. The JSON form is ``{red, green, blue, opacity}``.
"""

from __future__ import annotations

import math
import re

from pydantic import BaseModel, Field

# Non-alphanumeric runs at either end, e.g. a leading "#".
_EDGE_NON_ALNUM = re.compile(r"^[\W_]+|[\W_]+$")
_HEX_PREFIX = re.compile(r"[0-9A-Fa-f]+")


def _to_byte(component: float) -> int:
    """Scale a [0, 1] component to 0-255, rounding half away from zero."""
    return int(math.floor(component * 255 + 0.5))


class Color(BaseModel):
    """sRGB color with normalized components."""

    red: float = Field(ge=0, le=1)
    green: float = Field(ge=0, le=1)
    blue: float = Field(ge=0, le=1)
    alpha: float = Field(default=1.0, ge=0, le=1, alias="opacity")

    model_config = {"frozen": True, "populate_by_name": True}

    @classmethod
    def from_rgba8(cls, red: int, green: int, blue: int, alpha: int = 255) -> Color:
        return cls(red=red / 255, green=green / 255, blue=blue / 255, alpha=alpha / 255)

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """Decode ``RGB``, ``RRGGBB`` or ``AARRGGBB``. Never raises."""
        digits = _EDGE_NON_ALNUM.sub("", text)
        match = _HEX_PREFIX.match(digits)
        value = int(match.group(), 16) if match else 0

        if len(digits) == 3:
            a, r, g, b = 255, (value >> 8) * 17, (value >> 4 & 0xF) * 17, (value & 0xF) * 17
        elif len(digits) == 6:
            a, r, g, b = 255, value >> 16, value >> 8 & 0xFF, value & 0xFF
        elif len(digits) == 8:
            a, r, g, b = value >> 24, value >> 16 & 0xFF, value >> 8 & 0xFF, value & 0xFF
        else:
            a, r, g, b = 255, 0, 0, 0

        return cls.from_rgba8(r, g, b, a)

    def to_rgba8(self) -> tuple[int, int, int, int]:
        return (
            _to_byte(self.red),
            _to_byte(self.green),
            _to_byte(self.blue),
            _to_byte(self.alpha),
        )

    def to_hex(self) -> str:
        """Encode as uppercase ``AARRGGBB``."""
        r, g, b, a = self.to_rgba8()
        return f"{a:02X}{r:02X}{g:02X}{b:02X}"
