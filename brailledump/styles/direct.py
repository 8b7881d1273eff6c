"""
Direct style - the cell offset is the byte value itself.

Byte bit i raises dot i + 1, so the dots carry the standard Braille values:

    Left | Right
    -----|------
      1  |  8
      2  |  16
      4  |  32
     64  | 128

Visual example: "Hi" -> "⡈⡩"
"""
from ..base import Style, register_style
from ..grid import cell_char


@register_style
class DirectStyle(Style):
    name = "direct"
    description = "Direct encoding using the standard Braille dot values"

    def encode_byte(self, value: int) -> str:
        return cell_char(self._check(value))

    def decode_char(self, char: str) -> int:
        return self._offset(char)
