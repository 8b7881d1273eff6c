"""
Binary coded decimal style for byte values 0-99.

The tens digit fills the left column and the units digit the right column,
each with its most significant bit in the top row:

    Tens | Units
    -----|------
      8  |  8
      4  |  4
      2  |  2
      1  |  1

The cell therefore matches `nlbt` applied to (tens << 4) | units. Cells whose
columns hold 10-15 have no decimal reading and are rejected.
"""
from ..base import Style, register_style
from ..errors import DomainError
from ..grid import Column, cell_char
from .nibble import MsbRow, place_nibble, read_nibble

TENS_COLUMN = Column.LEFT
MSB_ROW = MsbRow.TOP


@register_style
class BcdStyle(Style):
    name = "bcd"
    description = "Binary Coded Decimal of byte values 0-99"
    domain = range(100)

    def encode_byte(self, value: int) -> str:
        tens, units = divmod(self._check(value), 10)
        offset = place_nibble(tens, TENS_COLUMN, MSB_ROW)
        offset |= place_nibble(units, TENS_COLUMN.other, MSB_ROW)
        return cell_char(offset)

    def decode_char(self, char: str) -> int:
        offset = self._offset(char)
        tens = read_nibble(offset, TENS_COLUMN, MSB_ROW)
        units = read_nibble(offset, TENS_COLUMN.other, MSB_ROW)
        if tens > 9 or units > 9:
            raise DomainError(f"Cell {char!r} is not a decimal digit pair (tens={tens}, units={units})")
        return tens * 10 + units
