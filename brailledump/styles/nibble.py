"""
Nibble-column styles.

A byte is split into its most significant nibble (MSN) and least
significant nibble (LSN); each nibble fills one column of the cell. The
style name spells out the two choices:

    n{l,r}   MSN in the left or right column (LSN takes the other one)
    b{b,t}   each nibble's most significant bit in the bottom or top row

`nlbb`, the default style, gives these dot values:

    Left | Right
    -----|------
     16  |  1
     32  |  2
     64  |  4
    128  |  8
"""
import enum
from typing import Dict, List, Tuple

from ..base import Style, register_style
from ..grid import Column, cell_char, offset_bit_for


class MsbRow(enum.Enum):
    TOP = "top"
    BOTTOM = "bottom"


def nibble_rows(msb_row: MsbRow) -> Tuple[int, ...]:
    """Row holding each nibble bit, least significant bit first."""
    return (0, 1, 2, 3) if msb_row is MsbRow.BOTTOM else (3, 2, 1, 0)


def place_nibble(nibble: int, column: Column, msb_row: MsbRow) -> int:
    """Cell offset bits raised by a 4-bit value laid into one column."""
    offset = 0
    for bit, row in enumerate(nibble_rows(msb_row)):
        if (nibble >> bit) & 1:
            offset |= 1 << offset_bit_for(column, row)
    return offset


def read_nibble(offset: int, column: Column, msb_row: MsbRow) -> int:
    """Inverse of place_nibble for one column of a cell offset."""
    nibble = 0
    for bit, row in enumerate(nibble_rows(msb_row)):
        if offset & (1 << offset_bit_for(column, row)):
            nibble |= 1 << bit
    return nibble


class NibbleStyle(Style):
    """
    One byte per cell with the nibbles laid out column-wise.

    Subclasses only pick msn_column and msb_row; the lookup tables for both
    directions are built once per instance.
    """

    msn_column = Column.LEFT
    msb_row = MsbRow.BOTTOM

    def __init__(self):
        self._encode_table: List[str] = [self._pack(b) for b in self.domain]
        self._decode_table: Dict[str, int] = {c: b for b, c in enumerate(self._encode_table)}

    def _pack(self, value: int) -> str:
        offset = place_nibble(value >> 4, self.msn_column, self.msb_row)
        offset |= place_nibble(value & 0x0F, self.msn_column.other, self.msb_row)
        return cell_char(offset)

    def encode_byte(self, value: int) -> str:
        return self._encode_table[self._check(value)]

    def decode_char(self, char: str) -> int:
        self._offset(char)
        return self._decode_table[char]


@register_style
class NlbbStyle(NibbleStyle):
    name = "nlbb"
    description = "MSN left column, MSB bottom row (default)"
    msn_column = Column.LEFT
    msb_row = MsbRow.BOTTOM


@register_style
class NlbtStyle(NibbleStyle):
    name = "nlbt"
    description = "MSN left column, MSB top row"
    msn_column = Column.LEFT
    msb_row = MsbRow.TOP


@register_style
class NrbbStyle(NibbleStyle):
    name = "nrbb"
    description = "MSN right column, MSB bottom row"
    msn_column = Column.RIGHT
    msb_row = MsbRow.BOTTOM


@register_style
class NrbtStyle(NibbleStyle):
    name = "nrbt"
    description = "MSN right column, MSB top row"
    msn_column = Column.RIGHT
    msb_row = MsbRow.TOP
