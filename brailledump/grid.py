"""
Dot grid addressing for 8-dot Braille cells.

A cell is a 2 x 4 grid of dots. Unicode numbers them by column:

    Left | Right
    -----|------
      1  |  4
      2  |  5
      3  |  6
      7  |  8

Dot k raised sets bit (k - 1) of the cell offset, and the character is
chr(BRAILLE_BASE + offset). Every style maps its input onto this grid.
"""
import enum
from typing import Tuple

# Unicode Braille Patterns block starts at U+2800
BRAILLE_BASE = 0x2800
BRAILLE_LAST = BRAILLE_BASE + 0xFF

ROWS = 4

DOTS = {1: 0x01, 2: 0x02, 3: 0x04, 4: 0x08, 5: 0x10, 6: 0x20, 7: 0x40, 8: 0x80}


class Column(enum.Enum):
    LEFT = "left"
    RIGHT = "right"

    @property
    def other(self) -> "Column":
        return Column.RIGHT if self is Column.LEFT else Column.LEFT


# Dot numbers of each column, top row first
COLUMN_DOTS = {
    Column.LEFT: (1, 2, 3, 7),
    Column.RIGHT: (4, 5, 6, 8),
}


def dot_for(column: Column, row: int) -> int:
    """Dot number (1-8) at the given grid position."""
    if not 0 <= row < ROWS:
        raise ValueError(f"Row must be in range 0..{ROWS - 1}, got {row}")
    return COLUMN_DOTS[column][row]


def offset_bit_for(column: Column, row: int) -> int:
    """Bit index of the cell offset that the dot at (column, row) sets."""
    return dot_for(column, row) - 1


def position_of(bit: int) -> Tuple[Column, int]:
    """Inverse of offset_bit_for: the (column, row) a cell offset bit addresses."""
    dot = bit + 1
    for column, dots in COLUMN_DOTS.items():
        if dot in dots:
            return column, dots.index(dot)
    raise ValueError(f"Bit index must be in range 0..7, got {bit}")


def is_braille(char: str) -> bool:
    return len(char) == 1 and BRAILLE_BASE <= ord(char) <= BRAILLE_LAST


def cell_char(offset: int) -> str:
    return chr(BRAILLE_BASE + offset)


def cell_offset(char: str) -> int:
    return ord(char) - BRAILLE_BASE
