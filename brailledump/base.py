import enum
from abc import ABC, abstractmethod
from typing import Dict, List, Union

from .errors import DomainError, InvalidCharacterError, UnknownStyleError
from .grid import cell_offset, is_braille

# ==========================================
#  FRAMEWORK: Abstract Base Class & Registry
# ==========================================


class StyleId(str, enum.Enum):
    """The closed set of style names."""

    BCD = "bcd"
    DIRECT = "direct"
    NLBB = "nlbb"
    NLBT = "nlbt"
    NRBB = "nrbb"
    NRBT = "nrbt"


class Style(ABC):
    """
    Abstract base class that all styles must implement.

    A style is a stateless bijection between the values of its domain and
    Braille characters: decode_char(encode_byte(b)) == b for every b in
    domain.
    """

    domain = range(256)

    @property
    @abstractmethod
    def name(self) -> str:
        """The command-line name for this style."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Short description for help text."""
        pass

    @abstractmethod
    def encode_byte(self, value: int) -> str:
        pass

    @abstractmethod
    def decode_char(self, char: str) -> int:
        pass

    def _check(self, value: int) -> int:
        if value not in self.domain:
            last = self.domain.stop - 1
            raise DomainError(f"Value {value} is outside the '{self.name}' domain 0..{last}")
        return value

    def _offset(self, char: str) -> int:
        """Cell offset of a Braille character, rejecting anything else."""
        if not is_braille(char):
            raise InvalidCharacterError(f"Not a Braille Patterns character: {char!r}")
        return cell_offset(char)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"


STYLE_REGISTRY: Dict[str, Style] = {}


def register_style(cls):
    """Decorator to auto-register styles."""
    style = cls()
    STYLE_REGISTRY[style.name] = style
    return cls


def get_style(style: Union[str, StyleId, Style]) -> Style:
    """Resolve a style name, StyleId or Style instance to a registered style."""
    if isinstance(style, Style):
        return style
    name = style.value if isinstance(style, StyleId) else style
    try:
        return STYLE_REGISTRY[name]
    except KeyError:
        choices = ", ".join(sorted(STYLE_REGISTRY))
        raise UnknownStyleError(f"Unknown style {name!r}; expected one of: {choices}") from None


def available_styles() -> List[Style]:
    return [STYLE_REGISTRY[name] for name in sorted(STYLE_REGISTRY)]
