"""
Binary Braille Dump: encode/decode data to/from Braille Patterns characters.

    >>> from brailledump import encode, decode
    >>> encode(b"Hello\\n", "nlbb")
    '⢄⠮⢦⢦⢾⢐'
    >>> decode("⢄⠮⢦⢦⢾⢐", "nlbb")
    b'Hello\\n'
"""

__version__ = "1.0.0"

from .base import STYLE_REGISTRY, Style, StyleId, available_styles, get_style, register_style
from .engine import (
    DEFAULT_COLUMNS,
    DEFAULT_INDENT,
    DEFAULT_STYLE,
    decode,
    decode_text,
    encode,
    encode_bytes,
)
from .errors import CodecError, DomainError, InvalidCharacterError, UnknownStyleError
from .layout import fence, unfence, wrap

__all__ = [
    "STYLE_REGISTRY",
    "Style",
    "StyleId",
    "available_styles",
    "get_style",
    "register_style",
    "DEFAULT_COLUMNS",
    "DEFAULT_INDENT",
    "DEFAULT_STYLE",
    "decode",
    "decode_text",
    "encode",
    "encode_bytes",
    "CodecError",
    "DomainError",
    "InvalidCharacterError",
    "UnknownStyleError",
    "fence",
    "unfence",
    "wrap",
]
