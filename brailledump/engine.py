from typing import Optional, Union

from . import styles  # noqa: F401  (registers the built-in styles)
from .base import Style, StyleId, get_style
from .errors import CodecError, InvalidCharacterError
from .grid import is_braille
from .layout import fence, is_separator, unfence, wrap
from .log import log_info

DEFAULT_STYLE = StyleId.NLBB.value
DEFAULT_COLUMNS = 64
DEFAULT_INDENT = 0

StyleLike = Union[str, StyleId, Style]

# ==========================================
#  STREAM CODEC
# ==========================================


def encode_bytes(data: bytes, style: StyleLike = DEFAULT_STYLE) -> str:
    """Encode each byte as one Braille character, in order."""
    style = get_style(style)
    chars = []
    for i, byte in enumerate(data):
        try:
            chars.append(style.encode_byte(byte))
        except CodecError as e:
            raise e.at(i) from e
    return "".join(chars)


def decode_text(text: str, style: StyleLike = DEFAULT_STYLE) -> bytes:
    """
    Decode Braille characters back to bytes.

    Whitespace and line-continuation characters are skipped. Error
    positions are indexes into `text`.
    """
    style = get_style(style)
    decoded = bytearray()
    for i, char in enumerate(text):
        if is_separator(char):
            continue
        if not is_braille(char):
            raise InvalidCharacterError(f"Not a Braille Patterns character: {char!r}", i)
        try:
            decoded.append(style.decode_char(char))
        except CodecError as e:
            raise e.at(i) from e
    return bytes(decoded)


# ==========================================
#  PUBLIC API
# ==========================================


def encode(data: bytes, style: StyleLike = DEFAULT_STYLE, columns: int = DEFAULT_COLUMNS,
           indent: int = DEFAULT_INDENT, markdown: bool = False, label: Optional[str] = None) -> str:
    """
    Encode bytes to a Braille dump.

    Args:
        data: Raw bytes
        style: Style name, StyleId or Style instance
        columns: Characters per line; 0 disables wrapping
        indent: Spaces after each inserted line break
        markdown: Fence the dump as a Markdown code block
        label: Heading for the Markdown block (usually the input path)

    Raises:
        DomainError: a byte is outside the style's domain
        UnknownStyleError: style is not registered
    """
    style = get_style(style)
    body = wrap(encode_bytes(data, style), columns, indent)
    log_info(f"Encoded {len(data)} byte(s) with style '{style.name}'.")
    if markdown:
        return fence(body, label)
    return body


def decode(text: str, style: StyleLike = DEFAULT_STYLE, markdown: bool = False) -> bytes:
    """
    Decode a Braille dump to bytes; wrapping and indentation are ignored.

    Raises:
        InvalidCharacterError: a character is neither Braille nor a separator
        DomainError: a cell has no value in the style's domain
        UnknownStyleError: style is not registered
    """
    style = get_style(style)
    if markdown:
        text = unfence(text)
    data = decode_text(text, style)
    log_info(f"Decoded {len(data)} byte(s) with style '{style.name}'.")
    return data
