"""
Output layout: column wrapping and Markdown fencing.

Neither carries payload. Decoding skips every separator character, so a
dump wrapped at any width (or not at all) decodes to the same bytes.
"""
from typing import Optional

FENCE = "```"

# Line-continuation marker written by earlier dumps at the end of each line
CONTINUATION = "\\"


def is_separator(char: str) -> bool:
    return char.isspace() or char == CONTINUATION


def wrap(encoded: str, columns: int, indent: int = 0) -> str:
    """
    Break encoded text into lines of `columns` characters.

    Each complete line, including the last one, is followed by a newline
    and `indent` spaces. columns == 0 disables wrapping.
    """
    if columns < 0 or indent < 0:
        raise ValueError("columns and indent must not be negative")
    if columns == 0:
        return encoded
    separator = "\n" + " " * indent
    full = len(encoded) - len(encoded) % columns
    lines = [encoded[i:i + columns] + separator for i in range(0, full, columns)]
    return "".join(lines) + encoded[full:]


def fence(text: str, label: Optional[str] = None) -> str:
    """Wrap text in a Markdown code block, optionally preceded by `label`:."""
    block = f"{FENCE}\n{text}\n{FENCE}\n"
    if label is None:
        return block
    return f"`{label}`:\n\n{block}"


def unfence(text: str) -> str:
    """
    Strip the Markdown framing added by fence().

    Text without a code fence is returned unchanged.
    """
    lines = text.splitlines()
    try:
        start = next(i for i, line in enumerate(lines) if line.strip() == FENCE)
        end = next(i for i in range(len(lines) - 1, start, -1) if lines[i].strip() == FENCE)
    except StopIteration:
        return text
    return "\n".join(lines[start + 1:end])
