from typing import Optional


class CodecError(ValueError):
    """Base class for every error raised by the codec."""

    def __init__(self, message: str, position: Optional[int] = None):
        self.message = message
        self.position = position
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.position is None:
            return self.message
        return f"{self.message} (at position {self.position})"

    def at(self, position: int) -> "CodecError":
        """Return a copy of this error located at the given unit index."""
        return type(self)(self.message, position)


class DomainError(CodecError):
    """A byte or decoded value is outside the active style's domain."""


class InvalidCharacterError(CodecError):
    """A decode input character is neither a Braille cell nor a separator."""


class UnknownStyleError(CodecError, KeyError):
    """No style is registered under the requested name."""

    def __str__(self) -> str:
        return CodecError.__str__(self)
