"""Codec error types."""


class CodecError(Exception):
    """Base error for encoding and decoding failures."""


class ParseError(CodecError):
    """Raised when text cannot be decoded into a record."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)


class EncodeError(CodecError):
    """Raised when a value contains something JSON cannot represent."""
