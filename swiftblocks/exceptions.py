"""
Exceptions raised while reading SWIFT messages.

Structural errors come from the block tokenizer, shape and value errors from
the typed block parsers, and message errors from the message reader. Each
level chains the error that caused it.
"""

from typing import Optional


class SwiftParseError(Exception):
    """Base exception for all SWIFT parsing errors."""
    pass


class BlockParseError(SwiftParseError):
    """
    Malformed block delimiters or braces, detected by the block tokenizer.
    """

    def __init__(self, message: str, line_number: Optional[int] = None, column: Optional[int] = None):
        self.line_number = line_number
        self.column = column
        if line_number is not None:
            message = f"{message} (line {line_number}, column {column})"
        super().__init__(message)


class BlockFieldParseError(SwiftParseError):
    """
    Block content that does not match the grammar of its block kind.
    """

    def __init__(self, message: str, block_id: Optional[str] = None):
        self.block_id = block_id
        if block_id is not None:
            message = f"Block '{block_id}': {message}"
        super().__init__(message)


class FieldValueError(BlockFieldParseError):
    """A positional field that should be numeric or a date did not parse."""
    pass


class MessageParseError(SwiftParseError):
    """A sequence of blocks that does not form a valid message."""
    pass
