"""
Closed lookup tables for coded header fields.
"""

from enum import Enum


class MessagePriority(str, Enum):
    """Message priority as carried in the application header."""

    URGENT = "U"
    NORMAL = "N"
    SYSTEM = "S"

    @classmethod
    def of(cls, code: str) -> "MessagePriority":
        try:
            return cls(code)
        except ValueError:
            raise ValueError(f"unknown message priority code '{code}'") from None
