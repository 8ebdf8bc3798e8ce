"""
swiftblocks: SWIFT MT message envelope parser.

Splits `{id:content}` block text into typed, validated header, text and
trailer blocks, and writes them back without losing a character.
"""

__version__ = "0.1.0"
__author__ = "swiftblocks Project"

# Import main components
from .exceptions import (
    SwiftParseError,
    BlockParseError,
    BlockFieldParseError,
    FieldValueError,
    MessageParseError,
)
from .models import (
    GeneralBlock,
    render_block,
    SwiftBlock,
    MessagePriority,
    BasicHeaderBlock,
    ApplicationHeaderInputBlock,
    ApplicationHeaderOutputBlock,
    UserHeaderBlock,
    TextBlock,
    UserTrailerBlock,
    SystemTrailerBlock,
    SwiftMessage,
)
from .readers import SwiftBlockReader
from .parsers import BlockParserRegistry, parser_registry
from .readers.message_reader import SwiftMessageReader, parse_message, read_messages

__all__ = [
    "SwiftParseError",
    "BlockParseError",
    "BlockFieldParseError",
    "FieldValueError",
    "MessageParseError",
    "GeneralBlock",
    "render_block",
    "SwiftBlock",
    "MessagePriority",
    "BasicHeaderBlock",
    "ApplicationHeaderInputBlock",
    "ApplicationHeaderOutputBlock",
    "UserHeaderBlock",
    "TextBlock",
    "UserTrailerBlock",
    "SystemTrailerBlock",
    "SwiftMessage",
    "SwiftBlockReader",
    "BlockParserRegistry",
    "parser_registry",
    "SwiftMessageReader",
    "parse_message",
    "read_messages",
]
