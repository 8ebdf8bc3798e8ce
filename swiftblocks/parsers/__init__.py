"""Typed block parsers and the block id registry."""

from .headers import (
    parse_basic_header,
    parse_application_header,
    parse_application_header_input,
    parse_application_header_output,
    parse_user_header,
)
from .text import parse_text_block
from .trailers import parse_user_trailer, parse_system_trailer
from .registry import BlockParserRegistry, parser_registry

__all__ = [
    "parse_basic_header",
    "parse_application_header",
    "parse_application_header_input",
    "parse_application_header_output",
    "parse_user_header",
    "parse_text_block",
    "parse_user_trailer",
    "parse_system_trailer",
    "BlockParserRegistry",
    "parser_registry",
]
