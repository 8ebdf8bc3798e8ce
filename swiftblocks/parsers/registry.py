"""
Block Parser Registry for swiftblocks.

This module maps top-level block ids to the parser for that block kind. The
block reader stays id-agnostic; which blocks get typed, and which of those
re-tokenize their own content, is decided here by id.
"""

import logging
from typing import Callable, Dict, List, Optional

from ..models.general import GeneralBlock
from .headers import parse_application_header, parse_basic_header, parse_user_header
from .text import parse_text_block
from .trailers import parse_system_trailer, parse_user_trailer

BlockParser = Callable[[GeneralBlock], object]


class BlockParserRegistry:
    """
    Registry of typed block parsers keyed by block id.
    """

    def __init__(self):
        """Initialize the registry with the standard block kinds."""
        self._parsers: Dict[str, BlockParser] = {}
        self._register_default_parsers()

    def _register_default_parsers(self):
        """Register the parsers for blocks 1, 2, 3, 4, 5 and S."""
        self.register_parser("1", parse_basic_header)
        self.register_parser("2", parse_application_header)
        self.register_parser("3", parse_user_header)
        self.register_parser("4", parse_text_block)
        self.register_parser("5", parse_user_trailer)
        self.register_parser("S", parse_system_trailer)

    def register_parser(self, block_id: str, parser: BlockParser) -> None:
        """
        Register a parser for a block id, replacing any existing one.

        Args:
            block_id: The top-level block id the parser handles
            parser: Callable turning a GeneralBlock into a typed block
        """
        self._parsers[block_id] = parser

    def get_parser(self, block_id: str) -> Optional[BlockParser]:
        """
        Get the parser for a block id.

        Returns:
            The parser, or None if the block kind is unknown
        """
        return self._parsers.get(block_id)

    def list_block_ids(self) -> List[str]:
        return list(self._parsers.keys())

    def is_known(self, block_id: str) -> bool:
        return block_id in self._parsers

    def parse(self, block: GeneralBlock):
        """
        Turn a block record into its typed block.

        Unknown block kinds are returned unchanged as GeneralBlock.
        """
        parser = self.get_parser(block.id)
        if parser is None:
            logging.debug(f"No parser for block '{block.id}', keeping it as a general block")
            return block
        return parser(block)


# Global parser registry instance
parser_registry = BlockParserRegistry()
