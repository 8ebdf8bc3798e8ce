"""
Block tokenizer.

Reads `{id:content}` blocks one at a time from a string or text stream. The
reader does not know which block kinds nest: content is returned verbatim,
nested blocks included, and callers that expect sub-blocks feed the content
to a fresh reader.
"""

import io
import logging
from typing import Iterator, List, Optional, TextIO, Union

from ..exceptions import BlockParseError
from ..models.general import BLOCK_END, BLOCK_START, ID_SEPARATOR, GeneralBlock


class SwiftBlockReader:
    """
    Reads consecutive top-level blocks from a character source.

    Whitespace between top-level blocks is skipped. Inside content nothing is
    skipped or trimmed.

    Not safe to share between threads: the reader owns a cursor into its
    source. Use one reader per parse.
    """

    def __init__(self, source: Union[str, TextIO]):
        """
        Args:
            source: The text to read, or a text stream positioned at the first block
        """
        self._stream = io.StringIO(source) if isinstance(source, str) else source
        self._line_number = 1
        self._column = 0

    @property
    def line_number(self) -> int:
        return self._line_number

    @property
    def column(self) -> int:
        return self._column

    def read_block(self) -> Optional[GeneralBlock]:
        """
        Read the next top-level block.

        Returns:
            The next block, or None when only whitespace is left

        Raises:
            BlockParseError: If the source does not hold a well-formed block here
        """
        char = self._skip_whitespace()
        if char is None:
            return None
        if char != BLOCK_START:
            raise self._error(f"expected block start '{BLOCK_START}', but was '{char}'")

        block_id = self._read_id()
        content = self._read_content(block_id)

        logging.debug(f"Read block '{block_id}' ({len(content)} characters of content)")
        return GeneralBlock(id=block_id, content=content)

    def read_all(self) -> List[GeneralBlock]:
        """Read every remaining block."""
        return list(self)

    def __iter__(self) -> Iterator[GeneralBlock]:
        while True:
            block = self.read_block()
            if block is None:
                return
            yield block

    def _read_char(self) -> Optional[str]:
        char = self._stream.read(1)
        if not char:
            return None
        if char == "\n":
            self._line_number += 1
            self._column = 0
        else:
            self._column += 1
        return char

    def _skip_whitespace(self) -> Optional[str]:
        char = self._read_char()
        while char is not None and char.isspace():
            char = self._read_char()
        return char

    def _read_id(self) -> str:
        chars = []
        while True:
            char = self._read_char()
            if char is None:
                raise self._error("unterminated block id")
            if char == ID_SEPARATOR:
                break
            if char in (BLOCK_START, BLOCK_END):
                raise self._error(f"invalid character '{char}' in block id")
            chars.append(char)

        if not chars:
            raise self._error("empty block id")
        return "".join(chars)

    def _read_content(self, block_id: str) -> str:
        # the closing brace is the first one not matched by an opening brace
        # inside the content
        chars = []
        depth = 0
        while True:
            char = self._read_char()
            if char is None:
                raise self._error(f"unterminated content of block '{block_id}'")
            if char == BLOCK_START:
                depth += 1
            elif char == BLOCK_END:
                if depth == 0:
                    break
                depth -= 1
            chars.append(char)
        return "".join(chars)

    def _error(self, message: str) -> BlockParseError:
        return BlockParseError(message, line_number=self._line_number, column=self._column)
