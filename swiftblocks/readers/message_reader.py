"""
Message reader.

Drives the block tokenizer over a whole input, hands each top-level block to
its typed parser and assembles SwiftMessage objects. A source may hold several
messages back to back; each one starts with a basic header block.
"""

import logging
from typing import Any, Dict, Iterator, List, Optional, TextIO, Union

from pydantic import ValidationError

from ..config import config
from ..exceptions import MessageParseError, SwiftParseError
from ..models.general import GeneralBlock
from ..models.message import BLOCK_ORDER, SwiftMessage
from ..parsers.registry import BlockParserRegistry, parser_registry
from .block_reader import SwiftBlockReader

# Block id to SwiftMessage field
MESSAGE_FIELDS = {
    "1": "basic_header",
    "2": "application_header",
    "3": "user_header",
    "4": "text",
    "5": "user_trailer",
    "S": "system_trailer",
}


class SwiftMessageReader:
    """
    Reads SwiftMessage objects one at a time from a string or text stream.
    """

    def __init__(
        self,
        source: Union[str, TextIO],
        registry: Optional[BlockParserRegistry] = None,
        required_blocks: Optional[List[str]] = None,
        enforce_block_order: Optional[bool] = None
    ):
        """
        Initialize the message reader.

        Args:
            source: The message text or a text stream
            registry: Parsers to use per block id, the global registry by default
            required_blocks: Block ids every message must have, from config by default
            enforce_block_order: Reject known blocks out of 1, 2, 3, 4, 5, S order,
                from config by default
        """
        self._block_reader = SwiftBlockReader(source)
        self._registry = registry if registry is not None else parser_registry
        self._required_blocks = required_blocks if required_blocks is not None else config.required_blocks
        self._enforce_block_order = (
            enforce_block_order if enforce_block_order is not None else config.enforce_block_order
        )
        self._pending: Optional[GeneralBlock] = None
        self._message_count = 0

    @property
    def message_count(self) -> int:
        """Number of messages read so far."""
        return self._message_count

    def read_message(self) -> Optional[SwiftMessage]:
        """
        Read the next message.

        Returns:
            The next message, or None at the end of the input

        Raises:
            MessageParseError: If the blocks don't form a valid message; the
                underlying block error is chained as the cause
        """
        block = self._next_block()
        if block is None:
            return None

        if block.id != "1":
            raise MessageParseError(
                f"Message {self._message_count + 1}: expected block '1' first, but was '{block.id}'"
            )

        fields: Dict[str, Any] = {}
        seen_ids: List[str] = []
        additional: List[GeneralBlock] = []

        while block is not None:
            if block.id == "1" and "1" in seen_ids:
                # basic header of the following message
                self._pending = block
                break

            if block.id in MESSAGE_FIELDS:
                self._check_position(block.id, seen_ids)
                seen_ids.append(block.id)
                fields[MESSAGE_FIELDS[block.id]] = self._parse_block(block)
            else:
                additional.append(block)

            block = self._next_block()

        missing = [block_id for block_id in self._required_blocks if block_id not in seen_ids]
        if missing:
            raise MessageParseError(
                f"Message {self._message_count + 1}: missing mandatory blocks {missing}"
            )

        try:
            message = SwiftMessage(additional_blocks=tuple(additional), **fields)
        except ValidationError as e:
            raise MessageParseError(f"Message {self._message_count + 1}: {e}") from e

        self._message_count += 1
        logging.debug(f"Read message {self._message_count} with blocks {seen_ids}")
        return message

    def read_all(self) -> List[SwiftMessage]:
        return list(self)

    def at_end(self) -> bool:
        """True when no blocks are left in the source."""
        if self._pending is None:
            self._pending = self._read_raw_block()
        return self._pending is None

    def __iter__(self) -> Iterator[SwiftMessage]:
        while True:
            message = self.read_message()
            if message is None:
                return
            yield message

    def _next_block(self) -> Optional[GeneralBlock]:
        if self._pending is not None:
            block, self._pending = self._pending, None
            return block
        return self._read_raw_block()

    def _read_raw_block(self) -> Optional[GeneralBlock]:
        try:
            return self._block_reader.read_block()
        except SwiftParseError as e:
            raise MessageParseError(f"Message {self._message_count + 1}: {e}") from e

    def _parse_block(self, block: GeneralBlock):
        try:
            return self._registry.parse(block)
        except SwiftParseError as e:
            raise MessageParseError(f"Message {self._message_count + 1}: {e}") from e

    def _check_position(self, block_id: str, seen_ids: List[str]) -> None:
        if block_id in seen_ids:
            raise MessageParseError(
                f"Message {self._message_count + 1}: duplicate block '{block_id}'"
            )
        if self._enforce_block_order and seen_ids:
            previous_id = seen_ids[-1]
            if BLOCK_ORDER.index(block_id) < BLOCK_ORDER.index(previous_id):
                raise MessageParseError(
                    f"Message {self._message_count + 1}: block '{block_id}' "
                    f"must not follow block '{previous_id}'"
                )


def parse_message(source: Union[str, TextIO]) -> SwiftMessage:
    """
    Parse a source holding exactly one message.

    Raises:
        MessageParseError: If the source holds no message or more than one
    """
    reader = SwiftMessageReader(source)
    message = reader.read_message()
    if message is None:
        raise MessageParseError("No message found")
    if not reader.at_end():
        raise MessageParseError("Unexpected content after the first message")
    return message


def read_messages(source: Union[str, TextIO]) -> List[SwiftMessage]:
    """Parse every message in a source."""
    return SwiftMessageReader(source).read_all()
