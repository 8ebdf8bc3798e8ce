"""
Parsers for the header blocks 1, 2 and 3.
"""

import re

from pydantic import ValidationError

from ..exceptions import BlockFieldParseError
from ..models.fields import MessagePriority
from ..models.general import GeneralBlock
from ..models.headers import (
    ApplicationHeaderInputBlock,
    ApplicationHeaderOutputBlock,
    BasicHeaderBlock,
    UserHeaderBlock,
)
from .common import check_block_id, match_content, parse_date_time, read_subblocks

BASIC_HEADER_PATTERN = re.compile(r"(.)(.{2})(.{12})(.{4})(.{6})")

# priority, delivery monitoring and obsolescence period are each only
# allowed after the one before them
APPLICATION_HEADER_INPUT_PATTERN = re.compile(r"(I)(.{3})(.{12})(?:(.)(?:(.)(.{3})?)?)?")

APPLICATION_HEADER_OUTPUT_PATTERN = re.compile(
    r"(O)(.{3})(.{4})(.{6})(.{12})(.{4})(.{6})(.{6})(.{4})(.)"
)


def parse_basic_header(block: GeneralBlock) -> BasicHeaderBlock:
    check_block_id(block, BasicHeaderBlock.BLOCK_ID)
    match = match_content(block, BASIC_HEADER_PATTERN)

    return BasicHeaderBlock(
        application_id=match.group(1),
        service_id=match.group(2),
        logical_terminal_address=match.group(3),
        session_number=match.group(4),
        sequence_number=match.group(5),
    )


def parse_application_header_input(block: GeneralBlock) -> ApplicationHeaderInputBlock:
    check_block_id(block, ApplicationHeaderInputBlock.BLOCK_ID)
    match = match_content(block, APPLICATION_HEADER_INPUT_PATTERN)

    priority_code = match.group(4)
    message_priority = _message_priority(block, priority_code) if priority_code is not None else None

    return ApplicationHeaderInputBlock(
        message_type=match.group(2),
        receiver_address=match.group(3),
        message_priority=message_priority,
        delivery_monitoring=match.group(5),
        obsolescence_period=match.group(6),
    )


def parse_application_header_output(block: GeneralBlock) -> ApplicationHeaderOutputBlock:
    """
    Parse an output application header.

    The content must be exactly 47 characters starting with mode O; input
    time comes before input date, output date before output time.
    """
    check_block_id(block, ApplicationHeaderOutputBlock.BLOCK_ID)
    match = match_content(block, APPLICATION_HEADER_OUTPUT_PATTERN)

    input_date_time = parse_date_time(block, match.group(4) + match.group(3), "input date time")
    output_date_time = parse_date_time(block, match.group(8) + match.group(9), "output date time")
    message_priority = _message_priority(block, match.group(10))

    return ApplicationHeaderOutputBlock(
        message_type=match.group(2),
        input_date_time=input_date_time,
        input_reference=match.group(5),
        session_number=match.group(6),
        sequence_number=match.group(7),
        output_date_time=output_date_time,
        message_priority=message_priority,
    )


def parse_application_header(block: GeneralBlock):
    """Parse block 2, choosing the input or output layout by its mode character."""
    check_block_id(block, ApplicationHeaderInputBlock.BLOCK_ID)
    mode = block.content[:1]
    if mode == ApplicationHeaderInputBlock.MODE_CODE:
        return parse_application_header_input(block)
    if mode == ApplicationHeaderOutputBlock.MODE_CODE:
        return parse_application_header_output(block)
    raise BlockFieldParseError(
        f"expected mode '{ApplicationHeaderInputBlock.MODE_CODE}' or "
        f"'{ApplicationHeaderOutputBlock.MODE_CODE}', but was '{mode}'",
        block_id=block.id
    )


def parse_user_header(block: GeneralBlock) -> UserHeaderBlock:
    check_block_id(block, UserHeaderBlock.BLOCK_ID)
    values, additional = read_subblocks(block, UserHeaderBlock.SUBBLOCK_FIELDS)
    try:
        return UserHeaderBlock(additional_subblocks=tuple(additional.values()), **values)
    except ValidationError as e:
        raise BlockFieldParseError(f"invalid sub-block values: {e}", block_id=block.id) from e


def _message_priority(block: GeneralBlock, code: str) -> MessagePriority:
    try:
        return MessagePriority.of(code)
    except ValueError as e:
        raise BlockFieldParseError(str(e), block_id=block.id) from e
