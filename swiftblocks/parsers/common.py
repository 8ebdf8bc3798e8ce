"""
Helpers shared by the typed block parsers.
"""

import re
from datetime import datetime
from typing import Dict, Optional, Tuple

from ..config import config
from ..exceptions import BlockFieldParseError, BlockParseError, FieldValueError
from ..models.general import GeneralBlock
from ..readers.block_reader import SwiftBlockReader

DATE_TIME_FORMAT = "%y%m%d%H%M"
DATE_TIME_PATTERN = re.compile(r"[0-9]{10}")


def check_block_id(block: GeneralBlock, expected_id: str) -> None:
    if block.id != expected_id:
        raise BlockFieldParseError(f"unexpected block id, expected '{expected_id}'", block_id=block.id)


def match_content(block: GeneralBlock, pattern: re.Pattern) -> re.Match:
    """Match the whole content against a positional pattern, never a prefix of it."""
    match = pattern.fullmatch(block.content)
    if match is None:
        raise BlockFieldParseError(
            f"content '{block.content}' did not match format {pattern.pattern}",
            block_id=block.id
        )
    return match


def parse_date_time(block: GeneralBlock, value: str, field_name: str) -> datetime:
    """Parse a yyMMddHHmm value, rejecting anything that is not a real date."""
    if not DATE_TIME_PATTERN.fullmatch(value):
        raise FieldValueError(f"{field_name} '{value}' is not numeric", block_id=block.id)
    try:
        return datetime.strptime(value, DATE_TIME_FORMAT)
    except ValueError as e:
        raise FieldValueError(f"{field_name} '{value}' is not a valid date: {e}", block_id=block.id) from e


def read_subblocks(
    block: GeneralBlock,
    known_codes: Dict[str, str],
    reject_duplicates: Optional[bool] = None
) -> Tuple[Dict[str, str], Dict[str, GeneralBlock]]:
    """
    Split a block's content into sub-blocks.

    Args:
        block: The block whose content is a sequence of sub-blocks
        known_codes: Sub-block code to field name
        reject_duplicates: Fail on repeated codes; defaults to the
            parsing.reject_duplicate_subblocks setting

    Returns:
        Field values for known codes (last occurrence wins) and the
        remaining sub-blocks keyed by code

    Raises:
        BlockFieldParseError: If the content is not a well-formed block sequence
    """
    if reject_duplicates is None:
        reject_duplicates = config.reject_duplicate_subblocks

    values: Dict[str, str] = {}
    additional: Dict[str, GeneralBlock] = {}
    seen = set()

    reader = SwiftBlockReader(block.content)
    try:
        for subblock in reader:
            if reject_duplicates and subblock.id in seen:
                raise BlockFieldParseError(f"duplicate sub-block '{subblock.id}'", block_id=block.id)
            seen.add(subblock.id)

            field_name = known_codes.get(subblock.id)
            if field_name is not None:
                values[field_name] = subblock.content
            else:
                additional[subblock.id] = subblock
    except BlockParseError as e:
        raise BlockFieldParseError(f"content error: {e}", block_id=block.id) from e

    return values, additional
