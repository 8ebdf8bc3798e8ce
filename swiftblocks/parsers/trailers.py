"""
Parsers for the trailer blocks 5 and S.
"""

from pydantic import ValidationError

from ..exceptions import BlockFieldParseError
from ..models.general import GeneralBlock
from ..models.trailers import SystemTrailerBlock, UserTrailerBlock
from .common import check_block_id, read_subblocks


def parse_user_trailer(block: GeneralBlock) -> UserTrailerBlock:
    """
    Parse block 5.

    Known codes fill their field, the last one winning if a code repeats;
    unknown codes end up in additional_subblocks.
    """
    check_block_id(block, UserTrailerBlock.BLOCK_ID)
    values, additional = read_subblocks(block, UserTrailerBlock.SUBBLOCK_FIELDS)
    try:
        return UserTrailerBlock(additional_subblocks=tuple(additional.values()), **values)
    except ValidationError as e:
        raise BlockFieldParseError(f"invalid sub-block values: {e}", block_id=block.id) from e


def parse_system_trailer(block: GeneralBlock) -> SystemTrailerBlock:
    check_block_id(block, SystemTrailerBlock.BLOCK_ID)
    values, additional = read_subblocks(block, SystemTrailerBlock.SUBBLOCK_FIELDS)
    try:
        return SystemTrailerBlock(additional_subblocks=tuple(additional.values()), **values)
    except ValidationError as e:
        raise BlockFieldParseError(f"invalid sub-block values: {e}", block_id=block.id) from e
