"""
Parser for the text block, block 4.

The body is not interpreted; only the envelope shape (line break after the
info line, closing '-') is checked.
"""

import re

from ..models.general import GeneralBlock
from ..models.text import TextBlock
from .common import check_block_id, match_content

TEXT_BLOCK_PATTERN = re.compile(r"([^\r\n]*)(\r?\n.*-)", re.DOTALL)


def parse_text_block(block: GeneralBlock) -> TextBlock:
    check_block_id(block, TextBlock.BLOCK_ID)
    match = match_content(block, TEXT_BLOCK_PATTERN)

    return TextBlock(
        info_line=match.group(1) or None,
        text=match.group(2),
    )
