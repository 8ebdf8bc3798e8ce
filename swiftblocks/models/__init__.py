"""Data models for swiftblocks."""

from .general import GeneralBlock, render_block, render_blocks
from .base import SwiftBlock
from .fields import MessagePriority
from .headers import (
    BasicHeaderBlock,
    ApplicationHeaderInputBlock,
    ApplicationHeaderOutputBlock,
    UserHeaderBlock,
)
from .text import TextBlock
from .trailers import UserTrailerBlock, SystemTrailerBlock
from .message import SwiftMessage, TypedBlock, ApplicationHeaderBlock, BLOCK_ORDER

__all__ = [
    "GeneralBlock",
    "render_block",
    "render_blocks",
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
    "TypedBlock",
    "ApplicationHeaderBlock",
    "BLOCK_ORDER",
]
