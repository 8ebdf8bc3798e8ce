"""
The message aggregate: one typed block per known block kind.
"""

from typing import Iterator, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from .general import GeneralBlock, render_blocks
from .headers import (
    ApplicationHeaderInputBlock,
    ApplicationHeaderOutputBlock,
    BasicHeaderBlock,
    UserHeaderBlock,
)
from .text import TextBlock
from .trailers import SystemTrailerBlock, UserTrailerBlock

ApplicationHeaderBlock = Union[ApplicationHeaderInputBlock, ApplicationHeaderOutputBlock]

TypedBlock = Union[
    BasicHeaderBlock,
    ApplicationHeaderInputBlock,
    ApplicationHeaderOutputBlock,
    UserHeaderBlock,
    TextBlock,
    UserTrailerBlock,
    SystemTrailerBlock,
    GeneralBlock,
]

# Canonical block order within a message
BLOCK_ORDER = ["1", "2", "3", "4", "5", "S"]


class SwiftMessage(BaseModel):
    """
    A complete message as a set of typed blocks.

    Which blocks are mandatory is decided by the message reader, so only the
    basic header is required here.
    """

    model_config = ConfigDict(frozen=True)

    basic_header: BasicHeaderBlock

    application_header: Optional[ApplicationHeaderBlock] = None

    user_header: Optional[UserHeaderBlock] = None

    text: Optional[TextBlock] = None

    user_trailer: Optional[UserTrailerBlock] = None

    system_trailer: Optional[SystemTrailerBlock] = None

    additional_blocks: Tuple[GeneralBlock, ...] = Field(
        default=(),
        description="Top-level blocks of unknown kind, in read order"
    )

    def blocks(self) -> Iterator[TypedBlock]:
        """Yield the present blocks in canonical order, unknown kinds last."""
        for block in (
            self.basic_header,
            self.application_header,
            self.user_header,
            self.text,
            self.user_trailer,
            self.system_trailer,
        ):
            if block is not None:
                yield block
        yield from self.additional_blocks

    def get_block(self, block_id: str) -> Optional[TypedBlock]:
        for block in self.blocks():
            if block.id == block_id:
                return block
        return None

    @property
    def message_type(self) -> Optional[str]:
        if self.application_header is None:
            return None
        return self.application_header.message_type

    def to_text(self) -> str:
        return render_blocks(self.blocks())
