"""
The generic block record and its serializer.

A GeneralBlock is what the block tokenizer hands out: the raw id and the raw
content between the outer braces. It also stands in for top-level block kinds
that have no typed parser.
"""

from typing import ClassVar, Iterable

from pydantic import BaseModel, ConfigDict, Field, field_validator

BLOCK_START = "{"
BLOCK_END = "}"
ID_SEPARATOR = ":"


def render_block(block_id: str, content: str) -> str:
    """Render a block as `{id:content}`."""
    return BLOCK_START + block_id + ID_SEPARATOR + content + BLOCK_END


def render_blocks(blocks: Iterable) -> str:
    """Concatenate the text of several blocks, e.g. to rebuild nested content."""
    return "".join(block.to_text() for block in blocks)


class GeneralBlock(BaseModel):
    """
    An untyped `{id:content}` block exactly as read from the source.
    """

    model_config = ConfigDict(frozen=True)

    RESERVED_ID_CHARACTERS: ClassVar[str] = BLOCK_START + BLOCK_END + ID_SEPARATOR

    id: str = Field(
        ...,
        description="The block id, the text between the opening brace and the first colon"
    )

    content: str = Field(
        ...,
        description="The raw text between the colon and the matching closing brace"
    )

    @field_validator("id")
    @classmethod
    def _check_id(cls, value: str) -> str:
        if not value:
            raise ValueError("block id can't be empty")
        if any(char in cls.RESERVED_ID_CHARACTERS for char in value):
            raise ValueError(f"block id '{value}' contains one of '{cls.RESERVED_ID_CHARACTERS}'")
        return value

    def to_text(self) -> str:
        return render_block(self.id, self.content)
