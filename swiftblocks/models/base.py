"""
The capability set shared by every block kind.
"""

from typing import ClassVar, Dict, Optional, Protocol, Tuple, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .general import GeneralBlock, render_block


@runtime_checkable
class SwiftBlock(Protocol):
    """
    Anything that can be written back as a `{id:content}` block.

    Typed blocks and GeneralBlock both satisfy this structurally, so callers
    handle known and unknown block kinds the same way.
    """

    @property
    def id(self) -> str:
        ...

    @property
    def content(self) -> str:
        ...

    def to_text(self) -> str:
        ...


class TypedBlockModel(BaseModel):
    """
    Common plumbing for typed blocks: immutability, id and text rendering.

    Subclasses set BLOCK_ID and implement the `content` property.
    """

    model_config = ConfigDict(frozen=True)

    BLOCK_ID: ClassVar[str] = ""

    @property
    def id(self) -> str:
        return self.BLOCK_ID

    @property
    def content(self) -> str:
        raise NotImplementedError

    def to_text(self) -> str:
        return render_block(self.id, self.content)


class SubblockContainerModel(TypedBlockModel):
    """
    A typed block whose content is a sequence of `{code:value}` sub-blocks.

    SUBBLOCK_FIELDS maps each known sub-block code to the field holding its
    value, in rendering order. Anything else is kept in additional_subblocks.
    """

    SUBBLOCK_FIELDS: ClassVar[Dict[str, str]] = {}

    additional_subblocks: Tuple[GeneralBlock, ...] = Field(
        default=(),
        description="Sub-blocks with unknown codes, one per code, in read order"
    )

    @field_validator("additional_subblocks")
    @classmethod
    def _check_additional_subblocks(cls, value: Tuple[GeneralBlock, ...]) -> Tuple[GeneralBlock, ...]:
        codes = [subblock.id for subblock in value]
        if len(set(codes)) != len(codes):
            raise ValueError(f"additional sub-block codes must be unique, got {codes}")
        known = [code for code in codes if code in cls.SUBBLOCK_FIELDS]
        if known:
            raise ValueError(f"sub-block codes {known} belong in their own fields")
        return value

    @property
    def content(self) -> str:
        parts = []
        for code, field_name in self.SUBBLOCK_FIELDS.items():
            value = getattr(self, field_name)
            if value is not None:
                parts.append(render_block(code, value))
        for subblock in self.additional_subblocks:
            parts.append(subblock.to_text())
        return "".join(parts)

    def get_additional_subblock(self, code: str) -> Optional[GeneralBlock]:
        for subblock in self.additional_subblocks:
            if subblock.id == code:
                return subblock
        return None
