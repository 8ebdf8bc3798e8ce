"""
Text block model, block 4.
"""

from typing import ClassVar, Optional

from pydantic import Field, field_validator

from .base import TypedBlockModel


class TextBlock(TypedBlockModel):
    """
    The message body, kept as opaque text.

    The content is an optional info line, then a line break and the body
    lines, terminated by `-`:

        {4:
        :20:REFERENCE
        :25:ACCOUNT
        -}
    """

    BLOCK_ID: ClassVar[str] = "4"
    END_OF_TEXT: ClassVar[str] = "-"

    info_line: Optional[str] = Field(
        None,
        description="Text between the colon and the first line break, absent if empty"
    )

    text: str = Field(
        ...,
        description="Everything from the first line break up to and including the closing '-'"
    )

    @field_validator("info_line")
    @classmethod
    def _check_info_line(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and ("\n" in value or "\r" in value):
            raise ValueError("info_line can't contain line breaks")
        return value

    @field_validator("text")
    @classmethod
    def _check_text(cls, value: str) -> str:
        if not value.startswith(("\n", "\r\n")):
            raise ValueError("text must start with a line break")
        if not value.endswith(cls.END_OF_TEXT):
            raise ValueError(f"text must end with '{cls.END_OF_TEXT}'")
        return value

    @property
    def content(self) -> str:
        return (self.info_line or "") + self.text
