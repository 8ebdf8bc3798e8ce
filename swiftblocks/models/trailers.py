"""
Trailer block models, block 5 and block S.

Both trailers are sequences of three-letter coded sub-blocks. Codes the models
don't know are kept verbatim so nothing is lost when a trailer is rewritten.
"""

from typing import ClassVar, Dict, Optional

from pydantic import Field

from .base import SubblockContainerModel


class UserTrailerBlock(SubblockContainerModel):
    """
    User trailer, block 5.

    Sub-blocks:
        MAC - message authentication code
        PAC - proprietary authentication code
        CHK - checksum
        TNG - training
        PDE - possible duplicate emission
        DLM - delayed message, added by the network for late delivery

    Example content: {MAC:12345678}{CHK:123456789ABC}
    """

    BLOCK_ID: ClassVar[str] = "5"

    SUBBLOCK_FIELDS: ClassVar[Dict[str, str]] = {
        "MAC": "message_authentication_code",
        "PAC": "proprietary_authentication_code",
        "CHK": "checksum",
        "TNG": "training",
        "PDE": "possible_duplicate_emission",
        "DLM": "delivery_delay",
    }

    message_authentication_code: Optional[str] = None
    proprietary_authentication_code: Optional[str] = None
    checksum: Optional[str] = None
    training: Optional[str] = None
    possible_duplicate_emission: Optional[str] = None
    delivery_delay: Optional[str] = None


class SystemTrailerBlock(SubblockContainerModel):
    """
    System trailer, block S.

    Example content: {CHK:123456789ABC}{SYS:1200970103BANKBEBBAXXX2222123456}
    """

    BLOCK_ID: ClassVar[str] = "S"

    SUBBLOCK_FIELDS: ClassVar[Dict[str, str]] = {
        "CHK": "checksum",
        "TNG": "training",
        "PDE": "possible_duplicate_emission",
        "DLM": "delayed_message",
        "MRF": "message_reference",
        "PDM": "possible_duplicate_message",
        "SYS": "system_originated_message",
    }

    checksum: Optional[str] = None
    training: Optional[str] = None
    possible_duplicate_emission: Optional[str] = None
    delayed_message: Optional[str] = None
    message_reference: Optional[str] = Field(None, description="Reference of a related message")
    possible_duplicate_message: Optional[str] = None
    system_originated_message: Optional[str] = None
