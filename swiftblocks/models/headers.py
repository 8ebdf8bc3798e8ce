"""
Header block models.

Block 1 and block 2 are fixed-width: every field sits at a fixed position and
the `content` property writes the fields back in that order. Block 3 is a
sequence of numbered sub-blocks.
"""

from datetime import datetime
from typing import ClassVar, Dict, Optional

from pydantic import Field, model_validator

from .base import SubblockContainerModel, TypedBlockModel
from .fields import MessagePriority

DATE_FORMAT = "%y%m%d"
TIME_FORMAT = "%H%M"


class BasicHeaderBlock(TypedBlockModel):
    """
    Basic header, block 1.

    Example content: F01BANKBEBBAXXX2222123456
    """

    BLOCK_ID: ClassVar[str] = "1"

    application_id: str = Field(
        ...,
        min_length=1, max_length=1,
        description="Application id, e.g. F = FIN, A = GPA, L = login"
    )

    service_id: str = Field(
        ...,
        min_length=2, max_length=2,
        description="Service id, e.g. 01 = FIN/GPA, 21 = ACK/NAK"
    )

    logical_terminal_address: str = Field(
        ...,
        min_length=12, max_length=12,
        description="Sender or receiver logical terminal address (BIC8 + terminal code + branch)"
    )

    session_number: str = Field(..., min_length=4, max_length=4)

    sequence_number: str = Field(..., min_length=6, max_length=6)

    @property
    def content(self) -> str:
        return (
            self.application_id
            + self.service_id
            + self.logical_terminal_address
            + self.session_number
            + self.sequence_number
        )


class ApplicationHeaderInputBlock(TypedBlockModel):
    """
    Application header of a message sent to the network, block 2 mode I.

    Example content: I940BANKDEFFXXXXU3003
    """

    BLOCK_ID: ClassVar[str] = "2"
    MODE_CODE: ClassVar[str] = "I"

    message_type: str = Field(
        ...,
        min_length=3, max_length=3,
        description="Message type without the MT prefix, e.g. 940"
    )

    receiver_address: str = Field(
        ...,
        min_length=12, max_length=12,
        description="Receiver logical terminal address"
    )

    message_priority: Optional[MessagePriority] = Field(
        None,
        description="Message priority, absent for system defaults"
    )

    delivery_monitoring: Optional[str] = Field(
        None,
        min_length=1, max_length=1,
        description="Delivery monitoring code 1, 2 or 3"
    )

    obsolescence_period: Optional[str] = Field(
        None,
        min_length=3, max_length=3,
        description="Obsolescence period in units of five minutes"
    )

    @model_validator(mode="after")
    def _check_trailing_fields(self) -> "ApplicationHeaderInputBlock":
        # positional: a trailing field can only be present if the one before it is
        if self.delivery_monitoring is not None and self.message_priority is None:
            raise ValueError("delivery_monitoring requires message_priority")
        if self.obsolescence_period is not None and self.delivery_monitoring is None:
            raise ValueError("obsolescence_period requires delivery_monitoring")
        return self

    @property
    def content(self) -> str:
        content = self.MODE_CODE + self.message_type + self.receiver_address
        if self.message_priority is not None:
            content += self.message_priority.value
        if self.delivery_monitoring is not None:
            content += self.delivery_monitoring
        if self.obsolescence_period is not None:
            content += self.obsolescence_period
        return content


class ApplicationHeaderOutputBlock(TypedBlockModel):
    """
    Application header of a message delivered by the network, block 2 mode O.

    Fixed length format (47 characters):

        1:  1 - mode, always O
        2:  3 - message type
        3:  4 - input time (HHMM)
        4:  6 - input date (YYMMDD)
        5: 12 - message input reference, sender address part
        6:  4 - session number
        7:  6 - sequence number
        8:  6 - output date (YYMMDD)
        9:  4 - output time (HHMM)
       10:  1 - message priority

    Example content: O1001200970103BANKBEBBAXXX22221234569701031201N
    """

    BLOCK_ID: ClassVar[str] = "2"
    MODE_CODE: ClassVar[str] = "O"

    message_type: str = Field(..., min_length=3, max_length=3)

    input_date_time: datetime = Field(
        ...,
        description="Input date and time with respect to the sender, minute precision"
    )

    input_reference: str = Field(
        ...,
        min_length=12, max_length=12,
        description="Message input reference, the sender's address"
    )

    session_number: str = Field(..., min_length=4, max_length=4)

    sequence_number: str = Field(..., min_length=6, max_length=6)

    output_date_time: datetime = Field(
        ...,
        description="Output date and time with respect to the receiver, minute precision"
    )

    message_priority: MessagePriority

    @property
    def content(self) -> str:
        return (
            self.MODE_CODE
            + self.message_type
            + self.input_date_time.strftime(TIME_FORMAT)
            + self.input_date_time.strftime(DATE_FORMAT)
            + self.input_reference
            + self.session_number
            + self.sequence_number
            + self.output_date_time.strftime(DATE_FORMAT)
            + self.output_date_time.strftime(TIME_FORMAT)
            + self.message_priority.value
        )


class UserHeaderBlock(SubblockContainerModel):
    """
    User header, block 3.

    Example content: {113:SEPA}{108:ILOVESEPA}
    """

    BLOCK_ID: ClassVar[str] = "3"

    SUBBLOCK_FIELDS: ClassVar[Dict[str, str]] = {
        "103": "service_identifier",
        "113": "banking_priority",
        "108": "message_user_reference",
        "119": "validation_flag",
        "111": "service_type_identifier",
        "121": "unique_end_to_end_reference",
        "106": "message_input_reference",
    }

    service_identifier: Optional[str] = Field(None, description="FINCopy service code")
    banking_priority: Optional[str] = None
    message_user_reference: Optional[str] = Field(None, description="MUR, free reference chosen by the sender")
    validation_flag: Optional[str] = Field(None, description="e.g. STP, REMIT, COV")
    service_type_identifier: Optional[str] = None
    unique_end_to_end_reference: Optional[str] = Field(None, description="UETR")
    message_input_reference: Optional[str] = Field(None, description="MIR")
