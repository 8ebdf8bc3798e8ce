import io
from datetime import datetime

import pytest

from swiftblocks.exceptions import BlockFieldParseError, BlockParseError, MessageParseError
from swiftblocks.models import (
    ApplicationHeaderOutputBlock,
    GeneralBlock,
    MessagePriority,
)
from swiftblocks.readers.message_reader import SwiftMessageReader, parse_message, read_messages

BASIC_HEADER = "{1:F01BANKBEBBAXXX2222123456}"
OUTPUT_HEADER = "{2:O1001200970103BANKBEBBAXXX22221234569701031201N}"
INPUT_HEADER = "{2:I940BANKDEFFXXXXU3003}"
USER_HEADER = "{3:{108:MUR12345}}"
TEXT = "{4:\r\n:20:REFERENCE\r\n:25:ACCOUNT\r\n-}"
USER_TRAILER = "{5:{MAC:12345678}{CHK:123456789ABC}}"
SYSTEM_TRAILER = "{S:{CHK:123456789ABC}}"


@pytest.fixture
def message_text():
    return BASIC_HEADER + OUTPUT_HEADER + USER_HEADER + TEXT + USER_TRAILER + SYSTEM_TRAILER


def test_parse_message(message_text):
    message = parse_message(message_text)

    assert message.basic_header.logical_terminal_address == "BANKBEBBAXXX"
    assert isinstance(message.application_header, ApplicationHeaderOutputBlock)
    assert message.application_header.output_date_time == datetime(1997, 1, 3, 12, 1)
    assert message.application_header.message_priority == MessagePriority.NORMAL
    assert message.message_type == "100"
    assert message.user_header.message_user_reference == "MUR12345"
    assert message.text.text == "\r\n:20:REFERENCE\r\n:25:ACCOUNT\r\n-"
    assert message.user_trailer.message_authentication_code == "12345678"
    assert message.system_trailer.checksum == "123456789ABC"
    assert message.additional_blocks == ()


def test_message_roundtrip(message_text):
    message = parse_message(message_text)
    assert message.to_text() == message_text
    assert parse_message(message.to_text()) == message


def test_block_order(message_text):
    message = parse_message(message_text)
    assert [block.id for block in message.blocks()] == ["1", "2", "3", "4", "5", "S"]
    assert message.get_block("3") is message.user_header
    assert message.get_block("X") is None


def test_minimal_message():
    message = parse_message(BASIC_HEADER + INPUT_HEADER + TEXT)
    assert message.application_header.receiver_address == "BANKDEFFXXXX"
    assert message.user_header is None
    assert message.user_trailer is None


def test_multiple_messages(message_text):
    second = BASIC_HEADER + INPUT_HEADER + TEXT
    messages = read_messages(message_text + "\r\n" + second + "\n")

    assert len(messages) == 2
    assert messages[0].message_type == "100"
    assert messages[1].message_type == "940"


def test_reader_iterates_stream(message_text):
    reader = SwiftMessageReader(io.StringIO(message_text + message_text))
    assert len(list(reader)) == 2
    assert reader.message_count == 2
    assert reader.read_message() is None


def test_empty_source():
    assert read_messages("") == []
    assert SwiftMessageReader("  \n").read_message() is None


def test_parse_message_requires_a_message():
    with pytest.raises(MessageParseError, match="No message"):
        parse_message("")


def test_parse_message_rejects_second_message(message_text):
    with pytest.raises(MessageParseError, match="after the first message"):
        parse_message(message_text + message_text)


def test_unknown_block_kind_preserved():
    text = BASIC_HEADER + INPUT_HEADER + TEXT + "{X:{A:1}}"
    message = parse_message(text)

    assert message.additional_blocks == (GeneralBlock(id="X", content="{A:1}"),)
    assert message.to_text() == text


def test_first_block_must_be_basic_header():
    with pytest.raises(MessageParseError, match="expected block '1'"):
        parse_message(INPUT_HEADER + BASIC_HEADER + TEXT)


def test_missing_mandatory_block():
    with pytest.raises(MessageParseError, match="missing mandatory blocks"):
        parse_message(BASIC_HEADER + INPUT_HEADER)


def test_required_blocks_override():
    reader = SwiftMessageReader(BASIC_HEADER, required_blocks=["1"])
    message = reader.read_message()
    assert message.application_header is None
    assert message.text is None


def test_duplicate_block_rejected():
    with pytest.raises(MessageParseError, match="duplicate block '4'"):
        parse_message(BASIC_HEADER + INPUT_HEADER + TEXT + TEXT)


def test_block_order_enforced():
    text = BASIC_HEADER + TEXT + INPUT_HEADER
    with pytest.raises(MessageParseError, match="must not follow"):
        parse_message(text)

    message = SwiftMessageReader(text, enforce_block_order=False).read_message()
    assert message.to_text() == BASIC_HEADER + INPUT_HEADER + TEXT


def test_structural_error_is_chained():
    with pytest.raises(MessageParseError) as excinfo:
        parse_message(BASIC_HEADER + INPUT_HEADER + "{4:\n-")
    assert isinstance(excinfo.value.__cause__, BlockParseError)


def test_block_error_keeps_full_cause_chain():
    text = BASIC_HEADER + INPUT_HEADER + TEXT + "{5:{MAC:1}{:X}}"
    with pytest.raises(MessageParseError) as excinfo:
        parse_message(text)

    cause = excinfo.value.__cause__
    assert isinstance(cause, BlockFieldParseError)
    assert cause.block_id == "5"
    assert isinstance(cause.__cause__, BlockParseError)
