"""
Unit tests for core swiftblocks components.

Tests configuration management, the block data models and the parser
registry.
"""

import os
import tempfile
import unittest
from datetime import datetime
from pathlib import Path

from pydantic import ValidationError

from swiftblocks.config import ConfigManager
from swiftblocks.models import (
    ApplicationHeaderInputBlock,
    ApplicationHeaderOutputBlock,
    BasicHeaderBlock,
    GeneralBlock,
    MessagePriority,
    SwiftBlock,
    SwiftMessage,
    TextBlock,
    UserTrailerBlock,
    render_block,
)
from swiftblocks.parsers import BlockParserRegistry


class TestConfigManager(unittest.TestCase):
    """Test configuration management functionality."""

    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()
        self.config_path = Path(self.temp_dir) / "test_config.yaml"

    def tearDown(self):
        """Clean up test fixtures."""
        if self.config_path.exists():
            self.config_path.unlink()
        os.rmdir(self.temp_dir)

    def test_config_creation_with_defaults(self):
        """Test config manager falls back to defaults when file missing."""
        config = ConfigManager(str(self.config_path))

        self.assertEqual(config.log_level, "INFO")
        self.assertIsNone(config.log_filename)
        self.assertFalse(config.reject_duplicate_subblocks)
        self.assertEqual(config.required_blocks, ["1", "2", "4"])
        self.assertTrue(config.enforce_block_order)

    def test_config_loading_from_file(self):
        """Test loading configuration from YAML file."""
        test_config = """
logging:
  level: DEBUG

parsing:
  reject_duplicate_subblocks: true

message:
  required_blocks: [1, 4]
"""
        with open(self.config_path, 'w') as f:
            f.write(test_config)

        config = ConfigManager(str(self.config_path))

        self.assertEqual(config.log_level, "DEBUG")
        self.assertTrue(config.reject_duplicate_subblocks)
        self.assertEqual(config.required_blocks, ["1", "4"])
        # untouched keys keep their defaults
        self.assertTrue(config.enforce_block_order)
        self.assertIn("%(message)s", config.get("logging.format"))

    def test_invalid_yaml_falls_back_to_defaults(self):
        """Test that a broken file does not stop the configuration from loading."""
        with open(self.config_path, 'w') as f:
            f.write("parsing: [unclosed")

        config = ConfigManager(str(self.config_path))
        self.assertFalse(config.reject_duplicate_subblocks)

    def test_dot_notation_access(self):
        """Test accessing config values with dot notation."""
        config = ConfigManager(str(self.config_path))

        self.assertEqual(config.get("message.enforce_block_order"), True)
        self.assertEqual(config.get("nonexistent.key", "default"), "default")
        self.assertIn("required_blocks", config.get_section("message"))

    def test_config_reload(self):
        """Test configuration reloading."""
        with open(self.config_path, 'w') as f:
            f.write("message:\n  enforce_block_order: true")

        config = ConfigManager(str(self.config_path))
        self.assertTrue(config.enforce_block_order)

        with open(self.config_path, 'w') as f:
            f.write("message:\n  enforce_block_order: false")

        config.reload()
        self.assertFalse(config.enforce_block_order)


class TestDataModels(unittest.TestCase):
    """Test data model validation and functionality."""

    def test_general_block_creation(self):
        block = GeneralBlock(id="5", content="{MAC:1}")

        self.assertEqual(block.id, "5")
        self.assertEqual(block.content, "{MAC:1}")
        self.assertEqual(block.to_text(), "{5:{MAC:1}}")

    def test_general_block_id_validation(self):
        for bad_id in ["", "A:B", "A{", "}"]:
            with self.assertRaises(ValidationError):
                GeneralBlock(id=bad_id, content="")

    def test_general_block_is_immutable(self):
        block = GeneralBlock(id="1", content="A")
        with self.assertRaises(ValidationError):
            block.content = "B"

    def test_render_block(self):
        self.assertEqual(render_block("S", ""), "{S:}")
        self.assertEqual(render_block("4", "\n-"), "{4:\n-}")

    def test_blocks_share_capabilities(self):
        for block in [
            GeneralBlock(id="X", content=""),
            UserTrailerBlock(checksum="ABC"),
            TextBlock(text="\n-"),
        ]:
            self.assertIsInstance(block, SwiftBlock)
            self.assertEqual(block.to_text(), render_block(block.id, block.content))

    def test_output_header_built_in_code(self):
        block = ApplicationHeaderOutputBlock(
            message_type="940",
            input_date_time=datetime(2021, 3, 4, 5, 6),
            input_reference="BANKBEBBAXXX",
            session_number="0001",
            sequence_number="000002",
            output_date_time=datetime(2021, 3, 4, 7, 8),
            message_priority="U",
        )

        self.assertEqual(block.message_priority, MessagePriority.URGENT)
        self.assertEqual(block.content, "O9400506210304BANKBEBBAXXX00010000022103040708U")

    def test_fixed_width_lengths_enforced(self):
        with self.assertRaises(ValidationError):
            BasicHeaderBlock(
                application_id="F",
                service_id="01",
                logical_terminal_address="SHORT",
                session_number="2222",
                sequence_number="123456",
            )

    def test_input_header_trailing_fields_must_be_contiguous(self):
        with self.assertRaises(ValidationError):
            ApplicationHeaderInputBlock(
                message_type="940",
                receiver_address="BANKDEFFXXXX",
                delivery_monitoring="3",
            )

    def test_text_block_validation(self):
        with self.assertRaises(ValidationError):
            TextBlock(text="\n:20:X")
        with self.assertRaises(ValidationError):
            TextBlock(info_line="A\nB", text="\n-")

    def test_trailer_content_order(self):
        trailer = UserTrailerBlock(
            checksum="123456789ABC",
            message_authentication_code="12345678",
            additional_subblocks=(GeneralBlock(id="ZZZ", content="Y"),),
        )
        self.assertEqual(trailer.content, "{MAC:12345678}{CHK:123456789ABC}{ZZZ:Y}")

    def test_unknown_subblocks_are_immutable(self):
        trailer = UserTrailerBlock(additional_subblocks=[GeneralBlock(id="ZZZ", content="Y")])

        self.assertIsInstance(trailer.additional_subblocks, tuple)
        with self.assertRaises(TypeError):
            trailer.additional_subblocks[0] = GeneralBlock(id="QQQ", content="Z")
        self.assertEqual(trailer.content, "{ZZZ:Y}")

    def test_unknown_subblock_codes_validated(self):
        # a code may only appear once, and never as a known field code
        with self.assertRaises(ValidationError):
            UserTrailerBlock(additional_subblocks=(
                GeneralBlock(id="ZZZ", content="1"),
                GeneralBlock(id="ZZZ", content="2"),
            ))
        with self.assertRaises(ValidationError):
            UserTrailerBlock(additional_subblocks=(GeneralBlock(id="MAC", content="1"),))

    def test_message_unknown_blocks_are_immutable(self):
        message = SwiftMessage(
            basic_header=BasicHeaderBlock(
                application_id="F",
                service_id="01",
                logical_terminal_address="BANKBEBBAXXX",
                session_number="2222",
                sequence_number="123456",
            ),
            additional_blocks=[GeneralBlock(id="X", content="1")],
        )

        self.assertIsInstance(message.additional_blocks, tuple)
        with self.assertRaises(AttributeError):
            message.additional_blocks.append(GeneralBlock(id="Y", content="2"))

    def test_message_serialization(self):
        message = SwiftMessage(
            basic_header=BasicHeaderBlock(
                application_id="F",
                service_id="01",
                logical_terminal_address="BANKBEBBAXXX",
                session_number="2222",
                sequence_number="123456",
            ),
            text=TextBlock(text="\n:20:REF\n-"),
        )

        self.assertIsNone(message.message_type)
        self.assertEqual(message.to_text(), "{1:F01BANKBEBBAXXX2222123456}{4:\n:20:REF\n-}")


class TestBlockParserRegistry(unittest.TestCase):
    """Test block parser registry functionality."""

    def setUp(self):
        """Set up test registry."""
        self.registry = BlockParserRegistry()

    def test_default_parsers_registered(self):
        block_ids = self.registry.list_block_ids()

        for block_id in ["1", "2", "3", "4", "5", "S"]:
            self.assertIn(block_id, block_ids)

    def test_dispatch_by_block_id(self):
        parsed = self.registry.parse(GeneralBlock(id="5", content="{CHK:ABC}"))

        self.assertIsInstance(parsed, UserTrailerBlock)
        self.assertEqual(parsed.checksum, "ABC")

    def test_unknown_block_kind_returned_unchanged(self):
        block = GeneralBlock(id="Z", content="{A:1}")

        self.assertFalse(self.registry.is_known("Z"))
        self.assertIsNone(self.registry.get_parser("Z"))
        self.assertIs(self.registry.parse(block), block)

    def test_custom_parser_registration(self):
        self.registry.register_parser("Z", lambda block: block.content.upper())

        self.assertTrue(self.registry.is_known("Z"))
        self.assertEqual(self.registry.parse(GeneralBlock(id="Z", content="abc")), "ABC")


if __name__ == '__main__':
    unittest.main()
