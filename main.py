#!/usr/bin/env python3
"""
swiftblocks - SWIFT MT message envelope parser

Main entry point. Parses message files into typed blocks, prints a summary or
JSON dump per message, and optionally checks that every message survives a
write/re-read round trip.
"""

import logging
import sys
import json
import argparse
from pathlib import Path
from typing import List

from swiftblocks import SwiftMessage, SwiftParseError, parse_message, read_messages
from swiftblocks.config import config


def setup_logging():
    """Configure logging for the application."""
    level = getattr(logging, config.log_level.upper(), logging.INFO)
    format_str = config.get("logging.format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    log_file = config.log_filename
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    # force: importing the package may already have logged through the root logger
    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=handlers,
        force=True
    )


def describe_message(message: SwiftMessage) -> str:
    """
    Build a one-line summary of a message.

    Args:
        message: The parsed message

    Returns:
        Summary with message type, sender/receiver terminal and block ids
    """
    message_type = message.message_type or "???"
    terminal = message.basic_header.logical_terminal_address
    block_ids = ",".join(block.id for block in message.blocks())
    return f"MT{message_type} {terminal} blocks={block_ids}"


def message_to_dict(message: SwiftMessage) -> dict:
    """Dump a message to JSON-compatible data, keeping each block's raw text."""
    data = message.model_dump(mode="json")
    # pairs, not a mapping: unknown block ids may repeat
    data["blocks"] = [[block.id, block.content] for block in message.blocks()]
    return data


def check_roundtrip(message: SwiftMessage) -> bool:
    """
    Write a message back to text and parse it again.

    Returns:
        True if the re-parsed message equals the original
    """
    text = message.to_text()
    try:
        reparsed = parse_message(text)
    except SwiftParseError as e:
        logging.error(f"Round trip re-parse failed: {e}")
        return False
    if reparsed != message:
        logging.error(f"Round trip mismatch for {describe_message(message)}")
        return False
    return True


def process_file(path: Path, as_json: bool, roundtrip: bool) -> bool:
    """
    Parse one file and print its messages.

    Returns:
        True if the file parsed (and round-tripped, if asked) cleanly
    """
    logging.info(f"Reading {path}")
    try:
        with open(path, 'r', encoding='utf-8', newline='') as f:
            messages = read_messages(f)
    except (OSError, SwiftParseError) as e:
        logging.error(f"Failed to parse {path}: {e}")
        print(f"{path}: ERROR {e}")
        return False

    ok = True
    for index, message in enumerate(messages, start=1):
        if as_json:
            print(json.dumps(message_to_dict(message), indent=2, ensure_ascii=False))
        else:
            print(f"{path}#{index}: {describe_message(message)}")

        if roundtrip and not check_roundtrip(message):
            print(f"{path}#{index}: ROUND TRIP FAILED")
            ok = False

    logging.info(f"Parsed {len(messages)} messages from {path}")
    return ok


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="swiftblocks - SWIFT MT message envelope parser",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py message.fin                      # Print a summary per message
  python main.py message.fin --json               # Dump typed blocks as JSON
  python main.py *.fin --check-roundtrip          # Verify write/re-read equality
        """
    )

    parser.add_argument(
        "files",
        nargs="+",
        type=Path,
        help="Files holding one or more SWIFT MT messages"
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print each message as JSON instead of a one-line summary"
    )

    parser.add_argument(
        "--check-roundtrip",
        action="store_true",
        help="Re-serialize and re-parse each message and report differences"
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to a configuration file (default: config.yaml)"
    )

    parser.add_argument(
        "--version",
        action="version",
        version="swiftblocks 0.1.0"
    )

    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_arguments(argv)

    if args.config:
        config.config_path = Path(args.config)
        config.reload()

    setup_logging()

    ok = True
    for path in args.files:
        if not process_file(path, args.json, args.check_roundtrip):
            ok = False

    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
