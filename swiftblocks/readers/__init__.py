"""
Readers turning SWIFT text into blocks and messages.

The message reader lives in `swiftblocks.readers.message_reader`; it depends
on the typed parsers, which in turn use the block reader exported here.
"""

from .block_reader import SwiftBlockReader

__all__ = ["SwiftBlockReader"]
