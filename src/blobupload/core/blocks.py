"""Block identifiers and block list serialization.

This module provides:
- Block: One bounded part of a block blob upload
- make_block_id / encode_block_id: Sequential, base64-encoded identifiers
- plan_blocks: Block sizes a file of a given size is split into
- build_block_list: XML body of the commit (Put Block List) request
"""

from __future__ import annotations

import base64
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from blobupload.core.types import BlockState

BLOCK_ID_WIDTH = 10

XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>'


@dataclass
class Block:
    """A block of the blob being uploaded."""

    index: int
    offset: int
    size: int
    state: BlockState = BlockState.PENDING

    @property
    def block_id(self) -> str:
        """Return the zero-padded identifier of this block."""
        return make_block_id(self.index)


def make_block_id(index: int) -> str:
    """Format a block number as a 10-digit, zero-padded identifier.

    Args:
        index: Sequential block number, starting at 0.

    Returns:
        Identifier such as "0000000007".
    """
    if index < 0:
        raise ValueError(f"Block index must be non-negative, got {index}")
    return str(index).rjust(BLOCK_ID_WIDTH, "0")


def encode_block_id(block_id: str) -> str:
    """Base64-encode a block identifier (UTF-8 bytes)."""
    return base64.b64encode(block_id.encode("utf-8")).decode("ascii")


def plan_blocks(total_size: int, block_size: int) -> Iterator[int]:
    """Yield the sizes of the blocks a file is split into.

    Every block is block_size bytes except possibly the last one.
    A size that is an exact multiple of block_size has no trailing
    short block, and an empty file has no blocks at all.

    Args:
        total_size: File size in bytes.
        block_size: Maximum block size in bytes.

    Yields:
        Block sizes in upload order.
    """
    remaining = total_size
    while remaining > 0:
        size = min(remaining, block_size)
        yield size
        remaining -= size


def build_block_list(block_ids: Iterable[str]) -> bytes:
    """Serialize the commit payload for a list of uncommitted blocks.

    Args:
        block_ids: Plain (not encoded) block identifiers, in commit order.

    Returns:
        UTF-8 encoded XML document.
    """
    entries = "".join(
        f"<Uncommitted>{encode_block_id(block_id)}</Uncommitted>"
        for block_id in block_ids
    )
    return f"{XML_DECLARATION}\n<BlockList>\n{entries}</BlockList>\n".encode("utf-8")
