"""Tests for block identifiers and block list serialization."""

from __future__ import annotations

import base64

import pytest

from blobupload.core.blocks import (
    Block,
    build_block_list,
    encode_block_id,
    make_block_id,
    plan_blocks,
)
from blobupload.core.config import BLOCK_SIZE
from blobupload.core.types import BlockState

MB = 1024 * 1024


class TestBlockIds:
    """Tests for block identifier formatting."""

    def test_zero_padded(self) -> None:
        assert make_block_id(0) == "0000000000"
        assert make_block_id(25) == "0000000025"
        assert make_block_id(1234567890) == "1234567890"

    def test_negative_index_rejected(self) -> None:
        with pytest.raises(ValueError):
            make_block_id(-1)

    def test_encoded_as_base64_utf8(self) -> None:
        """Identifiers are sent base64-encoded."""
        assert encode_block_id("0000000000") == "MDAwMDAwMDAwMA=="
        assert base64.b64decode(encode_block_id("0000000042")) == b"0000000042"

    def test_all_encoded_ids_same_length(self) -> None:
        """The server requires equal-length ids within a blob."""
        lengths = {len(encode_block_id(make_block_id(i))) for i in (0, 9, 10, 999, 10**9)}
        assert len(lengths) == 1

    def test_block_properties(self) -> None:
        block = Block(index=3, offset=12 * MB, size=4 * MB)
        assert block.block_id == "0000000003"
        assert block.state == BlockState.PENDING


class TestPlanBlocks:
    """Tests for block partitioning."""

    def test_exact_multiple_has_no_trailing_block(self) -> None:
        """100 MB splits into 25 full 4 MB blocks."""
        sizes = list(plan_blocks(100 * MB, BLOCK_SIZE))
        assert len(sizes) == 25
        assert all(size == BLOCK_SIZE for size in sizes)

    def test_one_extra_byte_adds_trailing_block(self) -> None:
        """100 MB + 1 byte adds a 1 byte trailing block."""
        sizes = list(plan_blocks(100 * MB + 1, BLOCK_SIZE))
        assert len(sizes) == 26
        assert sizes[-1] == 1
        assert sum(sizes) == 100 * MB + 1

    @pytest.mark.parametrize("total", [1, 15, 16, 17, 160, 161])
    def test_sizes_sum_to_total(self, total: int) -> None:
        sizes = list(plan_blocks(total, 16))
        assert sum(sizes) == total
        assert all(0 < size <= 16 for size in sizes)
        assert all(size == 16 for size in sizes[:-1])

    def test_empty_file_has_no_blocks(self) -> None:
        assert list(plan_blocks(0, BLOCK_SIZE)) == []


class TestBuildBlockList:
    """Tests for the commit payload."""

    def test_payload_format(self) -> None:
        payload = build_block_list(["0000000000", "0000000001"])
        assert payload == (
            b'<?xml version="1.0" encoding="utf-8"?>\n'
            b"<BlockList>\n"
            b"<Uncommitted>MDAwMDAwMDAwMA==</Uncommitted>"
            b"<Uncommitted>MDAwMDAwMDAwMQ==</Uncommitted>"
            b"</BlockList>\n"
        )

    def test_preserves_order(self) -> None:
        ids = [make_block_id(i) for i in (2, 0, 1)]
        payload = build_block_list(ids).decode("utf-8")
        positions = [payload.index(encode_block_id(block_id)) for block_id in ids]
        assert positions == sorted(positions)

    def test_empty_list(self) -> None:
        payload = build_block_list([])
        assert payload.endswith(b"<BlockList>\n</BlockList>\n")
