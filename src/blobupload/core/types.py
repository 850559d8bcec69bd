"""Shared types for blobupload."""

from __future__ import annotations

from enum import Enum


class TransferMode(str, Enum):
    """Upload path chosen for a file."""

    SIMPLE = "simple"
    BLOCK = "block"


class BlockState(str, Enum):
    """Transmission state of a block.

    UNCOMMITTED means the server accepted the block but it only becomes
    part of the blob once the block list is committed.
    """

    PENDING = "pending"
    IN_FLIGHT = "in_flight"
    UNCOMMITTED = "uncommitted"
