"""Per-upload mutable state.

A TransferSession is created for one upload attempt, owned by the
transfer path driving it and discarded afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from blobupload.core.blocks import Block
from blobupload.core.errors import LocalIOFailure
from blobupload.core.progress import ProgressEvent, ProgressObserver, ProgressTracker
from blobupload.core.types import BlockState


@dataclass
class TransferSession:
    """Byte and block accounting for a single upload attempt.

    Attributes:
        total_bytes: Total bytes the progress is measured against.
        transferred_bytes: Cumulative bytes sent so far (never decreases).
        tracker: Progress tracker for this session only.
        blocks: Blocks opened so far, in transmission order.
    """

    total_bytes: int
    transferred_bytes: int = 0
    tracker: ProgressTracker = field(default_factory=ProgressTracker)
    blocks: list[Block] = field(default_factory=list)
    _open_block: Block | None = field(default=None, repr=False)
    _open_block_bytes: int = field(default=0, repr=False)

    @classmethod
    def start(
        cls,
        total_bytes: int,
        observer: ProgressObserver | None = None,
        initial_bytes: int = 0,
    ) -> TransferSession:
        """Create a session reporting progress to an observer."""
        if total_bytes < 0 or not 0 <= initial_bytes <= total_bytes:
            raise ValueError(
                f"Invalid progress range: {initial_bytes} of {total_bytes} bytes"
            )
        return cls(
            total_bytes=total_bytes,
            transferred_bytes=initial_bytes,
            tracker=ProgressTracker(observer),
        )

    @property
    def block_ids(self) -> list[str]:
        """Identifiers of all blocks opened so far, in order."""
        return [block.block_id for block in self.blocks]

    @property
    def open_block(self) -> Block | None:
        """The block currently being written, if any."""
        return self._open_block

    @property
    def open_block_remaining(self) -> int:
        """Bytes still expected for the open block."""
        if self._open_block is None:
            return 0
        return self._open_block.size - self._open_block_bytes

    def advance(self, nbytes: int) -> ProgressEvent | None:
        """Account for bytes handed to the transport.

        Args:
            nbytes: Bytes just sent.

        Returns:
            The progress event emitted, if any.

        Raises:
            LocalIOFailure: If the source produced more bytes than expected.
        """
        if nbytes < 0:
            raise ValueError(f"Byte count must be non-negative, got {nbytes}")
        if self.transferred_bytes + nbytes > self.total_bytes:
            raise LocalIOFailure(
                f"Source grew during upload: {self.transferred_bytes + nbytes} "
                f"bytes read, {self.total_bytes} expected"
            )
        if self._open_block is not None:
            if nbytes > self.open_block_remaining:
                raise LocalIOFailure(
                    f"Block {self._open_block.block_id} overflow: "
                    f"{self._open_block_bytes + nbytes} of {self._open_block.size} bytes"
                )
            self._open_block_bytes += nbytes

        self.transferred_bytes += nbytes
        return self.tracker.update(self.total_bytes, self.transferred_bytes)

    def begin_block(self, offset: int, size: int) -> Block:
        """Open the next block.

        Args:
            offset: File offset of the block's first byte.
            size: Declared byte count of the block.

        Returns:
            The new block, already in flight.
        """
        if self._open_block is not None:
            raise RuntimeError(
                f"Block {self._open_block.block_id} is still open"
            )
        if size <= 0:
            raise ValueError(f"Block size must be positive, got {size}")
        block = Block(
            index=len(self.blocks),
            offset=offset,
            size=size,
            state=BlockState.IN_FLIGHT,
        )
        self.blocks.append(block)
        self._open_block = block
        self._open_block_bytes = 0
        return block

    def finish_block(self) -> Block:
        """Mark the open block as accepted by the server and close it."""
        block = self._open_block
        if block is None:
            raise RuntimeError("No block is open")
        if self._open_block_bytes != block.size:
            raise LocalIOFailure(
                f"Block {block.block_id} incomplete: "
                f"{self._open_block_bytes} of {block.size} bytes"
            )
        block.state = BlockState.UNCOMMITTED
        self._open_block = None
        self._open_block_bytes = 0
        return block
