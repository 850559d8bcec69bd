"""Core module - Limits, block bookkeeping, progress and errors."""

from blobupload.core.blocks import (
    BLOCK_ID_WIDTH,
    Block,
    build_block_list,
    encode_block_id,
    make_block_id,
    plan_blocks,
)
from blobupload.core.config import (
    API_VERSION,
    BLOCK_SIZE,
    DEFAULT_TIMEOUT_MS,
    MAX_SIMPLE_UPLOAD_SIZE,
    READ_SIZE,
    TransferLimits,
    UploadConfig,
)
from blobupload.core.errors import LocalIOFailure, ServerRejection, UploadError
from blobupload.core.progress import (
    CallbackObserver,
    ProgressCallback,
    ProgressEvent,
    ProgressObserver,
    ProgressTracker,
    compute_percent,
)
from blobupload.core.session import TransferSession
from blobupload.core.types import BlockState, TransferMode

__all__ = [
    # Blocks
    "BLOCK_ID_WIDTH",
    "Block",
    "build_block_list",
    "encode_block_id",
    "make_block_id",
    "plan_blocks",
    # Config
    "API_VERSION",
    "BLOCK_SIZE",
    "DEFAULT_TIMEOUT_MS",
    "MAX_SIMPLE_UPLOAD_SIZE",
    "READ_SIZE",
    "TransferLimits",
    "UploadConfig",
    # Errors
    "LocalIOFailure",
    "ServerRejection",
    "UploadError",
    # Progress
    "CallbackObserver",
    "ProgressCallback",
    "ProgressEvent",
    "ProgressObserver",
    "ProgressTracker",
    "compute_percent",
    # Session
    "TransferSession",
    # Types
    "BlockState",
    "TransferMode",
]
