"""Shared configuration classes for blobupload.

This module defines the transfer limits and per-upload settings used by
the transfer paths and the CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, field

READ_SIZE = 64 * 1024                  # 64 KB
BLOCK_SIZE = 64 * READ_SIZE            # 4 MB
MAX_SIMPLE_UPLOAD_SIZE = 64 * 1024 * 1024  # 64 MB, single Put Blob ceiling

API_VERSION = "2013-08-15"
DEFAULT_TIMEOUT_MS = 600 * 1000  # 10 minutes


@dataclass(frozen=True)
class TransferLimits:
    """Size limits governing how a file is partitioned.

    Attributes:
        read_size: Bytes read from the source per increment.
        block_size: Maximum bytes per block (whole number of reads).
        simple_limit: Largest file sent as a single request.
    """

    read_size: int = READ_SIZE
    block_size: int = BLOCK_SIZE
    simple_limit: int = MAX_SIMPLE_UPLOAD_SIZE

    def __post_init__(self) -> None:
        """Validate limits."""
        if self.read_size <= 0 or self.block_size <= 0 or self.simple_limit <= 0:
            raise ValueError("Transfer limits must be positive")
        if self.block_size % self.read_size != 0:
            raise ValueError(
                f"Block size ({self.block_size}) must be a multiple of "
                f"read size ({self.read_size})"
            )
        if self.simple_limit > MAX_SIMPLE_UPLOAD_SIZE:
            raise ValueError(
                f"Simple upload limit cannot exceed {MAX_SIMPLE_UPLOAD_SIZE} bytes"
            )


@dataclass
class UploadConfig:
    """Settings applied to every request of an upload.

    Attributes:
        timeout_ms: Per-request timeout in milliseconds.
        verify_ssl: Whether to verify TLS certificates (default True).
        api_version: Value of the x-ms-version header.
        limits: Transfer size limits.
    """

    timeout_ms: int = DEFAULT_TIMEOUT_MS
    verify_ssl: bool = True
    api_version: str = API_VERSION
    limits: TransferLimits = field(default_factory=TransferLimits)

    def __post_init__(self) -> None:
        """Validate timeout."""
        if self.timeout_ms <= 0:
            raise ValueError(f"Timeout must be positive, got {self.timeout_ms} ms")

    @property
    def timeout(self) -> float:
        """Get the per-request timeout in seconds."""
        return self.timeout_ms / 1000
