"""Shared fixtures for blobupload tests."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

import pytest

from blobupload.core.config import TransferLimits, UploadConfig
from tests.fakes import FakeBlobServer

UPLOAD_URL = "https://account.blob.core.windows.net/container/file.bin?sv=2013-08-15&sig=abc"

# Small limits so block logic can be exercised on tiny files
SMALL_LIMITS = TransferLimits(read_size=4, block_size=16, simple_limit=32)


@pytest.fixture
def server() -> FakeBlobServer:
    """Create a fake blob endpoint."""
    return FakeBlobServer()


@pytest.fixture
def small_config() -> UploadConfig:
    """Upload config with tiny transfer limits."""
    return UploadConfig(timeout_ms=5000, limits=SMALL_LIMITS)


@pytest.fixture
def make_file(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory writing test files.

    Random content is used for small files; large files are sparse.
    """

    def factory(size: int, name: str = "file.bin", sparse: bool = False) -> Path:
        path = tmp_path / name
        if sparse:
            with path.open("wb") as f:
                f.truncate(size)
        else:
            path.write_bytes(os.urandom(size))
        return path

    return factory
