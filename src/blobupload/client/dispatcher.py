"""Entry point for uploading a file.

This module provides:
- select_transfer: Choose the upload path for a file size
- upload_file: Upload a file through the chosen path
- UploadResult: Summary of a completed upload
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from blobupload.client.api import BlobClient
from blobupload.client.source import FileSource
from blobupload.client.transfers import BlockTransfer, SimpleTransfer
from blobupload.core.config import TransferLimits, UploadConfig
from blobupload.core.progress import ProgressObserver
from blobupload.core.session import TransferSession
from blobupload.core.types import TransferMode

logger = logging.getLogger(__name__)


@dataclass
class UploadResult:
    """Result of a completed upload."""

    path: Path
    size: int
    mode: TransferMode
    block_ids: list[str] = field(default_factory=list)


def select_transfer(size: int, limits: TransferLimits | None = None) -> TransferMode:
    """Choose the upload path for a file.

    Files up to the single-request limit go out as one request, anything
    larger is split into blocks.
    """
    limits = limits or TransferLimits()
    if size <= limits.simple_limit:
        return TransferMode.SIMPLE
    return TransferMode.BLOCK


async def _run(
    client: BlobClient,
    path: Path,
    upload_url: str,
    headers: Mapping[str, str] | None,
    observer: ProgressObserver | None,
    total_bytes: int | None,
    initial_bytes: int,
) -> UploadResult:
    async with FileSource(path) as source:
        mode = select_transfer(source.size, client.config.limits)
        session = TransferSession.start(
            total_bytes if total_bytes is not None else source.size,
            observer=observer,
            initial_bytes=initial_bytes,
        )
        logger.info(f"Uploading {path} ({source.size} bytes, {mode.value} transfer)")

        if mode is TransferMode.SIMPLE:
            await SimpleTransfer(client).run(source, upload_url, session, headers)
        else:
            await BlockTransfer(client).run(source, upload_url, session, headers)

        logger.info(
            f"Uploaded {path}: {source.size} bytes"
            + (f", {len(session.blocks)} blocks" if mode is TransferMode.BLOCK else "")
        )
        return UploadResult(
            path=path,
            size=source.size,
            mode=mode,
            block_ids=session.block_ids,
        )


async def upload_file(
    path: Path | str,
    upload_url: str,
    *,
    headers: Mapping[str, str] | None = None,
    observer: ProgressObserver | None = None,
    config: UploadConfig | None = None,
    client: BlobClient | None = None,
    total_bytes: int | None = None,
    initial_bytes: int = 0,
) -> UploadResult:
    """Upload a local file to a pre-authorized blob URL.

    Args:
        path: Local file to upload.
        upload_url: Pre-authorized blob URL (treated as opaque).
        headers: Custom headers for the final request (Put Blob or Put Block List).
        observer: Optional progress observer.
        config: Upload settings, ignored when client is given.
        client: Optional shared BlobClient; one is created and closed otherwise.
        total_bytes: Size progress is measured against (defaults to the file size).
        initial_bytes: Bytes already counted as uploaded (batch progress).

    Returns:
        UploadResult describing the completed upload.

    Raises:
        LocalIOFailure: If the file cannot be opened or read.
        ServerRejection: If the server rejects any request.
        httpx.TransportError: If a request gets no response.
    """
    path = Path(path)
    if client is not None:
        return await _run(client, path, upload_url, headers, observer, total_bytes, initial_bytes)

    async with BlobClient(config) as own_client:
        return await _run(
            own_client, path, upload_url, headers, observer, total_bytes, initial_bytes
        )
