"""Block upload path for files above the single-request limit.

The file is sent as a sequence of Put Block requests, one block at a
time, then committed with a Put Block List request:

1. Open a block: next sequential id, size min(remaining, block size).
2. Stream the block body from the file in read-size increments.
3. Await the response; the block is now uncommitted on the server.
4. Repeat until the file is exhausted, then commit the ordered id list.

Blocks are never sent in parallel and a failed block aborts the upload.
Blocks accepted before a failure stay uncommitted on the server until
its own garbage collection removes them.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Mapping

from blobupload.client.api import BlobClient
from blobupload.client.failures import raise_for_result
from blobupload.client.source import FileSource
from blobupload.core.blocks import build_block_list, plan_blocks
from blobupload.core.session import TransferSession

logger = logging.getLogger(__name__)


class BlockTransfer:
    """Uploads a file as sequential blocks followed by a block list commit."""

    def __init__(self, client: BlobClient) -> None:
        self._client = client
        self._read_size = client.config.limits.read_size
        self._block_size = client.config.limits.block_size

    async def _block_body(
        self,
        source: FileSource,
        session: TransferSession,
        size: int,
    ) -> AsyncIterator[bytes]:
        async for data in source.iter_chunks(self._read_size, size):
            yield data
            session.advance(len(data))

    async def run(
        self,
        source: FileSource,
        upload_url: str,
        session: TransferSession,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        """Upload the source block by block and commit it.

        Custom headers are sent with the commit request only.

        Raises:
            ServerRejection: If the server rejects a block or the commit.
            LocalIOFailure: If the file cannot be read completely.
            httpx.TransportError: If no response was received.
        """
        offset = 0
        for size in plan_blocks(source.size, self._block_size):
            block = session.begin_block(offset, size)
            logger.debug(
                f"Sending block {block.block_id} ({block.size} bytes at offset {offset})"
            )
            result = await self._client.put_block(
                upload_url,
                block.block_id,
                self._block_body(source, session, block.size),
                block.size,
            )
            raise_for_result(result, upload_url)
            session.finish_block()
            offset += block.size

        logger.debug(f"Committing {len(session.blocks)} blocks")
        result = await self._client.put_block_list(
            upload_url,
            build_block_list(session.block_ids),
            headers=headers,
        )
        raise_for_result(result, upload_url)
