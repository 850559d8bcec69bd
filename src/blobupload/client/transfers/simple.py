"""Single-request upload path for small files."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Mapping

from blobupload.client.api import BlobClient
from blobupload.client.failures import raise_for_result
from blobupload.client.source import FileSource
from blobupload.core.session import TransferSession

logger = logging.getLogger(__name__)


class SimpleTransfer:
    """Uploads a whole file as one Put Blob request.

    The request declares the exact file size as Content-Length and streams
    the file in read-size increments, reporting progress after each one.
    """

    def __init__(self, client: BlobClient) -> None:
        self._client = client
        self._read_size = client.config.limits.read_size

    async def _body(self, source: FileSource, session: TransferSession) -> AsyncIterator[bytes]:
        async for data in source.iter_chunks(self._read_size, source.size):
            yield data
            session.advance(len(data))

    async def run(
        self,
        source: FileSource,
        upload_url: str,
        session: TransferSession,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        """Upload the source.

        Raises:
            ServerRejection: If the server rejects the request.
            LocalIOFailure: If the file cannot be read completely.
            httpx.TransportError: If no response was received.
        """
        logger.debug(f"Single request upload of {source.size} bytes")
        result = await self._client.put_blob(
            upload_url,
            self._body(source, session),
            source.size,
            headers=headers,
        )
        raise_for_result(result, upload_url)
