"""HTTP client for block blob endpoints.

This module provides:
- BlobClient: Async HTTP client issuing the three upload requests
  (Put Blob, Put Block, Put Block List) against a pre-authorized URL
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterable, Mapping
from email.utils import formatdate
from urllib.parse import quote

import httpx

from blobupload.client.failures import (
    ExchangeResult,
    TransportFailed,
    classify_response,
)
from blobupload.core.blocks import encode_block_id
from blobupload.core.config import UploadConfig

logger = logging.getLogger(__name__)


def with_query(url: str, query: str) -> str:
    """Append a query fragment to a URL that may already carry one."""
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{query}"


def block_url(upload_url: str, block_id: str) -> str:
    """Return the Put Block URL for a plain block identifier."""
    encoded = quote(encode_block_id(block_id), safe="")
    return with_query(upload_url, f"comp=block&blockid={encoded}")


def block_list_url(upload_url: str) -> str:
    """Return the Put Block List URL."""
    return with_query(upload_url, "comp=blocklist")


def rfc1123_now() -> str:
    """Current UTC time formatted for the x-ms-date header."""
    return formatdate(usegmt=True)


class BlobClient:
    """Async HTTP client for uploads to a blob endpoint.

    The client never raises on HTTP errors itself: each request returns an
    ExchangeResult which the transfer paths hand to raise_for_result.
    """

    def __init__(
        self,
        config: UploadConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the blob client.

        Args:
            config: Upload settings (timeout, TLS verification, API version).
            transport: Optional httpx transport (used by tests).
        """
        self._config = config or UploadConfig()
        self._client = httpx.AsyncClient(
            timeout=self._config.timeout,
            verify=self._config.verify_ssl,
            transport=transport,
        )

    @property
    def config(self) -> UploadConfig:
        """Settings applied to every request."""
        return self._config

    async def aclose(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> BlobClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()

    def _protocol_headers(self) -> dict[str, str]:
        return {
            "x-ms-date": rfc1123_now(),
            "x-ms-version": self._config.api_version,
        }

    async def _exchange(
        self,
        url: str,
        content: bytes | AsyncIterable[bytes],
        headers: Mapping[str, str],
    ) -> ExchangeResult:
        """Send a PUT request and classify the outcome."""
        logger.debug(f"PUT {url}")
        try:
            response = await self._client.put(url, content=content, headers=dict(headers))
        except httpx.TransportError as e:
            return TransportFailed(url=url, cause=e)
        return classify_response(response)

    async def put_blob(
        self,
        upload_url: str,
        content: AsyncIterable[bytes],
        size: int,
        headers: Mapping[str, str] | None = None,
    ) -> ExchangeResult:
        """Upload a whole blob in one request.

        Args:
            upload_url: Pre-authorized blob URL.
            content: Body stream, exactly size bytes long.
            size: Declared Content-Length.
            headers: Custom headers merged into the request.
        """
        request_headers = dict(headers or {})
        request_headers["x-ms-blob-type"] = "BlockBlob"
        request_headers["Content-Length"] = str(size)
        return await self._exchange(upload_url, content, request_headers)

    async def put_block(
        self,
        upload_url: str,
        block_id: str,
        content: AsyncIterable[bytes],
        size: int,
    ) -> ExchangeResult:
        """Upload one uncommitted block.

        Args:
            upload_url: Pre-authorized blob URL.
            block_id: Plain zero-padded block identifier.
            content: Body stream, exactly size bytes long.
            size: Declared Content-Length.
        """
        request_headers = self._protocol_headers()
        request_headers["Content-Length"] = str(size)
        return await self._exchange(block_url(upload_url, block_id), content, request_headers)

    async def put_block_list(
        self,
        upload_url: str,
        payload: bytes,
        headers: Mapping[str, str] | None = None,
    ) -> ExchangeResult:
        """Commit uploaded blocks into the final blob.

        Args:
            upload_url: Pre-authorized blob URL.
            payload: Serialized block list.
            headers: Custom headers merged into the request.
        """
        request_headers = self._protocol_headers()
        request_headers["Content-Type"] = "text/plain"
        request_headers.update(headers or {})
        return await self._exchange(block_list_url(upload_url), payload, request_headers)
