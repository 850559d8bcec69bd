"""Classification of HTTP exchanges.

Every request made by BlobClient ends in exactly one ExchangeResult:
- Accepted: a 2xx response was received
- Rejected: a response was received with any other status
- TransportFailed: no response was received at all

raise_for_result turns a result into the accepted response or raises.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
import httpx

from blobupload.core.errors import ServerRejection

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Accepted:
    """The server accepted the request."""

    response: httpx.Response


@dataclass(frozen=True)
class Rejected:
    """The server answered with a non-2xx status."""

    url: str
    status_code: int
    reason: str
    body: str


@dataclass(frozen=True)
class TransportFailed:
    """The request never got a response (connection, DNS, timeout...)."""

    url: str
    cause: httpx.TransportError


ExchangeResult = Accepted | Rejected | TransportFailed


def classify_response(response: httpx.Response) -> ExchangeResult:
    """Classify a received (and fully read) response."""
    if response.is_success:
        return Accepted(response)
    return Rejected(
        url=str(response.request.url),
        status_code=response.status_code,
        reason=response.reason_phrase,
        body=response.text,
    )


def raise_for_result(result: ExchangeResult, upload_url: str | None = None) -> httpx.Response:
    """Return the response of an accepted exchange, raise otherwise.

    Args:
        result: Outcome of the exchange.
        upload_url: URL reported in the diagnostic (defaults to the request URL).

    Returns:
        The accepted response.

    Raises:
        ServerRejection: If the server rejected the request.
        httpx.TransportError: The original error, if no response was received.
    """
    if isinstance(result, Accepted):
        return result.response

    if isinstance(result, Rejected):
        url = upload_url or result.url
        logger.error(
            f"Error uploading file (URL: {url}, status code: {result.status_code}, "
            f"reason: {result.reason}): {result.body}"
        )
        raise ServerRejection(
            status_code=result.status_code,
            reason=result.reason,
            body=result.body,
            url=url,
        )

    raise result.cause
