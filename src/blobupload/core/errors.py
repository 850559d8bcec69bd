"""Exceptions raised by upload operations.

Transport failures (connection refused, timeouts, DNS errors) are not
wrapped: the original httpx exception propagates unchanged so callers
can tell an unreachable server from a rejected request.
"""

from __future__ import annotations


class UploadError(Exception):
    """Base exception for upload errors."""


class ServerRejection(UploadError):
    """The server answered with a non-2xx status.

    Attributes:
        status_code: HTTP status code.
        reason: Status reason phrase.
        body: Full response body as text.
        url: URL of the rejected request.
    """

    def __init__(
        self,
        status_code: int,
        reason: str,
        body: str = "",
        url: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.reason = reason
        self.body = body
        self.url = url
        super().__init__(f"Remote server returned {status_code}: {reason}")


class LocalIOFailure(UploadError):
    """The local file could not be opened or read, or changed during upload."""
