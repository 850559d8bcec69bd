"""Tests for HTTP exchange classification."""

from __future__ import annotations

import logging

import httpx
import pytest

from blobupload.client.failures import (
    Accepted,
    ExchangeResult,
    Rejected,
    TransportFailed,
    classify_response,
    raise_for_result,
)
from blobupload.core.errors import ServerRejection

URL = "https://account.blob.core.windows.net/c/f.bin?sig=x"


def make_response(status_code: int, text: str = "") -> httpx.Response:
    return httpx.Response(status_code, text=text, request=httpx.Request("PUT", URL))


class TestClassifyResponse:
    """Tests for classify_response."""

    @pytest.mark.parametrize("status_code", [200, 201, 204])
    def test_success_is_accepted(self, status_code: int) -> None:
        response = make_response(status_code)
        assert classify_response(response) == Accepted(response)

    def test_error_is_rejected(self) -> None:
        result = classify_response(make_response(403, "AuthenticationFailed"))
        assert result == Rejected(
            url=URL, status_code=403, reason="Forbidden", body="AuthenticationFailed"
        )

    def test_redirect_is_rejected(self) -> None:
        assert isinstance(classify_response(make_response(307)), Rejected)


class TestExchangeResult:
    """Every variant is an ExchangeResult."""

    def test_variants(self) -> None:
        results = [
            Accepted(make_response(201)),
            Rejected(url=URL, status_code=404, reason="Not Found", body=""),
            TransportFailed(url=URL, cause=httpx.ConnectError("refused")),
        ]
        assert all(isinstance(result, ExchangeResult) for result in results)
        assert not isinstance(make_response(201), ExchangeResult)


class TestRaiseForResult:
    """Tests for raise_for_result."""

    def test_accepted_returns_response(self) -> None:
        response = make_response(201)
        assert raise_for_result(Accepted(response)) is response

    def test_rejected_raises_server_rejection(self) -> None:
        result = Rejected(url=URL, status_code=403, reason="Forbidden", body="AuthenticationFailed")

        with pytest.raises(ServerRejection) as exc_info:
            raise_for_result(result)

        error = exc_info.value
        assert error.status_code == 403
        assert error.reason == "Forbidden"
        assert error.body == "AuthenticationFailed"
        assert error.url == URL
        assert str(error) == "Remote server returned 403: Forbidden"

    def test_rejected_logs_diagnostic(self, caplog: pytest.LogCaptureFixture) -> None:
        result = Rejected(url=URL + "&comp=block", status_code=500, reason="Oops", body="<Error/>")

        with caplog.at_level(logging.ERROR), pytest.raises(ServerRejection):
            raise_for_result(result, upload_url=URL)

        assert (
            f"Error uploading file (URL: {URL}, status code: 500, reason: Oops): <Error/>"
            in caplog.text
        )

    def test_transport_failure_propagates_original(self) -> None:
        cause = httpx.ConnectError("Connection refused")

        with pytest.raises(httpx.ConnectError) as exc_info:
            raise_for_result(TransportFailed(url=URL, cause=cause))

        assert exc_info.value is cause
