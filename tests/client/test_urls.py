"""Tests for URL and header helpers."""

from __future__ import annotations

import pytest

from blobupload.client.api import block_list_url, block_url, with_query
from blobupload.client.urls import build_upload_url, content_disposition_header


class TestBuildUploadUrl:
    """Tests for build_upload_url."""

    def test_composes_url(self) -> None:
        url = build_upload_url("acct", "backups", "db.dump", "sv=2013-08-15&sig=abc")
        assert url == "https://acct.blob.core.windows.net/backups/db.dump?sv=2013-08-15&sig=abc"

    def test_strips_leading_question_mark(self) -> None:
        url = build_upload_url("acct", "c", "f", "?sig=abc")
        assert url.endswith("/c/f?sig=abc")

    def test_quotes_blob_name(self) -> None:
        url = build_upload_url("acct", "c", "dir/my file.txt", "sig=abc")
        assert "/c/dir/my%20file.txt?" in url

    @pytest.mark.parametrize(
        ("account", "container", "blob", "token"),
        [("", "c", "f", "sig"), ("a", "", "f", "sig"), ("a", "c", "", "sig"), ("a", "c", "f", "?")],
    )
    def test_rejects_missing_parts(self, account: str, container: str, blob: str, token: str) -> None:
        with pytest.raises(ValueError):
            build_upload_url(account, container, blob, token)


class TestContentDisposition:
    """Tests for content_disposition_header."""

    def test_plain_name(self) -> None:
        assert content_disposition_header("report.pdf") == {
            "x-ms-blob-content-disposition": 'attachment; filename="report.pdf"'
        }

    def test_quotes_escaped(self) -> None:
        header = content_disposition_header('say "hi".txt')
        assert header["x-ms-blob-content-disposition"] == 'attachment; filename="say \\"hi\\".txt"'


class TestRequestUrls:
    """Tests for block and block list URLs."""

    def test_block_url_appends_to_existing_query(self) -> None:
        url = block_url("https://h/c/f?sig=abc", "0000000000")
        assert url == "https://h/c/f?sig=abc&comp=block&blockid=MDAwMDAwMDAwMA%3D%3D"

    def test_block_list_url(self) -> None:
        assert block_list_url("https://h/c/f?sig=abc") == "https://h/c/f?sig=abc&comp=blocklist"

    def test_url_without_query(self) -> None:
        assert with_query("https://h/c/f", "comp=blocklist") == "https://h/c/f?comp=blocklist"
