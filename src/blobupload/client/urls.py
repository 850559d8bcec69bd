"""Helpers for composing upload URLs and headers."""

from __future__ import annotations

from urllib.parse import quote

BLOB_HOST_TEMPLATE = "https://{account}.blob.core.windows.net"
CONTENT_DISPOSITION_HEADER = "x-ms-blob-content-disposition"


def build_upload_url(account: str, container: str, blob_name: str, sas_token: str) -> str:
    """Compose a pre-authorized blob URL from its parts.

    Args:
        account: Storage account name.
        container: Container name.
        blob_name: Blob name (may contain "/" for virtual directories).
        sas_token: Shared access signature issued for the container or blob,
            with or without a leading "?".

    Returns:
        Blob URL with the token as query string.
    """
    if not account or not container or not blob_name:
        raise ValueError("Account, container and blob name are required")
    token = sas_token.lstrip("?")
    if not token:
        raise ValueError("A shared access signature token is required")
    host = BLOB_HOST_TEMPLATE.format(account=account)
    return f"{host}/{quote(container, safe='')}/{quote(blob_name, safe='/')}?{token}"


def content_disposition_header(filename: str) -> dict[str, str]:
    """Return the header making downloads save under filename."""
    escaped = filename.replace('"', '\\"')
    return {CONTENT_DISPOSITION_HEADER: f'attachment; filename="{escaped}"'}
