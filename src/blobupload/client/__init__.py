"""Client module - HTTP exchanges, transfer paths and CLI."""

from blobupload.client.api import BlobClient
from blobupload.client.dispatcher import UploadResult, select_transfer, upload_file
from blobupload.client.failures import (
    Accepted,
    ExchangeResult,
    Rejected,
    TransportFailed,
    raise_for_result,
)
from blobupload.client.source import FileSource
from blobupload.client.transfers import BlockTransfer, SimpleTransfer
from blobupload.client.urls import build_upload_url, content_disposition_header

__all__ = [
    "Accepted",
    "BlobClient",
    "BlockTransfer",
    "ExchangeResult",
    "FileSource",
    "Rejected",
    "SimpleTransfer",
    "TransportFailed",
    "UploadResult",
    "build_upload_url",
    "content_disposition_header",
    "raise_for_result",
    "select_transfer",
    "upload_file",
]
