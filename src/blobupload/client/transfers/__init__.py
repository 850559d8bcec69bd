"""Upload paths: single request and block list."""

from blobupload.client.transfers.block import BlockTransfer
from blobupload.client.transfers.simple import SimpleTransfer

__all__ = [
    "BlockTransfer",
    "SimpleTransfer",
]
