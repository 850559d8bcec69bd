"""blobupload - Chunked uploads of local files to pre-authorized blob endpoints."""

__version__ = "0.1.0"
