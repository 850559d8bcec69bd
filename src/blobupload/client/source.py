"""Sequential reader over a local file.

Reads run in a worker thread so that the event loop stays free while
the disk is busy.
"""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import AsyncIterator
from pathlib import Path
from typing import BinaryIO

from blobupload.core.errors import LocalIOFailure

logger = logging.getLogger(__name__)


class FileSource:
    """Async, sequential byte source backed by a local file.

    Use as an async context manager; the file handle is closed on exit
    whether or not the upload succeeded.
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)
        self._file: BinaryIO | None = None
        self._size = 0
        self._position = 0

    @property
    def path(self) -> Path:
        """Path of the underlying file."""
        return self._path

    @property
    def size(self) -> int:
        """Size of the file in bytes, taken when it was opened."""
        return self._size

    @property
    def position(self) -> int:
        """Bytes read so far."""
        return self._position

    def open(self) -> None:
        """Open the file and record its size.

        Raises:
            LocalIOFailure: If the file cannot be opened.
        """
        try:
            self._file = self._path.open("rb")
            self._size = os.fstat(self._file.fileno()).st_size
        except OSError as e:
            self.close()
            raise LocalIOFailure(f"Cannot open {self._path}: {e}") from e
        logger.debug(f"Opened {self._path} ({self._size} bytes)")

    def close(self) -> None:
        """Close the file handle if open."""
        if self._file is not None:
            self._file.close()
            self._file = None

    async def __aenter__(self) -> FileSource:
        await asyncio.to_thread(self.open)
        return self

    async def __aexit__(self, *args: object) -> None:
        self.close()

    async def read(self, size: int) -> bytes:
        """Read up to size bytes; an empty result means end of file.

        Raises:
            LocalIOFailure: If the file is not open or the read fails.
        """
        if self._file is None:
            raise LocalIOFailure(f"{self._path} is not open")
        try:
            data = await asyncio.to_thread(self._file.read, size)
        except OSError as e:
            raise LocalIOFailure(f"Cannot read {self._path}: {e}") from e
        self._position += len(data)
        return data

    async def iter_chunks(self, read_size: int, limit: int) -> AsyncIterator[bytes]:
        """Yield exactly limit bytes in increments of at most read_size.

        Args:
            read_size: Maximum bytes per increment.
            limit: Bytes to read in total.

        Raises:
            LocalIOFailure: If the file ends before limit bytes were read.
        """
        remaining = limit
        while remaining > 0:
            data = await self.read(min(read_size, remaining))
            if not data:
                raise LocalIOFailure(
                    f"{self._path} shrank during upload: "
                    f"ended at {self._position} of {self._size} bytes"
                )
            remaining -= len(data)
            yield data
