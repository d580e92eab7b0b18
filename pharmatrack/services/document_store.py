"""Filesystem storage for documents uploaded against an order.

Files live under ``<upload_dir>/<order identifier>/<original filename>``.
The directory listing is the only index: there is no database record per
file, and a second upload with the same filename replaces the first.
"""

import asyncio
import logging
from pathlib import Path

from pharmatrack.exceptions import RecordNotFoundError, RecordValidationError, StorageError

logger = logging.getLogger(__name__)


def safe_filename(filename: str | None) -> str:
    """Strip directory components from a client-supplied filename.

    Args:
        filename: Filename as sent in the multipart upload.

    Returns:
        The final path segment of the filename.

    Raises:
        RecordValidationError: If nothing usable remains.
    """
    name = Path((filename or "").replace("\\", "/")).name
    if name in ("", ".", ".."):
        raise RecordValidationError("Filename is required")
    return name


def validate_namespace(order_id: str) -> str:
    """Check that an order identifier can be used as a single directory name."""
    if not order_id or order_id in (".", "..") or "/" in order_id or "\\" in order_id:
        raise RecordValidationError(
            "Invalid order identifier", error={"orderId": order_id}
        )
    return order_id


class DocumentStore:
    """Stores uploaded files in one directory per order identifier."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def namespace_path(self, order_id: str) -> Path:
        return self.root / validate_namespace(order_id)

    async def store_file(self, order_id: str, filename: str | None, content: bytes) -> Path:
        """Write ``content`` under the order's namespace directory.

        The namespace directory (and any missing parents) is created on demand.
        An existing file with the same name is overwritten.

        Args:
            order_id: Order identifier naming the namespace.
            filename: Original filename of the upload.
            content: File bytes.

        Returns:
            Path of the stored file.

        Raises:
            RecordValidationError: If the identifier or filename is unusable.
            StorageError: If the filesystem write fails.
        """
        directory = self.namespace_path(order_id)
        target = directory / safe_filename(filename)

        def _write() -> None:
            directory.mkdir(parents=True, exist_ok=True)
            target.write_bytes(content)

        try:
            loop = asyncio.get_running_loop()
            await loop.run_in_executor(None, _write)
        except OSError as e:
            logger.error("Error storing file %s: %s", target, e)
            raise StorageError("Error storing file", error=str(e)) from e

        logger.info("Stored %d bytes at %s", len(content), target)
        return target

    async def list_files(self, order_id: str) -> list[str]:
        """List the filenames stored for an order identifier.

        Entries are returned in whatever order the filesystem yields them.

        Raises:
            RecordNotFoundError: If nothing was ever uploaded for the identifier.
            StorageError: If the directory cannot be read.
        """
        directory = self.namespace_path(order_id)

        def _list() -> list[str] | None:
            if not directory.is_dir():
                return None
            return [entry.name for entry in directory.iterdir()]

        try:
            loop = asyncio.get_running_loop()
            files = await loop.run_in_executor(None, _list)
        except OSError as e:
            logger.error("Error reading files for %s: %s", order_id, e)
            raise StorageError("Error reading files", error=str(e)) from e

        if files is None:
            raise RecordNotFoundError("No files found for this order")
        return files
