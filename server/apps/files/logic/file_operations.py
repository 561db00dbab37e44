"""Business logic for file operations."""

import functools
import logging
from pathlib import Path

from django.conf import settings
from django.core.files.base import File as DjangoFile

from server.apps.files.infrastructure.storage import (
    DownloadedFile,
    FileSystemStorageService,
    StorageConfig,
)

logger = logging.getLogger(__name__)


@functools.cache
def get_storage_service() -> FileSystemStorageService:
    """Get the storage service configured for this process.

    Built once from ``FILE_STORAGE_LOCATION``; stored files get the
    ``FILE_UPLOAD_PERMISSIONS`` mode. Call
    ``get_storage_service.cache_clear()`` after changing those settings.

    Returns:
        Shared FileSystemStorageService instance.

    Raises:
        StorageError: If the storage root is blank or cannot be created.
    """
    config = StorageConfig(location=settings.FILE_STORAGE_LOCATION)
    return FileSystemStorageService(config)


def upload_file(uploaded_file: DjangoFile) -> Path:
    """Store an uploaded file under its own name.

    Args:
        uploaded_file: File received from the client.

    Returns:
        Path the file was stored at.
    """
    stored_path = get_storage_service().store(uploaded_file)
    logger.info('File uploaded: %s', uploaded_file.name)
    return stored_path


def download_file(filename: str) -> DownloadedFile:
    """Read a stored file for download.

    Args:
        filename: Name of the stored file.

    Returns:
        File content with response metadata.
    """
    downloaded = get_storage_service().download(filename)
    logger.info(
        'File downloaded: %s (%d bytes, %s)',
        downloaded.filename,
        len(downloaded.content),
        downloaded.content_type,
    )
    return downloaded


def delete_file(filename: str) -> None:
    """Permanently delete a stored file.

    Args:
        filename: Name of the stored file.
    """
    get_storage_service().delete(filename)
    logger.info('File deleted: %s', filename)


def list_files() -> list[str]:
    """List the names stored directly under the storage root.

    Returns:
        Sorted entry names.
    """
    filenames = get_storage_service().retrieve_files_list()
    logger.debug('Listed %d files', len(filenames))
    return filenames
