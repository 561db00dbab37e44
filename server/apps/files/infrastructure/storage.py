"""Local filesystem storage backend for user files."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import final

from typing_extensions import override

from django.core.files.base import File as DjangoFile
from django.core.files.storage import FileSystemStorage

from server.apps.files.exceptions import (
    DisallowedPathError,
    DownloadError,
    StorageError,
    StoredFileNotFoundError,
)
from server.apps.files.infrastructure.metadata import (
    DEFAULT_CONTENT_TYPE,
    attachment_disposition,
    detect_mime_type,
    extract_filename,
)
from server.apps.files.logic.validation import (
    validate_filename,
    validate_uploaded_file,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StorageConfig:
    """Construction parameters of the storage service.

    Attributes:
        location: Root directory for stored files, absolute or relative.
        file_permissions_mode: Mode applied to newly stored files,
            ``None`` uses the ``FILE_UPLOAD_PERMISSIONS`` setting.
    """

    location: str | Path
    file_permissions_mode: int | None = None


@dataclass(frozen=True, slots=True)
class DownloadedFile:
    """Content of a stored file prepared for an HTTP response."""

    content: bytes
    content_type: str
    filename: str

    @property
    def content_disposition(self) -> str:
        """Header value asking the client to save the file."""
        return attachment_disposition(self.filename)


@final
class FileSystemStorageService(FileSystemStorage):
    """Filesystem storage for files managed through the HTTP endpoints.

    Extends Django's FileSystemStorage with:
    - Containment check after normalizing ``.``/``..`` and symbolic links
    - Overwrite on store (last writer wins)
    - Files app exceptions instead of OSError and SuspiciousFileOperation
    - Logging of every completed or failed operation

    One instance is shared by all requests of a process. No locking is
    done beyond Django's exclusive lock while a file is written.
    """

    @override
    def __init__(self, config: StorageConfig) -> None:
        """Initialize the storage and create the root directory.

        Args:
            config: Storage configuration.

        Raises:
            StorageError: If the location is blank or cannot be created.
        """
        location = str(config.location)
        if not location.strip():
            raise StorageError('File upload location can not be empty.')

        root = Path(location)
        try:
            root.mkdir(parents=True, exist_ok=True)
        except OSError as error:
            logger.exception('Failed to create storage root: %s', root)
            raise StorageError(
                f'Could not initialize storage location: {root}',
            ) from error

        super().__init__(
            location=os.path.realpath(root),
            file_permissions_mode=config.file_permissions_mode,
            allow_overwrite=True,
        )
        logger.info('File storage root: %s', self.location)

    @property
    def root(self) -> Path:
        """Get the canonical root directory."""
        return Path(self.location)

    @override
    def path(self, name: str) -> str:
        """Return the canonical filesystem path of a name.

        Unlike ``safe_join`` this also resolves symbolic links, so a link
        inside the root cannot lead outside of it.

        Args:
            name: Name relative to the root.

        Returns:
            Absolute path inside the root (or the root itself).

        Raises:
            DisallowedPathError: If the path leaves the root.
        """
        if '\x00' in name:
            raise DisallowedPathError(name)

        full_path = os.path.realpath(os.path.join(self.location, name))
        if not Path(full_path).is_relative_to(self.location):
            logger.warning(
                'Rejected path outside storage root: %s -> %s',
                name,
                full_path,
            )
            raise DisallowedPathError(name)
        return full_path

    def resolve(self, filename: str) -> Path:
        """Resolve a filename to a canonical path strictly below the root.

        Args:
            filename: Validated filename relative to the root.

        Returns:
            Absolute, normalized path below the root.

        Raises:
            DisallowedPathError: If the path leaves the root or points
                at the root itself.
        """
        full_path = Path(self.path(filename))
        if full_path == self.root:
            logger.warning('Rejected path to storage root: %s', filename)
            raise DisallowedPathError(filename)
        return full_path

    def store(self, uploaded_file: DjangoFile) -> Path:
        """Store an uploaded file, overwriting any existing file.

        Args:
            uploaded_file: Non-empty file with a valid name.

        Returns:
            Path the file was stored at.

        Raises:
            FileValidationError: If the upload is empty or badly named.
            DisallowedPathError: If the name resolves outside the root.
            StorageError: If writing fails.
        """
        filename = validate_uploaded_file(uploaded_file)
        logger.debug('Filename to upload: %s', filename)

        name = self._storage_name(filename)
        existed = self.exists(name)
        try:
            saved_name = self.save(name, uploaded_file)
        except OSError as error:
            logger.exception('Failed to store file: %s', name)
            if not existed:
                self.rollback_upload(name)
            raise StorageError('Failed to store file.') from error

        destination = Path(self.path(saved_name))
        logger.info('Stored file: %s', destination)
        return destination

    def rollback_upload(self, name: str) -> None:
        """Remove a partially written new file after a failed store.

        This is a best-effort operation - if deletion fails, the error
        is logged but not raised, as the store has already failed.

        Args:
            name: Storage name of the file to remove.
        """
        try:
            logger.warning('Rolling back upload, deleting file: %s', name)
            super().delete(name)
        except OSError:
            logger.exception(
                'Failed to rollback upload, orphaned file: %s',
                name,
            )

    def download(self, filename: str) -> DownloadedFile:
        """Read a stored file for download.

        The content type is guessed from the extension and defaults to
        ``application/octet-stream``. The attachment name is taken from
        the resolved path, not from the raw filename.

        Args:
            filename: Name of the stored file.

        Returns:
            File content with response metadata.

        Raises:
            FileValidationError: If the filename is blank.
            DisallowedPathError: If the name resolves outside the root.
            DownloadError: If the file does not exist or cannot be read.
        """
        validate_filename(filename)
        name = self._storage_name(filename)
        full_path = self.path(name)

        content = None
        try:
            if os.path.isfile(full_path):
                with self.open(name, 'rb') as stored_file:
                    content = stored_file.read()
        except FileNotFoundError:
            # removed between the check and the read
            content = None
        except OSError as error:
            logger.exception('Unable to download file: %s', full_path)
            raise DownloadError('Unable to download file.') from error

        if content is None:
            logger.warning('File not found for download: %s', full_path)
            raise DownloadError(f'File {filename} does not exist.')

        attachment_name = extract_filename(full_path)
        content_type = detect_mime_type(attachment_name)
        if content_type == DEFAULT_CONTENT_TYPE:
            logger.info(
                'Unable to determine MIME type of %s, using default',
                attachment_name,
            )

        return DownloadedFile(
            content=content,
            content_type=content_type,
            filename=attachment_name,
        )

    @override
    def delete(self, name: str) -> None:
        """Permanently remove a stored file.

        Args:
            name: Name of the stored file.

        Raises:
            FileValidationError: If the filename is blank.
            DisallowedPathError: If the name resolves outside the root.
            StoredFileNotFoundError: If the file does not exist.
            StorageError: If the file is a directory or cannot be removed.
        """
        validate_filename(name)
        storage_name = self._storage_name(name)
        full_path = self.path(storage_name)

        if not os.path.lexists(full_path):
            logger.warning('File not found for delete: %s', full_path)
            raise StoredFileNotFoundError(name)
        if os.path.isdir(full_path):
            raise StorageError(f'Cannot delete directory {name}.')

        try:
            super().delete(storage_name)
        except OSError as error:
            logger.exception('Failed to delete file: %s', full_path)
            raise StorageError(f'Failed to delete file {name}.') from error

        logger.info('Deleted file: %s', full_path)

    def retrieve_files_list(self) -> list[str]:
        """List names of all entries directly under the root.

        Returns:
            Sorted base names of files and directories in the root.

        Raises:
            StorageError: If the root directory cannot be read.
        """
        try:
            directories, files = self.listdir('')
        except OSError as error:
            logger.exception('Failed to list storage root: %s', self.location)
            raise StorageError('Unable to retrieve files list.') from error
        return sorted(directories + files)

    def _storage_name(self, filename: str) -> str:
        """Normalize a filename to its posix name relative to the root.

        Args:
            filename: Validated filename.

        Returns:
            Name without ``.``/``..`` segments, as accepted by ``save``.
        """
        return self.resolve(filename).relative_to(self.root).as_posix()
