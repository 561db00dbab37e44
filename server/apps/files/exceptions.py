"""Exceptions for files app."""


class FileValidationError(Exception):
    """Raised when a filename or uploaded file is not acceptable.

    Always a caller-input problem: blank or missing filename, or an
    upload without content.
    """


class StorageError(Exception):
    """Raised when a filesystem operation on the storage root fails.

    The underlying ``OSError`` (if any) is chained as ``__cause__``.
    """


class DisallowedPathError(StorageError):
    """Raised when a filename resolves outside the storage root."""

    def __init__(self, filename: str) -> None:
        """Initialize DisallowedPathError.

        Args:
            filename: Raw filename supplied by the caller.
        """
        self.filename = filename
        super().__init__(
            f'Cannot access file outside of storage root: {filename}',
        )


class StoredFileNotFoundError(StorageError):
    """Raised when a stored file to be removed does not exist."""

    def __init__(self, filename: str) -> None:
        """Initialize StoredFileNotFoundError.

        Args:
            filename: Filename that was looked up.
        """
        self.filename = filename
        super().__init__(f'File {filename} does not exist.')


class DownloadError(Exception):
    """Raised when a stored file cannot be downloaded.

    Without ``__cause__`` the file simply does not exist; with a chained
    ``OSError`` the file exists but could not be read.
    """
