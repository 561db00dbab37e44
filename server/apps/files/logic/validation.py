"""Validation of externally supplied filenames and uploads."""

from django.core.files.base import File as DjangoFile

from server.apps.files.exceptions import FileValidationError


def validate_filename(name: str | None) -> str:
    """Check that a filename is present and not blank.

    Path traversal is not checked here: the storage service normalizes
    the resolved path and compares it against its root instead.

    Args:
        name: Raw filename, possibly ``None``.

    Returns:
        The filename, unmodified.

    Raises:
        FileValidationError: If the name is missing or whitespace only.
    """
    if name is None or not name.strip():
        raise FileValidationError('Invalid filename.')
    return name


def validate_uploaded_file(uploaded_file: DjangoFile) -> str:
    """Check that an uploaded file can be stored.

    Args:
        uploaded_file: File received from the caller.

    Returns:
        Filename to store the upload under.

    Raises:
        FileValidationError: If the upload is empty or has no usable name.
    """
    if not uploaded_file.size:
        raise FileValidationError('Failed to store empty file.')

    # additional checks on file type or size belong here
    return validate_filename(uploaded_file.name)
