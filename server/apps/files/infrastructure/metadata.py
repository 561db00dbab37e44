"""Metadata helpers for stored files."""

import mimetypes
from pathlib import Path
from typing import Final

from django.utils.http import content_disposition_header

DEFAULT_CONTENT_TYPE: Final = 'application/octet-stream'


def detect_mime_type(filename: str) -> str:
    """Detect MIME type from a filename extension.

    Uses Python's built-in mimetypes module; file contents are never
    inspected.

    Args:
        filename: Filename or path with extension.

    Returns:
        MIME type string (e.g., 'image/jpeg', 'application/pdf').
        Returns 'application/octet-stream' if type cannot be determined,
        so clients download the file instead of rendering it.
    """
    mime_type, _ = mimetypes.guess_type(filename)
    if mime_type is None:
        return DEFAULT_CONTENT_TYPE
    return mime_type


def extract_filename(storage_path: str | Path) -> str:
    """Extract filename from storage path.

    Args:
        storage_path: Full path (e.g., '/srv/upload-dir/docs/file.pdf').

    Returns:
        Filename (e.g., 'file.pdf').
    """
    return Path(storage_path).name


def attachment_disposition(filename: str) -> str:
    """Build a Content-Disposition value for downloading a file.

    Args:
        filename: Base name offered to the client.

    Returns:
        Header value such as ``attachment; filename="report.pdf"``.
    """
    return content_disposition_header(as_attachment=True, filename=filename)
