"""Tests for metadata utilities."""

import pytest

from server.apps.files.infrastructure.metadata import (
    attachment_disposition,
    detect_mime_type,
    extract_filename,
)


def test_detect_mime_type():
    """Test MIME type detection from filename."""
    assert detect_mime_type('test.pdf') == 'application/pdf'
    assert detect_mime_type('test.txt') == 'text/plain'
    assert detect_mime_type('test.jpg') == 'image/jpeg'
    assert detect_mime_type('test.png') == 'image/png'
    assert detect_mime_type('/srv/files/docs/report.csv') == 'text/csv'


@pytest.mark.parametrize('filename', ['test.unknownext', 'README', 'archive.'])
def test_detect_mime_type_unknown(filename):
    """Test MIME type detection falls back to octet-stream."""
    assert detect_mime_type(filename) == 'application/octet-stream'


def test_extract_filename():
    """Test filename extraction from path."""
    assert extract_filename('/srv/upload-dir/documents/test.pdf') == 'test.pdf'
    assert extract_filename('test.txt') == 'test.txt'
    assert extract_filename('folder/subfolder/file.doc') == 'file.doc'


def test_attachment_disposition():
    """Test Content-Disposition value for downloads."""
    assert attachment_disposition('report.pdf') == (
        'attachment; filename="report.pdf"'
    )


def test_attachment_disposition_escapes_quotes():
    """Test quotes in filenames cannot break out of the header value."""
    disposition = attachment_disposition('a"b.txt')

    assert disposition.startswith('attachment; ')
    assert '"a"b.txt"' not in disposition
