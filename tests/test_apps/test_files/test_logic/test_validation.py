"""Tests for filename and upload validation."""

import pytest
from django.core.files.base import ContentFile

from server.apps.files.exceptions import FileValidationError
from server.apps.files.logic.validation import (
    validate_filename,
    validate_uploaded_file,
)


@pytest.mark.parametrize('name', [None, '', ' ', '\t\n', '   '])
def test_validate_filename_blank(name):
    """Test missing and whitespace-only filenames are rejected."""
    with pytest.raises(FileValidationError, match='Invalid filename'):
        validate_filename(name)


@pytest.mark.parametrize('name', ['test.txt', ' padded.txt ', 'docs/a.pdf'])
def test_validate_filename_returns_name_unchanged(name):
    """Test valid filenames are returned as given."""
    assert validate_filename(name) == name


def test_validate_filename_allows_traversal_segments():
    """Test traversal is left to path resolution."""
    assert validate_filename('../../etc/passwd') == '../../etc/passwd'


def test_validate_uploaded_file(sample_file_content):
    """Test valid upload returns its filename."""
    assert validate_uploaded_file(sample_file_content) == 'test.txt'


def test_validate_uploaded_file_empty():
    """Test empty upload is rejected before the name is checked."""
    empty_file = ContentFile(b'', name=None)

    with pytest.raises(FileValidationError, match='empty file'):
        validate_uploaded_file(empty_file)


@pytest.mark.parametrize('name', [None, '', '  '])
def test_validate_uploaded_file_invalid_name(name):
    """Test upload without a usable name is rejected."""
    nameless_file = ContentFile(b'content', name=name)

    with pytest.raises(FileValidationError, match='Invalid filename'):
        validate_uploaded_file(nameless_file)
