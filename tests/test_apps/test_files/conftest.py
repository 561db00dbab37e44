"""Shared fixtures for files app tests."""

import pytest
from django.core.files.base import ContentFile

from server.apps.files.infrastructure.storage import (
    FileSystemStorageService,
    StorageConfig,
)
from server.apps.files.logic.file_operations import get_storage_service


@pytest.fixture
def storage_root(tmp_path):
    """Directory used as storage root.

    Nested in ``tmp_path`` so tests can check nothing was written
    next to it.

    Returns:
        Path of the (not yet created) storage root.
    """
    return tmp_path / 'upload-dir'


@pytest.fixture
def storage_service(storage_root):
    """Create storage service rooted at a temporary directory.

    Returns:
        FileSystemStorageService instance.
    """
    return FileSystemStorageService(StorageConfig(location=storage_root))


@pytest.fixture
def configured_storage(settings, storage_root):
    """Point the per-process storage service at a temporary directory.

    Yields:
        Storage root path.
    """
    settings.FILE_STORAGE_LOCATION = storage_root
    get_storage_service.cache_clear()
    yield storage_root
    get_storage_service.cache_clear()


@pytest.fixture
def sample_file_content():
    """Sample file content for testing.

    Returns:
        ContentFile with test data.
    """
    return ContentFile(b'Test file', name='test.txt')
