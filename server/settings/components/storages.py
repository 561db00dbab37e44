"""File storage configuration.

Uploaded files are kept in a directory tree on the local filesystem.
The directory is created on first use if it does not exist.
"""

from typing import Final

from server.settings.components import BASE_DIR, config

_STORAGE_LOCATION = config(
    'DJANGO_FILE_STORAGE_LOCATION',
    default='upload-dir',
)

# Root directory of stored files, relative paths are taken from BASE_DIR.
# A blank value is kept as is so the storage refuses to start.
FILE_STORAGE_LOCATION: Final = (
    BASE_DIR.joinpath(_STORAGE_LOCATION)
    if _STORAGE_LOCATION.strip()
    else _STORAGE_LOCATION
)
