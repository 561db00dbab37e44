"""File server settings."""

from server.settings.components import config

# File server host and port
FILE_SERVER_HOST = config('FILE_SERVER_HOST', default='0.0.0.0')  # noqa: S104
FILE_SERVER_PORT = config('FILE_SERVER_PORT', cast=int, default=8080)
