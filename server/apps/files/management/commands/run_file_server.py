"""Django management command to run the file server."""

import logging
from typing import Any, final

from typing_extensions import override

from cheroot.wsgi import Server as WSGIServer
from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from django.core.wsgi import get_wsgi_application

from server.apps.files.exceptions import StorageError
from server.apps.files.logic.file_operations import get_storage_service

logger = logging.getLogger(__name__)


@final
class Command(BaseCommand):
    """Run the file server using cheroot WSGI server."""

    help = 'Run the HTTP file server'

    @override
    def add_arguments(self, parser: Any) -> None:
        """Add command arguments.

        Args:
            parser: Argument parser.
        """
        parser.add_argument(
            '--host',
            type=str,
            default=None,
            help='Host to bind to (default: from settings)',
        )
        parser.add_argument(
            '--port',
            type=int,
            default=None,
            help='Port to bind to (default: from settings)',
        )
        parser.add_argument(
            '--threads',
            type=int,
            default=10,
            help='Number of worker threads (default: 10)',
        )

    @override
    def handle(self, *args: Any, **options: Any) -> None:
        """Execute the command.

        The storage root is prepared before binding the socket, so a bad
        location stops the process instead of failing every request.

        Args:
            args: Positional arguments.
            options: Keyword arguments from command line.

        Raises:
            CommandError: If the storage root cannot be prepared.
        """
        try:
            storage = get_storage_service()
        except StorageError as error:
            raise CommandError(f'Cannot start file server: {error}') from error

        host = options['host'] or settings.FILE_SERVER_HOST
        port = options['port'] or settings.FILE_SERVER_PORT

        self.stdout.write(
            self.style.SUCCESS(
                f'Starting file server on {host}:{port} '
                f'(storage: {storage.root})',
            ),
        )

        server = WSGIServer(
            bind_addr=(host, port),
            wsgi_app=get_wsgi_application(),
            numthreads=options['threads'],
        )

        # Set server name for HTTP headers
        server.server_name = 'FileServer'

        try:
            logger.info('File server starting on %s:%d', host, port)
            server.start()
        except KeyboardInterrupt:
            self.stdout.write(self.style.WARNING('\nShutting down...'))
        finally:
            server.stop()
            self.stdout.write(self.style.SUCCESS('File server stopped'))
