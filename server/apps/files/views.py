"""HTTP endpoints for managing stored files."""

import logging
from http import HTTPStatus

from django.http import HttpRequest, HttpResponse, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_http_methods

from server.apps.files.exceptions import (
    DisallowedPathError,
    DownloadError,
    FileValidationError,
    StorageError,
    StoredFileNotFoundError,
)
from server.apps.files.logic import file_operations

logger = logging.getLogger(__name__)

_UPLOAD_FIELD = 'file'


def _status_for(error: Exception) -> HTTPStatus:
    """Map a files app exception to an HTTP status.

    Args:
        error: Exception raised by a file operation.

    Returns:
        Status code to respond with.
    """
    if isinstance(error, FileValidationError | DisallowedPathError):
        return HTTPStatus.BAD_REQUEST
    if isinstance(error, StoredFileNotFoundError):
        return HTTPStatus.NOT_FOUND
    if isinstance(error, DownloadError):
        # a chained cause means the file exists but could not be read
        if error.__cause__ is None:
            return HTTPStatus.NOT_FOUND
        return HTTPStatus.INTERNAL_SERVER_ERROR
    return HTTPStatus.INTERNAL_SERVER_ERROR


def _error_response(error: Exception) -> JsonResponse:
    """Build the JSON error response for a files app exception."""
    status = _status_for(error)
    logger.info('Request failed with %d: %s', status, error)
    return JsonResponse({'detail': str(error)}, status=status)


@csrf_exempt
@require_http_methods(['POST'])
def upload_file(request: HttpRequest) -> HttpResponse:
    """Upload a file to the server.

    The file is sent as multipart form data in the ``file`` field.
    """
    uploaded_file = request.FILES.get(_UPLOAD_FIELD)
    if uploaded_file is None:
        return JsonResponse(
            {'detail': f'Missing "{_UPLOAD_FIELD}" form field.'},
            status=HTTPStatus.BAD_REQUEST,
        )

    try:
        file_operations.upload_file(uploaded_file)
    except (FileValidationError, StorageError) as error:
        return _error_response(error)

    return HttpResponse(
        f'Successfully uploaded: {uploaded_file.name}',
        status=HTTPStatus.CREATED,
        content_type='text/plain; charset=utf-8',
    )


@require_GET
def download_file(request: HttpRequest, filename: str) -> HttpResponse:
    """Download a stored file as an attachment."""
    try:
        downloaded = file_operations.download_file(filename)
    except (FileValidationError, StorageError, DownloadError) as error:
        return _error_response(error)

    response = HttpResponse(
        downloaded.content,
        content_type=downloaded.content_type,
    )
    response['Content-Disposition'] = downloaded.content_disposition
    return response


@csrf_exempt
@require_http_methods(['DELETE'])
def delete_file(request: HttpRequest, filename: str) -> HttpResponse:
    """Delete a stored file."""
    try:
        file_operations.delete_file(filename)
    except (FileValidationError, StorageError) as error:
        return _error_response(error)

    return HttpResponse(
        f'Successfully deleted: {filename}',
        content_type='text/plain; charset=utf-8',
    )


@require_GET
def list_files(request: HttpRequest) -> JsonResponse:
    """List names of the stored files."""
    try:
        filenames = file_operations.list_files()
    except StorageError as error:
        return _error_response(error)

    return JsonResponse(filenames, safe=False)
