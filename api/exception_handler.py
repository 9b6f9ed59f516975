import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from base.exceptions import (
    BookstoreError,
    ConcurrencyConflict,
    DeletionError,
    NotFound,
    PersistenceError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Most specific first: InvalidTransition is matched through ValidationError
_STATUS_BY_ERROR = [
    (NotFound, status.HTTP_404_NOT_FOUND),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ConcurrencyConflict, status.HTTP_409_CONFLICT),
    (DeletionError, status.HTTP_409_CONFLICT),
    (PersistenceError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]

def bookstore_exception_handler(exc, context):
    """
    Maps the core's error kinds to HTTP responses, everything else goes to DRF's handler.
    """
    if not isinstance(exc, BookstoreError):
        return exception_handler(exc, context)

    for error_type, http_status in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            break
    else:
        http_status = status.HTTP_500_INTERNAL_SERVER_ERROR

    body = {"error": exc.message}
    if isinstance(exc, ValidationError) and exc.field:
        body["field"] = exc.field

    if http_status >= 500:
        logger.error(f"{type(exc).__name__} while handling {context.get('view').__class__.__name__}: {exc.message}")
    return Response(body, status=http_status)
