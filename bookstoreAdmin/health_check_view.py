import logging

from django.db import DatabaseError, connection
from django.http import HttpResponse

logger = logging.getLogger(__name__)

def health(request):
    """
    Health check endpoint for Load Balancer.
    Reports 503 when the database cannot be reached.
    """
    try:
        connection.ensure_connection()
    except DatabaseError as e:
        logger.error(f"Health check failed to reach the database: {e}")
        return HttpResponse("DATABASE UNAVAILABLE", content_type="text/plain", status=503)

    return HttpResponse("OK", content_type="text/plain")
