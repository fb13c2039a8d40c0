"""
Error logging and user-facing error formatting shared by the API views.
"""
import logging

from django.conf import settings
from django.utils import timezone

logger = logging.getLogger(__name__)

UNKNOWN_ERROR = 'An unknown error occurred'
UNEXPECTED_ERROR = 'An unexpected error occurred. Please try again.'


def log_error(error, location=None, **context):
    """Log an error together with where it happened and any extra context."""
    where = f" in {location}" if location else ''
    logger.error(f"Error{where}: {error}", extra={'context': context} if context else None)


def format_error_message(error):
    """Turn an exception, string or error-like object into a display message."""
    if error is None:
        return UNKNOWN_ERROR
    if isinstance(error, str):
        return error
    if isinstance(error, BaseException):
        message = str(error)
        return message or UNEXPECTED_ERROR
    if isinstance(error, dict):
        return error.get('message') or error.get('error_description') or UNEXPECTED_ERROR
    message = getattr(error, 'message', None) or getattr(error, 'error_description', None)
    return message or UNEXPECTED_ERROR


def handle_api_error(error, fallback_message='API request failed'):
    log_error(error, location='API request')
    return format_error_message(error) or fallback_message


def create_error_response(error, status='error'):
    """
    Standard error payload:
    { "status": ..., "message": ..., "timestamp": ..., "error": <debug only> }
    """
    payload = {
        'status': status,
        'message': format_error_message(error),
        'timestamp': timezone.now().isoformat(),
    }
    if settings.DEBUG:
        payload['error'] = repr(error)
    return payload
