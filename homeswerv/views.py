"""
Project-level views: health check and error handlers.
"""
from django.http import JsonResponse
from django.views import defaults
from django.views.decorators.http import require_GET


@require_GET
def health_check(request):
    """GET /api/v1/health/ - unauthenticated liveness probe."""
    return JsonResponse({"status": "ok", "service": "homeswerv"})


def _api_error(code, message, status):
    return JsonResponse({'error': {'code': code, 'message': message, 'status': status}}, status=status)


def not_found(request, exception=None):
    """JSON under /api/, Django's page everywhere else."""
    if request.path.startswith('/api/'):
        return _api_error('NOT_FOUND', 'The requested resource was not found.', 404)
    return defaults.page_not_found(request, exception)


def server_error(request):
    if request.path.startswith('/api/'):
        return _api_error('SERVER_ERROR', 'An unexpected error occurred.', 500)
    return defaults.server_error(request)
