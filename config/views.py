import logging

from django.http import JsonResponse

logger = logging.getLogger(__name__)


def error_404(request, exception):
    """JSON 404 handler."""
    return JsonResponse({
        'error': 'Not found',
        'path': request.path,
        'status': 404
    }, status=404)


def error_500(request):
    """JSON 500 handler."""
    logger.error("Unhandled server error on %s %s", request.method, request.path)
    return JsonResponse({
        'error': 'Internal server error',
        'status': 500
    }, status=500)
