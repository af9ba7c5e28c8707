# common/views.py
from django.utils import timezone
from django.views.decorators.http import require_GET
from django.http import JsonResponse

from .responses import error_response


@require_GET
def health_view(request):
    return JsonResponse({
        "status": "OK",
        "message": "FleetLink backend is running",
        "timestamp": timezone.now().isoformat(),
    })


def not_found_view(request, exception=None):
    return error_response(f"Route {request.path} not found", status=404)


def server_error_view(request):
    return error_response("Internal server error", status=500)
