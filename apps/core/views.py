"""
Django-level error handlers.

DRF views render their own errors through ``envelope_exception_handler``;
these cover requests that never reach a DRF view, such as an unknown path
or an id segment that fails its URL converter (``/profile/not-a-uuid``).
"""

from django.http import JsonResponse


def not_found(request, exception=None):
    return JsonResponse({"success": False, "message": "Not found."}, status=404)


def server_error(request):
    return JsonResponse(
        {"success": False, "message": "Internal Server Error"}, status=500
    )
