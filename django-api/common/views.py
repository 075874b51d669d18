from django.http import JsonResponse
from django.utils import timezone


def health(request):
    return JsonResponse({"status": "ok", "timestamp": timezone.now().isoformat()})


def not_found(request, exception=None):
    return JsonResponse(
        {"success": False, "message": f"Route {request.method} {request.path} not found"},
        status=404,
    )


def server_error(request):
    return JsonResponse({"success": False, "message": "Something went wrong!"}, status=500)
