"""Helpers for the `{success, data, message}` response envelope."""

from typing import Any

from rest_framework import status
from rest_framework.response import Response


def ok(data: Any = None, *, message: str | None = None, status_code: int = status.HTTP_200_OK, **extra: Any) -> Response:
    body: dict[str, Any] = {"success": True}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = data
    body.update(extra)
    return Response(body, status=status_code)


def created(data: Any = None, **extra: Any) -> Response:
    return ok(data, status_code=status.HTTP_201_CREATED, **extra)


def failure(message: str, *, status_code: int, **extra: Any) -> Response:
    body: dict[str, Any] = {"success": False, "message": message}
    body.update(extra)
    return Response(body, status=status_code)
