"""Structured error helpers for API responses."""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse


def build_error_payload(code: str, message: str, details: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    payload = {"error": {"code": code, "message": message}}
    if details is not None:
        payload["error"]["details"] = details
    return payload


class AppError(Exception):
    """Application-scoped error for standardized API responses."""

    def __init__(self, status_code: int, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.message = message
        self.details = details
        self.payload = build_error_payload(code, message, details)


class TaskNotFoundError(AppError):
    """No task exists for the given id."""

    def __init__(self, task_id: int):
        super().__init__(
            status.HTTP_404_NOT_FOUND,
            "TASK_NOT_FOUND",
            "Task not found",
            {"task_id": task_id},
        )


class TeamMismatchError(AppError):
    """The task exists but belongs to a different team than the caller claimed."""

    def __init__(self, task_id: int, team_id: int):
        super().__init__(
            status.HTTP_403_FORBIDDEN,
            "TASK_TEAM_MISMATCH",
            "Task does not belong to this team",
            {"task_id": task_id, "team_id": team_id},
        )


class ForbiddenError(AppError):
    """The caller's team role does not allow the action."""

    def __init__(self, message: str = "You do not have permission to manage tasks"):
        super().__init__(status.HTTP_403_FORBIDDEN, "FORBIDDEN", message)


class DataStoreError(AppError):
    """The underlying database call failed."""

    def __init__(self, message: str):
        super().__init__(status.HTTP_503_SERVICE_UNAVAILABLE, "DATA_STORE_FAILURE", message)


async def app_error_handler(_: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.payload)