"""Common exceptions."""

from fastapi import status

from scheduler_admin.common.app_error import AppError
from scheduler_admin.config.errors import ErrorCode

__all__ = ["ServiceUnavailableError"]


class ServiceUnavailableError(AppError):
    """Exception raised when a backing service cannot answer."""

    error_code = ErrorCode.SERVICE_UNAVAILABLE
    message = "Service temporarily unavailable"
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
