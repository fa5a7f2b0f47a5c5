"""Exceptions for scheduled action queries."""

from scheduler_admin.common.exceptions import ServiceUnavailableError
from scheduler_admin.config.errors import ErrorNames

__all__ = ["ActionStoreError"]


class ActionStoreError(ServiceUnavailableError):
    """Exception raised when the action store query fails."""

    message = ErrorNames.ACTION_STORE_UNAVAILABLE
