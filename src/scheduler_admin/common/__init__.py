"""Common module for shared error handling and status types.

Key Components:
- App errors: Application-specific error base class with structured error codes
- HTTP exceptions: error types mapped to RESTful status codes
- Action status: lifecycle states of actions in the host store
- Health routes: root and health check endpoints
"""

from .action_status import ActionStatus
from .app_error import AppError
from .exceptions import ServiceUnavailableError

__all__ = [
    "ActionStatus",
    "AppError",
    "ServiceUnavailableError",
]
