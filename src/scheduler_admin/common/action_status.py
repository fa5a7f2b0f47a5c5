"""ActionStatus of a scheduled action."""

from enum import StrEnum

__all__ = ["ActionStatus"]


class ActionStatus(StrEnum):
    """Lifecycle status of a scheduled action in the host store."""

    PENDING = "pending"
    RUNNING = "in-progress"
    COMPLETE = "complete"
    FAILED = "failed"
    CANCELED = "canceled"
