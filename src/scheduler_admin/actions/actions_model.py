"""Model for action responses."""

from pydantic import BaseModel, Field

__all__ = ["ActionDisplayModel"]


class ActionDisplayModel(BaseModel):
    """Display-ready pending action for the admin dashboard.

    ``timestamp``, ``scheduled`` and ``schedule_delta`` are unset when the
    action has no next run.
    """

    id: int
    hook: str
    group: str
    timestamp: int | None = Field(None, description="Next run as Unix timestamp")
    scheduled: str | None = Field(None, description="Next run as local date string")
    schedule_delta: str | None = Field(
        None,
        description="Distance to the next run, e.g. '(3 days)' or '(2 hours ago)'",
    )
    parameters: list[str] = Field(default_factory=list)
    recurrence: str
