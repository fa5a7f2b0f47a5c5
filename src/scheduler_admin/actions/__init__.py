"""Actions module for reporting pending scheduled actions.

Reads pending actions from the host scheduler's store and renders them for the
admin dashboard: next run as date, relative delta and timestamp, arguments as
``key => value`` strings, and recurrence as a human readable interval or cron
expression.

Key Components:
- Query mapping: HTTP query parameters to store query arguments
- Action store: read adapter over the host scheduler's action table
- Schedules: tagged schedule variants resolved when an action is loaded
- Formatter: display records sorted by hook, group and run date
"""

from .actions_model import ActionDisplayModel
from .exceptions import ActionStoreError
from .schemas import ActionQueryArgs, SortOrder

__all__ = ["ActionDisplayModel", "ActionQueryArgs", "ActionStoreError", "SortOrder"]
