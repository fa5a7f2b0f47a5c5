"""Declaration of the root package scheduler_admin."""

from scheduler_admin.app import app
from scheduler_admin.server import run

__all__ = ["app", "main"]


def main() -> None:
    """Run the application server."""
    run()
