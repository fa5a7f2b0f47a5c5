"""Router Initializer."""

from fastapi import FastAPI

from scheduler_admin.actions.router import router as actions_router
from scheduler_admin.common.router import router as common_router

__all__ = ["register_routers"]


def register_routers(app: FastAPI) -> None:
    """Register all API routers with the FastAPI application.

    Args:
        app: FastAPI application instance.
    """
    app.include_router(common_router)
    app.include_router(actions_router, prefix="/actions")
