"""Main application module for the Scheduler Admin service."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Final

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from scheduler_admin.actions.service import ActionReportFormatter
from scheduler_admin.config import config_logger, engine, seed_db, settings
from scheduler_admin.utils.banner import create_banner
from scheduler_admin.utils.error_handler import register_exception_handlers
from scheduler_admin.utils.prometheus import add_prometheus_metrics
from scheduler_admin.utils.routers import register_routers

config_logger()


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None]:
    """Prepare the action store on startup and release it on shutdown."""
    create_banner(settings, silent=settings.app_env == "testing")

    async with engine.begin() as conn:
        if settings.clear_db_on_restart:
            await conn.run_sync(SQLModel.metadata.drop_all)
        await conn.run_sync(SQLModel.metadata.create_all)

    if settings.seed_db_on_start:
        async with AsyncSession(engine) as session:
            await seed_db(session)

    logger.info("Scheduler admin ready", env=settings.app_env)
    yield
    await engine.dispose()


app: Final = FastAPI(
    title="Scheduler Admin",
    description="Read-only admin API listing pending scheduled actions",
    root_path=settings.root_path,
    version=settings.version,
    lifespan=lifespan,
)

app.state.action_formatter = ActionReportFormatter(
    display_timezone=settings.display_timezone
)


# --------------------------------------------------------
# P R O M E T H E U S
# --------------------------------------------------------
add_prometheus_metrics(app)


# --------------------------------------------------------
# C O R S
# --------------------------------------------------------
if settings.app_env != "production":
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allow_origin_in_dev,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )


# --------------------------------------------------------
# R O U T E R S
# --------------------------------------------------------
register_routers(app)


# --------------------------------------------------------
# E X C E P T I O N S
# --------------------------------------------------------
register_exception_handlers(app)
