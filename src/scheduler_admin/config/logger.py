"""Logger configuration."""

import logging
import sys
from collections.abc import Mapping
from typing import Any

from loguru import logger
from loki_logger_handler.formatters.loguru_formatter import LoguruFormatter
from loki_logger_handler.loki_logger_handler import LokiLoggerHandler

from .config import settings

__all__ = ["config_logger"]


def config_logger() -> None:
    """Route stdlib logging into loguru and install the sinks for the environment.

    Development and testing write a rotating file plus colored stdout. Production
    writes compact lines to stderr and ships structured records to Loki.
    """
    is_production = settings.app_env == "production"

    if is_production:
        _intercept_stdlib_logging()

    logger.remove()

    if not is_production:
        logger.add(
            settings.log_path,
            rotation=settings.rotation,
            format=_development_format,
            enqueue=True,
            backtrace=False,
            diagnose=False,
            compression="zip",
            colorize=False,
            level=logging.DEBUG,
        )

    logger.add(
        sys.stderr if is_production else sys.stdout,
        format=_production_format if is_production else _development_format,
        level=settings.log_level,
        colorize=not is_production,
        enqueue=True,
        backtrace=not is_production,
        diagnose=not is_production,
        catch=not is_production,
    )

    if is_production:
        logger.add(
            LokiLoggerHandler(
                url=settings.loki_url,
                labels={
                    "application": "scheduler-admin",
                    "environment": settings.app_env,
                    "version": settings.version,
                },
                timeout=5,
                enable_structured_loki_metadata=True,
                default_formatter=LoguruFormatter(),  # type: ignore[arg-type]
            ),
            serialize=True,
            enqueue=True,
            level=settings.log_level,
        )


def _intercept_stdlib_logging() -> None:
    logging.root.handlers = [InterceptHandler()]
    logging.root.setLevel(settings.log_level)

    for name in list(logging.root.manager.loggerDict):
        std_logger = logging.getLogger(name)
        std_logger.handlers = []
        std_logger.propagate = True


class InterceptHandler(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:
        """Forward a stdlib log record to loguru, keeping the caller's frame."""
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_back and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def _extras(record: Mapping[str, Any], *, colored: bool) -> str:
    # Placeholders are resolved by loguru, so extra values never reach str.format.
    if not record["extra"]:
        return ""
    if colored:
        parts = (
            f"<yellow>{key}</yellow>=<cyan>{{extra[{key}]}}</cyan>"
            for key in record["extra"]
        )
    else:
        parts = (f"{key}={{extra[{key}]}}" for key in record["extra"])
    return " | " + " | ".join(parts)


def _production_format(record: Mapping[str, Any]) -> str:
    """Structured single-line format for production."""
    line = (
        "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | "
        "{name}:{line} - {message}"
    )
    return line + _extras(record, colored=False) + "\n{exception}"


def _development_format(record: Mapping[str, Any]) -> str:
    """Colored format for development, including the calling function."""
    line = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}:{function}:{line}</cyan> - {message}"
    )
    return line + _extras(record, colored=True) + "\n{exception}"
