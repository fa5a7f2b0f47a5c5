"""Configuration module for the Scheduler Admin application.

This module provides centralized configuration management for the service,
including the database connection to the action store, logging setup, error
codes and application settings.

Key Components:
- settings: Application configuration loaded from environment variables and TOML files
- Database: Async SQLAlchemy engine and session management for the action store
- Logging: Loguru-based logging configuration with development/production modes
- Error handling: Centralized error codes and messages
- Database seeding: Sample scheduled actions for development and testing
"""

from scheduler_admin.config.config import settings
from scheduler_admin.config.db import engine, get_session
from scheduler_admin.config.errors import ErrorCode, ErrorNames
from scheduler_admin.config.logger import config_logger
from scheduler_admin.config.seed import seed_db

__all__ = [
    "ErrorCode",
    "ErrorNames",
    "config_logger",
    "engine",
    "get_session",
    "seed_db",
    "settings",
]
