"""Banner generation for application."""

import platform
import sys
from datetime import UTC, datetime

from pyfiglet import figlet_format

from scheduler_admin.config.config import Settings

__all__ = ["create_banner"]


def create_banner(settings: Settings, silent: bool = False) -> str:
    """Generate and optionally print a banner with server name and settings.

    Args:
        settings: Application configuration settings
        silent: If True, suppress console output and return banner as string

    Returns:
        The complete banner as a string
    """
    host = "0.0.0.0" if settings.host_binding == "0.0.0.0" else "localhost"  # noqa: S104
    env_color = "\033[1;31m" if settings.app_env == "production" else "\033[1;32m"
    log_target = settings.log_path if settings.app_env != "production" else "stderr"

    lines = [
        "\033[1;36m" + figlet_format("SCHED ADMIN", font="slant") + "\033[0m",
        f"\033[1;33mScheduler Admin v{settings.version}\033[0m",
        f"\033[0;37m{'-' * 60}\033[0m",
        f"Environment: {env_color}{settings.app_env}\033[0m",
        f"Actions API: http://{host}:{settings.port}{settings.root_path}/actions",
        f"Metrics: http://{host}:{settings.port}/metrics",
        "\n\033[1;33mAction Store\033[0m",
        f"  • Engine: {settings.db_url.split('://')[0]}",
        f"  • Default Page Size: {settings.actions_default_per_page}",
        f"  • Display Timezone: {settings.display_timezone or 'UTC (stored)'}",
        f"  • Seed on Start: {'yes' if settings.seed_db_on_start else 'no'}",
        "\n\033[1;33mLogging\033[0m",
        f"  • Log Level: {settings.log_level}",
        f"  • Log Path: {log_target}",
        "\n\033[1;33mSystem\033[0m",
        f"  • Python: {sys.version.split()[0]} on {platform.system()}",
        f"  • Auto Reload: {'yes' if settings.reload else 'no'}",
        f"  • Started at: {datetime.now(UTC).strftime('%Y-%m-%d %H:%M:%S')} UTC",
        f"\033[0;37m{'-' * 60}\033[0m",
    ]

    banner_text = "\n".join(lines)
    if not silent:
        print(banner_text)  # noqa: T201
    return banner_text
