"""Get the source location of an error."""

import traceback

__all__ = ["get_error_path"]


def get_error_path(err: Exception) -> str:
    """Return ``"file:line (fn:function)"`` for the innermost traceback frame.

    Paths inside the package are shortened to start at ``scheduler_admin``.

    Args:
        err: The raised exception.

    Returns:
        Formatted source location, or ``"unknown"`` without a traceback.
    """
    frames = traceback.extract_tb(err.__traceback__)
    if not frames:
        return "unknown"

    filename, line, func, _ = frames[-1]
    marker = "scheduler_admin"
    if marker in filename:
        filename = marker + filename.rsplit(marker, 1)[-1]
    return f"{filename}:{line} (fn:{func})"
