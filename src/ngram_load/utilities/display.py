# utilities/display.py
"""Display formatting helpers for reader summaries."""

from datetime import timedelta
from pathlib import Path
from typing import Union

__all__ = ["format_banner", "format_duration", "truncate_path_to_fit"]


def format_banner(title: str, width: int = 100, style: str = "═") -> str:
    """Create a formatted banner with title and separator line.

    Examples:
        >>> print(format_banner("Phase 1", width=10, style="─"))
        Phase 1
        ──────────
    """
    return f"{title}\n{style * width}"


def format_duration(seconds: float) -> str:
    """Render seconds as H:MM:SS, keeping tenths below one minute.

    Examples:
        >>> format_duration(3.0)
        '3.0s'
        >>> format_duration(3725)
        '1:02:05'
    """
    if seconds < 60:
        return f"{seconds:.1f}s"
    return str(timedelta(seconds=int(seconds)))


def truncate_path_to_fit(
    path: Union[Path, str],
    prefix: str,
    total_width: int = 100,
) -> str:
    """Truncate path so that ``prefix + path`` fits within total_width.

    Examples:
        >>> truncate_path_to_fit("/very/long/path/to/file.db", "Very long prefix: ", 30)
        '...o/file.db'
    """
    path_str = str(path)
    max_path_length = total_width - len(prefix)

    if len(path_str) <= max_path_length:
        return path_str

    if max_path_length < 4:
        return "..."

    return "..." + path_str[-(max_path_length - 3):]
