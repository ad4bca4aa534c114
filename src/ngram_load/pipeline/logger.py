"""Log file configuration for corpus reads."""
from __future__ import annotations

import logging
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Union

__all__ = ["setup_logger", "LOG_FORMAT"]

# Thread name identifies the loader thread (ngl:loader_N) in pooled reads
LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(threadName)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level {level!r}")
    return resolved


def _file_handler(log_path: Path, rotate: bool, max_bytes: int, backup_count: int) -> logging.Handler:
    if rotate:
        return RotatingFileHandler(
            log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
        )
    return logging.FileHandler(log_path, mode="w", encoding="utf-8")


def setup_logger(
        log_dir: Union[str, Path],
        *,
        level: Union[int, str] = logging.INFO,
        filename_prefix: str = "ngram_load",
        console: bool = False,
        rotate: bool = False,
        max_bytes: int = 10 * 1024 * 1024,
        backup_count: int = 3,
        force: bool = False,
) -> Path:
    """
    Send root logging to a timestamped file in ``log_dir``.

    Called by ``read_corpus`` when ``ReaderConfig.log_dir`` is set. A path
    with a suffix that is not an existing directory is treated as a file
    and its parent is used.

    Args:
        log_dir: Directory for the log file (created if missing)
        level: Level as int or name; DEBUG adds the per-line trace of
            single-threaded reads
        filename_prefix: Log filename prefix
        console: Also log to stderr
        rotate: Use a RotatingFileHandler
        max_bytes: Rotation size (rotate=True only)
        backup_count: Rotated files kept (rotate=True only)
        force: Drop and close existing root handlers first

    Returns:
        Path to the log file

    Examples:
        >>> setup_logger("/data/web1t/logs", level="DEBUG")
        PosixPath('/data/web1t/logs/ngram_load_20250929_175430.log')
    """
    target = Path(log_dir).expanduser().resolve()
    if target.suffix and not target.is_dir():
        target = target.parent
    target.mkdir(parents=True, exist_ok=True)

    log_path = target / f"{filename_prefix}_{datetime.now():%Y%m%d_%H%M%S}.log"
    lvl = _resolve_level(level)

    root = logging.getLogger()
    if force:
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(lvl)

    handlers = [_file_handler(log_path, rotate, max_bytes, backup_count)]
    if console:
        handlers.append(logging.StreamHandler())

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(lvl)
        handler.setFormatter(formatter)
        root.addHandler(handler)

    root.info("Logging initialized: %s", log_path)
    return log_path
