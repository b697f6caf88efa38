"""Logger configuration for liftlog.

Console output goes to stderr so command output on stdout (``plan --json``,
``export``) stays clean for piping.
"""

import sys
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = "<level>{level: <8}</level> | <cyan>{name}</cyan> - <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message} | {extra}"


def setup_logger(
    level: str = "INFO",
    log_file: str | Path | None = None,
    rotation: str = "1 MB",
    retention: int = 5,
) -> None:
    """Configure loguru for a CLI run.

    Args:
        level: Minimum level for both sinks
        log_file: Optional log file; rotated and zip-compressed
        rotation: Size at which the file rotates
        retention: Number of rotated files kept
    """
    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if log_file:
        log_path = Path(log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            format=FILE_FORMAT,
            level=level,
            rotation=rotation,
            retention=retention,
            compression="zip",
            encoding="utf-8",
        )

    logger.debug(f"Logging at {level}" + (f", file {log_file}" if log_file else ""))
