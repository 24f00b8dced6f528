"""Logging configuration using Loguru."""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger


def setup_logging(*, console_level: str = "INFO", log_file: Path | None = None, file_level: str = "DEBUG") -> None:
    """Configure logging sinks for a release run.

    Parameters
    ----------
    console_level:
        Minimum log level for console output.
    log_file:
        Optional path of a file that captures structured JSON log output.
    file_level:
        Minimum log level for the file sink.

    Existing handlers are removed so repeated calls do not duplicate output.
    """

    logger.remove()
    logger.add(
        sys.stdout,
        level=console_level.upper(),
        format="<level>{message}</level>",
        backtrace=True,
        diagnose=False,
        colorize=True,
    )

    if log_file is not None:
        log_path = Path(log_file).expanduser().resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            level=file_level.upper(),
            backtrace=False,
            diagnose=False,
            serialize=True,
        )

    logger.bind(console_level=console_level, log_file=str(log_file) if log_file else None).debug(
        "Logging configured"
    )


__all__ = ["setup_logging"]
