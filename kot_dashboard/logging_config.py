"""Logging configuration."""

from __future__ import annotations

import logging
from pathlib import Path

from kot_dashboard.config import DEBUG_LOG_PATH, LOG_LEVEL


def setup_logging(log_path: str = DEBUG_LOG_PATH, level: str = LOG_LEVEL) -> None:
    """Send application logs to a file; the terminal belongs to the Textual UI."""
    path = Path(log_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.FileHandler(path, encoding="utf-8")],
    )

    # Set third-party loggers to WARNING
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
