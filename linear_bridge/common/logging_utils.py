"""Logging utilities for consistent logging across modules."""

import logging
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILE_NAME = "linear_bridge.log"

# Longest body excerpt written to the log for a rejected payload
MAX_SNIPPET_LENGTH = 200

logger = logging.getLogger("linear_bridge")


def setup_logging(log_dir: Optional[str] = None, level: str = "INFO") -> None:
    """Setup logging configuration.

    Logs always go to stdout. When log_dir is given, they are also written
    to linear_bridge.log inside it.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path / LOG_FILE_NAME))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )


def truncate(data: str, limit: int = MAX_SNIPPET_LENGTH) -> str:
    """Shorten data to at most limit characters, marking the cut."""
    if len(data) <= limit:
        return data
    return f"{data[:limit]}... ({len(data) - limit} more characters)"


def log_server_message(message: str) -> None:
    """Log server-related messages."""
    logger.info(f"[SERVER] {message}")


def log_error(error_message: str, error_data: str = "") -> None:
    """Log an error with an optional, truncated excerpt of the offending data."""
    if error_data:
        logger.error(f"{error_message} | data: {truncate(error_data)}")
    else:
        logger.error(error_message)
