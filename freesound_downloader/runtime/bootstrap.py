"""
Bootstrap Module

Configures logging for command line runs. Library code only creates
module loggers; handlers are attached here and nowhere else.
"""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(
    level: int = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
) -> None:
    """
    Initialize application logging.

    Args:
        level: Root log level
        log_file: Optional file that also receives log records, rotated at 10 MB
    """
    logging.basicConfig(level=level, format=LOG_FORMAT)
    root = logging.getLogger()
    root.setLevel(level)
    # urllib3 logs every connection at DEBUG
    logging.getLogger("urllib3").setLevel(max(level, logging.INFO))

    if log_file is None:
        return

    log_path = Path(log_file)
    target = os.path.abspath(log_path)
    if any(getattr(h, "baseFilename", None) == target for h in root.handlers):
        return

    log_path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=5,
        encoding="utf-8"
    )
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(file_handler)

    logger.debug(f"Log file: {log_path}")
