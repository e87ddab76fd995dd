"""
Common utilities for Asteroid Blaster
"""

import logging
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    run_name: str,
    level: str = "INFO",
    log_dir: Optional[Path] = None,
    console: bool = True,
) -> logging.Logger:
    """
    Setup consistent logging across all entry points

    Args:
        run_name: Name of the logger to configure
        level: Logging level
        log_dir: Directory to save log files, no file is written if None
        console: Whether to log to console

    Returns:
        Configured logger
    """
    logger = logging.getLogger(run_name)
    logger.setLevel(getattr(logging, level.upper()))

    # Clear existing handlers
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT)

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_dir:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_dir / f"{run_name}.log")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
