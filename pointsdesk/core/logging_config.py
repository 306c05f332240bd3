"""
Logging setup - rotating file log plus console output
"""
import logging
from logging.handlers import RotatingFileHandler
import os
from typing import Optional

from .config import settings


def setup_logging(log_dir: Optional[str] = None, level: Optional[str] = None) -> logging.Logger:
    """
    Configure the root logger.

    - Log rotation (keep 7 files, max 50MB per file)
    - Console handler for the terminal
    - httpx/httpcore request noise reduced to warnings
    """
    log_dir = log_dir or settings.LOGS_PATH
    level_name = (level or settings.LOG_LEVEL).upper()
    log_level = getattr(logging, level_name, logging.INFO)

    os.makedirs(log_dir, exist_ok=True)

    file_handler = RotatingFileHandler(
        os.path.join(log_dir, "pointsdesk.log"),
        maxBytes=50*1024*1024,  # 50MB
        backupCount=7,
        encoding='utf-8'
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    ))

    # Disable noisy loggers BEFORE basicConfig
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('httpcore').setLevel(logging.WARNING)

    logging.basicConfig(level=log_level, handlers=[file_handler, console_handler], force=True)
    return logging.getLogger("pointsdesk")
