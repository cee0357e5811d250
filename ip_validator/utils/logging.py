"""
IPValidator Logging Configuration

Centralized logging setup for the CLI and regression harness.

Configures:
- Console output to stderr (stdout carries the PASS/FAIL report)
- Optional file logging with automatic rotation and gzip compression
- Log level management (INFO/DEBUG)

The validators themselves never log.

Author: IPValidator Project
License: GNU GPL v3
"""

import logging
import logging.handlers
import sys
import os
import gzip
import shutil
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
LOG_FILE_NAME = 'ipvalidator.log'


def _gzip_rotator(source, dest):
    """
    Compress a rotated log file with gzip and remove the original.

    Args:
        source: Source log file path
        dest: Destination path for rotated log
    """
    with open(source, 'rb') as f_in:
        with gzip.open(f'{dest}.gz', 'wb') as f_out:
            shutil.copyfileobj(f_in, f_out)
    os.remove(source)


def setup_logging(level=logging.INFO, log_to_file: Optional[bool] = None):
    """
    Configure application-wide logging.

    - Console handler: stderr
    - Rotating file handler (when enabled): gzip-compressed backups,
      size and count taken from config

    Args:
        level: Logging level (logging.INFO, logging.DEBUG, etc.)
        log_to_file: Force file logging on/off (default: config value)

    Example:
        >>> setup_logging(level=logging.DEBUG)  # Verbose mode
        >>> setup_logging()  # Normal mode (INFO)
    """
    handlers = [
        logging.StreamHandler(sys.stderr)
    ]

    from ..config import get_config
    config = get_config()

    if log_to_file is None:
        log_to_file = config.log_to_file

    if log_to_file:
        log_file = config.get_logs_dir() / LOG_FILE_NAME
        try:
            config.ensure_logs_dir()
            file_handler = logging.handlers.RotatingFileHandler(
                str(log_file),
                maxBytes=config.log_max_bytes,
                backupCount=config.log_backup_count
            )
            file_handler.rotator = _gzip_rotator
            handlers.append(file_handler)
        except OSError as e:
            # If file logging fails, just log to console
            print(f"Warning: Could not create log file {log_file}: {e}", file=sys.stderr)
            print("Logging to console only", file=sys.stderr)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True
    )
