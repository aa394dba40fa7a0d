"""Application-wide logging configuration."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional
from logging.handlers import RotatingFileHandler
from prefstore.paths import ConfigDirLookup, system_app_dir
from prefstore.constants import LOG_BACKUP_COUNT, LOG_FILE_NAME, LOG_FORMAT, LOG_MAX_BYTES

def log_file_path(app_name: str, config_dir_lookup: Optional[ConfigDirLookup] = None) -> Path:
    return system_app_dir(app_name, config_dir_lookup) / LOG_FILE_NAME

def init_logging(
    app_name: str,
    level: int = logging.INFO,
    config_dir_lookup: Optional[ConfigDirLookup] = None,
) -> Path:
    """
    Configures root logging with both console and rotating file handlers.

    The log file lives in the application's config directory. Returns the path to the log file.
    """
    log_file = log_file_path(app_name, config_dir_lookup)

    root_logger = logging.getLogger()
    if root_logger.handlers:
        return log_file

    log_file.parent.mkdir(parents=True, exist_ok=True)
    root_logger.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT)

    file_handler = RotatingFileHandler(log_file, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT, encoding="utf-8")
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    root_logger.debug("Logging initialized. Log file: %s", log_file)

    return log_file
