# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_aem_client

"""
Shared loguru logger for the AEM client.

Importing the package leaves loguru sinks untouched. Applications call
configure_logger() to install the client's sinks.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from coreason_aem_client.config import get_settings

__all__ = ["logger", "configure_logger"]


def _ensure_log_directory(log_file: str) -> Path:
    """Creates the parent directory of the log file if missing."""
    log_dir = Path(log_file).parent
    if not log_dir.exists():
        log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def configure_logger(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Replaces loguru's default sink with a stderr sink and an optional rotating file sink.

    Args:
        level: Minimum level for both sinks. Defaults to Settings.log_level.
        log_file: Path of the file sink. Defaults to Settings.log_file (no file sink if unset).
    """
    settings = get_settings()
    level = level or settings.log_level
    log_file = log_file or settings.log_file

    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | {name}:{line} - {message}",
    )

    if log_file:
        _ensure_log_directory(log_file)
        logger.add(log_file, level=level, rotation="10 MB", retention="7 days", enqueue=True)
