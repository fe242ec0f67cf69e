"""
Logging setup for the UWO Student Directory client.

Every module logs through loguru, but the package is disabled on import
so applications see nothing until they call enable_logging().
"""

import sys
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Optional

from loguru import logger

from uwo_directory.settings import (
    LOGS_DIR,
    LOG_LEVEL,
    LOG_MAX_SIZE,
    LOG_BACKUP_COUNT,
)

PACKAGE = "uwo_directory"


def enable_logging(
    level: str = LOG_LEVEL,
    log_dir: Optional[Path] = LOGS_DIR,
    console: bool = True,
) -> List[int]:
    """
    Turn on logging for directory lookups.

    Only records emitted by this package reach the sinks added here, so
    the caller's own loguru configuration is left alone.

    Args:
        level: Minimum level for the added sinks
        log_dir: Directory for a rotating directory_YYYYMMDD.log file,
            or None for no file sink
        console: Whether to also log to stderr

    Returns:
        Handler ids of the added sinks, for disable_logging()
    """
    logger.enable(PACKAGE)
    handler_ids = []

    if console:
        handler_ids.append(logger.add(
            sys.stderr,
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
            level=level,
            colorize=sys.stderr.isatty(),
            filter=PACKAGE,
        ))

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        log_path = log_dir / f"directory_{datetime.now().strftime('%Y%m%d')}.log"

        handler_ids.append(logger.add(
            sink=log_path,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}",
            level=level,
            rotation=LOG_MAX_SIZE,
            retention=LOG_BACKUP_COUNT,
            compression="zip",
            filter=PACKAGE,
        ))
        logger.info(f"Logging directory lookups to {log_path}")

    return handler_ids


def disable_logging(handler_ids: Iterable[int] = ()) -> None:
    """Remove sinks added by enable_logging() and silence the package again."""
    for handler_id in handler_ids:
        logger.remove(handler_id)
    logger.disable(PACKAGE)
