"""
Logging setup for svcnet-live.
"""
from __future__ import annotations
import logging
import sys
from typing import Optional, Union

DEFAULT_FORMAT = "[%(asctime)s] [SVCNET] %(levelname)s - %(message)s"

def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the root logger once per process.

    Args:
        level: logging level or its name ('DEBUG', 'INFO', ...)
        log_file: optional file that receives the same records
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(level=level, format=DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S",
                        handlers=handlers, force=True)
    # werkzeug logs every request at INFO
    logging.getLogger("werkzeug").setLevel(max(level, logging.WARNING))
    logger = logging.getLogger("svcnet_live")
    logger.info("logging initialized (level=%s)", logging.getLevelName(level))
    return logger
