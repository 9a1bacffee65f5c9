"""Root logging configuration for the CryptoMate process."""
import logging
import sys
from pathlib import Path
from typing import List, Optional

from cryptomate.config import LOG_LEVEL, LOG_PATH

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(level: str = LOG_LEVEL, log_path: Optional[Path] = LOG_PATH) -> List[logging.Handler]:
    """
    Configure root logging to stdout, plus a UTF-8 log file when a path is set.

    Returns:
        The handlers installed on the root logger
    """
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
    return handlers
