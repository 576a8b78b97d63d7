"""
Logging configuration for the command line entry points.
"""

import logging
import logging.config
import os
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO", config_path: Optional[str] = None) -> bool:
    """
    Configure root logging.

    Uses ``logging.config.fileConfig`` when ``config_path`` points at an
    existing file, otherwise installs a stdout handler at ``level``.

    Returns:
        True if the file configuration was applied.
    """
    if config_path:
        if os.path.isfile(config_path):
            logging.config.fileConfig(config_path, disable_existing_loggers=False)
            return True
        print(f"Logging config file not found: {config_path}", file=sys.stderr)

    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return False
