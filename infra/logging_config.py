# infra/logging_config.py
"""
Centralized logging setup: console plus a rotating file under log_dir.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_FILE = "lookout.log"


def configure_logging(level_name: str = "INFO", log_dir: Optional[Path | str] = None) -> None:
    """
    Configure console + rotating file logging on the root logger.

    Args:
        level_name: "DEBUG" | "INFO" | "WARNING" | "ERROR"; unknown names mean INFO
        log_dir: directory for lookout.log (defaults to ./logs)
    """
    level = getattr(logging, str(level_name).upper(), logging.INFO)
    log_dir = Path(log_dir) if log_dir else (Path.cwd() / "logs")
    log_dir.mkdir(parents=True, exist_ok=True)

    fmt = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(fmt)

    # 5 MB x 3 files
    file_handler = RotatingFileHandler(
        log_dir / LOG_FILE, maxBytes=5_000_000, backupCount=3, encoding="utf-8", delay=True
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(fmt)

    root = logging.getLogger()
    root.setLevel(level)
    # Streamlit re-executes the script on every interaction: only attach once.
    if not root.handlers:
        root.addHandler(console)
        root.addHandler(file_handler)
    else:
        for h in root.handlers:
            h.setLevel(level)
