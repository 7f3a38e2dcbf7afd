"""
Logging setup for the todo-pro service.
"""

import logging
from pathlib import Path
from typing import List, Optional


def setup_logger(log_level: str = "INFO", log_file: Optional[str] = "logs/todo_pro.log") -> None:
    """
    Configure the root logger.

    Args:
        log_level: log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: path of the log file; ``None`` or empty logs to stderr only
    """
    handlers: List[logging.Handler] = [logging.StreamHandler()]

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.insert(0, logging.FileHandler(log_path, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )
