"""Logging configuration for OGZ analyzer."""
import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional

FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
CONSOLE_FORMAT = '%(levelname)s: %(message)s'

def _attach(root_logger: logging.Logger, handler: logging.Handler,
            fmt: str, log_level: int) -> None:
    handler.setFormatter(logging.Formatter(fmt))
    handler.setLevel(log_level)
    root_logger.addHandler(handler)

def setup_logging(log_dir: Optional[str], log_level: int = logging.INFO) -> Optional[Path]:
    """Setup logging configuration.

    Args:
        log_dir: Directory to store log files, or None for console only
        log_level: Logging level (default: INFO)

    Returns:
        Path of the log file, if one was created

    Always logs to stderr; with a log_dir, every run also gets its own
    timestamped ogz_analyzer_<time>.log file there.
    """
    # Reset the root logger so repeated runs don't stack handlers
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    # Optional per-run log file
    log_file = None
    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        log_file = log_path / f'ogz_analyzer_{timestamp}.log'
        _attach(root_logger, logging.FileHandler(log_file, encoding='utf-8'),
                FILE_FORMAT, log_level)

    # Console output
    _attach(root_logger, logging.StreamHandler(sys.stderr), CONSOLE_FORMAT, log_level)

    root_logger.debug(f"Logging initialized at {logging.getLevelName(log_level)}")
    if log_file:
        root_logger.debug(f"Log file: {log_file}")
    return log_file
