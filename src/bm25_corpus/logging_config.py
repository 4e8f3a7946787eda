"""Logging configuration with console and optional rotating file handlers"""
import glob
import logging
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional


def setup_logging(
    log_file: Optional[str] = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    keep_files: int = 5
) -> Optional[Path]:
    """
    Configure logging with up to two destinations:
    - Console: Brief logs (INFO by default)
    - File: Detailed logs (DEBUG by default) with rotation, only when log_file is set

    Rotation policy:
    - New log file per session (timestamp-based naming)
    - Keep the newest `keep_files` session files (older ones removed on startup)
    - Auto-rotate when file reaches 10MB

    Args:
        log_file: Base path to log file, e.g. "logs/bm25-corpus.log"
        console_level: Console logging level
        file_level: File logging level
        keep_files: Number of session log files to retain

    Returns:
        Path of the session log file, or None when logging to console only
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Filter in handlers

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    root_logger.addHandler(console_handler)

    session_log = None
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        # Newest first; make room for the session file about to be created
        log_pattern = str(log_path.parent / f"{log_path.stem}_*.log")
        existing_logs = sorted(glob.glob(log_pattern), reverse=True)
        for old_log in existing_logs[max(keep_files - 1, 0):]:
            try:
                Path(old_log).unlink()
            except OSError as e:
                logging.getLogger(__name__).warning(f"Could not remove old log {old_log}: {e}")

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        session_log = log_path.parent / f"{log_path.stem}_{timestamp}.log"

        file_handler = RotatingFileHandler(
            session_log,
            mode='a',
            maxBytes=10*1024*1024,  # 10MB
            backupCount=10,
            encoding='utf-8'
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        root_logger.addHandler(file_handler)

    logging.info(
        f"Logging configured: console={logging.getLevelName(console_level)}, "
        f"file={session_log or 'disabled'}"
    )
    return session_log
