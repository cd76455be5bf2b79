"""
Logging configuration for Job Tracker services.

Provides consistent logging setup across the backend API and the dashboard GUI.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional, Union


def resolve_level(level: Union[int, str, None]) -> int:
    """Accept an int, a level name ('debug', 'INFO') or None (falls back to JOBTRACKER_LOG_LEVEL)."""
    if level is None:
        level = os.getenv("JOBTRACKER_LOG_LEVEL", "INFO")
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(
    component_name: str,
    level: Union[int, str, None] = None,
    log_file: Optional[str] = None,
    format_string: Optional[str] = None
):
    """
    Configure logging for a Job Tracker component.
    
    Args:
        component_name: Component identifier (e.g., 'backend', 'dashboard')
        level: Logging level; defaults to JOBTRACKER_LOG_LEVEL or INFO
        log_file: Optional file path for log output
        format_string: Custom format string (default provided)
    """
    level = resolve_level(level)
    if format_string is None:
        format_string = f'[%(asctime)s] [{component_name.upper()}] %(levelname)s - %(message)s'
    
    # Configure root logger
    logging.basicConfig(
        level=level,
        format=format_string,
        datefmt='%Y-%m-%d %H:%M:%S',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )
    
    # Add file handler if specified
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(format_string, datefmt='%Y-%m-%d %H:%M:%S'))
        logging.getLogger().addHandler(file_handler)
    
    logger = logging.getLogger(component_name)
    logger.info(f"{component_name.upper()} logging initialized (level={logging.getLevelName(level)})")
    
    return logger
