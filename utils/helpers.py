"""
Utility functions and helpers for the Neptune demo.
Includes logging setup and formatting of query results.
"""

import logging
import json
import os
import sys
from typing import Any, Dict, List, Optional
from datetime import datetime

from config.settings import settings

# Library loggers that are chatty at INFO/DEBUG
NOISY_LOGGERS = ("neo4j", "botocore", "boto3", "urllib3")

def setup_logging(level: Optional[str] = None, log_dir: Optional[str] = None):
    """
    Set up logging configuration for the application.

    Args:
        level: Log level name, defaults to settings.LOG_LEVEL
        log_dir: Directory for the daily log file, defaults to settings.LOG_DIR
    """
    level = (level or settings.LOG_LEVEL).upper()
    log_dir = log_dir or settings.LOG_DIR

    # Create logs directory if it doesn't exist
    os.makedirs(log_dir, exist_ok=True)

    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=settings.LOG_FORMAT,
        datefmt=settings.LOG_DATE_FORMAT,
        handlers=[
            logging.FileHandler(os.path.join(log_dir, f"neptune_demo_{datetime.now().strftime('%Y%m%d')}.log"),
                                encoding='utf-8'),
            logging.StreamHandler(sys.stdout)
        ],
        force=True
    )

    # Suppress some noisy loggers
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.debug("Logging system initialized")

def get_value(row: Dict[str, Any], key: str, default: Any = "Unknown") -> Any:
    """
    Read a field from a result row.

    Args:
        row: Result row
        key: Column name
        default: Returned when the column is missing or null

    Returns:
        Value or default
    """
    value = row.get(key) if isinstance(row, dict) else None
    return default if value is None else value

def format_records(records: List[Dict[str, Any]]) -> str:
    """Render result rows as compact JSON for log output."""
    return json.dumps(records, default=str, ensure_ascii=False)

def get_system_info() -> Dict[str, Any]:
    """
    Get system and configuration information.

    Returns:
        Dictionary with system info
    """
    return {
        'python_version': sys.version.split()[0],
        'working_directory': os.getcwd(),
        'config': {
            'properties_file': settings.PROPERTIES_FILE,
            'log_level': settings.LOG_LEVEL
        },
        'timestamp': datetime.now().isoformat()
    }
