"""
Logging configuration for the User Service.

Sets the root log level from LOG_LEVEL and keeps driver loggers quiet.
"""

# Standard library imports
import logging
from typing import Dict, Optional

# Local application imports
from .config import get_settings


LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"

# Third-party loggers that are too chatty at INFO
_LIBRARY_LOG_LEVELS: Dict[str, str] = {
    "pymongo": "WARNING",
    "motor": "WARNING",
    "uvicorn.access": "WARNING",
}


def configure_logging(level_name: Optional[str] = None) -> None:
    """Configure logging for the application."""
    level_name = (level_name or get_settings().log_level).upper()
    log_level = getattr(logging, level_name, logging.INFO)
    
    logging.basicConfig(level=log_level, format=LOG_FORMAT)
    logging.getLogger().setLevel(log_level)
    
    for logger_name, library_level in _LIBRARY_LOG_LEVELS.items():
        logging.getLogger(logger_name).setLevel(getattr(logging, library_level))
