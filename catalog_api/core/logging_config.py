# Standard library imports
import logging

# Local application imports
from .config import get_settings


LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging() -> None:
    """
    Configure root logging once, using LOG_LEVEL from settings.
    
    Module loggers are created with logging.getLogger(__name__) and inherit
    this configuration.
    """
    settings = get_settings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger(__name__).debug(f"Logging configured at level {logging.getLevelName(level)}")
