import json
import logging
import traceback
from typing import Any, Dict, Optional

from settings import AppConfig

LOGGER_NAME = "smartjob"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

logger = logging.getLogger(LOGGER_NAME)


def setup_logging(config: AppConfig) -> logging.Logger:
    """Configure the app logger: verbose in dev, warnings and errors only otherwise."""
    logger.setLevel(logging.DEBUG if config.is_dev else logging.WARNING)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger


def format_message(message: str, context: Optional[Dict[str, Any]] = None) -> str:
    if not context:
        return message
    return f"{message}\n{json.dumps(context, indent=2, default=str)}"


def log_error(error: BaseException, context: Optional[Dict[str, Any]] = None) -> None:
    details = {
        "type": type(error).__name__,
        "stack": "".join(traceback.format_exception(type(error), error, error.__traceback__)),
        **(context or {}),
    }
    logger.error(format_message(str(error) or type(error).__name__, details))


def log_warn(message: str, context: Optional[Dict[str, Any]] = None) -> None:
    logger.warning(format_message(message, context))


def log_info(message: str, context: Optional[Dict[str, Any]] = None) -> None:
    logger.info(format_message(message, context))


def log_debug(message: str, context: Optional[Dict[str, Any]] = None) -> None:
    logger.debug(format_message(message, context))
