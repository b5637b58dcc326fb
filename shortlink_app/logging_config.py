"""Logging configuration for the shortlink service."""

import logging
import sys
from typing import Optional

from pythonjsonlogger import jsonlogger

ENV_LOCAL = "local"
ENV_DEV = "dev"
ENV_PROD = "prod"

LOGGER_NAME = "shortlink"

JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


def setup_logging(environment: str, level: Optional[str] = None) -> logging.Logger:
    """Setup logging for the given environment.

    local: human-readable text, DEBUG
    dev:   JSON, DEBUG
    prod:  JSON, INFO

    Args:
        environment: One of "local", "dev", "prod"
        level: Optional level name overriding the environment default

    Returns:
        Configured "shortlink" logger
    """
    if environment == ENV_LOCAL:
        formatter = logging.Formatter(TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        default_level = logging.DEBUG
    elif environment == ENV_DEV:
        formatter = jsonlogger.JsonFormatter(JSON_FORMAT)
        default_level = logging.DEBUG
    elif environment == ENV_PROD:
        formatter = jsonlogger.JsonFormatter(JSON_FORMAT)
        default_level = logging.INFO
    else:
        raise ValueError(f"Unknown environment: {environment}")

    numeric_level = default_level
    if level:
        numeric_level = getattr(logging, level.upper(), default_level)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(numeric_level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger
