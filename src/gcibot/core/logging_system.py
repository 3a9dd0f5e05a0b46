"""Logging setup for gcibot.

Library modules only create module-level loggers with get_logger().
Applications call initialize_logging() once at startup, optionally with
a YAML file in logging.config.dictConfig format.

Typical usage:
    from gcibot.core.logging_system import get_logger, initialize_logging

    initialize_logging("config/logging.yaml")
    logger = get_logger(__name__)
"""

import logging
import logging.config
from pathlib import Path
from typing import Any

import yaml

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LEVEL = "INFO"


def get_logger(name: str) -> logging.Logger:
    """Get a named logger.

    Args:
        name: Logger name, usually the module's __name__.

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)


def load_logging_config(config_path: str | Path) -> dict[str, Any]:
    """Load a dictConfig-style logging configuration from YAML.

    Args:
        config_path: Path to the YAML file.

    Returns:
        Configuration dictionary, empty if the file holds no mapping.
    """
    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return data if isinstance(data, dict) else {}


def initialize_logging(config_path: str | Path | None = None, level: str | None = None) -> None:
    """Configure the root logger.

    Uses the YAML config when given and present, otherwise a console
    handler with the default format.

    Args:
        config_path: Optional path to a YAML logging config.
        level: Optional level name overriding the configured root level.
    """
    config: dict[str, Any] = {}
    if config_path is not None and Path(config_path).exists():
        config = load_logging_config(config_path)

    if config:
        config.setdefault("version", 1)
        config.setdefault("disable_existing_loggers", False)
        logging.config.dictConfig(config)
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger = logging.getLogger()
        root_logger.addHandler(handler)
        root_logger.setLevel(DEFAULT_LEVEL)

    if level:
        logging.getLogger().setLevel(getattr(logging, level.upper(), logging.INFO))

    get_logger(__name__).debug("Logging initialized (config=%s)", config_path)
