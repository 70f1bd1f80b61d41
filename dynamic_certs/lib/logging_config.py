"""JSON logging configuration for certificate provisioning."""

import logging

from pythonjsonlogger.json import JsonFormatter

LOGGER_NAME = "dynamic_certs"


class CustomJsonFormatter(JsonFormatter):
    """JSON formatter emitting timestamp, level, message, exc_info, funcName, lineno."""

    def add_fields(self, log_record, record, message_dict):
        """Override to include only specified fields.

        Args:
            log_record: Dict to be logged as JSON
            record: LogRecord object from logging framework
            message_dict: Dict containing message and args
        """
        super().add_fields(log_record, record, message_dict)

        if "levelname" in log_record:
            log_record["level"] = log_record.pop("levelname")

        allowed_fields = {
            "timestamp",
            "level",
            "message",
            "exc_info",
            "funcName",
            "lineno",
        }

        for key in [key for key in log_record if key not in allowed_fields]:
            log_record.pop(key)


def set_log_level(level: str | int) -> None:
    """Change the provisioning logger level.

    Args:
        level: Level name (e.g. "DEBUG") or numeric logging level

    Raises:
        ValueError: If the level name is not a known logging level
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        if not isinstance(resolved, int):
            raise ValueError(f"unknown log level: {level}")
        level = resolved
    LOGGER.setLevel(level)


def _setup_logger() -> logging.Logger:
    """Initialize and configure singleton logger.

    Returns:
        Configured logger writing JSON lines to stderr
    """
    logger = logging.getLogger(LOGGER_NAME)

    # Module reloads must not stack handlers
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    formatter = CustomJsonFormatter(
        fmt="%(timestamp)s %(levelname)s %(funcName)s %(lineno)d %(message)s",
        timestamp=True,
    )
    handler.setFormatter(formatter)

    logger.setLevel(logging.INFO)
    logger.addHandler(handler)
    logger.propagate = False

    return logger


# Singleton logger instance - import this in other modules
LOGGER = _setup_logger()
