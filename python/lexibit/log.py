"""Logger setup for the lexibit command line."""

import logging


def setup_logger(logger_name: str = "lexibit", level: int = logging.WARNING) -> logging.Logger:
    """
    Set up a logger with consistent formatting.

    Args:
        logger_name: Name of the logger
        level: Logging level

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
