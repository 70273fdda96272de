"""Central logging configuration used across modules."""

import logging

LOGGER_NAME = "market_service"


def setup_logging(log_level: str = "INFO") -> logging.Logger:
    """Configure and return the service root logger.

    Safe to call more than once; handlers are only attached the first time.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    logger.propagate = False

    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(handler)
    return logger
