"""Logging configuration helpers."""

import logging

APP_LOGGER = "macro_calculator"
# httpx logs every outbound request at INFO.
HTTP_CLIENT_LOGGERS = ("httpx", "httpcore")


def configure_logging(*, debug: bool = False) -> logging.Logger:
    """Configure the package logger and quiet HTTP client request logs.

    Repeated calls only adjust levels; the stream handler is added once.
    """
    logger = logging.getLogger(APP_LOGGER)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    for name in HTTP_CLIENT_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if debug else logging.WARNING)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        )
        logger.addHandler(handler)
        logger.propagate = False
    return logger
