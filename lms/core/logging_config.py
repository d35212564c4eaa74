# /lms/core/logging_config.py

import logging

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Attaches a single stream handler to the `lms` logger namespace.

    Safe to call more than once (the app lifespan and the test suite both do);
    a second call only adjusts the level.
    """
    logger = logging.getLogger("lms")
    logger.setLevel(level)
    if not any(getattr(h, "_lms_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(DEFAULT_LOG_FORMAT))
        handler._lms_handler = True
        logger.addHandler(handler)
    return logger
