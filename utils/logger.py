"""Logging setup shared by the CLI and the HTTP service."""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Attach one stdout handler to the root logger at ``level``.

    Calling it again replaces the handler installed by the previous call.
    """
    log_level = getattr(logging, (level or "INFO").upper(), logging.INFO)

    logger = logging.getLogger()
    logger.setLevel(log_level)
    for handler in [h for h in logger.handlers if getattr(h, "_adif_console", False)]:
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    console_handler._adif_console = True
    logger.addHandler(console_handler)

    logger.debug("Logging configured at %s", logging.getLevelName(log_level))
    return logger
