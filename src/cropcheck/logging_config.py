"""Logging setup for the cropcheck package."""

from __future__ import annotations

import logging

from pythonjsonlogger import jsonlogger

LOGGER_NAME = "cropcheck"


def configure_logging(level: str = "WARNING", json_logs: bool = False) -> logging.Logger:
    """Attach a single stream handler to the package logger.

    With ``json_logs`` every record is one JSON object, including the
    key/value fields passed through ``extra=``.
    """
    handler = logging.StreamHandler()
    if json_logs:
        handler.setFormatter(
            jsonlogger.JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s")
        )
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))

    logger = logging.getLogger(LOGGER_NAME)
    for existing in logger.handlers[:]:
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level.upper())
    return logger
