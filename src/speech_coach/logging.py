import logging
import os
import sys

from pythonjsonlogger import jsonlogger

SERVICE_NAME = "speech-coach"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"

_SERVER_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error")
_handler: logging.Handler | None = None


def _json_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        jsonlogger.JsonFormatter(LOG_FORMAT, static_fields={"service": SERVICE_NAME})
    )
    return handler


def setup_logging() -> logging.Logger:
    """
    Sends root and uvicorn records through one JSON stdout handler.

    Called at import time by every module; the handler is built once and the
    level is re-read from LOG_LEVEL on each call.
    """
    global _handler
    if _handler is None:
        _handler = _json_handler()

    level = os.getenv("LOG_LEVEL", "INFO").upper()
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [_handler]

    for name in _SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.setLevel(level)
        server_logger.handlers = [_handler]
        server_logger.propagate = False

    return root_logger
