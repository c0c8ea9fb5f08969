import logging
import sys

from shorturl.core.config import LOG_LEVEL

APP_LOGGER = "shorturl"
# Redirect lookups are written to stdout as bare lines, without the app format.
REDIRECT_LOGGER = "shorturl.redirect"

APP_FORMAT = '%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s'
REDIRECT_FORMAT = '%(message)s'


def _stdout_handler(fmt: str) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt, datefmt='%Y-%m-%d %H:%M:%S'))
    return handler


def configure_redirect_sink() -> logging.Logger:
    sink = logging.getLogger(REDIRECT_LOGGER)
    sink.setLevel(logging.INFO)
    sink.propagate = False
    if not sink.handlers:
        sink.addHandler(_stdout_handler(REDIRECT_FORMAT))
    return sink


def configure_logging() -> logging.Logger:
    logging.basicConfig(level=LOG_LEVEL, handlers=[_stdout_handler(APP_FORMAT)])

    logging.getLogger("uvicorn.error").propagate = True
    logging.getLogger("uvicorn.access").disabled = True

    configure_redirect_sink()
    return logging.getLogger(APP_LOGGER)
