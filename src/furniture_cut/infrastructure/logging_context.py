"""Request-scoped logging context.

The web layer binds a request identifier for the duration of each request;
a logging filter copies it onto every record so log lines from one request
can be correlated. The identifier lives in a ``ContextVar``, so concurrent
requests on different threads or tasks never see each other's value.

The packing engine never reads this context.
"""

from __future__ import annotations

import logging
import sys
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import IO, Iterator

ROOT_LOGGER_NAME = "furniture_cut"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] [%(request_id)s] %(message)s"

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)


def get_request_id() -> str | None:
    """Return the request identifier bound to the current context."""
    return _request_id.get()


def generate_request_id() -> str:
    """Return a new random request identifier."""
    return str(uuid.uuid4())


@contextmanager
def request_context(request_id: str | None = None) -> Iterator[str]:
    """Bind a request identifier for the duration of the block.

    Args:
        request_id: Identifier to bind; a new one is generated if omitted.

    Yields:
        The bound identifier.
    """
    bound = request_id or generate_request_id()
    token = _request_id.set(bound)
    try:
        yield bound
    finally:
        _request_id.reset(token)


class RequestContextFilter(logging.Filter):
    """Stamps ``request_id`` on every record ("-" outside a request)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = _request_id.get() or "-"
        return True


class RequestContextHandler(logging.StreamHandler):
    """Stream handler using the request-aware format.

    Without an explicit stream it writes to whatever ``sys.stderr`` is at
    emit time, so a replaced or closed stderr is never held on to.
    """

    def __init__(self, stream: IO[str] | None = None) -> None:
        super().__init__(stream)
        self._follows_stderr = stream is None
        self.setFormatter(logging.Formatter(LOG_FORMAT))
        self.addFilter(RequestContextFilter())

    def emit(self, record: logging.LogRecord) -> None:
        if self._follows_stderr:
            self.stream = sys.stderr
        super().emit(record)


def configure_logging(level: str | int = "INFO", stream: IO[str] | None = None) -> None:
    """Configure the package logger.

    Installs a single stream handler with the request-aware format on the
    ``furniture_cut`` logger. Calling it again replaces that handler and leaves
    the previous handler's stream untouched.

    Args:
        level: Logging level name or number.
        stream: Output stream, the current stderr by default.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if isinstance(handler, RequestContextHandler):
            logger.removeHandler(handler)
    logger.addHandler(RequestContextHandler(stream))
