"""Log setup: structlog rendering on top of stdlib logging.

Modules log with ``logging.getLogger(__name__)``. Their records and any
structlog loggers share one processor chain and one handler, so
``--log-json`` switches everything to JSON lines at once.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

_PRE_CHAIN: tuple[structlog.types.Processor, ...] = (
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
)


def _renderer(log_json: bool, stream: TextIO) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=stream.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Send all log output to *stream* (stderr by default).

    ``verbose`` lowers the ``cpfgen`` logger to DEBUG; other loggers stay
    at WARNING. Calling again replaces the previous handler.
    """
    out = sys.stderr if stream is None else stream

    structlog.configure(
        processors=[*_PRE_CHAIN, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(out)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=list(_PRE_CHAIN),
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json, out),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)
    logging.getLogger("cpfgen").setLevel(logging.DEBUG if verbose else logging.WARNING)
