"""structlog configuration for tierctl.

All logging goes to stderr so stdout stays clean for board output and
``--json`` payloads.  Library modules log through the stdlib
(``logging.getLogger(__name__)``); a structlog ``ProcessorFormatter`` on the
root handler renders those records the same way as native structlog events.

- Human (default): console renderer, coloured when stderr is a terminal
- JSON (``--log-json``): one JSON object per line, tracebacks as strings
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "tierctl"


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_json: bool) -> list[structlog.types.Processor]:
    if log_json:
        return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route stdlib and structlog output through one stderr handler.

    Args:
        verbose: ``tierctl.*`` loggers emit DEBUG. Otherwise WARNING and up.
        log_json: Use the JSON renderer instead of the console renderer.

    Safe to call repeatedly; the root handler is replaced, never stacked.
    Third-party loggers stay at WARNING even with *verbose*.
    """
    shared = _shared_processors()

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                *_renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
