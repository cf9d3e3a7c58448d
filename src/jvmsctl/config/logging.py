"""Log routing for the management CLI and for shim invocations.

A shim shares its terminal with the Java tool it launches, so records
never touch stdout: everything goes to stderr, and below WARNING only
when ``-v`` / ``JVMSCTL_VERBOSE`` asks for it. ``--log-json`` /
``JVMSCTL_LOG_JSON`` switches the console renderer for JSON lines, one
per record, which is easier to grep out of a build log.

structlog loggers (the shim dispatcher) and stdlib loggers (the store,
the services) share one :class:`structlog.stdlib.ProcessorFormatter`, so
both carry the same fields, including ``mode`` (``cli`` or ``shim``).
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "jvmsctl"

_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    mode: str = "cli",
) -> None:
    """Install the stderr handler and bind *mode* for this process.

    Safe to call more than once; the root handler is replaced each time.
    Loggers outside ``jvmsctl`` stay at WARNING regardless of *verbose*.
    """
    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(mode=mode)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_SHARED_PROCESSORS,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
