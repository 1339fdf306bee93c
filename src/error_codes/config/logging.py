"""structlog configuration for error-codes.

Two output modes:
- Human (default): console-rendered lines to stderr
- JSON (--log-json): Structured JSON lines to stderr

Lookup results go to stdout; logs never do.

Modules log through the stdlib (``logging.getLogger(__name__)``) and
attach their fields with ``extra=``, for example
``logger.debug("Activated locale", extra={"locale": name})``. Those
fields become structured keys. Every event is also stamped with
``active_locale``, the ``LC_MESSAGES`` setting in force when it was
logged, so events emitted during a multi-locale search show which
locale produced them.
"""

from __future__ import annotations

import locale
import logging
import sys

import structlog
from structlog.types import EventDict, WrappedLogger

APP_LOGGER = "error_codes"


def add_active_locale(_logger: WrappedLogger, _method: str, event_dict: EventDict) -> EventDict:
    """Record the process's current ``LC_MESSAGES`` locale on the event."""
    event_dict.setdefault("active_locale", locale.setlocale(locale.LC_MESSAGES))
    return event_dict


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Configure structlog processors and output routing.

    Args:
        verbose: Enable DEBUG-level output. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_active_locale,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        # ExtraAdder lifts ``extra=`` fields off stdlib records.
        foreign_pre_chain=[structlog.stdlib.ExtraAdder(), *shared_processors],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(APP_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
