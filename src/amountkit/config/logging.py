"""structlog output for the ``amountkit`` logger tree.

amountkit is imported into host applications, so it never touches the
root logger or structlog's global configuration. ``configure_logging``
installs one handler on the ``amountkit`` logger and stops propagation;
records from ``amountkit.*`` loggers are rendered by structlog's
``ProcessorFormatter`` either as console lines or JSON lines on stderr.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from amountkit.config.settings import AmountkitSettings

PACKAGE_LOGGER = "amountkit"

_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


class _AmountkitHandler(logging.StreamHandler):  # type: ignore[type-arg]
    """Marker type so reconfiguration replaces only our own handler."""


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route ``amountkit.*`` records to stderr through structlog.

    Calling again replaces the handler installed by the previous call;
    handlers added by the host application are left in place.

    Args:
        verbose: Enable DEBUG-level output. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
    """
    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_SHARED_PROCESSORS,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    handler = _AmountkitHandler(sys.stderr)
    handler.setFormatter(formatter)

    pkg_logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in [h for h in pkg_logger.handlers if isinstance(h, _AmountkitHandler)]:
        pkg_logger.removeHandler(existing)
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    pkg_logger.propagate = False


def configure_from_settings(settings: AmountkitSettings) -> None:
    """Apply the logging flags carried by *settings*."""
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to the stdlib logger *name*.

    Events are handed to the ``amountkit`` handler's formatter, so
    keyword context survives into JSON output without global structlog
    configuration.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )
