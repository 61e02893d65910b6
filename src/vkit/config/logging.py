"""structlog rendering for the ``vkit`` logger.

Two output modes:
- Human (default): console-formatted output to stderr
- JSON (log_json=True): Structured JSON lines to stderr

vkit modules log through stdlib ``logging.getLogger(__name__)``. Configuring
attaches one ProcessorFormatter handler to the ``vkit`` logger and stops
propagation there. The root logger, its handlers and the global structlog
configuration belong to the host application and are left alone.
"""

from __future__ import annotations

import logging
import sys

import structlog

_HANDLER_NAME = "vkit.structlog"


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route ``vkit`` log records through a structlog formatter.

    Calling again replaces the handler installed by the previous call.
    Handlers added to the ``vkit`` logger by the application are kept.

    Args:
        verbose: Enable DEBUG-level output. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
    """
    vkit_level = logging.DEBUG if verbose else logging.WARNING

    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(formatter)

    vkit_logger = logging.getLogger("vkit")
    for existing in vkit_logger.handlers[:]:
        if existing.get_name() == _HANDLER_NAME:
            vkit_logger.removeHandler(existing)
            existing.close()
    vkit_logger.addHandler(handler)
    vkit_logger.setLevel(vkit_level)
    vkit_logger.propagate = False


def configure_from_settings() -> None:
    """Apply the logging switches of :func:`vkit.config.settings.get_settings`."""
    from vkit.config.settings import get_settings

    settings = get_settings()
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)
