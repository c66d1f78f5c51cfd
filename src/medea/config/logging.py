"""structlog configuration for medea.

Everything medea logs goes to stderr so that stdout carries only tool
output and stays safe to pipe. Two renderers are available: a console
renderer for people, styled only when the run resolved stderr colors,
and JSON lines (``--log-json``) for machines.
"""

from __future__ import annotations

import logging
import sys

import structlog

# Processors shared by structlog loggers and stdlib ``logging.getLogger`` records.
_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def _renderer(*, log_json: bool, color: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=color)


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    color: bool = False,
) -> None:
    """Route medea's logs to stderr.

    Args:
        verbose: Let the ``medea`` loggers emit DEBUG records (``-v``).
            Otherwise only WARNING and above get through.
        log_json: Render JSON lines instead of console text.
        color: Style console output. Resolved once for stderr by
            :class:`~medea.config.settings.MedeaSettings`.
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

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_SHARED_PROCESSORS,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json=log_json, color=color),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger("medea").setLevel(logging.DEBUG if verbose else logging.WARNING)
