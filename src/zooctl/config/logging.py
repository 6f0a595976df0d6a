"""Diagnostic logging for a zoo run.

Diagnostics go to stderr under the ``zooctl`` logger only; the activity
log is a separate file written by the simulation service and never passes
through here.  ``--log-json`` switches the stderr lines to JSON.
"""

from __future__ import annotations

import logging
import sys

import structlog

ROOT_LOGGER = "zooctl"

# Stamped on every event, structlog-native or stdlib.
_STAMP: list[structlog.types.Processor] = [
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
]


def _renderers(log_json: bool) -> list[structlog.types.Processor]:
    if log_json:
        # command.crashed carries exc_info; JSON needs it as a string.
        return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Install the stderr handler on the ``zooctl`` logger.

    Safe to call repeatedly: the previous handler is replaced.  With
    *verbose*, the per-command and per-record debug events are shown;
    otherwise only skipped records, crashes and I/O errors.
    """
    structlog.configure(
        processors=[*_STAMP, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_STAMP,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                *_renderers(log_json),
            ],
        )
    )

    logger = logging.getLogger(ROOT_LOGGER)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.propagate = False
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
