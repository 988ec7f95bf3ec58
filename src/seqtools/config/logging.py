"""Log routing for the seqtools CLI.

Each invocation runs a single command and exits, so logging is configured
once per process from the global flags. Log lines always go to stderr,
leaving stdout to the result, and carry the name of the running command.

- Console (default): short wall-clock timestamps for an interactive terminal
- JSON (--log-json): one object per line with UTC ISO timestamps
"""

from __future__ import annotations

import logging
import sys

import structlog


def _processors(log_json: bool) -> list[structlog.types.Processor]:
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
    ]
    if log_json:
        processors.append(structlog.processors.TimeStamper(fmt="iso", utc=True))
        processors.append(structlog.processors.format_exc_info)
    else:
        processors.append(structlog.processors.TimeStamper(fmt="%H:%M:%S", utc=False))
    return processors


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    command: str | None = None,
) -> None:
    """Route structlog events and stdlib records through one stderr handler.

    Services log through ``logging.getLogger(__name__)`` and telemetry through
    structlog; both pass the same processor chain, so a ``--log-json`` run
    emits nothing but JSON lines on stderr.

    Args:
        verbose: DEBUG for the ``seqtools`` loggers instead of WARNING.
        log_json: Render JSON lines instead of console text.
        command: Subcommand name bound to every log line as ``command``.
    """
    structlog.contextvars.clear_contextvars()
    if command:
        structlog.contextvars.bind_contextvars(command=command)

    processors = _processors(log_json)
    structlog.configure(
        processors=[*processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(logging.WARNING)
    logging.getLogger("seqtools").setLevel(logging.DEBUG if verbose else logging.WARNING)
