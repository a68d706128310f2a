"""structlog configuration shared by the CLI and the web server.

Everything goes to stderr through one stdlib handler, so records from
``logging.getLogger(__name__)`` modules, structlog loggers, SQLAlchemy and
uvicorn all render the same way: console lines by default, JSON lines
with ``--log-json``.
"""

from __future__ import annotations

import logging
import sys

import structlog

# Third-party loggers and the level they are pinned to.
LIBRARY_LEVELS: dict[str, int] = {
    "sqlalchemy": logging.WARNING,
    "uvicorn.error": logging.INFO,
    "uvicorn.access": logging.INFO,
}


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderers(log_json: bool) -> list[structlog.types.Processor]:
    if log_json:
        return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route all logging through structlog's formatter on stderr.

    Args:
        verbose: ``blogadmin`` loggers emit DEBUG and up instead of WARNING.
        log_json: Render JSON lines instead of console output.
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
                *_renderers(log_json),
            ],
        )
    )
    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(logging.WARNING)

    logging.getLogger("blogadmin").setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name, level in LIBRARY_LEVELS.items():
        library_logger = logging.getLogger(name)
        library_logger.setLevel(level)
        # uvicorn installs its own handlers unless log_config=None; use ours.
        library_logger.handlers.clear()
        library_logger.propagate = True
