"""structlog configuration and knowledge-scoped logging context.

Configures structlog for console or JSON output on top of stdlib handlers,
with optional file logging, and binds knowledge identifiers to every log
entry emitted while a knowledge object is being evaluated.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

# ---------------------------------------------------------------------------
# structlog configuration
# ---------------------------------------------------------------------------


_VALID_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def configure_logging(
    level: str = "INFO",
    fmt: str = "console",
    log_file: str | Path | None = None,
) -> None:
    """Configure structlog for the application.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        fmt: ``"console"`` for human-readable output or ``"json"`` for
            machine-parseable lines.
        log_file: Optional file path for log output (in addition to stderr).

    Raises:
        ValueError: If ``level`` is not a recognized log level.
    """
    level_upper = level.upper()
    if level_upper not in _VALID_LEVELS:
        msg = f"Invalid log level: {level!r}. Must be one of {sorted(_VALID_LEVELS)}"
        raise ValueError(msg)

    numeric_level = getattr(logging, level_upper)

    renderer: structlog.types.Processor
    if fmt == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    # Logs go to stderr so command output on stdout stays clean
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(str(log_file), encoding="utf-8"))

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


# ---------------------------------------------------------------------------
# Knowledge logging context
# ---------------------------------------------------------------------------


@contextmanager
def knowledge_logging_context(
    knowledge_id: str,
    **extra: Any,
) -> Iterator[structlog.stdlib.BoundLogger]:
    """Bind a knowledge identifier to all log entries within the block.

    Args:
        knowledge_id: Identifier of the knowledge object being processed.
        **extra: Additional key-value pairs to bind.

    Yields:
        A bound structlog logger.

    Example::

        with knowledge_logging_context("framework-coverage-2026-q1") as log:
            log.info("audit_start")
    """
    structlog.contextvars.bind_contextvars(knowledge_id=knowledge_id, **extra)
    log: structlog.stdlib.BoundLogger = structlog.get_logger("knowledge")

    try:
        yield log
    except Exception:
        log.exception("knowledge_error")
        raise
    finally:
        structlog.contextvars.unbind_contextvars("knowledge_id", *extra.keys())
