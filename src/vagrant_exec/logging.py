"""
Structured logging for vagrant-exec using structlog.

The library never configures logging on import. ``Vagrant`` takes a logger
and traces every command through :func:`log_operation` and
:func:`log_command`; only the CLI calls :func:`configure_logging`.
"""

import logging
import sys
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Sequence

import structlog

LOGGER_NAME = "vagrant_exec"


def level_from_flags(debug: bool = False, quiet: bool = False) -> str:
    """Map the CLI's ``--debug`` / ``--quiet`` flags to a level name."""
    if debug:
        return "DEBUG"
    if quiet:
        return "WARNING"
    return "INFO"


def _shared_processors() -> List:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _handler(stream_or_path, renderer, shared_processors) -> logging.Handler:
    if isinstance(stream_or_path, Path):
        handler = logging.FileHandler(stream_or_path)
    else:
        handler = logging.StreamHandler(stream_or_path)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=renderer,
            foreign_pre_chain=shared_processors,
        )
    )
    return handler


def configure_logging(
    level: str = "INFO",
    json_output: bool = False,
    log_file: Optional[Path] = None,
    console_output: bool = True,
) -> None:
    """
    Route structlog through stdlib logging for the vagrant-exec CLI.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_output: Render stderr records as JSON instead of console lines
        log_file: Optional file that receives every record as JSON
        console_output: Write records to stderr
    """
    shared_processors = _shared_processors()

    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handlers = []
    if console_output:
        if json_output:
            renderer = structlog.processors.JSONRenderer()
        else:
            renderer = structlog.dev.ConsoleRenderer(
                colors=sys.stderr.isatty(),
                exception_formatter=structlog.dev.plain_traceback,
            )
        handlers.append(_handler(sys.stderr, renderer, shared_processors))
    if log_file:
        handlers.append(
            _handler(Path(log_file), structlog.processors.JSONRenderer(), shared_processors)
        )

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level.upper()),
        handlers=handlers,
        force=True,
    )


def get_logger(name: str = LOGGER_NAME) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


def _decode(out: bytes) -> str:
    return out.decode("utf-8", errors="replace")


def log_command(
    log: structlog.stdlib.BoundLogger, executable: str, args: Sequence[str], out: Optional[bytes] = None
) -> None:
    """Log a dispatched command, or its output once *out* is known."""
    full_cmd = " ".join([executable, *args])
    if out is None:
        log.info(f"Running command [{full_cmd}]")
    else:
        log.debug(f"Command output [{full_cmd}]", output=_decode(out))


def log_output(log: structlog.stdlib.BoundLogger, out: bytes) -> None:
    """Log the output of a lifecycle command at info, skipping empty output."""
    if out:
        log.info(_decode(out).rstrip())


@contextmanager
def log_operation(logger: structlog.stdlib.BoundLogger, operation: str, **kwargs):
    """
    Trace one client operation as ``<operation>.started`` / ``.completed`` /
    ``.failed``, yielding a logger bound with the operation name.

    Usage:
        with log_operation(self.log, "status") as log:
            out = self._exec(log, "status", "--machine-readable")
    """
    log = logger.bind(operation=operation, **kwargs)
    start_time = datetime.now()
    log.info(f"{operation}.started")

    try:
        yield log
    except Exception as e:
        log.error(
            f"{operation}.failed",
            error=str(e),
            error_type=type(e).__name__,
            duration_ms=_elapsed_ms(start_time),
        )
        raise
    log.info(f"{operation}.completed", duration_ms=_elapsed_ms(start_time))


def _elapsed_ms(start_time: datetime) -> float:
    return round((datetime.now() - start_time).total_seconds() * 1000, 2)
