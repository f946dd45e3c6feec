# src/jplaunch/telemetry/logger/base.py

import logging
import sys

import structlog
from structlog.typing import FilteringBoundLogger

from jplaunch.telemetry.logger.processors import (
    add_emoji_processor,
    remove_extra_keys_processor,
)

BASE_LOGGER_NAME = "jplaunch"


def setup_logging(
    level: int = logging.INFO,
    json_logs: bool = False,
    log_file: str | None = None,
) -> None:
    """Configures structlog for the entire application."""
    log_level_name = logging.getLevelName(level)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        add_emoji_processor,
        remove_extra_keys_processor,
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]

    structlog.configure(
        processors=shared_processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    if json_logs:
        final_renderer = structlog.processors.JSONRenderer(sort_keys=True)
    else:
        final_renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    formatter = structlog.stdlib.ProcessorFormatter(processor=final_renderer)

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        handler.close()
        root_logger.removeHandler(handler)
    root_logger.setLevel(level)

    slog = structlog.get_logger(BASE_LOGGER_NAME)

    # Console output goes to stderr; stdout is reserved for command results.
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_formatter = structlog.stdlib.ProcessorFormatter(
                processor=structlog.processors.JSONRenderer(sort_keys=True)
            )
            file_handler.setFormatter(file_formatter)
            file_handler.setLevel(level)
            root_logger.addHandler(file_handler)
            slog.info(f"File logging enabled to '{log_file}'")
        except OSError as e:
            slog.error(f"Failed to setup file logging to '{log_file}': {e}", exc_info=True)

    slog.debug(
        "structlog logging initialization complete",
        log_level=log_level_name,
        json_console_format=json_logs,
        log_file=log_file or "None",
    )


StructLogger = FilteringBoundLogger

# 🔼⚙️
