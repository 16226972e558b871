import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional, Union

import structlog


def setup_logging(
    log_level: str = "WARNING",
    log_to_file: bool = False,
    log_dir: Optional[Union[str, Path]] = None,
) -> None:
    """Set up logging for the application.

    Console output goes to stderr so it never mixes with command output.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_to_file: Whether to log to files in addition to the console
        log_dir: Directory for log files (required when log_to_file is set)
    """
    level = getattr(logging, log_level.upper())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.set_exc_info,
            # JSON formatting for file logs
            (
                structlog.processors.JSONRenderer()
                if log_to_file
                else structlog.dev.ConsoleRenderer(colors=False)
            ),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(levelname)s - %(name)s - %(message)s"))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()  # Clear any existing handlers
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)

    if log_to_file:
        if log_dir is None:
            raise ValueError("log_dir is required when log_to_file is set")
        logs_dir = Path(log_dir).expanduser()
        logs_dir.mkdir(parents=True, exist_ok=True)

        # General application log file
        app_handler = logging.handlers.RotatingFileHandler(
            logs_dir / "reminder.log", maxBytes=1024 * 1024, backupCount=3  # 1MB
        )
        app_handler.setLevel(logging.INFO)
        app_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
            )
        )
        root_logger.addHandler(app_handler)

        # Error-only log file
        error_handler = logging.handlers.RotatingFileHandler(
            logs_dir / "errors.log", maxBytes=1024 * 1024, backupCount=3
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        root_logger.addHandler(error_handler)
        # File handlers need INFO records even when the console is quieter
        root_logger.setLevel(min(level, logging.INFO))


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger.

    Args:
        name: Logger name (defaults to "reminder")

    Returns:
        Structured logger bound to the stdlib logger of that name
    """
    return structlog.get_logger(name or "reminder")
