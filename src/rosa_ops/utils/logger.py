# utils/logger.py
import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Optional

from rosa_ops.core.constants import DEFAULT_CONSOLE_LOG_LEVEL, DEFAULT_LOG_PATH

# Console level applied to loggers created from now on; raised by --verbose.
_console_level = DEFAULT_CONSOLE_LOG_LEVEL


def setup_logger(
    name: str,
    log_file: Optional[str] = None,
    level: str = "DEBUG",
    console_level: Optional[str] = None,
    enable_rotation: bool = True,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
) -> logging.Logger:
    """Setup logger with a rotating file handler and a stderr console handler.

    The console handler writes to stderr so that tables and JSON/YAML
    documents printed on stdout stay clean.
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()))

    # Prevent duplicate handlers
    if not logger.handlers:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setFormatter(formatter)
        stream_handler.setLevel(
            getattr(logging, (console_level or _console_level).upper())
        )
        logger.addHandler(stream_handler)

        if log_file:
            logs_dir = Path(os.environ.get("LOG_PATH", DEFAULT_LOG_PATH))
            log_path = logs_dir / log_file

            try:
                logs_dir.mkdir(parents=True, exist_ok=True)
                if enable_rotation:
                    file_handler = logging.handlers.RotatingFileHandler(
                        log_path,
                        maxBytes=max_bytes,
                        backupCount=backup_count,
                        encoding="utf-8",
                    )
                else:
                    file_handler = logging.FileHandler(log_path, encoding="utf-8")

                file_handler.setFormatter(formatter)
                file_handler.setLevel(logging.DEBUG)  # All levels to file
                logger.addHandler(file_handler)

            except (OSError, PermissionError) as e:
                logger.warning(
                    f"Failed to create log file {log_path}: {e}. Logging to console only."
                )

        # Prevent propagation to root logger to avoid duplicate messages
        logger.propagate = False

    return logger


def set_console_level(level: str) -> None:
    """Change the console level of existing and future rosa_ops loggers."""
    global _console_level
    _console_level = level.upper()
    numeric = getattr(logging, _console_level)

    for name, logger in list(logging.Logger.manager.loggerDict.items()):
        if not name.startswith("rosa_ops") or not isinstance(logger, logging.Logger):
            continue
        for handler in logger.handlers:
            if type(handler) is logging.StreamHandler:
                handler.setLevel(numeric)
