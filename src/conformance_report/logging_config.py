"""
Logging configuration module for conformance-report.
Provides centralized logging setup with environment-based configuration.
"""

import logging
import logging.handlers
import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Dict, Any
import json
import functools


class StructuredFormatter(logging.Formatter):
    """Custom formatter for structured JSON logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON for structured logging."""
        log_obj = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        # Add extra fields if present
        if hasattr(record, 'extra_fields'):
            log_obj.update(record.extra_fields)

        if record.exc_info:
            log_obj['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_obj, default=str)


class ColoredFormatter(logging.Formatter):
    """Colored formatter for console output."""

    COLORS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',    # Red
        'CRITICAL': '\033[35m', # Magenta
    }
    RESET = '\033[0m'

    def format(self, record: logging.LogRecord) -> str:
        """Add color to log level for console output."""
        levelname = record.levelname
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


def _env_flag(name: str, default: bool) -> bool:
    return os.getenv(name, str(default)).lower() == 'true'


def setup_logging(
    log_level: Optional[str] = None,
    log_file: Optional[str] = None,
    log_format: Optional[str] = None,
    enable_colors: bool = True,
    enable_json: bool = False,
    max_bytes: int = 1048576,  # 1MB
    backup_count: int = 3,
) -> Dict[str, Any]:
    """
    Setup logging for report generation.

    Explicit arguments win over the CONFORMANCE_REPORT_LOG_* environment
    variables, which win over the defaults.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file (optional)
        log_format: Custom log format string
        enable_colors: Enable colored console output
        enable_json: Enable JSON structured logging
        max_bytes: Maximum size of log file before rotation
        backup_count: Number of rotated files to keep

    Returns:
        Dict containing logging configuration details

    Raises:
        ValueError: If the log level is invalid
    """
    log_level = log_level or os.getenv('CONFORMANCE_REPORT_LOG_LEVEL', 'INFO')
    log_file = log_file or os.getenv('CONFORMANCE_REPORT_LOG_FILE')
    log_format = log_format or os.getenv(
        'CONFORMANCE_REPORT_LOG_FORMAT',
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    enable_colors = _env_flag('CONFORMANCE_REPORT_LOG_COLORS', enable_colors)
    enable_json = enable_json or _env_flag('CONFORMANCE_REPORT_LOG_JSON', False)

    numeric_level = getattr(logging, log_level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f'Invalid log level: {log_level}')

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)

    if enable_json:
        console_formatter = StructuredFormatter()
    elif enable_colors and sys.stderr.isatty():
        console_formatter = ColoredFormatter(log_format)
    else:
        console_formatter = logging.Formatter(log_format)

    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding='utf-8'
            )
            file_handler.setLevel(numeric_level)
            file_handler.setFormatter(
                StructuredFormatter() if enable_json else logging.Formatter(log_format)
            )
            root_logger.addHandler(file_handler)
        except OSError as e:
            # Report generation still works without a log file
            print(f"Warning: Could not set up file logging: {e}", file=sys.stderr)

    config_info = {
        'log_level': log_level,
        'log_file': log_file,
        'log_format': log_format,
        'enable_colors': enable_colors,
        'enable_json': enable_json,
        'handlers': len(root_logger.handlers),
    }

    logger = logging.getLogger(__name__)
    logger.debug("Logging configured", extra={'extra_fields': config_info})

    return config_info


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Rendering reports")
    """
    return logging.getLogger(name)


def log_exception(logger: logging.Logger, message: str = "An error occurred"):
    """
    Decorator to log exceptions from functions before re-raising them.

    Example:
        >>> logger = get_logger(__name__)
        >>> @log_exception(logger, "Report generation failed")
        ... def generate():
        ...     ...
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as e:
                logger.error(f"{message}: {str(e)}", exc_info=True)
                raise
        return wrapper
    return decorator
