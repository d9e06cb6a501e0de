"""
Purpose: Centralized logging configuration with structured output support.
Constraints: Logging only; no browser logic.
"""

# Imports
import logging
import sys
import json
import os
import threading
import time
import traceback
from datetime import datetime
from pathlib import Path
from logging.handlers import RotatingFileHandler
from contextlib import contextmanager
from typing import Optional, Dict, Any

_EXTRA_FIELDS = ("step", "details")

PACKAGE_LOGGER = "local_preview"


def _env_enabled(name: str, default: str = "1") -> bool:
    return os.getenv(name, default).lower() not in ("0", "false", "no")


def _logs_dir() -> Path:
    configured = os.getenv("LOG_DIR", "").strip()
    return Path(configured) if configured else Path.cwd() / "logs"


class JsonFormatter(logging.Formatter):
    """One JSON object per record, including step/details extras"""

    def format(self, record: logging.LogRecord) -> str:
        log_obj = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        for field in _EXTRA_FIELDS:
            if hasattr(record, field):
                log_obj[field] = getattr(record, field)
        return json.dumps(log_obj, default=str)


# Public API
class UnifiedLogger:
    """Named logger whose records propagate to once-configured root handlers"""

    _lock = threading.Lock()
    _global_initialized = False
    _file_handlers: list = []

    def __init__(self, name: str = "local_preview", log_level: Optional[str] = None):
        self.name = name

        if log_level is None:
            log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        level = getattr(logging, str(log_level).upper(), logging.INFO)

        with self._lock:
            self.logger = logging.getLogger(name)
            self.logger.setLevel(level)
            if not UnifiedLogger._global_initialized:
                self._ensure_root_logger(level)
                UnifiedLogger._global_initialized = True
            self.logger.propagate = True

    def get_logger(self) -> logging.Logger:
        """Get the underlying logger instance"""
        return self.logger

    def log_step(self, step: str, details: Optional[Dict[str, Any]] = None, level: str = "INFO"):
        """Log one step of a preview run with structured details"""
        log_level = getattr(logging, level.upper(), logging.INFO)
        self.logger.log(log_level, f"STEP: {step}", extra={"step": step, "details": details or {}})

    def log_performance(self, operation: str, duration: float):
        """Log performance metrics"""
        self.logger.info(f"PERFORMANCE: {operation} took {duration:.2f}s")

    def log_error_with_context(self, error: BaseException, context: Dict[str, Any], level: str = "ERROR"):
        """Log errors with additional context"""
        error_details = {
            "timestamp": datetime.now().isoformat(),
            "error_type": type(error).__name__,
            "error_message": str(error),
            "context": context,
        }
        if self.logger.isEnabledFor(logging.DEBUG):
            error_details["traceback"] = "".join(
                traceback.format_exception(type(error), error, error.__traceback__)
            )

        self.logger.log(
            getattr(logging, level.upper(), logging.ERROR),
            f"ERROR: {type(error).__name__}: {error}",
            extra={"details": error_details},
        )

    @contextmanager
    def time_operation(self, operation_name: str):
        """Context manager for timing operations"""
        start_time = time.monotonic()
        try:
            yield
        finally:
            self.log_performance(operation_name, time.monotonic() - start_time)

    def _ensure_root_logger(self, level: int) -> None:
        if not _env_enabled("ENABLE_ROOT_LOGGER"):
            return
        root_logger = logging.getLogger()
        if root_logger.handlers:
            return

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(
            getattr(logging, os.getenv("CONSOLE_LOG_LEVEL", "INFO").upper(), logging.INFO)
        )
        console_handler.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(message)s"))

        root_logger.setLevel(level)
        root_logger.addHandler(console_handler)

        if not _env_enabled("ENABLE_FILE_LOGGING"):
            return

        logs_dir = _logs_dir()
        try:
            logs_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            root_logger.warning(f"Could not create log directory {logs_dir}: {e}")
            return

        timestamp = datetime.now().strftime("%Y%m%d")
        file_handler = RotatingFileHandler(
            logs_dir / f"preview_{timestamp}.log",
            maxBytes=5 * 1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
        ))
        root_logger.addHandler(file_handler)
        UnifiedLogger._file_handlers.append(file_handler)

        if _env_enabled("ENABLE_JSON_LOGGING"):
            json_handler = RotatingFileHandler(
                logs_dir / f"preview_json_{timestamp}.log",
                maxBytes=5 * 1024 * 1024,
                backupCount=3,
                encoding="utf-8",
            )
            json_handler.setLevel(level)
            json_handler.setFormatter(JsonFormatter())
            root_logger.addHandler(json_handler)
            UnifiedLogger._file_handlers.append(json_handler)

        root_logger.debug(f"Logging initialized in {logs_dir}")


def setup_logger(name: str = "local_preview", log_level: Optional[str] = None) -> logging.Logger:
    """Shortcut returning a configured logger instance"""
    return UnifiedLogger(name=name, log_level=log_level).get_logger()


def set_package_level(log_level: Optional[str]) -> int:
    """Apply a level to every local_preview logger and to the log files"""
    level = getattr(logging, str(log_level or "INFO").upper(), logging.INFO)
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)
    with UnifiedLogger._lock:
        for handler in UnifiedLogger._file_handlers:
            handler.setLevel(level)
    return level
