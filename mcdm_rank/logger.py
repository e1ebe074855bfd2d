# -*- coding: utf-8 -*-
"""
Logging setup for MCDM ranking.

Features:
- Colored console output with level-based styling
- Clean file logging (no ANSI codes) with rotation
- Hierarchical module loggers under a single package root
- Execution timing decorator and context manager
"""

import logging
import logging.handlers
import os
import re
import sys
import threading
import time
from contextlib import contextmanager
from functools import wraps
from pathlib import Path
from typing import Callable, Dict, Optional, Sequence, Union


# =============================================================================
# Constants
# =============================================================================

LOG_NAME = "mcdm_rank"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
CONSOLE_DATE_FORMAT = "%H:%M:%S"
MAX_LOG_SIZE = 5 * 1024 * 1024  # 5 MB
BACKUP_COUNT = 3


# =============================================================================
# ANSI Color Definitions
# =============================================================================

class Colors:
    """ANSI color codes for terminal output."""
    RESET = "\033[0m"
    BOLD = "\033[1m"

    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    CYAN = "\033[36m"
    BRIGHT_RED = "\033[91m"

    ANSI_PATTERN = re.compile(r'\033\[[0-9;]*m')

    @classmethod
    def strip(cls, text: str) -> str:
        """Remove all ANSI codes from text."""
        return cls.ANSI_PATTERN.sub('', text)

    @classmethod
    def supports_color(cls) -> bool:
        """Check if terminal supports colors."""
        if os.getenv("NO_COLOR"):
            return False
        if os.getenv("FORCE_COLOR"):
            return True
        if not hasattr(sys.stdout, "isatty") or not sys.stdout.isatty():
            return False
        return sys.platform != "win32" or os.getenv("TERM") == "xterm"


# =============================================================================
# Formatters
# =============================================================================

class ColoredFormatter(logging.Formatter):
    """Formatter with level-based ANSI colors for console output."""

    LEVEL_COLORS = {
        logging.DEBUG: Colors.CYAN,
        logging.INFO: Colors.GREEN,
        logging.WARNING: Colors.YELLOW,
        logging.ERROR: Colors.RED,
        logging.CRITICAL: Colors.BRIGHT_RED + Colors.BOLD,
    }

    def __init__(
        self,
        fmt: Optional[str] = None,
        datefmt: Optional[str] = None,
        use_colors: bool = True
    ):
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors and Colors.supports_color()

    def format(self, record: logging.LogRecord) -> str:
        # Work on a copy so other handlers see the plain record
        record = logging.makeLogRecord(record.__dict__)
        if self.use_colors:
            color = self.LEVEL_COLORS.get(record.levelno, "")
            record.levelname = f"{color}{Colors.BOLD}{record.levelname:8}{Colors.RESET}"
            record.msg = f"{color}{record.msg}{Colors.RESET}"
        return super().format(record)


class CleanFormatter(logging.Formatter):
    """Formatter for file output, strips ANSI codes."""

    def format(self, record: logging.LogRecord) -> str:
        record = logging.makeLogRecord(record.__dict__)
        if isinstance(record.msg, str):
            record.msg = Colors.strip(record.msg)
        return super().format(record)


class SafeRotatingFileHandler(logging.handlers.RotatingFileHandler):
    """Thread-safe rotating file handler with error recovery."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._lock = threading.Lock()

    def emit(self, record: logging.LogRecord) -> None:
        with self._lock:
            try:
                super().emit(record)
            except Exception:
                self.handleError(record)


# =============================================================================
# Logger Factory
# =============================================================================

class LoggerFactory:
    """
    Factory for creating and managing loggers.

    Library modules log through ``logging.getLogger(__name__)``, which
    places them under the ``mcdm_rank`` root configured here.
    """

    _loggers: Dict[str, logging.Logger] = {}
    _configured: bool = False
    _root_logger: Optional[logging.Logger] = None

    @classmethod
    def setup(
        cls,
        name: str = LOG_NAME,
        level: Union[int, str] = logging.INFO,
        log_file: Optional[Path] = None,
        console: bool = True,
        use_colors: bool = True,
        console_level: Optional[Union[int, str]] = None,
        max_bytes: int = MAX_LOG_SIZE,
        backup_count: int = BACKUP_COUNT,
    ) -> logging.Logger:
        """
        Setup and configure the package root logger.

        Parameters
        ----------
        name : str
            Logger name
        level : int or str
            Logging level of the logger itself
        log_file : Path, optional
            Path for a plain text debug log (always DEBUG level)
        console : bool
            Enable console output
        use_colors : bool
            Enable colored console output
        console_level : int or str, optional
            Console handler level (defaults to ``level``)

        Returns
        -------
        logging.Logger
            Configured logger instance
        """
        level = _to_level(level)
        console_level = _to_level(console_level) if console_level is not None else level

        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.handlers.clear()
        logger.propagate = False

        if console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(console_level)
            if use_colors:
                console_fmt = ColoredFormatter(
                    fmt='%(asctime)s │ %(levelname)s │ %(message)s',
                    datefmt=CONSOLE_DATE_FORMAT,
                    use_colors=use_colors,
                )
            else:
                console_fmt = CleanFormatter(
                    fmt='%(asctime)s | %(levelname)-8s | %(message)s',
                    datefmt=CONSOLE_DATE_FORMAT
                )
            console_handler.setFormatter(console_fmt)
            logger.addHandler(console_handler)

        if log_file:
            log_file = Path(log_file)
            log_file.parent.mkdir(parents=True, exist_ok=True)

            file_handler = SafeRotatingFileHandler(
                log_file,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding='utf-8'
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(CleanFormatter(
                fmt='%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s:%(lineno)d | %(message)s',
                datefmt=DEFAULT_DATE_FORMAT
            ))
            logger.addHandler(file_handler)

        cls._root_logger = logger
        cls._loggers[name] = logger
        cls._configured = True
        return logger

    @classmethod
    def get_logger(cls, name: str = LOG_NAME) -> logging.Logger:
        """
        Get a logger instance.

        Names outside the package root are placed under it
        (``'cli'`` becomes ``'mcdm_rank.cli'``).
        """
        if name in cls._loggers:
            return cls._loggers[name]

        if cls._configured and cls._root_logger:
            root_name = cls._root_logger.name
            if name.startswith(root_name):
                logger = logging.getLogger(name)
            else:
                logger = logging.getLogger(f"{root_name}.{name}")
        else:
            logger = cls.setup(name)

        cls._loggers[name] = logger
        return logger

    @classmethod
    def get_module_logger(cls, module_name: str) -> logging.Logger:
        """Get a logger for a specific module, e.g. ``'mcdm.topsis'``."""
        root_name = cls._root_logger.name if cls._root_logger else LOG_NAME
        return cls.get_logger(f"{root_name}.{module_name}")

    @classmethod
    def reset(cls) -> None:
        """Forget all configured loggers."""
        cls._loggers = {}
        cls._configured = False
        cls._root_logger = None


def _to_level(level: Union[int, str]) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return level


# =============================================================================
# Convenience Functions
# =============================================================================

def setup_logger(
    name: str = LOG_NAME,
    level: Union[int, str] = logging.INFO,
    console: bool = True,
    debug_file: Optional[Path] = None
) -> logging.Logger:
    """
    Setup the package logger with plain console output.

    The logger itself runs at DEBUG so the optional ``debug_file``
    captures everything; the console shows ``level`` and above.
    """
    return LoggerFactory.setup(
        name=name,
        level=logging.DEBUG,
        log_file=debug_file,
        console=console,
        use_colors=False,
        console_level=level,
    )


def get_logger(name: str = LOG_NAME) -> logging.Logger:
    """Get existing logger or create default one."""
    return LoggerFactory.get_logger(name)


def get_module_logger(module_name: str) -> logging.Logger:
    """Get a logger for a specific module."""
    return LoggerFactory.get_module_logger(module_name)


# =============================================================================
# Decorators and Context Managers
# =============================================================================

def log_execution(
    logger: Optional[logging.Logger] = None,
    level: int = logging.DEBUG,
    show_args: bool = False
) -> Callable:
    """
    Decorator to log function entry, completion time and failures.

    Exceptions are logged and re-raised unchanged.
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            log = logger or logging.getLogger(func.__module__)
            func_name = func.__qualname__

            if show_args:
                args_str = ", ".join(
                    [repr(a)[:50] for a in args] +
                    [f"{k}={repr(v)[:50]}" for k, v in kwargs.items()]
                )
                log.log(level, f"Calling {func_name}({args_str})")
            else:
                log.log(level, f"Calling {func_name}")

            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                elapsed = time.perf_counter() - start
                log.error(f"{func_name} failed after {elapsed:.3f}s: {e}")
                raise
            elapsed = time.perf_counter() - start
            log.log(level, f"{func_name} completed ({elapsed:.3f}s)")
            return result

        return wrapper
    return decorator


@contextmanager
def timed_operation(
    logger: logging.Logger,
    operation: str,
    level: int = logging.INFO
):
    """
    Context manager for timing operations.

    Example:
        with timed_operation(logger, "ranking"):
            calculate_results(...)
    """
    start = time.perf_counter()
    logger.log(level, f"Starting: {operation}")
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start
        logger.log(level, f"Finished: {operation} ({elapsed:.3f}s)")


def log_ranking(
    logger: logging.Logger,
    results: Sequence,
    title: str = "Rankings",
    top_n: int = 5
) -> None:
    """Log the first ``top_n`` ranked results."""
    logger.info(f"  {title} (Top {min(top_n, len(results))}):")
    for r in results[:top_n]:
        logger.info(f"    {r.rank}. {r.alternative_name}: {r.score:.4f}")


__all__ = [
    'setup_logger',
    'get_logger',
    'get_module_logger',
    'LoggerFactory',
    'Colors',
    'ColoredFormatter',
    'CleanFormatter',
    'log_execution',
    'timed_operation',
    'log_ranking',
    'LOG_NAME',
]
