"""
Logging System for Symbolic Calculus

Centralized logging with verbosity levels. The expression tree core never
writes anything itself; callers such as the demo driver report results and
failures through this module.
"""

import logging
import sys
from typing import Optional, TextIO
from enum import Enum
from datetime import datetime


class LogLevel(Enum):
    """Enumeration of logging levels"""
    SILENT = 0      # No output at all
    MINIMAL = 1     # Errors and final results
    MODERATE = 2    # Milestones and warnings
    DETAILED = 3    # Intermediate results (derivatives, evaluations)
    VERBOSE = 4     # All information including debug details


class CalculusLogger:
    """
    Centralized logger with level-aware formatting
    """

    def __init__(self, log_level: LogLevel = LogLevel.MODERATE,
                 log_to_file: bool = False, log_file_path: Optional[str] = None,
                 stream: Optional[TextIO] = None):
        self.log_level = log_level
        self.log_to_file = log_to_file
        self.stream = stream

        self.logger = logging.getLogger('symbolic_calculus')
        self.logger.setLevel(logging.DEBUG)
        self.logger.propagate = False
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

        if self.log_level != LogLevel.SILENT:
            console_handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        if log_to_file:
            if log_file_path is None:
                log_file_path = f"symbolic_calculus_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
            file_handler = logging.FileHandler(log_file_path)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)
        self.log_file_path = log_file_path

    def _should_log(self, required_level: LogLevel) -> bool:
        """Check if message should be logged based on current log level"""
        return self.log_level.value >= required_level.value

    def error(self, message: str):
        """Failures reported by callers; shown unless silent"""
        if self.log_level != LogLevel.SILENT:
            self.logger.error(message)

    def info(self, message: str, required_level: LogLevel = LogLevel.MINIMAL):
        """General information with configurable level"""
        if self._should_log(required_level):
            self.logger.info(message)

    def milestone(self, message: str):
        if self._should_log(LogLevel.MODERATE):
            self.logger.info(f"MILESTONE: {message}")

    def warning(self, message: str):
        if self._should_log(LogLevel.MODERATE):
            self.logger.warning(message)

    def debug(self, message: str):
        """Debug information - only in verbose mode"""
        if self._should_log(LogLevel.VERBOSE):
            self.logger.debug(f"DEBUG: {message}")


# Global logger instance
_global_logger: Optional[CalculusLogger] = None


def get_logger() -> CalculusLogger:
    """Get or create the global logger instance"""
    global _global_logger
    if _global_logger is None:
        _global_logger = CalculusLogger()
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global logging level, rebuilding handlers with the current destinations"""
    global _global_logger
    if _global_logger is None:
        _global_logger = CalculusLogger(log_level=level)
    else:
        _global_logger = CalculusLogger(
            log_level=level,
            log_to_file=_global_logger.log_to_file,
            log_file_path=_global_logger.log_file_path,
            stream=_global_logger.stream
        )


def configure_logging(log_level: LogLevel = LogLevel.MODERATE,
                      log_to_file: bool = False,
                      log_file_path: Optional[str] = None,
                      stream: Optional[TextIO] = None) -> CalculusLogger:
    """Configure the global logging system"""
    global _global_logger
    _global_logger = CalculusLogger(
        log_level=log_level,
        log_to_file=log_to_file,
        log_file_path=log_file_path,
        stream=stream
    )
    return _global_logger


def log_info(message: str, level: LogLevel = LogLevel.MINIMAL):
    get_logger().info(message, level)


def log_milestone(message: str):
    get_logger().milestone(message)


def log_warning(message: str):
    get_logger().warning(message)


def log_error(message: str):
    get_logger().error(message)


def log_debug(message: str):
    get_logger().debug(message)
