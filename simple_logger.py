import logging
import os
from enum import Enum
from typing import Any, Dict, Optional


class LogLevel(Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class Slogger:
    """
    Context-aware logging facade used by the UI layer.

    Messages go through the standard ``logging`` tree under the
    ``returns_tracker`` logger, so they land in the same file as the module
    loggers once :meth:`configure` has run. Textual owns the terminal, so
    the handler is always a file.
    """

    log_path = "logs/returns.log"
    logger_name = "returns_tracker"

    @classmethod
    def configure(cls, log_path: Optional[str] = None, level: str = "INFO") -> None:
        """Install the file handler. Replaces any handlers already on the root logger."""
        if log_path:
            cls.log_path = log_path
        log_dir = os.path.dirname(cls.log_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        numeric_level = getattr(logging, level.upper(), logging.INFO)
        for handler in logging.root.handlers[:]:
            logging.root.removeHandler(handler)
        logging.basicConfig(
            level=numeric_level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            handlers=[logging.FileHandler(cls.log_path, mode="a", encoding="utf-8")],
        )
        cls._logger().info(f"Logging configured. Level: {level}. File: {cls.log_path}")

    @classmethod
    def _logger(cls) -> logging.Logger:
        return logging.getLogger(cls.logger_name)

    @staticmethod
    def _format(message: str, context: Optional[Dict[str, Any]]) -> str:
        if not context:
            return message
        context_str = " | ".join(f"{k}={v}" for k, v in context.items())
        return f"{message} | {context_str}"

    @classmethod
    def log(cls, message: str, level: LogLevel = LogLevel.INFO, context: Optional[Dict[str, Any]] = None):
        """
        Log a message with an optional level and context.

        Args:
            message: The message to log
            level: The log level (DEBUG, INFO, WARNING, ERROR)
            context: Optional dictionary of contextual information
        """
        cls._logger().log(getattr(logging, level.value), cls._format(message, context))

    @classmethod
    def debug(cls, message: str, context: Optional[Dict[str, Any]] = None):
        """Log a debug message."""
        cls.log(message, LogLevel.DEBUG, context)

    @classmethod
    def info(cls, message: str, context: Optional[Dict[str, Any]] = None):
        """Log an info message."""
        cls.log(message, LogLevel.INFO, context)

    @classmethod
    def warning(cls, message: str, context: Optional[Dict[str, Any]] = None):
        """Log a warning message."""
        cls.log(message, LogLevel.WARNING, context)

    @classmethod
    def error(cls, message: str, context: Optional[Dict[str, Any]] = None):
        """Log an error message."""
        cls.log(message, LogLevel.ERROR, context)

    @classmethod
    def exception(cls, e: Exception, message: str = "Exception occurred", context: Optional[Dict[str, Any]] = None):
        """
        Log an exception with traceback.

        Args:
            e: The exception to log
            message: An optional message describing the context of the exception
            context: Optional dictionary of contextual information
        """
        error_context = dict(context or {})
        error_context.update({
            "exception_type": type(e).__name__,
            "exception_message": str(e),
        })
        cls._logger().error(
            cls._format(f"{message}: {type(e).__name__} - {e}", error_context),
            exc_info=e,
        )
