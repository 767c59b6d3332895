"""
Logger implementations for crawl diagnostics.
All loggers write to stderr so that stdout stays reserved for the sitemap.
"""
import logging
import sys
from datetime import datetime

LOG_LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}


class ConsoleLogger:
    """Simple console logger implementation"""

    LEVELS = LOG_LEVELS

    def __init__(self, name: str = "forum_sitemap", level: str = "INFO"):
        self.name = name
        self.level = level.upper()

    def info(self, message: str) -> None:
        """Log info message to stderr"""
        self._log("INFO", message)

    def warning(self, message: str) -> None:
        self._log("WARNING", message)

    def error(self, message: str) -> None:
        """Log error message to stderr"""
        self._log("ERROR", message)

    def debug(self, message: str) -> None:
        """Log debug message to stderr"""
        self._log("DEBUG", message)

    def _log(self, level: str, message: str) -> None:
        if self.LEVELS[level] < self.LEVELS.get(self.level, 20):
            return
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        print(f"[{timestamp}] {level} - {self.name}: {message}", file=sys.stderr)


class PrefectLogger:
    """Logger that uses Prefect's run logger inside flows and tasks"""

    def __init__(self, logger_name: str = "forum_sitemap"):
        self.logger_name = logger_name

    def info(self, message: str) -> None:
        self._logger().info(message)

    def warning(self, message: str) -> None:
        self._logger().warning(message)

    def error(self, message: str) -> None:
        self._logger().error(message)

    def debug(self, message: str) -> None:
        self._logger().debug(message)

    def _logger(self):
        """Resolve the run logger, falling back outside of a run context"""
        from prefect import get_run_logger
        from prefect.exceptions import MissingContextError

        try:
            return get_run_logger()
        except MissingContextError:
            return logging.getLogger(self.logger_name)


class StandardLogger:
    """Logger using Python's standard logging module"""

    def __init__(self, logger_name: str = "forum_sitemap", level: str = "INFO"):
        if level.upper() not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {level}")
        self.logger = logging.getLogger(logger_name)
        self.logger.setLevel(getattr(logging, level.upper()))

        if not self.logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def info(self, message: str) -> None:
        self.logger.info(message)

    def warning(self, message: str) -> None:
        self.logger.warning(message)

    def error(self, message: str) -> None:
        self.logger.error(message)

    def debug(self, message: str) -> None:
        self.logger.debug(message)


class LoggerFactory:
    """Factory for creating logger instances"""

    @staticmethod
    def create_console_logger(name: str = "forum_sitemap", level: str = "INFO") -> ConsoleLogger:
        return ConsoleLogger(name, level)

    @staticmethod
    def create_prefect_logger(name: str = "forum_sitemap") -> PrefectLogger:
        return PrefectLogger(name)

    @staticmethod
    def create_standard_logger(name: str = "forum_sitemap", level: str = "INFO") -> StandardLogger:
        return StandardLogger(name, level)

    @classmethod
    def create(cls, logger_type: str = "console", name: str = "forum_sitemap",
               level: str = "INFO"):
        """Create a logger by type name"""
        if logger_type == "console":
            return cls.create_console_logger(name, level)
        elif logger_type == "prefect":
            return cls.create_prefect_logger(name)
        elif logger_type == "standard":
            return cls.create_standard_logger(name, level)
        else:
            raise ValueError(f"Unknown logger type: {logger_type}")


def log_info(logger, message: str) -> None:
    """Log info message if logger available, else print to stderr"""
    if logger:
        logger.info(message)
    else:
        print(message, file=sys.stderr)


def log_error(logger, message: str) -> None:
    """Log error message if logger available, else print to stderr"""
    if logger:
        logger.error(message)
    else:
        print(f"ERROR: {message}", file=sys.stderr)


def log_debug(logger, message: str) -> None:
    """Log debug message if logger available"""
    if logger:
        logger.debug(message)
