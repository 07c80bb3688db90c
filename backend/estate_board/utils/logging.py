# backend/estate_board/utils/logging.py
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Create formatters
verbose_formatter = logging.Formatter(
    '\033[1;36m%(asctime)s\033[0m - \033[1;33m%(name)s\033[0m - \033[1;35m%(levelname)s\033[0m [\033[1;34m%(module)s:%(lineno)d\033[0m] - %(message)s'
)
file_formatter = logging.Formatter(
    '%(asctime)s - %(name)s - %(levelname)s [%(module)s:%(lineno)d] - %(message)s'
)


class BoardLogger:
    """Custom logger class that protects reserved LogRecord attributes"""

    reserved_attrs = {
        'args', 'asctime', 'created', 'exc_info', 'exc_text', 'filename',
        'funcName', 'levelname', 'levelno', 'lineno', 'module', 'msecs',
        'message', 'msg', 'name', 'pathname', 'process', 'processName',
        'relativeCreated', 'stack_info', 'thread', 'threadName'
    }

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.INFO)
        self.setup_console_handler()

    def setup_console_handler(self):
        """Console handler with colors"""
        if self.logger.handlers:
            return
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(verbose_formatter)
        self.logger.addHandler(console_handler)

    def attach_file_handler(self, log_dir: Path):
        """Write to log_dir/<name>.log, replacing a file handler for another directory"""
        log_file = (Path(log_dir) / f"{self.logger.name}.log").absolute()
        for handler in list(self.logger.handlers):
            if not isinstance(handler, RotatingFileHandler):
                continue
            if Path(handler.baseFilename) == log_file:
                return
            self.logger.removeHandler(handler)
            handler.close()

        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10*1024*1024,  # 10MB
            backupCount=5,
            encoding="utf-8"
        )
        file_handler.setFormatter(file_formatter)
        self.logger.addHandler(file_handler)

    def _sanitize_extra(self, extra):
        """Sanitize extra fields to avoid conflicts with reserved attributes"""
        if extra is None:
            return None

        sanitized = {}
        for key, value in extra.items():
            if key in self.reserved_attrs:
                sanitized[f"extra_{key}"] = value
            else:
                sanitized[key] = value
        return sanitized

    def debug(self, msg, extra=None, exc_info=None):
        self.logger.debug(msg, extra=self._sanitize_extra(extra), exc_info=exc_info)

    def info(self, msg, extra=None, exc_info=None):
        self.logger.info(msg, extra=self._sanitize_extra(extra), exc_info=exc_info)

    def warning(self, msg, extra=None, exc_info=None):
        self.logger.warning(msg, extra=self._sanitize_extra(extra), exc_info=exc_info)

    def error(self, msg, extra=None, exc_info=None):
        self.logger.error(msg, extra=self._sanitize_extra(extra), exc_info=exc_info)


# Create loggers for different components
api_logger = BoardLogger("api")
db_logger = BoardLogger("database")
service_logger = BoardLogger("service")


def configure_file_logging(log_dir: Path) -> None:
    for board_logger in (api_logger, db_logger, service_logger):
        board_logger.attach_file_handler(log_dir)


__all__ = ["api_logger", "db_logger", "service_logger", "configure_file_logging"]
