from __future__ import annotations

import logging
import os
from enum import Enum
from logging import handlers

from ..config import config

LOG_FORMAT = "%(asctime)s - [%(levelname)s] %(name)s::%(funcName)s %(message)s (%(filename)s:%(lineno)d)"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# --------------------------------------------------------------------------- #


class LogLevel(int, Enum):
    NOTSET = logging.NOTSET
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


# --------------------------------------------------------------------------- #


class ConsoleFormatter(logging.Formatter):
    """Colours each record by level"""

    reset = "\x1b[0m"
    COLORS = {
        logging.DEBUG: reset,
        logging.INFO: "\x1b[32;1m",  # bold green
        logging.WARNING: "\x1b[33m",  # yellow
        logging.ERROR: "\x1b[31;1m",  # bold red
        logging.CRITICAL: "\x1b[41m",  # red background
    }

    def __init__(self):
        super().__init__(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    def format(self, record):
        color = self.COLORS.get(record.levelno, self.reset)
        return color + super().format(record) + self.reset


class FileFormatter(logging.Formatter):
    def __init__(self):
        super().__init__(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)


# --------------------------------------------------------------------------- #


class Logger:
    """Logger instance generator"""

    # * Loggers created so far, by name
    __loggers: dict[str, logging.Logger] = {}

    _default_name = "http_swagger"
    _default_level = getattr(LogLevel, config.logger.log_level.upper(), LogLevel.INFO)

    @classmethod
    def get_logger(
        cls,
        name: str | None = None,
        level: int | None = None,
    ) -> logging.Logger:
        """Get a logger instance or create it if it doesn't exist

        Parameters:
            name (str): Logger name
            level (int): Logger level

        Returns:
            Logger: Logger instance
        """
        name = name or cls._default_name
        if name in cls.__loggers:
            return cls.__loggers[name]
        if level is None:
            level = cls._default_level

        logger = logging.getLogger(name)
        logger.setLevel(level)
        for handler in cls._build_handlers(level):
            logger.addHandler(handler)

        # * Own handlers already print the record, keep it away from the root logger
        logger.propagate = False

        cls.__loggers[name] = logger
        return logger

    @classmethod
    def _build_handlers(cls, level: int) -> list[logging.Handler]:
        """Console handler, plus a daily rotating file handler when enabled"""
        console = logging.StreamHandler()
        console.setFormatter(ConsoleFormatter())
        built: list[logging.Handler] = [console]

        if config.logger.log_to_file:
            log_dir = os.path.dirname(config.logger.log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            file_handler = handlers.TimedRotatingFileHandler(
                filename=config.logger.log_file,
                when="midnight",
                backupCount=14,  # Keep 14 days of logs
                encoding="utf-8",
            )
            file_handler.setFormatter(FileFormatter())
            built.append(file_handler)

        for handler in built:
            handler.setLevel(level)
        return built
