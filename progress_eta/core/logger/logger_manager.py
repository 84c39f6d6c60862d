"""Logger manager for centralized logging configuration."""

import logging
import logging.handlers
from pathlib import Path
from typing import Dict, Any

from .structured_formatter import StructuredFormatter


ROOT_LOGGER_NAME = 'progress_eta'
DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class LoggerManager:
    """Configures the ``progress_eta`` logger tree from the ``logging`` config section."""

    def __init__(self, config: Dict[str, Any]):
        """Initialize logger manager with configuration.

        Args:
            config: Configuration dictionary containing logging settings
        """
        self.config = config
        self.logging_config = config.get('logging', {}) or {}
        self.loggers: Dict[str, logging.Logger] = {}
        self._setup_logging()

    def _setup_logging(self) -> None:
        """Set up logging configuration based on config."""
        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        root_logger.setLevel(self._get_log_level())

        # Clear existing handlers
        root_logger.handlers.clear()

        self._add_console_handler(root_logger)

        log_file = self.logging_config.get('file')
        if log_file:
            self._add_file_handler(root_logger, Path(log_file))

        self.loggers['root'] = root_logger

    def _get_log_level(self) -> int:
        """Get logging level from configuration.

        Returns:
            Logging level constant
        """
        level_name = str(self.logging_config.get('level', 'WARNING')).upper()
        return getattr(logging, level_name, logging.WARNING)

    def _add_console_handler(self, logger: logging.Logger) -> None:
        """Add console handler to logger.

        Args:
            logger: Logger to add handler to
        """
        console_handler = logging.StreamHandler()

        if self.logging_config.get('structured', False):
            console_handler.setFormatter(StructuredFormatter())
        else:
            format_str = self.logging_config.get('format', DEFAULT_FORMAT)
            console_handler.setFormatter(logging.Formatter(format_str))

        console_handler.setLevel(self._get_log_level())
        logger.addHandler(console_handler)

    def _add_file_handler(self, logger: logging.Logger, log_file: Path) -> None:
        """Add rotating file handler to logger.

        Args:
            logger: Logger to add handler to
            log_file: Path of the log file
        """
        log_file.parent.mkdir(parents=True, exist_ok=True)

        max_bytes = self._parse_size(self.logging_config.get('max_file_size', '10MB'))
        backup_count = self.logging_config.get('backup_count', 5)

        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8'
        )

        # Always use structured format for file logs
        file_handler.setFormatter(StructuredFormatter())
        file_handler.setLevel(self._get_log_level())

        logger.addHandler(file_handler)

    def _parse_size(self, size_str: str) -> int:
        """Parse size string to bytes.

        Args:
            size_str: Size string (e.g., '10MB')

        Returns:
            Size in bytes
        """
        size_str = str(size_str).upper()
        # Longest suffixes first so 'MB' is not read as 'B'
        multipliers = {
            'GB': 1024 * 1024 * 1024,
            'MB': 1024 * 1024,
            'KB': 1024,
            'B': 1,
        }

        for unit, multiplier in multipliers.items():
            if size_str.endswith(unit):
                number_str = size_str[:-len(unit)]
                try:
                    return int(float(number_str) * multiplier)
                except ValueError:
                    break

        # Default to 10MB if parsing fails
        return 10 * 1024 * 1024

    def get_logger(self, name: str) -> logging.Logger:
        """Get logger by name.

        Args:
            name: Logger name

        Returns:
            Logger instance
        """
        if name in self.loggers:
            return self.loggers[name]

        logger = logging.getLogger(f'{ROOT_LOGGER_NAME}.{name}')
        self.loggers[name] = logger
        return logger

    def set_level(self, level: str) -> None:
        """Set logging level for all loggers.

        Args:
            level: Logging level name
        """
        log_level = getattr(logging, level.upper(), logging.INFO)

        for logger in self.loggers.values():
            logger.setLevel(log_level)
            for handler in logger.handlers:
                handler.setLevel(log_level)

    def shutdown(self) -> None:
        """Close and detach every handler this manager installed."""
        for logger in self.loggers.values():
            for handler in logger.handlers[:]:
                handler.close()
                logger.removeHandler(handler)
