"""Configuration validator for progress-eta."""

from typing import Dict, Any, List

from ...progress.models import ProgressOptions
from ..exceptions import ConfigValidationError


VALID_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


class ConfigValidator:
    """Validates the ``progress`` and ``logging`` configuration sections."""

    def __init__(self, config: Dict[str, Any]):
        """Initialize validator with configuration.

        Args:
            config: Configuration dictionary to validate
        """
        self.config = config
        self.errors: List[str] = []

    def validate(self) -> List[str]:
        """Validate complete configuration.

        Returns:
            List of validation error messages
        """
        self.errors = []

        self._validate_progress_config()
        self._validate_logging_config()

        return self.errors

    def _validate_progress_config(self) -> None:
        """Validate progress options, prefixing each problem with its section."""
        progress = self.config.get('progress', {})
        if not isinstance(progress, dict):
            self.errors.append("progress must be a mapping")
            return

        try:
            ProgressOptions.from_dict(progress)
        except ConfigValidationError as e:
            self.errors.extend(f"progress: {error}" for error in e.validation_errors)

    def _validate_logging_config(self) -> None:
        """Validate logging configuration section."""
        logging_config = self.config.get('logging', {})
        if not isinstance(logging_config, dict):
            self.errors.append("logging must be a mapping")
            return

        level = logging_config.get('level', 'WARNING')
        if not isinstance(level, str) or level.upper() not in VALID_LOG_LEVELS:
            self.errors.append(f"logging.level must be one of: {VALID_LOG_LEVELS}")

        structured = logging_config.get('structured', False)
        if not isinstance(structured, bool):
            self.errors.append("logging.structured must be a boolean")

        log_file = logging_config.get('file')
        if log_file is not None and not isinstance(log_file, str):
            self.errors.append("logging.file must be a string path")

        max_size = logging_config.get('max_file_size', '10MB')
        if not isinstance(max_size, str) or not self._validate_size_format(max_size):
            self.errors.append("logging.max_file_size must be a valid size string (e.g., '10MB')")

        backup_count = logging_config.get('backup_count', 5)
        if not isinstance(backup_count, int) or isinstance(backup_count, bool) or backup_count < 0:
            self.errors.append("logging.backup_count must be a non-negative integer")

    def _validate_size_format(self, size: str) -> bool:
        """Validate size format string.

        Args:
            size: Size string to validate (e.g., '10MB')

        Returns:
            True if valid format, False otherwise
        """
        if not size:
            return False

        # Check longer units first to avoid partial matches
        valid_units = ['GB', 'MB', 'KB', 'B']
        for unit in valid_units:
            if size.upper().endswith(unit):
                number_part = size[:-len(unit)]
                try:
                    float(number_part)
                    return True
                except ValueError:
                    return False

        return False

    def is_valid(self) -> bool:
        """Check if configuration is valid.

        Returns:
            True if configuration is valid, False otherwise
        """
        return len(self.validate()) == 0
