"""Errors raised while loading or validating progress-eta configuration."""

from typing import List, Optional
from .base_exceptions import ProgressEtaError


class ConfigurationError(ProgressEtaError):
    """A configuration source could not be turned into usable settings."""

    def __init__(self, message: str, config_section: Optional[str] = None,
                 config_key: Optional[str] = None, **kwargs):
        """Initialize configuration error.

        Args:
            message: Error message
            config_section: Section such as ``progress`` or ``logging``
            config_key: Offending key inside the section
            **kwargs: Additional arguments for base class
        """
        details = kwargs.get('details', {})
        if config_section:
            details['config_section'] = config_section
        if config_key:
            details['config_key'] = config_key

        kwargs['details'] = details
        kwargs['error_code'] = kwargs.get('error_code', 'CONFIG_ERROR')

        super().__init__(message, **kwargs)

        self.config_section = config_section
        self.config_key = config_key


class ConfigValidationError(ConfigurationError):
    """Progress options or config sections failed validation.

    Raised by ``ProgressOptions`` for unknown keys and out-of-range values;
    every problem found is listed in ``validation_errors``.
    """

    def __init__(self, validation_errors: List[str], **kwargs):
        message = f"Configuration validation failed with {len(validation_errors)} errors"

        details = kwargs.get('details', {})
        details['validation_errors'] = validation_errors

        kwargs['details'] = details
        kwargs['error_code'] = 'CONFIG_VALIDATION_ERROR'
        kwargs['suggestion'] = (
            'Use only total, smoothing, starting_at and out_of_bounds_format '
            'with valid values'
        )

        super().__init__(message, **kwargs)

        self.validation_errors = validation_errors


class ConfigFileNotFoundError(ConfigurationError):
    """The YAML file passed with ``--config`` (or ``config_path``) does not exist."""

    def __init__(self, file_path: str, **kwargs):
        details = kwargs.get('details', {})
        details['file_path'] = file_path

        kwargs['details'] = details
        kwargs['error_code'] = 'CONFIG_FILE_NOT_FOUND'
        kwargs['suggestion'] = 'Pass an existing YAML file or omit --config to use the defaults'

        super().__init__(f"Configuration file not found: {file_path}", **kwargs)

        self.file_path = file_path


class ConfigFileFormatError(ConfigurationError):
    """The configuration file is not a YAML mapping."""

    def __init__(self, file_path: str, format_error: str, **kwargs):
        details = kwargs.get('details', {})
        details.update({
            'file_path': file_path,
            'format_error': format_error
        })

        kwargs['details'] = details
        kwargs['error_code'] = 'CONFIG_FORMAT_ERROR'
        kwargs['suggestion'] = 'The file must hold a mapping with progress and logging sections'

        super().__init__(f"Invalid configuration file {file_path}: {format_error}", **kwargs)

        self.file_path = file_path
        self.format_error = format_error
