"""Base exception classes for progress-eta."""

from typing import Optional, Dict, Any


class ProgressEtaException(Exception):
    """Root of every exception raised by progress-eta.

    ``message`` is kept verbatim so the progress errors can reproduce their
    legacy wording exactly; ``error_code`` and ``details`` give log handlers
    (see ``StructuredFormatter``) something to serialize.
    """

    def __init__(self, message: str, error_code: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None,
                 suggestion: Optional[str] = None):
        """Initialize base exception.

        Args:
            message: Exact text reported to the caller
            error_code: Stable code such as ``INVALID_PROGRESS``
            details: Values involved in the failure (progress, total, path, ...)
            suggestion: Optional hint appended to ``str()``
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.suggestion = suggestion

    def to_dict(self) -> Dict[str, Any]:
        """Serializable form, passed as ``extra`` when the CLI logs a failure."""
        return {
            'exception_type': self.__class__.__name__,
            'message': self.message,
            'error_code': self.error_code,
            'details': self.details,
            'suggestion': self.suggestion,
        }

    def __str__(self) -> str:
        if self.suggestion:
            return f"{self.message}. Suggestion: {self.suggestion}"
        return self.message


class ProgressEtaError(ProgressEtaException):
    """Usage error raised synchronously to the caller.

    Counter, clock and estimator errors are programmer errors: they are
    never retried or clamped away locally.
    """
    pass
