"""
Custom exceptions for the glossary site generator.
Provides clear error hierarchy and meaningful error messages.
"""

from contextlib import contextmanager
from typing import Optional, Dict, Any, Type
import logging

__all__ = [
    # Base
    'GlossarySystemError',
    # Glossary
    'GlossaryError', 'DuplicateTermError', 'EmptyDefinitionError',
    'InvalidTermError', 'TermNotFoundError',
    # Parser
    'ParserError', 'MalformedInputError',
    # Formatter
    'FormatterError', 'OutputError',
    # Pipeline
    'PipelineError', 'ConfigurationError',
    # Validation
    'ValidationError', 'InvalidConfigError',
    # Utilities
    'error_context', 'wrap_error',
]


# ============================================================================
# BASE EXCEPTION
# ============================================================================

class GlossarySystemError(Exception):
    """
    Base exception for all glossary site errors.

    All custom exceptions inherit from this class for unified error handling.
    """

    def __init__(self, message: str, **context: Any) -> None:
        """
        Initialize exception with message and optional context.

        Args:
            message: Error message
            **context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.context = {k: v for k, v in context.items() if v is not None}

    def __str__(self) -> str:
        """String representation with context."""
        if not self.context:
            return self.message

        context_str = ', '.join(f"{k}={v}" for k, v in self.context.items())
        return f"{self.message} ({context_str})"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            'error_type': self.__class__.__name__,
            'message': self.message,
            'context': self.context
        }


# ============================================================================
# GLOSSARY EXCEPTIONS
# ============================================================================

class GlossaryError(GlossarySystemError):
    """Base exception for glossary construction and lookup errors."""

    def __init__(self, message: str, term: Optional[str] = None, **context: Any) -> None:
        super().__init__(message, term=term, **context)
        self.term = term


class DuplicateTermError(GlossaryError):
    """Raised when two records share the same term."""
    pass


class EmptyDefinitionError(GlossaryError):
    """Raised when a term has an empty or whitespace-only definition."""
    pass


class InvalidTermError(GlossaryError):
    """Raised when term doesn't meet validation requirements."""
    pass


class TermNotFoundError(GlossaryError, KeyError):
    """Raised when a term is looked up by subscript and is not present."""

    def __str__(self) -> str:
        return GlossarySystemError.__str__(self)


# ============================================================================
# PARSER EXCEPTIONS
# ============================================================================

class ParserError(GlossarySystemError):
    """Base exception for input parsing errors."""

    def __init__(self, message: str, file_path: Optional[str] = None, **context: Any) -> None:
        super().__init__(message, file_path=file_path, **context)
        self.file_path = file_path


class MalformedInputError(ParserError):
    """Raised when input ends in the middle of a record."""

    def __init__(
        self,
        message: str,
        line_number: Optional[int] = None,
        file_path: Optional[str] = None,
        **context: Any
    ) -> None:
        super().__init__(message, file_path=file_path, line_number=line_number, **context)
        self.line_number = line_number


# ============================================================================
# FORMATTER EXCEPTIONS
# ============================================================================

class FormatterError(GlossarySystemError):
    """Base exception for page rendering errors."""
    pass


class OutputError(FormatterError):
    """Raised when output file cannot be created or written."""

    def __init__(self, message: str, output_path: Optional[str] = None, **context: Any) -> None:
        super().__init__(message, output_path=output_path, **context)
        self.output_path = output_path


# ============================================================================
# PIPELINE EXCEPTIONS
# ============================================================================

class PipelineError(GlossarySystemError):
    """Base exception for pipeline errors."""

    def __init__(self, message: str, stage: Optional[str] = None, **context: Any) -> None:
        super().__init__(message, stage=stage, **context)
        self.stage = stage


class ConfigurationError(PipelineError):
    """Raised when pipeline or component configuration is invalid."""

    def __init__(self, message: str, component: Optional[str] = None, **context: Any) -> None:
        super().__init__(message, component=component, **context)
        self.component = component


# ============================================================================
# VALIDATION EXCEPTIONS
# ============================================================================

class ValidationError(GlossarySystemError):
    """Base exception for validation errors."""

    def __init__(self, message: str, field: Optional[str] = None, **context: Any) -> None:
        super().__init__(message, field=field, **context)
        self.field = field


class InvalidConfigError(ValidationError):
    """Raised when configuration values are invalid."""
    pass


# ============================================================================
# UTILITY FUNCTIONS
# ============================================================================

def wrap_error(
    error: Exception,
    error_class: Type[GlossarySystemError],
    message: Optional[str] = None
) -> GlossarySystemError:
    """
    Wrap an exception in a custom exception type.

    Args:
        error: Original exception
        error_class: Exception class to wrap with
        message: Optional custom message

    Returns:
        Wrapped exception with ``__cause__`` set to the original

    Raises:
        TypeError: If error_class is not a GlossarySystemError subclass

    Example:
        >>> try:
        ...     raise OSError("disk full")
        ... except OSError as e:
        ...     raise wrap_error(e, OutputError, "Writing page failed")
    """
    if not issubclass(error_class, GlossarySystemError):
        raise TypeError(
            f"error_class must be subclass of GlossarySystemError, "
            f"got {error_class.__name__}"
        )

    error_msg = f"{message}: {error}" if message else str(error)
    wrapped = error_class(error_msg)
    wrapped.__cause__ = error
    return wrapped


@contextmanager
def error_context(
    operation: str,
    error_class: Type[GlossarySystemError] = GlossarySystemError,
    logger: Optional[logging.Logger] = None
):
    """
    Context manager for consistent error handling and wrapping.

    Errors that are already ``GlossarySystemError`` instances pass through
    unchanged so callers can still catch the precise type.

    Args:
        operation: Name of operation being performed
        error_class: Exception class to wrap errors with
        logger: Optional logger for error logging

    Raises:
        error_class: Wrapped exception if a foreign error occurs

    Example:
        >>> with error_context("writing index", OutputError):
        ...     path.write_text(html)
    """
    try:
        yield
    except GlossarySystemError:
        raise
    except KeyboardInterrupt:
        raise
    except Exception as e:
        if logger:
            logger.error(f"Error during {operation}: {e}", exc_info=True)

        raise wrap_error(e, error_class, f"Error during {operation}") from e
