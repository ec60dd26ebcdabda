"""Core data model, interfaces and error taxonomy."""
from .exceptions import (
    GlossarySystemError, GlossaryError, DuplicateTermError, EmptyDefinitionError,
    InvalidTermError, TermNotFoundError, ParserError, MalformedInputError,
    FormatterError, OutputError, PipelineError, ConfigurationError,
    ValidationError, InvalidConfigError,
)
from .models import (
    Entry, Glossary, LinkResult, IndexResult, BuildJob, BuildStatus,
    PAGE_SUFFIX, INDEX_FILENAME, INDEX_TITLE,
)
from .interfaces import IGlossaryParser, IPageRenderer, IProgressCallback

__all__ = [
    "GlossarySystemError", "GlossaryError", "DuplicateTermError",
    "EmptyDefinitionError", "InvalidTermError", "TermNotFoundError",
    "ParserError", "MalformedInputError", "FormatterError", "OutputError",
    "PipelineError", "ConfigurationError", "ValidationError", "InvalidConfigError",
    "Entry", "Glossary", "LinkResult", "IndexResult", "BuildJob", "BuildStatus",
    "PAGE_SUFFIX", "INDEX_FILENAME", "INDEX_TITLE",
    "IGlossaryParser", "IPageRenderer", "IProgressCallback",
]
