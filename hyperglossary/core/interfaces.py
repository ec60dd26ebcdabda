"""
Abstract interfaces for the pluggable collaborators of the site pipeline.

The cross-reference engine and index builder are concrete; reading input and
emitting pages sit behind these interfaces so they can be swapped or mocked.
"""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Sequence

from .models import BuildJob, Entry, Glossary


# ============================================================================
# GLOSSARY PARSER INTERFACE
# ============================================================================

class IGlossaryParser(ABC):
    """Interface for input readers that produce a Glossary."""

    @abstractmethod
    def validate_document(self, file_path: Path) -> bool:
        """Check input before parsing."""
        pass

    @abstractmethod
    def parse(self, file_path: Path) -> Glossary:
        """Parse a file into a Glossary."""
        pass

    @abstractmethod
    def parse_text(self, text: str) -> Glossary:
        """Parse already-loaded text into a Glossary."""
        pass


# ============================================================================
# PAGE RENDERER INTERFACE
# ============================================================================

class IPageRenderer(ABC):
    """Interface for page emitters driven by the index builder."""

    @property
    @abstractmethod
    def output_dir(self) -> Path:
        """Directory pages are written into."""
        pass

    @abstractmethod
    def write_term_page(self, entry: Entry) -> Path:
        """Emit the page for one term and return its path."""
        pass

    @abstractmethod
    def index_item(self, term: str) -> str:
        """Markup for one index list entry."""
        pass

    @abstractmethod
    def write_index_page(self, items: Sequence[str]) -> Path:
        """Emit the index page around the given list entries."""
        pass


# ============================================================================
# PROGRESS CALLBACK INTERFACE
# ============================================================================

class IProgressCallback(ABC):
    """Interface for progress callbacks."""

    @abstractmethod
    def on_start(self, job: BuildJob) -> None:
        """Called when a build starts."""
        pass

    @abstractmethod
    def on_progress(self, job: BuildJob, current: int, total: int) -> None:
        """Called after each term page is written."""
        pass

    @abstractmethod
    def on_complete(self, job: BuildJob) -> None:
        """Called when the build completes."""
        pass

    @abstractmethod
    def on_error(self, job: BuildJob, error: Exception) -> None:
        """Called when the build fails."""
        pass


class RecordingProgressCallback(IProgressCallback):
    """Callback that keeps every event, useful for tests and reporting."""

    def __init__(self):
        self.events: List[tuple] = []

    def on_start(self, job: BuildJob) -> None:
        self.events.append(('start', job.job_id))

    def on_progress(self, job: BuildJob, current: int, total: int) -> None:
        self.events.append(('progress', current, total))

    def on_complete(self, job: BuildJob) -> None:
        self.events.append(('complete', job.job_id))

    def on_error(self, job: BuildJob, error: Exception) -> None:
        self.events.append(('error', type(error).__name__))
