"""
Core Data Models
================

Entry and Glossary form the immutable snapshot handed from stage to stage.
BuildJob tracks a single run of the site pipeline.
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Iterator, List, Mapping, Optional, Tuple

from .exceptions import (
    DuplicateTermError,
    EmptyDefinitionError,
    GlossaryError,
    InvalidTermError,
    TermNotFoundError,
)


# ============================================================================
# CONSTANTS
# ============================================================================

PAGE_SUFFIX = ".html"
INDEX_FILENAME = "index.html"
INDEX_TITLE = "Glossary"


# ============================================================================
# ENUMS
# ============================================================================

class BuildStatus(Enum):
    PENDING = "pending"
    PARSING = "parsing"
    LINKING = "linking"
    RENDERING = "rendering"
    COMPLETED = "completed"
    FAILED = "failed"

    def is_terminal(self) -> bool:
        return self in (self.COMPLETED, self.FAILED)

    def is_active(self) -> bool:
        return self in (self.PARSING, self.LINKING, self.RENDERING)


# ============================================================================
# GLOSSARY CLASSES
# ============================================================================

def join_definition_lines(text: str) -> str:
    """Collapse a possibly multi-line definition into one line."""
    return " ".join(line.strip() for line in text.splitlines() if line.strip())


@dataclass(frozen=True)
class Entry:
    """Immutable (term, definition) pair."""
    term: str
    definition: str

    def __post_init__(self):
        if not isinstance(self.term, str) or not self.term.strip():
            raise InvalidTermError("Term cannot be empty", term=self.term)
        if "\n" in self.term or "\r" in self.term:
            raise InvalidTermError("Term cannot contain line breaks", term=self.term)
        if not isinstance(self.definition, str):
            raise TypeError(
                f"Definition must be str, got {type(self.definition).__name__}"
            )

        definition = join_definition_lines(self.definition)
        if not definition:
            raise EmptyDefinitionError("Term has no definition", term=self.term)

        # Normalize (frozen workaround)
        object.__setattr__(self, 'definition', definition)


class Glossary:
    """
    Read-only mapping of term -> definition.

    Every term is unique; building a Glossary with a repeated term raises
    DuplicateTermError instead of overwriting the earlier definition.
    Stages never mutate a Glossary, they return a new one.
    """

    __slots__ = ('_definitions',)

    def __init__(self, entries: Iterable[Entry] = ()):
        definitions: Dict[str, str] = {}
        for entry in entries:
            if not isinstance(entry, Entry):
                raise TypeError(f"Expected Entry, got {type(entry).__name__}")
            if entry.term in definitions:
                raise DuplicateTermError("Duplicate term in glossary", term=entry.term)
            definitions[entry.term] = entry.definition
        self._definitions: Mapping[str, str] = MappingProxyType(definitions)

    @classmethod
    def from_entries(cls, entries: Iterable[Entry]) -> 'Glossary':
        return cls(entries)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> 'Glossary':
        return cls(Entry(term, definition) for term, definition in mapping.items())

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, str]]) -> 'Glossary':
        return cls(Entry(term, definition) for term, definition in pairs)

    def get(self, term: str) -> Optional[str]:
        """Definition for term, or None when the term is unknown."""
        return self._definitions.get(term)

    def keys(self) -> FrozenSet[str]:
        return frozenset(self._definitions)

    def entries(self) -> Tuple[Entry, ...]:
        return tuple(Entry(term, definition) for term, definition in self._definitions.items())

    def as_dict(self) -> Dict[str, str]:
        return dict(self._definitions)

    def with_definitions(self, definitions: Mapping[str, str]) -> 'Glossary':
        """
        Return a new Glossary holding the same terms with replaced definitions.

        Raises:
            GlossaryError: If the term sets differ
        """
        if set(definitions) != set(self._definitions):
            missing = sorted(set(self._definitions) - set(definitions))
            extra = sorted(set(definitions) - set(self._definitions))
            raise GlossaryError(
                "Replacement definitions must cover exactly the same terms",
                missing=missing or None,
                extra=extra or None,
            )
        return Glossary(Entry(term, definitions[term]) for term in self._definitions)

    def __getitem__(self, term: str) -> str:
        try:
            return self._definitions[term]
        except KeyError:
            raise TermNotFoundError("Term not in glossary", term=term) from None

    def __contains__(self, term: object) -> bool:
        return term in self._definitions

    def __iter__(self) -> Iterator[str]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def __bool__(self) -> bool:
        return bool(self._definitions)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Glossary):
            return NotImplemented
        return dict(self._definitions) == dict(other._definitions)

    def __repr__(self) -> str:
        return f"Glossary({len(self._definitions)} terms)"


@dataclass(frozen=True)
class LinkResult:
    """Outcome of cross-referencing a single definition."""
    text: str
    candidates: Tuple[str, ...] = ()

    @property
    def changed(self) -> bool:
        return bool(self.candidates)


# ============================================================================
# BUILD CLASSES
# ============================================================================

@dataclass
class IndexResult:
    """What the index builder wrote, in emission order."""
    ordered_terms: List[str] = field(default_factory=list)
    page_paths: List[Path] = field(default_factory=list)
    index_path: Optional[Path] = None

    @property
    def pages_written(self) -> int:
        return len(self.page_paths)


@dataclass
class BuildJob:
    job_id: str
    input_file: Optional[Path]
    output_dir: Path
    status: BuildStatus = BuildStatus.PENDING
    total_terms: int = 0
    linked_definitions: int = 0
    pages_written: int = 0
    index_path: Optional[Path] = None
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    errors: List[str] = field(default_factory=list)

    def add_error(self, message: str) -> None:
        self.errors.append(message)

    @property
    def duration(self) -> float:
        if self.started_at and self.completed_at:
            return (self.completed_at - self.started_at).total_seconds()
        elif self.started_at:
            return (datetime.now(timezone.utc) - self.started_at).total_seconds()
        return 0.0

    @property
    def progress_percentage(self) -> float:
        if self.total_terms == 0:
            return 100.0 if self.status == BuildStatus.COMPLETED else 0.0
        return min((self.pages_written / self.total_terms) * 100, 100.0)
