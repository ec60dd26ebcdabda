"""
Plain-text glossary parser.

Input is a sequence of records::

    term
    first line of the definition
    more definition text
    <blank line>

Definition lines are joined with single spaces. The last record may end at
end of input instead of a blank line.
"""
from pathlib import Path
from typing import Iterable, List, Optional
import logging

from ..core.exceptions import EmptyDefinitionError, MalformedInputError, ParserError
from ..core.interfaces import IGlossaryParser
from ..core.models import Entry, Glossary


logger = logging.getLogger(__name__)


class GlossaryTextParser(IGlossaryParser):
    """Parser for the flat term/definition text format."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def validate_document(self, file_path: Path) -> bool:
        """
        Validate input file before parsing.

        Args:
            file_path: Path to the glossary text file

        Returns:
            True if the file exists and is a regular file
        """
        file_path = Path(file_path)

        if not file_path.exists():
            logger.error(f"File not found: {file_path}")
            return False

        if not file_path.is_file():
            logger.error(f"Not a file: {file_path}")
            return False

        return True

    def parse(self, file_path: Path) -> Glossary:
        """
        Parse a glossary file.

        Args:
            file_path: Path to the glossary text file

        Returns:
            Glossary with one entry per record

        Raises:
            ParserError: If the file cannot be read
            MalformedInputError: If input ends right after a term
            EmptyDefinitionError: If a term is followed by a blank line
            DuplicateTermError: If a term appears twice
        """
        file_path = Path(file_path)

        if not self.validate_document(file_path):
            raise ParserError("Invalid input file", file_path=str(file_path))

        try:
            with open(file_path, 'r', encoding=self.encoding) as f:
                entries = self.parse_lines(f, source=str(file_path))
        except UnicodeDecodeError as e:
            raise ParserError(
                f"Cannot decode input as {self.encoding}: {e}",
                file_path=str(file_path)
            ) from e
        except OSError as e:
            raise ParserError(f"Cannot read input: {e}", file_path=str(file_path)) from e

        glossary = Glossary.from_entries(entries)
        logger.info(f"Parsed {file_path.name}: {len(glossary)} terms")
        return glossary

    def parse_text(self, text: str) -> Glossary:
        """Parse glossary records held in a string."""
        return Glossary.from_entries(self.parse_lines(text.splitlines()))

    def parse_lines(self, lines: Iterable[str], source: Optional[str] = None) -> List[Entry]:
        """
        Group raw lines into entries.

        Blank lines between records are skipped. A blank line directly after a
        term is an empty definition; end of input directly after a term is a
        truncated record.
        """
        entries: List[Entry] = []
        term: Optional[str] = None
        term_line = 0
        definition_lines: List[str] = []

        for line_number, raw in enumerate(lines, start=1):
            line = raw.rstrip("\r\n")

            if term is None:
                if not line.strip():
                    continue
                term = line.strip()
                term_line = line_number
                continue

            if line.strip():
                definition_lines.append(line.strip())
                continue

            if not definition_lines:
                raise EmptyDefinitionError(
                    "Term is followed by a blank line instead of a definition",
                    term=term,
                    line_number=term_line,
                    file_path=source
                )
            entries.append(Entry(term, " ".join(definition_lines)))
            term = None
            definition_lines = []

        if term is not None:
            if not definition_lines:
                raise MalformedInputError(
                    f"Input ends after term '{term}' with no definition",
                    line_number=term_line,
                    file_path=source
                )
            entries.append(Entry(term, " ".join(definition_lines)))

        logger.debug(f"Read {len(entries)} records")
        return entries
