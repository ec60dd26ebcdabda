"""
Static HTML renderer for glossary pages.

Produces the legacy markup byte for byte: unquoted href values and the
stray ``</h1>`` closing each index list item are part of the format.
"""
from pathlib import Path
from typing import List, Sequence
import logging

from ..core.exceptions import OutputError
from ..core.interfaces import IPageRenderer
from ..core.models import Entry, INDEX_FILENAME, INDEX_TITLE, PAGE_SUFFIX


logger = logging.getLogger(__name__)


HORIZONTAL_RULE = '<hr style="height:2px;border-width:0;color:gray;background-color:gray">'


class HtmlPageRenderer(IPageRenderer):
    """Writes one page per term plus the index page into a directory."""

    def __init__(
        self,
        output_dir: Path,
        index_title: str = INDEX_TITLE,
        index_filename: str = INDEX_FILENAME,
        page_suffix: str = PAGE_SUFFIX,
        encoding: str = "utf-8"
    ):
        """
        Initialize renderer.

        Args:
            output_dir: Directory for generated pages, created on first write
            index_title: Title and heading of the index page
            index_filename: File name of the index page
            page_suffix: Suffix appended to a term to form its file name
            encoding: Output encoding
        """
        self._output_dir = Path(output_dir)
        self.index_title = index_title
        self.index_filename = index_filename
        self.page_suffix = page_suffix
        self.encoding = encoding

    @property
    def output_dir(self) -> Path:
        return self._output_dir

    def page_name(self, term: str) -> str:
        return f"{term}{self.page_suffix}"

    def render_header(self, title: str) -> List[str]:
        return [
            "<html>",
            "<head>",
            f"<title>{title}</title>",
            "</head>",
            "<body>",
        ]

    def render_footer(self) -> List[str]:
        return [
            "</body>",
            "</html>",
        ]

    def render_term_page(self, entry: Entry) -> str:
        lines = self.render_header(entry.term)
        lines.append(f"<h1 style=color:red><b><i>{entry.term}</i></b></h1>")
        lines.append(HORIZONTAL_RULE)
        lines.append(f"<p style=margin-left:40px>{entry.definition}</p>")
        lines.append(HORIZONTAL_RULE)
        lines.append(f"<p>Return to <a href={self.index_filename}>index</a></p>")
        lines.extend(self.render_footer())
        return "\n".join(lines) + "\n"

    def index_item(self, term: str) -> str:
        return f"<li><a href={self.page_name(term)}>{term}</a></h1>"

    def render_index_page(self, items: Sequence[str]) -> str:
        lines = self.render_header(self.index_title)
        lines.append(f"<h1>{self.index_title}</h1>")
        lines.append(HORIZONTAL_RULE)
        lines.append("<p><b>Index</b></p>")
        lines.append("<ul>")
        lines.extend(items)
        lines.append("</ul>")
        lines.extend(self.render_footer())
        return "\n".join(lines) + "\n"

    def page_path(self, term: str) -> Path:
        """
        Location of a term's page, always inside the output directory.

        Raises:
            OutputError: If the term would place the page outside it
        """
        path = Path(f"{self._output_dir}/{self.page_name(term)}")
        try:
            path.resolve().relative_to(self._output_dir.resolve())
        except ValueError:
            raise OutputError(
                f"Page for term '{term}' falls outside the output directory",
                output_path=str(path)
            ) from None
        return path

    def write_term_page(self, entry: Entry) -> Path:
        path = self.page_path(entry.term)
        self._write(path, self.render_term_page(entry))
        return path

    def write_index_page(self, items: Sequence[str]) -> Path:
        path = self._output_dir / self.index_filename
        self._write(path, self.render_index_page(items))
        logger.info(f"✓ Index written: {path} ({len(items)} terms)")
        return path

    def _write(self, path: Path, content: str) -> None:
        """
        Write one page.

        Raises:
            OutputError: If the directory or file cannot be written
        """
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'w', encoding=self.encoding, newline="\n") as f:
                f.write(content)
        except OSError as e:
            raise OutputError(
                f"Cannot write page: {e}",
                output_path=str(path)
            ) from e
        logger.debug(f"Wrote {path}")
