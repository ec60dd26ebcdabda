"""
Index construction: orders the hyperlinked glossary and drives page emission.
"""
from typing import List, Optional
import logging

from .exceptions import OutputError, error_context
from .interfaces import IPageRenderer, IProgressCallback
from .models import BuildJob, Entry, Glossary, IndexResult


logger = logging.getLogger(__name__)


class IndexBuilder:
    """
    Writes every term page in ascending term order, then the index page.

    Terms compare as raw strings (code point order, case-sensitive), so
    capitalised terms come before lower-case ones. An empty glossary still
    yields an index page with an empty list.
    """

    def __init__(self, renderer: IPageRenderer):
        if renderer is None:
            raise ValueError("renderer is required")
        self.renderer = renderer

    @staticmethod
    def order(glossary: Glossary) -> List[Entry]:
        """Entries sorted by term."""
        return sorted(glossary.entries(), key=lambda entry: entry.term)

    def build(
        self,
        glossary: Glossary,
        progress_callback: Optional[IProgressCallback] = None,
        job: Optional[BuildJob] = None
    ) -> IndexResult:
        """
        Emit all pages.

        A write failure stops the run immediately; pages already written are
        left in place.

        Args:
            glossary: Hyperlinked glossary
            progress_callback: Notified after each term page
            job: Job whose counters are updated as pages are written

        Returns:
            IndexResult listing what was written

        Raises:
            OutputError: If any page cannot be written
        """
        ordered = self.order(glossary)
        total = len(ordered)
        result = IndexResult()
        items: List[str] = []

        for position, entry in enumerate(ordered, start=1):
            with error_context(f"writing page for '{entry.term}'", OutputError, logger):
                path = self.renderer.write_term_page(entry)

            result.ordered_terms.append(entry.term)
            result.page_paths.append(path)
            items.append(self.renderer.index_item(entry.term))

            if job is not None:
                job.pages_written = position
            if progress_callback:
                progress_callback.on_progress(job, position, total)

        with error_context("writing index page", OutputError, logger):
            result.index_path = self.renderer.write_index_page(items)

        if job is not None:
            job.index_path = result.index_path

        logger.info(f"Index built: {result.pages_written} term pages")
        return result
