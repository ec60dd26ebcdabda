"""
Glossary Site Pipeline
======================

parse -> cross-reference -> index/page emission, run as a single synchronous
batch. Every stage hands an immutable Glossary to the next one, and nothing is
written until the whole glossary has been parsed and cross-referenced.
"""
from pathlib import Path
from typing import Optional
from datetime import datetime, timezone
import logging
import uuid

from .exceptions import GlossarySystemError, PipelineError, ValidationError
from .index_builder import IndexBuilder
from .interfaces import IGlossaryParser, IPageRenderer, IProgressCallback
from .models import BuildJob, BuildStatus, Glossary
from ..glossary.cross_referencer import CrossReferencer


logger = logging.getLogger(__name__)


class GlossarySitePipeline:
    """Builds a cross-linked static glossary site from a text file."""

    def __init__(
        self,
        parser: IGlossaryParser,
        renderer: IPageRenderer,
        cross_referencer: Optional[CrossReferencer] = None
    ):
        if not parser or not renderer:
            raise ValidationError("Parser and renderer required")

        self.parser = parser
        self.renderer = renderer
        self.cross_referencer = cross_referencer or CrossReferencer()
        self.index_builder = IndexBuilder(renderer)

        logger.info(
            f"Pipeline initialized: {parser.__class__.__name__} -> "
            f"{renderer.__class__.__name__} ({renderer.output_dir})"
        )

    def load(self, input_path: Path) -> Glossary:
        """Parse input into a Glossary."""
        return self.parser.parse(Path(input_path))

    def link(self, glossary: Glossary) -> Glossary:
        """Cross-reference a Glossary."""
        return self.cross_referencer.cross_reference(glossary)

    def build_site(
        self,
        input_path: Path,
        progress_callback: Optional[IProgressCallback] = None
    ) -> BuildJob:
        """
        Run the full pipeline for one input file.

        Args:
            input_path: Glossary text file
            progress_callback: Optional progress listener

        Returns:
            Completed BuildJob

        Raises:
            GlossarySystemError: The original error of the failing stage
        """
        job = self._new_job(Path(input_path))
        return self._run(job, progress_callback)

    def build_from_glossary(
        self,
        glossary: Glossary,
        progress_callback: Optional[IProgressCallback] = None
    ) -> BuildJob:
        """Run cross-referencing and page emission for an already loaded Glossary."""
        job = self._new_job(None)
        return self._run(job, progress_callback, glossary=glossary)

    def _new_job(self, input_path: Optional[Path]) -> BuildJob:
        return BuildJob(
            job_id=str(uuid.uuid4()),
            input_file=input_path,
            output_dir=self.renderer.output_dir
        )

    def _run(
        self,
        job: BuildJob,
        progress_callback: Optional[IProgressCallback],
        glossary: Optional[Glossary] = None
    ) -> BuildJob:
        job.started_at = datetime.now(timezone.utc)

        try:
            if progress_callback:
                progress_callback.on_start(job)

            # Parse
            if glossary is None:
                job.status = BuildStatus.PARSING
                glossary = self.load(job.input_file)
            job.total_terms = len(glossary)

            # Cross-reference
            job.status = BuildStatus.LINKING
            linked = self.link(glossary)
            job.linked_definitions = sum(
                1 for term in glossary if linked[term] != glossary[term]
            )

            # Render
            job.status = BuildStatus.RENDERING
            self.index_builder.build(linked, progress_callback, job)

            # Complete
            job.status = BuildStatus.COMPLETED
            job.completed_at = datetime.now(timezone.utc)

            if progress_callback:
                progress_callback.on_complete(job)

            logger.info(
                f"Complete: {job.pages_written}/{job.total_terms} pages, "
                f"{job.linked_definitions} linked definitions, {job.duration:.2f}s"
            )
            return job

        except GlossarySystemError as e:
            self._fail(job, e, progress_callback)
            raise

        except Exception as e:
            stage = job.status.value
            self._fail(job, e, progress_callback)
            raise PipelineError(f"Pipeline failed: {e}", stage=stage) from e

    def _fail(
        self,
        job: BuildJob,
        error: Exception,
        progress_callback: Optional[IProgressCallback]
    ) -> None:
        stage = job.status.value
        job.status = BuildStatus.FAILED
        job.completed_at = datetime.now(timezone.utc)
        job.add_error(str(error))

        logger.error(f"Build failed during {stage}: {error}")

        if progress_callback:
            progress_callback.on_error(job, error)
