"""Hyperglossary - cross-linked static HTML glossary generator."""
__version__ = "1.0.0"

from hyperglossary.core.models import Entry, Glossary, BuildJob, BuildStatus
from hyperglossary.core.index_builder import IndexBuilder
from hyperglossary.core.pipeline import GlossarySitePipeline
from hyperglossary.core.factory import GlossarySystemFactory
from hyperglossary.glossary.cross_referencer import CrossReferencer

__all__ = [
    "Entry",
    "Glossary",
    "BuildJob",
    "BuildStatus",
    "CrossReferencer",
    "IndexBuilder",
    "GlossarySitePipeline",
    "GlossarySystemFactory",
]
