"""Cross-reference engine."""
from .cross_referencer import CrossReferencer, candidate_variants, make_link

__all__ = ["CrossReferencer", "candidate_variants", "make_link"]
