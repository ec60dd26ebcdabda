"""Glossary input parsers."""
from .text_parser import GlossaryTextParser

__all__ = ["GlossaryTextParser"]
