"""
Cross-reference engine: rewrites every known term inside each definition as a
hyperlink to that term's page.

Matching is plain substring matching with three spellings per term (as
written, first letter upper-cased, first letter lower-cased). Occurrences are
rewritten with four literal replacement passes, in this order:

1. a trailing occurrence at the very end of the definition
2. occurrences followed by ``,``
3. occurrences followed by ``s`` (the ``s`` moves inside the anchor text)
4. occurrences followed by a single space

Each pass works on the output of the previous one, so text already turned into
markup can be matched again by a later pass or a later candidate. Running the
engine twice over the same glossary is therefore not idempotent.
"""
import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..core.models import Glossary, LinkResult, PAGE_SUFFIX


logger = logging.getLogger(__name__)


def _single_char_case(char: str, mapped: str) -> str:
    return mapped if len(mapped) == 1 else char


def candidate_variants(term: str) -> Tuple[str, ...]:
    """
    Spellings of a term that count as an occurrence.

    Returns the term unchanged, with its first character upper-cased and with
    its first character lower-cased, without repeats. A first character whose
    case mapping expands to several characters (such as "ß") is kept as is.
    """
    if not term:
        return ()
    first, rest = term[0], term[1:]
    variants = (term, _single_char_case(first, first.upper()) + rest,
                _single_char_case(first, first.lower()) + rest)
    return tuple(dict.fromkeys(variants))


def make_link(target: str, anchor_text: Optional[str] = None, suffix: str = PAGE_SUFFIX) -> str:
    """Anchor markup in the legacy unquoted-href format."""
    if anchor_text is None:
        anchor_text = target
    return f"<a href={target}{suffix}>{anchor_text}</a>"


class CrossReferencer:
    """
    Turns a Glossary into a new Glossary whose definitions carry hyperlinks.

    The candidate set of each definition is computed from the original text
    before any rewriting, using the full term set of the glossary (a term's
    own spellings included).
    """

    def __init__(self, page_suffix: str = PAGE_SUFFIX):
        self.page_suffix = page_suffix
        self._stats = {
            'definitions_processed': 0,
            'definitions_linked': 0,
            'candidates_matched': 0,
        }

    def find_candidates(self, definition: str, terms: Iterable[str]) -> List[str]:
        """
        Distinct term spellings occurring literally in definition.

        Sorted by code point so the rewrite order never depends on the
        order terms were read in.
        """
        found = set()
        for term in terms:
            for variant in candidate_variants(term):
                if variant in definition:
                    found.add(variant)
        return sorted(found)

    def rewrite(self, definition: str, candidate: str) -> str:
        """Apply the four replacement passes for one candidate."""
        link = make_link(candidate, suffix=self.page_suffix)

        if definition.endswith(candidate):
            definition = definition[:len(definition) - len(candidate)] + link

        definition = definition.replace(candidate + ",", link + ",")
        definition = definition.replace(
            candidate + "s",
            make_link(candidate, candidate + "s", suffix=self.page_suffix),
        )
        definition = definition.replace(candidate + " ", link + " ")
        return definition

    def link_definition(self, definition: str, terms: Iterable[str]) -> LinkResult:
        """
        Cross-reference a single definition.

        Args:
            definition: Original definition text
            terms: Every term of the glossary

        Returns:
            LinkResult with the rewritten text and the candidates applied
        """
        candidates = self.find_candidates(definition, terms)
        text = definition
        for candidate in candidates:
            text = self.rewrite(text, candidate)
        return LinkResult(text=text, candidates=tuple(candidates))

    def cross_reference(self, glossary: Glossary) -> Glossary:
        """
        Produce a hyperlinked copy of glossary.

        The returned Glossary has exactly the same terms; only definitions
        differ. The input is left untouched.
        """
        terms = sorted(glossary.keys())
        linked: Dict[str, str] = {}
        changed = 0
        matched = 0

        for entry in glossary.entries():
            result = self.link_definition(entry.definition, terms)
            linked[entry.term] = result.text
            if result.changed:
                changed += 1
                matched += len(result.candidates)
                logger.debug(f"Linked '{entry.term}': {', '.join(result.candidates)}")

        self._stats['definitions_processed'] += len(glossary)
        self._stats['definitions_linked'] += changed
        self._stats['candidates_matched'] += matched

        logger.info(
            f"Cross-referenced {len(glossary)} definitions "
            f"({changed} linked, {matched} candidates)"
        )

        return glossary.with_definitions(linked)

    def get_stats(self) -> Dict[str, Any]:
        """Counters accumulated over every call to cross_reference."""
        return dict(self._stats)
