"""
Tests for the cross-reference engine.
"""
import pytest

from hyperglossary.core.models import Glossary
from hyperglossary.glossary.cross_referencer import (
    CrossReferencer,
    candidate_variants,
    make_link,
)


@pytest.fixture
def referencer():
    return CrossReferencer()


def link(mapping):
    return CrossReferencer().cross_reference(Glossary.from_mapping(mapping))


class TestCandidateVariants:

    def test_lowercase_term(self):
        assert candidate_variants("cat") == ("cat", "Cat")

    def test_capitalized_term(self):
        assert candidate_variants("Python") == ("Python", "python")

    def test_term_without_case(self):
        assert candidate_variants("1x") == ("1x",)

    def test_only_first_character_changes(self):
        assert candidate_variants("hTML") == ("hTML", "HTML")

    def test_expanding_upper_case_keeps_first_character(self):
        assert candidate_variants("ßig") == ("ßig",)

    def test_expanding_lower_case_keeps_first_character(self):
        assert candidate_variants("İstanbul") == ("İstanbul",)


class TestMakeLink:

    def test_unquoted_href(self):
        assert make_link("cat") == "<a href=cat.html>cat</a>"

    def test_anchor_text_differs_from_target(self):
        assert make_link("run", "runs") == "<a href=run.html>runs</a>"


class TestScenarios:

    def test_trailing_occurrence(self):
        linked = link({"cat": "a small animal", "cats": "plural of cat"})

        assert linked["cats"] == "plural of <a href=cat.html>cat</a>"
        assert linked["cat"] == "a small animal"

    def test_trailing_word_of_longer_definition(self):
        linked = link({
            "dog": "a loyal animal, often a pet",
            "pet": "an animal kept for companionship",
        })

        assert linked["dog"] == "a loyal animal, often a <a href=pet.html>pet</a>"
        assert linked["pet"] == "an animal kept for companionship"

    def test_plural_rule_moves_s_into_anchor(self):
        linked = link({"run": "to move fast, and runs too"})

        assert linked["run"] == "to move fast, and <a href=run.html>runs</a> too"


class TestReplacementPasses:

    def test_followed_by_comma(self):
        linked = link({"dog": "a pet", "cat": "chases a dog, then rests"})

        assert linked["cat"] == "chases a <a href=dog.html>dog</a>, then rests"

    def test_followed_by_space(self):
        linked = link({"dog": "a pet", "cat": "a dog that meows"})

        assert linked["cat"] == "a <a href=dog.html>dog</a> that meows"

    def test_every_occurrence_is_linked(self):
        linked = link({"loop": "a loop is a loop"})

        assert linked["loop"] == (
            "a <a href=loop.html>loop</a> is a <a href=loop.html>loop</a>"
        )

    def test_followed_by_period_is_not_linked(self):
        linked = link({"cat": "a small animal", "dog": "chases the cat."})

        assert linked["dog"] == "chases the cat."

    def test_capitalized_occurrence_links_to_variant(self):
        linked = link({"dog": "loyal", "puppy": "Dog that is young"})

        assert linked["puppy"] == "<a href=Dog.html>Dog</a> that is young"

    def test_lowercased_occurrence(self):
        linked = link({"Python": "a language", "snake": "not python code"})

        assert linked["snake"] == "not <a href=python.html>python</a> code"

    def test_substring_of_longer_word_is_linked(self):
        linked = link({"his": "belonging to him", "snake": "makes a hiss"})

        assert linked["snake"] == "makes a <a href=his.html>hiss</a>"

    def test_inserted_markup_is_matched_again(self):
        linked = link({"a": "the first letter", "cat": "cat a"})

        assert linked["cat"] == (
            "<a href=cat.html>cat</a> <<a href=a.html>a</a> href=a.html>a</a>"
        )


class TestCrossReference:

    def test_keys_unchanged(self, referencer, animals):
        linked = referencer.cross_reference(animals)

        assert linked.keys() == animals.keys()

    def test_input_not_modified(self, referencer, animals):
        before = animals.as_dict()

        linked = referencer.cross_reference(animals)

        assert animals.as_dict() == before
        assert linked is not animals

    def test_candidates_come_from_original_text(self, referencer):
        result = referencer.link_definition("a dog", ["dog", "html"])

        assert result.text == "a <a href=dog.html>dog</a>"
        assert result.candidates == ("dog",)

    def test_find_candidates_sorted_and_distinct(self, referencer):
        candidates = referencer.find_candidates("Cat and cat and dog", ["cat", "Cat", "dog"])

        assert candidates == ["Cat", "cat", "dog"]

    def test_unmatched_definition_has_no_candidates(self, referencer):
        result = referencer.link_definition("nothing here", ["cat"])

        assert result.text == "nothing here"
        assert not result.changed

    def test_empty_glossary(self, referencer):
        assert len(referencer.cross_reference(Glossary())) == 0

    def test_stats(self, referencer, animals):
        referencer.cross_reference(animals)

        stats = referencer.get_stats()
        assert stats['definitions_processed'] == 4
        assert stats['definitions_linked'] == 2
        assert stats['candidates_matched'] == 2

    def test_custom_page_suffix(self):
        referencer = CrossReferencer(page_suffix=".htm")

        result = referencer.link_definition("plural of cat", ["cat"])

        assert result.text == "plural of <a href=cat.htm>cat</a>"
