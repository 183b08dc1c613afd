"""Tests for newline and sentence segmentation."""

import pytest

from docsummary.paragraphs.boundaries import (
    collapse_line_breaks,
    iter_newline_units,
    split_by_newlines,
    split_by_sentences,
)

pytestmark = pytest.mark.unit


class TestNewlineSegmentation:
    """Test splitting on line breaks."""

    def test_trims_and_drops_blank_lines(self):
        text = "  First line  \n\n\n   \nSecond line\r\nThird line\n"
        assert split_by_newlines(text) == ["First line", "Second line", "Third line"]

    @pytest.mark.parametrize("text", [None, "", "\n\n", "   \r\n  "])
    def test_empty_input(self, text):
        assert split_by_newlines(text) == []

    def test_lone_carriage_return_is_not_a_break(self):
        assert split_by_newlines("one\rtwo") == ["one\rtwo"]

    def test_iterator_is_lazy_and_ordered(self):
        units = iter_newline_units("a\nb\nc")
        assert next(units) == "a"
        assert list(units) == ["b", "c"]

    def test_no_line_breaks_gives_single_unit(self):
        assert split_by_newlines("Just one paragraph. With two sentences.") == [
            "Just one paragraph. With two sentences."
        ]


class TestSentenceSegmentation:
    """Test sentence boundary detection and the degraded fallback."""

    def test_basic_sentences(self):
        assert split_by_sentences("Hello world. This is great! What next?") == [
            "Hello world.",
            "This is great!",
            "What next?",
        ]

    @pytest.mark.parametrize(
        "opener",
        ['"Quoted', "“Curly", "‘Single", "'Plain", "(Aside", "42 items"],
    )
    def test_boundary_before_quotes_digits_and_parens(self, opener):
        text = f"First sentence. {opener} follows here."
        assert split_by_sentences(text) == ["First sentence.", f"{opener} follows here."]

    def test_line_breaks_are_ignored(self):
        text = "Line one continues\nonto line two. Next sentence\r\nhere."
        assert split_by_sentences(text) == [
            "Line one continues onto line two.",
            "Next sentence here.",
        ]

    def test_lowercase_continuation_uses_fallback(self):
        text = "One sentence only without caps after period. continues lowercase."
        assert split_by_sentences(text) == [
            "One sentence only without caps after period.",
            "continues lowercase.",
        ]

    def test_lowercase_is_not_a_boundary_when_others_exist(self):
        text = "Dr. smith arrived. He sat down. It was late."
        # Two confident boundaries found, so "Dr. smith" stays together
        assert split_by_sentences(text) == [
            "Dr. smith arrived.",
            "He sat down.",
            "It was late.",
        ]

    def test_fallback_splits_every_mark(self):
        assert split_by_sentences("wait... what?! ok.") == [
            "wait.",
            ".",
            ".",
            "what?",
            "!",
            "ok.",
        ]

    def test_decimal_point_is_not_a_boundary(self):
        text = "Revenue grew 3.5 percent. Costs fell."
        assert split_by_sentences(text) == ["Revenue grew 3.5 percent.", "Costs fell."]

    def test_multiple_spaces_between_sentences(self):
        assert split_by_sentences("One.    Two.\t Three.") == ["One.", "Two.", "Three."]

    def test_no_terminal_punctuation(self):
        assert split_by_sentences("no punctuation at all") == ["no punctuation at all"]

    @pytest.mark.parametrize("text", [None, "", "   ", "\n\n"])
    def test_empty_input(self, text):
        assert split_by_sentences(text) == []

    def test_punctuation_stays_attached(self):
        for sentence in split_by_sentences("Is it? Yes! Fine."):
            assert sentence[-1] in ".?!"


def test_collapse_line_breaks():
    assert collapse_line_breaks("a\n\nb\r\nc") == "a b c"


class TestCrlfCollapsing:
    """Each CRLF break collapses to its own space, as in Windows/OCR text."""

    def test_crlf_blank_line_gives_two_spaces(self):
        assert collapse_line_breaks("a\r\n\r\nb") == "a  b"
        assert collapse_line_breaks("a\n\r\nb") == "a  b"

    def test_sentence_keeps_both_spaces(self):
        assert split_by_sentences("É\r\n\r\n1") == ["É  1"]

    def test_assembled_paragraph_keeps_both_spaces(self):
        from docsummary.paragraphs import assemble_paragraphs

        assert assemble_paragraphs("?.\tBÉa\r\n\r\na", 4) == ["?.", "BÉa  a"]
