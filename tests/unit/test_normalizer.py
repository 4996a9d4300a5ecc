"""Unit tests for text normalization."""

from __future__ import annotations

import pytest
from hypothesis import given

from ellipsize.text.normalizer import denormalize, normalize, split_paragraphs
from tests.strategies import messy_text, raw_text

pytestmark = pytest.mark.unit


class TestNormalize:
    """Tests for splitting raw text into paragraphs of words."""

    def test_single_paragraph(self):
        assert normalize("The quick  brown fox") == (("The", "quick", "brown", "fox"),)

    def test_literal_newlines_collapse_to_spaces(self):
        assert normalize("one\ntwo\r\nthree\rfour") == (("one", "two", "three", "four"),)

    @pytest.mark.parametrize("marker", ["<br>", "<br/>", "<br />", "<BR>", '<br class="x"/>'])
    def test_break_markers_split_paragraphs(self, marker: str):
        assert normalize(f"A{marker}B") == (("A",), ("B",))

    def test_consecutive_breaks_produce_blank_paragraph(self):
        assert normalize("A<br><br>B") == (("A",), (), ("B",))

    def test_hard_newlines_split_paragraphs(self):
        assert normalize("A\n\nB", hard_newlines=True) == (("A",), (), ("B",))

    def test_hard_newlines_still_honour_break_markers(self):
        assert normalize("A<br>B\nC", hard_newlines=True) == (("A",), ("B",), ("C",))

    def test_hard_newlines_ignore_one_trailing_newline(self):
        assert normalize("A\nB\n", hard_newlines=True) == (("A",), ("B",))
        assert normalize("A\n\n", hard_newlines=True) == (("A",), ())

    def test_crlf_counts_as_one_hard_newline(self):
        assert normalize("A\r\nB", hard_newlines=True) == (("A",), ("B",))

    @pytest.mark.parametrize("raw", [None, ""])
    def test_empty_input_is_single_blank_paragraph(self, raw: str | None):
        assert normalize(raw) == ((),)

    def test_whitespace_only_paragraph_is_blank(self):
        assert normalize("  \t <br>x") == ((), ("x",))

    def test_tabs_and_runs_of_spaces_separate_words(self):
        assert normalize("a\t\tb   c") == (("a", "b", "c"),)

    def test_br_prefix_words_are_not_markers(self):
        assert normalize("<bread>") == (("<bread>",),)


class TestSplitParagraphs:
    def test_keeps_segments_unsplit(self):
        assert split_paragraphs("a  b<br>c") == ["a  b", "c"]

    def test_empty(self):
        assert split_paragraphs("") == [""]


class TestNormalizeProperties:
    """Property-based tests for normalization."""

    @given(raw_text)
    def test_denormalize_reconstructs_collapsed_source(self, raw: str):
        expected = "\n".join(" ".join(part.split()) for part in raw.split("<br>"))
        assert denormalize(normalize(raw)) == expected

    @given(messy_text)
    def test_words_never_contain_whitespace(self, raw: str):
        for paragraph in normalize(raw):
            for word in paragraph:
                assert word
                assert not any(ch.isspace() for ch in word)

    @given(messy_text)
    def test_soft_newlines_never_add_paragraphs(self, raw: str):
        assert len(normalize(raw)) == 1
