"""Tests for section splitting and chunking."""

import pytest

from app.text.sections import chunk_section, split_into_sections


class TestSplitIntoSections:
    def test_splits_on_blank_lines(self) -> None:
        text = "First clause.\n\nSecond clause."
        assert split_into_sections(text) == ["First clause.", "Second clause."]

    def test_blank_line_may_contain_whitespace(self) -> None:
        text = "Alpha\n  \t\nBeta"
        assert split_into_sections(text) == ["Alpha", "Beta"]

    def test_splits_after_sentence_end_and_newline(self) -> None:
        text = "The term is one year.\nRent is due monthly!\nIs notice required?\nYes"
        assert split_into_sections(text) == [
            "The term is one year.",
            "Rent is due monthly!",
            "Is notice required?",
            "Yes",
        ]

    def test_wrapped_line_inside_sentence_is_kept_together(self) -> None:
        text = "The Tenant shall pay\nthe Rent on time."
        assert split_into_sections(text) == ["The Tenant shall pay\nthe Rent on time."]

    def test_text_without_breaks_is_one_section(self) -> None:
        assert split_into_sections("Just one paragraph here") == ["Just one paragraph here"]

    def test_trims_and_drops_empty_pieces(self) -> None:
        text = "\n\n  A.  \n\n\n\n B \n\n"
        assert split_into_sections(text) == ["A.", "B"]

    @pytest.mark.parametrize("text", [None, "", "   ", "\n\n\n"])
    def test_empty_input_yields_no_sections(self, text: str | None) -> None:
        assert split_into_sections(text) == []


class TestChunkSection:
    def test_short_section_is_one_chunk(self) -> None:
        assert chunk_section("short", 500) == ["short"]

    def test_cuts_into_fixed_size_pieces(self) -> None:
        assert chunk_section("abcdefg", 3) == ["abc", "def", "g"]

    def test_exact_multiple_has_no_empty_tail(self) -> None:
        assert chunk_section("abcdef", 3) == ["abc", "def"]

    def test_pieces_join_back_to_input(self) -> None:
        text = "x" * 1234
        chunks = chunk_section(text)
        assert len(chunks) == 3
        assert all(len(chunk) <= 500 for chunk in chunks)
        assert "".join(chunks) == text

    def test_empty_section_has_no_chunks(self) -> None:
        assert chunk_section("") == []

    def test_rejects_non_positive_size(self) -> None:
        with pytest.raises(ValueError, match="max_size"):
            chunk_section("abc", 0)
