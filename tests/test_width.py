"""Tests for tablegen.width -- display width and chunking."""

from __future__ import annotations

from tablegen.width import display_width, is_wide_char, wrap_to_width


# ---------------------------------------------------------------------------
# display_width
# ---------------------------------------------------------------------------


class TestDisplayWidth:
    """Measure the number of columns a string occupies."""

    def test_empty_string(self) -> None:
        assert display_width("") == 0

    def test_plain_ascii(self) -> None:
        assert display_width("hello") == 5

    def test_han_counts_as_two(self) -> None:
        assert display_width("世") == 2

    def test_wide_token_is_double_its_length(self) -> None:
        # 3 Han + 2 Hiragana
        assert display_width("新世界より") == 10

    def test_mixed_ascii_and_wide(self) -> None:
        # "A" (1) + U+4E16 (2) + "B" (1) = 4
        assert display_width("A世B") == 4

    def test_katakana_and_hangul(self) -> None:
        assert display_width("カタカナ") == 8
        assert display_width("한국어") == 6

    def test_halfwidth_katakana_counts_as_two(self) -> None:
        assert display_width("\uff76") == 2

    def test_fullwidth_latin_counts_as_one(self) -> None:
        assert display_width("\uff21\uff22") == 2

    def test_emoji_counts_as_one(self) -> None:
        assert display_width("\U0001f600") == 1

    def test_combining_mark_counts_as_one(self) -> None:
        assert display_width("e\u0301") == 2


class TestIsWideChar:
    """Classify single characters by script."""

    def test_ascii_is_narrow(self) -> None:
        assert not is_wide_char("a")

    def test_prolonged_sound_mark_is_narrow(self) -> None:
        # U+30FC belongs to the Common script, not Katakana.
        assert not is_wide_char("\u30fc")

    def test_range_boundaries(self) -> None:
        assert is_wide_char("一")
        assert is_wide_char("\u9fff")
        assert is_wide_char("가")
        assert is_wide_char("\ud7a3")
        assert not is_wide_char("\ud7a4")

    def test_supplementary_ideograph(self) -> None:
        assert is_wide_char("\U00020000")


# ---------------------------------------------------------------------------
# wrap_to_width
# ---------------------------------------------------------------------------


class TestWrapToWidth:
    """Cut text into fixed-width chunks."""

    def test_short_text_unchanged(self) -> None:
        assert wrap_to_width("hello", 10) == ["hello"]

    def test_chunks_ignore_word_boundaries(self) -> None:
        assert wrap_to_width("hello world", 4) == ["hell", "o wo", "rld"]

    def test_embedded_newlines_split(self) -> None:
        assert wrap_to_width("ab\n\ncd", 5) == ["ab", "", "cd"]

    def test_empty_text_gives_one_empty_chunk(self) -> None:
        assert wrap_to_width("", 5) == [""]

    def test_wide_characters_respect_width(self) -> None:
        assert wrap_to_width("新世界より", 4) == ["新世", "界よ", "り"]

    def test_wide_character_never_split_across_odd_width(self) -> None:
        chunks = wrap_to_width("新世界", 3)
        assert chunks == ["新", "世", "界"]

    def test_wide_character_alone_when_width_too_small(self) -> None:
        assert wrap_to_width("新a", 1) == ["新", "a"]

    def test_combining_mark_stays_with_base(self) -> None:
        chunks = wrap_to_width("ae\u0301", 2)
        assert chunks == ["a", "e\u0301"]

    def test_non_positive_width_disables_wrapping(self) -> None:
        assert wrap_to_width("hello world", 0) == ["hello world"]
