"""Tests for transmission sanitizing."""

import pytest

from gcibot.parser.sanitizer import expand_number_words, replace_punctuation, sanitize


class TestSanitize:
    """Tests for sanitize()."""

    def test_lowercases_and_strips_punctuation(self) -> None:
        """Test case folding and punctuation removal."""
        assert sanitize("ANYFACE, EAGLE 1 SPIKED 2-7-0").split() == [
            "anyface",
            "eagle",
            "1",
            "spiked",
            "2",
            "7",
            "0",
        ]

    def test_punctuation_run_becomes_single_space(self) -> None:
        """Test a run of punctuation is replaced by one space."""
        assert sanitize("raven 1-4,spike") == "raven 1 4 spike"
        assert sanitize("075/26...20000") == "075 26 20000"

    def test_underscore_is_punctuation(self) -> None:
        """Test underscores separate tokens."""
        assert sanitize("viper_1") == "viper 1"

    def test_number_words_expanded(self) -> None:
        """Test spelled-out numbers become digits."""
        assert sanitize("Magic, Viper one one, spiked two seven zero").split() == [
            "magic",
            "viper",
            "1",
            "1",
            "spiked",
            "2",
            "7",
            "0",
        ]

    def test_normalized_text_unchanged(self) -> None:
        """Test sanitizing normalized text is a no-op."""
        text = "anyface eagle 1 spiked 2 7 0"
        assert sanitize(text) == text

    @pytest.mark.parametrize(
        "raw",
        [
            "Anyface, Raven 1-4, Spike 0-2-0",
            "Magic: Viper one one, declare bullseye 0-7-5, twenty six, twenty thousand!",
            "anyface  picture",
        ],
    )
    def test_idempotent(self, raw: str) -> None:
        """Test sanitizing twice gives the same result as once."""
        once = sanitize(raw)
        assert sanitize(once) == once


class TestExpandNumberWords:
    """Tests for spelled-out number expansion."""

    def test_single_digits_stay_separate(self) -> None:
        """Test digit-by-digit speech is not merged into one number."""
        assert expand_number_words("two seven zero") == "2 7 0"
        assert expand_number_words("one four") == "1 4"

    def test_compound_numbers(self) -> None:
        """Test tens, hundreds and thousands are composed."""
        assert expand_number_words("twenty seven") == "27"
        assert expand_number_words("twenty thousand") == "20000"
        assert expand_number_words("two hundred fifty") == "250"
        assert expand_number_words("one thousand five hundred") == "1500"

    def test_teens_not_read_as_units(self) -> None:
        """Test longer number words win over their prefixes."""
        assert expand_number_words("seventeen") == "17"
        assert expand_number_words("eighty") == "80"

    def test_scale_after_digits_kept(self) -> None:
        """Test a scale word following digits is left as a word."""
        assert expand_number_words("20 thousand") == "20 thousand"

    def test_phonetic_digits_untouched(self) -> None:
        """Test aviation pronunciations are left for the digit table."""
        assert expand_number_words("niner tree fife") == "niner tree fife"

    def test_words_containing_numbers_untouched(self) -> None:
        """Test number words are only matched as whole words."""
        assert expand_number_words("someone often") == "someone often"

    def test_explicit_zero_before_scale(self) -> None:
        """Test a spoken zero is never counted as one of the scale."""
        assert expand_number_words("zero thousand") == "0 thousand"
        assert expand_number_words("zero hundred") == "0 hundred"

    def test_digit_group_before_scale(self) -> None:
        """Test the scale word is left for a whole run of separate digits."""
        assert expand_number_words("one zero thousand") == "1 0 thousand"
        assert expand_number_words("one two thousand") == "1 2 thousand"
        assert expand_number_words("two thousand") == "2000"


class TestReplacePunctuation:
    """Tests for replace_punctuation()."""

    def test_symbols_kept(self) -> None:
        """Test symbols are not treated as punctuation."""
        assert replace_punctuation("a+b $5 c|d") == "a+b $5 c|d"

    def test_unicode_punctuation(self) -> None:
        """Test non-ASCII punctuation is replaced."""
        assert replace_punctuation("eagle\u20141\u00bb") == "eagle 1 "
