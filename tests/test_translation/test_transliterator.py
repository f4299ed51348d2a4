"""Unit tests for the word transliterator."""

import pytest

from gopher_translator.translation import (
    EmptyWordError,
    InvalidInputError,
    find_first_vowel,
    transform_word,
)


class TestFindFirstVowel:
    def test_vowel_at_start(self):
        assert find_first_vowel("apple") == 0

    def test_vowel_in_middle(self):
        assert find_first_vowel("chair") == 2

    def test_y_counts_as_vowel(self):
        assert find_first_vowel("rhythm") == 2

    def test_no_vowel_returns_none(self):
        assert find_first_vowel("nth") is None

    def test_empty_returns_none(self):
        assert find_first_vowel("") is None


class TestVowelPrefixRule:
    @pytest.mark.parametrize("word", ["apple", "egg", "ink", "orange", "umbrella", "yellow"])
    def test_leading_vowel_gets_g_prefix(self, word):
        assert transform_word(word) == "g" + word

    def test_single_vowel_word(self):
        assert transform_word("a") == "ga"

    def test_input_is_lowercased(self):
        assert transform_word("Apple") == "gapple"
        assert transform_word("APPLE") == "gapple"


class TestConsonantOnlyWords:
    @pytest.mark.parametrize("word", ["nth", "psst", "b", "brr"])
    def test_returned_unchanged(self, word):
        assert transform_word(word) == word

    def test_returned_lowercased(self):
        assert transform_word("TSK") == "tsk"


class TestXrRule:
    def test_xray(self):
        assert transform_word("xray") == "gexray"

    def test_xr_wins_over_general_rule(self):
        # "xr" + vowel at position 2 would otherwise take the general rule.
        assert transform_word("xrod") == "gexrod"

    def test_xr_checked_case_insensitively(self):
        assert transform_word("XRay") == "gexray"

    def test_x_without_r_takes_general_rule(self):
        assert transform_word("xenon") == "enonxogo"


class TestQuRule:
    def test_square(self):
        assert transform_word("square") == "aresquogo"

    def test_squeal(self):
        assert transform_word("squeal") == "ealsquogo"

    def test_qu_at_start_takes_general_rule(self):
        # Vowel "u" is at position 1, so the qu rule does not apply.
        assert transform_word("queen") == "ueenqogo"


class TestGeneralRule:
    def test_chair(self):
        assert transform_word("chair") == "airchogo"

    def test_single_leading_consonant(self):
        assert transform_word("dog") == "ogdogo"

    def test_y_as_first_vowel(self):
        assert transform_word("rhythm") == "ythmrhogo"

    def test_three_consonant_cluster(self):
        assert transform_word("string") == "ingstrogo"


class TestEmptyInput:
    def test_empty_word_raises(self):
        with pytest.raises(EmptyWordError):
            transform_word("")

    def test_empty_word_error_is_invalid_input(self):
        with pytest.raises(InvalidInputError):
            transform_word("")
