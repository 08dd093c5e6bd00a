"""
Тесты для Alphabet — разбор и валидация алфавита
"""

import pytest

from numeral_systems.core.domain.alphabet import parse_alphabet, split_symbols
from numeral_systems.core.errors import InvalidAlphabet


class TestSplitSymbols:
    """Тесты split_symbols."""

    def test_string_split_into_code_points(self):
        assert split_symbols("01") == ["0", "1"]

    def test_pictographs_are_single_symbols(self):
        """Пиктограммы вне BMP — один символ, а не суррогатная пара."""
        assert split_symbols("👎👍") == ["👎", "👍"]

    def test_sequence_copied(self):
        source = ["a", "b"]
        result = split_symbols(source)
        assert result == source
        assert result is not source

    def test_empty(self):
        assert split_symbols("") == []


class TestParseAlphabet:
    """Тесты parse_alphabet."""

    def test_string_alphabet(self):
        assert parse_alphabet("0123") == ("0", "1", "2", "3")

    def test_list_alphabet(self):
        assert parse_alphabet(["x", "y"]) == ("x", "y")

    def test_tuple_alphabet(self):
        assert parse_alphabet(("|",)) == ("|",)

    def test_sign_characters_allowed(self):
        assert parse_alphabet("-+") == ("-", "+")

    def test_emoji_alphabet(self):
        assert parse_alphabet("👎👍") == ("👎", "👍")

    def test_empty_raises(self):
        with pytest.raises(InvalidAlphabet, match="alphabet is empty"):
            parse_alphabet("")
        with pytest.raises(InvalidAlphabet, match="alphabet is empty"):
            parse_alphabet([])

    def test_duplicates_raise(self):
        with pytest.raises(InvalidAlphabet, match="duplicate"):
            parse_alphabet("0120")
        with pytest.raises(InvalidAlphabet, match="duplicate"):
            parse_alphabet("👍👍")

    def test_multi_character_element_raises(self):
        with pytest.raises(InvalidAlphabet, match="not a single symbol"):
            parse_alphabet(["0", "10"])

    def test_empty_element_raises(self):
        with pytest.raises(InvalidAlphabet, match="not a single symbol"):
            parse_alphabet(["0", ""])

    def test_non_string_element_raises(self):
        with pytest.raises(InvalidAlphabet, match="not a single symbol"):
            parse_alphabet([0, 1])

    @pytest.mark.parametrize("alphabet", [b"01", bytearray(b"01"), 10, None])
    def test_non_sequence_raises(self, alphabet):
        with pytest.raises(InvalidAlphabet, match="expected a string"):
            parse_alphabet(alphabet)

    def test_error_attributes(self):
        with pytest.raises(InvalidAlphabet) as exc_info:
            parse_alphabet("aa")

        assert exc_info.value.alphabet == "aa"
        assert "duplicate" in exc_info.value.reason
