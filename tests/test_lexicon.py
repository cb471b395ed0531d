import unittest

import pytest

from sentence_splitter.lexicon import (
    Capital,
    ConfigurationError,
    HonorificSet,
    capital,
    is_initials,
    is_left_start,
    is_right_end,
    is_time_of_day,
    is_timezone,
    starts_with_left_paren,
    starts_with_quote,
)


class TestClassifiers(unittest.TestCase):
    def test_capital_is_ascii_uppercase_only(self):
        self.assertIs(capital("Hello"), Capital.Y)
        self.assertIs(capital("hello"), Capital.N)
        self.assertIs(capital(""), Capital.N)
        self.assertIs(capital("Élan"), Capital.N)
        self.assertIs(capital("1st"), Capital.N)
        self.assertIs(capital("sp"), Capital.N)

    def test_quote_and_paren_prefixes(self):
        self.assertTrue(starts_with_quote("'tis"))
        self.assertTrue(starts_with_quote("``Hi"))
        self.assertFalse(starts_with_quote("Hi"))
        self.assertTrue(starts_with_left_paren("(aside"))
        self.assertTrue(starts_with_left_paren("-LBR-x"))
        self.assertFalse(starts_with_left_paren("-RBR-"))

    def test_right_end_and_left_start(self):
        self.assertTrue(is_right_end(")"))
        self.assertTrue(is_right_end("''"))
        self.assertTrue(is_right_end("'\""))
        self.assertFalse(is_right_end("sp"))
        self.assertFalse(is_right_end("))"))
        self.assertTrue(is_left_start("Then", Capital.Y))
        self.assertTrue(is_left_start("`quote", Capital.N))
        self.assertFalse(is_left_start("NP", Capital.NP))

    def test_initials_pattern(self):
        self.assertTrue(is_initials("J"))
        self.assertTrue(is_initials("U.S.A"))
        self.assertFalse(is_initials("U.S."))
        self.assertFalse(is_initials("Jr"))
        self.assertFalse(is_initials(""))

    def test_time_of_day_and_timezone(self):
        self.assertTrue(is_time_of_day("p.m"))
        self.assertTrue(is_time_of_day("A.M"))
        self.assertFalse(is_time_of_day("pm"))
        self.assertTrue(is_timezone("EST"))
        self.assertFalse(is_timezone("est"))


def test_honorifics_from_file_strips_and_skips_blanks(tmp_path):
    p = tmp_path / "honorifics.txt"
    p.write_text("Mr.\n  Dr.  \n\nProf.\n", encoding="utf-8")
    h = HonorificSet.from_file(p)
    assert len(h) == 3
    assert "Dr." in h
    assert "Dr" not in h


def test_honorifics_file_with_byte_order_mark(tmp_path):
    p = tmp_path / "honorifics.txt"
    p.write_text("Mr.\nDr.\n", encoding="utf-8-sig")
    h = HonorificSet.from_file(p)
    assert sorted(h) == ["Dr.", "Mr."]
    assert "Mr." in h


def test_missing_honorifics_file_is_configuration_error(tmp_path):
    try:
        HonorificSet.from_file(tmp_path / "nope.txt")
    except ConfigurationError as e:
        assert "does not exist" in str(e)
    else:
        raise AssertionError("expected ConfigurationError")


def test_directory_and_undecodable_files_are_configuration_errors(tmp_path):
    with pytest.raises(ConfigurationError):
        HonorificSet.from_file(tmp_path)

    bad = tmp_path / "bad.txt"
    bad.write_bytes(b"\xff\xfeMr.\n")
    with pytest.raises(ConfigurationError):
        HonorificSet.from_file(bad)


def test_default_list_keeps_terminal_abbreviations_out():
    h = HonorificSet.default()
    assert "Mr." in h
    assert "Dr." in h
    for terminal in ("Jr.", "Sr.", "Esq."):
        assert terminal not in h


if __name__ == "__main__":
    unittest.main()
