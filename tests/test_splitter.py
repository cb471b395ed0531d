from __future__ import annotations

import unittest

import pytest

from sentence_splitter import ConfigurationError, SentenceSplitter

DOC = (
    "He left. She stayed.\n"
    "I saw Mr. Smith today. J. R. R. Tolkien wrote it.\n"
    "\n"
    'Why? Because! "Quoted." Then more text\n'
    "exam-\n"
    "ple here. Visit John Smith Jr. Then leave.\n"
)

EXPECTED = [
    "He left.",
    "She stayed.",
    "I saw Mr. Smith today.",
    "J. R. R. Tolkien wrote it.",
    "Why?",
    "Because!",
    '"Quoted."',
    "Then more text example here.",
    "Visit John Smith Jr.",
    "Then leave.",
]


class TestSentenceSplitter(unittest.TestCase):
    def setUp(self):
        self.splitter = SentenceSplitter()

    def test_honorific_not_split(self):
        s = SentenceSplitter(honorifics=["Mr."])
        self.assertEqual(s.split("I saw Mr. Smith today."), ["I saw Mr. Smith today."])

    def test_capitalized_continuation_split(self):
        self.assertEqual(self.splitter.split("He left. She stayed."), ["He left.", "She stayed."])

    def test_initials_not_split(self):
        self.assertEqual(
            self.splitter.split("J. R. R. Tolkien wrote it."),
            ["J. R. R. Tolkien wrote it."],
        )

    def test_terminal_abbreviation_split(self):
        self.assertEqual(
            self.splitter.split("Visit John Smith Jr. Then leave."),
            ["Visit John Smith Jr.", "Then leave."],
        )

    def test_paragraph_without_punctuation_is_one_sentence(self):
        self.assertEqual(self.splitter.split("just some words\nand more"), ["just some words and more"])

    def test_hyphenated_line_continuation(self):
        self.assertEqual(self.splitter.split("exam-\nple sentence."), ["example sentence."])

    def test_full_document(self):
        self.assertEqual(self.splitter.split(DOC), EXPECTED)

    def test_crlf_and_whitespace_lines(self):
        self.assertEqual(self.splitter.split("He left.\r\nShe stayed.\r\n   \r\nNext"), ["He left.", "She stayed.", "Next"])

    def test_empty_document(self):
        self.assertEqual(self.splitter.split(""), [])
        self.assertEqual(self.splitter.split("\n\n  \n"), [])


def test_words_are_preserved_in_order():
    splitter = SentenceSplitter()
    docs = [
        "He left. She stayed. at 3 p.m. EST Monday it rained!",
        "Dr. No met Mr. Bond... and then? nothing. (Really.) \"Yes.\" -- The end",
        ". . . ? ! ?! Wow.) ok. U.S.A. Today",
    ]
    for doc in docs:
        sentences = splitter.split(doc)
        assert [w for s in sentences for w in s.split(" ")] == doc.split()


def test_rejoined_output_splits_the_same():
    splitter = SentenceSplitter()
    sentences = splitter.split(DOC)
    rejoined = "".join(f"{s}\n\n" for s in sentences)
    assert splitter.split(rejoined) == sentences


def test_honorifics_from_file(tmp_path):
    p = tmp_path / "honorifics.txt"
    p.write_text("Dr.\n", encoding="utf-8")
    splitter = SentenceSplitter(p)
    assert splitter.split("Dr. Who arrived. Mr. Smith left.") == ["Dr. Who arrived.", "Mr.", "Smith left."]


def test_missing_honorifics_file_fails_at_construction(tmp_path):
    with pytest.raises(ConfigurationError):
        SentenceSplitter(tmp_path / "missing.txt")


def test_split_lines_matches_split():
    splitter = SentenceSplitter()
    assert splitter.split_lines(DOC.splitlines()) == splitter.split(DOC)


def test_explain_reports_rules_per_candidate():
    records = SentenceSplitter().explain("He left. She stayed.\n\nWhy? ok")
    assert [(r.paragraph_idx, r.word, r.rule, r.is_boundary) for r in records] == [
        (0, "left.", "capitalized_next", True),
        (0, "stayed.", "end_of_paragraph", True),
        (1, "Why?", "fallthrough", False),
    ]


if __name__ == "__main__":
    unittest.main()
