from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator

import regex as re

# ----------------------------
# Sentinels
# ----------------------------
NP = "NP"  # no predecessor / successor word
SP = "sp"  # empty prefix or suffix around the candidate mark

CANDIDATE_MARKS = (".", "?", "!")

# ----------------------------
# Closed lexical sets
# ----------------------------
TERMINAL_ABBREVIATIONS = frozenset(["Esq", "Jr", "Sr", "M.D"])

# Most common timezone abbreviations
TIMEZONES = frozenset([
    "UTC", "UT", "TAI", "GMT", "BST", "IST", "WET", "WEST", "CET", "CEST",
    "EET", "EEST", "MSK", "MSD", "AST", "ADT", "EST", "EDT", "ET", "CST",
    "CDT", "CT", "MST", "MDT", "MT", "PST", "PDT", "PT", "HST", "AKST",
    "AKDT", "AEST", "AEDT", "ACST", "ACDT", "AWST",
])

TIME_OF_DAY = frozenset(["a.m", "p.m"])

RIGHT_PARENS = frozenset(["}", ")", "-RBR-"])
RIGHT_QUOTES = frozenset(["'", "''", "'''", '"', "'\""])

QUOTE_STARTS = ("'", '"', "`")
LEFT_QUOTE_STARTS = ("`", '"', '"`')
LEFT_PAREN_STARTS = ("<", "[", "{", "(", "-LBR-")

INITIALS_RE = re.compile(r"(?:[A-Z]\.)*[A-Z]")
ASCII_UPPER_RE = re.compile(r"[A-Z]")

DEFAULT_HONORIFICS_PATH = Path(__file__).parent / "data" / "honorifics.txt"


class ConfigurationError(Exception):
    """Raised when the honorific list cannot be loaded."""


class Capital(str, Enum):
    """Capitalisation signal of a context slot.

    ``NP`` marks a slot that fell outside the paragraph, so "absent" stays
    distinguishable from "present but lowercase".
    """

    Y = "Y"
    N = "N"
    NP = "NP"


def capital(text: str) -> Capital:
    if not text:
        return Capital.N
    return Capital.Y if ASCII_UPPER_RE.match(text[0]) else Capital.N


def is_capitalized(text: str) -> bool:
    return capital(text) is Capital.Y


def starts_with_quote(word: str) -> bool:
    return word.startswith(QUOTE_STARTS)


def starts_with_left_quote(word: str) -> bool:
    return word.startswith(LEFT_QUOTE_STARTS)


def starts_with_left_paren(word: str) -> bool:
    return word.startswith(LEFT_PAREN_STARTS)


def ends_in_quote(word: str) -> bool:
    return word.endswith(("'", '"'))


def is_right_paren(word: str) -> bool:
    return word in RIGHT_PARENS


def is_right_quote(word: str) -> bool:
    return word in RIGHT_QUOTES


def is_right_end(suffix: str) -> bool:
    """Closing bracket or closing quote left over after the mark."""
    return is_right_paren(suffix) or is_right_quote(suffix)


def is_left_start(word: str, cap: Capital) -> bool:
    """
    Opening quote, opening bracket or capitalised word.
    `cap` is the slot's context flag, so the NP sentinel never counts as capitalised.
    """
    return starts_with_left_quote(word) or starts_with_left_paren(word) or cap is Capital.Y


def is_terminal_abbreviation(prefix: str) -> bool:
    return prefix in TERMINAL_ABBREVIATIONS


def is_timezone(word: str) -> bool:
    return word in TIMEZONES


def is_time_of_day(prefix: str) -> bool:
    return prefix.lower() in TIME_OF_DAY


def is_initials(prefix: str) -> bool:
    """
    Single capital letter or dotted capitals such as J or U.S.A
    (the final period belongs to the candidate, not the prefix).
    """
    return INITIALS_RE.fullmatch(prefix) is not None


class HonorificSet:
    """Read-only set of title abbreviations, each stored with its trailing period."""

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[str] = ()):
        self._items = frozenset(s.strip() for s in items if s and s.strip())

    @classmethod
    def from_file(cls, path: str | Path, encoding: str = "utf-8") -> HonorificSet:
        path = Path(path)
        if not path.is_file():
            raise ConfigurationError(f"Honorifics file does not exist: {path}")
        try:
            text = path.read_text(encoding=encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Honorifics file could not be read: {path} ({e})") from e
        # Files saved on Windows often start with a byte-order mark.
        return cls(text.lstrip("\ufeff").splitlines())

    @classmethod
    def default(cls) -> HonorificSet:
        return cls.from_file(DEFAULT_HONORIFICS_PATH)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"HonorificSet({len(self._items)} entries)"


def is_honorific(word: str, honorifics: HonorificSet) -> bool:
    return word in honorifics
