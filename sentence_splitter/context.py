from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

from .lexicon import CANDIDATE_MARKS, NP, SP, Capital, capital


@dataclass(frozen=True)
class ContextWindow:
    """Two words on each side of a candidate plus the candidate word split at its mark."""

    mark: str
    word_minus2: str
    word_minus1: str
    prefix: str
    suffix: str
    word_plus1: str
    word_plus2: str
    word_minus2_cap: Capital
    word_minus1_cap: Capital
    prefix_cap: Capital
    suffix_cap: Capital
    word_plus1_cap: Capital
    word_plus2_cap: Capital


def find_candidate(word: str) -> Tuple[int, str] | None:
    """
    Position and character of the rightmost '.', '?' or '!' in `word`.
    Returns None when the word carries no candidate.
    """
    pos = -1
    mark = ""
    for m in CANDIDATE_MARKS:
        i = word.rfind(m)
        if i > pos:
            pos, mark = i, m
    if pos == -1:
        return None
    return pos, mark


def split_at(word: str, pos: int) -> Tuple[str, str]:
    prefix = word[:pos] if pos > 0 else SP
    suffix = word[pos + 1:] if pos < len(word) - 1 else SP
    return prefix, suffix


def _slot(words: Sequence[str], idx: int) -> Tuple[str, Capital]:
    if idx < 0 or idx >= len(words):
        return NP, Capital.NP
    w = words[idx]
    return w, capital(w)


def extract_context(words: Sequence[str], index: int, pos: int, mark: str) -> ContextWindow:
    # Bounds are checked nearest-first: a missing neighbour forces the outer slot to NP too.
    if index - 1 < 0:
        wm1, wm1c = NP, Capital.NP
        wm2, wm2c = NP, Capital.NP
    else:
        wm1, wm1c = _slot(words, index - 1)
        wm2, wm2c = _slot(words, index - 2)

    if index + 1 >= len(words):
        wp1, wp1c = NP, Capital.NP
        wp2, wp2c = NP, Capital.NP
    else:
        wp1, wp1c = _slot(words, index + 1)
        wp2, wp2c = _slot(words, index + 2)

    prefix, suffix = split_at(words[index], pos)

    return ContextWindow(
        mark=mark,
        word_minus2=wm2,
        word_minus1=wm1,
        prefix=prefix,
        suffix=suffix,
        word_plus1=wp1,
        word_plus2=wp2,
        word_minus2_cap=wm2c,
        word_minus1_cap=wm1c,
        prefix_cap=capital(prefix),
        suffix_cap=capital(suffix),
        word_plus1_cap=wp1c,
        word_plus2_cap=wp2c,
    )
