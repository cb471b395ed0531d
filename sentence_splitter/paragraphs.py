from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List

import regex as re

from .boundary import Decision, decide
from .context import ContextWindow, extract_context, find_candidate
from .lexicon import HonorificSet
from .log_utils import get_logger

logger = get_logger(__name__)

BLANK_LINE_RE = re.compile(r"^\s*$")


@dataclass(frozen=True)
class CandidateDecision:
    word_idx: int
    word: str
    context: ContextWindow
    decision: Decision


def join_line(paragraph: str, line: str) -> str:
    """
    Append one input line to the running paragraph.
    A single trailing hyphen (not part of a '--' dash) marks a word broken
    across the line break: the hyphen is dropped and no space is inserted.
    """
    line = line.lstrip()
    paragraph = paragraph.strip()
    if not paragraph:
        return line
    if len(paragraph) >= 2 and paragraph[-1] == "-" and paragraph[-2] != "-":
        return paragraph[:-1] + line
    return f"{paragraph} {line}"


def iter_paragraphs(lines: Iterable[str]) -> Iterator[str]:
    paragraph = ""
    for line in lines:
        if BLANK_LINE_RE.match(line):
            if paragraph.strip():
                yield paragraph
            paragraph = ""
        else:
            paragraph = join_line(paragraph, line)
    if paragraph.strip():
        yield paragraph


def split_words(paragraph: str) -> List[str]:
    return paragraph.split()


def iter_candidates(words: List[str], honorifics: HonorificSet) -> Iterator[CandidateDecision]:
    """Decide the rightmost candidate of every word that has one."""
    for idx, w in enumerate(words):
        found = find_candidate(w)
        if found is None:
            continue
        pos, mark = found
        ctx = extract_context(words, idx, pos, mark)
        decision = decide(ctx, honorifics)
        logger.debug("word=%r mark=%r rule=%s verdict=%s", w, mark, decision.rule, decision.verdict.value)
        yield CandidateDecision(word_idx=idx, word=w, context=ctx, decision=decision)


def segment_paragraph(paragraph: str, honorifics: HonorificSet, sentences: List[str]) -> None:
    """Append the sentences of one paragraph to `sentences`."""
    words = split_words(paragraph)
    boundaries = {c.word_idx for c in iter_candidates(words, honorifics) if c.decision.is_boundary}

    buf: List[str] = []
    for idx, w in enumerate(words):
        buf.append(w)
        if idx in boundaries:
            sentences.append(" ".join(buf))
            buf = []

    if buf:
        sentences.append(" ".join(buf))
