from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List

from .context import ContextWindow
from .lexicon import HonorificSet
from .log_utils import get_logger
from .paragraphs import iter_candidates, iter_paragraphs, segment_paragraph, split_words

logger = get_logger(__name__)


@dataclass(frozen=True)
class CandidateRecord:
    paragraph_idx: int
    word_idx: int
    word: str
    context: ContextWindow
    rule: str
    is_boundary: bool


class SentenceSplitter:
    """
    Rule-based splitter: one output string per detected sentence.

    The only state is the read-only honorific set, so an instance can be
    shared; every call builds its own sentence list.
    """

    def __init__(
        self,
        honorifics_path: str | Path | None = None,
        *,
        honorifics: Iterable[str] | None = None,
        encoding: str = "utf-8",
    ):
        if honorifics is not None:
            self.honorifics = honorifics if isinstance(honorifics, HonorificSet) else HonorificSet(honorifics)
        elif honorifics_path is not None:
            self.honorifics = HonorificSet.from_file(honorifics_path, encoding=encoding)
        else:
            self.honorifics = HonorificSet.default()
        logger.info("Loaded %d honorifics", len(self.honorifics))

    def split(self, document: str) -> List[str]:
        return self.split_lines(document.splitlines())

    def split_lines(self, lines: Iterable[str]) -> List[str]:
        sentences: List[str] = []
        for paragraph in iter_paragraphs(lines):
            segment_paragraph(paragraph, self.honorifics, sentences)
        return sentences

    def explain(self, document: str) -> List[CandidateRecord]:
        """Every candidate mark in the document with the rule that decided it."""
        records: List[CandidateRecord] = []
        for p_idx, paragraph in enumerate(iter_paragraphs(document.splitlines())):
            for cand in iter_candidates(split_words(paragraph), self.honorifics):
                records.append(
                    CandidateRecord(
                        paragraph_idx=p_idx,
                        word_idx=cand.word_idx,
                        word=cand.word,
                        context=cand.context,
                        rule=cand.decision.rule,
                        is_boundary=cand.decision.is_boundary,
                    )
                )
        return records
