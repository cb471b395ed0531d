from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Tuple

from .context import ContextWindow
from .lexicon import (
    NP,
    SP,
    Capital,
    HonorificSet,
    ends_in_quote,
    is_honorific,
    is_initials,
    is_left_start,
    is_right_end,
    is_right_paren,
    is_terminal_abbreviation,
    is_time_of_day,
    is_timezone,
    starts_with_left_paren,
    starts_with_quote,
)


class Verdict(Enum):
    BOUNDARY = "Y"
    NO_BOUNDARY = "N"


@dataclass(frozen=True)
class Decision:
    verdict: Verdict
    rule: str

    @property
    def is_boundary(self) -> bool:
        return self.verdict is Verdict.BOUNDARY


Predicate = Callable[[ContextWindow, HonorificSet], bool]
Rule = Tuple[str, Predicate, Verdict]

Y = Verdict.BOUNDARY
N = Verdict.NO_BOUNDARY


def _end_of_paragraph(c: ContextWindow, h: HonorificSet) -> bool:
    return c.word_plus1 == NP and c.word_plus2 == NP


def _bare(c: ContextWindow) -> bool:
    """Nothing follows the mark inside the word."""
    return c.suffix == SP


def _next_cap(c: ContextWindow) -> bool:
    return c.word_plus1_cap is Capital.Y


def _closer_then_opener(c: ContextWindow, h: HonorificSet) -> bool:
    return is_right_end(c.suffix) and is_left_start(c.word_plus1, c.word_plus1_cap)


# ----------------------------
# '?' and '!'
# ----------------------------
QUESTION_EXCLAIM_RULES: Tuple[Rule, ...] = (
    ("end_of_paragraph", _end_of_paragraph, Y),
    ("capitalized_next", lambda c, h: _bare(c) and _next_cap(c), Y),
    ("quote_next", lambda c, h: _bare(c) and starts_with_quote(c.word_plus1), Y),
    ("dash_then_capitalized",
     lambda c, h: _bare(c) and c.word_plus1 == "--" and c.word_plus2_cap is Capital.Y, Y),
    ("rbr_then_capitalized",
     lambda c, h: _bare(c) and c.word_plus1 == "-RBR-" and c.word_plus2_cap is Capital.Y, Y),
    # Vertical ellipsis: a lone period after the mark closes the clause.
    ("lone_period_next", lambda c, h: _bare(c) and c.word_plus1 == ".", Y),
    ("closer_then_opener", _closer_then_opener, Y),
)

# ----------------------------
# '.'
# ----------------------------
PERIOD_RULES: Tuple[Rule, ...] = (
    ("end_of_paragraph", _end_of_paragraph, Y),
    ("quote_next", lambda c, h: _bare(c) and starts_with_quote(c.word_plus1), Y),
    ("left_paren_next", lambda c, h: _bare(c) and starts_with_left_paren(c.word_plus1), Y),
    ("rbr_then_dash",
     lambda c, h: _bare(c) and c.word_plus1 == "-RBR-" and c.word_plus2 == "--", N),
    ("right_paren_next", lambda c, h: _bare(c) and is_right_paren(c.word_plus1), Y),
    # Horizontal ellipses arrive as runs of lone periods.
    ("ellipsis_run", lambda c, h: c.prefix == SP and _bare(c) and c.word_plus1 == ".", N),
    ("lone_period_next", lambda c, h: _bare(c) and c.word_plus1 == ".", Y),
    ("quoted_dash_then_capitalized",
     lambda c, h: (_bare(c) and c.word_plus1 == "--" and c.word_plus2_cap is Capital.Y
                   and ends_in_quote(c.prefix)), N),
    ("dash_then_capitalized_or_quote",
     lambda c, h: (_bare(c) and c.word_plus1 == "--"
                   and (c.word_plus2_cap is Capital.Y or starts_with_quote(c.word_plus2))), Y),
    # 3 p.m. EST Monday
    ("time_of_day_timezone",
     lambda c, h: (_bare(c) and _next_cap(c) and is_time_of_day(c.prefix)
                   and is_timezone(c.word_plus1)), N),
    ("honorific", lambda c, h: _bare(c) and _next_cap(c) and is_honorific(c.prefix + ".", h), N),
    ("quoted_prefix", lambda c, h: _bare(c) and _next_cap(c) and starts_with_quote(c.prefix), N),
    ("terminal_abbreviation",
     lambda c, h: _bare(c) and _next_cap(c) and is_terminal_abbreviation(c.prefix), Y),
    ("initials", lambda c, h: _bare(c) and _next_cap(c) and is_initials(c.prefix), N),
    ("capitalized_next", lambda c, h: _bare(c) and _next_cap(c), Y),
    ("closer_then_opener", _closer_then_opener, Y),
)

FALLTHROUGH = Decision(N, "fallthrough")


def rules_for(mark: str) -> Tuple[Rule, ...]:
    return PERIOD_RULES if mark == "." else QUESTION_EXCLAIM_RULES


def decide(ctx: ContextWindow, honorifics: HonorificSet) -> Decision:
    """
    Walk the rule list for the candidate's mark top to bottom; the first
    matching predicate decides. Order matters.
    """
    for name, predicate, verdict in rules_for(ctx.mark):
        if predicate(ctx, honorifics):
            return Decision(verdict, name)
    return FALLTHROUGH


def is_boundary(ctx: ContextWindow, honorifics: HonorificSet) -> bool:
    return decide(ctx, honorifics).is_boundary
