from .boundary import Decision, Verdict, decide
from .context import ContextWindow, extract_context, find_candidate
from .lexicon import Capital, ConfigurationError, HonorificSet
from .splitter import CandidateRecord, SentenceSplitter

__all__ = [
    "CandidateRecord",
    "Capital",
    "ConfigurationError",
    "ContextWindow",
    "Decision",
    "HonorificSet",
    "SentenceSplitter",
    "Verdict",
    "decide",
    "extract_context",
    "find_candidate",
]
