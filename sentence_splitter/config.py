from __future__ import annotations

import os
from dataclasses import dataclass

ENV_HONORIFICS = "SENTENCE_SPLITTER_HONORIFICS"
ENV_LOG_LEVEL = "SENTENCE_SPLITTER_LOG_LEVEL"


@dataclass
class SplitterConfig:
    honorifics_path: str | None = None  # None -> packaged list
    encoding: str = "utf-8"
    text_column: str = "text"
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> SplitterConfig:
        return cls(
            honorifics_path=os.environ.get(ENV_HONORIFICS) or None,
            log_level=os.environ.get(ENV_LOG_LEVEL, "WARNING"),
        )
