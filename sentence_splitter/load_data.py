# sentence_splitter/load_data.py
from __future__ import annotations

from pathlib import Path
from typing import List

import pandas as pd


def load_corpus_csv(path: str | Path, text_column: str = "text") -> pd.DataFrame:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Corpus not found: {path}")
    df = pd.read_csv(path)
    if text_column not in df.columns:
        raise ValueError(f"'{text_column}' column not found. Columns: {df.columns.tolist()}")
    df[text_column] = df[text_column].fillna("").astype(str)
    return df


def load_sentences(path: str | Path, encoding: str = "utf-8") -> List[str]:
    """One sentence per line; blank lines are separators and are skipped."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Sentence file not found: {path}")
    lines = path.read_text(encoding=encoding).splitlines()
    return [line.strip() for line in lines if line.strip()]
