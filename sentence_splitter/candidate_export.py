from __future__ import annotations

import argparse
import csv
import json
import sys
from collections import Counter
from pathlib import Path
from typing import Any

from tqdm import tqdm

from .config import SplitterConfig
from .lexicon import ConfigurationError
from .load_data import load_corpus_csv
from .splitter import SentenceSplitter

FIELDNAMES = [
    "row_id",
    "doc_idx",
    "paragraph_idx",
    "word_idx",
    "word",
    "mark",
    "word_minus2",
    "word_minus1",
    "prefix",
    "suffix",
    "word_plus1",
    "word_plus2",
    "word_minus2_cap",
    "word_minus1_cap",
    "prefix_cap",
    "suffix_cap",
    "word_plus1_cap",
    "word_plus2_cap",
    "rule",
    "is_boundary",
]


def candidate_rows(document: str, splitter: SentenceSplitter, doc_idx: int = 0) -> list[dict[str, Any]]:
    rows: list[dict[str, Any]] = []
    for rec in splitter.explain(document):
        ctx = rec.context
        rows.append(
            {
                "row_id": f"d{doc_idx}_p{rec.paragraph_idx}_w{rec.word_idx}",
                "doc_idx": doc_idx,
                "paragraph_idx": rec.paragraph_idx,
                "word_idx": rec.word_idx,
                "word": rec.word,
                "mark": ctx.mark,
                "word_minus2": ctx.word_minus2,
                "word_minus1": ctx.word_minus1,
                "prefix": ctx.prefix,
                "suffix": ctx.suffix,
                "word_plus1": ctx.word_plus1,
                "word_plus2": ctx.word_plus2,
                "word_minus2_cap": ctx.word_minus2_cap.value,
                "word_minus1_cap": ctx.word_minus1_cap.value,
                "prefix_cap": ctx.prefix_cap.value,
                "suffix_cap": ctx.suffix_cap.value,
                "word_plus1_cap": ctx.word_plus1_cap.value,
                "word_plus2_cap": ctx.word_plus2_cap.value,
                "rule": rec.rule,
                "is_boundary": int(rec.is_boundary),
            }
        )
    return rows


def export_candidates(
    out_csv: str,
    splitter: SentenceSplitter,
    corpus_path: str | None = None,
    text_path: str | None = None,
    text_column: str = "text",
    max_docs: int | None = None,
    encoding: str = "utf-8",
) -> dict[str, Any]:
    """
    Write every candidate mark with its context window and deciding rule.
    Exactly one of `corpus_path` / `text_path` must be given.
    """
    if (corpus_path is None) == (text_path is None):
        raise ValueError("Provide exactly one of corpus_path or text_path.")

    if corpus_path is not None:
        df = load_corpus_csv(corpus_path, text_column=text_column)
        texts = df[text_column].tolist()
        if max_docs is not None:
            texts = texts[:max_docs]
    else:
        texts = [Path(text_path).read_text(encoding=encoding)]

    rows: list[dict[str, Any]] = []
    for doc_idx, text in enumerate(tqdm(texts, desc="Candidates", disable=len(texts) < 2)):
        rows.extend(candidate_rows(text, splitter, doc_idx=doc_idx))

    out_path = Path(out_csv)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("w", encoding="utf-8", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=FIELDNAMES)
        writer.writeheader()
        for row in rows:
            writer.writerow(row)

    rule_counts = Counter(row["rule"] for row in rows)
    return {
        "out_csv": str(out_path),
        "documents": len(texts),
        "candidates": len(rows),
        "boundaries": sum(row["is_boundary"] for row in rows),
        "rules": dict(rule_counts.most_common()),
    }


def main(argv: list[str] | None = None) -> int:
    cfg = SplitterConfig.from_env()
    ap = argparse.ArgumentParser(description="Export every sentence-boundary candidate with the rule that decided it.")
    ap.add_argument("--corpus_csv", type=str, default=None)
    ap.add_argument("--text", type=str, default=None, help="Plain text file instead of a CSV corpus.")
    ap.add_argument("--text_column", type=str, default=cfg.text_column)
    ap.add_argument("--max_docs", type=int, default=None)
    ap.add_argument("--honorifics", type=str, default=cfg.honorifics_path)
    ap.add_argument("--encoding", type=str, default=cfg.encoding)
    ap.add_argument("--out_csv", type=str, default="outputs/candidates.csv")
    args = ap.parse_args(argv)

    if (args.corpus_csv is None) == (args.text is None):
        raise SystemExit("Provide one of --corpus_csv or --text.")

    try:
        splitter = SentenceSplitter(args.honorifics, encoding=args.encoding)
    except ConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    info = export_candidates(
        out_csv=args.out_csv,
        splitter=splitter,
        corpus_path=args.corpus_csv,
        text_path=args.text,
        text_column=args.text_column,
        max_docs=args.max_docs,
        encoding=args.encoding,
    )
    print(json.dumps(info, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
