from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List

import pandas as pd
from tqdm import tqdm

from .config import SplitterConfig
from .lexicon import ConfigurationError
from .load_data import load_corpus_csv
from .log_utils import set_level
from .splitter import SentenceSplitter


def format_sentences(sentences: List[str], blank_lines: bool = False) -> str:
    sep = "\n\n" if blank_lines else "\n"
    return sep.join(sentences) + ("\n" if sentences else "")


def split_corpus(
    splitter: SentenceSplitter,
    corpus_path: str,
    text_column: str = "text",
    limit: int | None = None,
) -> pd.DataFrame:
    """Split every row of a CSV corpus into (doc_idx, sent_idx, sentence) rows."""
    df = load_corpus_csv(corpus_path, text_column=text_column)
    texts = df[text_column]
    if limit:
        texts = texts.head(limit)

    rows = []
    for doc_idx, text in tqdm(texts.items(), total=len(texts), desc="Splitting"):
        for sent_idx, sentence in enumerate(splitter.split(text)):
            rows.append({"doc_idx": doc_idx, "sent_idx": sent_idx, "sentence": sentence})
    return pd.DataFrame(rows, columns=["doc_idx", "sent_idx", "sentence"])


def build_parser() -> argparse.ArgumentParser:
    cfg = SplitterConfig.from_env()
    ap = argparse.ArgumentParser(description="Split text into one sentence per line.")
    ap.add_argument("--input", help="Plain text file to split (default: stdin).")
    ap.add_argument("--corpus_csv", help="CSV corpus; each row of --text_column is split separately.")
    ap.add_argument("--text_column", default=cfg.text_column)
    ap.add_argument("--limit", type=int, default=None, help="Optional row limit when using --corpus_csv.")
    ap.add_argument("--out", help="Output path (default: stdout; required with --corpus_csv).")
    ap.add_argument("--honorifics", default=cfg.honorifics_path,
                    help="Honorific list, one entry per line with its trailing period.")
    ap.add_argument("--encoding", default=cfg.encoding)
    ap.add_argument("--blank_lines", action="store_true", help="Follow every sentence with a blank line.")
    ap.add_argument("--log_level", default=cfg.log_level)
    return ap


def main(argv: List[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    set_level(args.log_level)

    if args.input and args.corpus_csv:
        raise SystemExit("Use either --input or --corpus_csv, not both.")
    if args.corpus_csv and not args.out:
        raise SystemExit("--out is required with --corpus_csv.")

    try:
        splitter = SentenceSplitter(args.honorifics, encoding=args.encoding)
    except ConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if args.corpus_csv:
        out_df = split_corpus(splitter, args.corpus_csv, text_column=args.text_column, limit=args.limit)
        Path(args.out).parent.mkdir(parents=True, exist_ok=True)
        out_df.to_csv(args.out, index=False, encoding="utf-8")
        print(f"Wrote {len(out_df)} sentences to {args.out}")
        return 0

    if args.input:
        text = Path(args.input).read_text(encoding=args.encoding)
    else:
        text = sys.stdin.read()

    output = format_sentences(splitter.split(text), blank_lines=args.blank_lines)
    if args.out:
        Path(args.out).parent.mkdir(parents=True, exist_ok=True)
        Path(args.out).write_text(output, encoding=args.encoding)
    else:
        sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
