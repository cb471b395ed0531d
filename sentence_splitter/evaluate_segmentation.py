from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Sequence, Tuple

import numpy as np
from sklearn.metrics import precision_recall_fscore_support

from .config import SplitterConfig
from .lexicon import ConfigurationError
from .load_data import load_sentences
from .splitter import SentenceSplitter


def sentence_end_indices(sentences: Sequence[str]) -> List[int]:
    """
    Boundary positions as token indices: the index of the last whitespace
    token of each sentence within the whole document.
    """
    ends: List[int] = []
    n = 0
    for s in sentences:
        toks = s.split()
        if not toks:
            continue
        n += len(toks)
        ends.append(n - 1)
    return ends


def check_same_tokens(pred: Sequence[str], gold: Sequence[str]) -> int:
    """Both sides must segment the same token stream; returns its length."""
    pred_toks = [t for s in pred for t in s.split()]
    gold_toks = [t for s in gold for t in s.split()]
    if pred_toks != gold_toks:
        for i, (a, b) in enumerate(zip(pred_toks, gold_toks)):
            if a != b:
                raise ValueError(f"Token streams differ at token {i}: pred={a!r} gold={b!r}")
        raise ValueError(f"Token streams differ in length: pred={len(pred_toks)} gold={len(gold_toks)}")
    return len(gold_toks)


def to_binary_vector(indices: Sequence[int], length: int) -> np.ndarray:
    vec = np.zeros(length, dtype=int)
    for i in indices:
        if 0 <= i < length:
            vec[i] = 1
    return vec


def compute_metrics(
    pred: Sequence[int], gold: Sequence[int], length: int | None = None
) -> Tuple[float, float, float, float]:
    """
    Compute Precision, Recall, F1, and Boundary Detection Error Rate (BDER).
    BDER is (FP + FN) / |gold|.
    """
    if not gold and not pred:
        return 1.0, 1.0, 1.0, 0.0

    if length is None:
        length = max(list(pred) + list(gold)) + 1

    gold_vec = to_binary_vector(gold, length)
    pred_vec = to_binary_vector(pred, length)

    precision, recall, f1, _ = precision_recall_fscore_support(
        gold_vec, pred_vec, average="binary", zero_division=0
    )

    fp = int(((gold_vec == 0) & (pred_vec == 1)).sum())
    fn = int(((gold_vec == 1) & (pred_vec == 0)).sum())
    denom = len(gold) if gold else 1
    bder = (fp + fn) / denom

    return float(precision), float(recall), float(f1), float(bder)


def evaluate_sentences(pred: Sequence[str], gold: Sequence[str]) -> Tuple[float, float, float, float]:
    length = check_same_tokens(pred, gold)
    return compute_metrics(sentence_end_indices(pred), sentence_end_indices(gold), length=length)


def save_metrics(out_path: str, precision: float, recall: float, f1: float, bder: float) -> None:
    payload = {
        "precision": precision,
        "recall": recall,
        "f1_score": f1,
        "bder": bder,
    }
    Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    Path(out_path).write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")


def main(argv: List[str] | None = None) -> int:
    cfg = SplitterConfig.from_env()
    ap = argparse.ArgumentParser(description="Evaluate sentence segmentation against gold sentences.")
    ap.add_argument("--gold", required=True, help="Gold sentences, one per line.")
    ap.add_argument("--pred", help="Predicted sentences, one per line.")
    ap.add_argument("--pred_text", help="Plain text file to segment with the rule-based splitter.")
    ap.add_argument("--honorifics", default=cfg.honorifics_path)
    ap.add_argument("--encoding", default=cfg.encoding)
    ap.add_argument("--out", required=True, help="Where to write metrics JSON.")
    args = ap.parse_args(argv)

    gold = load_sentences(args.gold, encoding=args.encoding)
    if args.pred:
        pred = load_sentences(args.pred, encoding=args.encoding)
    elif args.pred_text:
        try:
            splitter = SentenceSplitter(args.honorifics, encoding=args.encoding)
        except ConfigurationError as e:
            print(f"error: {e}", file=sys.stderr)
            return 2
        pred = splitter.split(Path(args.pred_text).read_text(encoding=args.encoding))
    else:
        raise SystemExit("Provide one of --pred or --pred_text for predicted sentences.")

    precision, recall, f1, bder = evaluate_sentences(pred, gold)

    print(f"Precision: {precision:.3f}")
    print(f"Recall:    {recall:.3f}")
    print(f"F1:        {f1:.3f}")
    print(f"BDER:      {bder:.3f} (FP+FN normalized by |gold|)")

    save_metrics(args.out, precision, recall, f1, bder)
    print(f"Saved metrics to {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
