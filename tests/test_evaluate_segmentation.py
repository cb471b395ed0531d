from __future__ import annotations

import math

import pytest

pytest.importorskip("sklearn")

from sentence_splitter.evaluate_segmentation import (
    compute_metrics,
    evaluate_sentences,
    main,
    sentence_end_indices,
)
from sentence_splitter.splitter import SentenceSplitter


def test_sentence_end_indices_are_last_token_positions():
    assert sentence_end_indices(["He left.", "She stayed here.", "Ok"]) == [1, 4, 5]


def test_perfect_segmentation():
    assert compute_metrics([1, 4], [1, 4], length=5) == (1.0, 1.0, 1.0, 0.0)
    assert compute_metrics([], []) == (1.0, 1.0, 1.0, 0.0)


def test_missed_boundary_lowers_recall():
    precision, recall, f1, bder = compute_metrics([2], [1, 2], length=3)
    assert precision == 1.0
    assert recall == 0.5
    assert math.isclose(f1, 2 / 3)
    assert bder == 0.5


def test_splitter_against_gold():
    gold = ["I saw Mr. Smith today.", "He waved."]
    pred = SentenceSplitter(honorifics=[]).split("I saw Mr. Smith today. He waved.")
    assert pred == ["I saw Mr.", "Smith today.", "He waved."]
    precision, recall, f1, bder = evaluate_sentences(pred, gold)
    assert recall == 1.0
    assert math.isclose(precision, 2 / 3)
    assert math.isclose(bder, 0.5)


def test_token_mismatch_is_rejected():
    with pytest.raises(ValueError):
        evaluate_sentences(["a b."], ["a c."])
    with pytest.raises(ValueError):
        evaluate_sentences(["a b."], ["a b. c"])


def test_main_reports_bad_honorifics_path(tmp_path, capsys):
    gold = tmp_path / "gold.txt"
    gold.write_text("He left.\n", encoding="utf-8")
    text = tmp_path / "doc.txt"
    text.write_text("He left.", encoding="utf-8")
    code = main([
        "--gold", str(gold),
        "--pred_text", str(text),
        "--honorifics", str(tmp_path / "nope.txt"),
        "--out", str(tmp_path / "metrics.json"),
    ])
    assert code == 2
    assert "Honorifics file does not exist" in capsys.readouterr().err
