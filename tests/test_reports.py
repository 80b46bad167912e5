from __future__ import annotations

from pathlib import Path

import json
import pytest

from seqmetrics.scoring.reports import load_results, summarise, write_report


def test_summarise_computes_score_statistics() -> None:
    records = [
        {"pair_id": "p1", "score": 1, "exact_match": False},
        {"pair_id": "p2", "score": 3, "exact_match": False},
        {"pair_id": "p3", "score": 0, "exact_match": True},
        {"pair_id": "p4", "score": 0, "exact_match": True},
    ]

    summary = summarise(records)

    assert summary["num_pairs"] == 4
    assert summary["mean_score"] == pytest.approx(1.0)
    assert summary["score_variance"] == pytest.approx(1.5)
    assert summary["score_stdev"] == pytest.approx(1.5 ** 0.5)
    assert summary["min_score"] == 0
    assert summary["max_score"] == 3
    assert summary["exact_match_rate"] == pytest.approx(0.5)


def test_summarise_empty_run() -> None:
    summary = summarise([])
    assert summary["num_pairs"] == 0
    assert summary["mean_score"] == 0.0


def test_write_report_persists_summary(tmp_path: Path) -> None:
    run_dir = tmp_path / "run"
    run_dir.mkdir()
    results_path = run_dir / "results.jsonl"
    results_path.write_text(
        "\n".join(
            json.dumps(
                {
                    "pair_id": f"p{index}",
                    "metric": "damerau_levenshtein",
                    "a_length": 3,
                    "b_length": 3,
                    "score": 1,
                    "exact_match": False,
                }
            )
            for index in range(2)
        )
        + "\n",
        encoding="utf-8",
    )

    target = write_report(run_dir)
    payload = json.loads(target.read_text())
    assert "summary" in payload
    assert payload["summary"]["num_pairs"] == 2

    loaded = load_results(run_dir)
    assert len(loaded) == 2


def test_load_results_requires_results_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_results(tmp_path)
