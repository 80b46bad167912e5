from __future__ import annotations

"""Helpers for loading and summarising run artefacts."""

from pathlib import Path
from typing import Any, Dict, List

from ..stats import descriptive
from ..utils import jsonio


def load_results(run_path: Path) -> List[Dict[str, Any]]:
    results_path = run_path / "results.jsonl"
    if not results_path.exists():
        raise FileNotFoundError(f"Results not found at {results_path}")
    return jsonio.read_jsonl(results_path)


def summarise(records: List[Dict[str, Any]]) -> Dict[str, Any]:
    if not records:
        return {
            "num_pairs": 0,
            "mean_score": 0.0,
            "score_variance": 0.0,
            "score_stdev": 0.0,
            "min_score": 0.0,
            "max_score": 0.0,
            "exact_match_rate": 0.0,
        }

    scores = [float(record.get("score", 0.0)) for record in records]
    exact = [bool(record.get("exact_match", False)) for record in records]

    return {
        "num_pairs": len(records),
        "mean_score": descriptive.mean(scores),
        "score_variance": descriptive.variance(scores),
        "score_stdev": descriptive.stdev(scores),
        "min_score": min(scores),
        "max_score": max(scores),
        "exact_match_rate": sum(exact) / len(records),
    }


def write_report(run_path: Path, destination: Path | None = None) -> Path:
    records = load_results(run_path)
    summary = summarise(records)
    target = destination or (run_path / "report.json")
    jsonio.write_json(target, {"summary": summary, "records": records})
    return target
