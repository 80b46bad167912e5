from __future__ import annotations

from pathlib import Path

import pytest

from seqmetrics.config import (
    ConfigNotFoundError,
    JobConfig,
    PairModel,
    PairsNotFoundError,
    load_job_config,
    load_pairs,
)


def test_job_config_loads_from_yaml(tmp_path: Path) -> None:
    path = tmp_path / "job.yaml"
    path.write_text(
        "metric: tversky\nsqueeze: true\ntversky:\n  alpha: 0.5\n  beta: 0.5\n",
        encoding="utf-8",
    )
    job = load_job_config(path)
    assert job.metric == "tversky"
    assert job.squeeze is True
    assert job.metric_params() == {"alpha": 0.5, "beta": 0.5, "symmetric": False}


def test_empty_job_config_uses_defaults(tmp_path: Path) -> None:
    path = tmp_path / "job.yaml"
    path.write_text("", encoding="utf-8")
    job = load_job_config(path)
    assert job == JobConfig()
    assert job.metric == "damerau_levenshtein"
    assert job.metric_params() == {}


def test_invalid_job_config_raises(tmp_path: Path) -> None:
    path = tmp_path / "job.yaml"
    path.write_text("metric: tversky\ntversky:\n  alpha: -1\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid job config"):
        load_job_config(path)


def test_missing_job_config_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigNotFoundError):
        load_job_config(tmp_path / "missing.yaml")


def test_pairs_load_strings_and_tokens(tmp_path: Path) -> None:
    path = tmp_path / "pairs.jsonl"
    path.write_text(
        '{"id": "p1", "a": "kitten", "b": "sitting"}\n'
        "\n"
        '{"a": ["the", "fox"], "b": ["fox", "the"]}\n',
        encoding="utf-8",
    )
    pairs = load_pairs(path)
    assert pairs[0] == PairModel(id="p1", a="kitten", b="sitting")
    assert pairs[1].id is None
    assert pairs[1].a == ["the", "fox"]


def test_pairs_with_missing_operand_raise(tmp_path: Path) -> None:
    path = tmp_path / "pairs.jsonl"
    path.write_text('{"id": "p1", "a": "kitten"}\n', encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid pair #1"):
        load_pairs(path)


def test_malformed_pair_line_reports_location(tmp_path: Path) -> None:
    path = tmp_path / "pairs.jsonl"
    path.write_text('{"a": "x", "b": "y"}\n{not json\n', encoding="utf-8")
    with pytest.raises(ValueError, match=":2"):
        load_pairs(path)


def test_missing_pairs_file_raises(tmp_path: Path) -> None:
    with pytest.raises(PairsNotFoundError):
        load_pairs(tmp_path / "missing.jsonl")
