from __future__ import annotations

"""Configuration and schema models for batch scoring jobs."""

from pathlib import Path
from typing import Any, Dict, List, Literal, Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError

from .utils import jsonio

MetricName = Literal["damerau_levenshtein", "tversky"]
Operand = Union[str, List[str]]


class TverskyParams(BaseModel):
    """Parameters of the Tversky index."""

    alpha: float = Field(default=1.0, ge=0.0)
    beta: float = Field(default=1.0, ge=0.0)
    symmetric: bool = False


class JobConfig(BaseModel):
    """Top-level job definition loaded from YAML."""

    metric: MetricName = "damerau_levenshtein"
    squeeze: bool = False
    tversky: TverskyParams = Field(default_factory=TverskyParams)

    def metric_params(self) -> Dict[str, Any]:
        """Keyword arguments handed to the configured metric."""

        if self.metric == "tversky":
            return self.tversky.model_dump()
        return {}


class PairModel(BaseModel):
    """One pair of operands from a pair file."""

    id: Optional[str] = None
    a: Operand
    b: Operand


class ConfigNotFoundError(FileNotFoundError):
    """Raised when a job configuration file cannot be located."""


class PairsNotFoundError(FileNotFoundError):
    """Raised when a pair file cannot be located."""


def load_job_config(path: Path) -> JobConfig:
    """Load a job configuration; an empty file gives the defaults."""

    if not path.exists():
        raise ConfigNotFoundError(f"Unknown job config at {path}")
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    try:
        return JobConfig.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Invalid job config in {path}: {exc}") from exc


def load_pairs(path: Path) -> List[PairModel]:
    """Read all pairs from a JSONL file."""

    if not path.exists():
        raise PairsNotFoundError(f"Unknown pair file at {path}")
    pairs: List[PairModel] = []
    for index, entry in enumerate(jsonio.read_jsonl(path), start=1):
        try:
            pairs.append(PairModel.model_validate(entry))
        except ValidationError as exc:
            raise ValueError(f"Invalid pair #{index} in {path}: {exc}") from exc
    return pairs
