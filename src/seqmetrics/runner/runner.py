from __future__ import annotations

"""Batch runner scoring pair files with a configured metric."""

from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from ..config import JobConfig, Operand, PairModel, load_pairs
from ..metrics import get_metric
from ..scoring.reports import summarise
from ..utils import jsonio
from ..utils.helpers import squeeze
from ..utils.logs import get_logger

logger = get_logger(__name__)


@dataclass
class PairRecord:
    pair_id: str
    metric: str
    a_length: int
    b_length: int
    score: float
    exact_match: bool

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class PairRunner:
    def __init__(self, job: Optional[JobConfig] = None):
        self.job = job or JobConfig()
        self.metric = get_metric(self.job.metric)
        self.params = self.job.metric_params()

    def _prepare(self, operand: Operand) -> Operand:
        return squeeze(operand) if self.job.squeeze else operand

    def score(self, a: Operand, b: Operand) -> float:
        return self.metric(self._prepare(a), self._prepare(b), **self.params)

    def run_pairs(
        self, pairs: Iterable[PairModel], *, run_dir: Optional[Path] = None
    ) -> List[PairRecord]:
        records: List[PairRecord] = []
        for index, pair in enumerate(pairs):
            pair_id = pair.id or f"pair-{index}"
            score = self.score(pair.a, pair.b)
            logger.debug("pair_scored", pair_id=pair_id, score=score)
            records.append(
                PairRecord(
                    pair_id=pair_id,
                    metric=self.job.metric,
                    a_length=len(pair.a),
                    b_length=len(pair.b),
                    score=score,
                    exact_match=list(pair.a) == list(pair.b),
                )
            )
        logger.info("run_completed", metric=self.job.metric, num_pairs=len(records))
        if run_dir is not None:
            persist_run(records, run_dir, metric=self.job.metric)
        return records

    def run_file(
        self, pairs_path: Path, *, run_dir: Optional[Path] = None
    ) -> List[PairRecord]:
        pairs = load_pairs(pairs_path)
        logger.info("pairs_loaded", path=str(pairs_path), num_pairs=len(pairs))
        return self.run_pairs(pairs, run_dir=run_dir)


def persist_run(
    records: Iterable[PairRecord],
    run_dir: Path,
    *,
    metric: str,
) -> None:
    records = list(records)
    run_dir.mkdir(parents=True, exist_ok=True)
    rows = [record.to_dict() for record in records]
    jsonio.write_jsonl(run_dir / "results.jsonl", rows)

    table_rows: List[str] = ["pair_id\ta_length\tb_length\tscore\texact_match"]
    for record in records:
        table_rows.append(
            f"{record.pair_id}\t{record.a_length}\t{record.b_length}"
            f"\t{record.score:g}\t{int(record.exact_match)}"
        )
    (run_dir / "results.tsv").write_text("\n".join(table_rows) + "\n", encoding="utf-8")

    summary = {
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "metric": metric,
        **summarise(rows),
    }
    jsonio.write_json(run_dir / "summary.json", summary)
    logger.info("run_persisted", run_dir=str(run_dir))
