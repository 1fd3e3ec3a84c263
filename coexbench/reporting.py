"""
Report of a scoring run.

The primary output is a single tab-separated line:
score, coexpression directory, direction, boundary threshold and number
of genes under test.
"""

import sys
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional, TextIO

from .utils.io import write_json


@dataclass
class ScoreReport:
    """Score and run metadata."""
    
    score: float
    coex_dir: str
    direction: str  # "larger" or "smaller"
    coex_threshold: float
    n_test_genes: int
    pauc: float = 0.0
    fpr_bound: float = 0.01
    total_true: int = 0
    total_false: int = 0
    n_pairs: int = 0
    n_paralog_pairs: int = 0
    n_paralog_genes: int = 0
    pathway_file: Optional[str] = None
    paralog_file: Optional[str] = None
    
    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def format_threshold(value: float) -> str:
    """Shortest round-trip form, integral values without '.0' (0.0 -> '0')."""
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def format_report(report: ScoreReport) -> str:
    return "\t".join([
        f"{report.score:.3f}",
        str(report.coex_dir),
        report.direction,
        format_threshold(report.coex_threshold),
        str(report.n_test_genes),
    ])


def write_report(report: ScoreReport, stream: Optional[TextIO] = None) -> None:
    """Write the report line to ``stream`` (stdout by default)."""
    stream = stream if stream is not None else sys.stdout
    stream.write(format_report(report) + "\n")
    stream.flush()


def write_report_json(report: ScoreReport, filepath: str | Path) -> None:
    write_json(report.to_dict(), filepath)
