"""
Scoring pipeline: annotations -> pair collection -> partial AUC -> report.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .annotation import ParalogGroups, PathwayAnnotation, load_paralogs, load_pathways
from .coexpression import PairCollection, PairCollector
from .reporting import ScoreReport
from .scoring import PAUCResult, score_collection
from .utils.config import ScoringConfig
from .utils.io import write_table
from .utils.logging import get_logger


logger = get_logger("pipeline")


@dataclass
class ScoringRun:
    """Everything produced by one run."""
    
    config: ScoringConfig
    pathways: PathwayAnnotation
    paralogs: ParalogGroups
    pairs: PairCollection
    result: PAUCResult
    report: ScoreReport


def run_scoring(
    config: ScoringConfig,
    pairs_out: Optional[str | Path] = None,
) -> ScoringRun:
    """
    Score one coexpression directory.
    
    Parameters
    ----------
    config : ScoringConfig
        Run options.
    pairs_out : str or Path, optional
        Write the collected pair table here (TSV, gzip if ``.gz``).
        
    Returns
    -------
    ScoringRun
        Lookup tables, pairs, integration result and report.
    """
    config.validate()
    
    pathways = load_pathways(config.pathway_file, config.max_genes_in_pathway)
    paralogs = load_paralogs(config.paralog_file, pathways.partners)
    
    collector = PairCollector(pathways, paralogs)
    pairs = collector.collect_directory(config.coex_dir)
    
    if pairs_out is not None:
        path = write_table(pairs.to_frame(), pairs_out)
        logger.info(f"Wrote {len(pairs)} pairs to {path}")
    
    result = score_collection(
        pairs,
        fpr_bound=config.fpr_bound,
        smaller_is_better=config.smaller_is_better,
    )
    
    report = ScoreReport(
        score=result.normalized_score,
        coex_dir=str(config.coex_dir),
        direction=config.direction,
        coex_threshold=result.coex_threshold,
        n_test_genes=len(pathways),
        pauc=result.pauc,
        fpr_bound=config.fpr_bound,
        total_true=pairs.total_true,
        total_false=pairs.total_false,
        n_pairs=len(pairs),
        n_paralog_pairs=pairs.n_paralog_pairs,
        n_paralog_genes=len(paralogs),
        pathway_file=str(config.pathway_file),
        paralog_file=str(config.paralog_file) if config.paralog_file else None,
    )
    
    return ScoringRun(
        config=config,
        pathways=pathways,
        paralogs=paralogs,
        pairs=pairs,
        result=result,
        report=report,
    )
