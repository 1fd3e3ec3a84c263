"""
CLI Module for coexbench
"""

import argparse
import sys
from typing import List, Optional

import yaml

from .exceptions import CoexBenchError
from .utils.config import load_scoring_config
from .utils.logging import setup_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="coexbench",
        description=(
            "Partial AUC (FPR 0-1%) of a coexpression dataset against "
            "pathway co-membership"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Score a larger-is-better index
    coexbench -d Ath-m.v21-01.G20819-S12686.combat_pca_subagging.ls.d -k ath_pathway.tsv

    # Smaller-is-better index (e.g. mutual rank), excluding paralog pairs
    coexbench -d coex_dir -k ath_pathway.tsv -g ath_ko.tsv -M

    # Options from a YAML file, report also saved as JSON
    coexbench --config config/config.yaml --json results/score.json
        """
    )
    
    parser.add_argument("-d", "--coex-dir", dest="coex_dir",
                        help="Directory with one coexpression file per gene")
    parser.add_argument("-k", "--pathway-file", dest="pathway_file",
                        help="Pathway annotation (pathway ID, gene IDs; tab-separated)")
    parser.add_argument("-g", "--paralog-file", dest="paralog_file",
                        help="Paralog groups (group ID, gene IDs; tab-separated)")
    parser.add_argument("-M", "--smaller-is-better", dest="smaller_is_better",
                        action="store_true", default=None,
                        help="Use a smaller-is-better coexpression index")
    parser.add_argument("--fpr", dest="fpr_bound", type=float,
                        help="False-positive-rate bound (default 0.01)")
    parser.add_argument("--max-genes", dest="max_genes_in_pathway", type=int,
                        help="Ignore pathways with more genes (default 50)")
    parser.add_argument("--config", help="YAML configuration file")
    parser.add_argument("--json", help="Also write the report as JSON")
    parser.add_argument("--pairs-out", help="Write the collected pair table (TSV)")
    parser.add_argument("--log-file", help="Also log to this file")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    
    logger = setup_logger(log_file=args.log_file, level=args.log_level)
    
    from .pipeline import run_scoring
    from .reporting import write_report, write_report_json
    
    overrides = {
        "coex_dir": args.coex_dir,
        "pathway_file": args.pathway_file,
        "paralog_file": args.paralog_file,
        "smaller_is_better": args.smaller_is_better,
        "fpr_bound": args.fpr_bound,
        "max_genes_in_pathway": args.max_genes_in_pathway,
    }
    
    try:
        config = load_scoring_config(args.config, overrides)
        run = run_scoring(config, pairs_out=args.pairs_out)
    except (CoexBenchError, OSError, ValueError, yaml.YAMLError) as e:
        logger.error(str(e))
        return 1
    
    write_report(run.report)
    if args.json:
        write_report_json(run.report, args.json)
    
    return 0


if __name__ == "__main__":
    sys.exit(main())
