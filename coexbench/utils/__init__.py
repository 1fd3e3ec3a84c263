"""
Utility functions for the scoring pipeline.
"""

from .config import ScoringConfig, load_config, load_scoring_config
from .io import open_text, iter_tsv, write_table, write_json
from .logging import setup_logger, get_logger

__all__ = [
    "ScoringConfig",
    "load_config",
    "load_scoring_config",
    "open_text",
    "iter_tsv",
    "write_table",
    "write_json",
    "setup_logger",
    "get_logger",
]
