"""
Coexpression ingestion: streams per-gene coexpression files into a
deduplicated, labelled gene pair collection.
"""

from .collector import PairCollector, PairCollection, PairRecord, parse_value

__all__ = [
    "PairCollector",
    "PairCollection",
    "PairRecord",
    "parse_value",
]
