"""
Scoring Module

Partial AUC of the pathway-recovery curve over the low false-positive
region.
"""

from .pauc import (
    PAUCResult,
    compute_pauc,
    cumulative_counts,
    rank_order,
    score_collection,
)

__all__ = [
    "PAUCResult",
    "compute_pauc",
    "cumulative_counts",
    "rank_order",
    "score_collection",
]
