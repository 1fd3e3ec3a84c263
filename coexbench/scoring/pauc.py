"""
Partial AUC

Pairs are ranked by coexpression strength and walked from the strongest
down. The cumulative count of false pairs (x) and true pairs (y) traces a
ROC-like curve whose area is integrated with the trapezoidal rule up to
x = fpr_bound * total_false, the last slice being interpolated at that
boundary.

The reported score is ``pauc / fpr_bound**2`` where ``pauc`` is the area
divided by ``total_true * total_false``. A random ranking therefore scores
about 0.5 and a perfect ranking scores ``1 / fpr_bound``.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

import numpy as np

from ..exceptions import DegenerateInputError
from ..utils.config import DEFAULT_FPR_BOUND
from ..utils.logging import get_logger


logger = get_logger("pauc")


@dataclass
class PAUCResult:
    """Outcome of the partial AUC integration."""
    
    normalized_score: float  # pauc / fpr_bound**2
    pauc: float  # area / (total_true * total_false)
    area: float  # raw trapezoid area in pair-count units
    coex_threshold: float  # value at the boundary crossing, 0 if never reached
    threshold_fp: float  # fpr_bound * total_false
    fpr_bound: float
    n_ranked: int  # records walked, paralog pairs included
    
    @property
    def fraction_of_max(self) -> float:
        """pauc relative to a perfect ranking (1.0 = perfect)."""
        return self.pauc / self.fpr_bound
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "normalized_score": self.normalized_score,
            "pauc": self.pauc,
            "fraction_of_max": self.fraction_of_max,
            "area": self.area,
            "coex_threshold": self.coex_threshold,
            "threshold_fp": self.threshold_fp,
            "fpr_bound": self.fpr_bound,
            "n_ranked": self.n_ranked,
        }


def rank_order(
    values: np.ndarray,
    smaller_is_better: bool = False,
    sequence_ids: Optional[np.ndarray] = None,
) -> np.ndarray:
    """
    Indices ordering pairs from strongest to weakest coexpression.
    
    Ties keep ascending sequence order in both directions, so negating
    the values and flipping the direction gives the same order.
    """
    values = np.asarray(values, dtype=float)
    if sequence_ids is None:
        sequence_ids = np.arange(len(values))
    
    key = values if smaller_is_better else -values
    return np.lexsort((np.asarray(sequence_ids), key))


def cumulative_counts(positive: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Cumulative (false, true) counts along an ordered label sequence.
    
    Returns
    -------
    tuple
        (x, y) arrays with the origin prepended, so ``x[i], y[i]`` is the
        curve after ``i`` records.
    """
    positive = np.asarray(positive, dtype=bool)
    x = np.concatenate([[0], np.cumsum(~positive)])
    y = np.concatenate([[0], np.cumsum(positive)])
    return x, y


def compute_pauc(
    values: np.ndarray,
    positive: np.ndarray,
    paralog: Optional[np.ndarray],
    total_true: int,
    total_false: int,
    fpr_bound: float = DEFAULT_FPR_BOUND,
    smaller_is_better: bool = False,
    sequence_ids: Optional[np.ndarray] = None,
) -> PAUCResult:
    """
    Compute the normalized partial AUC.
    
    Parameters
    ----------
    values : np.ndarray
        Coexpression value of each pair.
    positive : np.ndarray
        True where the pair shares a pathway.
    paralog : np.ndarray, optional
        True where the pair is excluded as paralogous. Excluded pairs keep
        their rank but move neither counter.
    total_true : int
        Number of non-paralog positive pairs.
    total_false : int
        Number of non-paralog negative pairs.
    fpr_bound : float
        False-positive-rate ceiling, in (0, 1].
    smaller_is_better : bool
        Rank ascending instead of descending.
    sequence_ids : np.ndarray, optional
        Collection order, used to break ties.
        
    Returns
    -------
    PAUCResult
        Score and boundary threshold.
    
    Raises
    ------
    DegenerateInputError
        If there are no true or no false pairs.
    """
    if not 0.0 < fpr_bound <= 1.0:
        raise ValueError(f"fpr_bound must be in (0, 1], got {fpr_bound}")
    if total_true <= 0 or total_false <= 0:
        raise DegenerateInputError(
            "partial AUC is undefined without both true and false pairs "
            f"(true={total_true}, false={total_false})"
        )
    
    values = np.asarray(values, dtype=float)
    positive = np.asarray(positive, dtype=bool)
    if paralog is None:
        paralog = np.zeros(len(values), dtype=bool)
    paralog = np.asarray(paralog, dtype=bool)
    
    order = rank_order(values, smaller_is_better, sequence_ids)
    keep = ~paralog[order]
    ranked_values = values[order][keep]
    x, y = cumulative_counts(positive[order][keep])
    
    threshold_fp = fpr_bound * total_false
    
    # x[i + 1] is the false count after record i
    crossed = np.flatnonzero(x[1:] >= threshold_fp)
    
    if len(crossed) == 0:
        area = float(np.sum(np.diff(x) * (y[1:] + y[:-1]) / 2))
        coex_threshold = 0.0
        logger.warning(
            f"FPR bound {fpr_bound} not reached after {len(ranked_values)} pairs"
        )
    else:
        k = int(crossed[0])
        area = float(np.sum(np.diff(x[:k + 1]) * (y[1:k + 1] + y[:k]) / 2))
        
        prev_x, prev_y = x[k], y[k]
        cur_x, cur_y = x[k + 1], y[k + 1]
        slice_ratio = (threshold_fp - prev_x) / (cur_x - prev_x)
        sliced_x = prev_x + (cur_x - prev_x) * slice_ratio
        sliced_y = prev_y + (cur_y - prev_y) * slice_ratio
        area += float((sliced_x - prev_x) * (sliced_y + prev_y) / 2)
        coex_threshold = float(ranked_values[k])
    
    pauc = area / (total_true * total_false)
    normalized_score = pauc / fpr_bound ** 2
    
    logger.debug(
        f"pAUC={pauc:.6g} score={normalized_score:.3f} "
        f"threshold={coex_threshold} (FP boundary {threshold_fp:g})"
    )
    
    return PAUCResult(
        normalized_score=normalized_score,
        pauc=pauc,
        area=area,
        coex_threshold=coex_threshold,
        threshold_fp=threshold_fp,
        fpr_bound=fpr_bound,
        n_ranked=len(values),
    )


def score_collection(
    collection,
    fpr_bound: float = DEFAULT_FPR_BOUND,
    smaller_is_better: bool = False,
) -> PAUCResult:
    """Run compute_pauc on a PairCollection."""
    return compute_pauc(
        collection.values,
        collection.positive,
        collection.paralog,
        collection.total_true,
        collection.total_false,
        fpr_bound=fpr_bound,
        smaller_is_better=smaller_is_better,
        sequence_ids=collection.sequence_ids,
    )
