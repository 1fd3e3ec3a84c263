"""
Tests for the partial AUC integrator.
"""

import numpy as np
import pytest

from coexbench.exceptions import DegenerateInputError
from coexbench.scoring import compute_pauc, cumulative_counts, rank_order


def totals(positive, paralog=None):
    positive = np.asarray(positive, dtype=bool)
    if paralog is None:
        paralog = np.zeros(len(positive), dtype=bool)
    counted = positive[~np.asarray(paralog, dtype=bool)]
    return int(counted.sum()), int((~counted).sum())


def pauc(values, positive, paralog=None, **kwargs):
    total_true, total_false = totals(positive, paralog)
    return compute_pauc(values, positive, paralog, total_true, total_false, **kwargs)


@pytest.fixture
def random_pairs():
    rng = np.random.default_rng(7)
    n = 2000
    positive = rng.random(n) < 0.2
    values = rng.normal(size=n) + positive * 1.0
    return values, positive


class TestComputePAUC:
    """Tests for compute_pauc."""
    
    def test_perfect_ranking_full_range(self):
        result = pauc([5, 4, 3, 2, 1], [1, 1, 0, 0, 0], fpr_bound=1.0)
        
        assert result.area == pytest.approx(6.0)
        assert result.normalized_score == pytest.approx(1.0)
        assert result.coex_threshold == 1.0
    
    def test_perfect_ranking_scales_with_bound(self):
        result = pauc([5, 4, 3, 2, 1], [1, 1, 0, 0, 0], fpr_bound=0.5)
        
        assert result.pauc == pytest.approx(0.5)
        assert result.normalized_score == pytest.approx(2.0)
        assert result.fraction_of_max == pytest.approx(1.0)
        assert result.coex_threshold == 2.0
    
    def test_boundary_interpolation(self):
        result = pauc([6, 5, 4, 3, 2, 1], [1, 0, 1, 0, 1, 0], fpr_bound=0.5)
        
        # full slice (0,1)->(1,1), then half of (1,2)->(2,2)
        assert result.threshold_fp == pytest.approx(1.5)
        assert result.area == pytest.approx(2.0)
        assert result.pauc == pytest.approx(2 / 9)
        assert result.normalized_score == pytest.approx(8 / 9)
        assert result.coex_threshold == 3.0
    
    def test_crossing_on_first_false(self):
        result = pauc([3, 2, 1], [0, 1, 1], fpr_bound=1.0)
        
        assert result.area == 0.0
        assert result.normalized_score == 0.0
        assert result.coex_threshold == 3.0
    
    def test_smaller_is_better(self):
        result = pauc(
            [1, 2, 3, 4, 5, 6], [1, 0, 1, 0, 1, 0],
            fpr_bound=0.5, smaller_is_better=True,
        )
        
        assert result.normalized_score == pytest.approx(8 / 9)
        assert result.coex_threshold == 4.0
    
    def test_remaining_records_ignored(self):
        base = pauc([6, 5, 4, 3, 2, 1], [1, 0, 1, 0, 1, 0], fpr_bound=0.5)
        reordered = pauc([6, 5, 4, 3, 1, 2], [1, 0, 1, 0, 1, 0], fpr_bound=0.5)
        
        assert reordered.area == pytest.approx(base.area)
    
    def test_paralog_pairs_move_no_counter(self):
        values = [6, 5.5, 5, 4, 3.5, 3, 2, 1]
        positive = [1, 0, 0, 1, 1, 0, 1, 0]
        paralog = [0, 1, 0, 0, 1, 0, 0, 0]
        
        result = pauc(values, positive, paralog, fpr_bound=0.5)
        
        assert result.n_ranked == 8
        assert result.normalized_score == pytest.approx(8 / 9)
        assert result.coex_threshold == 3.0
    
    def test_total_false_zero(self):
        with pytest.raises(DegenerateInputError):
            compute_pauc([1, 2], [1, 1], None, 2, 0)
    
    def test_total_true_zero(self):
        with pytest.raises(DegenerateInputError):
            compute_pauc([1, 2], [0, 0], None, 0, 2)
    
    @pytest.mark.parametrize("bound", [0.0, -0.1, 1.5])
    def test_invalid_bound(self, bound):
        with pytest.raises(ValueError):
            pauc([1, 2], [1, 0], fpr_bound=bound)
    
    def test_full_range_matches_mann_whitney(self, random_pairs):
        values, positive = random_pairs
        
        result = pauc(values, positive, fpr_bound=1.0)
        
        pos = values[positive]
        neg = values[~positive]
        auc = (pos[:, None] > neg[None, :]).mean()
        assert result.normalized_score == pytest.approx(auc)
    
    def test_random_ranking_near_half(self):
        rng = np.random.default_rng(0)
        positive = rng.random(4000) < 0.5
        values = rng.normal(size=4000)
        
        result = pauc(values, positive, fpr_bound=1.0)
        
        assert result.normalized_score == pytest.approx(0.5, abs=0.05)
    
    def test_direction_flip(self, random_pairs):
        values, positive = random_pairs
        values = np.round(values, 1)  # force ties
        
        larger = pauc(values, positive, fpr_bound=0.05)
        smaller = pauc(-values, positive, fpr_bound=0.05, smaller_is_better=True)
        
        assert smaller.normalized_score == larger.normalized_score
        assert smaller.coex_threshold == -larger.coex_threshold
    
    def test_score_within_bounds(self, random_pairs):
        values, positive = random_pairs
        
        result = pauc(values, positive, fpr_bound=0.01)
        
        assert 0.0 <= result.normalized_score <= 1 / 0.01
        assert result.coex_threshold in set(values)
    
    def test_to_dict(self):
        result = pauc([5, 4, 3, 2, 1], [1, 1, 0, 0, 0], fpr_bound=1.0)
        
        d = result.to_dict()
        
        assert d["normalized_score"] == pytest.approx(1.0)
        assert d["fraction_of_max"] == pytest.approx(1.0)
        assert d["n_ranked"] == 5


class TestRankOrder:
    """Tests for rank_order."""
    
    def test_descending(self):
        order = rank_order(np.array([0.1, 0.9, 0.5]))
        
        np.testing.assert_array_equal(order, [1, 2, 0])
    
    def test_ascending(self):
        order = rank_order(np.array([0.1, 0.9, 0.5]), smaller_is_better=True)
        
        np.testing.assert_array_equal(order, [0, 2, 1])
    
    def test_ties_keep_sequence_order(self):
        values = np.array([1.0, 2.0, 1.0, 2.0])
        seq = np.array([4, 3, 2, 1])
        
        np.testing.assert_array_equal(rank_order(values, False, seq), [3, 1, 2, 0])
        np.testing.assert_array_equal(rank_order(values, True, seq), [2, 0, 3, 1])


class TestCumulativeCounts:
    """Tests for cumulative_counts."""
    
    def test_counts(self):
        x, y = cumulative_counts([True, False, False, True])
        
        np.testing.assert_array_equal(x, [0, 0, 1, 2, 2])
        np.testing.assert_array_equal(y, [0, 1, 1, 1, 2])
    
    def test_monotonic(self, random_pairs):
        _, positive = random_pairs
        
        x, y = cumulative_counts(positive)
        
        assert np.all(np.diff(x) >= 0)
        assert np.all(np.diff(y) >= 0)
        assert np.all(np.diff(x) + np.diff(y) == 1)
