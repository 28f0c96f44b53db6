import numpy as np
import pytest

from knowhere.errors import KnowhereError
from knowhere.evaluation import (
    check_distance,
    hits_in_range,
    normalize_rows,
    range_accuracy,
    range_recall,
    recall_at_k,
    recall_vs_golden,
)


def test_normalize_rows_unit_length_in_place():
    x = np.array([[3.0, 4.0], [1.0, 1.0], [0.5, -2.0]], dtype=np.float32)
    out = normalize_rows(x)
    assert out is x
    assert np.allclose(np.linalg.norm(x, axis=1), 1.0, atol=1e-6)


def test_normalize_rows_keeps_direction():
    x = np.array([[2.0, 0.0, 0.0]], dtype=np.float32)
    normalize_rows(x)
    assert x.tolist() == [[1.0, 0.0, 0.0]]


def test_normalize_rows_rejects_integers():
    with pytest.raises(TypeError):
        normalize_rows(np.array([[1, 2]]))


def test_recall_at_k_identical_is_one():
    gt = np.array([[1, 2, 3], [4, 5, 6]])
    assert recall_at_k(gt, gt, 3) == 1.0


def test_recall_at_k_disjoint_is_zero():
    gt = np.array([[1, 2, 3]])
    ids = np.array([[7, 8, 9]])
    assert recall_at_k(gt, ids, 3) == 0.0


def test_recall_at_k_order_does_not_matter():
    gt = np.array([[1, 2, 3, 4]])
    ids = np.array([[4, 3, 2, 1]])
    assert recall_at_k(gt, ids, 4) == recall_at_k(gt, gt, 4)


def test_recall_at_k_uses_smaller_k():
    gt = np.array([[1, 2]])
    ids = np.array([[1, 2, 99, 98]])
    assert recall_at_k(gt, ids, 4) == 1.0


def test_recall_at_k_partial_between_bounds():
    gt = np.array([[1, 2, 3, 4]])
    ids = np.array([[1, 2, 10, 11]])
    value = recall_at_k(gt, ids, 4)
    assert 0.0 < value < 1.0
    assert value == 0.5


def test_recall_vs_golden():
    golden = np.array([[5, 6], [7, 8]])
    assert recall_vs_golden(golden, golden[:, ::-1], 2) == 1.0
    assert recall_vs_golden(golden, np.array([[0, 1], [2, 3]]), 2) == 0.0


def test_recall_vs_golden_row_mismatch():
    with pytest.raises(KnowhereError):
        recall_vs_golden(np.array([[1, 2]]), np.array([[1, 2], [3, 4]]), 2)


GT_IDS = [1, 2, 3, 10, 11]
GT_LIMS = [0, 3, 5]


def test_hits_in_range_self_match_counts_all():
    assert hits_in_range(GT_IDS, GT_LIMS, GT_IDS, GT_LIMS) == len(GT_IDS)


def test_hits_only_counted_within_same_query():
    ids = [10, 11, 1]
    lims = [0, 2, 3]
    assert hits_in_range(GT_IDS, GT_LIMS, ids, lims) == 0


def test_range_recall_and_accuracy_relations():
    ids = [1, 2, 99, 10]
    lims = [0, 3, 4]
    hits = hits_in_range(GT_IDS, GT_LIMS, ids, lims)
    assert range_recall(GT_IDS, GT_LIMS, ids, lims) == hits / GT_LIMS[-1]
    assert range_accuracy(GT_IDS, GT_LIMS, ids, lims) == hits / lims[-1]


def test_range_accuracy_without_results_raises():
    with pytest.raises(KnowhereError):
        range_accuracy(GT_IDS, GT_LIMS, [], [0, 0, 0])


def test_check_distance_passes_on_match():
    dists = [0.1, 0.2, 0.3, 0.4, 0.5]
    check_distance(GT_IDS, GT_LIMS, dists, GT_IDS, dists, GT_LIMS)
    with pytest.raises(KnowhereError):
        check_distance(GT_IDS, GT_LIMS, dists, [1], [0.9], [0, 1, 1])


def test_check_distance_ignores_unknown_ids():
    dists = [0.1, 0.2, 0.3, 0.4, 0.5]
    check_distance(GT_IDS, GT_LIMS, dists, [42], [7.0], [0, 1, 1])
    with pytest.raises(KnowhereError, match="query 1"):
        check_distance(GT_IDS, GT_LIMS, dists, [42, 11], [7.0, 0.0], [0, 1, 2])