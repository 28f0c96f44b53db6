"""Recall, accuracy and distance checks of search results against ground truth."""

from __future__ import annotations

from typing import Any, Iterator, Sequence

import numpy as np

from knowhere.errors import KnowhereError

DEFAULT_DISTANCE_TOLERANCE = 0.00001


def _as_rows(data: Any, what: str) -> np.ndarray:
    array = np.asarray(data)
    if array.ndim == 1:
        array = array.reshape(1, -1)
    if array.ndim != 2:
        raise KnowhereError(f"{what} must be a 2-D array")
    return array


def _segments(values: Sequence[Any], lims: Sequence[int], nq: int) -> Iterator[list]:
    """Yield the slice of ``values`` that belongs to each of the first ``nq`` queries."""
    flat = np.asarray(values).reshape(-1)
    bounds = np.asarray(lims, dtype=np.int64).reshape(-1)
    if bounds.size < nq + 1:
        raise KnowhereError(f"lims must hold at least {nq + 1} entries, got {bounds.size}")
    for start, end in zip(bounds[:nq].tolist(), bounds[1 : nq + 1].tolist()):
        yield flat[start:end].tolist()


def _query_count(lims: Sequence[int]) -> int:
    count = len(np.asarray(lims).reshape(-1)) - 1
    if count < 0:
        raise KnowhereError("lims must not be empty")
    return count


def normalize_rows(x: np.ndarray) -> np.ndarray:
    """Scale every row of ``x`` in place to unit length and return ``x``.

    Lengths are accumulated in double precision. A zero row has no defined
    direction and becomes NaN.
    """
    if not isinstance(x, np.ndarray) or not np.issubdtype(x.dtype, np.floating):
        raise TypeError("expected a floating point numpy array")
    rows = x.reshape(1, -1) if x.ndim == 1 else x
    if rows.ndim != 2:
        raise ValueError("expected a 1-D or 2-D array")
    wide = rows.astype(np.float64)
    with np.errstate(divide="ignore", invalid="ignore"):
        inv_len = 1.0 / np.sqrt(np.einsum("ij,ij->i", wide, wide))
        rows[...] = (wide * inv_len[:, None]).astype(x.dtype)
    return x


def recall_at_k(gt_ids: Any, ids: Any, k: int) -> float:
    """Fraction of the top ``min(gt_k, k)`` ground-truth ids found among as many results.

    ``gt_ids`` has one row of ``gt_k`` ids per query, ``ids`` one row of ``k``.
    """
    ground_rows = _as_rows(gt_ids, "gt_ids")
    result_rows = _as_rows(ids, "ids")
    if result_rows.shape[0] > ground_rows.shape[0]:
        raise KnowhereError("more result rows than ground-truth rows")
    min_k = min(ground_rows.shape[1], k)
    if min_k <= 0 or result_rows.shape[0] == 0:
        raise KnowhereError("nothing to compare")
    hit = 0
    for ground_row, result_row in zip(ground_rows, result_rows):
        ground = set(ground_row[:min_k].tolist())
        hit += sum(1 for label in result_row[:min_k].tolist() if label in ground)
    return hit / (result_rows.shape[0] * min_k)


def recall_vs_golden(golden_ids: Any, ids: Any, k: int) -> float:
    """Fraction of the ``k`` golden ids of each query found among its ``k`` results."""
    golden_rows = _as_rows(golden_ids, "golden_ids")
    result_rows = _as_rows(ids, "ids")
    if golden_rows.shape[0] != result_rows.shape[0]:
        raise KnowhereError("golden and result row counts differ")
    if k <= 0 or result_rows.shape[0] == 0:
        raise KnowhereError("nothing to compare")
    hit = 0
    for golden_row, result_row in zip(golden_rows, result_rows):
        ground = set(golden_row[:k].tolist())
        hit += sum(1 for label in result_row[:k].tolist() if label in ground)
    return hit / (result_rows.shape[0] * k)


def hits_in_range(gt_ids: Any, gt_lims: Any, ids: Any, lims: Any) -> int:
    """Count range-search results that also appear in the ground truth of their query."""
    nq = _query_count(lims)
    hit = 0
    for ground, found in zip(_segments(gt_ids, gt_lims, nq), _segments(ids, lims, nq)):
        ground_set = set(ground)
        hit += sum(1 for label in found if label in ground_set)
    return hit


def range_recall(gt_ids: Any, gt_lims: Any, ids: Any, lims: Any) -> float:
    """Share of all ground-truth entries that the range search found."""
    nq = _query_count(lims)
    total = int(np.asarray(gt_lims).reshape(-1)[nq])
    if total == 0:
        raise KnowhereError("ground truth holds no results")
    return hits_in_range(gt_ids, gt_lims, ids, lims) / total


def range_accuracy(gt_ids: Any, gt_lims: Any, ids: Any, lims: Any) -> float:
    """Share of all range-search results that are in the ground truth."""
    nq = _query_count(lims)
    total = int(np.asarray(lims).reshape(-1)[nq])
    if total == 0:
        raise KnowhereError("search returned no results")
    return hits_in_range(gt_ids, gt_lims, ids, lims) / total


def check_distance(
    gt_ids: Any,
    gt_lims: Any,
    gt_distances: Any,
    ids: Any,
    distances: Any,
    lims: Any,
    tolerance: float = DEFAULT_DISTANCE_TOLERANCE,
) -> None:
    """Check that every result also in the ground truth has the ground-truth distance.

    Raises KnowhereError at the first distance that differs by ``tolerance`` or more.
    """
    nq = _query_count(lims)
    queries = zip(
        _segments(gt_ids, gt_lims, nq),
        _segments(gt_distances, gt_lims, nq),
        _segments(ids, lims, nq),
        _segments(distances, lims, nq),
    )
    for query, (g_ids, g_dists, r_ids, r_dists) in enumerate(queries):
        expected = dict(zip(g_ids, g_dists))
        for label, dist in zip(r_ids, r_dists):
            if label in expected and not abs(dist - expected[label]) < tolerance:
                raise KnowhereError(
                    f"query {query}: distance of id {label} is {dist}, "
                    f"expected {expected[label]}"
                )