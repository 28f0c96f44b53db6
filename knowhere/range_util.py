"""Filtering and assembly of range search results."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

import numpy as np

from knowhere.bitset import Bitset
from knowhere.errors import KnowhereError

logger = logging.getLogger("knowhere")


@dataclass
class RangeSearchResult:
    """Results of a range search for several queries, stored back to back.

    The results of query ``i`` are ``distances[lims[i]:lims[i + 1]]`` and
    ``labels[lims[i]:lims[i + 1]]``.
    """

    lims: np.ndarray
    distances: np.ndarray
    labels: np.ndarray

    def __post_init__(self) -> None:
        self.lims = np.asarray(self.lims, dtype=np.int64).reshape(-1)
        self.distances = np.asarray(self.distances, dtype=np.float32).reshape(-1)
        self.labels = np.asarray(self.labels, dtype=np.int64).reshape(-1)
        if self.lims.size == 0 or self.lims[0] != 0:
            raise KnowhereError("lims must start with 0")
        if np.any(np.diff(self.lims) < 0):
            raise KnowhereError("lims must not decrease")
        total = int(self.lims[-1])
        if self.distances.size != total or self.labels.size != total:
            raise KnowhereError(
                f"expected {total} results, got {self.distances.size} distances "
                f"and {self.labels.size} labels"
            )

    @property
    def nq(self) -> int:
        """Number of queries."""
        return len(self.lims) - 1

    def query(self, i: int) -> tuple[np.ndarray, np.ndarray]:
        """Distances and labels found for query ``i``."""
        start, end = int(self.lims[i]), int(self.lims[i + 1])
        return self.distances[start:end], self.labels[start:end]

    def __iter__(self) -> Iterator[tuple[np.ndarray, np.ndarray]]:
        for i in range(self.nq):
            yield self.query(i)


def distance_in_range(dist: float, radius: float, range_filter: float, is_ip: bool) -> bool:
    """Whether ``dist`` lies in the range bounded by ``radius`` and ``range_filter``.

    For inner-product metrics the range is ``(radius, range_filter]``, for
    distance metrics it is ``[range_filter, radius)``.
    """
    d, r, f = np.float32(dist), np.float32(radius), np.float32(range_filter)
    if is_ip:
        return bool(r < d <= f)
    return bool(f <= d < r)


def count_valid_results(
    result: RangeSearchResult, is_ip: bool, radius: float, range_filter: float
) -> np.ndarray:
    """Return the limits of ``result`` once out-of-range entries are dropped."""
    lims = [0]
    for distances, _ in result:
        valid = sum(
            distance_in_range(d, radius, range_filter, is_ip) for d in distances.tolist()
        )
        lims.append(lims[-1] + valid)
    return np.asarray(lims, dtype=np.int64)


def filter_range_result(
    result: RangeSearchResult,
    is_ip: bool,
    radius: float,
    range_filter: float,
    bitset: Optional[Bitset] = None,
) -> RangeSearchResult:
    """Keep only the entries of ``result`` whose distance is in range.

    Raises KnowhereError if an entry's label is marked in ``bitset``.
    """
    check_bitset = bitset is not None and not bitset.is_empty()
    out_distances: list[float] = []
    out_labels: list[int] = []
    lims = [0]
    for distances, labels in result:
        for dist, label in zip(distances.tolist(), labels.tolist()):
            if check_bitset and bitset.test(label):
                raise KnowhereError("bitset invalid")
            if distance_in_range(dist, radius, range_filter, is_ip):
                out_distances.append(dist)
                out_labels.append(label)
        lims.append(len(out_distances))
    logger.debug(
        "Range search metric type: %s, radius %s, range_filter %s, total result num %d",
        "IP" if is_ip else "L2",
        radius,
        range_filter,
        lims[-1],
    )
    return RangeSearchResult(lims, out_distances, out_labels)


def filter_one_query(
    distances: Sequence[float],
    labels: Sequence[int],
    is_ip: bool,
    radius: float,
    range_filter: float,
) -> tuple[list[float], list[int]]:
    """Drop the out-of-range entries of one query, keeping the order of the rest."""
    if len(distances) != len(labels):
        raise KnowhereError(
            f"distances' size {len(distances)} not equal to labels' size {len(labels)}"
        )
    kept = [
        (dist, label)
        for dist, label in zip(distances, labels)
        if distance_in_range(dist, radius, range_filter, is_ip)
    ]
    return [d for d, _ in kept], [label for _, label in kept]


def merge_range_results(
    distances_per_query: Sequence[Sequence[float]],
    labels_per_query: Sequence[Sequence[int]],
) -> RangeSearchResult:
    """Join per-query results, all already in range, into one RangeSearchResult."""
    if len(distances_per_query) != len(labels_per_query):
        raise KnowhereError(
            f"result distances size {len(distances_per_query)} not equal to "
            f"result labels size {len(labels_per_query)}"
        )
    lims = [0]
    distances: list[float] = []
    labels: list[int] = []
    for dists, labs in zip(distances_per_query, labels_per_query):
        if len(dists) != len(labs):
            raise KnowhereError(
                f"distances' size {len(dists)} not equal to labels' size {len(labs)}"
            )
        distances.extend(dists)
        labels.extend(labs)
        lims.append(len(distances))
    return RangeSearchResult(lims, distances, labels)