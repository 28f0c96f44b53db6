"""Metric type names and their mapping to distance kinds."""

from __future__ import annotations

import enum

from knowhere.errors import InvalidMetricTypeError

L2 = "L2"
IP = "IP"
COSINE = "COSINE"
HAMMING = "HAMMING"
JACCARD = "JACCARD"
TANIMOTO = "TANIMOTO"
SUBSTRUCTURE = "SUBSTRUCTURE"
SUPERSTRUCTURE = "SUPERSTRUCTURE"


class MetricType(enum.Enum):
    """Distance kinds used by the search routines."""

    L2 = "L2"
    INNER_PRODUCT = "INNER_PRODUCT"
    HAMMING = "HAMMING"
    JACCARD = "JACCARD"
    TANIMOTO = "TANIMOTO"
    SUBSTRUCTURE = "SUBSTRUCTURE"
    SUPERSTRUCTURE = "SUPERSTRUCTURE"


class RaftDistanceType(enum.Enum):
    """Distance kinds understood by the GPU search backend."""

    L2_EXPANDED = "L2Expanded"
    INNER_PRODUCT = "InnerProduct"
    HAMMING_UNEXPANDED = "HammingUnexpanded"
    JACCARD_EXPANDED = "JaccardExpanded"


_METRIC_MAP = {
    L2: MetricType.L2,
    IP: MetricType.INNER_PRODUCT,
    COSINE: MetricType.INNER_PRODUCT,
    HAMMING: MetricType.HAMMING,
    JACCARD: MetricType.JACCARD,
    TANIMOTO: MetricType.TANIMOTO,
    SUBSTRUCTURE: MetricType.SUBSTRUCTURE,
    SUPERSTRUCTURE: MetricType.SUPERSTRUCTURE,
}

_RAFT_MAP = {
    L2: RaftDistanceType.L2_EXPANDED,
    IP: RaftDistanceType.INNER_PRODUCT,
    HAMMING: RaftDistanceType.HAMMING_UNEXPANDED,
    JACCARD: RaftDistanceType.JACCARD_EXPANDED,
}


def to_metric_type(name: str) -> MetricType:
    """Map a metric name (case-insensitive) to a MetricType."""
    try:
        return _METRIC_MAP[name.upper()]
    except KeyError:
        raise InvalidMetricTypeError(f"invalid metric type {name}") from None


def to_raft_distance_type(name: str) -> RaftDistanceType:
    """Map a metric name (case-insensitive) to a GPU distance kind."""
    try:
        return _RAFT_MAP[name.upper()]
    except KeyError:
        raise InvalidMetricTypeError(f"invalid metric type {name}") from None


def is_metric_type(name: str, expected: str) -> bool:
    """Compare two metric names ignoring case."""
    return name.upper() == expected.upper()