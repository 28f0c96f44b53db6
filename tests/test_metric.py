import pytest

from knowhere import metric
from knowhere.errors import InvalidMetricTypeError
from knowhere.metric import (
    MetricType,
    RaftDistanceType,
    is_metric_type,
    to_metric_type,
    to_raft_distance_type,
)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("L2", MetricType.L2),
        ("l2", MetricType.L2),
        ("IP", MetricType.INNER_PRODUCT),
        ("cosine", MetricType.INNER_PRODUCT),
        ("Hamming", MetricType.HAMMING),
        ("JACCARD", MetricType.JACCARD),
        ("tanimoto", MetricType.TANIMOTO),
        ("substructure", MetricType.SUBSTRUCTURE),
        ("SUPERSTRUCTURE", MetricType.SUPERSTRUCTURE),
    ],
)
def test_to_metric_type(name, expected):
    assert to_metric_type(name) is expected


def test_to_metric_type_rejects_unknown():
    with pytest.raises(InvalidMetricTypeError):
        to_metric_type("manhattan")


@pytest.mark.parametrize(
    "name, expected",
    [
        ("l2", RaftDistanceType.L2_EXPANDED),
        ("ip", RaftDistanceType.INNER_PRODUCT),
        ("hamming", RaftDistanceType.HAMMING_UNEXPANDED),
        ("jaccard", RaftDistanceType.JACCARD_EXPANDED),
    ],
)
def test_to_raft_distance_type(name, expected):
    assert to_raft_distance_type(name) is expected


@pytest.mark.parametrize("name", ["COSINE", "TANIMOTO", "SUBSTRUCTURE", "foo"])
def test_to_raft_distance_type_rejects_unsupported(name):
    with pytest.raises(InvalidMetricTypeError):
        to_raft_distance_type(name)


def test_is_metric_type_ignores_case():
    assert is_metric_type("cosine", metric.COSINE) is True
    assert is_metric_type("l2", metric.IP) is False