"""Names of benchmark data sets and the facts encoded in them.

A data set name has the form ``<name>-<dim>-<metric>``, optionally followed
by ``-range`` or ``-range-multi`` for range-search ground truth. The data
itself lives in ``<test name>.hdf5``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from knowhere.errors import KnowhereError

HDF5_POSTFIX = ".hdf5"
HDF5_DATASET_TRAIN = "train"
HDF5_DATASET_TEST = "test"
HDF5_DATASET_NEIGHBORS = "neighbors"
HDF5_DATASET_DISTANCES = "distances"
HDF5_DATASET_LIMS = "lims"
HDF5_DATASET_RADIUS = "radius"

METRIC_IP_STR = "angular"
METRIC_L2_STR = "euclidean"
METRIC_HAM_STR = "hamming"
METRIC_JAC_STR = "jaccard"
METRIC_TAN_STR = "tanimoto"

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")


@dataclass(frozen=True)
class AnnTestName:
    """A parsed benchmark data set name."""

    name: str
    dim: int
    metric: str

    @property
    def file_name(self) -> str:
        """Name of the HDF5 file holding the data set."""
        return self.name + HDF5_POSTFIX

    @property
    def needs_normalization(self) -> bool:
        """Whether train and test vectors are normalised on loading."""
        return self.metric == METRIC_IP_STR

    @property
    def is_binary(self) -> bool:
        """Whether the data set holds binary vectors."""
        return self.metric in (METRIC_HAM_STR, METRIC_JAC_STR, METRIC_TAN_STR)


def _parse_int(text: str, name: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise KnowhereError(f"no dimension in test name {name!r}")
    return int(match.group(1))


def _parse_name_and_dim(name: str) -> tuple[int, int]:
    """Return the dimension and the position just after the second dash."""
    if not name:
        raise KnowhereError("ann test name not set")
    pos1 = name.find("-")
    if pos1 < 0:
        raise KnowhereError(f"malformed test name {name!r}")
    pos2 = name.find("-", pos1 + 1)
    if pos2 < 0:
        raise KnowhereError(f"malformed test name {name!r}")
    return _parse_int(name[pos1 + 1 : pos2], name), pos2 + 1


def _parse_with_suffix(name: str, suffix: str) -> AnnTestName:
    dim, pos1 = _parse_name_and_dim(name)
    pos2 = name.find("-", pos1)
    if pos2 < 0:
        raise KnowhereError(f"test name {name!r} lacks the {suffix!r} suffix")
    if name[pos2 + 1 :] != suffix:
        raise KnowhereError(f"test name {name!r} does not end with {suffix!r}")
    return AnnTestName(name=name, dim=dim, metric=name[pos1:pos2])


def parse_ann_test_name(name: str) -> AnnTestName:
    """Parse ``<name>-<dim>-<metric>``."""
    dim, pos = _parse_name_and_dim(name)
    return AnnTestName(name=name, dim=dim, metric=name[pos:])


def parse_ann_test_name_with_range(name: str) -> AnnTestName:
    """Parse ``<name>-<dim>-<metric>-range``."""
    return _parse_with_suffix(name, "range")


def parse_ann_test_name_with_range_multi(name: str) -> AnnTestName:
    """Parse ``<name>-<dim>-<metric>-range-multi``."""
    return _parse_with_suffix(name, "range-multi")