"""In-place L2 normalisation of float vectors."""

from __future__ import annotations

import math

import numpy as np

FLOAT_ACCURACY = 0.00001


def _require_float_array(x: object) -> np.ndarray:
    if not isinstance(x, np.ndarray) or not np.issubdtype(x.dtype, np.floating):
        raise TypeError("expected a floating point numpy array")
    return x


def normalize_vec(x: np.ndarray) -> float:
    """Scale ``x`` in place to unit length and return its former length.

    Vectors of zero length, or already within tolerance of unit length, are
    left untouched and 1.0 is returned.
    """
    x = _require_float_array(x)
    flat = x.reshape(-1)
    norm_sqr = float(np.dot(flat, flat))
    if norm_sqr > 0 and abs(1.0 - norm_sqr) > FLOAT_ACCURACY:
        norm = math.sqrt(norm_sqr)
        x /= x.dtype.type(norm)
        return norm
    return 1.0


def normalize_vecs(x: np.ndarray) -> list[float]:
    """Normalise every row of a 2-D array in place and return the former lengths."""
    x = _require_float_array(x)
    if x.ndim != 2:
        raise ValueError("expected a 2-D array")
    return [normalize_vec(row) for row in x]


def normalize(x: np.ndarray) -> None:
    """Normalise every row of a 2-D array in place."""
    normalize_vecs(x)