"""
Elementwise helpers on fixed-length real vectors.

Vectors are 1-D float64 numpy arrays. Every vector of one minimizer run
shares the length of the start point; mixing lengths raises
:class:`DimensionMismatchError`.
"""
from typing import Sequence, Union

import numpy as np
from numpy.typing import NDArray

from .exceptions import DimensionMismatchError

Vector = NDArray[np.float64]
VectorLike = Union[Sequence[float], NDArray[np.floating]]


def as_vector(values: VectorLike) -> Vector:
    """
    Convert *values* into a fresh 1-D float vector.

    Args:
        values: Any sequence or array of real numbers.

    Returns:
        Independent float64 copy, flattened to 1-D.

    Raises:
        ValueError: If *values* is empty.
    """
    vec = np.array(values, dtype=np.float64).ravel()
    if vec.size == 0:
        raise ValueError("Vector must have at least one element")
    return vec


def check_length(v: Vector, n: int) -> None:
    """Raise DimensionMismatchError unless ``len(v) == n``."""
    if v.shape[0] != n:
        raise DimensionMismatchError(n, v.shape[0])


def clone(v: Vector) -> Vector:
    return v.copy()


def negate(v: Vector) -> Vector:
    return -v


def dot(a: Vector, b: Vector) -> float:
    """Dot product of two equal-length vectors as a Python float."""
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    check_length(b, a.shape[0])
    return float(np.dot(a, b))


def add_scaled(x: Vector, alpha: float, d: Vector) -> None:
    """In place ``x[i] += alpha * d[i]``."""
    check_length(d, x.shape[0])
    x += alpha * d


def shifted(x: Vector, alpha: float, d: Vector) -> Vector:
    """Return ``x + alpha * d`` as a new vector; *x* is left untouched."""
    out = x.copy()
    add_scaled(out, alpha, d)
    return out
