import math
import numbers

import numpy as np


def is_consistent_point_cloud(points):
    """ Return `True` if all points are coordinate sequences of the same (positive) length.

    An empty point cloud is consistent. Strings and scalars are not coordinate sequences.
    """
    dims = set()
    for point in points:
        if isinstance(point, (str, bytes)) or not hasattr(point, '__len__'):
            return False
        dims.add(len(point))
    return len(dims) <= 1 and 0 not in dims


def check_threshold(threshold):
    """ Raises an error if the threshold is not a real number or is NaN. """
    if isinstance(threshold, bool) or not isinstance(threshold, numbers.Real):
        raise TypeError("Unrecognized type for threshold, must be a real number.")
    if threshold != threshold:
        raise ValueError("Threshold must not be NaN.")


def check_max_dimension(max_dimension):
    """ Raises an error if ``max_dimension`` is not a non-negative integer. """
    if isinstance(max_dimension, bool) or not isinstance(max_dimension, numbers.Integral):
        raise TypeError("Unrecognized type for max_dimension, must be an int.")
    if max_dimension < 0:
        raise ValueError("max_dimension must be non-negative.")


def is_valid_weight(weight):
    """ Return `True` if ``weight`` is a non-negative, non-NaN real number.

    Any ordered number type is accepted (e.g., `fractions.Fraction`, `decimal.Decimal`).
    """
    if isinstance(weight, bool) or not isinstance(weight, numbers.Number):
        return False
    if isinstance(weight, numbers.Complex) and not isinstance(weight, numbers.Real):
        return False
    # NaN is the only value not equal to itself
    return weight == weight and weight >= 0


def is_symmetric_pair(w_ij, w_ji, rtol=1e-9, atol=1e-12):
    """ Return `True` if two evaluations of a distance agree up to rounding. """
    return math.isclose(float(w_ij), float(w_ji), rel_tol=rtol, abs_tol=atol)


def check_symmetric(A):
    """ Raises AssertionError if the matrix is not symmetric. """
    np.testing.assert_allclose(A, A.T, err_msg='Matrix is not symmetric.')


def check_distance_matrix(A):
    """ Raises AssertionError if the distance matrix is not square, symmetric and non-negative."""
    assert A.ndim == 2, "Distance matrix must be 2-dimensional."
    assert A.shape[0] == A.shape[1], "Distance matrix must have the same number of rows as columns."
    assert not np.isnan(A).any(), "Distance matrix must not contain NaN values."
    check_symmetric(A)
    if A.size > 0:
        assert np.min(A) >= 0., "Distance matrix must be non-negative."
