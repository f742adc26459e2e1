"""
Distance functions between points.

Any binary callable returning a non-negative, symmetric dissimilarity can be
used to build a Rips complex. The functions below cover the common cases.
"""

from functools import partial

import numpy as np
import scipy.spatial.distance as ssd


def euclidean_distance(p, q):
    """ Euclidean distance between two points given by their coordinates.

    The points are assumed to have the same dimension.

    Parameters
    ----------
    p, q : array-like, (dim, )
        Coordinates of the two points.

    Returns
    -------
    d : `float`
        The Euclidean distance.
    """
    return float(np.sqrt(squared_euclidean_distance(p, q)))


def squared_euclidean_distance(p, q):
    """ Square of the Euclidean distance between two points. """
    diff = np.asarray(p, dtype=float) - np.asarray(q, dtype=float)
    return float(np.dot(diff, diff))


def _scipy_metric(u, v, metric='euclidean', **kwargs):
    # point names must not collide with metric keywords (minkowski's ``p``)
    return float(ssd.cdist(np.atleast_2d(np.asarray(u, dtype=float)),
                           np.atleast_2d(np.asarray(v, dtype=float)),
                           metric=metric, **kwargs)[0, 0])


def get_distance_function(distance=None, **kwargs):
    """ Resolve a distance argument to a binary callable.

    Parameters
    ----------
    distance : {`None`, `str`, callable}
        - `None` : Euclidean distance.
        - `str` : name of a metric supported by ``scipy.spatial.distance.cdist``
          (e.g., 'cityblock', 'chebyshev', 'sqeuclidean').
        - callable : returned unchanged.
    **kwargs : `dict`, optional
        Extra arguments to the metric, used only when ``distance`` is a `str`.

    Returns
    -------
    fn : callable
        Function of the form ``fn(p, q) -> float``.
    """
    if distance is None:
        return euclidean_distance
    if isinstance(distance, str):
        return partial(_scipy_metric, metric=distance, **kwargs)
    if callable(distance):
        return distance
    raise TypeError("Unrecognized type for distance, must be one of [None, str, callable].")


def pairwise_distances(points, metric='euclidean', **kwargs):
    """ Compute the matrix of pairwise distances between points.

    Parameters
    ----------
    points : array-like, (n_points, dim)
        The point cloud.
    metric : `str` or callable, optional
        The distance metric to use passed to `scipy.spatial.distance.cdist`.
    **kwargs : `dict`, optional
        Extra arguments to metric, passed to `scipy.spatial.distance.cdist`.

    Returns
    -------
    d : `numpy.ndarray`, (n_points, n_points)
        Symmetric distance matrix.
    """
    points = np.asarray(points, dtype=float)
    if points.size == 0:
        return np.zeros((0, 0))
    if points.ndim == 1:
        points = points.reshape(-1, 1)
    return ssd.cdist(points, points, metric=metric, **kwargs)
