import networkx as nx
import numpy as np
from tqdm import tqdm

from .. import checks
from ..metrics import get_distance_function
from ..utils import stack_triu_
from .._logging import _gen_logger

logger = _gen_logger(__name__)


def rips_edges(points, threshold, distance=None, check_symmetry=True, progress=False):
    """ Get the weighted edges of the Rips graph of a point cloud.

    Parameters
    ----------
    points : sequence
        The points, indexed from :math:`0, 1, ..., n-1`. Each point is passed as is
        to ``distance``.
    threshold : `float`
        Two points are connected if their distance is at most ``threshold``.
    distance : {`None`, `str`, callable}
        Distance between two points, see ``ripsflow.metrics.get_distance_function``.
        Default is the Euclidean distance.
    check_symmetry : `bool`
        If `True`, also evaluate ``distance(points[j], points[i])`` and raise a
        ValueError if it differs from ``distance(points[i], points[j])``.
        This doubles the number of distance evaluations.
    progress : `bool`
        If `True`, show a progress bar over the points.

    Returns
    -------
    edges : `list` [(`int`, `int`, `float`)]
        Edges ``(i, j, weight)`` with ``i < j``, ordered lexicographically by ``(i, j)``.
    """
    distance = get_distance_function(distance)
    n = len(points)
    edges = []
    for i in tqdm(range(n), desc="Computing Rips edges", colour="green", leave=False, disable=not progress):
        for j in range(i + 1, n):
            w = distance(points[i], points[j])
            if not checks.is_valid_weight(w):
                raise ValueError(f"Distance between points {i} and {j} is {w}, distances must be non-negative.")
            if check_symmetry:
                w_ji = distance(points[j], points[i])
                if not checks.is_valid_weight(w_ji) or not checks.is_symmetric_pair(w, w_ji):
                    raise ValueError(f"Distance is not symmetric between points {i} and {j}: {w} != {w_ji}.")
            if w <= threshold:
                edges.append((i, j, float(w)))

    logger.debug(f"Rips graph on {n} points with threshold {threshold} has {len(edges)} edges.")
    return edges


def rips_edges_from_distance_matrix(d, threshold):
    """ Get the weighted edges of the Rips graph from a distance matrix.

    Parameters
    ----------
    d : {`numpy.ndarray`, `pandas.DataFrame`}, (n, n)
        Symmetric, non-negative distance matrix. Row (and column) ``i`` corresponds to vertex ``i``.
    threshold : `float`
        Two points are connected if their distance is at most ``threshold``.

    Returns
    -------
    edges : `list` [(`int`, `int`, `float`)]
        Edges ``(i, j, weight)`` with ``i < j``, ordered lexicographically by ``(i, j)``.
    """
    d = np.asarray(d, dtype=float)
    checks.check_distance_matrix(d)

    weights = stack_triu_(d, name='weight')
    weights = weights[weights <= threshold]
    edges = [(int(i), int(j), float(w)) for (i, j), w in weights.items()]

    logger.debug(f"Rips graph on {d.shape[0]} points with threshold {threshold} has {len(edges)} edges.")
    return edges


def rips_graph(num_vertices, edges):
    """ Build the weighted Rips graph.

    Parameters
    ----------
    num_vertices : `int`
        Number of vertices, labeled :math:`0, 1, ..., n-1`.
    edges : iterable of (`int`, `int`, `float`)
        Weighted edges.

    Returns
    -------
    G : `networkx.Graph`
        The graph with edge attribute 'weight'.
    """
    G = nx.Graph()
    G.add_nodes_from(range(num_vertices))
    G.add_weighted_edges_from(edges, weight='weight')
    return G
