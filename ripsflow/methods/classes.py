"""
Classes to build Rips complexes.
"""

import networkx as nx
import numpy as np

from .. import checks
from .._logging import _gen_logger, set_verbose
from .._utils import _docstring_parameter, _desc_threshold, _desc_max_dimension
from ..keepers.simplex_tree import SimplexTree
from ..metrics import get_distance_function
from .expansion import expand_flag_complex
from .tools import rips_edges, rips_edges_from_distance_matrix, rips_graph

logger = _gen_logger(__name__)


@_docstring_parameter(desc_threshold=_desc_threshold)
class RipsComplex:
    """\
    A class to build Vietoris-Rips complexes of a point cloud.

    The weighted Rips graph (the 1-skeleton) is computed once, at construction,
    and is reused by every call to :meth:`create_complex`.

    Parameters
    ----------
    points : sequence
        The point cloud. The vertex handle of a point is its position in ``points``.
        With the default (or a named) distance, points are coordinate sequences and a
        1-dimensional `numpy.ndarray` is read as a cloud of points on the line.
        With a callable distance, points may be any objects the callable accepts
        (e.g., indices into a precomputed table, or labels).
    {desc_threshold}
    distance : {{`None`, `str`, callable}}
        Distance between two points, passed to ``ripsflow.metrics.get_distance_function``.
        May be any symmetric, non-negative dissimilarity (e.g., the squared Euclidean
        distance). Default is the Euclidean distance.
    check_symmetry : `bool`
        If `True`, the distance is evaluated in both directions for every pair and an
        asymmetric distance makes the Rips complex invalid.
    verbose : {{`None`, `str`}}
        Logger verbosity, see ``ripsflow._logging.set_verbose``.
    progress : `bool`
        If `True`, show a progress bar while computing distances.

    Notes
    -----
    Points with inconsistent dimensions, or a distance that fails on the points, returns
    negative (or NaN) values or is not symmetric, make the Rips complex invalid, in which
    case :meth:`create_complex` returns `False`.
    """

    def __init__(self, points, threshold, distance=None, check_symmetry=True, verbose=None, progress=False):
        if verbose is not None:
            set_verbose(logger, verbose)

        checks.check_threshold(threshold)
        self._threshold = float(threshold)

        # built-in metrics need coordinates, a custom distance may take any object
        uses_coordinates = distance is None or isinstance(distance, str)
        if uses_coordinates and isinstance(points, np.ndarray) and points.ndim == 1:
            points = points.reshape(-1, 1)
        self._points = list(points)
        self._distance = get_distance_function(distance)

        edges = []
        self._valid = not uses_coordinates or checks.is_consistent_point_cloud(self._points)
        if self._valid:
            try:
                edges = rips_edges(self._points, self._threshold, self._distance,
                                   check_symmetry=check_symmetry, progress=progress)
            except (ValueError, TypeError) as e:
                logger.msg(f"Invalid distance: {e}")
                self._valid = False
        else:
            logger.msg("All points must be coordinate sequences with the same, non-zero length.")

        self._set_graph(len(self._points), edges)


    @classmethod
    def from_distance_matrix(cls, d, threshold, verbose=None):
        """ Construct a Rips complex from a distance matrix.

        Parameters
        ----------
        d : {`numpy.ndarray`, `pandas.DataFrame`}, (n, n)
            Symmetric, non-negative distance matrix.
        threshold : `float`
            Two points are connected if their distance is at most ``threshold``.
        verbose : {`None`, `str`}
            Logger verbosity.

        Returns
        -------
        rips : `RipsComplex`
        """
        if verbose is not None:
            set_verbose(logger, verbose)
        checks.check_threshold(threshold)

        rips = cls.__new__(cls)
        rips._threshold = float(threshold)
        rips._points = None
        rips._distance = None
        rips._valid = True
        edges = rips_edges_from_distance_matrix(d, rips._threshold)
        rips._set_graph(len(d), edges)
        return rips


    def _set_graph(self, num_points, edges):
        self._num_points = num_points
        self._edges = tuple(edges)
        self._graph = nx.freeze(rips_graph(num_points, self._edges))
        logger.debug(f"Rips graph: {self._graph}")


    @property
    def threshold(self):
        """ The Rips threshold. """
        return self._threshold


    @property
    def num_points(self):
        """ Number of points (vertices). """
        return self._num_points


    @property
    def points(self):
        """ The point cloud, or `None` if built from a distance matrix. """
        return self._points


    @property
    def graph(self):
        """ The frozen weighted Rips graph (`networkx.Graph`, edge attribute 'weight'). """
        return self._graph


    @property
    def edges(self):
        """ Weighted edges ``(i, j, weight)``, ``i < j``, of the Rips graph. """
        return list(self._edges)


    @property
    def is_valid(self):
        """ `False` if the point cloud or the distance violated the input requirements. """
        return self._valid


    @_docstring_parameter(desc_max_dimension=_desc_max_dimension)
    def create_complex(self, tree, max_dimension):
        """\
        Fill an empty simplex tree with the Rips complex.

        Vertices are inserted with filtration value 0 and edges with their length,
        then the 1-skeleton is expanded to its flag complex.

        Parameters
        ----------
        tree : `ripsflow.SimplexTree`
            The simplex tree to fill, must be empty.
        {desc_max_dimension}
        Returns
        -------
        success : `bool`
            `False` if ``tree`` is not empty or the Rips complex is invalid, in which
            case ``tree`` is left untouched.
        """
        checks.check_max_dimension(max_dimension)
        if not isinstance(tree, SimplexTree):
            raise TypeError("Unrecognized type for tree, must be ripsflow.SimplexTree.")

        if not tree.is_empty():
            logger.msg(f"Cannot create the Rips complex in a non-empty simplex tree ({tree.num_simplices()} simplices).")
            return False

        if not self._valid:
            logger.msg("Cannot create the Rips complex of an invalid point cloud.")
            return False

        for vertex in range(self._num_points):
            tree.insert_simplex([vertex], 0.)

        if max_dimension >= 1:
            for i, j, w in self._edges:
                tree.insert_simplex([i, j], w)

        expand_flag_complex(tree, max_dimension)

        logger.debug(f"Rips complex of dimension {tree.dimension()} with {tree.num_vertices()} vertices "
                     f"and {tree.num_simplices()} simplices.")
        return True
