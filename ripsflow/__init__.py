"""
The :mod:`ripsflow` module builds filtered Vietoris-Rips complexes of point clouds.

A :class:`RipsComplex` computes the weighted Rips graph of a point cloud once,
and fills any number of :class:`SimplexTree` objects with its flag complex up to
a requested dimension. The resulting filtration is ready to be consumed by
persistent homology algorithms.

To do:
======
- Currently, __version__ must be manually updated in _version.py and setup.py.
  This should be automated to ensure agreement.
"""

from ._version import __version__

from ripsflow.keepers.simplex_tree import SimplexTree
from ripsflow.methods.classes import RipsComplex
from ripsflow.metrics import euclidean_distance, squared_euclidean_distance
from ripsflow.utils import read_off_points, load_points
from ripsflow._logging import set_verbose
