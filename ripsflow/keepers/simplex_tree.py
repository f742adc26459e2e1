"""
simplex_tree
============

Storage of a filtered simplicial complex as a simplex tree.
"""

from itertools import combinations
import numbers

import pandas as pd

from .._utils import _docstring_parameter, _desc_expansion, _desc_max_dimension
from .._logging import _gen_logger
from ..methods.expansion import expand_flag_complex

logger = _gen_logger(__name__)

ROOT = 0


class SimplexRange:
    """ A restartable, sized sequence of simplex handles.

    Each call to ``iter`` starts a fresh traversal.

    Parameters
    ----------
    factory : callable
        Called without arguments, returns an iterator over simplex handles.
    size : callable
        Called without arguments, returns the number of simplices produced by one
        traversal started now.
    """

    def __init__(self, factory, size):
        self._factory = factory
        self._size = size


    def __iter__(self):
        return iter(self._factory())


    def __len__(self):
        return self._size()


class SimplexTree:
    """ A simplicial complex stored as an ordered trie of simplices.

    Each simplex is represented by the path from the root to one node, following
    its vertices in ascending order. Every node stores its vertex, its filtration
    value, its parent and its children keyed by vertex. Nodes are kept in an arena
    and a simplex is referred to by its integer node id (its *handle*).

    The complex is closed under taking faces: inserting a simplex also inserts all
    of its missing faces.

    Notes
    -----
    The root (node 0) represents the empty simplex and is never returned as a handle.
    """

    def __init__(self):
        self._vertex = [None]
        self._filtration = [0.]
        self._parent = [None]
        self._depth = [0]
        self._children = [{}]
        self._num_simplices_by_dimension = []
        self._filtration_order = None


    def __len__(self):
        return self.num_simplices()


    def __iter__(self):
        return iter(self.complex_simplex_range())


    def __contains__(self, vertices):
        return self.find(vertices) is not None


    @staticmethod
    def _canonical(vertices):
        """ Return the simplex as a sorted tuple of distinct vertex handles. """
        if isinstance(vertices, numbers.Integral):
            vertices = [vertices]
        simplex = set()
        for v in vertices:
            if isinstance(v, bool) or not isinstance(v, numbers.Integral):
                raise TypeError(f"Unrecognized vertex {v!r}, vertex handles must be integers.")
            simplex.add(int(v))
        return tuple(sorted(simplex))


    def _check_handle(self, simplex):
        if isinstance(simplex, bool) or not isinstance(simplex, numbers.Integral) \
           or not (ROOT < simplex < len(self._vertex)):
            raise KeyError(f"Unrecognized simplex handle {simplex!r}.")


    def _find(self, simplex):
        node = ROOT
        for v in simplex:
            node = self._children[node].get(v)
            if node is None:
                return None
        return node


    def _add_node(self, parent, vertex, filtration):
        node = len(self._vertex)
        self._vertex.append(vertex)
        self._filtration.append(float(filtration))
        self._parent.append(parent)
        self._depth.append(self._depth[parent] + 1)
        self._children.append({})
        self._children[parent][vertex] = node

        dim = self._depth[node] - 1
        if dim == len(self._num_simplices_by_dimension):
            self._num_simplices_by_dimension.append(0)
        self._num_simplices_by_dimension[dim] += 1
        self._filtration_order = None
        return node


    def _sorted_children(self, node):
        """ List of ``(vertex, child)`` pairs of ``node`` by ascending vertex. """
        children = self._children[node]
        return [(v, children[v]) for v in sorted(children)]


    def _node(self, simplex):
        if simplex is None:
            return ROOT
        self._check_handle(simplex)
        return simplex


    def children(self, simplex=None):
        """ Cofaces of a simplex that extend it by one larger vertex.

        Parameters
        ----------
        simplex : {`int`, `None`}
            Handle of the simplex. If `None`, the children of the empty simplex
            (the vertices) are returned.

        Returns
        -------
        children : `list` [(`int`, `int`)]
            Pairs ``(v, handle)`` by ascending vertex ``v``, where ``handle`` refers to
            the simplex with the vertices of ``simplex`` followed by ``v``.
        """
        return self._sorted_children(self._node(simplex))


    def child(self, simplex, vertex):
        """ Handle of the simplex ``simplex + vertex`` if it is a child of ``simplex``, else `None`. """
        return self._children[self._node(simplex)].get(vertex)


    def _insert_coface(self, simplex, vertex, filtration):
        """ Add ``simplex + vertex`` below ``simplex``, for ``vertex`` larger than all of its vertices.

        All other facets must already be in the complex; used by the flag expansion.
        """
        return self._add_node(self._node(simplex), vertex, filtration)


    def insert_simplex(self, vertices, filtration=0., faces_filtration=0.):
        """ Insert a simplex and all of its missing faces.

        Parameters
        ----------
        vertices : iterable of `int`
            Vertex handles of the simplex. Order and repetitions are ignored.
        filtration : `float`
            Filtration value of the simplex.
        faces_filtration : `float`
            Filtration value given to faces that are not yet in the complex.
            Faces already in the complex keep their filtration value.

        Returns
        -------
        inserted : `bool`
            `False` if the simplex was already in the complex, in which case
            nothing is modified.
        """
        simplex = self._canonical(vertices)
        if len(simplex) == 0:
            raise ValueError("Cannot insert the empty simplex.")

        if self._find(simplex) is not None:
            return False

        for size in range(1, len(simplex) + 1):
            value = filtration if size == len(simplex) else faces_filtration
            for face in combinations(simplex, size):
                # prefix faces are inserted by the previous size
                parent = self._find(face[:-1])
                if face[-1] not in self._children[parent]:
                    self._add_node(parent, face[-1], value)
        return True


    def find(self, vertices):
        """ Look up a simplex by its vertices.

        Parameters
        ----------
        vertices : iterable of `int`
            Vertex handles of the simplex, in any order.

        Returns
        -------
        simplex : {`int`, `None`}
            Handle of the simplex, or `None` if it is not in the complex.
        """
        simplex = self._canonical(vertices)
        if len(simplex) == 0:
            return None
        return self._find(simplex)


    def filtration(self, simplex):
        """ Filtration value of the simplex with handle ``simplex``. """
        self._check_handle(simplex)
        return self._filtration[simplex]


    def assign_filtration(self, simplex, filtration):
        """ Set the filtration value of a simplex.

        .. note::
           No check is made that the filtration stays non-decreasing with respect
           to faces, see :meth:`make_filtration_non_decreasing`.
        """
        self._check_handle(simplex)
        self._filtration[simplex] = float(filtration)
        self._filtration_order = None


    def dimension(self, simplex=None):
        """ Dimension of a simplex, or of the complex if ``simplex`` is `None`.

        The dimension of the empty complex is -1.
        """
        if simplex is None:
            return len(self._num_simplices_by_dimension) - 1
        self._check_handle(simplex)
        return self._depth[simplex] - 1


    def num_simplices(self):
        """ Number of simplices in the complex. """
        return len(self._vertex) - 1


    def num_vertices(self):
        """ Number of vertices in the complex. """
        return len(self._children[ROOT])


    def num_simplices_by_dimension(self):
        """ List with the number of simplices of each dimension ``0, ..., dimension()``. """
        return list(self._num_simplices_by_dimension)


    def is_empty(self):
        return self.num_simplices() == 0


    def simplex_vertex_range(self, simplex):
        """ Vertices of a simplex, in ascending order.

        Returns
        -------
        vertices : `tuple` [`int`]
        """
        self._check_handle(simplex)
        vertices = []
        node = simplex
        while node != ROOT:
            vertices.append(self._vertex[node])
            node = self._parent[node]
        return tuple(reversed(vertices))


    def boundary_simplex_range(self, simplex):
        """ Handles of the facets of a simplex.

        The facet obtained by removing the i-th vertex comes i-th. Vertices have no facets.
        """
        vertices = self.simplex_vertex_range(simplex)
        if len(vertices) == 1:
            return []
        return [self._find(vertices[:i] + vertices[i + 1:]) for i in range(len(vertices))]


    def _depth_first(self, dim):
        if dim < 0:
            return
        stack = [node for _, node in reversed(self._sorted_children(ROOT))]
        while stack:
            node = stack.pop()
            yield node
            # children of node have dimension depth[node]
            if self._depth[node] <= dim:
                stack.extend(child for _, child in reversed(self._sorted_children(node)))


    def skeleton_simplex_range(self, dim):
        """ Simplices of dimension at most ``dim``.

        Simplices are produced depth-first, siblings by ascending vertex, so a
        simplex always comes after its prefix faces. This is not the filtration order.

        Parameters
        ----------
        dim : `int`
            Maximal dimension of the simplices produced.

        Returns
        -------
        simplices : `SimplexRange`
            Restartable sequence of simplex handles.
        """
        return SimplexRange(lambda: self._depth_first(dim),
                            lambda: sum(self._num_simplices_by_dimension[:max(dim + 1, 0)]))


    def complex_simplex_range(self):
        """ All simplices, depth-first. See :meth:`skeleton_simplex_range`. """
        return self.skeleton_simplex_range(self.dimension())


    def _filtration_key(self, simplex):
        return (self._filtration[simplex], self._depth[simplex], self.simplex_vertex_range(simplex))


    def filtration_simplex_range(self):
        """ All simplices in filtration order.

        Simplices are sorted by filtration value, then by dimension, then
        lexicographically by their ascending vertices. Since filtration values
        are non-decreasing with respect to faces, every simplex comes after all
        of its faces.

        The order is computed once and kept until the complex is modified.

        Returns
        -------
        simplices : `SimplexRange`
            Restartable sequence of simplex handles.
        """
        if self._filtration_order is None:
            self._filtration_order = sorted(range(1, len(self._vertex)), key=self._filtration_key)
            logger.trace(f"Sorted {len(self._filtration_order)} simplices by filtration.")
        order = self._filtration_order
        return SimplexRange(lambda: iter(order), lambda: len(order))


    def make_filtration_non_decreasing(self):
        """ Raise filtration values so that no simplex has a lower value than its faces.

        Returns
        -------
        modified : `bool`
            `True` if any filtration value was changed.
        """
        modified = False
        for simplex in sorted(range(1, len(self._vertex)), key=self._depth.__getitem__):
            facets = self.boundary_simplex_range(simplex)
            if not facets:
                continue
            bound = max(self._filtration[f] for f in facets)
            if bound > self._filtration[simplex]:
                self._filtration[simplex] = bound
                modified = True
        if modified:
            self._filtration_order = None
        return modified


    @_docstring_parameter(desc=_desc_expansion, desc_max_dimension=_desc_max_dimension)
    def expansion(self, max_dimension):
        """\
        {desc}
        Parameters
        ----------
        {desc_max_dimension}
        Returns
        -------
        num_added : `int`
            Number of simplices added to the complex.
        """
        return expand_flag_complex(self, max_dimension)


    def to_frame(self):
        """ Table of the simplices in filtration order.

        Returns
        -------
        df : `pandas.DataFrame`
            With columns 'simplex' (`tuple` of vertices), 'dimension' and 'filtration'.
        """
        order = list(self.filtration_simplex_range())
        df = pd.DataFrame({'simplex': [self.simplex_vertex_range(s) for s in order],
                           'dimension': [self._depth[s] - 1 for s in order],
                           'filtration': [self._filtration[s] for s in order]},
                          columns=['simplex', 'dimension', 'filtration'])
        return df
