"""
Flag complex expansion of a simplex tree.

The expansion works on the sibling lists of the simplex tree. Let ``P`` be a
simplex and ``P + a``, ``P + b`` (``a < b``) two of its children. The vertices
of ``P`` are all adjacent to ``a`` and to ``b``, so if the edge ``{a, b}`` is in
the complex then every facet of ``P + a + b`` is in the complex and the simplex
is added as a child of ``P + a``. The candidates for extending ``P + a`` are
therefore the later siblings of ``a`` adjacent to ``a``, that is the common
neighbors of all vertices of ``P + a`` larger than ``a``. Each simplex is
generated once, from its vertices in ascending order.
"""

from .. import checks
from .._logging import _gen_logger

logger = _gen_logger(__name__)


def _expand_siblings(tree, parent, parent_dim, max_dimension):
    """ Add the cofaces of the children of ``parent``, recursively.

    Returns the number of simplices added.
    """
    # new simplices are grandchildren of parent
    if parent_dim + 2 > max_dimension:
        return 0

    num_added = 0
    siblings = tree.children(parent)
    for ix, (a, node_a) in enumerate(siblings):
        vertex_a = tree.child(None, a)
        filtration_a = tree.filtration(node_a)
        for b, node_b in siblings[ix + 1:]:
            edge = tree.child(vertex_a, b)  # edges {a, b} with b > a
            if edge is None or tree.child(node_a, b) is not None:
                continue
            tree._insert_coface(node_a, b, max(filtration_a, tree.filtration(node_b), tree.filtration(edge)))
            num_added += 1

        num_added += _expand_siblings(tree, node_a, parent_dim + 1, max_dimension)
    return num_added


def expand_flag_complex(tree, max_dimension):
    """ Expand the simplex tree, in place, to the flag complex of its 1-skeleton.

    Every simplex of dimension at most ``max_dimension`` whose facets are all in the
    complex is added, with filtration value equal to the maximum filtration value
    of its facets. If the 1-skeleton carries a Rips graph, this is the maximum
    pairwise distance between the vertices of the simplex.

    Parameters
    ----------
    tree : `ripsflow.keepers.simplex_tree.SimplexTree`
        The simplex tree, expected to hold (at least) the vertices and edges.
    max_dimension : `int`
        Maximal dimension of the added simplices, ``max_dimension >= 0``.
        Expansion stops earlier if no larger clique exists.

    Returns
    -------
    num_added : `int`
        Number of simplices added to the complex.
    """
    checks.check_max_dimension(max_dimension)

    num_added = _expand_siblings(tree, None, -1, max_dimension)

    logger.trace(f"Expansion to dimension {max_dimension} added {num_added} simplices, "
                 f"complex has dimension {tree.dimension()}.")
    return num_added
