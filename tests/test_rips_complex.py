"""Tests for the Rips complex construction."""
from fractions import Fraction
from itertools import combinations

import networkx as nx
import numpy as np
import pytest

from ripsflow import RipsComplex, SimplexTree, euclidean_distance, squared_euclidean_distance
from ripsflow.metrics import pairwise_distances


def _build(rips, max_dimension):
    st = SimplexTree()
    assert rips.create_complex(st, max_dimension)
    return st


class TestRipsDocOffFile:
    """ Rips complex of the 7 points of ``alphacomplexdoc.off`` with threshold 12. """

    def test_dimension_1(self, doc_points):
        rips = RipsComplex(doc_points, 12.0, euclidean_distance)
        st = _build(rips, 1)
        assert st.dimension() == 1
        assert st.num_vertices() == 7
        assert st.num_simplices() == 18

        for simplex in st.skeleton_simplex_range(0):
            assert st.filtration(simplex) == 0.0

        for simplex in st.skeleton_simplex_range(1):
            if st.dimension(simplex) == 1:
                u, v = st.simplex_vertex_range(simplex)
                assert st.filtration(simplex) == pytest.approx(euclidean_distance(doc_points[u], doc_points[v]))

    def test_dimension_2(self, doc_points):
        st = _build(RipsComplex(doc_points, 12.0, euclidean_distance), 2)
        assert st.dimension() == 2
        assert st.num_vertices() == 7
        assert st.num_simplices() == 23

        f = lambda vertices: st.filtration(st.find(vertices))
        assert f([0, 1, 2]) == pytest.approx(max(f([0, 1]), f([0, 2]), f([1, 2])))
        assert f([4, 5, 6]) == pytest.approx(max(f([4, 5]), f([5, 6]), f([4, 6])))

    def test_dimension_3(self, doc_points):
        st = _build(RipsComplex(doc_points, 12.0, euclidean_distance), 3)
        assert st.dimension() == 3
        assert st.num_vertices() == 7
        assert st.num_simplices() == 24

        f = lambda vertices: st.filtration(st.find(vertices))
        assert f([0, 1, 2, 3]) == pytest.approx(max(f([0, 1, 2]), f([1, 2, 3]), f([0, 1, 3]), f([0, 2, 3])))

    def test_repeated_calls_are_independent(self, doc_points):
        rips = RipsComplex(doc_points, 12.0)
        counts = [_build(rips, dim).num_simplices() for dim in [3, 1, 2, 3]]
        assert counts == [24, 18, 23, 24]
        assert len(rips.edges) == 11


class TestRipsFromPoints:
    def test_regular_simplex(self, basis_points):
        rips = RipsComplex(basis_points, 2.0, squared_euclidean_distance)
        st = _build(rips, 3)

        assert len(st.filtration_simplex_range()) == 15
        assert len(list(st.filtration_simplex_range())) == 15
        assert st.num_simplices() == 15
        assert st.dimension() == 3
        assert st.num_vertices() == 4

        for simplex in st.filtration_simplex_range():
            if st.dimension(simplex) == 0:
                assert st.filtration(simplex) == pytest.approx(0.0)
            else:
                assert st.filtration(simplex) == pytest.approx(2.0)

    def test_non_empty_tree(self, basis_points):
        rips = RipsComplex(basis_points, 2.0, squared_euclidean_distance)
        st = SimplexTree()
        st.insert_simplex([0, 7], 1.0)
        assert not rips.create_complex(st, 3)
        assert st.num_simplices() == 3

        st = _build(rips, 1)
        assert not rips.create_complex(st, 3)
        assert st.dimension() == 1

    def test_string_metric(self, basis_points):
        rips = RipsComplex(basis_points, 2.0, 'sqeuclidean')
        assert _build(rips, 3).num_simplices() == 15
        assert _build(RipsComplex(basis_points, 1.9, 'sqeuclidean'), 3).num_simplices() == 4


class TestDegenerateInputs:
    def test_empty_cloud(self):
        rips = RipsComplex([], 1.0)
        st = _build(rips, 3)
        assert st.is_empty()
        assert st.dimension() == -1
        assert rips.num_points == 0

    def test_single_point(self):
        st = _build(RipsComplex([[1.0, 2.0]], 1.0), 2)
        assert st.num_simplices() == 1
        assert st.dimension() == 0

    def test_duplicate_points(self):
        rips = RipsComplex([[0.0, 0.0], [0.0, 0.0], [1.0, 0.0]], 0.5)
        assert rips.edges == [(0, 1, 0.0)]
        st = _build(rips, 2)
        assert st.num_simplices() == 4
        assert st.filtration(st.find([0, 1])) == 0.0

    def test_zero_threshold(self, doc_points):
        st = _build(RipsComplex(doc_points, 0.0), 3)
        assert st.num_simplices() == 7
        assert st.dimension() == 0

    def test_max_dimension_zero(self, doc_points):
        st = _build(RipsComplex(doc_points, 12.0), 0)
        assert st.num_simplices() == 7
        assert st.dimension() == 0

    def test_max_dimension_beyond_cliques(self, doc_points):
        st = _build(RipsComplex(doc_points, 12.0), 10)
        assert st.dimension() == 3
        assert st.num_simplices() == 24


class TestInvalidInputs:
    def test_inconsistent_dimensions(self):
        rips = RipsComplex([[0.0, 0.0], [1.0]], 1.0)
        assert not rips.is_valid
        st = SimplexTree()
        assert not rips.create_complex(st, 2)
        assert st.is_empty()

    def test_negative_distance(self):
        rips = RipsComplex([[0.0], [1.0]], 1.0, lambda p, q: -1.0)
        assert not rips.is_valid
        assert not rips.create_complex(SimplexTree(), 1)

    def test_bad_arguments(self, basis_points):
        rips = RipsComplex(basis_points, 2.0)
        with pytest.raises(ValueError):
            rips.create_complex(SimplexTree(), -1)
        with pytest.raises(TypeError):
            rips.create_complex(SimplexTree(), 1.5)
        with pytest.raises(TypeError):
            rips.create_complex(None, 1)
        with pytest.raises(TypeError):
            RipsComplex(basis_points, '2.0')

    def test_distance_failing_on_points(self):
        rips = RipsComplex([[0.0], [1.0]], 1.0, lambda p, q: p - q)
        assert not rips.is_valid
        assert not rips.create_complex(SimplexTree(), 1)

    def test_asymmetric_distance(self):
        def asymmetric(p, q):
            return 0.5 if p[0] < q[0] else 5.0

        rips = RipsComplex([[0.0], [1.0]], 1.0, asymmetric)
        assert not rips.is_valid
        st = SimplexTree()
        assert not rips.create_complex(st, 1)
        assert st.is_empty()

        rips = RipsComplex([[0.0], [1.0]], 1.0, asymmetric, check_symmetry=False)
        assert rips.is_valid
        assert rips.edges == [(0, 1, 0.5)]

    def test_scalar_points_need_custom_distance(self):
        assert not RipsComplex([0.0, 1.0], 1.0).is_valid
        assert not RipsComplex(["ab", "cd"], 1.0).is_valid


class TestCustomPoints:
    def test_index_points_with_table_distance(self):
        D = [[0.0, 1.0, 2.0],
             [1.0, 0.0, 1.5],
             [2.0, 1.5, 0.0]]
        rips = RipsComplex(range(3), 2.0, lambda i, j: D[i][j])
        assert rips.is_valid
        st = _build(rips, 2)
        assert st.num_simplices() == 7
        assert st.filtration(st.find([0, 1, 2])) == 2.0
        assert st.filtration(st.find([1, 2])) == 1.5

    def test_label_points(self):
        rips = RipsComplex(["a", "bb", "ccc"], 1.0, lambda p, q: abs(len(p) - len(q)))
        assert rips.is_valid
        assert rips.edges == [(0, 1, 1.0), (1, 2, 1.0)]
        st = _build(rips, 2)
        assert st.num_simplices() == 5

    def test_one_dimensional_array(self):
        rips = RipsComplex(np.array([0.0, 1.0, 3.0]), 1.0)
        assert rips.is_valid
        assert rips.edges == [(0, 1, 1.0)]
        assert RipsComplex(np.array([0.0, 1.0, 3.0]), 2.0, 'cityblock').edges == [(0, 1, 1.0), (1, 2, 2.0)]

    def test_fraction_distances(self):
        points = [Fraction(0), Fraction(1, 2), Fraction(2)]
        rips = RipsComplex(points, 1, lambda p, q: abs(p - q))
        assert rips.is_valid
        assert rips.edges == [(0, 1, 0.5)]


class TestRipsProperties:
    def test_filtration_is_max_pairwise_distance(self, random_cloud):
        st = _build(RipsComplex(random_cloud, 0.6), 3)
        for simplex in st.complex_simplex_range():
            vertices = st.simplex_vertex_range(simplex)
            if len(vertices) == 1:
                assert st.filtration(simplex) == 0.0
                continue
            expected = max(euclidean_distance(random_cloud[u], random_cloud[v])
                           for u, v in combinations(vertices, 2))
            assert st.filtration(simplex) == pytest.approx(expected)

    def test_monotone_and_closed(self, random_cloud):
        st = _build(RipsComplex(random_cloud, 0.6), 3)
        for simplex in st.complex_simplex_range():
            vertices = st.simplex_vertex_range(simplex)
            for facet in st.boundary_simplex_range(simplex):
                assert facet is not None
                assert st.filtration(facet) <= st.filtration(simplex)
            for size in range(1, len(vertices)):
                for face in combinations(vertices, size):
                    assert face in st

    def test_filtration_order_respects_faces(self, random_cloud):
        st = _build(RipsComplex(random_cloud, 0.6), 3)
        position = {s: ix for ix, s in enumerate(st.filtration_simplex_range())}
        for simplex in st.complex_simplex_range():
            for facet in st.boundary_simplex_range(simplex):
                assert position[facet] < position[simplex]

    def test_threshold_monotonicity(self, random_cloud):
        counts = [_build(RipsComplex(random_cloud, t), 3).num_simplices()
                  for t in np.linspace(0., 1.5, 16)]
        assert counts == sorted(counts)
        assert counts[0] == len(random_cloud)

    def test_graph_is_frozen(self, doc_points):
        rips = RipsComplex(doc_points, 12.0)
        G = rips.graph
        assert nx.is_frozen(G)
        assert G.number_of_nodes() == 7
        assert G.number_of_edges() == 11
        assert G[0][1]['weight'] == pytest.approx(np.sqrt(37.))
        with pytest.raises(nx.NetworkXError):
            G.add_edge(0, 6)


class TestFromDistanceMatrix:
    def test_same_complex_as_points(self, doc_points):
        d = pairwise_distances(doc_points)
        rips_d = RipsComplex.from_distance_matrix(d, 12.0)
        rips_p = RipsComplex(doc_points, 12.0)
        assert rips_d.points is None
        assert [e[:2] for e in rips_d.edges] == [e[:2] for e in rips_p.edges]
        assert [e[2] for e in rips_d.edges] == pytest.approx([e[2] for e in rips_p.edges])

        st_d = _build(rips_d, 3)
        st_p = _build(rips_p, 3)
        assert st_d.num_simplices() == st_p.num_simplices() == 24
        assert st_d.filtration(st_d.find([0, 1, 2, 3])) == pytest.approx(st_p.filtration(st_p.find([0, 1, 2, 3])))

    def test_invalid_matrix_raises(self):
        with pytest.raises(AssertionError):
            RipsComplex.from_distance_matrix(np.array([[0., 1.], [2., 0.]]), 1.0)
        with pytest.raises(AssertionError):
            RipsComplex.from_distance_matrix(np.ones((2, 3)), 1.0)
