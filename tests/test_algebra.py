"""Tests for algebras given by structure constants."""
import pytest

from sage.all import CyclicPermutationGroup, QQ, SymmetricGroup, matrix, polygen, vector

from algorders import Algebra, group_algebra, matrix_algebra, number_field_algebra, quaternion_algebra


x = polygen(QQ)


class TestConstruction:

    def test_unit_is_solved_for(self):
        A = Algebra([[[1, 0], [0, 1]], [[0, 1], [2, 0]]])
        assert A.one().vector() == vector(QQ, [1, 0])

    def test_non_associative_table_is_rejected(self):
        # (b0 * b1) * b1 = 0 but b0 * (b1 * b1) = b0
        table = [[[1, 0], [0, 0]], [[0, 0], [1, 0]]]
        with pytest.raises(ValueError):
            Algebra(table)

    def test_coordinates_and_scalars(self):
        A = number_field_algebra(x**2 - 2)
        a = A.basis()[1]
        assert A([0, 1]) == a
        assert A(vector(QQ, [3, 0])) == A(3)
        assert a * a == A(2)

    def test_wrong_length(self):
        A = number_field_algebra(x**2 - 2)
        with pytest.raises(ValueError):
            A([1, 2, 3])


class TestQuaternions:

    def test_relations(self):
        A = quaternion_algebra(-1, -1)
        one, i, j, k = A.basis()
        assert i * i == -one
        assert j * j == -one
        assert i * j == k
        assert j * i == -k

    def test_reduced_trace(self):
        A = quaternion_algebra(-1, -1)
        assert [A.reduced_trace(b) for b in A.basis()] == [2, 0, 0, 0]

    def test_simple_and_central(self):
        A = quaternion_algebra(-1, -1)
        assert A.is_simple()
        assert A.is_central()
        assert not A.is_commutative()

    def test_eichler(self):
        assert not quaternion_algebra(-1, -1).is_eichler()
        assert quaternion_algebra(-1, 3).is_eichler()
        assert matrix_algebra(2).is_eichler()


class TestStructure:

    def test_matrix_units(self):
        A = matrix_algebra(2)
        E11, E12, E21, E22 = A.basis()
        assert E12 * E21 == E11
        assert E21 * E12 == E22
        assert E11 * E22 == A.zero()
        assert A.one() == E11 + E22

    def test_matrices_of_elements(self):
        A = matrix_algebra(2)
        E11, E12, E21, E22 = A.basis()
        X = matrix(QQ, [[1, 2], [3, 4]])
        assert A.from_matrix(X) == E11 + 2 * E12 + 3 * E21 + 4 * E22
        assert A.matrix(E12 * E21 + E21) == matrix(QQ, [[1, 0], [1, 0]])
        Y = matrix(QQ, [[0, 1], [5, -2]])
        assert A.matrix(A.from_matrix(X) * A.from_matrix(Y)) == X * Y
        assert A.matrix_degree() == 2

    def test_group_of_group_algebra(self):
        G = SymmetricGroup(3)
        A = group_algebra(G)
        assert A.group() is G
        assert A.group_order() == 6
        assert A.dimension() == 6

    def test_reduced_trace_of_matrix_algebra(self):
        A = matrix_algebra(2)
        assert [A.reduced_trace(b) for b in A.basis()] == [1, 0, 0, 1]

    def test_group_algebra_components(self):
        A = group_algebra(SymmetricGroup(3))
        assert A.is_semisimple()
        assert len(A.center()) == 3
        data = sorted(t[1:] for t in A.simple_components_data())
        assert data == [(1, 1, 1), (1, 1, 1), (4, 1, 2)]

    def test_idempotents(self):
        A = group_algebra(CyclicPermutationGroup(3))
        E = A.central_primitive_idempotents()
        assert len(E) == 2
        assert sum(E, A.zero()) == A.one()
        for e in E:
            assert e * e == e

    def test_primitive_element(self):
        A = group_algebra(CyclicPermutationGroup(3))
        a = A.primitive_element()
        assert a.minimal_polynomial().degree() == 3

    def test_integrality(self):
        A = number_field_algebra(x**2 + 3)
        a = A.basis()[1]
        assert ((A.one() + a) / 2).is_integral()
        assert not (a / 2).is_integral()
