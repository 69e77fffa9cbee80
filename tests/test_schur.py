"""Tests for trace signatures and Schur indices."""
import pytest

from sage.all import CyclicPermutationGroup, QQ, polygen

from algorders import (
    any_order, group_algebra, matrix_algebra, maximal_order, number_field_algebra, Order, PreconditionViolation,
    quaternion_algebra, representatives_of_maximal_orders, schur_index, schur_index_at_p, schur_index_at_real_place,
    trace_signature,
)


x = polygen(QQ)


class TestRealPlace:

    def test_hamilton_quaternions(self):
        A = quaternion_algebra(-1, -1)
        assert trace_signature(any_order(A)) == (1, 3)
        assert schur_index_at_real_place(maximal_order(A)) == 2

    def test_indefinite_quaternions(self):
        assert schur_index_at_real_place(any_order(quaternion_algebra(-1, 3))) == 1

    def test_matrix_algebra(self):
        assert trace_signature(any_order(matrix_algebra(2))) == (3, 1)
        assert schur_index_at_real_place(maximal_order(matrix_algebra(2))) == 1

    def test_independent_of_basis(self):
        A = quaternion_algebra(-1, -1)
        _, i, j, _ = A.basis()
        assert schur_index_at_real_place(Order(A, [i, j])) == schur_index_at_real_place(Order(A, [i * 3, j * 5]))

    def test_dimension_not_a_square(self):
        A = group_algebra(CyclicPermutationGroup(3))
        with pytest.raises(PreconditionViolation):
            schur_index_at_real_place(any_order(A))


class TestFinitePlaces:

    def test_hamilton_quaternions(self):
        M = maximal_order(quaternion_algebra(-1, -1))
        assert schur_index_at_p(M, 2) == 2
        assert schur_index_at_p(M, 3) == 1
        assert schur_index(M) == 2

    def test_matrix_algebra(self):
        M = maximal_order(matrix_algebra(2))
        assert schur_index_at_p(M, 2) == 1
        assert schur_index(M) == 1

    def test_requires_maximal_order(self):
        A = quaternion_algebra(-1, -1)
        _, i, j, _ = A.basis()
        with pytest.raises(PreconditionViolation):
            schur_index_at_p(Order(A, [i, j]), 2)


class TestRepresentatives:

    def test_eichler(self):
        M = maximal_order(matrix_algebra(2))
        assert representatives_of_maximal_orders(M) == [M]

    def test_definite(self):
        M = maximal_order(quaternion_algebra(-1, -1))
        with pytest.raises(PreconditionViolation):
            representatives_of_maximal_orders(M)

    def test_not_simple(self):
        M = maximal_order(group_algebra(CyclicPermutationGroup(2)))
        with pytest.raises(PreconditionViolation):
            representatives_of_maximal_orders(M)

    def test_number_field(self):
        M = maximal_order(number_field_algebra(x**2 + 3))
        assert representatives_of_maximal_orders(M) == [M]
