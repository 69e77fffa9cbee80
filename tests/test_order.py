"""Tests for orders and their lattice representation."""
import pytest

from sage.all import CyclicPermutationGroup, QQ, matrix, polygen

from algorders import (
    discriminant, group_algebra, InvalidGenerators, number_field_algebra, Order, PreconditionViolation,
    quaternion_algebra, trace_form,
)
from algorders.order import sum_of_local_orders


x = polygen(QQ)


@pytest.fixture
def eisenstein():
    A = number_field_algebra(x**2 + 3)
    return A, A.basis()[1]


class TestConstruction:

    def test_from_generators(self, eisenstein):
        A, a = eisenstein
        O = Order(A, [a])
        assert O.degree() == 2
        assert a in O
        assert (A.one() + a) / 2 not in O

    def test_canonical_basis_matrix(self, eisenstein):
        A, a = eisenstein
        assert Order(A, [a]) == Order(A, [a + 1, a * 3])
        assert Order(A, [a]).basis_matrix() == Order(A, [a, a * a]).basis_matrix()

    def test_from_basis_matrix(self, eisenstein):
        A, a = eisenstein
        O = Order(A, matrix(QQ, [[1, 0], [QQ(1) / 2, QQ(1) / 2]]))
        assert (A.one() + a) / 2 in O
        assert O.index() == 2

    def test_from_basis_list(self, eisenstein):
        A, a = eisenstein
        O = Order(A, [A.one(), a], is_basis=True)
        assert O == Order(A, [a])

    def test_non_integral_generator(self, eisenstein):
        A, a = eisenstein
        with pytest.raises(InvalidGenerators):
            Order(A, [a / 2])

    def test_non_integral_generator_without_check(self, eisenstein):
        # the closure would never terminate for a / 2
        A, a = eisenstein
        with pytest.raises(InvalidGenerators):
            Order(A, [a / 2], check=False)

    def test_basis_matrix_not_a_ring(self):
        A = number_field_algebra(x**2 - 2)
        with pytest.raises(InvalidGenerators):
            Order(A, matrix(QQ, [[1, 0], [0, QQ(1) / 2]]))

    def test_rank_deficient(self, eisenstein):
        A, a = eisenstein
        with pytest.raises(InvalidGenerators):
            Order(A, matrix(QQ, [[1, 0]]))


class TestElements:

    def test_coordinates(self, eisenstein):
        A, a = eisenstein
        O = Order(A, [(A.one() + a) / 2])
        w = O((A.one() + a) / 2)
        assert w * w - w == O(-1)
        assert O.coordinates(A.one()) * O.basis_matrix() == A.one().vector()

    def test_outside_of_order(self, eisenstein):
        A, a = eisenstein
        with pytest.raises(ValueError):
            Order(A, [a])(a / 2)

    def test_denominator(self, eisenstein):
        A, a = eisenstein
        assert Order(A, [a]).denominator((A.one() + a) / 2) == 2


class TestDiscriminant:

    def test_quadratic(self, eisenstein):
        A, a = eisenstein
        assert discriminant(Order(A, [a])) == -12
        assert discriminant(Order(A, [(A.one() + a) / 2])) == -3

    def test_lipschitz(self):
        A = quaternion_algebra(-1, -1)
        _, i, j, _ = A.basis()
        O = Order(A, [i, j])
        assert trace_form(O) == matrix([[2, 0, 0, 0], [0, -2, 0, 0], [0, 0, -2, 0], [0, 0, 0, -2]])
        assert O.discriminant() == -16

    def test_group_ring(self):
        A = group_algebra(CyclicPermutationGroup(2))
        assert Order(A, A.basis()).discriminant() == 4

    def test_overorder_has_smaller_discriminant(self, eisenstein):
        A, a = eisenstein
        R, S = Order(A, [a]), Order(A, [(A.one() + a) / 2])
        assert R.is_contained_in(S)
        assert not S.is_contained_in(R)
        assert R.discriminant() == S.discriminant() * (R.basis_matrix().determinant() / S.basis_matrix().determinant()) ** 2


class TestMaximalityFlag:

    def test_write_once(self, eisenstein):
        A, a = eisenstein
        O = Order(A, [a])
        assert O.maximality() is None
        assert not O.is_maximal_known()
        O._set_maximal(False)
        O._set_maximal(False)
        assert O.maximality() is False
        with pytest.raises(ValueError):
            O._set_maximal(True)


class TestSumOfLocalOrders:

    def test_order_not_contained(self, eisenstein):
        A, a = eisenstein
        O = Order(A, [(A.one() + a) / 2])
        with pytest.raises(PreconditionViolation):
            sum_of_local_orders(O, {2: Order(A, [a])})

    def test_index_not_a_prime_power(self):
        A = number_field_algebra(x**2 + 75)
        a = A.basis()[1]
        O = Order(A, [a])
        with pytest.raises(PreconditionViolation):
            sum_of_local_orders(O, {2: Order(A, [a / 5])})

    def test_empty(self, eisenstein):
        A, a = eisenstein
        O = Order(A, [a])
        assert sum_of_local_orders(O, {}) is O
