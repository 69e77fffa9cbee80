"""Tests for p-radicals and maximal ideals above p."""
import pytest

from sage.all import CyclicPermutationGroup, GF, QQ, matrix, polygen

from algorders import (
    group_algebra, maximal_ideals, number_field_algebra, Order, OrderIdeal, pradical, PreconditionViolation,
    quaternion_algebra, ring_of_multipliers, scalar_ideal, trace_dual,
)
from algorders.modular import ResidueAlgebra


x = polygen(QQ)


class TestRadical:

    def test_large_prime(self):
        A = number_field_algebra(x**2 + 75)
        O = Order(A, [A.basis()[1]])
        I = pradical(O, 5)
        assert I.basis_matrix() == matrix(QQ, [[5, 0], [0, 1]])
        assert I.norm() == 5

    def test_small_prime_agrees_with_trace_kernel(self):
        A = number_field_algebra(x**2 + 75)
        O = Order(A, [A.basis()[1]])
        R = ResidueAlgebra(O, 5)
        assert R.radical() == matrix(GF(5), [[0, 1]])

    def test_generalized_traces(self):
        A = number_field_algebra(x**2 - 2)
        O = Order(A, [A.basis()[1]])
        assert ResidueAlgebra(O, 2).radical() == matrix(GF(2), [[0, 1]])
        assert pradical(O, 2).norm() == 2

    def test_semisimple_reduction(self):
        A = group_algebra(CyclicPermutationGroup(3))
        O = Order(A, A.basis())
        assert ResidueAlgebra(O, 2).radical().nrows() == 0
        assert pradical(O, 2) == OrderIdeal(O, 2 * O.basis_matrix())

    def test_lipschitz_at_two(self):
        A = quaternion_algebra(-1, -1)
        _, i, j, _ = A.basis()
        O = Order(A, [i, j])
        J = pradical(O, 2)
        assert J.norm() == 2
        assert A.one() + i in J

    def test_not_prime(self):
        A = number_field_algebra(x**2 + 3)
        with pytest.raises(ValueError):
            ResidueAlgebra(Order(A, [A.basis()[1]]), 4)


class TestMaximalIdeals:

    def test_split_prime(self):
        A = group_algebra(CyclicPermutationGroup(3))
        O = Order(A, A.basis())
        L = maximal_ideals(O, 2)
        assert sorted(P.norm() for P in L) == [2, 4]

    def test_local_reduction(self):
        A = number_field_algebra(x**2 + 75)
        O = Order(A, [A.basis()[1]])
        L = maximal_ideals(O, 2)
        assert len(L) == 1
        assert L[0].norm() == 2
        assert L[0].side() == 'two-sided'


class TestRingOfMultipliers:

    def test_contains_order(self):
        A = number_field_algebra(x**2 + 75)
        O = Order(A, [A.basis()[1]])
        for P in maximal_ideals(O, 2) + [pradical(O, 5)]:
            assert O.is_contained_in(ring_of_multipliers(P))
            assert O.is_contained_in(P.ring_of_multipliers(side='left'))

    def test_enlargement(self):
        A = number_field_algebra(x**2 + 75)
        a = A.basis()[1]
        O = Order(A, [a])
        S = ring_of_multipliers(pradical(O, 5))
        assert a / 5 in S
        assert S.discriminant() == -12

    def test_invertible_ideal(self):
        A = number_field_algebra(x**2 - 2)
        O = Order(A, [A.basis()[1]])
        assert ring_of_multipliers(pradical(O, 2)) == O

    def test_one_sided(self):
        A = number_field_algebra(x**2 - 2)
        O = Order(A, [A.basis()[1]])
        I = OrderIdeal(O, 2 * O.basis_matrix(), side='right')
        with pytest.raises(PreconditionViolation):
            ring_of_multipliers(I, side='right')
        assert ring_of_multipliers(I, side='left') == O


class TestIdeals:

    def test_check(self):
        A = number_field_algebra(x**2 - 2)
        O = Order(A, [A.basis()[1]])
        with pytest.raises(ValueError):
            OrderIdeal(O, matrix(QQ, [[3, 0], [0, 1]]), check=True)
        assert OrderIdeal(O, matrix(QQ, [[2, 0], [0, 1]]), check=True).norm() == 2

    def test_trace_dual(self):
        A = number_field_algebra(x**2 - 2)
        a = A.basis()[1]
        O = Order(A, [a])
        D = trace_dual(O)
        assert D.norm() == QQ(1) / 8
        assert a / 4 in D
        assert A.one() / 2 in D
        assert A.one() / 4 not in D
        assert not D.is_integral()

    def test_scalar_ideal(self):
        A = number_field_algebra(x**2 - 2)
        O = Order(A, [A.basis()[1]])
        I = scalar_ideal(O, 3)
        assert I.norm() == 9
        assert I.is_integral()
        assert ring_of_multipliers(I) == O
