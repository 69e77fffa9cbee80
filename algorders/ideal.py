r"""

Sage code for (fractional) ideals of orders and their rings of multipliers

"""

# ****************************************************************************
#       Copyright (C) 2024 The algorders developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 2 of the License, or
# (at your option) any later version.
#                  https://www.gnu.org/licenses/
# ****************************************************************************

from sage.matrix.special import block_matrix
from sage.rings.integer_ring import ZZ
from sage.rings.rational_field import QQ

from .errors import PreconditionViolation
from .linalg import hnf_basis_matrix, integral_row_solutions
from .order import Order, OrderElement


class OrderIdeal(object):
    r"""
    This class represents full-rank lattices in an algebra that are stable under multiplication by an order O from one or both sides.

    There is no separate class for fractional ideals: an OrderIdeal need not be contained in O.

    INPUT:

    An OrderIdeal instance is constructed by calling OrderIdeal(O, X), where
    - ``O`` -- an Order
    - ``X`` -- a basis matrix (or a list of coordinate vectors spanning the ideal over ZZ)
    - ``side`` -- 'left', 'right' or 'two-sided' (default 'two-sided')
    - ``check`` -- boolean (default False); if True then we check that X spans a lattice that is stable under O from the given side

    OUTPUT: OrderIdeal
    """

    def __init__(self, O, X, side='two-sided', check=False):
        if side not in ('left', 'right', 'two-sided'):
            raise ValueError('Unknown side: %s' % side)
        self.__order = O
        self.__side = side
        self.__basis_matrix = hnf_basis_matrix(X)
        if self.__basis_matrix.nrows() != O.degree():
            raise ValueError('Ideals must have full rank')
        if check and not self._is_stable():
            raise ValueError('This lattice is not a %s ideal' % side)

    def __repr__(self):
        return '%s ideal of %s\nwith basis matrix\n%s' % (self.__side.capitalize(), self.__order, self.__basis_matrix)

    def __eq__(self, other):
        if not isinstance(other, OrderIdeal):
            return False
        return self.__order == other.order() and self.__basis_matrix == other.basis_matrix()

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash(tuple(self.__basis_matrix.list()))

    def __contains__(self, x):
        if isinstance(x, OrderElement):
            x = x.elem_in_algebra()
        x = self.algebra()(x)
        return (x.vector() * self.basis_matrix_inverse()).denominator() == 1

    def _is_stable(self):
        O = self.__order.basis_in_algebra()
        B = self.basis()
        if self.__side != 'right' and not all(b * x in self for b in O for x in B):
            return False
        if self.__side != 'left' and not all(x * b in self for b in O for x in B):
            return False
        return True

    ## basic attributes

    def order(self):
        return self.__order

    def algebra(self):
        return self.__order.algebra()

    def side(self):
        return self.__side

    def basis_matrix(self):
        return self.__basis_matrix

    def basis_matrix_inverse(self):
        try:
            return self.__basis_matrix_inverse
        except AttributeError:
            self.__basis_matrix_inverse = self.__basis_matrix.inverse()
            return self.__basis_matrix_inverse

    def basis(self):
        r"""
        Return the ZZ-basis of self as a list of algebra elements.
        """
        try:
            return self.__basis
        except AttributeError:
            A = self.algebra()
            self.__basis = [A(v) for v in self.__basis_matrix.rows()]
            return self.__basis

    def is_integral(self):
        r"""
        Test whether self is contained in its order.
        """
        return (self.__basis_matrix * self.__order.basis_matrix_inverse()).denominator() == 1

    def norm(self):
        r"""
        Return the (generalized) index [O : self], as a rational number.
        """
        return abs(self.__basis_matrix.determinant() / self.__order.basis_matrix().determinant())

    def ring_of_multipliers(self, side='right'):
        r"""
        See ring_of_multipliers()
        """
        return ring_of_multipliers(self, side=side)


def ring_of_multipliers(I, side='right'):
    r"""
    Compute the ring of multipliers (idealizer) of an ideal.

    INPUT:
    - ``I`` -- an OrderIdeal of an order O
    - ``side`` -- 'right' (default) or 'left'. If 'right' then we compute { x : x * I \subseteq I }; if 'left' then { x : I * x \subseteq I }.

    OUTPUT: an Order containing O

    ALGORITHM: x * b_j is in I for every basis element b_j of I if and only if v(x) * R(b_j) * B^(-1) is integral for every j, where R(b_j) is the matrix of right multiplication by b_j and B is the basis matrix of I. We solve this system over ZZ all at once.

    EXAMPLES::

        sage: from algorders import Order, number_field_algebra, pradical, ring_of_multipliers
        sage: x = polygen(QQ)
        sage: A = number_field_algebra(x^2 + 75)
        sage: O = Order(A, [A.basis()[1]])
        sage: ring_of_multipliers(pradical(O, 5)).discriminant()
        -12
    """
    if side not in ('left', 'right'):
        raise ValueError('Unknown side: %s' % side)
    # x * I needs O * I inside I, i.e. I must not be a right ideal only (and vice versa)
    if I.side() == side:
        raise PreconditionViolation('The ring of multipliers on this side of a %s ideal need not contain the order' % side)
    A = I.algebra()
    Binv = I.basis_matrix_inverse()
    n = A.dimension()
    M = block_matrix(1, n, [A.representation_matrix(b, side) * Binv for b in I.basis()], subdivide=False)
    return Order(A, integral_row_solutions(M.change_ring(QQ)), check=False)


def trace_dual(O):
    r"""
    Compute the trace dual { x : trred(x * O) \subseteq ZZ } of an order O, as a fractional two-sided ideal of O.

    EXAMPLES::

        sage: from algorders import Order, number_field_algebra, trace_dual
        sage: x = polygen(QQ)
        sage: A = number_field_algebra(x^2 - 2)
        sage: trace_dual(Order(A, [A.basis()[1]])).norm()
        1/8
    """
    T = O.trace_form().change_ring(QQ)
    return OrderIdeal(O, T.inverse() * O.basis_matrix(), side='two-sided')


def scalar_ideal(O, a):
    r"""
    Return the two-sided ideal a * O of O, for a nonzero integer a.
    """
    return OrderIdeal(O, ZZ(a) * O.basis_matrix(), side='two-sided')
