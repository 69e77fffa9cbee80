r"""

Sage code for orders in finite-dimensional algebras over QQ

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

from sage.matrix.constructor import matrix
from sage.matrix.matrix_space import MatrixSpace
from sage.modules.free_module_element import FreeModuleElement, vector
from sage.rings.integer_ring import ZZ
from sage.rings.rational_field import QQ

from .algebra import AlgebraElement
from .errors import InvalidGenerators, PreconditionViolation
from .linalg import hnf_basis_matrix


class Order(object):
    r"""
    This class represents orders (full-rank unital subrings that are finitely generated ZZ-modules) in an Algebra.

    INPUT:

    An Order instance is constructed by calling Order(A, X), where
    - ``A`` -- an Algebra
    - ``X`` -- a basis matrix (rows are coordinate vectors of a ZZ-basis), OR a list of elements of A that generate the order as a ring
    - ``check`` -- boolean (default True); if True then we check that the input really defines an order
    - ``is_basis`` -- boolean (default False); if True then the list X is assumed to be a ZZ-basis rather than a set of ring generators

    The basis matrix is always stored in Hermite normal form, so equal orders have equal basis matrices.

    OUTPUT: Order

    EXAMPLES::

        sage: from algorders import Order, number_field_algebra
        sage: x = polygen(QQ)
        sage: A = number_field_algebra(x^2 + 3)
        sage: O = Order(A, [A.basis()[1]])
        sage: O.basis_matrix()
        [1 0]
        [0 1]
        sage: O.discriminant()
        -12
        sage: Order(A, [(A.one() + A.basis()[1]) / 2]).discriminant()
        -3
    """

    def __init__(self, A, X, check=True, is_basis=False):
        self.__algebra = A
        try:
            is_matrix = isinstance(X.parent(), MatrixSpace)
        except AttributeError:
            is_matrix = False
        if is_matrix:
            self.__basis_matrix = hnf_basis_matrix(X)
        elif is_basis:
            self.__basis_matrix = hnf_basis_matrix([A(x).vector() for x in X])
        else:
            self.__basis_matrix = _close_under_multiplication(A, [A(x) for x in X])
        if check and not self._defines_order():
            raise InvalidGenerators('The basis matrix does not define an order')
        self.__maximal = None

    def __repr__(self):
        return 'Order of %s with basis matrix\n%s' % (self.__algebra, self.__basis_matrix)

    def __call__(self, x):
        r"""
        Construct an element of self from an algebra element, an integer, or a vector of coordinates with respect to the basis of self.
        """
        if isinstance(x, OrderElement):
            x = x.elem_in_algebra()
        if isinstance(x, AlgebraElement):
            return OrderElement(self, x)
        if not isinstance(x, (list, tuple, FreeModuleElement)):
            return OrderElement(self, self.__algebra(ZZ(x)))
        v = vector(ZZ, list(x))
        return OrderElement(self, self.__algebra(v * self.__basis_matrix))

    def __eq__(self, other):
        if not isinstance(other, Order):
            return False
        return self.__algebra == other.algebra() and self.__basis_matrix == other.basis_matrix()

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash(tuple(self.__basis_matrix.list()))

    def __contains__(self, x):
        if isinstance(x, OrderElement):
            x = x.elem_in_algebra()
        try:
            x = self.__algebra(x)
        except (TypeError, ValueError):
            return False
        return (x.vector() * self.basis_matrix_inverse()).denominator() == 1

    def _defines_order(self):
        r"""
        Check that the basis matrix has full rank, contains 1 and spans a ring.
        """
        if self.__basis_matrix.nrows() != self.degree():
            return False
        if self.__algebra.one() not in self:
            return False
        B = self.basis_in_algebra()
        return all(x * y in self for x in B for y in B)

    ## basic attributes

    def algebra(self):
        return self.__algebra

    def degree(self):
        r"""
        Return the dimension of the algebra containing self (= the rank of self as a ZZ-module).
        """
        return self.__algebra.dimension()

    def basis_matrix(self):
        return self.__basis_matrix

    def basis_matrix_inverse(self):
        try:
            return self.__basis_matrix_inverse
        except AttributeError:
            self.__basis_matrix_inverse = self.__basis_matrix.inverse()
            return self.__basis_matrix_inverse

    def basis_in_algebra(self):
        r"""
        Return the ZZ-basis of self as a list of algebra elements.
        """
        try:
            return self.__basis_alg
        except AttributeError:
            A = self.__algebra
            self.__basis_alg = [A(v) for v in self.__basis_matrix.rows()]
            return self.__basis_alg

    def basis(self):
        r"""
        Return the ZZ-basis of self as a list of OrderElement's.
        """
        try:
            return self.__basis
        except AttributeError:
            self.__basis = [OrderElement(self, x, coordinates=v) for x, v in zip(self.basis_in_algebra(), (ZZ**self.degree()).basis())]
            return self.__basis

    def coordinates(self, x):
        r"""
        Return the coordinates of the algebra element ``x`` with respect to the basis of self.

        This raises a ValueError if x is not contained in self.
        """
        v = self.__algebra(x).vector() * self.basis_matrix_inverse()
        if v.denominator() != 1:
            raise ValueError('%s is not contained in the order' % x)
        return vector(ZZ, v)

    def denominator(self, x):
        r"""
        Return the smallest positive integer d for which d * x lies in self.
        """
        return (self.__algebra(x).vector() * self.basis_matrix_inverse()).denominator()

    def index(self):
        r"""
        Return the index of the natural lattice ZZ^n in self (i.e. 1 / |det(basis matrix)|).

        This is an integer whenever self contains the ZZ-span of the basis of the algebra.
        """
        i = QQ(1) / abs(self.__basis_matrix.determinant())
        if i in ZZ:
            return ZZ(i)
        return i

    def is_commutative(self):
        return self.__algebra.is_commutative()

    def is_contained_in(self, other):
        r"""
        Test whether self is contained in the order (or lattice) ``other``.
        """
        if self.__algebra != other.algebra():
            return False
        return (self.__basis_matrix * other.basis_matrix_inverse()).denominator() == 1

    ## discriminant

    def trace_form(self):
        r"""
        Return the reduced trace matrix of self, i.e. the integral Gram matrix M with M[i, j] = trred(b_i * b_j) where b is the basis of self.

        EXAMPLES::

            sage: from algorders import Order, quaternion_algebra
            sage: A = quaternion_algebra(-1, -1)
            sage: _, i, j, k = A.basis()
            sage: Order(A, [i, j]).trace_form()
            [ 2  0  0  0]
            [ 0 -2  0  0]
            [ 0  0 -2  0]
            [ 0  0  0 -2]
        """
        try:
            return self.__trace_form
        except AttributeError:
            M = self.__algebra.trace_matrix(self.basis_in_algebra())
            try:
                self.__trace_form = M.change_ring(ZZ)
            except TypeError:
                raise InvalidGenerators('The reduced trace is not integral on this lattice') from None
            return self.__trace_form

    trred_matrix = trace_form

    def discriminant(self):
        r"""
        Return the discriminant of self, i.e. the determinant of its reduced trace matrix.
        """
        try:
            return self.__discriminant
        except AttributeError:
            self.__discriminant = self.trace_form().determinant()
            return self.__discriminant

    ## maximality flag

    def is_maximal_known(self):
        return self.__maximal is not None

    def maximality(self):
        r"""
        Return True (self is maximal), False (self is not maximal) or None (not yet known).
        """
        return self.__maximal

    def _set_maximal(self, flag):
        r"""
        Record whether self is maximal. The flag can be set only once.
        """
        flag = bool(flag)
        if self.__maximal is None:
            self.__maximal = flag
        elif self.__maximal != flag:
            raise ValueError('The maximality of this order was already determined to be %s' % self.__maximal)


class OrderElement(object):
    r"""
    This class represents elements of an Order. These are not meant to be constructed directly; use O(x) instead.
    """

    def __init__(self, order, x, coordinates=None):
        if coordinates is None:
            coordinates = order.coordinates(x)
        self.__order = order
        self.__elem = x
        self.__coordinates = coordinates

    def __repr__(self):
        return repr(self.__elem)

    def parent(self):
        return self.__order

    def elem_in_algebra(self):
        return self.__elem

    def coordinates(self):
        return self.__coordinates

    def __eq__(self, other):
        if isinstance(other, OrderElement):
            other = other.elem_in_algebra()
        return self.__elem == other

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash(self.__elem)

    def _other(self, other):
        if isinstance(other, OrderElement):
            if other.parent() != self.__order:
                raise ValueError('Incompatible orders')
            return other.elem_in_algebra()
        return self.__order.algebra()(ZZ(other))

    def __add__(self, other):
        return OrderElement(self.__order, self.__elem + self._other(other))

    __radd__ = __add__

    def __neg__(self):
        return OrderElement(self.__order, -self.__elem, coordinates=-self.__coordinates)

    def __sub__(self, other):
        return OrderElement(self.__order, self.__elem - self._other(other))

    def __mul__(self, other):
        return OrderElement(self.__order, self.__elem * self._other(other))

    def __rmul__(self, other):
        return OrderElement(self.__order, self._other(other) * self.__elem)

    def __pow__(self, N):
        return OrderElement(self.__order, self.__elem ** N)

    def reduced_trace(self):
        return ZZ(self.__elem.reduced_trace())


def _close_under_multiplication(A, gens):
    r"""
    Compute the basis matrix of the ring generated by ``gens`` (and 1).

    We repeatedly replace the current lattice L by the span of L * L until it stabilizes. Since 1 is in L, L is contained in L * L. This terminates only for integral generators, so they are checked even for Order(..., check=False).
    """
    for x in gens:
        if not x.is_integral():
            raise InvalidGenerators('%s is not integral' % x)
    one = A.one()
    current = [one] + [x for x in gens if x != one]
    B = hnf_basis_matrix([x.vector() for x in current])
    while True:
        B_new = hnf_basis_matrix([(x * y).vector() for x in current for y in current])
        if B_new == B:
            break
        B = B_new
        current = [A(v) for v in B.rows()]
    if B.nrows() != A.dimension():
        raise InvalidGenerators('The elements do not generate an order')
    return B


def sum_of_local_orders(O, local_orders):
    r"""
    Compute the sum of orders that each differ from ``O`` at a single prime.

    This is only used in the construction of maximal orders: the sum of two arbitrary orders is usually not a ring. Here every O_p contains O with index a power of p, so the sum agrees with O_p locally at p (and with O elsewhere) and is again an order.

    INPUT:
    - ``O`` -- an Order
    - ``local_orders`` -- a dict {p: O_p}, where O_p is an order containing O with p-power index

    OUTPUT: an Order

    EXAMPLES::

        sage: from algorders import Order, number_field_algebra, pmaximal_overorder
        sage: from algorders.order import sum_of_local_orders
        sage: x = polygen(QQ)
        sage: A = number_field_algebra(x^2 + 75)
        sage: O = Order(A, [A.basis()[1]])
        sage: sum_of_local_orders(O, {p: pmaximal_overorder(O, p) for p in [2, 5]}).discriminant()
        -3
    """
    if not local_orders:
        return O
    A = O.algebra()
    B = O.basis_matrix()
    rows = []
    for p, Op in local_orders.items():
        if Op.algebra() != A or not O.is_contained_in(Op):
            raise PreconditionViolation('The %s-local order does not contain the base order' % p)
        index = ZZ(abs(B.determinant() / Op.basis_matrix().determinant()))
        if any(q != p for q in index.prime_divisors()):
            raise PreconditionViolation('The index of the base order in the %s-local order is %s, which is not a power of %s' % (p, index, p))
        rows.extend(Op.basis_matrix().rows())
    return Order(A, matrix(QQ, rows), check=False)


def trace_form(O):
    r"""
    Return the reduced trace matrix of the order O. See Order.trace_form().
    """
    return O.trace_form()


def discriminant(O):
    r"""
    Return the discriminant of the order O.

    EXAMPLES::

        sage: from algorders import Order, discriminant, group_algebra
        sage: A = group_algebra(CyclicPermutationGroup(2))
        sage: discriminant(Order(A, A.basis()))
        4
    """
    return O.discriminant()
