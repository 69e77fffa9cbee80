r"""

Sage code for finite-dimensional associative algebras over QQ given by structure constants

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

from itertools import count

from sage.algebras.quatalg.quaternion_algebra import QuaternionAlgebra
from sage.arith.misc import xgcd
from sage.matrix.constructor import matrix
from sage.matrix.special import identity_matrix
from sage.misc.functional import isqrt
from sage.modules.free_module_element import FreeModuleElement, vector
from sage.rings.integer import Integer
from sage.rings.integer_ring import ZZ
from sage.rings.number_field.number_field import NumberField
from sage.rings.rational_field import QQ

from .linalg import symmetric_signature


class Algebra(object):
    r"""
    This class represents finite-dimensional associative unital algebras over QQ.

    INPUT:

    An Algebra instance is constructed by calling Algebra(table), where
    - ``table`` -- a list of n lists of n vectors; ``table[i][j]`` is the coordinate vector of b_i * b_j in the basis b_0, ..., b_{n-1}
    - ``one`` -- (optional) the coordinate vector of the unit element. If this is not given then it is solved for.
    - ``names`` -- (optional) a list of names of the basis elements (only used for printing)
    - ``check`` -- boolean (default True); if True then we check that the multiplication is associative

    OUTPUT: Algebra

    EXAMPLES::

        sage: from algorders import Algebra
        sage: A = Algebra([[[1, 0], [0, 1]], [[0, 1], [2, 0]]])
        sage: A
        Algebra of dimension 2 over Rational Field
        sage: A.one()
        e0
        sage: A.basis()[1]^2
        2*e0
    """

    def __init__(self, table, one=None, names=None, check=True):
        n = len(table)
        self.__dimension = n
        self.__table = [matrix(QQ, n, n, [list(table[i][j]) for j in range(n)]) for i in range(n)]
        if names is None:
            names = ['e%d' % i for i in range(n)]
        self.__names = list(names)
        if check:
            T = self.__table
            for i in range(n):
                for j in range(n):
                    if sum(c * T[k] for k, c in enumerate(T[i].row(j))) != T[j] * T[i]:
                        raise ValueError('The multiplication is not associative.')
        if one is None:
            X = matrix(QQ, [T.list() for T in self.__table])
            try:
                one = X.solve_left(vector(QQ, identity_matrix(QQ, n).list()))
            except ValueError:
                raise ValueError('The algebra is not unital.') from None
        self.__one = AlgebraElement(self, vector(QQ, one))
        if check and self.representation_matrix(self.__one, 'right') != identity_matrix(QQ, n):
            raise ValueError('The algebra is not unital.')

    def __repr__(self):
        return 'Algebra of dimension %d over Rational Field' % self.__dimension

    def __call__(self, x):
        r"""
        Construct an element of self from a coordinate vector, a rational number or an element.
        """
        if isinstance(x, AlgebraElement):
            if x.parent() is not self and x.parent() != self:
                raise ValueError('Incompatible algebras')
            return x
        if not isinstance(x, (list, tuple, FreeModuleElement)):
            return self.__one * QQ(x)
        v = vector(QQ, list(x))
        if len(v) != self.__dimension:
            raise ValueError('Coordinate vector has the wrong length')
        return AlgebraElement(self, v)

    def __eq__(self, other):
        if not isinstance(other, Algebra):
            return False
        return self is other or self.fingerprint() == other.fingerprint()

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash(self.fingerprint())

    ## basic attributes

    def dimension(self):
        return self.__dimension

    dim = dimension

    def basis(self):
        r"""
        Return the standard basis b_0, ..., b_{n-1} of self.
        """
        try:
            return self.__basis
        except AttributeError:
            n = self.__dimension
            self.__basis = [AlgebraElement(self, v) for v in identity_matrix(QQ, n).rows()]
            return self.__basis

    def fingerprint(self):
        r"""
        Return a hashable identity of self, namely its structure constants.

        Two Algebra instances with the same fingerprint have the same multiplication table in the same basis, so orders in one are orders in the other.
        """
        try:
            return self.__fingerprint
        except AttributeError:
            self.__fingerprint = tuple(tuple(T.list()) for T in self.__table)
            return self.__fingerprint

    def multiplication_table(self):
        r"""
        Return the list of matrices T_i whose j-th row is the coordinate vector of b_i * b_j.
        """
        return self.__table

    def one(self):
        return self.__one

    def zero(self):
        return AlgebraElement(self, vector(QQ, self.__dimension))

    def variable_names(self):
        return self.__names

    def structure_constants_denominator(self):
        r"""
        Return the least common multiple of the denominators of the structure constants.
        """
        try:
            return self.__denominator
        except AttributeError:
            d = Integer(1)
            for T in self.__table:
                d = d.lcm(T.denominator())
            self.__denominator = d
            return d

    ## representations

    def representation_matrix(self, a, action='left'):
        r"""
        Return the matrix of multiplication by ``a``.

        INPUT:
        - ``a`` -- an element of self
        - ``action`` -- 'left' or 'right' (default 'left')

        OUTPUT: a matrix M over QQ such that v(x) * M = v(a * x) if action == 'left' and v(x) * M = v(x * a) if action == 'right'. Here v(x) denotes the (row) coordinate vector.
        """
        a = self(a).vector()
        if action == 'left':
            return sum((c * self.__table[i] for i, c in enumerate(a) if c), matrix(QQ, self.__dimension))
        elif action == 'right':
            return matrix(QQ, [a * T for T in self.__table])
        raise ValueError('Unknown action: %s' % action)

    def _product(self, x, y):
        r"""
        Multiply two coordinate vectors.
        """
        return sum((c * (y * self.__table[i]) for i, c in enumerate(x) if c), vector(QQ, self.__dimension))

    def trace_matrix(self, basis=None, reduced=True):
        r"""
        Return the Gram matrix of the (reduced) trace form on ``basis`` (default: the basis of self).
        """
        if basis is None:
            basis = self.basis()
        tr = (lambda x: x.reduced_trace()) if reduced else (lambda x: x.trace())
        m = len(basis)
        M = matrix(QQ, m, m)
        for i in range(m):
            M[i, i] = tr(basis[i] * basis[i])
            for j in range(i + 1, m):
                M[i, j] = M[j, i] = tr(basis[i] * basis[j])
        return M

    ## structure

    def is_commutative(self):
        try:
            return self.__is_commutative
        except AttributeError:
            T = self.__table
            n = self.__dimension
            self.__is_commutative = all(T[i].row(j) == T[j].row(i) for i in range(n) for j in range(i))
            return self.__is_commutative

    def is_semisimple(self):
        r"""
        Test whether self is semisimple.

        In characteristic zero this happens if and only if the trace form of the regular representation is nondegenerate.
        """
        try:
            return self.__is_semisimple
        except AttributeError:
            self.__is_semisimple = bool(self.trace_matrix(reduced=False).determinant())
            return self.__is_semisimple

    def center(self):
        r"""
        Return a basis of the center of self (as a list of elements).

        EXAMPLES::

            sage: from algorders import group_algebra
            sage: len(group_algebra(SymmetricGroup(3)).center())
            3
        """
        try:
            return self.__center
        except AttributeError:
            if self.is_commutative():
                self.__center = self.basis()
                return self.__center
            T = self.__table
            n = self.__dimension
            X = matrix(QQ, [sum((list(T[k].row(i) - T[i].row(k)) for i in range(n)), []) for k in range(n)])
            self.__center = [AlgebraElement(self, v) for v in X.left_kernel().basis_matrix().rows()]
            return self.__center

    def is_central(self):
        return len(self.center()) == 1

    def _primitive_element(self, basis):
        r"""
        Find an element of the commutative semisimple subalgebra spanned by ``basis`` that generates it.

        We test the elements sum_k t^k basis[k] for t = 1, 2, 3, ...; only finitely many of them can fail.
        """
        m = len(basis)
        if m == 1:
            return basis[0]
        for t in count(1):
            z = sum((x * t ** k for k, x in enumerate(basis)), self.zero())
            if z.minimal_polynomial().degree() == m:
                return z

    def primitive_element(self):
        r"""
        Return an element a of self (assumed commutative and semisimple) such that 1, a, ..., a^(n-1) is a QQ-basis.
        """
        if not self.is_commutative():
            raise ValueError('The algebra is not commutative.')
        if not self.is_semisimple():
            raise ValueError('The algebra is not semisimple.')
        return self._primitive_element(self.basis())

    def central_primitive_idempotents(self):
        r"""
        Return the central primitive idempotents of self (assumed semisimple).

        We find a generator z of the center, factor its minimal polynomial f = f_1 * ... * f_r, and use the Chinese remainder theorem to lift (0, ..., 1, ..., 0).

        EXAMPLES::

            sage: from algorders import group_algebra
            sage: A = group_algebra(CyclicPermutationGroup(2))
            sage: sorted(e.vector() for e in A.central_primitive_idempotents())
            [(1/2, -1/2), (1/2, 1/2)]
        """
        try:
            return self.__idempotents
        except AttributeError:
            if not self.is_semisimple():
                raise ValueError('The algebra is not semisimple.')
            Z = self.center()
            if len(Z) == 1:
                self.__idempotents = [self.one()]
                self.__center_degrees = [1]
                return self.__idempotents
            z = self._primitive_element(Z)
            f = z.minimal_polynomial()
            L = []
            degrees = []
            for g, _ in f.factor():
                h = f // g
                _, u, _ = xgcd(h, g)
                L.append(z.evaluate((u * h) % f))
                degrees.append(g.degree())
            self.__idempotents = L
            self.__center_degrees = degrees
            return L

    def simple_components_data(self):
        r"""
        Return a list of tuples (e, dimension, center dimension, degree), one for each simple component e*A of self.

        Here e is the central primitive idempotent, and the component is a central simple algebra of dimension degree^2 over its center.

        EXAMPLES::

            sage: from algorders import group_algebra
            sage: sorted(x[1:] for x in group_algebra(SymmetricGroup(3)).simple_components_data())
            [(1, 1, 1), (1, 1, 1), (4, 1, 2)]
        """
        try:
            return self.__components
        except AttributeError:
            L = []
            for e, m in zip(self.central_primitive_idempotents(), self.__center_degrees):
                dim_e = self.representation_matrix(e).rank()
                L.append((e, dim_e, m, isqrt(dim_e // m)))
            self.__components = L
            return L

    def is_simple(self):
        return self.is_semisimple() and len(self.central_primitive_idempotents()) == 1

    def _reduced_trace_vector(self):
        r"""
        Return the vector t such that trred(x) = v(x) . t
        """
        try:
            return self.__trred_vector
        except AttributeError:
            B = self.basis()
            if self.is_commutative():
                t = vector(QQ, [self.representation_matrix(b).trace() for b in B])
            else:
                t = vector(QQ, self.__dimension)
                for e, _, _, d in self.simple_components_data():
                    t += vector(QQ, [self.representation_matrix(b * e).trace() for b in B]) / d
            self.__trred_vector = t
            return t

    def reduced_trace(self, x):
        r"""
        Return the reduced trace of ``x``.

        On each simple component of center K and dimension d^2 over K this is Tr_{K/QQ} of the reduced trace, i.e. the regular trace divided by d.

        EXAMPLES::

            sage: from algorders import quaternion_algebra
            sage: A = quaternion_algebra(-1, -1)
            sage: [A.reduced_trace(x) for x in A.basis()]
            [2, 0, 0, 0]
        """
        return self(x).vector().dot_product(self._reduced_trace_vector())

    def is_eichler(self):
        r"""
        Test whether self (a simple algebra) satisfies the Eichler condition.

        This fails exactly when self is a totally definite quaternion algebra. We only decide this when the center is QQ.

        EXAMPLES::

            sage: from algorders import matrix_algebra, quaternion_algebra
            sage: quaternion_algebra(-1, -1).is_eichler()
            False
            sage: matrix_algebra(2).is_eichler()
            True
        """
        if not self.is_simple():
            raise ValueError('The algebra is not simple.')
        m = len(self.center())
        if self.__dimension != 4 * m:
            return True
        if m > 1:
            raise NotImplementedError('Quaternion algebras over number fields other than QQ are not implemented')
        npos, _ = symmetric_signature(self.trace_matrix())
        return npos != 1


class AlgebraElement(object):
    r"""
    This class represents elements of an Algebra. These are not meant to be constructed directly; use A(v) instead.
    """

    def __init__(self, parent, v):
        v.set_immutable()
        self.__parent = parent
        self.__vector = v

    def __repr__(self):
        terms = []
        for c, s in zip(self.__vector, self.__parent.variable_names()):
            if not c:
                continue
            if s == '1':
                terms.append(str(c))
            elif c == 1:
                terms.append(s)
            elif c == -1:
                terms.append('-' + s)
            else:
                terms.append('%s*%s' % (c, s))
        if not terms:
            return '0'
        return ' + '.join(terms).replace('+ -', '- ')

    def parent(self):
        return self.__parent

    def vector(self):
        return self.__vector

    coordinates = vector

    def __bool__(self):
        return bool(self.__vector)

    def __eq__(self, other):
        if not isinstance(other, AlgebraElement):
            try:
                other = self.__parent(other)
            except (TypeError, ValueError):
                return False
        return self.__parent == other.parent() and self.__vector == other.vector()

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash(self.__vector)

    ## arithmetic

    def __add__(self, other):
        other = self.__parent(other)
        return AlgebraElement(self.__parent, self.__vector + other.vector())

    __radd__ = __add__

    def __neg__(self):
        return AlgebraElement(self.__parent, -self.__vector)

    def __sub__(self, other):
        return self + (-self.__parent(other))

    def __rsub__(self, other):
        return self.__parent(other) - self

    def __mul__(self, other):
        if isinstance(other, AlgebraElement):
            if other.parent() is not self.__parent and other.parent() != self.__parent:
                raise ValueError('Incompatible algebras')
            return AlgebraElement(self.__parent, self.__parent._product(self.__vector, other.vector()))
        try:
            return AlgebraElement(self.__parent, self.__vector * QQ(other))
        except TypeError:
            return NotImplemented

    def __rmul__(self, other):
        try:
            return AlgebraElement(self.__parent, QQ(other) * self.__vector)
        except TypeError:
            return NotImplemented

    def __truediv__(self, other):
        return AlgebraElement(self.__parent, self.__vector / QQ(other))

    def __pow__(self, N):
        N = Integer(N)
        if N < 0:
            raise ValueError('Negative powers are not supported')
        x = self.__parent.one()
        y = self
        while N:
            if N % 2:
                x = x * y
            y = y * y
            N = N // 2
        return x

    def evaluate(self, f):
        r"""
        Evaluate the polynomial ``f`` at self (Horner's scheme).
        """
        A = self.__parent
        x = A.zero()
        for c in reversed(f.list()):
            x = x * self + A.one() * c
        return x

    ## invariants

    def left_matrix(self):
        return self.__parent.representation_matrix(self, 'left')

    def right_matrix(self):
        return self.__parent.representation_matrix(self, 'right')

    def trace(self):
        r"""
        Trace of the left regular representation.
        """
        return self.left_matrix().trace()

    def reduced_trace(self):
        return self.__parent.reduced_trace(self)

    def characteristic_polynomial(self):
        return self.left_matrix().charpoly()

    charpoly = characteristic_polynomial

    def minimal_polynomial(self):
        return self.left_matrix().minpoly()

    minpoly = minimal_polynomial

    def is_integral(self):
        r"""
        Test whether self is integral over ZZ, i.e. whether it lies in some order.
        """
        return all(c in ZZ for c in self.characteristic_polynomial().list())


class MatrixAlgebra(Algebra):
    r"""
    The full matrix algebra M_n(QQ), with basis the matrix units E_{rs} in lexicographic order.

    Use matrix_algebra(n) to construct it.
    """

    def __init__(self, n, table, **kwargs):
        super().__init__(table, **kwargs)
        self.__degree = Integer(n)

    def __repr__(self):
        return 'Full matrix algebra of degree %d over Rational Field' % self.__degree

    def matrix_degree(self):
        return self.__degree

    def matrix(self, x):
        r"""
        Return the n x n matrix of the element ``x``.
        """
        n = self.__degree
        return matrix(QQ, n, n, list(self(x).vector()))

    def from_matrix(self, X):
        r"""
        Return the element of self whose matrix is ``X``.
        """
        return self(matrix(QQ, X).list())


class GroupAlgebra(Algebra):
    r"""
    The group algebra QQ[G] of a finite group G, with basis the elements of G (in the order of G.list()).

    Use group_algebra(G) to construct it.
    """

    def __init__(self, G, table, **kwargs):
        super().__init__(table, **kwargs)
        self.__group = G

    def __repr__(self):
        return 'Group algebra of %s over Rational Field' % self.__group

    def group(self):
        return self.__group

    def group_order(self):
        return Integer(self.dimension())


## constructors

def number_field_algebra(K):
    r"""
    Construct the algebra underlying a number field.

    INPUT:
    - ``K`` -- an absolute number field; or an irreducible polynomial over QQ

    OUTPUT: an Algebra whose basis is the power basis 1, a, ..., a^(n-1) of K

    EXAMPLES::

        sage: from algorders import number_field_algebra
        sage: x = polygen(QQ)
        sage: A = number_field_algebra(x^2 - 2)
        sage: A.basis()
        [1, a]
        sage: A.basis()[1]^2
        2
    """
    try:
        B = K.power_basis()
    except AttributeError:
        K = NumberField(K, 'a')
        B = K.power_basis()
    table = [[list(x * y) for y in B] for x in B]
    n = len(B)
    a = str(K.gen())
    names = ['1', a] + ['%s^%d' % (a, i) for i in range(2, n)]
    return Algebra(table, one=[1] + [0] * (n - 1), names=names[:n], check=False)


def quaternion_algebra(a, b):
    r"""
    Construct the quaternion algebra (a, b) over QQ with basis 1, i, j, k, where i^2 = a, j^2 = b and k = ij = -ji.

    EXAMPLES::

        sage: from algorders import quaternion_algebra
        sage: A = quaternion_algebra(-1, -1)
        sage: _, i, j, k = A.basis()
        sage: i * j == k, j * i == -k
        (True, True)
    """
    Q = QuaternionAlgebra(QQ, a, b)
    B = Q.basis()
    table = [[list((x * y).coefficient_tuple()) for y in B] for x in B]
    return Algebra(table, one=[1, 0, 0, 0], names=['1', 'i', 'j', 'k'], check=False)


def matrix_algebra(n):
    r"""
    Construct the algebra M_n(QQ) with basis the matrix units E_{rs}, ordered lexicographically.

    EXAMPLES::

        sage: from algorders import matrix_algebra
        sage: A = matrix_algebra(2)
        sage: A.matrix(A.basis()[1])
        [0 1]
        [0 0]
    """
    N = n * n
    table = []
    for r in range(n):
        for s in range(n):
            row = []
            for t in range(n):
                for u in range(n):
                    v = [0] * N
                    if s == t:
                        v[r * n + u] = 1
                    row.append(v)
            table.append(row)
    one = [1 if (i // n) == (i % n) else 0 for i in range(N)]
    names = ['E%d%d' % (r + 1, s + 1) for r in range(n) for s in range(n)]
    return MatrixAlgebra(n, table, one=one, names=names, check=False)


def group_algebra(G):
    r"""
    Construct the group algebra QQ[G] of a finite group G, with basis the elements of G.

    EXAMPLES::

        sage: from algorders import group_algebra
        sage: A = group_algebra(CyclicPermutationGroup(3))
        sage: A.dimension(), A.is_commutative()
        (3, True)
        sage: A.group_order()
        3
    """
    elements = G.list()
    n = len(elements)
    index = {g: i for i, g in enumerate(elements)}
    table = []
    for g in elements:
        row = []
        for h in elements:
            v = [0] * n
            v[index[g * h]] = 1
            row.append(v)
        table.append(row)
    one = [0] * n
    one[index[G.one()]] = 1
    names = ['[%s]' % g for g in elements]
    return GroupAlgebra(G, table, one=one, names=names, check=False)
