r"""

Sage code for the reduction O/pO of an order: p-radicals and maximal two-sided ideals above p

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
from sage.matrix.special import identity_matrix
from sage.modules.free_module_element import vector
from sage.rings.finite_rings.finite_field_constructor import FiniteField as GF
from sage.rings.finite_rings.integer_mod_ring import Integers
from sage.rings.integer import Integer
from sage.rings.integer_ring import ZZ
from sage.rings.rational_field import QQ

from .ideal import OrderIdeal


class ResidueAlgebra(object):
    r"""
    This class represents the finite F_p-algebra O/pO, in coordinates with respect to the basis of O.

    INPUT:
    - ``O`` -- an Order
    - ``p`` -- a prime
    - ``radical`` -- (optional) an OrderIdeal of O known to be the p-radical; if given then it is not recomputed
    """

    def __init__(self, O, p, radical=None):
        p = Integer(p)
        if not p.is_prime():
            raise ValueError('%s is not prime' % p)
        F = GF(p)
        B = O.basis_in_algebra()
        self.__order = O
        self.__p = p
        self.__field = F
        self.__dimension = len(B)
        self.__table = [matrix(F, [O.coordinates(x * y) for y in B]) for x in B]
        self.__one = vector(F, O.coordinates(O.algebra().one()))
        if radical is not None:
            J = matrix(F, [O.coordinates(x) for x in radical.basis()])
            self.__radical = J.echelon_form().matrix_from_rows(range(J.rank()))

    def __repr__(self):
        return 'Reduction modulo %s of %s' % (self.__p, self.__order)

    def characteristic(self):
        return self.__p

    def dimension(self):
        return self.__dimension

    def one(self):
        return self.__one

    def product(self, x, y):
        return sum((c * (y * self.__table[i]) for i, c in enumerate(x) if c), vector(self.__field, self.__dimension))

    def left_matrix(self, x):
        r"""
        Return the matrix M with v(y) * M = v(x * y).
        """
        return sum((c * self.__table[i] for i, c in enumerate(x) if c), matrix(self.__field, self.__dimension))

    def _generalized_trace(self, x, i):
        r"""
        Compute g_i(x) = (Tr(X^(p^i)) mod p^(i+1)) / p^i, where X is the integral lift of the matrix of left multiplication by x.
        """
        p = self.__p
        n = self.__dimension
        X = matrix(Integers(p ** (i + 1)), n, n, [ZZ(c) for c in self.left_matrix(x).list()])
        t = ZZ((X ** (p ** i)).trace())
        return self.__field(t // p ** i)

    def radical(self):
        r"""
        Return the Jacobson radical of self, as a matrix over F_p whose rows are an echelon basis.

        ALGORITHM: (Ronyai; Cohen, Ivanyos and Wales) Let I_{-1} = A and
        I_i = { x in I_{i-1} : g_i(x * a) = 0 for all a in A }.
        The maps g_i are linear on I_{i-1}, and the radical is I_l where p^l <= n < p^(l+1). For p > n this is just the kernel of the trace form.

        EXAMPLES::

            sage: from algorders import Order, number_field_algebra
            sage: from algorders.modular import ResidueAlgebra
            sage: x = polygen(QQ)
            sage: A = number_field_algebra(x^2 - 2)
            sage: ResidueAlgebra(Order(A, [A.basis()[1]]), 2).radical()
            [0 1]
        """
        try:
            return self.__radical
        except AttributeError:
            p = self.__p
            n = self.__dimension
            F = self.__field
            l = 0
            while p ** (l + 1) <= n:
                l += 1
            E = identity_matrix(F, n).rows()
            I = identity_matrix(F, n)
            for i in range(l + 1):
                if not I.nrows():
                    break
                G = matrix(F, [[self._generalized_trace(self.product(u, a), i) for a in E] for u in I.rows()])
                I = G.left_kernel().basis_matrix() * I
            self.__radical = I.echelon_form()
            return self.__radical

    def maximal_ideals(self):
        r"""
        Return the maximal two-sided ideals of self, as a list of matrices over F_p whose rows span them.

        ALGORITHM: modulo the radical J we obtain a semisimple algebra S. Its center is a product of finite fields; the elements fixed by Frobenius form a split algebra F_p x ... x F_p whose idempotents e_1, ..., e_r are the central primitive idempotents of S. The maximal ideals are J + (1 - e_i) * S.
        """
        try:
            return self.__maximal_ideals
        except AttributeError:
            pass
        F = self.__field
        n = self.__dimension
        J = self.radical()
        pivots = J.pivots()
        free = [k for k in range(n) if k not in pivots]
        s = len(free)

        def proj(v):
            w = v - sum((v[c] * J.row(i) for i, c in enumerate(pivots)), vector(F, n))
            return vector(F, [w[k] for k in free])

        def lift(q):
            v = vector(F, n)
            for k, c in zip(free, q):
                v[k] = c
            return v

        def mult(x, y):
            return proj(self.product(lift(x), lift(y)))

        def power(x, N):
            y = proj(self.__one)
            while N:
                if N % 2:
                    y = mult(y, x)
                x = mult(x, x)
                N = N // 2
            return y

        S = identity_matrix(F, s).rows()
        one = proj(self.__one)
        X = matrix(F, [sum((list(mult(a, b) - mult(b, a)) for b in S), []) for a in S])
        C = X.left_kernel().basis_matrix()
        Fr = matrix(F, [C.solve_left(power(c, self.__p)) for c in C.rows()])
        split = (Fr - identity_matrix(F, C.nrows())).left_kernel().basis_matrix() * C
        idempotents = [one]
        for b in split.rows():
            new_idempotents = []
            for e in idempotents:
                x = mult(e, b)
                roots = matrix(F, [mult(x, a) for a in S]).minpoly().roots(multiplicities=False)
                if len(roots) < 2:
                    new_idempotents.append(e)
                    continue
                for lam in roots:
                    E = e
                    for mu in roots:
                        if mu != lam:
                            E = mult(E, x - mu * e) / (lam - mu)
                    if E:
                        new_idempotents.append(E)
            idempotents = new_idempotents
        L = []
        for e in idempotents:
            rows = list(J.rows()) + [lift(mult(one - e, a)) for a in S]
            L.append(matrix(F, rows))
        self.__maximal_ideals = L
        return L


def _ideal_from_residues(O, p, K):
    r"""
    Return the two-sided ideal pO + (lift of the rows of K), where K is a matrix over F_p in the coordinates of O.
    """
    n = O.degree()
    rows = [vector(ZZ, [ZZ(c) for c in v]) for v in K.rows()] + (p * identity_matrix(ZZ, n)).rows()
    return OrderIdeal(O, matrix(QQ, rows) * O.basis_matrix(), side='two-sided')


def pradical(O, p):
    r"""
    Compute the p-radical of O, i.e. the two-sided ideal of elements that are nilpotent modulo pO.

    For p larger than the degree of O this is the set of x with trred(x * O) \subseteq p * ZZ; otherwise we use the radical of O/pO.

    EXAMPLES::

        sage: from algorders import Order, number_field_algebra, pradical
        sage: x = polygen(QQ)
        sage: A = number_field_algebra(x^2 + 75)
        sage: pradical(Order(A, [A.basis()[1]]), 5).basis_matrix()
        [5 0]
        [0 1]
    """
    p = Integer(p)
    if p > O.degree():
        K = matrix(GF(p), O.trace_form()).left_kernel().basis_matrix()
    else:
        K = ResidueAlgebra(O, p).radical()
    return _ideal_from_residues(O, p, K)


def maximal_ideals(O, p, radical=None):
    r"""
    Compute the maximal two-sided ideals of O that contain pO.

    INPUT:
    - ``O`` -- an Order
    - ``p`` -- a prime
    - ``radical`` -- (optional) the p-radical of O, if it is already known

    OUTPUT: a list of OrderIdeal's (these properly contain pO)

    EXAMPLES::

        sage: from algorders import Order, group_algebra, maximal_ideals
        sage: A = group_algebra(CyclicPermutationGroup(3))
        sage: len(maximal_ideals(Order(A, A.basis()), 2))
        2
    """
    p = Integer(p)
    R = ResidueAlgebra(O, p, radical=radical)
    return [_ideal_from_residues(O, p, K) for K in R.maximal_ideals()]
