r"""

Sage code for maximal orders in finite-dimensional algebras over QQ

We enlarge an order prime by prime. For a prime p whose square divides the discriminant we compute a p-maximal overorder, using either

- the radical method (for p larger than the degree): replace O by the ring of multipliers of its p-radical until this stabilizes; or

- the meataxe method (for small p): run through the maximal two-sided ideals above p and replace O by the first ring of multipliers that is strictly larger.

In both cases the p-valuation of the discriminant drops with every enlargement, and we stop once no maximal ideal above p has a larger ring of multipliers.

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

from sage.arith.misc import factor
from sage.matrix.constructor import matrix
from sage.matrix.special import identity_matrix
from sage.rings.integer import Integer
from sage.rings.rational_field import QQ

from .algebra import Algebra, GroupAlgebra, MatrixAlgebra
from .errors import PreconditionViolation
from .linalg import hnf_basis_matrix
from .modular import maximal_ideals, pradical
from .order import Order, sum_of_local_orders


class MaximalOrderCache(object):
    r"""
    A cache of maximal orders, keyed by the structure constants of the algebra.

    The cache is owned by whoever creates it and must be passed explicitly to maximal_order(). The first maximal order stored for an algebra is kept.

    EXAMPLES::

        sage: from algorders import MaximalOrderCache, maximal_order, number_field_algebra
        sage: x = polygen(QQ)
        sage: A = number_field_algebra(x^2 + 3)
        sage: cache = MaximalOrderCache()
        sage: M = maximal_order(A, cache=cache)
        sage: cache.get(A) is M
        True
    """

    def __init__(self):
        self.__orders = {}

    def __repr__(self):
        return 'Cache of maximal orders in %d algebra(s)' % len(self.__orders)

    def __contains__(self, A):
        return A.fingerprint() in self.__orders

    def __len__(self):
        return len(self.__orders)

    def get(self, A):
        r"""
        Return the cached maximal order of A, or None.
        """
        return self.__orders.get(A.fingerprint())

    def set_if_absent(self, A, O):
        r"""
        Store the maximal order O of A unless one is already stored. Return the stored order.
        """
        return self.__orders.setdefault(A.fingerprint(), O)

    def clear(self):
        self.__orders.clear()


def pmaximal_method(O, p):
    r"""
    Choose the algorithm used to compute a p-maximal overorder of O.

    OUTPUT: 'radical' if p is larger than the degree of O, and 'meataxe' otherwise. The radical of O/pO is cheap to compute from the trace form exactly when p > degree.
    """
    if p > O.degree():
        return 'radical'
    return 'meataxe'


def pmaximal_overorder(O, p, algorithm=None, verbose=False):
    r"""
    Compute a p-maximal order containing O.

    INPUT:
    - ``O`` -- an Order
    - ``p`` -- a prime
    - ``algorithm`` -- (default None) 'radical' or 'meataxe'. If None then we use pmaximal_method(O, p).
    - ``verbose`` -- boolean (default False); if True then we add commentary throughout the computation

    OUTPUT: an Order. If p^2 does not divide the discriminant of O then this is O itself.

    EXAMPLES::

        sage: from algorders import Order, number_field_algebra, pmaximal_overorder
        sage: x = polygen(QQ)
        sage: A = number_field_algebra(x^2 + 75)
        sage: O = Order(A, [A.basis()[1]])
        sage: pmaximal_overorder(O, 5).discriminant()
        -12
        sage: pmaximal_overorder(O, 2).discriminant()
        -75
        sage: pmaximal_overorder(O, 3) is O
        True

    Both algorithms can be used for every prime::

        sage: pmaximal_overorder(O, 5, algorithm='meataxe') == pmaximal_overorder(O, 5, algorithm='radical')
        True
    """
    p = Integer(p)
    if not p.is_prime():
        raise ValueError('%s is not prime' % p)
    _check_semisimple(O.algebra())
    d = O.discriminant()
    if d % (p * p):
        return O
    if algorithm is None:
        algorithm = pmaximal_method(O, p)
    if verbose:
        print('I will compute a %s-maximal overorder with the %s method.' % (p, algorithm))
    if algorithm == 'radical':
        return _pmaximal_overorder_radical(O, p, verbose=verbose)
    elif algorithm == 'meataxe':
        return _pmaximal_overorder_meataxe(O, p, verbose=verbose)
    raise ValueError('Unknown algorithm: %s' % algorithm)


def _enlarge_by_maximal_ideals(O, p, radical=None, verbose=False):
    r"""
    Repeatedly replace O by the ring of multipliers of one of its maximal ideals above p, as long as this enlarges O.

    The first pass uses the given p-radical of O, if any.
    """
    d = O.discriminant()
    while True:
        for P in maximal_ideals(O, p, radical=radical):
            OO = P.ring_of_multipliers()
            dd = OO.discriminant()
            if dd != d:
                O, d = OO, dd
                if verbose:
                    print('Enlarged the order; discriminant is now %s.' % d)
                break
        else:
            return O
        radical = None
        if d % (p * p):
            return O


def _pmaximal_overorder_meataxe(O, p, verbose=False):
    return _enlarge_by_maximal_ideals(O, p, verbose=verbose)


def _pmaximal_overorder_radical(O, p, verbose=False):
    d = O.discriminant()
    while True:
        I = pradical(O, p)
        OO = I.ring_of_multipliers()
        dd = OO.discriminant()
        if dd == d:
            if verbose:
                print('The ring of multipliers of the %s-radical is the order itself; now checking maximal ideals.' % p)
            return _enlarge_by_maximal_ideals(O, p, radical=I, verbose=verbose)
        if verbose:
            print('Enlarged the order; discriminant is now %s.' % dd)
        if dd % (p * p):
            return OO
        O, d = OO, dd


def any_order(A):
    r"""
    Return some order of the algebra A.

    If d is the common denominator of the structure constants then ZZ * 1 + d * ZZ^n is closed under multiplication.

    EXAMPLES::

        sage: from algorders import any_order, matrix_algebra
        sage: any_order(matrix_algebra(2)).discriminant()
        -1
    """
    n = A.dimension()
    d = A.structure_constants_denominator()
    M = matrix(QQ, [A.one().vector()] + (d * identity_matrix(QQ, n)).rows())
    return Order(A, M, check=False)


def equation_order(A):
    r"""
    Return the order ZZ[a] of a commutative semisimple algebra A, for an integral primitive element a.

    EXAMPLES::

        sage: from algorders import equation_order, group_algebra
        sage: equation_order(group_algebra(CyclicPermutationGroup(2))).discriminant()
        4
    """
    a = A.primitive_element()
    f = a.characteristic_polynomial()
    d = Integer(1)
    for c in f.list():
        d = d.lcm(c.denominator())
    a = a * d
    n = A.dimension()
    return Order(A, [a ** i for i in range(n)], is_basis=True)


def _check_semisimple(A):
    if not A.is_semisimple():
        raise PreconditionViolation('The algebra is not semisimple')


def _saturation_primes(O):
    r"""
    Return the primes p with p^2 | disc(O) at which the order O may fail to be p-maximal.

    If O contains the group ring ZZ[G] of a group algebra then only primes dividing |G| can occur; otherwise we factor the discriminant.
    """
    A = O.algebra()
    _check_semisimple(A)
    d = O.discriminant()
    if isinstance(A, GroupAlgebra) and all(g in O for g in A.basis()):
        primes = A.group_order().prime_divisors()
    else:
        primes = [p for p, _ in factor(abs(d))]
    return [p for p in primes if not d % (p * p)]


def maximal_order(X, cache=None, verbose=False):
    r"""
    Compute a maximal order.

    INPUT:
    - ``X`` -- an Order; or an Algebra
    - ``cache`` -- (optional) a MaximalOrderCache. If it contains a maximal order of the algebra that contains X then that order is returned; otherwise the result is stored in it.
    - ``verbose`` -- boolean (default False); if True then we add commentary throughout the computation

    OUTPUT: a maximal Order containing X (if X is an Order)

    EXAMPLES::

        sage: from algorders import Order, maximal_order, number_field_algebra, quaternion_algebra
        sage: x = polygen(QQ)
        sage: maximal_order(number_field_algebra(x^2 - 2)).discriminant()
        8
        sage: maximal_order(number_field_algebra(x^2 + 1)).discriminant()
        -4
        sage: maximal_order(number_field_algebra(x^2 + 3)).discriminant()
        -3

    The Hurwitz order::

        sage: A = quaternion_algebra(-1, -1)
        sage: _, i, j, k = A.basis()
        sage: M = maximal_order(Order(A, [i, j]))
        sage: M.discriminant()
        -4
        sage: (A.one() + i + j + k) / 2 in M
        True
    """
    if isinstance(X, Algebra):
        A = X
        if cache is not None and A in cache:
            return cache.get(A)
        O = any_order(A)
    else:
        O = X
        A = O.algebra()
        if cache is not None:
            M = cache.get(A)
            if M is not None and O.is_contained_in(M):
                return M
    if O.maximality():
        M = O
    else:
        primes = _saturation_primes(O)
        d = O.discriminant()
        if verbose:
            print('The discriminant is %s. I will compute p-maximal overorders for p in %s.' % (d, primes))
        local_orders = {}
        for p in primes:
            local_orders[p] = pmaximal_overorder(O, p, verbose=verbose)
        M = sum_of_local_orders(O, local_orders)
        M._set_maximal(True)
    if cache is not None:
        cache.set_if_absent(A, M)
    return M


def is_maximal(O, cache=None):
    r"""
    Test whether the order O is maximal.

    The answer is recorded in O, so it is computed at most once.

    EXAMPLES::

        sage: from algorders import Order, is_maximal, number_field_algebra
        sage: x = polygen(QQ)
        sage: A = number_field_algebra(x^2 + 3)
        sage: is_maximal(Order(A, [A.basis()[1]]))
        False
        sage: is_maximal(Order(A, [(A.one() + A.basis()[1]) / 2]))
        True
    """
    m = O.maximality()
    if m is not None:
        return m
    _check_semisimple(O.algebra())
    d = O.discriminant()
    M = cache.get(O.algebra()) if cache is not None else None
    if M is not None:
        m = (d == M.discriminant())
    else:
        m = True
        for p in _saturation_primes(O):
            if pmaximal_overorder(O, p).discriminant() != d:
                m = False
                break
    O._set_maximal(m)
    return m


MaximalOrder = maximal_order


def nice_order(O):
    r"""
    Conjugate a maximal order of a full matrix algebra M_n(QQ) to M_n(ZZ).

    INPUT:
    - ``O`` -- a maximal Order of the algebra matrix_algebra(n)

    OUTPUT: a tuple (R, a) where R is the order M_n(ZZ) and a is a unit of the algebra with a * O * a^(-1) = R

    ALGORITHM: the first rows of the matrices in O span a lattice L in QQ^n with L * O \subseteq L. As O is maximal it is the ring of all X with L * X \subseteq L, so if the rows of M are a basis of L then M * O * M^(-1) = M_n(ZZ).

    EXAMPLES::

        sage: from algorders import matrix_algebra, nice_order, Order
        sage: A = matrix_algebra(2)
        sage: E11, E12, E21, E22 = A.basis()
        sage: O = Order(A, [E11, E12 * 2, E21 / 2, E22])
        sage: R, a = nice_order(O)
        sage: R.basis_matrix() == identity_matrix(4)
        True
        sage: A.matrix(a)
        [1 0]
        [0 2]
    """
    A = O.algebra()
    if not isinstance(A, MatrixAlgebra):
        raise PreconditionViolation('The order does not lie in a full matrix algebra')
    if not is_maximal(O):
        raise PreconditionViolation('The order is not maximal')
    M = hnf_basis_matrix([A.matrix(x).row(0) for x in O.basis_in_algebra()])
    a = A.from_matrix(M)
    a_inv = A.from_matrix(M.inverse())
    R = Order(A, [a * x * a_inv for x in O.basis_in_algebra()], is_basis=True)
    R._set_maximal(True)
    return R, a
