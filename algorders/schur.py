r"""

Local Schur indices of central simple algebras over QQ, computed from maximal orders

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

from sage.arith.functions import lcm
from sage.misc.functional import isqrt
from sage.rings.integer import Integer

from .errors import PreconditionViolation
from .linalg import symmetric_signature


def _matrix_degree(O):
    r"""
    Return n with n^2 = dim(A), where A is the algebra of O.
    """
    N = O.degree()
    n = isqrt(N)
    if n * n != N:
        raise PreconditionViolation('The dimension %s of the algebra is not a square' % N)
    return n


def trace_signature(O):
    r"""
    Return the signature (npos, nneg) of the reduced trace form of O.

    EXAMPLES::

        sage: from algorders import Order, quaternion_algebra, trace_signature
        sage: A = quaternion_algebra(-1, -1)
        sage: trace_signature(Order(A, A.basis()[1:3]))
        (1, 3)
    """
    return symmetric_signature(O.trace_form())


def schur_index_at_real_place(O):
    r"""
    Return the Schur index of A \otimes RR, where A is the (central simple) algebra containing O.

    If A has dimension n^2 then A \otimes RR is split exactly when its trace form has n(n+1)/2 positive eigenvalues (the symmetric matrices); otherwise it is a matrix algebra over the Hamilton quaternions and the index is 2.

    EXAMPLES::

        sage: from algorders import any_order, matrix_algebra, quaternion_algebra, schur_index_at_real_place
        sage: schur_index_at_real_place(any_order(quaternion_algebra(-1, -1)))
        2
        sage: schur_index_at_real_place(any_order(quaternion_algebra(-1, 3)))
        1
        sage: schur_index_at_real_place(any_order(matrix_algebra(2)))
        1
    """
    n = _matrix_degree(O)
    npos, _ = trace_signature(O)
    if npos == n * (n + 1) // 2:
        return Integer(1)
    return Integer(2)


def schur_index_at_p(O, p):
    r"""
    Return the Schur index of A \otimes QQ_p, where A is the (central simple) algebra containing the maximal order O.

    O must already be known to be maximal (e.g. the output of maximal_order()).

    EXAMPLES::

        sage: from algorders import Order, maximal_order, quaternion_algebra, schur_index_at_p
        sage: A = quaternion_algebra(-1, -1)
        sage: M = maximal_order(A)
        sage: schur_index_at_p(M, 2), schur_index_at_p(M, 3)
        (2, 1)
    """
    if not O.maximality():
        raise PreconditionViolation('The order is not known to be maximal')
    v = O.discriminant().valuation(p)
    if not v:
        return Integer(1)
    n = _matrix_degree(O)
    t = n - v // n
    return Integer(n // t)


def schur_index(O):
    r"""
    Return the Schur index of the central simple algebra containing the maximal order O.

    Over QQ this is the least common multiple of the local indices.
    """
    L = [schur_index_at_real_place(O)] + [schur_index_at_p(O, p) for p in O.discriminant().prime_divisors()]
    return lcm(L)


def representatives_of_maximal_orders(O):
    r"""
    Return representatives of the conjugacy classes of maximal orders in the algebra of the maximal order O.

    This requires a simple algebra that satisfies the Eichler condition; then there is exactly one class.
    """
    A = O.algebra()
    if not A.is_simple():
        raise PreconditionViolation('The algebra is not simple')
    if not A.is_eichler():
        raise PreconditionViolation('The algebra does not satisfy the Eichler condition')
    if not O.maximality():
        raise PreconditionViolation('The order is not known to be maximal')
    return [O]
