r"""

Conductors of orders

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

from .errors import NonIntegralInclusion
from .ideal import OrderIdeal
from .linalg import integral_row_solutions


def conductor(R, S, action='left'):
    r"""
    Compute the conductor of the order R in the order S.

    INPUT:
    - ``R``, ``S`` -- Orders in the same algebra with R \subseteq S
    - ``action`` -- 'left' (default) or 'right'

    OUTPUT: the ideal { x in R : S * x \subseteq R } if action == 'left', which is a right ideal of R; or { x in R : x * S \subseteq R } if action == 'right', which is a left ideal of R.

    ALGORITHM: let T be the (integral) matrix expressing the basis of R in the basis of S. For each basis element s of S, the matrix T * M(s) * T^(-1) maps the coordinates (in R) of x to the coordinates (in R) of s * x (resp. x * s), where M(s) is the integral representation matrix of s on S. The conductor consists of those x for which all of these are integral.

    EXAMPLES::

        sage: from algorders import Order, conductor, number_field_algebra
        sage: x = polygen(QQ)
        sage: A = number_field_algebra(x^2 + 3)
        sage: a = A.basis()[1]
        sage: R, S = Order(A, [a]), Order(A, [(A.one() + a) / 2])
        sage: c = conductor(R, S)
        sage: c.norm(), A(2) in c, a in c
        (2, True, False)
    """
    if action not in ('left', 'right'):
        raise ValueError('Unknown action: %s' % action)
    A = R.algebra()
    if S.algebra() != A:
        raise NonIntegralInclusion('The orders lie in different algebras')
    T = R.basis_matrix() * S.basis_matrix_inverse()
    if T.denominator() != 1:
        raise NonIntegralInclusion('The first order is not contained in the second')
    n = R.degree()
    T_inv = T.inverse()
    B, B_inv = S.basis_matrix(), S.basis_matrix_inverse()
    M = block_matrix(1, n, [T * B * A.representation_matrix(s, action) * B_inv * T_inv for s in S.basis_in_algebra()], subdivide=False)
    X = integral_row_solutions(M) * R.basis_matrix()
    if action == 'left':
        return OrderIdeal(R, X, side='right')
    return OrderIdeal(R, X, side='left')
