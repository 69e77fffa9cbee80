r"""

Exact lattice helpers: Hermite normal forms, integral solution lattices and signatures

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
from sage.rings.integer_ring import ZZ
from sage.rings.rational_field import QQ


def hnf_basis_matrix(M):
    r"""
    Return the Hermite normal form basis of the ZZ-lattice spanned by the rows of ``M``.

    INPUT:
    - ``M`` -- a matrix over QQ (or a list of rational vectors)

    OUTPUT: a matrix over QQ with linearly independent rows, in Hermite normal form after clearing the common denominator. Two matrices span the same lattice if and only if this function returns the same result.

    EXAMPLES::

        sage: from algorders.linalg import hnf_basis_matrix
        sage: hnf_basis_matrix(matrix(QQ, [[2, 0], [1, 1], [0, 4]]))
        [1 1]
        [0 2]
        sage: hnf_basis_matrix([vector([1/2, 0]), vector([0, 1])])
        [1/2   0]
        [  0   1]
    """
    M = matrix(QQ, M)
    d = M.denominator()
    H = (d * M).change_ring(ZZ).echelon_form()
    r = H.rank()
    return H.matrix_from_rows(range(r)).change_ring(QQ) / d


def integral_row_solutions(M):
    r"""
    Compute the lattice of rational row vectors ``v`` with ``v * M`` integral.

    INPUT:
    - ``M`` -- a rational matrix with n rows and rank n

    OUTPUT: the basis matrix (in Hermite normal form) of { v in QQ^n : v * M in ZZ^m }

    ALGORITHM: with d the denominator of M and N = d * M, the condition is that v is in d * ZZ when paired with every column of N, i.e. with every row of the Hermite normal form H of N^T. So the lattice is d * (H^T)^(-1) * ZZ^n.

    EXAMPLES::

        sage: from algorders.linalg import integral_row_solutions
        sage: integral_row_solutions(matrix(QQ, [[1/2, 1], [0, 1/3]]))
        [2 0]
        [0 3]
    """
    n = M.nrows()
    d = M.denominator()
    H = (d * M).change_ring(ZZ).transpose().echelon_form()
    H = H.matrix_from_rows(range(n))
    return hnf_basis_matrix(d * H.transpose().inverse())


def positive_root_count(f):
    r"""
    Count the positive roots (with multiplicity) of a polynomial all of whose roots are real.

    For such polynomials Descartes' rule of signs is exact, so this only looks at the signs of the coefficients.
    """
    signs = [c.sign() for c in f.list() if c]
    return sum(1 for a, b in zip(signs, signs[1:]) if a != b)


def symmetric_signature(M):
    r"""
    Return the signature (npos, nneg) of a symmetric rational matrix.

    We factor the characteristic polynomial into squarefree parts and count positive roots of each part, weighted by multiplicity. Zero eigenvalues are counted with the negative ones.

    EXAMPLES::

        sage: from algorders.linalg import symmetric_signature
        sage: symmetric_signature(matrix([[0, 1], [1, 0]]))
        (1, 1)
        sage: symmetric_signature(diagonal_matrix([2, -2, -2, -2]))
        (1, 3)
    """
    f = M.charpoly()
    npos = 0
    for g, e in f.change_ring(QQ).squarefree_decomposition():
        npos += positive_root_count(g) * e
    return npos, f.degree() - npos
