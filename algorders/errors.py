r"""

Exceptions raised by orders, ideals and the maximal order engine

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


class InvalidGenerators(ValueError):
    r"""
    Raised when elements or a basis matrix do not define an order (not integral, not closed under multiplication, or not of full rank).
    """
    pass


class PreconditionViolation(ValueError):
    r"""
    Raised when an operation is called outside of the situation where it is valid.

    For example: the p-adic Schur index of an order that is not known to be maximal, or a sum of orders that are not local at distinct primes.
    """
    pass


class NonIntegralInclusion(ValueError):
    r"""
    Raised when an order R is expected to lie in an order S but does not.
    """
    pass
