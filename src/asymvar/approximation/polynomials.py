# Copyright (C) 2025 Gil Benezer
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published
# by the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""
Univariate Polynomials

Coefficients are in ascending order:

    p(x) = a₀ + a₁ x + a₂ x² + ... + aₙ xⁿ   <->   [a₀, a₁, ..., aₙ]

Evaluation is plain NumPy. Differentiation and root finding go through
sympy.Poly with exact rational coefficients (each float converted exactly).
"""

import numpy as np
import sympy as sp

from asymvar.exceptions import InvalidArgumentError
from asymvar.types.core import ArrayLike
from asymvar.utils.validation import as_finite_array, as_vector

_X = sp.Symbol("x")


def _coefficients(coefficients: ArrayLike) -> np.ndarray:
    coeffs = as_vector(coefficients, "coefficients")
    if coeffs.shape[0] == 0:
        raise InvalidArgumentError("coefficients must not be empty")
    return coeffs


def _to_poly(coeffs: np.ndarray) -> sp.Poly:
    # sympy expects the leading coefficient first
    return sp.Poly([sp.Rational(float(c)) for c in coeffs[::-1]], _X)


def evaluate_polynomial(x, coefficients: ArrayLike):
    """
    Evaluate p(x) = Σᵢ aᵢ xⁱ.

    Examples
    --------
    >>> evaluate_polynomial(1.0, [2, 4])
    6.0
    >>> evaluate_polynomial(np.array([0.0, 1.0, 2.0]), [1, 0, 1])
    array([1., 2., 5.])
    """
    coeffs = _coefficients(coefficients)
    x_np = as_finite_array(x, "x")
    value = sum(a * x_np**i for i, a in enumerate(coeffs))
    return float(value) if np.ndim(value) == 0 else value


def differentiate_polynomial(coefficients: ArrayLike) -> np.ndarray:
    """
    Coefficients of p'(x), ascending.

    The derivative of a constant is [0.0].

    Examples
    --------
    >>> differentiate_polynomial([2, -5, 2])
    array([-5.,  4.])
    """
    poly = _to_poly(_coefficients(coefficients))
    derivative = poly.diff(_X).all_coeffs()
    return np.array([float(c) for c in derivative[::-1]], dtype=float)


def polynomial_roots(coefficients: ArrayLike) -> np.ndarray:
    """
    Complex roots of p, sorted by real then imaginary part.

    Raises
    ------
    InvalidArgumentError
        If every coefficient is zero (every x is a root)

    Examples
    --------
    >>> polynomial_roots([2, -5, 2])
    array([0.5+0.j, 2. +0.j])
    """
    coeffs = _coefficients(coefficients)
    if not np.any(coeffs):
        raise InvalidArgumentError("The zero polynomial has no finite set of roots")
    roots = [complex(r) for r in _to_poly(coeffs).nroots()]
    return np.array(sorted(roots, key=lambda z: (z.real, z.imag)), dtype=complex)


__all__ = ["evaluate_polynomial", "differentiate_polynomial", "polynomial_roots"]
