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

"""Unit tests for polynomial evaluation, differentiation and roots."""

import unittest

import numpy as np
from numpy.testing import assert_allclose

from asymvar.approximation import differentiate_polynomial, evaluate_polynomial, polynomial_roots
from asymvar.exceptions import InvalidArgumentError


class TestEvaluatePolynomial(unittest.TestCase):
    def test_linear(self):
        self.assertEqual(evaluate_polynomial(1.0, [2, 4]), 6.0)

    def test_vector_argument(self):
        assert_allclose(evaluate_polynomial(np.array([0.0, 1.0, 2.0]), [1, 0, 1]), [1.0, 2.0, 5.0])

    def test_constant(self):
        self.assertEqual(evaluate_polynomial(3.7, [2.5]), 2.5)

    def test_matches_numpy_polyval(self):
        coeffs = [1.0, -2.0, 0.5, 3.0]
        x = np.linspace(-2.0, 2.0, 9)
        assert_allclose(evaluate_polynomial(x, coeffs), np.polyval(coeffs[::-1], x))

    def test_empty_coefficients(self):
        with self.assertRaises(InvalidArgumentError):
            evaluate_polynomial(1.0, [])


class TestDifferentiatePolynomial(unittest.TestCase):
    def test_quadratic(self):
        assert_allclose(differentiate_polynomial([2, -5, 2]), [-5.0, 4.0])

    def test_cubic(self):
        assert_allclose(differentiate_polynomial([1.0, 0.0, 0.0, 2.0]), [0.0, 0.0, 6.0])

    def test_constant(self):
        assert_allclose(differentiate_polynomial([7.0]), [0.0])

    def test_fractional_coefficients(self):
        assert_allclose(differentiate_polynomial([0.1, 0.25, 0.5]), [0.25, 1.0])


class TestPolynomialRoots(unittest.TestCase):
    def test_real_roots(self):
        assert_allclose(polynomial_roots([2, -5, 2]), [0.5, 2.0], atol=1e-12)

    def test_complex_roots(self):
        # x² + 1
        roots = polynomial_roots([1.0, 0.0, 1.0])
        assert_allclose(roots, [-1j, 1j], atol=1e-12)

    def test_roots_are_zeros(self):
        coeffs = [-6.0, 11.0, -6.0, 1.0]
        roots = polynomial_roots(coeffs)

        assert_allclose(roots, [1.0, 2.0, 3.0], atol=1e-10)
        assert_allclose(evaluate_polynomial(roots.real, coeffs), np.zeros(3), atol=1e-9)

    def test_nonzero_constant_has_no_roots(self):
        self.assertEqual(polynomial_roots([4.0]).shape, (0,))

    def test_zero_polynomial(self):
        with self.assertRaises(InvalidArgumentError):
            polynomial_roots([0.0, 0.0])


if __name__ == "__main__":
    unittest.main(verbosity=2)
