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
Unit Tests for Ordinary Least Squares

Test Structure:
- TestOLSEstimate: Closed-form estimator
- TestQuadraticDesign: Regressor matrix construction
- TestOLSExperiment: Monte Carlo sampling distribution
"""

import unittest

import numpy as np
from numpy.testing import assert_allclose
from scipy import linalg

from asymvar.exceptions import InvalidArgumentError
from asymvar.estimation import ols_estimate, quadratic_design_matrix, simulate_ols_experiment


class TestOLSEstimate(unittest.TestCase):
    """Test ols_estimate()."""

    def test_exact_fit(self):
        x = np.arange(4.0)
        X = np.column_stack([np.ones(4), x])
        result = ols_estimate(X, 1.0 + 2.0 * x)

        assert_allclose(result["coefficients"], [1.0, 2.0], atol=1e-12)
        assert_allclose(result["residuals"], np.zeros(4), atol=1e-12)
        self.assertAlmostEqual(result["sigma"], 0.0, places=10)
        self.assertEqual(result["n_obs"], 4)

    def test_matches_lstsq(self):
        rng = np.random.default_rng(3)
        X = rng.standard_normal((30, 3))
        y = rng.standard_normal(30)

        result = ols_estimate(X, y)
        expected, *_ = np.linalg.lstsq(X, y, rcond=None)

        assert_allclose(result["coefficients"], expected, atol=1e-10)

    def test_residuals_orthogonal_to_regressors(self):
        rng = np.random.default_rng(5)
        X = rng.standard_normal((40, 4))
        y = rng.standard_normal(40)

        result = ols_estimate(X, y)
        assert_allclose(X.T @ result["residuals"], np.zeros(4), atol=1e-10)

    def test_sigma_uses_n_obs_divisor(self):
        X = np.ones((4, 1))
        y = np.array([1.0, -1.0, 1.0, -1.0])
        result = ols_estimate(X, y)

        self.assertAlmostEqual(result["sigma"], 1.0)

    def test_collinear_regressors(self):
        X = np.column_stack([np.ones(5), 2.0 * np.ones(5)])
        with self.assertRaises(linalg.LinAlgError):
            ols_estimate(X, np.arange(5.0))

    def test_too_few_observations(self):
        with self.assertRaises(InvalidArgumentError):
            ols_estimate(np.ones((2, 3)), np.ones(2))

    def test_length_mismatch(self):
        with self.assertRaises(InvalidArgumentError):
            ols_estimate(np.ones((5, 2)), np.ones(4))


class TestQuadraticDesign(unittest.TestCase):
    def test_columns(self):
        X = quadratic_design_matrix([1.0, 2.0], [3.0, 4.0])
        assert_allclose(X, [[1.0, 1.0, 3.0, 1.0], [2.0, 4.0, 4.0, 1.0]])

    def test_mismatched_lengths(self):
        with self.assertRaises(InvalidArgumentError):
            quadratic_design_matrix([1.0, 2.0], [3.0])


class TestOLSExperiment(unittest.TestCase):
    """Test simulate_ols_experiment()."""

    def setUp(self):
        self.params = (0.1, 0.2, 0.5, 1.0)

    def test_shapes(self):
        result = simulate_ols_experiment(*self.params, sigma=0.1, n_obs=50, n_simulations=20, rng=0)

        self.assertEqual(result["design"].shape, (50, 4))
        self.assertEqual(result["coefficients"].shape, (20, 4))
        self.assertEqual(result["sigmas"].shape, (20,))
        assert_allclose(result["true_coefficients"], self.params)
        self.assertEqual(result["true_sigma"], 0.1)

    def test_estimates_center_on_truth(self):
        result = simulate_ols_experiment(*self.params, sigma=0.1, n_obs=50, n_simulations=200, rng=1)

        assert_allclose(result["coefficients"].mean(axis=0), self.params, atol=0.05)
        self.assertAlmostEqual(result["sigmas"].mean(), 0.1, delta=0.02)

    def test_noiseless_recovers_parameters(self):
        result = simulate_ols_experiment(*self.params, sigma=0.0, n_simulations=3, rng=2)

        for row in result["coefficients"]:
            assert_allclose(row, self.params, atol=1e-8)
        assert_allclose(result["sigmas"], np.zeros(3), atol=1e-8)

    def test_reproducible(self):
        first = simulate_ols_experiment(*self.params, sigma=0.1, rng=9)
        second = simulate_ols_experiment(*self.params, sigma=0.1, rng=9)
        assert_allclose(first["coefficients"], second["coefficients"], rtol=0, atol=0)

    def test_negative_sigma(self):
        with self.assertRaises(InvalidArgumentError):
            simulate_ols_experiment(*self.params, sigma=-0.1)


if __name__ == "__main__":
    unittest.main(verbosity=2)
