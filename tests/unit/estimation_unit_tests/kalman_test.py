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

"""Unit tests for kalman_gain()."""

import unittest

import numpy as np
from numpy.testing import assert_allclose

try:
    import torch

    HAS_TORCH = True
except ImportError:
    HAS_TORCH = False

from asymvar.exceptions import InvalidArgumentError
from asymvar.estimation import kalman_gain


class TestKalmanGain(unittest.TestCase):
    def setUp(self):
        self.Sigma = np.array([[0.4, 0.3], [0.3, 0.45]])

    def test_identity_observation(self):
        K = kalman_gain(self.Sigma, None, 0.5 * self.Sigma)
        assert_allclose(K, np.eye(2) / 1.5, atol=1e-12)

    def test_explicit_identity_matches_default(self):
        K_default = kalman_gain(self.Sigma, None, np.eye(2))
        K_explicit = kalman_gain(self.Sigma, np.eye(2), np.eye(2))
        assert_allclose(K_default, K_explicit)

    def test_scalar(self):
        K = kalman_gain([[2.0]], [[1.0]], [[2.0]])
        assert_allclose(K, [[0.5]])

    def test_partial_observation(self):
        Sigma = np.diag([1.0, 2.0])
        G = np.array([[1.0, 0.0]])
        K = kalman_gain(Sigma, G, [[1.0]])

        self.assertEqual(K.shape, (2, 1))
        assert_allclose(K, [[0.5], [0.0]])

    def test_matches_explicit_inverse(self):
        G = np.array([[1.0, 0.5], [0.0, 1.0], [2.0, -1.0]])
        R = np.diag([0.1, 0.2, 0.3])
        K = kalman_gain(self.Sigma, G, R)

        expected = self.Sigma @ G.T @ np.linalg.inv(G @ self.Sigma @ G.T + R)
        assert_allclose(K, expected, atol=1e-12)

    def test_noise_shape_mismatch(self):
        with self.assertRaises(InvalidArgumentError):
            kalman_gain(self.Sigma, None, np.eye(3))

    def test_observation_column_mismatch(self):
        with self.assertRaises(InvalidArgumentError):
            kalman_gain(self.Sigma, np.ones((1, 3)), [[1.0]])

    @unittest.skipIf(not HAS_TORCH, "PyTorch not available")
    def test_torch_backend(self):
        K = kalman_gain(self.Sigma, None, 0.5 * self.Sigma, backend="torch")
        self.assertIsInstance(K, torch.Tensor)


if __name__ == "__main__":
    unittest.main(verbosity=2)
