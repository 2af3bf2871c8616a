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
Kalman Gain

For a prior x ~ N(x̂, Σ) and an observation y = G x + v, v ~ N(0, R):

    K = Σ G' (G Σ G' + R)^{-1}
"""

from typing import Optional

import numpy as np
from scipy import linalg

from asymvar.types.backends import DEFAULT_BACKEND, Backend
from asymvar.types.core import CovarianceMatrix, GainMatrix, ObservationMatrix
from asymvar.utils.backend_utils import from_numpy, resolve_backend
from asymvar.utils.validation import as_matrix, as_square_matrix


def kalman_gain(
    Sigma: CovarianceMatrix,
    G: Optional[ObservationMatrix],
    R: CovarianceMatrix,
    backend: Backend = DEFAULT_BACKEND,
) -> GainMatrix:
    """
    Compute the Kalman gain Σ G' (G Σ G' + R)^{-1}.

    Args:
        Sigma: Prior state covariance (n, n)
        G: Observation matrix (m, n). None means the identity (m = n)
        R: Measurement noise covariance (m, m)
        backend: Array type of the returned gain

    Returns:
        Gain K (n, m)

    Raises:
        InvalidArgumentError: On shape mismatch or an unusable backend
        LinAlgError: If G Σ G' + R is singular

    Examples
    --------
    >>> Sigma = np.array([[0.4, 0.3], [0.3, 0.45]])
    >>> K = kalman_gain(Sigma, None, 0.5 * Sigma)
    >>> np.allclose(K, np.eye(2) / 1.5)
    True
    """
    backend = resolve_backend(backend)
    Sigma_np = as_square_matrix(Sigma, "Sigma")
    n = Sigma_np.shape[0]
    G_np = np.eye(n) if G is None else as_matrix(G, "G", shape=(None, n))
    m = G_np.shape[0]
    R_np = as_matrix(R, "R", shape=(m, m))

    innovation = G_np @ Sigma_np @ G_np.T + R_np
    # K S = Σ G'  <=>  S' K' = G Σ'
    K = linalg.solve(innovation.T, (Sigma_np @ G_np.T).T).T

    return from_numpy(K, backend)


__all__ = ["kalman_gain"]
