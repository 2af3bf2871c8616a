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
Stability and Stationary Moments

Eigenvalue-based stability of the transition matrix A and the stationary
distribution of

    X[t+1] = A X[t] + b + Σ W[t+1]

Stationarity requires all |λ(A)| < 1. Then

    E[X]   = (I - A)^{-1} b
    Var[X] = S,  S = A S A' + Σ Σ'
"""

from typing import Optional

import numpy as np
from scipy import linalg

from asymvar.exceptions import InvalidArgumentError
from asymvar.lyapunov.doubling import LyapunovMethod, solve_discrete_lyapunov
from asymvar.types.core import ShockMatrix, StateVector, TransitionMatrix
from asymvar.types.lyapunov import StabilityInfo, StationaryMoments
from asymvar.utils.validation import as_matrix, as_square_matrix, as_vector


def analyze_stability(A: TransitionMatrix, tolerance: float = 1e-10) -> StabilityInfo:
    """
    Analyze discrete-time stability via eigenvalues.

    Args:
        A: Transition matrix (n, n)
        tolerance: Width of the band around |λ| = 1 counted as marginal

    Returns:
        StabilityInfo with eigenvalues, magnitudes, spectral radius and
        the stable / marginally stable / unstable classification

    Raises:
        InvalidArgumentError: If A is not a finite square matrix

    Examples
    --------
    >>> info = analyze_stability(np.array([[0.9, 0.1], [0.0, 0.8]]))
    >>> info['is_stable'], info['spectral_radius']
    (True, 0.9)
    >>> analyze_stability(np.eye(2))['is_marginally_stable']
    True
    """
    A_np = as_square_matrix(A, "A")

    eigenvalues = np.linalg.eigvals(A_np)
    magnitudes = np.abs(eigenvalues)
    spectral_radius = float(np.max(magnitudes))

    result: StabilityInfo = {
        "eigenvalues": eigenvalues,
        "magnitudes": magnitudes,
        "spectral_radius": spectral_radius,
        "is_stable": bool(spectral_radius < 1.0 - tolerance),
        "is_marginally_stable": bool(abs(spectral_radius - 1.0) <= tolerance),
        "is_unstable": bool(spectral_radius > 1.0 + tolerance),
    }

    return result


def spectral_radius(A: TransitionMatrix) -> float:
    """Largest eigenvalue magnitude of A."""
    return analyze_stability(A)["spectral_radius"]


def stationary_moments(
    A: TransitionMatrix,
    Sigma: ShockMatrix,
    b: Optional[StateVector] = None,
    method: LyapunovMethod = "doubling",
) -> StationaryMoments:
    """
    Stationary mean and covariance of X[t+1] = A X[t] + b + Σ W[t+1].

    Args:
        A: Transition matrix (n, n)
        Sigma: Shock loading (n, k)
        b: Intercept (n,). Default is zero
        method: Lyapunov solver passed to solve_discrete_lyapunov

    Returns:
        StationaryMoments with 'mean' (n,) and 'covariance' (n, n)

    Raises:
        InvalidArgumentError: If shapes mismatch or A is not stable, in
            which case no stationary distribution exists
    """
    A_np = as_square_matrix(A, "A")
    n = A_np.shape[0]
    Sigma_np = as_matrix(Sigma, "Sigma", shape=(n, None))
    b_np = np.zeros(n) if b is None else as_vector(b, "b", length=n)

    stability = analyze_stability(A_np)
    if not stability["is_stable"]:
        raise InvalidArgumentError(
            f"No stationary distribution: spectral radius of A is "
            f"{stability['spectral_radius']:.6f}, need < 1",
        )

    mean = linalg.solve(np.eye(n) - A_np, b_np)
    covariance = solve_discrete_lyapunov(A_np, Sigma_np @ Sigma_np.T, method=method)

    result: StationaryMoments = {
        "mean": mean,
        "covariance": covariance,
    }

    return result


__all__ = ["analyze_stability", "spectral_radius", "stationary_moments"]
