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
Simulation of Linear Stochastic Difference Equations

Vector process:
    X[t+1] = A X[t] + b + Σ W[t+1],   W ~ N(0, I)

Scalar AR(1) process:
    y[t+1] = γ + θ y[t] + σ w[t+1],   w ~ N(0, 1)

Stationarity (|λ(A)| < 1, resp. |θ| < 1) gives

    AR(1) mean     = γ / (1 - θ)
    AR(1) variance = σ² / (1 - θ²)

and the vector covariance solves the discrete Lyapunov equation, which
makes the simulators a Monte Carlo check on the solvers.

Path layout
-----------
Time runs along axis 0. Independent paths, when requested, run along the
last axis:

- simulate_ar1:           (n_steps,) or (n_steps, n_paths)
- simulate_linear_system: (n_steps, n) or (n_steps, n, n_paths)
"""

import warnings
from typing import Optional

import numpy as np

from asymvar.exceptions import InvalidArgumentError
from asymvar.lyapunov.stability import analyze_stability
from asymvar.types.core import ArrayLike, Seed, ShockMatrix, StateVector, TransitionMatrix
from asymvar.types.estimation import EnsembleMoments
from asymvar.utils.validation import (
    as_finite_array,
    as_matrix,
    as_square_matrix,
    as_vector,
    check_finite_scalar,
    check_positive_int,
    make_rng,
)

# ============================================================================
# Vector Process
# ============================================================================


def simulate_linear_system(
    A: TransitionMatrix,
    Sigma: ShockMatrix,
    n_steps: int,
    b: Optional[StateVector] = None,
    x0: Optional[StateVector] = None,
    n_paths: Optional[int] = None,
    rng: Seed = None,
) -> np.ndarray:
    """
    Simulate X[t+1] = A X[t] + b + Σ W[t+1].

    Parameters
    ----------
    A : TransitionMatrix
        Transition matrix (n, n)
    Sigma : ShockMatrix
        Shock loading (n, k)
    n_steps : int
        Number of time points, X[0] included
    b : Optional[StateVector]
        Intercept (n,), default zero
    x0 : Optional[StateVector]
        Initial state (n,), default zero
    n_paths : Optional[int]
        Number of independent paths. None returns a single path without
        the trailing path axis
    rng : Seed
        None, int seed or numpy Generator

    Returns
    -------
    np.ndarray
        (n_steps, n) or (n_steps, n, n_paths)

    Warns
    -----
    UserWarning
        If A has eigenvalues on or outside the unit circle

    Examples
    --------
    >>> A = np.array([[0.8, -0.2], [-0.1, 0.7]])
    >>> Sigma = np.array([[0.5, 0.4], [0.4, 0.6]])
    >>> paths = simulate_linear_system(A, Sigma, n_steps=200, n_paths=5000, rng=0)
    >>> np.cov(paths[-1])  # close to the asymptotic variance
    """
    A_np = as_square_matrix(A, "A")
    n = A_np.shape[0]
    Sigma_np = as_matrix(Sigma, "Sigma", shape=(n, None))
    k = Sigma_np.shape[1]
    n_steps = check_positive_int(n_steps, "n_steps")
    b_np = np.zeros(n) if b is None else as_vector(b, "b", length=n)
    x0_np = np.zeros(n) if x0 is None else as_vector(x0, "x0", length=n)
    m = 1 if n_paths is None else check_positive_int(n_paths, "n_paths")
    generator = make_rng(rng)

    stability = analyze_stability(A_np)
    if not stability["is_stable"]:
        warnings.warn(
            f"A has eigenvalues outside the open unit circle: {stability['eigenvalues']}. "
            f"The process is non-stationary. For stationarity, need all |λ| < 1.",
            UserWarning,
            stacklevel=2,
        )

    X = np.empty((n_steps, n, m))
    X[0] = x0_np[:, None]
    for t in range(n_steps - 1):
        W = generator.standard_normal((k, m))
        X[t + 1] = A_np @ X[t] + b_np[:, None] + Sigma_np @ W

    return X[:, :, 0] if n_paths is None else X


# ============================================================================
# Scalar AR(1)
# ============================================================================


def simulate_ar1(
    gamma: float,
    theta: float,
    sigma: float,
    n_steps: int,
    n_paths: Optional[int] = None,
    y0: float = 0.0,
    rng: Seed = None,
) -> np.ndarray:
    """
    Simulate y[t+1] = γ + θ y[t] + σ w[t+1] starting from y[0] = y0.

    Returns
    -------
    np.ndarray
        (n_steps,) for a single path, (n_steps, n_paths) otherwise

    Examples
    --------
    >>> y = simulate_ar1(gamma=1.0, theta=0.9, sigma=1.0, n_steps=150, rng=42)
    >>> Y = simulate_ar1(1.0, 0.9, 1.0, n_steps=150, n_paths=200, rng=42)
    >>> Y.shape
    (150, 200)
    """
    gamma = check_finite_scalar(gamma, "gamma")
    theta = check_finite_scalar(theta, "theta")
    sigma = check_finite_scalar(sigma, "sigma")
    y0 = check_finite_scalar(y0, "y0")
    n_steps = check_positive_int(n_steps, "n_steps")
    m = 1 if n_paths is None else check_positive_int(n_paths, "n_paths")
    generator = make_rng(rng)

    y = np.empty((n_steps, m))
    y[0] = y0
    for t in range(n_steps - 1):
        y[t + 1] = gamma + theta * y[t] + sigma * generator.standard_normal(m)

    return y[:, 0] if n_paths is None else y


def stationary_ar1_moments(gamma: float, theta: float, sigma: float) -> EnsembleMoments:
    """
    Stationary mean γ/(1-θ) and variance σ²/(1-θ²) of an AR(1).

    ``n_paths`` is 0: the moments are exact, not sampled.

    Raises
    ------
    InvalidArgumentError
        If |θ| >= 1 (no stationary distribution)
    """
    gamma = check_finite_scalar(gamma, "gamma")
    theta = check_finite_scalar(theta, "theta")
    sigma = check_finite_scalar(sigma, "sigma")
    if abs(theta) >= 1.0:
        raise InvalidArgumentError(f"AR(1) with |theta| >= 1 is non-stationary, got theta={theta}")

    result: EnsembleMoments = {
        "mean": gamma / (1.0 - theta),
        "variance": sigma**2 / (1.0 - theta**2),
        "n_paths": 0,
    }

    return result


# ============================================================================
# Path Statistics
# ============================================================================


def cumulative_mean(x: ArrayLike) -> np.ndarray:
    """
    Running mean along the time axis: out[τ] = (1/(τ+1)) Σ_{t<=τ} x[t].

    Works on a single path (T,) or a panel (T, ...).
    """
    x_np = as_finite_array(x, "x")
    if x_np.ndim == 0 or x_np.shape[0] == 0:
        raise InvalidArgumentError(f"x must have at least one time point, got shape {x_np.shape}")
    counts = np.arange(1, x_np.shape[0] + 1).reshape((-1,) + (1,) * (x_np.ndim - 1))
    return np.cumsum(x_np, axis=0) / counts


def ensemble_moments(paths: ArrayLike) -> EnsembleMoments:
    """
    Ensemble mean and variance of the terminal values y[T-1] across paths.

    Args:
        paths: Panel (n_steps, n_paths) as returned by simulate_ar1

    Returns:
        EnsembleMoments with mean Σ yₙ/N and variance Σ yₙ²/N - mean²
    """
    paths_np = as_finite_array(paths, "paths")
    if paths_np.ndim != 2 or paths_np.shape[0] == 0 or paths_np.shape[1] == 0:
        raise InvalidArgumentError(f"paths must be a non-empty (n_steps, n_paths) panel, got shape {paths_np.shape}")

    terminal = paths_np[-1]
    mean = float(np.mean(terminal))

    result: EnsembleMoments = {
        "mean": mean,
        "variance": float(np.mean(terminal**2) - mean**2),
        "n_paths": int(terminal.shape[0]),
    }

    return result


__all__ = [
    "simulate_linear_system",
    "simulate_ar1",
    "stationary_ar1_moments",
    "cumulative_mean",
    "ensemble_moments",
]
