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
Ordinary Least Squares

Closed-form OLS from the normal equations

    β̂ = (X'X)^{-1} X'y,    σ̂ = sqrt(r'r / N),   r = y - X β̂

and a Monte Carlo experiment for the quadratic data generating process

    y = a x₁ + b x₁² + c x₂ + d + σ w,   w ~ N(0, 1)
"""

import numpy as np
from scipy import linalg

from asymvar.exceptions import InvalidArgumentError
from asymvar.types.core import ArrayLike, DesignMatrix, Seed
from asymvar.types.estimation import OLSExperimentResult, OLSResult
from asymvar.utils.validation import (
    as_matrix,
    as_vector,
    check_finite_scalar,
    check_positive_int,
    make_rng,
)


def ols_estimate(X: DesignMatrix, y: ArrayLike) -> OLSResult:
    """
    Fit y = X β + σ w by ordinary least squares.

    Args:
        X: Design matrix (N, k), N >= k
        y: Outcomes (N,)

    Returns:
        OLSResult with coefficients (k,), residuals (N,), sigma, n_obs

    Raises:
        InvalidArgumentError: On shape mismatch or N < k
        LinAlgError: If X'X is singular (collinear regressors)

    Examples
    --------
    >>> X = np.column_stack([np.ones(4), np.arange(4.0)])
    >>> result = ols_estimate(X, 1.0 + 2.0 * np.arange(4.0))
    >>> result['coefficients']
    array([1., 2.])
    """
    X_np = as_matrix(X, "X")
    n_obs, k = X_np.shape
    y_np = as_vector(y, "y", length=n_obs)
    if n_obs < k:
        raise InvalidArgumentError(f"Need at least as many observations as regressors, got N={n_obs} < k={k}")

    beta = linalg.solve(X_np.T @ X_np, X_np.T @ y_np)
    residuals = y_np - X_np @ beta

    result: OLSResult = {
        "coefficients": beta,
        "residuals": residuals,
        "sigma": float(np.sqrt(residuals @ residuals / n_obs)),
        "n_obs": int(n_obs),
    }

    return result


def quadratic_design_matrix(x1: ArrayLike, x2: ArrayLike) -> np.ndarray:
    """Regressor matrix with columns [x₁, x₁², x₂, 1]."""
    x1_np = as_vector(x1, "x1")
    x2_np = as_vector(x2, "x2", length=x1_np.shape[0])
    return np.column_stack([x1_np, x1_np**2, x2_np, np.ones_like(x1_np)])


def simulate_ols_experiment(
    a: float,
    b: float,
    c: float,
    d: float,
    sigma: float,
    n_obs: int = 50,
    n_simulations: int = 20,
    rng: Seed = None,
) -> OLSExperimentResult:
    """
    Sampling distribution of OLS estimates for y = a x₁ + b x₁² + c x₂ + d + σ w.

    Regressors x₁, x₂ ~ N(0, 1) are drawn once; each simulation draws a new
    noise vector w and re-estimates (a, b, c, d, σ).

    Returns:
        OLSExperimentResult; row m of ``coefficients`` holds (â, b̂, ĉ, d̂)
        of simulation m and ``sigmas[m]`` its σ̂

    Examples
    --------
    >>> result = simulate_ols_experiment(0.1, 0.2, 0.5, 1.0, 0.1, rng=0)
    >>> result['coefficients'].mean(axis=0)  # close to [0.1, 0.2, 0.5, 1.0]
    """
    params = np.array([check_finite_scalar(v, name) for v, name in zip((a, b, c, d), "abcd")])
    sigma = check_finite_scalar(sigma, "sigma")
    if sigma < 0:
        raise InvalidArgumentError(f"sigma must be non-negative, got {sigma}")
    n_obs = check_positive_int(n_obs, "n_obs")
    n_simulations = check_positive_int(n_simulations, "n_simulations")
    generator = make_rng(rng)

    x1 = generator.standard_normal(n_obs)
    x2 = generator.standard_normal(n_obs)
    X = quadratic_design_matrix(x1, x2)
    mean_y = X @ params

    coefficients = np.empty((n_simulations, params.shape[0]))
    sigmas = np.empty(n_simulations)
    for m in range(n_simulations):
        y = mean_y + sigma * generator.standard_normal(n_obs)
        fit = ols_estimate(X, y)
        coefficients[m] = fit["coefficients"]
        sigmas[m] = fit["sigma"]

    result: OLSExperimentResult = {
        "design": X,
        "coefficients": coefficients,
        "sigmas": sigmas,
        "true_coefficients": params,
        "true_sigma": sigma,
    }

    return result


__all__ = ["ols_estimate", "quadratic_design_matrix", "simulate_ols_experiment"]
