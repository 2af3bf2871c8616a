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
Iterative Asymptotic Variance Solver

Computes the unconditional covariance of the stochastic difference equation

    X[t+1] = A X[t] + b + Σ W[t+1],   W iid with identity covariance

by iterating the covariance recurrence to its fixed point:

    S[i+1] = A S[i] A' + Q,   Q = Σ Σ'

The limit solves the discrete Lyapunov equation S = A S A' + Q. It exists
and is unique when every eigenvalue of A lies strictly inside the unit
circle; the solver does not check this. Instead every call ends in one of
three states:

- Converged:        residual <= tolerance, returned with converged=True
- BudgetExhausted:  max_iterations updates applied, converged=False
- Diverged:         a non-finite iterate appeared, DivergedError raised

Usage
-----
>>> import numpy as np
>>> from asymvar.lyapunov import solve_discrete_lyapunov_iterative
>>>
>>> A = np.array([[0.8, -0.2], [-0.1, 0.7]])
>>> Sigma = np.array([[0.5, 0.4], [0.4, 0.6]])
>>> S, iterations, residual, converged = solve_discrete_lyapunov_iterative(A, Sigma)
>>>
>>> # Resume an unconverged estimate with a fresh budget
>>> solution = solve_discrete_lyapunov_iterative(A, Sigma, max_iterations=10)
>>> solution = solve_discrete_lyapunov_iterative(
...     A, Sigma, initial=solution.covariance, max_iterations=500
... )
"""

import warnings
from typing import Optional

import numpy as np
from scipy import linalg

from asymvar.exceptions import ConvergenceWarning, DivergedError, InvalidArgumentError
from asymvar.types.backends import (
    DEFAULT_BACKEND,
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_TOLERANCE,
    Backend,
    SolverConfig,
)
from asymvar.types.core import CovarianceMatrix, ShockMatrix, TransitionMatrix
from asymvar.types.lyapunov import LyapunovSolution
from asymvar.utils.backend_utils import from_numpy, resolve_backend
from asymvar.utils.validation import (
    as_matrix,
    as_square_matrix,
    check_positive_float,
    check_positive_int,
)

# ============================================================================
# Internal Helpers
# ============================================================================


def _frobenius(M: np.ndarray) -> float:
    # Squaring entries above ~1e154 overflows, so normalize by the largest
    # magnitude first. An infinite entry gives an infinite norm.
    scale = float(np.max(np.abs(M)))
    if scale == 0.0 or not np.isfinite(scale):
        return scale
    return scale * float(linalg.norm(M / scale, "fro", check_finite=False))


def _lyapunov_step(A: np.ndarray, S: np.ndarray, Q: np.ndarray) -> np.ndarray:
    return A @ S @ A.T + Q


def _check_finite_step(S: np.ndarray, candidate: np.ndarray, iterations: int) -> float:
    """Return ||S - candidate||_F, raising DivergedError on overflow."""
    if not np.all(np.isfinite(candidate)):
        raise DivergedError(
            f"Iterate became non-finite after {iterations} updates. "
            f"The transition matrix is likely unstable (spectral radius >= 1).",
            iterations=iterations,
            last_iterate=S,
        )
    residual = _frobenius(S - candidate)
    if not np.isfinite(residual):
        raise DivergedError(
            f"Residual overflowed after {iterations} updates.",
            iterations=iterations,
            last_iterate=S,
        )
    return residual


def _validate_inputs(A, Sigma, initial):
    A_np = as_square_matrix(A, "A")
    n = A_np.shape[0]
    Sigma_np = as_matrix(Sigma, "Sigma")
    if Sigma_np.shape[0] != n:
        raise InvalidArgumentError(f"Sigma must have {n} rows to match A, got shape {Sigma_np.shape}")
    initial_np = None if initial is None else as_matrix(initial, "initial", shape=(n, n))
    return A_np, Sigma_np, initial_np


# ============================================================================
# Functional Interface
# ============================================================================


def solve_discrete_lyapunov_iterative(
    A: TransitionMatrix,
    Sigma: ShockMatrix,
    initial: Optional[CovarianceMatrix] = None,
    tolerance: float = DEFAULT_TOLERANCE,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    backend: Backend = DEFAULT_BACKEND,
) -> LyapunovSolution:
    """
    Solve S = A S A' + Σ Σ' by direct fixed-point iteration.

    Parameters
    ----------
    A : TransitionMatrix
        Square transition matrix (n, n)
    Sigma : ShockMatrix
        Shock loading matrix (n, k)
    initial : Optional[CovarianceMatrix]
        Seed S[0] (n, n). Default is Q = Σ Σ'
    tolerance : float
        Frobenius tolerance on ||S - (A S A' + Q)||, must be > 0
    max_iterations : int
        Maximum number of recurrence updates, must be > 0
    backend : Backend
        Array type of the returned covariance

    Returns
    -------
    LyapunovSolution
        Named tuple (covariance, iterations, residual, converged).
        ``residual`` is the fixed-point residual of the returned matrix, so
        ``converged`` is exactly ``residual <= tolerance``. When the budget
        runs out, ``iterations == max_iterations`` and ``converged`` is False.

    Raises
    ------
    InvalidArgumentError
        If shapes are incompatible, entries are not finite real numbers,
        tolerance <= 0, max_iterations < 1, or the backend cannot hold
        float64 results (e.g. JAX without 64-bit mode). Raised before
        iterating.
    DivergedError
        If an iterate or residual becomes non-finite. Carries the number of
        updates applied and the last finite iterate.

    Examples
    --------
    >>> A = np.array([[0.8, -0.2], [-0.1, 0.7]])
    >>> Sigma = np.array([[0.5, 0.4], [0.4, 0.6]])
    >>> solution = solve_discrete_lyapunov_iterative(A, Sigma)
    >>> solution.converged
    True

    Unit eigenvalues never settle, so the budget is exhausted:

    >>> solution = solve_discrete_lyapunov_iterative(np.eye(2), Sigma, max_iterations=50)
    >>> solution.iterations, solution.converged
    (50, False)

    Notes
    -----
    Each update costs two matrix products, O(n³). The error contracts
    roughly by ρ(A)² per step, so slowly decaying systems (ρ close to 1)
    need many iterations; use solve_discrete_lyapunov for those.

    Symmetric seeds give symmetric iterates because Q is symmetric and the
    map S -> A S A' preserves symmetry.
    """
    A_np, Sigma_np, S = _validate_inputs(A, Sigma, initial)
    tolerance = check_positive_float(tolerance, "tolerance")
    max_iterations = check_positive_int(max_iterations, "max_iterations")
    backend = resolve_backend(backend)

    Q = Sigma_np @ Sigma_np.T
    if S is None:
        S = Q.copy()

    iterations = 0
    candidate = _lyapunov_step(A_np, S, Q)
    residual = _check_finite_step(S, candidate, iterations)

    while residual > tolerance and iterations < max_iterations:
        S = candidate
        iterations += 1
        candidate = _lyapunov_step(A_np, S, Q)
        residual = _check_finite_step(S, candidate, iterations)

    return LyapunovSolution(
        covariance=from_numpy(S, backend),
        iterations=iterations,
        residual=residual,
        converged=bool(residual <= tolerance),
    )


def lyapunov_residual(
    A: TransitionMatrix,
    S: CovarianceMatrix,
    Q: CovarianceMatrix,
) -> float:
    """
    Frobenius residual of the discrete Lyapunov equation.

    Returns ||S - (A S A' + Q)||_F.

    Raises
    ------
    InvalidArgumentError
        If A is not square or S, Q are not (n, n)
    """
    A_np = as_square_matrix(A, "A")
    n = A_np.shape[0]
    S_np = as_matrix(S, "S", shape=(n, n))
    Q_np = as_matrix(Q, "Q", shape=(n, n))
    return _frobenius(S_np - _lyapunov_step(A_np, S_np, Q_np))


def compute_asymptotic_variance(
    A: TransitionMatrix,
    Sigma: ShockMatrix,
    initial: Optional[CovarianceMatrix] = None,
    tolerance: float = DEFAULT_TOLERANCE,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    backend: Backend = DEFAULT_BACKEND,
) -> CovarianceMatrix:
    """
    Asymptotic variance of X[t+1] = A X[t] + b + Σ W[t+1] as a bare matrix.

    Same computation as solve_discrete_lyapunov_iterative. Because only the
    matrix is returned, an exhausted budget is reported through a
    ConvergenceWarning rather than silently.

    Examples
    --------
    >>> S = compute_asymptotic_variance(A, Sigma)
    """
    solution = solve_discrete_lyapunov_iterative(
        A,
        Sigma,
        initial=initial,
        tolerance=tolerance,
        max_iterations=max_iterations,
        backend=backend,
    )
    if not solution.converged:
        warnings.warn(
            f"Asymptotic variance did not converge in {solution.iterations} iterations "
            f"(residual {solution.residual:.3e} > tolerance {tolerance:.3e}). "
            f"Returning the last iterate.",
            ConvergenceWarning,
            stacklevel=2,
        )
    return solution.covariance


# ============================================================================
# Object-Oriented Interface
# ============================================================================


class AsymptoticVarianceSolver:
    """
    Thin wrapper holding a validated solver configuration.

    No per-call state is stored: every solve() is independent, so one
    instance can be shared freely between callers.

    Examples
    --------
    >>> solver = AsymptoticVarianceSolver(tolerance=1e-8, max_iterations=100)
    >>> solution = solver.solve(A, Sigma)
    >>> while not solution.converged:
    ...     solution = solver.resume(solution, A, Sigma)
    """

    def __init__(
        self,
        tolerance: float = DEFAULT_TOLERANCE,
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
        backend: Backend = DEFAULT_BACKEND,
    ):
        self._tolerance = check_positive_float(tolerance, "tolerance")
        self._max_iterations = check_positive_int(max_iterations, "max_iterations")
        self._backend = resolve_backend(backend)

    @property
    def tolerance(self) -> float:
        return self._tolerance

    @property
    def max_iterations(self) -> int:
        return self._max_iterations

    @property
    def backend(self) -> Backend:
        return self._backend

    @property
    def config(self) -> SolverConfig:
        return {
            "tolerance": self._tolerance,
            "max_iterations": self._max_iterations,
            "backend": self._backend,
        }

    def solve(
        self,
        A: TransitionMatrix,
        Sigma: ShockMatrix,
        initial: Optional[CovarianceMatrix] = None,
    ) -> LyapunovSolution:
        """Run solve_discrete_lyapunov_iterative with this configuration."""
        return solve_discrete_lyapunov_iterative(
            A,
            Sigma,
            initial=initial,
            tolerance=self._tolerance,
            max_iterations=self._max_iterations,
            backend=self._backend,
        )

    def resume(
        self,
        solution: LyapunovSolution,
        A: TransitionMatrix,
        Sigma: ShockMatrix,
        additional_iterations: Optional[int] = None,
    ) -> LyapunovSolution:
        """
        Continue iterating from a previous solution.

        Running N more updates from an intermediate iterate is the same as
        running from scratch with a budget larger by N. The returned
        ``iterations`` counts all updates, previous ones included.

        Parameters
        ----------
        solution : LyapunovSolution
            Result of an earlier solve() or resume() with the same A, Sigma
        additional_iterations : Optional[int]
            Extra budget. Default is this solver's max_iterations
        """
        budget = self._max_iterations if additional_iterations is None else additional_iterations
        budget = check_positive_int(budget, "additional_iterations")
        continued = solve_discrete_lyapunov_iterative(
            A,
            Sigma,
            initial=solution.covariance,
            tolerance=self._tolerance,
            max_iterations=budget,
            backend=self._backend,
        )
        return continued._replace(iterations=solution.iterations + continued.iterations)

    def __repr__(self) -> str:
        return (
            f"AsymptoticVarianceSolver(tolerance={self._tolerance!r}, "
            f"max_iterations={self._max_iterations!r}, backend={self._backend!r})"
        )


__all__ = [
    "solve_discrete_lyapunov_iterative",
    "compute_asymptotic_variance",
    "lyapunov_residual",
    "AsymptoticVarianceSolver",
]
