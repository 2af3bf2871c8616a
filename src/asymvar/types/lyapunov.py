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
Lyapunov Solver Result Types

Structured return values for the discrete Lyapunov equation

    S = A S A' + Q,   Q = Σ Σ'

and for the stability analysis of the transition matrix A.

Usage
-----
>>> S, iterations, residual, converged = solve_discrete_lyapunov_iterative(A, Sigma)
>>>
>>> solution = solve_discrete_lyapunov_iterative(A, Sigma)
>>> if solution.status == 'budget_exhausted':
...     solution = solver.resume(solution, A, Sigma)
"""

from typing import Literal, NamedTuple

import numpy as np
from typing_extensions import TypedDict

from .core import CovarianceMatrix, StateVector

SolverStatus = Literal["converged", "budget_exhausted"]
"""
Terminal state of a completed iterative solve.

The third terminal state, divergence, is not a return value: it is raised
as DivergedError.
"""


class LyapunovSolution(NamedTuple):
    """
    Result of the iterative asymptotic variance solver.

    Unpacks as ``(covariance, iterations, residual, converged)``.

    Fields
    ------
    covariance : CovarianceMatrix
        Final iterate S (n, n), in the requested backend
    iterations : int
        Number of recurrence updates applied to the seed
    residual : float
        Fixed-point residual ||S - (A S A' + Q)||_F of the returned S
    converged : bool
        True iff residual <= tolerance

    Examples
    --------
    >>> solution = solve_discrete_lyapunov_iterative(A, Sigma)
    >>> solution.converged
    True
    >>> solution.status
    'converged'
    """

    covariance: CovarianceMatrix
    iterations: int
    residual: float
    converged: bool

    @property
    def status(self) -> SolverStatus:
        return "converged" if self.converged else "budget_exhausted"


class StabilityInfo(TypedDict):
    """
    Discrete-time stability analysis of a transition matrix.

    Stability criterion: all |λ| < 1 (inside the unit circle).

    Fields
    ------
    eigenvalues : np.ndarray
        Eigenvalues of A (complex)
    magnitudes : np.ndarray
        |λ| for each eigenvalue
    spectral_radius : float
        max |λ|
    is_stable : bool
        spectral_radius < 1 - tolerance
    is_marginally_stable : bool
        |spectral_radius - 1| <= tolerance
    is_unstable : bool
        spectral_radius > 1 + tolerance

    Examples
    --------
    >>> info: StabilityInfo = analyze_stability(np.array([[0.8, -0.2], [-0.1, 0.7]]))
    >>> info['is_stable']
    True
    """

    eigenvalues: np.ndarray
    magnitudes: np.ndarray
    spectral_radius: float
    is_stable: bool
    is_marginally_stable: bool
    is_unstable: bool


class StationaryMoments(TypedDict):
    """
    First and second stationary moments of X[t+1] = A X[t] + b + Σ W[t+1].

    Fields
    ------
    mean : StateVector
        (I - A)^{-1} b, shape (n,)
    covariance : CovarianceMatrix
        Solution of S = A S A' + Σ Σ', shape (n, n)
    """

    mean: StateVector
    covariance: CovarianceMatrix


__all__ = [
    "SolverStatus",
    "LyapunovSolution",
    "StabilityInfo",
    "StationaryMoments",
]
