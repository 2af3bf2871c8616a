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
asymvar
=======

Asymptotic variance of linear stochastic difference equations

    X[t+1] = A X[t] + b + Σ W[t+1]

together with the numerical routines built around it.

Subpackages
-----------
- lyapunov: iterative and doubling solvers for S = A S A' + Σ Σ',
  stability analysis, stationary moments
- simulation: Monte Carlo paths of the vector process and of AR(1)
- estimation: OLS and the Kalman gain
- approximation: piecewise-linear interpolation, polynomials
- utils: backend conversion, validation, text helpers

Usage
-----
>>> import numpy as np
>>> from asymvar import solve_discrete_lyapunov_iterative, solve_discrete_lyapunov
>>>
>>> A = np.array([[0.8, -0.2], [-0.1, 0.7]])
>>> Sigma = np.array([[0.5, 0.4], [0.4, 0.6]])
>>> S, iterations, residual, converged = solve_discrete_lyapunov_iterative(A, Sigma)
>>> np.allclose(S, solve_discrete_lyapunov(A, Sigma @ Sigma.T), atol=1e-5)
True
"""

from asymvar.exceptions import (
    AsymVarError,
    ConvergenceError,
    ConvergenceWarning,
    DivergedError,
    InvalidArgumentError,
)
from asymvar.lyapunov import (
    AsymptoticVarianceSolver,
    analyze_stability,
    compute_asymptotic_variance,
    lyapunov_residual,
    solve_discrete_lyapunov,
    solve_discrete_lyapunov_iterative,
    spectral_radius,
    stationary_moments,
)
from asymvar.types import LyapunovSolution, SolverConfig

__version__ = "0.1.0"

__all__ = [
    "AsymptoticVarianceSolver",
    "solve_discrete_lyapunov_iterative",
    "compute_asymptotic_variance",
    "lyapunov_residual",
    "solve_discrete_lyapunov",
    "analyze_stability",
    "spectral_radius",
    "stationary_moments",
    "LyapunovSolution",
    "SolverConfig",
    "AsymVarError",
    "InvalidArgumentError",
    "DivergedError",
    "ConvergenceError",
    "ConvergenceWarning",
]
