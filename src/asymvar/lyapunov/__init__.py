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
Discrete Lyapunov Equation
==========================

Solvers for S = A S A' + Q and the stability analysis they depend on.

Iterative solver
----------------
>>> from asymvar.lyapunov import AsymptoticVarianceSolver, solve_discrete_lyapunov_iterative
>>>
>>> S, iterations, residual, converged = solve_discrete_lyapunov_iterative(A, Sigma)
>>> solver = AsymptoticVarianceSolver(tolerance=1e-8)
>>> solution = solver.solve(A, Sigma)

Reference solver
----------------
>>> from asymvar.lyapunov import solve_discrete_lyapunov
>>> S_ref = solve_discrete_lyapunov(A, Sigma @ Sigma.T, method='doubling')

Stability
---------
>>> from asymvar.lyapunov import analyze_stability, stationary_moments
>>> analyze_stability(A)['is_stable']
>>> moments = stationary_moments(A, Sigma, b=b)
"""

from .doubling import LyapunovMethod, solve_discrete_lyapunov
from .iterative import (
    AsymptoticVarianceSolver,
    compute_asymptotic_variance,
    lyapunov_residual,
    solve_discrete_lyapunov_iterative,
)
from .stability import analyze_stability, spectral_radius, stationary_moments

__all__ = [
    "AsymptoticVarianceSolver",
    "solve_discrete_lyapunov_iterative",
    "compute_asymptotic_variance",
    "lyapunov_residual",
    "LyapunovMethod",
    "solve_discrete_lyapunov",
    "analyze_stability",
    "spectral_radius",
    "stationary_moments",
]
