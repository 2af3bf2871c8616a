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
Reference Discrete Lyapunov Solvers

Direct solvers for S = A S A' + Q used to cross-check the iterative solver
and to handle slowly decaying systems.

Doubling algorithm
------------------
With α₀ = A and γ₀ = Q,

    γ[j+1] = γ[j] + α[j] γ[j] α[j]'
    α[j+1] = α[j]²

so γ[j] = Σ_{i < 2^j} Aⁱ Q (Aⁱ)'. Each step doubles the number of summed
terms, giving quadratic convergence when ρ(A) < 1.

The 'direct' and 'bilinear' methods delegate to
scipy.linalg.solve_discrete_lyapunov.
"""

from typing import Literal

import numpy as np
from scipy import linalg

from asymvar.exceptions import ConvergenceError, DivergedError, InvalidArgumentError
from asymvar.types.backends import (
    DEFAULT_BACKEND,
    DEFAULT_DOUBLING_MAX_ITERATIONS,
    DEFAULT_DOUBLING_TOLERANCE,
    Backend,
)
from asymvar.types.core import CovarianceMatrix, TransitionMatrix
from asymvar.utils.backend_utils import from_numpy, resolve_backend
from asymvar.utils.validation import (
    as_matrix,
    as_square_matrix,
    check_positive_float,
    check_positive_int,
)

LyapunovMethod = Literal["doubling", "direct", "bilinear"]


def _doubling(A: np.ndarray, Q: np.ndarray, tolerance: float, max_iterations: int) -> np.ndarray:
    alpha = A
    gamma = Q
    for iteration in range(1, max_iterations + 1):
        gamma_next = gamma + alpha @ gamma @ alpha.T
        alpha = alpha @ alpha
        if not np.all(np.isfinite(gamma_next)):
            raise DivergedError(
                f"Doubling iterate became non-finite at step {iteration}. "
                f"Spectral radius of A is likely >= 1.",
                iterations=iteration - 1,
                last_iterate=gamma,
            )
        diff = np.max(np.abs(gamma_next - gamma))
        gamma = gamma_next
        if diff <= tolerance:
            return gamma
    raise ConvergenceError(
        f"Doubling algorithm exceeded {max_iterations} iterations. "
        f"Check that all eigenvalues of A lie inside the unit circle.",
        iterations=max_iterations,
    )


def solve_discrete_lyapunov(
    A: TransitionMatrix,
    Q: CovarianceMatrix,
    method: LyapunovMethod = "doubling",
    tolerance: float = DEFAULT_DOUBLING_TOLERANCE,
    max_iterations: int = DEFAULT_DOUBLING_MAX_ITERATIONS,
    backend: Backend = DEFAULT_BACKEND,
) -> CovarianceMatrix:
    """
    Solve the discrete Lyapunov equation S = A S A' + Q.

    Parameters
    ----------
    A : TransitionMatrix
        Square matrix (n, n)
    Q : CovarianceMatrix
        Constant term (n, n), typically Σ Σ'
    method : {'doubling', 'direct', 'bilinear'}
        'doubling' uses the structure-preserving doubling iteration;
        the others use scipy.linalg.solve_discrete_lyapunov
    tolerance : float
        Max-abs change between doubling steps (doubling only)
    max_iterations : int
        Doubling step cap (doubling only)
    backend : Backend
        Array type of the returned matrix

    Returns
    -------
    CovarianceMatrix
        Solution S (n, n)

    Raises
    ------
    InvalidArgumentError
        On shape mismatch, non-finite entries or unknown method
    ConvergenceError
        If doubling does not reach the tolerance within max_iterations
    DivergedError
        If a doubling iterate overflows

    Examples
    --------
    >>> A = np.array([[0.8, -0.2], [-0.1, 0.7]])
    >>> Sigma = np.array([[0.5, 0.4], [0.4, 0.6]])
    >>> S = solve_discrete_lyapunov(A, Sigma @ Sigma.T)
    >>> np.allclose(S, A @ S @ A.T + Sigma @ Sigma.T)
    True
    """
    A_np = as_square_matrix(A, "A")
    n = A_np.shape[0]
    Q_np = as_matrix(Q, "Q", shape=(n, n))
    backend = resolve_backend(backend)

    if method == "doubling":
        tolerance = check_positive_float(tolerance, "tolerance")
        max_iterations = check_positive_int(max_iterations, "max_iterations")
        S = _doubling(A_np, Q_np, tolerance, max_iterations)
    elif method in ("direct", "bilinear"):
        S = linalg.solve_discrete_lyapunov(A_np, Q_np, method=method)
    else:
        raise InvalidArgumentError(
            f"method must be 'doubling', 'direct' or 'bilinear', got '{method}'",
        )

    return from_numpy(S, backend)


__all__ = ["LyapunovMethod", "solve_discrete_lyapunov"]
