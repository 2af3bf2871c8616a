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
Backend and Solver Configuration Types

Defines the computational backends accepted by the matrix routines and the
configuration dictionary used by the iterative Lyapunov solver.

Usage
-----
>>> from asymvar.types.backends import Backend, SolverConfig
>>>
>>> config: SolverConfig = {'tolerance': 1e-8, 'max_iterations': 1000}
>>> solver = AsymptoticVarianceSolver(**config)
"""

from typing import Literal, Tuple

from typing_extensions import TypedDict

from asymvar.exceptions import InvalidArgumentError

# ============================================================================
# Backend Types
# ============================================================================

Backend = Literal["numpy", "torch", "jax"]
"""
Backend identifier for numerical computation.

Valid values:
- 'numpy': NumPy arrays (CPU-based, always available)
- 'torch': PyTorch tensors (optional extra)
- 'jax': JAX arrays (optional extra)

All algorithms run on NumPy/SciPy internally; the backend only decides the
array type of the returned matrices.
"""

VALID_BACKENDS: Tuple[str, ...] = ("numpy", "torch", "jax")

DEFAULT_BACKEND: Backend = "numpy"

# ============================================================================
# Solver Defaults
# ============================================================================

DEFAULT_TOLERANCE: float = 1e-6
"""Frobenius-norm tolerance on the fixed-point residual."""

DEFAULT_MAX_ITERATIONS: int = 500
"""Upper bound on the number of recurrence updates."""

DEFAULT_DOUBLING_TOLERANCE: float = 1e-15

DEFAULT_DOUBLING_MAX_ITERATIONS: int = 50
"""Each doubling step squares the transition, so 50 steps covers 2^50 terms."""


class SolverConfig(TypedDict, total=False):
    """
    Configuration for the iterative asymptotic variance solver.

    Attributes
    ----------
    tolerance : float
        Convergence tolerance on the Frobenius residual (must be > 0)
    max_iterations : int
        Iteration budget (must be a positive integer)
    backend : Backend
        Array type of returned matrices

    Examples
    --------
    >>> config: SolverConfig = {
    ...     'tolerance': 1e-8,
    ...     'max_iterations': 2000,
    ...     'backend': 'numpy',
    ... }
    >>> solver = AsymptoticVarianceSolver(**config)
    """

    tolerance: float
    max_iterations: int
    backend: Backend


def validate_backend(backend: str) -> Backend:
    """
    Validate and normalize backend string.

    Raises
    ------
    InvalidArgumentError
        If backend is not one of VALID_BACKENDS

    Examples
    --------
    >>> validate_backend('numpy')
    'numpy'
    >>> validate_backend('pytorch')  # InvalidArgumentError
    """
    if backend not in VALID_BACKENDS:
        raise InvalidArgumentError(f"Invalid backend '{backend}'. Choose from: {VALID_BACKENDS}")
    return backend


__all__ = [
    "Backend",
    "VALID_BACKENDS",
    "DEFAULT_BACKEND",
    "DEFAULT_TOLERANCE",
    "DEFAULT_MAX_ITERATIONS",
    "DEFAULT_DOUBLING_TOLERANCE",
    "DEFAULT_DOUBLING_MAX_ITERATIONS",
    "SolverConfig",
    "validate_backend",
]
