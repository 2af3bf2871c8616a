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
Exceptions and Warnings

- InvalidArgumentError: malformed input, raised before any computation
- DivergedError: non-finite iterate, unrecoverable blow-up
- ConvergenceError: reference solver exceeded its iteration cap
- ConvergenceWarning: best-effort estimate returned after an exhausted budget

An exhausted iteration budget in the iterative solver is not an exception;
it is reported through ``LyapunovSolution.converged``.
"""

from typing import Optional

import numpy as np

# ============================================================================
# Exceptions
# ============================================================================


class AsymVarError(Exception):
    """Base class for errors raised by asymvar."""

    pass


class InvalidArgumentError(AsymVarError, ValueError):
    """Raised when inputs have invalid shapes, values or types."""

    pass


class DivergedError(AsymVarError, ArithmeticError):
    """
    Raised when an iterate contains non-finite values.

    Attributes
    ----------
    iterations : int
        Updates applied before the blow-up was detected
    last_iterate : Optional[np.ndarray]
        Last finite iterate, for diagnostics
    """

    def __init__(
        self,
        message: str,
        iterations: int = 0,
        last_iterate: Optional[np.ndarray] = None,
    ):
        super().__init__(message)
        self.iterations = iterations
        self.last_iterate = last_iterate


class ConvergenceError(AsymVarError, RuntimeError):
    """Raised when a direct solver fails to reach its tolerance."""

    def __init__(self, message: str, iterations: int = 0):
        super().__init__(message)
        self.iterations = iterations


# ============================================================================
# Warnings
# ============================================================================


class ConvergenceWarning(UserWarning):
    """Issued when an unconverged estimate is returned as a bare matrix."""

    pass


__all__ = [
    "AsymVarError",
    "InvalidArgumentError",
    "DivergedError",
    "ConvergenceError",
    "ConvergenceWarning",
]
