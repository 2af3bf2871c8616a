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
Core Array Types

Semantic aliases for the arrays flowing through the package. They carry no
runtime checks; they document the expected shape and meaning.

Mathematical Setting
--------------------
Linear stochastic difference equation:
    X[t+1] = A X[t] + b + Σ W[t+1],   W iid, E[W] = 0, Var[W] = I

    X[t], b : StateVector (n,)
    A       : TransitionMatrix (n, n)
    Σ       : ShockMatrix (n, k)
    S[t]    : CovarianceMatrix (n, n), S[t+1] = A S[t] A' + Σ Σ'
"""

from typing import TYPE_CHECKING, Callable, Sequence, Union

import numpy as np

if TYPE_CHECKING:
    import jax.numpy as jnp
    import torch

# ============================================================================
# Basic Array Types
# ============================================================================

ArrayLike = Union[np.ndarray, "torch.Tensor", "jnp.ndarray", Sequence]
"""
Any array-like input accepted by the public routines.

Nested Python sequences, NumPy arrays, PyTorch tensors and JAX arrays are
all converted to float64 NumPy arrays before computation.
"""

ScalarLike = Union[float, int, np.number]

# ============================================================================
# Matrices of the Stochastic Difference Equation
# ============================================================================

StateVector = ArrayLike
"""State vector X[t] or intercept b, shape (n,)."""

TransitionMatrix = ArrayLike
"""
Transition matrix A, shape (n, n).

The recurrence has a unique stationary covariance iff the spectral radius
of A is strictly less than one.
"""

ShockMatrix = ArrayLike
"""Shock loading matrix Σ, shape (n, k)."""

CovarianceMatrix = ArrayLike
"""Symmetric positive semi-definite matrix, shape (n, n)."""

ObservationMatrix = ArrayLike
"""Observation matrix G of y = G x + v, shape (m, n)."""

GainMatrix = ArrayLike
"""Kalman gain Σ G' (G Σ G' + R)^{-1}, shape (n, m)."""

DesignMatrix = ArrayLike
"""Regressor matrix X of a linear regression, shape (N, k)."""

# ============================================================================
# Function Types
# ============================================================================

ScalarFunction = Callable[[float], float]
"""Real function of one real variable (interpolation target)."""

Seed = Union[None, int, np.random.Generator]
"""Random source: None (fresh entropy), an int seed, or a Generator."""


__all__ = [
    "ArrayLike",
    "ScalarLike",
    "StateVector",
    "TransitionMatrix",
    "ShockMatrix",
    "CovarianceMatrix",
    "ObservationMatrix",
    "GainMatrix",
    "DesignMatrix",
    "ScalarFunction",
    "Seed",
]
