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
Argument Validation

Fail-fast checks shared by the public routines. Every failure raises
InvalidArgumentError with the offending argument named; nothing is
silently coerced into shape.
"""

import math
import numbers
from typing import Optional, Tuple

import numpy as np

from asymvar.exceptions import InvalidArgumentError
from asymvar.types.core import ArrayLike, ScalarLike
from asymvar.utils.backend_utils import to_numpy


def as_finite_array(arr: ArrayLike, name: str) -> np.ndarray:
    """Convert to float64 and reject NaN or infinite entries."""
    out = to_numpy(arr, name)
    if not np.all(np.isfinite(out)):
        raise InvalidArgumentError(f"{name} must contain only finite values")
    return out


def as_matrix(arr: ArrayLike, name: str, shape: Optional[Tuple[Optional[int], Optional[int]]] = None) -> np.ndarray:
    """
    Convert to a finite 2-D float64 array, optionally checking its shape.

    Args:
        arr: Input array
        name: Argument name for error messages
        shape: Expected (rows, cols); None entries are unconstrained

    Raises:
        InvalidArgumentError: On wrong dimensionality, shape or values
    """
    out = as_finite_array(arr, name)
    if out.ndim != 2:
        raise InvalidArgumentError(f"{name} must be a 2-D matrix, got {out.ndim}-D array of shape {out.shape}")
    if out.size == 0:
        raise InvalidArgumentError(f"{name} must not be empty, got shape {out.shape}")
    if shape is not None:
        rows, cols = shape
        if (rows is not None and out.shape[0] != rows) or (cols is not None and out.shape[1] != cols):
            expected = tuple("*" if s is None else s for s in shape)
            raise InvalidArgumentError(f"{name} must have shape {expected}, got {out.shape}")
    return out


def as_square_matrix(arr: ArrayLike, name: str) -> np.ndarray:
    out = as_matrix(arr, name)
    if out.shape[0] != out.shape[1]:
        raise InvalidArgumentError(f"{name} must be square, got shape {out.shape}")
    return out


def as_vector(arr: ArrayLike, name: str, length: Optional[int] = None) -> np.ndarray:
    out = as_finite_array(arr, name)
    if out.ndim != 1:
        raise InvalidArgumentError(f"{name} must be a 1-D vector, got shape {out.shape}")
    if length is not None and out.shape[0] != length:
        raise InvalidArgumentError(f"{name} must have length {length}, got {out.shape[0]}")
    return out


def check_positive_float(value: ScalarLike, name: str) -> float:
    """Require a finite real number strictly greater than zero."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidArgumentError(f"{name} must be a real number, got {type(value).__name__}")
    value = float(value)
    if not math.isfinite(value) or value <= 0:
        raise InvalidArgumentError(f"{name} must be positive and finite, got {value}")
    return value


def check_positive_int(value: ScalarLike, name: str) -> int:
    """Require an integer (not bool) strictly greater than zero."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidArgumentError(f"{name} must be an integer, got {type(value).__name__}")
    value = int(value)
    if value <= 0:
        raise InvalidArgumentError(f"{name} must be positive, got {value}")
    return value


def check_finite_scalar(value: ScalarLike, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidArgumentError(f"{name} must be a real number, got {type(value).__name__}")
    value = float(value)
    if not math.isfinite(value):
        raise InvalidArgumentError(f"{name} must be finite, got {value}")
    return value


def make_rng(rng) -> np.random.Generator:
    """Return a Generator from None, an int seed, or an existing Generator."""
    if isinstance(rng, np.random.Generator):
        return rng
    if rng is None or (isinstance(rng, numbers.Integral) and not isinstance(rng, bool)):
        return np.random.default_rng(rng)
    raise InvalidArgumentError(f"rng must be None, an int seed or a numpy Generator, got {type(rng).__name__}")


__all__ = [
    "as_finite_array",
    "as_matrix",
    "as_square_matrix",
    "as_vector",
    "check_positive_float",
    "check_positive_int",
    "check_finite_scalar",
    "make_rng",
]
