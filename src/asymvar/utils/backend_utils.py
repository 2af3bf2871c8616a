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
Backend Conversion Utilities

Algorithms in asymvar run on NumPy/SciPy. These helpers move arrays in and
out of that representation:

- to_numpy: any supported array (NumPy, PyTorch, JAX, nested sequences)
  to a float64 ndarray
- from_numpy: ndarray back to the requested backend, float64 preserved
- resolve_backend: up-front check that a backend is usable

PyTorch and JAX are imported lazily so they stay optional.
"""

import numpy as np

from asymvar.exceptions import InvalidArgumentError
from asymvar.types.backends import Backend, validate_backend
from asymvar.types.core import ArrayLike


def _is_torch(x) -> bool:
    try:
        import torch

        return isinstance(x, torch.Tensor)
    except ImportError:
        return False


def to_numpy(arr: ArrayLike, name: str = "array") -> np.ndarray:
    """
    Convert an array in any backend to a real float64 NumPy array.

    Args:
        arr: NumPy array, PyTorch tensor, JAX array or nested sequence
        name: Argument name used in error messages

    Returns:
        New float64 ndarray (never a view of the caller's data)

    Raises:
        InvalidArgumentError: If the input is ragged, non-numeric or complex
    """
    if _is_torch(arr):
        arr = arr.detach().cpu().numpy()

    try:
        raw = np.asarray(arr)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"{name} is not a numeric array: {exc}") from exc

    if raw.dtype.kind not in "biuf":
        raise InvalidArgumentError(f"{name} must contain real numbers, got dtype {raw.dtype}")

    return np.array(raw, dtype=np.float64)


def resolve_backend(backend: str) -> Backend:
    """
    Validate a backend name and check it can hold float64 results.

    Matrix routines call this before computing so an unusable backend is
    reported up front rather than after the work is done.

    Raises:
        InvalidArgumentError: If the name is unknown, the library is not
            installed, or JAX runs without 64-bit mode (its arrays would
            round every result to float32)
    """
    backend = validate_backend(backend)
    if backend == "torch":
        try:
            import torch  # noqa: F401
        except ImportError as exc:
            raise InvalidArgumentError("backend 'torch' requires PyTorch to be installed") from exc
    elif backend == "jax":
        try:
            import jax
        except ImportError as exc:
            raise InvalidArgumentError("backend 'jax' requires JAX to be installed") from exc
        if not jax.config.jax_enable_x64:
            raise InvalidArgumentError(
                "backend 'jax' requires 64-bit mode; enable it with "
                "jax.config.update('jax_enable_x64', True)",
            )
    return backend


def from_numpy(arr: np.ndarray, backend: Backend):
    """
    Convert a float64 NumPy array to the target backend without loss.

    Args:
        arr: NumPy array
        backend: Target backend

    Returns:
        Array in target backend, dtype float64

    Raises:
        InvalidArgumentError: If resolve_backend rejects the backend
    """
    backend = resolve_backend(backend)
    if backend == "numpy":
        return arr
    if backend == "torch":
        import torch

        return torch.from_numpy(arr)
    import jax.numpy as jnp

    return jnp.asarray(arr, dtype=jnp.float64)


__all__ = ["to_numpy", "from_numpy", "resolve_backend"]
