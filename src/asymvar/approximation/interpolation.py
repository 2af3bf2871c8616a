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
Piecewise-Linear Interpolation

Given nodes x₀ < x₁ < ... < x_{n-1} and a function f, the interpolant at
x ∈ [x_{i-1}, x_i] is

    f(x_{i-1}) + (f(x_i) - f(x_{i-1})) / (x_i - x_{i-1}) · (x - x_{i-1})

The bracketing interval is located by binary search. A point equal to the
last node belongs to the last interval.
"""

from typing import Callable

import numpy as np

from asymvar.exceptions import InvalidArgumentError
from asymvar.types.core import ArrayLike, ScalarFunction
from asymvar.utils.validation import (
    as_vector,
    check_finite_scalar,
    check_positive_int,
)


def _validate_nodes(nodes: ArrayLike) -> np.ndarray:
    nodes_np = as_vector(nodes, "nodes")
    if nodes_np.shape[0] < 2:
        raise InvalidArgumentError(f"Need at least 2 nodes, got {nodes_np.shape[0]}")
    if not np.all(np.diff(nodes_np) > 0):
        raise InvalidArgumentError("nodes must be strictly increasing")
    return nodes_np


def _check_in_range(x, lower: float, upper: float) -> None:
    x_np = np.asarray(x)
    if np.any(x_np < lower) or np.any(x_np > upper):
        raise InvalidArgumentError(f"x must lie in [{lower}, {upper}], got {x}")


def _check_callable(f) -> None:
    if not callable(f):
        raise InvalidArgumentError(f"f must be callable, got {type(f).__name__}")


def interpolate_on_nodes(f: ScalarFunction, nodes: ArrayLike, x: float) -> float:
    """
    Piecewise-linear interpolant of f on ``nodes``, evaluated at x.

    Only the two nodes bracketing x are evaluated.

    Examples
    --------
    >>> interpolate_on_nodes(lambda t: t**2, np.arange(-1.0, 1.5, 0.5), 0.25)
    0.125
    """
    _check_callable(f)
    nodes_np = _validate_nodes(nodes)
    x = check_finite_scalar(x, "x")
    _check_in_range(x, nodes_np[0], nodes_np[-1])

    ix = int(np.searchsorted(nodes_np, x, side="right"))
    ix = min(max(ix, 1), nodes_np.shape[0] - 1)
    x0, x1 = nodes_np[ix - 1], nodes_np[ix]
    f0, f1 = f(x0), f(x1)

    return float(f0 + (f1 - f0) / (x1 - x0) * (x - x0))


def linear_interpolate(f: ScalarFunction, a: float, b: float, n: int, x: float) -> float:
    """
    Piecewise-linear interpolant of f on n evenly spaced points of [a, b].

    Args:
        f: Function defined on [a, b]
        a, b: Interval limits, a < b
        n: Number of grid points (>= 2), endpoints included
        x: Evaluation point, a <= x <= b

    Examples
    --------
    >>> linear_interpolate(lambda t: t**2, -1.0, 1.0, 3, 0.5)
    0.5
    """
    a = check_finite_scalar(a, "a")
    b = check_finite_scalar(b, "b")
    if not a < b:
        raise InvalidArgumentError(f"Need a < b, got a={a}, b={b}")
    n = check_positive_int(n, "n")
    if n < 2:
        raise InvalidArgumentError(f"Need at least 2 grid points, got n={n}")

    return interpolate_on_nodes(f, np.linspace(a, b, n), x)


def piecewise_linear(f: ScalarFunction, nodes: ArrayLike) -> Callable:
    """
    Build the piecewise-linear interpolant of f as a reusable function.

    f is evaluated once per node when the interpolant is built. The returned
    function accepts scalars or arrays inside [nodes[0], nodes[-1]].

    Examples
    --------
    >>> g = piecewise_linear(np.sin, np.linspace(0.0, np.pi, 50))
    >>> g(np.array([0.1, 1.0, 3.0]))
    """
    _check_callable(f)
    nodes_np = _validate_nodes(nodes)
    values = np.array([f(node) for node in nodes_np], dtype=float)
    lower, upper = nodes_np[0], nodes_np[-1]

    def interpolant(x):
        _check_in_range(x, lower, upper)
        out = np.interp(x, nodes_np, values)
        return float(out) if np.ndim(out) == 0 else out

    return interpolant


__all__ = ["interpolate_on_nodes", "linear_interpolate", "piecewise_linear"]
