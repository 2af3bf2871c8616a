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
Tests for backend conversion and argument validation

Run with:
    pytest tests/unit/utils_unit_tests/validation_test.py -v
    pytest tests/unit/utils_unit_tests/validation_test.py -v -k "backend"
"""

from typing import get_type_hints

import numpy as np
import pytest

from asymvar.exceptions import InvalidArgumentError
from asymvar.types.backends import validate_backend
from asymvar.types.core import ScalarLike
from asymvar.utils.backend_utils import from_numpy, resolve_backend, to_numpy
from asymvar.utils.validation import (
    as_matrix,
    as_square_matrix,
    as_vector,
    check_finite_scalar,
    check_positive_float,
    check_positive_int,
    make_rng,
)

# Conditional imports
torch_available = False
jax_available = False

try:
    import torch

    torch_available = True
except ImportError:
    pass

try:
    import jax
    import jax.numpy as jnp

    jax_available = True
except ImportError:
    pass


@pytest.fixture
def jax_x64():
    """Restore the JAX 64-bit flag after a test changes it"""
    previous = bool(jax.config.jax_enable_x64)
    yield
    jax.config.update("jax_enable_x64", previous)


# ============================================================================
# Test: to_numpy() / from_numpy()
# ============================================================================


class TestToNumpy:
    """Conversion of any supported input to float64 ndarray"""

    def test_list_input(self):
        out = to_numpy([[1, 2], [3, 4]])
        assert out.dtype == np.float64
        assert out.shape == (2, 2)

    def test_returns_copy(self):
        arr = np.ones(3)
        out = to_numpy(arr)
        out[0] = 5.0
        assert arr[0] == 1.0

    def test_bool_accepted(self):
        np.testing.assert_array_equal(to_numpy([True, False]), [1.0, 0.0])

    def test_complex_rejected(self):
        with pytest.raises(InvalidArgumentError, match="real numbers"):
            to_numpy(np.array([1 + 2j]))

    def test_strings_rejected(self):
        with pytest.raises(InvalidArgumentError):
            to_numpy(["a", "b"], name="A")

    def test_ragged_rejected(self):
        with pytest.raises(InvalidArgumentError):
            to_numpy([[1.0], [1.0, 2.0]])

    @pytest.mark.skipif(not torch_available, reason="PyTorch not available")
    def test_torch_tensor(self):
        out = to_numpy(torch.eye(2, requires_grad=True))
        assert isinstance(out, np.ndarray)
        np.testing.assert_allclose(out, np.eye(2))

    @pytest.mark.skipif(not jax_available, reason="JAX not available")
    def test_jax_array(self):
        out = to_numpy(jnp.eye(2))
        assert isinstance(out, np.ndarray)
        assert out.dtype == np.float64


class TestFromNumpy:
    def test_numpy_passthrough(self):
        arr = np.eye(2)
        assert from_numpy(arr, "numpy") is arr

    @pytest.mark.skipif(not torch_available, reason="PyTorch not available")
    def test_torch(self):
        out = from_numpy(np.eye(2), "torch")
        assert isinstance(out, torch.Tensor)
        assert out.dtype == torch.float64

    @pytest.mark.skipif(not jax_available, reason="JAX not available")
    def test_jax_keeps_float64(self, jax_x64):
        jax.config.update("jax_enable_x64", True)
        out = from_numpy(np.array([[100.3, 0.0], [0.0, 1.0]]), "jax")
        assert isinstance(out, jnp.ndarray)
        assert out.dtype == jnp.float64
        assert float(out[0, 0]) == 100.3

    @pytest.mark.skipif(not jax_available, reason="JAX not available")
    def test_jax_without_x64_rejected(self, jax_x64):
        jax.config.update("jax_enable_x64", False)
        with pytest.raises(InvalidArgumentError, match="64-bit"):
            from_numpy(np.eye(2), "jax")

    def test_unknown_backend(self):
        with pytest.raises(InvalidArgumentError, match="Invalid backend"):
            from_numpy(np.eye(2), "tensorflow")


class TestResolveBackend:
    def test_numpy(self):
        assert resolve_backend("numpy") == "numpy"

    @pytest.mark.skipif(not torch_available, reason="PyTorch not available")
    def test_torch(self):
        assert resolve_backend("torch") == "torch"

    @pytest.mark.skipif(not jax_available, reason="JAX not available")
    def test_jax_requires_x64(self, jax_x64):
        jax.config.update("jax_enable_x64", False)
        with pytest.raises(InvalidArgumentError, match="jax_enable_x64"):
            resolve_backend("jax")
        jax.config.update("jax_enable_x64", True)
        assert resolve_backend("jax") == "jax"

    def test_unknown_backend(self):
        with pytest.raises(InvalidArgumentError, match="Invalid backend"):
            resolve_backend("tensorflow")


class TestValidateBackend:
    @pytest.mark.parametrize("backend", ["numpy", "torch", "jax"])
    def test_valid(self, backend):
        assert validate_backend(backend) == backend

    @pytest.mark.parametrize("backend", ["pytorch", "NumPy", "", None])
    def test_invalid(self, backend):
        with pytest.raises(InvalidArgumentError):
            validate_backend(backend)


# ============================================================================
# Test: array validators
# ============================================================================


class TestArrayValidators:
    def test_as_matrix_shape_wildcard(self):
        out = as_matrix(np.ones((3, 2)), "Sigma", shape=(3, None))
        assert out.shape == (3, 2)

    def test_as_matrix_shape_mismatch_names_argument(self):
        with pytest.raises(InvalidArgumentError, match="Sigma"):
            as_matrix(np.ones((3, 2)), "Sigma", shape=(2, None))

    def test_as_matrix_rejects_vector(self):
        with pytest.raises(InvalidArgumentError, match="2-D"):
            as_matrix(np.ones(3), "A")

    def test_as_matrix_rejects_nan(self):
        with pytest.raises(InvalidArgumentError, match="finite"):
            as_matrix([[np.nan]], "A")

    def test_as_square_matrix(self):
        assert as_square_matrix(np.eye(3), "A").shape == (3, 3)
        with pytest.raises(InvalidArgumentError, match="square"):
            as_square_matrix(np.ones((2, 3)), "A")

    def test_as_vector_length(self):
        assert as_vector([1, 2, 3], "b", length=3).shape == (3,)
        with pytest.raises(InvalidArgumentError):
            as_vector([1, 2, 3], "b", length=2)


# ============================================================================
# Test: scalar validators
# ============================================================================


class TestScalarValidators:
    @pytest.mark.parametrize("value", [1e-12, 1, np.float32(0.5)])
    def test_positive_float_accepts(self, value):
        assert check_positive_float(value, "tolerance") > 0

    @pytest.mark.parametrize("value", [0, -1.0, np.nan, np.inf, True, "1", None])
    def test_positive_float_rejects(self, value):
        with pytest.raises(InvalidArgumentError):
            check_positive_float(value, "tolerance")

    @pytest.mark.parametrize("value", [1, np.int32(7), 10**6])
    def test_positive_int_accepts(self, value):
        out = check_positive_int(value, "max_iterations")
        assert isinstance(out, int)
        assert out == value

    @pytest.mark.parametrize("value", [0, -3, 1.0, True, False, "5", None])
    def test_positive_int_rejects(self, value):
        with pytest.raises(InvalidArgumentError):
            check_positive_int(value, "max_iterations")

    def test_finite_scalar(self):
        assert check_finite_scalar(-2, "gamma") == -2.0
        with pytest.raises(InvalidArgumentError):
            check_finite_scalar(np.inf, "gamma")

    @pytest.mark.parametrize("check", [check_positive_float, check_positive_int, check_finite_scalar])
    def test_annotated_as_scalar_like(self, check):
        assert get_type_hints(check)["value"] == ScalarLike

    @pytest.mark.parametrize("value", [2.5, 3, np.float64(1.25), np.int64(4)])
    def test_finite_scalar_accepts_scalar_like(self, value):
        assert check_finite_scalar(value, "gamma") == float(value)


# ============================================================================
# Test: make_rng()
# ============================================================================


class TestMakeRng:
    def test_seed_reproducible(self):
        assert make_rng(5).standard_normal() == make_rng(5).standard_normal()

    def test_generator_passthrough(self):
        generator = np.random.default_rng(0)
        assert make_rng(generator) is generator

    def test_none_gives_generator(self):
        assert isinstance(make_rng(None), np.random.Generator)

    @pytest.mark.parametrize("rng", [1.5, "seed", True, np.random.RandomState(0)])
    def test_invalid(self, rng):
        with pytest.raises(InvalidArgumentError):
            make_rng(rng)
