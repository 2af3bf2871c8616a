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
Types Module

Central import point for the type definitions of asymvar.

Module Organization
------------------
- core: array aliases for the stochastic difference equation
- backends: backend identifiers, solver defaults and SolverConfig
- lyapunov: LyapunovSolution, StabilityInfo, StationaryMoments
- estimation: OLS and ensemble result dictionaries
"""

from .backends import (
    DEFAULT_BACKEND,
    DEFAULT_DOUBLING_MAX_ITERATIONS,
    DEFAULT_DOUBLING_TOLERANCE,
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_TOLERANCE,
    VALID_BACKENDS,
    Backend,
    SolverConfig,
    validate_backend,
)
from .core import (
    ArrayLike,
    CovarianceMatrix,
    DesignMatrix,
    GainMatrix,
    ObservationMatrix,
    ScalarFunction,
    ScalarLike,
    Seed,
    ShockMatrix,
    StateVector,
    TransitionMatrix,
)
from .estimation import EnsembleMoments, OLSExperimentResult, OLSResult
from .lyapunov import LyapunovSolution, SolverStatus, StabilityInfo, StationaryMoments

__all__ = [
    # Backends and configuration
    "Backend",
    "VALID_BACKENDS",
    "DEFAULT_BACKEND",
    "DEFAULT_TOLERANCE",
    "DEFAULT_MAX_ITERATIONS",
    "DEFAULT_DOUBLING_TOLERANCE",
    "DEFAULT_DOUBLING_MAX_ITERATIONS",
    "SolverConfig",
    "validate_backend",
    # Core
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
    # Lyapunov
    "SolverStatus",
    "LyapunovSolution",
    "StabilityInfo",
    "StationaryMoments",
    # Estimation
    "OLSResult",
    "OLSExperimentResult",
    "EnsembleMoments",
]
