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
Estimation and Simulation Result Types

Result dictionaries for least squares estimation and Monte Carlo
experiments on simulated processes.
"""

import numpy as np
from typing_extensions import TypedDict


class OLSResult(TypedDict):
    """
    Ordinary least squares fit of y = X β + σ w.

    Fields
    ------
    coefficients : np.ndarray
        β̂ = (X'X)^{-1} X'y, shape (k,)
    residuals : np.ndarray
        y - X β̂, shape (N,)
    sigma : float
        sqrt(r'r / N), maximum likelihood estimate of σ
    n_obs : int
        Number of observations N
    """

    coefficients: np.ndarray
    residuals: np.ndarray
    sigma: float
    n_obs: int


class OLSExperimentResult(TypedDict):
    """
    Repeated OLS estimation on simulated outcomes with fixed regressors.

    Fields
    ------
    design : np.ndarray
        Regressor matrix shared by all simulations, shape (N, k)
    coefficients : np.ndarray
        One row of estimates per simulation, shape (M, k)
    sigmas : np.ndarray
        σ̂ per simulation, shape (M,)
    true_coefficients : np.ndarray
        Parameters used to generate the data, shape (k,)
    true_sigma : float
        Noise scale used to generate the data
    """

    design: np.ndarray
    coefficients: np.ndarray
    sigmas: np.ndarray
    true_coefficients: np.ndarray
    true_sigma: float


class EnsembleMoments(TypedDict):
    """
    Cross-sectional moments of the terminal values of simulated paths.

    Fields
    ------
    mean : float
        Σₙ yₙ / N
    variance : float
        Σₙ yₙ² / N - mean² (population form)
    n_paths : int
        Number of paths N
    """

    mean: float
    variance: float
    n_paths: int


__all__ = [
    "OLSResult",
    "OLSExperimentResult",
    "EnsembleMoments",
]
