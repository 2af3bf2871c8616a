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

"""Least squares estimation and the Kalman gain."""

from .kalman import kalman_gain
from .least_squares import ols_estimate, quadratic_design_matrix, simulate_ols_experiment

__all__ = [
    "ols_estimate",
    "quadratic_design_matrix",
    "simulate_ols_experiment",
    "kalman_gain",
]
