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

"""Backend conversion, argument validation and text helpers."""

from .backend_utils import from_numpy, resolve_backend, to_numpy
from .text_utils import (
    count_even,
    count_even_pairs,
    count_uppercase,
    inner_product,
    is_subset,
    read_city_populations,
    total_population,
)

__all__ = [
    "to_numpy",
    "from_numpy",
    "resolve_backend",
    "count_uppercase",
    "is_subset",
    "inner_product",
    "count_even",
    "count_even_pairs",
    "read_city_populations",
    "total_population",
]
