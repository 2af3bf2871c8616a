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
Sequence and Text Utilities

Small helpers for strings, integer sequences, membership tests and
"name: count" data files such as

    new york: 8244910
    los angeles: 3819702
"""

import numbers
from pathlib import Path
from typing import Dict, Iterable, Iterator, Sequence, Tuple, Union

from asymvar.exceptions import InvalidArgumentError

PathLike = Union[str, Path]


def count_uppercase(text: str) -> int:
    """Number of uppercase letters in text (digits and symbols ignored)."""
    if not isinstance(text, str):
        raise InvalidArgumentError(f"text must be a string, got {type(text).__name__}")
    return sum(1 for ch in text if ch.isupper())


def is_subset(seq_a: Iterable, seq_b: Iterable) -> bool:
    """
    True if every element of seq_a is also an element of seq_b.

    Works for lists, tuples and strings alike; an empty seq_a is a subset
    of anything.

    Examples
    --------
    >>> is_subset([1, 2], [1, 2, 3])
    True
    >>> is_subset("ab", "bca")
    True
    """
    members = list(seq_b)
    return all(a in members for a in seq_a)


def inner_product(x_vals: Sequence[float], y_vals: Sequence[float]) -> float:
    """
    Sum of x * y over paired elements of two equal-length sequences.

    Examples
    --------
    >>> inner_product([1, 2, 3, 4, 5], [6, 7, 8, 9, 10])
    130
    """
    if len(x_vals) != len(y_vals):
        raise InvalidArgumentError(
            f"x_vals and y_vals must have equal length, got {len(x_vals)} and {len(y_vals)}",
        )
    return sum(x * y for x, y in zip(x_vals, y_vals))


def _check_integer(value, name: str) -> None:
    if not isinstance(value, numbers.Integral):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")


def count_even(values: Iterable[int]) -> int:
    """Number of even integers in values, e.g. 50 for range(100)."""
    count = 0
    for v in values:
        _check_integer(v, "value")
        if v % 2 == 0:
            count += 1
    return count


def count_even_pairs(pairs: Iterable[Tuple[int, int]]) -> int:
    """
    Number of pairs whose two elements are both even.

    Examples
    --------
    >>> count_even_pairs(((2, 5), (4, 2), (9, 8), (12, 10)))
    2
    """
    count = 0
    for pair in pairs:
        try:
            a, b = pair
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError(f"expected a pair of integers, got {pair!r}") from exc
        _check_integer(a, "pair element")
        _check_integer(b, "pair element")
        if a % 2 == 0 and b % 2 == 0:
            count += 1
    return count


def _iter_city_lines(path: PathLike) -> Iterator[Tuple[str, int]]:
    # Yields one (name, population) per non-blank line, duplicates included.
    with open(path, encoding="utf-8") as handle:
        for lineno, line in enumerate(handle, start=1):
            line = line.strip()
            if not line:
                continue
            name, sep, count = line.rpartition(":")
            if not sep or not name.strip():
                raise InvalidArgumentError(f"{path}:{lineno}: expected 'name: population', got {line!r}")
            try:
                population = int(count.strip())
            except ValueError as exc:
                raise InvalidArgumentError(f"{path}:{lineno}: population is not an integer: {count.strip()!r}") from exc
            yield name.strip(), population


def read_city_populations(path: PathLike) -> Dict[str, int]:
    """
    Parse a file of "name: population" lines.

    Blank lines are skipped and surrounding whitespace is stripped. A name
    repeated later in the file overwrites the earlier entry in the returned
    mapping; use total_population for a sum over every line.

    Raises
    ------
    InvalidArgumentError
        If a line has no ':' separator or a non-integer population; the
        message names the 1-based line number
    FileNotFoundError
        If the file does not exist
    """
    return dict(_iter_city_lines(path))


def total_population(path: PathLike) -> int:
    """Sum of the populations on every line of a "name: population" file."""
    return sum(count for _, count in _iter_city_lines(path))


__all__ = [
    "count_uppercase",
    "is_subset",
    "inner_product",
    "count_even",
    "count_even_pairs",
    "read_city_populations",
    "total_population",
]
