# Copyright      2024   Xiaomi Corp.       (author: Wei Kang)
#
# See ../../../LICENSE for clarification regarding multiple authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Map a position in the concatenation of several strings back to the index of
the string it comes from.

Strings are registered in order with ``add(length)``. The i-th call covers
the next ``length`` positions, so the caller passes the string length plus
one when the string is followed by a terminator.

There are two implementations with the same results:

  - :class:`LinearStringIndexMap`, O(n) space and O(1) lookup.
  - :class:`LogStringIndexMap`, O(k) space and O(log k) lookup, where k is
    the number of strings.
"""

from bisect import bisect_right
from typing import Callable, List, Union

from .errors import OutOfRangeError


def _check_length(length: int) -> int:
    length = int(length)
    if length < 0:
        raise ValueError(f"Length must be non-negative, given: {length}")
    return length


class LinearStringIndexMap:
    """Store the index of the owning string for every position."""

    name = "linear"

    def __init__(self):
        self._owners: List[int] = []
        self._num_strings = 0

    @property
    def total(self) -> int:
        return len(self._owners)

    @property
    def num_strings(self) -> int:
        return self._num_strings

    def add(self, length: int) -> int:
        """Register the next string, return the new total length."""
        length = _check_length(length)
        self._owners.extend([self._num_strings] * length)
        self._num_strings += 1
        return self.total

    def lookup(self, position: int) -> int:
        if not 0 <= position < self.total:
            raise OutOfRangeError(
                f"Position {position} is out of range [0, {self.total})"
            )
        return self._owners[position]

    def __str__(self) -> str:
        if self.total <= 32:
            owners = str(self._owners)
        else:
            owners = f"{self._owners[:32]}..."
        return (
            f"LinearStringIndexMap(num_strings={self.num_strings}, "
            f"total={self.total}, owners={owners})"
        )

    __repr__ = __str__


class LogStringIndexMap:
    """Store only the cumulative end offset of each string and
    binary-search them."""

    name = "log"

    def __init__(self):
        # ends[i] is one past the last position of the i-th string
        self._ends: List[int] = []

    @property
    def total(self) -> int:
        return self._ends[-1] if self._ends else 0

    @property
    def num_strings(self) -> int:
        return len(self._ends)

    def add(self, length: int) -> int:
        """Register the next string, return the new total length."""
        length = _check_length(length)
        self._ends.append(self.total + length)
        return self.total

    def lookup(self, position: int) -> int:
        if not 0 <= position < self.total:
            raise OutOfRangeError(
                f"Position {position} is out of range [0, {self.total})"
            )
        # Strings of length 0 have equal start and end, bisect_right skips
        # them.
        return bisect_right(self._ends, position)

    def __str__(self) -> str:
        return (
            f"LogStringIndexMap(num_strings={self.num_strings}, "
            f"total={self.total}, ends={self._ends})"
        )

    __repr__ = __str__


StringIndexMap = Union[LinearStringIndexMap, LogStringIndexMap]

_STRING_INDEX_MAPS = {
    LinearStringIndexMap.name: LinearStringIndexMap,
    LogStringIndexMap.name: LogStringIndexMap,
}


def create_string_index_map(
    kind: Union[str, Callable[[], StringIndexMap]] = "log"
) -> StringIndexMap:
    """
    Create an empty string index map.

    Args:
      kind:
        Either "linear", "log", or a callable without arguments returning
        an object that has ``add(length)`` and ``lookup(position)``.

    >>> from suffixkit import create_string_index_map
    >>> index_map = create_string_index_map("log")
    >>> index_map.add(3)
    3
    >>> index_map.add(2)
    5
    >>> index_map.lookup(3)
    1
    """
    if callable(kind):
        return kind()
    if kind not in _STRING_INDEX_MAPS:
        raise ValueError(
            f"Unknown string index map: {kind}, "
            f"expected one of {list(_STRING_INDEX_MAPS)}"
        )
    return _STRING_INDEX_MAPS[kind]()
