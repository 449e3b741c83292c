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

from typing import Any, Callable, Iterable, List, Optional, Sequence

import numpy as np

from .errors import InconsistentEntryShapeError


def stable_counting_sort(order: List[int], digits: List[int]) -> List[int]:
    """
    One bucket pass of a radix sort.

    Args:
      order:
        The current order of the items, a permutation of ``0 .. n - 1``.
      digits:
        ``digits[i]`` is the (signed) digit of the i-th item.
    Returns:
      Return a new list containing the items of ``order`` sorted by their
      digits. Items having the same digit keep their relative order in
      ``order``.
    """
    if not order:
        return []

    # Shift the digits so that the smallest one goes to bucket 0, this keeps
    # negative digits before positive ones.
    low = min(digits[i] for i in order)
    high = max(digits[i] for i in order)
    num_buckets = high - low + 1

    # starts[b] is the first free slot of bucket b in the output
    starts = [0] * (num_buckets + 1)
    for i in order:
        starts[digits[i] - low + 1] += 1
    for b in range(num_buckets):
        starts[b + 1] += starts[b]

    ans = [0] * len(order)
    for i in order:
        b = digits[i] - low
        ans[starts[b]] = i
        starts[b] += 1
    return ans


def _to_key(value) -> tuple:
    if isinstance(value, (int, np.integer)):
        return (int(value),)
    return tuple(int(v) for v in value)


def radix_sort(
    entries: Iterable[Any],
    key: Optional[Callable[[Any], Sequence[int]]] = None,
) -> List[Any]:
    """
    Sort entries by fixed-length tuples of integers with a least significant
    digit radix sort.

    Each column of the tuples is a digit, the first column is the most
    significant one. Digits can be negative. The sort is stable, i.e., entries
    with equal keys keep their original relative order.

    It takes O(n * d) time, where d is the length of the keys, plus the size
    of the bucket array of each column (the difference between the largest
    and the smallest digit in that column).

    Args:
      entries:
        The entries to sort, they are not modified.
      key:
        A function mapping an entry to its key, i.e., a sequence of integers.
        All the keys MUST have the same length. If None, the entries
        themselves are used as keys; an integer entry is a key of length 1.
    Returns:
      Return a new list containing the sorted entries.

    >>> from suffixkit import radix_sort
    >>> radix_sort([[4, -2], [-9, 4], [4, -3]])
    [[-9, 4], [4, -3], [4, -2]]
    >>> radix_sort(["mania", "mango"], key=lambda s: [ord(c) for c in s])
    ['mango', 'mania']
    """
    entries = list(entries)
    if not entries:
        return []

    if key is None:
        keys = [_to_key(e) for e in entries]
    else:
        keys = [_to_key(key(e)) for e in entries]

    width = len(keys[0])
    for i, k in enumerate(keys):
        if len(k) != width:
            raise InconsistentEntryShapeError(
                f"Entry {i} has a key of length {len(k)}, "
                f"expected length {width} (from entry 0)"
            )

    order = list(range(len(entries)))
    for column in range(width - 1, -1, -1):
        digits = [k[column] for k in keys]
        order = stable_counting_sort(order, digits)

    return [entries[i] for i in order]
