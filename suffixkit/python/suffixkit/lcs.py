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

import logging
import math
from collections import deque
from typing import List, Sequence, Tuple, Union

import numpy as np

from .errors import InvalidArityError
from .lcp import create_lcp_array
from .string_index_map import StringIndexMap, create_string_index_map
from .suffix_array import create_suffix_array
from .utils import CodeSequence, from_codes, to_codes


def _get_string_index_map(index_map) -> StringIndexMap:
    if isinstance(index_map, str) or isinstance(index_map, type):
        return create_string_index_map(index_map)
    if hasattr(index_map, "add") and hasattr(index_map, "lookup"):
        return index_map
    if callable(index_map):
        return create_string_index_map(index_map)
    raise TypeError(
        f"Expect a str, a string index map or a factory of it, "
        f"given: {type(index_map)}"
    )


def _concatenate(
    codes: List[np.ndarray], index_map: StringIndexMap
) -> np.ndarray:
    """
    Concatenate the strings, each one followed by its own terminator.

    The terminator of the i-th string is ``base - 1 - i``, where base is
    min(0, smallest code of all strings), so the terminators are distinct,
    decreasing and smaller than every code.
    """
    base = min(0, min(int(c.min()) for c in codes))
    pieces = []
    total = 0
    for i, c in enumerate(codes):
        pieces.append(c)
        pieces.append(np.array([base - 1 - i], dtype=np.int64))
        new_total = index_map.add(c.size + 1)
        if new_total != total + c.size + 1:
            raise ValueError(
                f"The string index map must be empty on input, "
                f"add() returned {new_total}, expected {total + c.size + 1}"
            )
        total = new_total
    return np.concatenate(pieces)


def _find_longest_common_substrings(
    strings: Sequence[CodeSequence],
    index_map: Union[str, StringIndexMap] = "log",
) -> Tuple[int, List[List[int]]]:
    """
    Return the length of the longest common substrings and the codes of
    each distinct one, in lexicographic order.
    """
    if len(strings) < 2:
        raise InvalidArityError(
            f"Longest common substring needs at least 2 strings, "
            f"given: {len(strings)}"
        )

    codes = [to_codes(s) for s in strings]
    if any(c.size == 0 for c in codes):
        # The empty string is the only common substring.
        return 0, []

    num_strings = len(codes)
    index_map = _get_string_index_map(index_map)
    text = _concatenate(codes, index_map)

    sa = create_suffix_array(text, append_terminator=False).tolist()
    lcp = create_lcp_array(text, sa).tolist()
    owners = [index_map.lookup(p) for p in sa]
    logging.debug(
        f"Searching common substrings of {num_strings} strings, "
        f"total length {len(sa)}, index map: {index_map}"
    )

    # Sliding window [lo, hi] over ranks of the suffix array. The common
    # prefix of the suffixes in the window is min(lcp[lo + 1 .. hi]).
    counts = [0] * num_strings
    covered = 0
    # ranks in (lo, hi], lcp values are increasing from left to right
    window_min = deque()

    best = 0
    starts = []
    # min lcp between the last recorded rank and lo
    since_last = math.inf

    lo = 0
    for hi in range(len(sa)):
        owner = owners[hi]
        if counts[owner] == 0:
            covered += 1
        counts[owner] += 1

        if hi > lo:
            while window_min and lcp[window_min[-1]] >= lcp[hi]:
                window_min.pop()
            window_min.append(hi)

        while covered == num_strings:
            length = lcp[window_min[0]]
            if length > best:
                best = length
                starts = [sa[lo]]
                since_last = math.inf
            elif length == best and length > 0:
                # Equal substrings occupy consecutive ranks, so a duplicate
                # can only repeat the last recorded one.
                if not starts or since_last < best:
                    starts.append(sa[lo])
                since_last = math.inf

            owner = owners[lo]
            counts[owner] -= 1
            if counts[owner] == 0:
                covered -= 1
            lo += 1
            since_last = min(since_last, lcp[lo])
            while window_min and window_min[0] <= lo:
                window_min.popleft()

    text = text.tolist()
    substrings = [text[s : s + best] for s in starts]
    logging.debug(
        f"Longest common substring length: {best}, "
        f"number of distinct substrings: {len(substrings)}"
    )
    return best, substrings


def longest_common_substring(
    strings: Sequence[CodeSequence],
    index_map: Union[str, StringIndexMap] = "log",
) -> List[Union[str, List[int]]]:
    """
    Find the longest substrings occurring in every one of the given strings.

    The strings are concatenated with a distinct terminator after each of
    them, then a window sliding over the generalized suffix array finds the
    smallest groups of adjacent suffixes that cover all the strings. The
    minimum LCP inside such a group is the length of a common substring.

    Args:
      strings:
        At least 2 strings. Each one can be a str or a sequence of integer
        codes, see :func:`to_codes`.
      index_map:
        How to map a position of the concatenation back to its string.
        "log" (the default) uses O(k) space and O(log k) time per lookup,
        "linear" uses O(n) space and O(1) time per lookup. It can also be
        an empty object with ``add()`` and ``lookup()`` methods, or a
        callable returning one.
    Returns:
      Return a list of all the distinct longest common substrings, in
      lexicographic order. They are str if all the inputs are str, otherwise
      lists of integer codes. It is empty if any of the inputs is empty or
      the strings have nothing in common.

    Raises:
      InvalidArityError: if fewer than 2 strings are given.

    >>> from suffixkit import longest_common_substring
    >>> longest_common_substring(["12apple", "3apple4", "apple56"])
    ['apple']
    >>> longest_common_substring(["xaby", "abxy"], index_map="linear")
    ['ab']
    """
    as_str = all(isinstance(s, str) for s in strings)
    _, substrings = _find_longest_common_substrings(strings, index_map)
    return [from_codes(s, as_str) for s in substrings]


def longest_common_substring_length(
    strings: Sequence[CodeSequence],
    index_map: Union[str, StringIndexMap] = "log",
) -> int:
    """
    Return the length of the longest common substring of the given
    strings, 0 if they have nothing in common.

    See :func:`longest_common_substring` for the arguments.
    """
    length, _ = _find_longest_common_substrings(strings, index_map)
    return length
