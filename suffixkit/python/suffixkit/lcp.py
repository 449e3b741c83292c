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
from typing import Sequence, Union

import numpy as np

from .errors import InvalidSuffixArrayError
from .utils import CodeSequence, to_codes


def create_inverse_suffix_array(
    suffix_array: Union[Sequence[int], np.ndarray]
) -> np.ndarray:
    """
    Return the rank array, i.e., the inverse permutation of the suffix array.

    ``ans[suffix_array[i]] == i`` for every i.

    Args:
      suffix_array:
        A permutation of ``0 .. len(suffix_array) - 1``.
    Returns:
      Return a 1-D array of dtype np.int32.
    """
    sa = np.asarray(suffix_array, dtype=np.int64)
    assert sa.ndim == 1, sa.ndim
    ans = np.empty(sa.size, dtype=np.int32)
    ans[sa] = np.arange(sa.size, dtype=np.int32)
    return ans


def _check_suffix_array(n: int, sa: np.ndarray) -> None:
    if sa.size not in (n, n + 1):
        raise InvalidSuffixArrayError(
            f"Suffix array has {sa.size} entries, "
            f"expected {n} or {n + 1} for a sequence of length {n}"
        )
    if sa.size == 0:
        return
    if sa.min() < 0 or sa.max() >= sa.size:
        raise InvalidSuffixArrayError(
            f"Suffix array entries must be in [0, {sa.size}), "
            f"given range [{sa.min()}, {sa.max()}]"
        )
    if np.unique(sa).size != sa.size:
        raise InvalidSuffixArrayError(
            "Suffix array contains duplicate positions"
        )


def create_lcp_array(
    sequence: CodeSequence,
    suffix_array: Union[Sequence[int], np.ndarray],
    validate: bool = False,
) -> np.ndarray:
    """
    Compute the longest common prefix (LCP) array with the algorithm of
    Kasai et al. in O(n) time.

    ``ans[i]`` is the length of the longest common prefix of the suffixes
    starting at ``suffix_array[i - 1]`` and ``suffix_array[i]``, ``ans[0]``
    is 0.

    Positions are visited in text order; the match length found for
    position i minus one is a lower bound of the one for position i + 1,
    so each comparison resumes from there.

    Args:
      sequence:
        The sequence the suffix array was created from, see
        :func:`create_suffix_array`.
      suffix_array:
        The suffix array of ``sequence``. It may contain the position of the
        terminator (i.e., ``len(sequence)``), whose suffix shares no prefix
        with any other suffix.
      validate:
        If True, check that the suffix array is a permutation of the right
        size and raise :class:`InvalidSuffixArrayError` if not. Otherwise a
        mismatched suffix array gives undefined results.
    Returns:
      Return a 1-D array of dtype np.int32 with the same length as
      ``suffix_array``.

    >>> from suffixkit import create_lcp_array, create_suffix_array
    >>> sa = create_suffix_array("banana")
    >>> sa.tolist()
    [6, 5, 3, 1, 0, 4, 2]
    >>> create_lcp_array("banana", sa).tolist()
    [0, 0, 1, 3, 0, 0, 2]
    """
    codes = to_codes(sequence)
    sa = np.asarray(suffix_array, dtype=np.int64)
    assert sa.ndim == 1, sa.ndim

    n = codes.size
    if validate:
        _check_suffix_array(n, sa)

    m = sa.size
    rank = create_inverse_suffix_array(sa).tolist()
    sa_list = sa.tolist()
    text = codes.tolist()

    lcp = [0] * m
    h = 0
    for i in range(m):
        r = rank[i]
        if r == 0:
            h = 0
            continue
        j = sa_list[r - 1]
        while i + h < n and j + h < n and text[i + h] == text[j + h]:
            h += 1
        lcp[r] = h
        if h > 0:
            h -= 1

    logging.debug(f"Created LCP array of {m} entries, max lcp: {max(lcp, default=0)}")
    return np.asarray(lcp, dtype=np.int32)
