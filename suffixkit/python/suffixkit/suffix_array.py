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
from typing import List, Optional

import numpy as np

from .errors import InvalidTerminatorError
from .radix_sort import radix_sort
from .utils import CodeSequence, default_terminator, to_codes


def _renumbering(array: np.ndarray) -> np.ndarray:
    """Renumber element in the input array such that the returned array
    contains entries ranging from 1 to M, where M equals
    to number of unique entries in the input array.

    The order of entries in the output array is the same as the order
    of entries in the input array. That is, if array[i] < array[j], then
    ans[i] < ans[j].

    Args:
      array:
        A non-empty 1-D integer array.
    Returns:
      Return a renumbered 1-D np.int64 array.
    """
    shifted = array - array.min()
    span = int(shifted.max()) + 1

    if span > 4 * array.size + (1 << 16):
        # Too sparse for a bucket array, e.g., a few codes close to 2**31.
        _, inverse = np.unique(array, return_inverse=True)
        return inverse.reshape(-1).astype(np.int64) + 1

    present = np.zeros(span, dtype=np.int64)
    present[shifted] = 1
    # Note: ranks[shifted] == 1 for the smallest entry
    ranks = np.cumsum(present)
    return ranks[shifted]


def _dc3(s: List[int], n: int) -> List[int]:
    """
    The skew (DC3) algorithm of Kärkkäinen and Sanders.

    See "Linear Work Suffix Array Construction", J. ACM 53(6), 2006.

    Args:
      s:
        A list of length ``n + 3``. ``s[0:n]`` contains integers >= 1 and
        ``s[n:n+3]`` are 0.
      n:
        Number of symbols in s.
    Returns:
      Return the suffix array of ``s[0:n]``.
    """
    if n == 1:
        return [0]

    n0 = (n + 2) // 3
    n1 = (n + 1) // 3
    n2 = n // 3
    n02 = n0 + n2

    # Sample positions are those with i % 3 != 0. If n % 3 == 1, position n
    # is added as a dummy mod-1 sample so that every mod-0 suffix has a
    # mod-1 neighbour.
    s12 = [i for i in range(n + n0 - n1) if i % 3 != 0]
    sa12 = radix_sort(s12, key=lambda i: (s[i], s[i + 1], s[i + 2]))

    # Name the sample triples. Names of the mod-1 samples go into the first
    # half of s12_names, mod-2 samples into the second half.
    s12_names = [0] * (n02 + 3)
    name = 0
    prev = None
    for i in sa12:
        triple = (s[i], s[i + 1], s[i + 2])
        if triple != prev:
            name += 1
            prev = triple
        if i % 3 == 1:
            s12_names[i // 3] = name
        else:
            s12_names[i // 3 + n0] = name

    if name < n02:
        # names are not unique, sort the reduced string recursively
        sa12 = _dc3(s12_names, n02)
        for rank, i in enumerate(sa12):
            s12_names[i] = rank + 1
    else:
        for i in range(n02):
            sa12[s12_names[i] - 1] = i

    # mod-0 suffixes, ordered by (s[i], rank of suffix i + 1)
    s0 = [3 * i for i in sa12 if i < n0]
    sa0 = radix_sort(s0, key=lambda i: s[i])

    def get_pos(t: int) -> int:
        i = sa12[t]
        return i * 3 + 1 if i < n0 else (i - n0) * 3 + 2

    sa = []
    p = 0
    # skip the dummy sample, it is always the smallest one
    t = n0 - n1
    while p < n0 and t < n02:
        i = get_pos(t)
        j = sa0[p]
        if sa12[t] < n0:
            take_sample = (s[i], s12_names[sa12[t] + n0]) <= (
                s[j],
                s12_names[j // 3],
            )
        else:
            take_sample = (s[i], s[i + 1], s12_names[sa12[t] - n0 + 1]) <= (
                s[j],
                s[j + 1],
                s12_names[j // 3 + n0],
            )
        if take_sample:
            sa.append(i)
            t += 1
        else:
            sa.append(j)
            p += 1

    sa.extend(sa0[p:])
    sa.extend(get_pos(k) for k in range(t, n02))
    assert len(sa) == n, (len(sa), n)
    return sa


def create_suffix_array(
    sequence: CodeSequence,
    terminator: Optional[int] = None,
    append_terminator: bool = True,
) -> np.ndarray:
    """Create a suffix array from a sequence of integer codes.

    hint:
      Please refer to https://en.wikipedia.org/wiki/Suffix_array
      for what suffix array is. The special sentinel letter ``$`` in the
      article is the terminator here, it is smaller than any other
      codes.

    The suffix array is constructed in O(n) time with the skew (DC3)
    algorithm, whose sorting steps are passes of :func:`radix_sort`.

    Args:
      sequence:
        A str (each character is its code point), bytes, a list of
        integers or a 1-D integer np.ndarray. It is not modified.
      terminator:
        The code appended to the sequence. It MUST be strictly less than
        every code in the sequence. If None, -1 is used when all the codes
        are non-negative, otherwise the smallest code minus 1.
      append_terminator:
        If True, return the suffix array of ``sequence + [terminator]``,
        which has ``len(sequence) + 1`` entries, ``ans[0]`` being
        ``len(sequence)``. If False, the position of the terminator is
        dropped and the returned array is a permutation of
        ``0 .. len(sequence) - 1``.
    Returns:
      Returns a suffix array of type ``np.int32``.

    **Usage examples**:

        .. literalinclude:: code/suffix-array.py
    """
    codes = to_codes(sequence)
    n = codes.size
    assert n + 1 < np.iinfo(np.int32).max, n

    if terminator is None:
        terminator = default_terminator(codes)
    else:
        terminator = int(terminator)
        if n > 0:
            found = np.nonzero(codes == terminator)[0]
            if found.size > 0:
                raise InvalidTerminatorError(
                    f"Terminator {terminator} occurs in the sequence "
                    f"at position {int(found[0])}"
                )
            min_code = int(codes.min())
            if terminator > min_code:
                raise InvalidTerminatorError(
                    f"Terminator {terminator} is not less than the "
                    f"smallest code {min_code} of the sequence"
                )

    text = np.concatenate([codes, np.array([terminator], dtype=np.int64)])

    # After renumbering the terminator is 1 and all the other codes are > 1.
    # The dense alphabet keeps the bucket arrays of radix sort small.
    names = _renumbering(text).tolist()
    logging.debug(
        f"Creating suffix array of {n} codes, "
        f"alphabet size: {max(names)}, terminator: {terminator}"
    )

    sa = _dc3(names + [0, 0, 0], n + 1)

    ans = np.asarray(sa, dtype=np.int32)
    if not append_terminator:
        # The terminator suffix is the smallest one.
        assert ans[0] == n, (ans[0], n)
        ans = ans[1:].copy()
    return ans
