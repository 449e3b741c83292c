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


class SuffixKitError(Exception):
    """Base class of all the errors raised by suffixkit."""


class InvalidTerminatorError(SuffixKitError, ValueError):
    """The terminator is not strictly less than every code of the sequence."""


class InvalidArityError(SuffixKitError, ValueError):
    """Longest common substring needs at least two input strings."""


class OutOfRangeError(SuffixKitError, IndexError):
    """A position is not covered by any range of a string index map."""


class InconsistentEntryShapeError(SuffixKitError, ValueError):
    """Entries passed to radix sort project to keys of different lengths."""


class InvalidSuffixArrayError(SuffixKitError, ValueError):
    """The suffix array is not a permutation matching the given sequence."""
