#!/usr/bin/env python3
#
# Copyright      2024  Xiaomi Corp.       (authors: Wei Kang)
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

# To run this single test, use
#
#  python3 -m pytest -v suffixkit/python/tests/test_radix_sort.py

import unittest

import numpy as np

from suffixkit import InconsistentEntryShapeError, radix_sort, stable_counting_sort


def project_by_char_code(s):
    return [ord(c) for c in s]


class TestRadixSort(unittest.TestCase):
    def test_signed_tuples(self):
        entries = [
            [-9, 4, 0],
            [4, -2, 3],
            [4, 2, -1],
            [1, 0, 6],
            [-4, -2, -5],
            [4, 6, 8],
        ]
        expected = [
            [-9, 4, 0],
            [-4, -2, -5],
            [1, 0, 6],
            [4, -2, 3],
            [4, 2, -1],
            [4, 6, 8],
        ]
        self.assertEqual(radix_sort(entries), expected)
        # the input is not modified
        self.assertEqual(entries[1], [4, -2, 3])

    def test_projection(self):
        words = ["image", "mania", "genom", "mango"]
        result = radix_sort(words, project_by_char_code)
        self.assertEqual(result, ["genom", "image", "mango", "mania"])
        self.assertEqual(words, ["image", "mania", "genom", "mango"])

    def test_integers(self):
        self.assertEqual(radix_sort([3, -1, 2, -7, 0]), [-7, -1, 0, 2, 3])
        self.assertEqual(radix_sort(np.array([5, 1, 3])), [1, 3, 5])

    def test_empty(self):
        self.assertEqual(radix_sort([]), [])
        self.assertEqual(radix_sort([[]]), [[]])

    def test_stable(self):
        entries = [("b", 1), ("a", 0), ("c", 1), ("d", 0), ("e", 1)]
        result = radix_sort(entries, key=lambda e: [e[1]])
        self.assertEqual(
            result, [("a", 0), ("d", 0), ("b", 1), ("c", 1), ("e", 1)]
        )

    def test_idempotent(self):
        rng = np.random.default_rng(20240101)
        for _ in range(20):
            width = int(rng.integers(1, 5))
            entries = rng.integers(-50, 50, size=(30, width)).tolist()
            once = radix_sort(entries)
            self.assertEqual(once, sorted(entries))
            self.assertEqual(radix_sort(once), once)
            self.assertEqual(radix_sort(entries), once)

    def test_inconsistent_shape(self):
        with self.assertRaises(InconsistentEntryShapeError):
            radix_sort([[1, 2], [3]])
        with self.assertRaises(ValueError):
            radix_sort(["ab", "abc"], key=project_by_char_code)

    def test_stable_counting_sort(self):
        digits = [2, -1, 2, 0, -1]
        order = stable_counting_sort(list(range(5)), digits)
        self.assertEqual(order, [1, 4, 3, 0, 2])
        self.assertEqual(stable_counting_sort([], []), [])


if __name__ == "__main__":
    unittest.main()
