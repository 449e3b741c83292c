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
#  python3 -m pytest -v suffixkit/python/tests/test_suffix_array.py

import unittest

import numpy as np

from suffixkit import InvalidTerminatorError, create_suffix_array


def naive_suffix_array(codes, terminator):
    text = list(codes) + [terminator]
    return sorted(range(len(text)), key=lambda i: text[i:])


class TestSuffixArray(unittest.TestCase):
    def test_create_suffix_array(self):
        for dtype in [np.uint8, np.int8, np.uint16, np.int16]:
            array = np.array([3, 2, 1], dtype=dtype)
            suffix_array = create_suffix_array(array)
            expected_array = np.array([3, 2, 1, 0], dtype=np.int32)
            np.testing.assert_equal(suffix_array, expected_array)
            self.assertTrue(suffix_array.dtype == np.int32)

    def test_mississippi(self):
        suffix_array = create_suffix_array("mississippi")
        self.assertEqual(
            suffix_array.tolist(), [11, 10, 7, 4, 1, 0, 9, 8, 6, 3, 5, 2]
        )

        suffix_array = create_suffix_array(
            "mississippi", append_terminator=False
        )
        self.assertEqual(
            suffix_array.tolist(), [10, 7, 4, 1, 0, 9, 8, 6, 3, 5, 2]
        )

    def test_edge_cases(self):
        self.assertEqual(create_suffix_array("").tolist(), [0])
        self.assertEqual(
            create_suffix_array("", append_terminator=False).tolist(), []
        )
        self.assertEqual(create_suffix_array("a").tolist(), [1, 0])
        self.assertEqual(
            create_suffix_array([7], append_terminator=False).tolist(), [0]
        )
        self.assertEqual(create_suffix_array("ab").tolist(), [2, 0, 1])
        self.assertEqual(create_suffix_array("ba").tolist(), [2, 1, 0])

    def test_input_not_modified(self):
        codes = [5, 3, 5, 3]
        create_suffix_array(codes)
        self.assertEqual(codes, [5, 3, 5, 3])

    def test_negative_codes(self):
        codes = [-3, 5, -3, 0, -7]
        expected = naive_suffix_array(codes, -8)
        self.assertEqual(create_suffix_array(codes).tolist(), expected)
        self.assertEqual(
            create_suffix_array(codes, terminator=-100).tolist(), expected
        )

    def test_invalid_terminator(self):
        with self.assertRaises(InvalidTerminatorError):
            create_suffix_array([1, 2, 3], terminator=2)
        with self.assertRaises(InvalidTerminatorError):
            create_suffix_array([1, 2, 3], terminator=1)
        with self.assertRaises(InvalidTerminatorError):
            create_suffix_array("abc", terminator=ord("z"))
        # any terminator is fine for an empty sequence
        self.assertEqual(create_suffix_array([], terminator=5).tolist(), [0])

    def test_random(self):
        rng = np.random.default_rng(1234)
        for _ in range(200):
            n = int(rng.integers(0, 60))
            alphabet = int(rng.integers(1, 6))
            codes = rng.integers(0, alphabet, size=n).tolist()
            suffix_array = create_suffix_array(codes)
            self.assertEqual(suffix_array.tolist(), naive_suffix_array(codes, -1))
            self.assertEqual(sorted(suffix_array.tolist()), list(range(n + 1)))

    def test_repetitive(self):
        for codes in [
            "a" * 100,
            "ab" * 50,
            "abc" * 33,
            "aab" * 40 + "a",
            "abaababaabaab" * 7,
        ]:
            suffix_array = create_suffix_array(codes)
            self.assertEqual(
                suffix_array.tolist(), naive_suffix_array(map(ord, codes), -1)
            )

    def test_sparse_alphabet(self):
        codes = [2**40, 3, 2**40, -(2**35), 3]
        suffix_array = create_suffix_array(codes)
        expected = naive_suffix_array(codes, -(2**35) - 1)
        self.assertEqual(suffix_array.tolist(), expected)

    def test_adjacent_suffixes_are_sorted(self):
        s = "the quick brown fox jumps over the lazy dog, the end"
        suffix_array = create_suffix_array(s, append_terminator=False)
        for a, b in zip(suffix_array[:-1], suffix_array[1:]):
            self.assertLessEqual(s[a:], s[b:])


if __name__ == "__main__":
    unittest.main()
