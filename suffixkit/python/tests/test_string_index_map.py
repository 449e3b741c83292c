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
#  python3 -m pytest -v suffixkit/python/tests/test_string_index_map.py

import unittest

import numpy as np

from suffixkit import (
    LinearStringIndexMap,
    LogStringIndexMap,
    OutOfRangeError,
    create_string_index_map,
)


class TestStringIndexMap(unittest.TestCase):
    def test_add_and_lookup(self):
        for kind in ["linear", "log"]:
            index_map = create_string_index_map(kind)
            self.assertEqual(index_map.add(3), 3)
            self.assertEqual(index_map.add(1), 4)
            self.assertEqual(index_map.add(2), 6)
            owners = [index_map.lookup(i) for i in range(6)]
            self.assertEqual(owners, [0, 0, 0, 1, 2, 2])
            self.assertEqual(index_map.total, 6)
            self.assertEqual(index_map.num_strings, 3)

    def test_out_of_range(self):
        for kind in [LinearStringIndexMap, LogStringIndexMap]:
            index_map = create_string_index_map(kind)
            with self.assertRaises(OutOfRangeError):
                index_map.lookup(0)
            index_map.add(2)
            with self.assertRaises(OutOfRangeError):
                index_map.lookup(2)
            with self.assertRaises(IndexError):
                index_map.lookup(-1)

    def test_zero_length(self):
        for kind in ["linear", "log"]:
            index_map = create_string_index_map(kind)
            index_map.add(2)
            index_map.add(0)
            index_map.add(0)
            index_map.add(1)
            self.assertEqual(index_map.lookup(1), 0)
            self.assertEqual(index_map.lookup(2), 3)

    def test_invalid(self):
        with self.assertRaises(ValueError):
            create_string_index_map("quadratic")
        with self.assertRaises(ValueError):
            LogStringIndexMap().add(-1)

    def test_str(self):
        index_map = LogStringIndexMap()
        index_map.add(4)
        index_map.add(2)
        self.assertEqual(
            str(index_map), "LogStringIndexMap(num_strings=2, total=6, ends=[4, 6])"
        )
        index_map = LinearStringIndexMap()
        index_map.add(2)
        index_map.add(1)
        self.assertEqual(
            str(index_map),
            "LinearStringIndexMap(num_strings=2, total=3, owners=[0, 0, 1])",
        )

    def test_same_lookup_results(self):
        rng = np.random.default_rng(7)
        for _ in range(50):
            linear = LinearStringIndexMap()
            log = LogStringIndexMap()
            for length in rng.integers(0, 20, size=int(rng.integers(1, 30))):
                self.assertEqual(linear.add(length), log.add(length))
            for position in range(linear.total):
                self.assertEqual(linear.lookup(position), log.lookup(position))


if __name__ == "__main__":
    unittest.main()
