#!/usr/bin/env python3

import suffixkit

strings = ["12apple", "3apple4", "apple56"]

print(suffixkit.longest_common_substring(strings))
print(suffixkit.longest_common_substring(strings, index_map="linear"))

index_map = suffixkit.LogStringIndexMap()
print(suffixkit.longest_common_substring_length(strings, index_map=index_map))
print(index_map)

"""
The output is:

['apple']
['apple']
5
LogStringIndexMap(num_strings=3, total=24, ends=[8, 16, 24])
"""
