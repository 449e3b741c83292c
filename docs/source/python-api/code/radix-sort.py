#!/usr/bin/env python3

import suffixkit

print(suffixkit.radix_sort([[4, -2, 3], [-9, 4, 0], [4, -2, 1]]))

words = ["image", "mania", "genom", "mango"]
print(suffixkit.radix_sort(words, key=lambda w: [ord(c) for c in w]))

"""
The output is:

[[-9, 4, 0], [4, -2, 1], [4, -2, 3]]
['genom', 'image', 'mango', 'mania']
"""
