#!/usr/bin/env python3

import suffixkit

s = "banana"

suffix_array = suffixkit.create_suffix_array(s)
print(suffix_array)

lcp = suffixkit.create_lcp_array(s, suffix_array)
print(lcp)

for i in suffix_array:
    print(s[i:] + "$")

"""
The output is:

[6 5 3 1 0 4 2]
[0 0 1 3 0 0 2]
$
a$
ana$
anana$
banana$
na$
nana$
"""
