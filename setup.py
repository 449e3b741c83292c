#!/usr/bin/env python3
#
# Copyright (c)  2024  Xiaomi Corporation (author: Wei Kang)

import re

import setuptools


def get_package_version():
    with open("suffixkit/python/suffixkit/__init__.py") as f:
        content = f.read()

    latest_version = re.search(r"__version__ = (.*)", content).group(1)
    latest_version = latest_version.strip().strip('"')
    return latest_version


setuptools.setup(
    name="suffixkit",
    version=get_package_version(),
    description="Linear time suffix arrays, LCP arrays, radix sort and "
    "longest common substrings",
    package_dir={
        "suffixkit": "suffixkit/python/suffixkit",
    },
    packages=["suffixkit"],
    install_requires=["numpy"],
    extras_require={"test": ["pytest"]},
    python_requires=">=3.7",
)
