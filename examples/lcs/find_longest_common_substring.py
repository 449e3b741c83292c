#!/usr/bin/env python3
# Copyright 2024 Xiaomi Corporation (Author: Wei Kang)
#
# See ../../LICENSE for clarification regarding multiple authors
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

"""
Print the longest substrings shared by all the given text files.

Usage:

    ./examples/lcs/find_longest_common_substring.py \
        --inputs a.txt b.txt c.txt \
        --index-map log \
        --strip true
"""

import argparse
import logging
from pathlib import Path

from suffixkit import (
    AttributeDict,
    longest_common_substring,
    setup_logger,
    str2bool,
)


def get_args():
    parser = argparse.ArgumentParser(
        """
    Find the longest common substrings of two or more utf-8 text files.
    """
    )
    parser.add_argument(
        "--inputs",
        type=Path,
        nargs="+",
        required=True,
        help="The input text files, at least two of them.",
    )
    parser.add_argument(
        "--index-map",
        type=str,
        default="log",
        choices=["linear", "log"],
        help="""How to map positions of the concatenated text back to the
        input files. `linear` is faster, `log` uses less memory.
        """,
    )
    parser.add_argument(
        "--strip",
        type=str2bool,
        default=False,
        help="Whether to strip leading and trailing whitespaces of each file.",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        default=None,
        help="If given, also write the logs to a file in this directory.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="info",
        help="The log level, e.g., debug, info, warning.",
    )
    return parser.parse_args()


def main():
    args = get_args()
    params = AttributeDict(vars(args))

    if params.log_dir is not None:
        setup_logger(params.log_dir / "log-lcs", log_level=params.log_level)
    else:
        formatter = (
            "%(asctime)s %(levelname)s [%(filename)s:%(lineno)d] %(message)s"
        )
        logging.basicConfig(format=formatter, level=logging.INFO)

    texts = []
    for ifile in params.inputs:
        assert ifile.is_file(), f"File not exists : {ifile}"
        text = ifile.read_text(encoding="utf-8")
        if params.strip:
            text = text.strip()
        logging.info(f"Loaded {ifile}, {len(text)} characters.")
        texts.append(text)

    results = longest_common_substring(texts, index_map=params.index_map)
    if not results:
        logging.info("The inputs have no common substring.")
        return

    logging.info(
        f"Found {len(results)} common substring(s) of length {len(results[0])}."
    )
    for r in results:
        print(repr(r))


if __name__ == "__main__":
    main()
