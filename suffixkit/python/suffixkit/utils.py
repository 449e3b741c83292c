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

import argparse
import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Sequence, Union

import numpy as np

Pathlike = Union[str, Path]

# A code sequence can be a str, bytes, a list of ints or a 1-D integer array.
CodeSequence = Union[str, bytes, Sequence[int], np.ndarray]


class AttributeDict(dict):
    def __getattr__(self, key):
        if key in self:
            return self[key]
        raise AttributeError(f"No such attribute '{key}'")

    def __setattr__(self, key, value):
        self[key] = value

    def __delattr__(self, key):
        if key in self:
            del self[key]
            return
        raise AttributeError(f"No such attribute '{key}'")


def setup_logger(
    log_filename: Pathlike,
    log_level: str = "info",
    use_console: bool = True,
) -> None:
    """Setup log level.

    Args:
      log_filename:
        The filename to save the log.
      log_level:
        The log level to use, e.g., "debug", "info", "warning", "error",
        "critical"
      use_console:
        True to also print logs to console.
    """
    now = datetime.now()
    date_time = now.strftime("%Y-%m-%d-%H-%M-%S")
    formatter = (
        "%(asctime)s %(levelname)s [%(filename)s:%(lineno)d] %(message)s"
    )
    log_filename = f"{log_filename}-{date_time}"

    log_dir = os.path.dirname(log_filename)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    level = logging.ERROR
    if log_level == "debug":
        level = logging.DEBUG
    elif log_level == "info":
        level = logging.INFO
    elif log_level == "warning":
        level = logging.WARNING
    elif log_level == "critical":
        level = logging.CRITICAL

    logging.basicConfig(
        filename=log_filename,
        format=formatter,
        level=level,
        filemode="w",
    )
    if use_console:
        console = logging.StreamHandler()
        console.setLevel(level)
        console.setFormatter(logging.Formatter(formatter))
        logging.getLogger("").addHandler(console)


def to_codes(sequence: CodeSequence) -> np.ndarray:
    """Convert a sequence into a 1-D np.int64 array of integer codes.

    A str is converted character by character with ``ord()``, bytes are
    taken as unsigned 8-bit values, anything else must be a 1-D sequence
    of integers.

    The returned array is always a fresh copy, so callers may not
    observe any modification done on it.

    >>> from suffixkit import to_codes
    >>> to_codes("ab").tolist()
    [97, 98]
    >>> to_codes([3, -1, 2]).tolist()
    [3, -1, 2]
    """
    if isinstance(sequence, str):
        return np.fromiter(
            (ord(c) for c in sequence), dtype=np.int64, count=len(sequence)
        )
    if isinstance(sequence, (bytes, bytearray)):
        return np.frombuffer(bytes(sequence), dtype=np.uint8).astype(np.int64)

    array = np.asarray(sequence)
    if array.size == 0:
        return np.zeros(0, dtype=np.int64)

    assert array.ndim == 1, array.ndim
    assert np.issubdtype(array.dtype, np.integer), array.dtype
    return array.astype(np.int64, copy=True)


def from_codes(codes: Sequence[int], as_str: bool) -> Union[str, list]:
    """Inverse of :func:`to_codes`, returns a str if ``as_str`` is True
    otherwise a list of ints."""
    if as_str:
        return "".join([chr(i) for i in codes])
    return [int(i) for i in codes]


def default_terminator(codes: np.ndarray) -> int:
    """Return the terminator used when the caller does not supply one.

    It is -1 if all the codes are non-negative (the usual case for
    characters), otherwise it is one less than the smallest code.
    """
    if codes.size == 0:
        return -1
    min_code = int(codes.min())
    return -1 if min_code >= 0 else min_code - 1


def str2bool(v):
    """Used in argparse.ArgumentParser.add_argument to indicate
    that a type is a bool type and user can enter

        - yes, true, t, y, 1, to represent True
        - no, false, f, n, 0, to represent False

    See https://stackoverflow.com/questions/15008758/parsing-boolean-values-with-argparse  # noqa
    """
    if isinstance(v, bool):
        return v
    if v.lower() in ("yes", "true", "t", "y", "1"):
        return True
    elif v.lower() in ("no", "false", "f", "n", "0"):
        return False
    else:
        raise argparse.ArgumentTypeError("Boolean value expected.")
