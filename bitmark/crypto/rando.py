"""
Copyright (c) 2014, Project Bitmark
Copyright (c) 2019-2020, The Decred developers
See LICENSE for details
"""

import os

from bitmark import BitmarkError


def randInt(maxVal):
    """
    Generate a uniformly distributed random integer in [0, maxVal) from the
    operating system's entropy source. Values that would bias the result
    towards the low end of the range are rejected and redrawn.

    Args:
        maxVal (int): The exclusive upper bound. Must be positive.

    Returns:
        int: The random integer.

    Raises:
        BitmarkError if maxVal is not positive.
    """
    rangeBytes = 8
    span = 1 << (rangeBytes * 8)
    if maxVal <= 0 or maxVal > span:
        raise BitmarkError(f"invalid random range {maxVal}")
    # Largest multiple of maxVal that fits in the drawn range.
    limit = span - (span % maxVal)
    while True:
        v = int.from_bytes(os.urandom(rangeBytes), byteorder="big")
        if v < limit:
            return v % maxVal
