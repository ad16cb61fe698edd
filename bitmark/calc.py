"""
Copyright (c) 2014, Project Bitmark
Copyright (c) 2019-2020, The Decred developers
See LICENSE for details

Height-gated consensus policy. Every function here is consensus critical:
all implementations of the protocol must return identical values.
"""

# The CEM (coin emission modulation) looks back over a window of days to find
# the reference peak hashrate. The second fork shortens the window so the
# maximum emission rate can be resumed sooner.
CEM_WINDOW_DAYS = 365
CEM_WINDOW_DAYS_FORK2 = 90

# Percentage of the nominal epoch block reward the CEM may scale down.
CEM_MAX_REDUCTION = 50
CEM_MAX_REDUCTION_FORK2 = 80


def onFork2(forkHeight2, height):
    """
    Whether the second fork's rules are active at the block height.

    Args:
        forkHeight2 (int): The activation height of the second fork.
        height (int): The block height.

    Returns:
        bool: True at and above the activation height.
    """
    return height >= forkHeight2


def cemWindowLength(forkHeight2, height):
    """
    The CEM look-back window, in days, at the block height.

    Args:
        forkHeight2 (int): The activation height of the second fork.
        height (int): The block height.

    Returns:
        int: The window length in days.
    """
    return CEM_WINDOW_DAYS_FORK2 if onFork2(forkHeight2, height) else CEM_WINDOW_DAYS


def cemMaxRewardReduction(forkHeight2, height):
    """
    The percentage of the nominal epoch reward the CEM is permitted to scale
    down at the block height.

    Args:
        forkHeight2 (int): The activation height of the second fork.
        height (int): The block height.

    Returns:
        int: The percentage.
    """
    if onFork2(forkHeight2, height):
        return CEM_MAX_REDUCTION_FORK2
    return CEM_MAX_REDUCTION


def subsidyInterimInterval(halvingInterval):
    """
    The interim reward reduction happens half way through each halving
    interval. Odd intervals truncate.

    Args:
        halvingInterval (int): The subsidy halving interval, in blocks.

    Returns:
        int: The interim interval, in blocks.
    """
    return halvingInterval // 2


def compactToBig(compact):
    """
    compactToBig converts a compact representation of a whole number N to a
    big integer. The representation is similar to IEEE754 floating point
    numbers.

    Like IEEE754 floating point, there are three basic components: the sign,
    the exponent, and the mantissa. They are broken out as follows:

        * the most significant 8 bits represent the unsigned base 256 exponent
        * bit 23 (the 24th bit) represents the sign bit
        * the least significant 23 bits represent the mantissa

        -------------------------------------------------
        |   Exponent     |    Sign    |    Mantissa     |
        -------------------------------------------------
        | 8 bits [31-24] | 1 bit [23] | 23 bits [22-00] |
        -------------------------------------------------

    The formula to calculate N is:
        N = (-1^sign) * mantissa * 256^(exponent-3)

    Args:
        compact (int): The compact bits.

    Returns:
        int: The decoded number.
    """
    mantissa = compact & 0x007FFFFF
    isNegative = compact & 0x00800000 != 0
    exponent = compact >> 24

    if exponent <= 3:
        mantissa >>= 8 * (3 - exponent)
        bn = mantissa
    else:
        bn = mantissa << (8 * (exponent - 3))

    return -bn if isNegative else bn
