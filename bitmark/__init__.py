"""
Copyright (c) 2014, Project Bitmark
Copyright (c) 2019-2020, the Decred developers
See LICENSE for details
"""


class BitmarkError(Exception):
    pass


class ChainParamsIntegrityError(BitmarkError):
    """
    ChainParamsIntegrityError signals that the hard-coded network constants
    are not the ones the network launched with, or that an unknown network
    was requested. The process must not continue after one is raised.
    """

    pass
