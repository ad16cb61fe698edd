"""
Copyright (c) 2014, Project Bitmark
Copyright (c) 2019-2020, The Decred developers
See LICENSE for details
"""

import time

from bitmark.crypto import rando
from bitmark.wire import netaddress, wire

from .chainparams import SeedAddress


ONE_WEEK = 7 * 24 * 60 * 60


def fixedSeeds(rawSeeds, port, now=None, randFunc=rando.randInt):
    """
    Convert the compiled-in seed addresses into peer address records. A node
    will only connect to one or two seed nodes, because once it connects it
    gets a pile of addresses with newer timestamps. Seed nodes are given a
    random last-seen time between one and two weeks ago.

    Args:
        rawSeeds (list(int)): The IPv4 addresses as packed native uint32.
        port (int): The network's default port.
        now (int): Optional. The current UNIX time. Default: the wall clock.
        randFunc (func(int) -> int): Optional. Returns a uniform integer in
            [0, n).

    Returns:
        tuple(SeedAddress): The seed addresses, in input order.
    """
    if now is None:
        now = int(time.time())
    return tuple(
        SeedAddress(
            ip=netaddress.ipFromPackedInt(raw).bytes(),
            port=port,
            services=wire.SFNodeNetwork,
            timestamp=now - randFunc(ONE_WEEK) - ONE_WEEK,
        )
        for raw in rawSeeds
    )
