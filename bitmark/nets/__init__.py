"""
Copyright (c) 2014, Project Bitmark
Copyright (c) 2020, The Decred developers
See LICENSE for details.

The three networks' parameters are built when this package is imported, and
one of them is active at a time. Components that can take the parameters as
an argument should. The process-wide active set is for collaborators that
can't.

select should be called once, at startup, before any thread reads the active
parameters. The parameter records themselves are never modified and can be
read from any thread.
"""

import threading

from bitmark import BitmarkError, ChainParamsIntegrityError
from bitmark.util import helpers

from . import mainnet, regtest, testnet
from .chainparams import NetworkID


log = helpers.getLogger("NETS")

the_nets = {n.Name: n.params for n in (mainnet, testnet, regtest)}
the_nets["testnet"] = the_nets[testnet.Name]
the_nets["regnet"] = the_nets[regtest.Name]

_byID = {
    NetworkID.MAIN: mainnet.params,
    NetworkID.TESTNET: testnet.params,
    NetworkID.REGTEST: regtest.params,
}

_lock = threading.Lock()
_current = mainnet.params


def parse(name):
    """
    Get the network parameters based on the network name.

    Args:
        name (str): The network name.

    Returns:
        ChainParams: The network parameters.
    """
    try:
        return the_nets[name]
    except KeyError:
        raise BitmarkError(f"unrecognized network name {name}")


def byID(netID):
    """
    Get the network parameters for a NetworkID.

    Args:
        netID (int): The NetworkID.

    Returns:
        ChainParams: The network parameters.

    Raises:
        ChainParamsIntegrityError: netID is not a NetworkID.
    """
    try:
        return _byID[netID]
    except (KeyError, TypeError):
        raise ChainParamsIntegrityError(f"unimplemented network {netID!r}")


def select(netID):
    """
    Make the network identified by netID the active network. The other
    networks' parameters are not affected.

    Args:
        netID (int): The NetworkID.

    Raises:
        ChainParamsIntegrityError: netID is not a NetworkID. The identifiers
            are a closed set, so this is a programming error.
    """
    global _current
    netParams = byID(netID)
    with _lock:
        _current = netParams
    log.info(f"selected network {netParams.Name}")


def params():
    """
    The active network parameters.

    Returns:
        ChainParams: The network parameters.
    """
    return _current


def selectFromFlags(useTestnet, useRegtest):
    """
    Select the active network from the mutually exclusive testnet and regtest
    flags. Neither flag selects the main network.

    Args:
        useTestnet (bool): Whether the test network was requested.
        useRegtest (bool): Whether the regression test network was requested.

    Returns:
        bool: False if both flags are set, in which case nothing is selected.
    """
    if useTestnet and useRegtest:
        log.error("testnet and regtest can't be used together")
        return False
    if useRegtest:
        select(NetworkID.REGTEST)
    elif useTestnet:
        select(NetworkID.TESTNET)
    else:
        select(NetworkID.MAIN)
    return True


def isTestNet():
    """
    Whether the active network is the test network. This is deliberately False
    for the regression test network.
    """
    return params().NetworkID == NetworkID.TESTNET


def isRegTest():
    """
    Whether the active network is the regression test network.
    """
    return params().NetworkID == NetworkID.REGTEST
