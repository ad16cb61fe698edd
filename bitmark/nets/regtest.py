"""
Copyright (c) 2014, Project Bitmark
Copyright (c) 2020, The Decred developers
See LICENSE for details

regtest holds the regression test network parameters, expressed as changes
to the test network's. It is intended for private networks only and has
minimal difficulty so that blocks can be found instantly.
"""

from bitmark import genesis

from . import testnet
from .chainparams import NetworkID


Name = "regtest"

MessageStart = bytes([0xFA, 0xBF, 0xB5, 0xDA])

DefaultPort = 18444

SubsidyHalvingInterval = 150

# ~uint256(0) >> 1
PowLimit = (1 << 255) - 1

DataDir = "regtest"

# Genesis block. The coinbase transaction is the test network's.
GenesisTime = 1405274400
GenesisBits = 0x207FFFFF
GenesisNonce = 713058
GenesisHash = "168329a349fc93768bfb02e536bbe1e1847d77a65764564552122fa9268d8841"


def buildGenesis():
    """
    Build and verify the regression test network genesis block.

    Returns:
        MsgBlock: The genesis block.
    """
    block = genesis.buildGenesisBlock(
        testnet.coinbaseTx(),
        timestamp=GenesisTime,
        bits=GenesisBits,
        nonce=GenesisNonce,
    )
    genesis.checkGenesis(Name, block, GenesisHash)
    return block


def buildParams():
    """
    Build the regression test network ChainParams from the test network's.
    Regtest has no DNS seeds, mines blocks on demand and does not require an
    RPC password.

    Returns:
        ChainParams: The parameters.
    """
    block = buildGenesis()
    return testnet.params.derive(
        Name=Name,
        NetworkID=NetworkID.REGTEST,
        MessageStart=MessageStart,
        DefaultPort=DefaultPort,
        SubsidyHalvingInterval=SubsidyHalvingInterval,
        PowLimit=PowLimit,
        DataDir=DataDir,
        DNSSeeds=(),
        MineBlocksOnDemand=True,
        RequireRPCPassword=False,
        GenesisBlockBytes=block.serialize().bytes(),
        GenesisHash=block.hash().rhex(),
    )


params = buildParams()
