"""
Copyright (c) 2014, Project Bitmark
Copyright (c) 2020, The Decred developers
See LICENSE for details

testnet holds the public test network (v4) parameters, expressed as changes
to the main network's. The test network genesis has a lower difficulty.
"""

from bitmark import genesis
from bitmark.util.encode import ByteArray

from . import mainnet
from .chainparams import Base58Type, DNSSeed, NetworkID


Name = "testnet4"

MessageStart = bytes([0x0B, 0x11, 0x09, 0x07])

AlertKey = ByteArray(
    "0468770c9d451dd5d6d373ae6096d4ab0705c4ab66e55cc25c40788580039bd04b"
    "7672322b9bd26ce22a3ad95f490d7d188a905ce30246b2425eca8cc5102190d0"
)

DefaultPort = 19265
RPCPort = 19266

# ~uint256(0) >> 8
PowLimit = (1 << 248) - 1

DataDir = "testnet4"

DNSSeeds = [
    DNSSeed("bitmark.io", "us.bitmark.io"),
    DNSSeed("bitmark.co", "explorer.bitmark.co"),
]

Base58Prefixes = {
    Base58Type.PUBKEY_ADDRESS: bytes([130]),  # starts with u
    Base58Type.SCRIPT_ADDRESS: bytes([196]),
    # The launched network stores 258 in a single byte, which keeps 2.
    Base58Type.SECRET_KEY: bytes([258 & 0xFF]),
    Base58Type.EXT_PUBLIC_KEY: bytes([0x04, 0x35, 0x87, 0xCF]),
    Base58Type.EXT_SECRET_KEY: bytes([0x04, 0x35, 0x83, 0x94]),
}

# Genesis block. The output script and reward are the main network's.
GenesisMessage = "Testing Testnet"
GenesisTime = 1509891419
GenesisBits = 0x1E0FFFF0
GenesisNonce = 1291475
GenesisHash = "572f069d470350b8facc52a0866671d2d3071230e4df45d193394ae153fa891d"


def coinbaseTx():
    """
    The test network's genesis coinbase transaction, which the regression
    test network shares.

    Returns:
        MsgTx: The coinbase transaction.
    """
    return genesis.coinbaseTx(
        GenesisMessage, mainnet.GenesisPubKey, mainnet.GenesisReward
    )


def buildGenesis():
    """
    Build and verify the test network genesis block.

    Returns:
        MsgBlock: The genesis block.
    """
    block = genesis.buildGenesisBlock(
        coinbaseTx(),
        timestamp=GenesisTime,
        bits=GenesisBits,
        nonce=GenesisNonce,
        version=mainnet.GenesisVersion,
    )
    genesis.checkGenesis(Name, block, GenesisHash)
    return block


def buildParams():
    """
    Build the test network ChainParams from the main network's.

    Returns:
        ChainParams: The parameters.
    """
    block = buildGenesis()
    return mainnet.params.derive(
        Name=Name,
        NetworkID=NetworkID.TESTNET,
        MessageStart=MessageStart,
        AlertKey=AlertKey.bytes(),
        DefaultPort=DefaultPort,
        RPCPort=RPCPort,
        PowLimit=PowLimit,
        DataDir=DataDir,
        DNSSeeds=DNSSeeds,
        FixedSeeds=(),
        Base58Prefixes=Base58Prefixes,
        GenesisBlockBytes=block.serialize().bytes(),
        GenesisHash=block.hash().rhex(),
    )


params = buildParams()
