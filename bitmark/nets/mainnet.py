"""
Copyright (c) 2014, Project Bitmark
Copyright (c) 2020, The Decred developers
See LICENSE for details

mainnet holds the main network parameters. The genesis block is built and
verified when the module is imported.
"""

from bitmark import genesis
from bitmark.util.encode import ByteArray
from bitmark.wire import msgtx

from . import seeds
from .chainparams import Base58Type, ChainParams, DNSSeed, NetworkID


Name = "mainnet"

# The message start string is designed to be unlikely to occur in normal data.
# The characters are rarely used upper ASCII, not valid as UTF-8, and produce
# a large 4-byte int at any alignment.
MessageStart = bytes([0xF9, 0xBE, 0xB4, 0xD9])

# Raw pub key bytes for the broadcast alert signing key.
AlertKey = ByteArray(
    "04bf5a75ff0f823840ef512b08add20bb4275ff6e097f2830ad28645e28cb5ea4d"
    "c2cfd0972b94019ad46f331b45ef4ba679f2e6c87fd19c864365fadb4f8d2269"
)

DefaultPort = 9265
RPCPort = 9266

# The easiest allowed target, ~uint256(0) >> 32.
PowLimit = (1 << 224) - 1

SubsidyHalvingInterval = 788000

StrictChainID = False
AuxpowChainID = 0x005B

ForkHeight2 = 0

DNSSeeds = [DNSSeed("bitmark.co", "seed.bitmark.co")]

# Packed IPv4 addresses of the seed nodes.
RawSeeds = [0xAC1F1F0A, 0xAE240982, 0x253B1359]

Base58Prefixes = {
    Base58Type.PUBKEY_ADDRESS: bytes([85]),  # starts with b
    Base58Type.SCRIPT_ADDRESS: bytes([5]),
    Base58Type.SECRET_KEY: bytes([213]),
    Base58Type.EXT_PUBLIC_KEY: bytes([0x04, 0x88, 0xB2, 0x1E]),
    Base58Type.EXT_SECRET_KEY: bytes([0x04, 0x88, 0xAD, 0xE4]),
}

# Genesis block
GenesisMessage = "13/July/2014, with memory of the past, we look to the future. TDR"
GenesisPubKey = ByteArray(
    "04f88a76429dad346a10ecb5d36fcbf50bc2e009870e20c1a6df8db743e0b994af"
    "c1f91e079be8acc380b0ee7765519906e3d781519e9db48259f64160104939d8"
)
GenesisReward = 20 * msgtx.COIN
GenesisVersion = 1
GenesisTime = 1405274442
GenesisBits = 0x1D00FFFF
GenesisNonce = 14385103
GenesisHash = "c1fb746e87e89ae75bdec2ef0639a1f6786744639ce3d0ece1dcf979b79137cb"
GenesisMerkleRoot = "d4715adf41222fae3d4bf41af30c675bc27228233d0f3cfd4ae0ae1d3e760ba8"


def buildGenesis():
    """
    Build and verify the main network genesis block.

    Returns:
        MsgBlock: The genesis block.
    """
    block = genesis.buildGenesisBlock(
        genesis.coinbaseTx(GenesisMessage, GenesisPubKey, GenesisReward),
        timestamp=GenesisTime,
        bits=GenesisBits,
        nonce=GenesisNonce,
        version=GenesisVersion,
    )
    genesis.checkGenesis(Name, block, GenesisHash, GenesisMerkleRoot)
    return block


def buildParams():
    """
    Build the main network ChainParams.

    Returns:
        ChainParams: The parameters.
    """
    block = buildGenesis()
    return ChainParams(
        Name=Name,
        NetworkID=NetworkID.MAIN,
        MessageStart=MessageStart,
        AlertKey=AlertKey.bytes(),
        DefaultPort=DefaultPort,
        RPCPort=RPCPort,
        PowLimit=PowLimit,
        SubsidyHalvingInterval=SubsidyHalvingInterval,
        DataDir="",
        DNSSeeds=DNSSeeds,
        FixedSeeds=seeds.fixedSeeds(RawSeeds, DefaultPort),
        Base58Prefixes=Base58Prefixes,
        StrictChainID=StrictChainID,
        AuxpowChainID=AuxpowChainID,
        EquihashN=0,
        EquihashK=0,
        MineBlocksOnDemand=False,
        RequireRPCPassword=True,
        ForkHeight2=ForkHeight2,
        GenesisBlockBytes=block.serialize().bytes(),
        GenesisHash=block.hash().rhex(),
    )


params = buildParams()
