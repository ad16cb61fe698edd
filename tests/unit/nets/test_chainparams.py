"""
Copyright (c) 2014, Project Bitmark
Copyright (c) 2019-2020, the Decred developers
See LICENSE for details
"""

import pytest

from bitmark import BitmarkError, calc
from bitmark.nets import mainnet, regtest, testnet
from bitmark.nets.chainparams import FIELDS, Base58Type, ChainParams, DNSSeed, NetworkID
from bitmark.util.encode import ByteArray


ALL_PARAMS = [mainnet.params, testnet.params, regtest.params]


def test_mainnet_values():
    p = mainnet.params
    assert p.Name == "mainnet"
    assert p.NetworkID == NetworkID.MAIN
    assert p.MessageStart == bytes.fromhex("f9beb4d9")
    assert p.AlertKey.hex().startswith("04bf5a75ff0f8238")
    assert len(p.AlertKey) == 65
    assert p.DefaultPort == 9265
    assert p.RPCPort == 9266
    assert p.PowLimit == (1 << 224) - 1
    assert p.SubsidyHalvingInterval == 788000
    assert p.SubsidyInterimInterval == 394000
    assert p.DataDir == ""
    assert not p.StrictChainID
    assert p.AuxpowChainID == 0x005B
    assert p.EquihashN == 0
    assert p.EquihashK == 0
    assert not p.MineBlocksOnDemand
    assert p.RequireRPCPassword
    assert p.DNSSeeds == (DNSSeed("bitmark.co", "seed.bitmark.co"),)
    assert len(p.FixedSeeds) == 3
    assert p.base58Prefix(Base58Type.PUBKEY_ADDRESS) == bytes([85])
    assert p.base58Prefix(Base58Type.SCRIPT_ADDRESS) == bytes([5])
    assert p.base58Prefix(Base58Type.SECRET_KEY) == bytes([213])
    assert p.base58Prefix(Base58Type.EXT_PUBLIC_KEY) == bytes.fromhex("0488b21e")
    assert p.base58Prefix(Base58Type.EXT_SECRET_KEY) == bytes.fromhex("0488ade4")


def test_testnet_values():
    p = testnet.params
    assert p.Name == "testnet4"
    assert p.NetworkID == NetworkID.TESTNET
    assert p.MessageStart == bytes.fromhex("0b110907")
    assert p.AlertKey.hex().startswith("0468770c9d451dd5")
    assert p.DefaultPort == 19265
    assert p.RPCPort == 19266
    assert p.PowLimit == (1 << 248) - 1
    assert p.SubsidyHalvingInterval == 788000
    assert p.DataDir == "testnet4"
    assert p.AuxpowChainID == 0x005B
    assert not p.MineBlocksOnDemand
    assert p.RequireRPCPassword
    assert p.FixedSeeds == ()
    assert p.DNSSeeds == (
        DNSSeed("bitmark.io", "us.bitmark.io"),
        DNSSeed("bitmark.co", "explorer.bitmark.co"),
    )
    assert p.base58Prefix(Base58Type.PUBKEY_ADDRESS) == bytes([130])
    assert p.base58Prefix(Base58Type.SCRIPT_ADDRESS) == bytes([196])
    assert p.base58Prefix(Base58Type.SECRET_KEY) == bytes([2])
    assert p.base58Prefix(Base58Type.EXT_PUBLIC_KEY) == bytes.fromhex("043587cf")
    assert p.base58Prefix(Base58Type.EXT_SECRET_KEY) == bytes.fromhex("04358394")


def test_regtest_values():
    p = regtest.params
    assert p.Name == "regtest"
    assert p.NetworkID == NetworkID.REGTEST
    assert p.MessageStart == bytes.fromhex("fabfb5da")
    # Inherited from the test network.
    assert p.AlertKey == testnet.params.AlertKey
    assert p.RPCPort == 19266
    assert p.Base58Prefixes == testnet.params.Base58Prefixes
    assert p.DefaultPort == 18444
    assert p.PowLimit == (1 << 255) - 1
    assert p.SubsidyHalvingInterval == 150
    assert p.SubsidyInterimInterval == 75
    assert p.DataDir == "regtest"
    assert p.DNSSeeds == ()
    assert p.FixedSeeds == ()
    assert p.MineBlocksOnDemand
    assert not p.RequireRPCPassword


def test_require_rpc_password():
    assert mainnet.params.RequireRPCPassword is True
    assert testnet.params.RequireRPCPassword is True
    assert regtest.params.RequireRPCPassword is False


@pytest.mark.parametrize("p", ALL_PARAMS)
def test_interim_interval(p):
    assert p.SubsidyInterimInterval == p.SubsidyHalvingInterval // 2


def test_interim_interval_truncates():
    odd = regtest.params.derive(SubsidyHalvingInterval=151)
    assert odd.SubsidyInterimInterval == 75


@pytest.mark.parametrize("p", ALL_PARAMS)
def test_genesis_bits_within_pow_limit(p):
    block = p.genesisBlock()
    assert 0 < calc.compactToBig(block.header.bits) <= p.PowLimit


@pytest.mark.parametrize("p", ALL_PARAMS)
def test_fork2_policy(p):
    # None of the launched networks schedule the second fork after genesis.
    assert p.ForkHeight2 == 0
    assert p.onFork2(0)
    assert p.cemWindowLength(0) == 90
    assert p.cemMaxRewardReduction(0) == 80


def test_fork2_policy_boundary():
    p = mainnet.params.derive(ForkHeight2=1000)
    for height in (0, 1, 500, 999):
        assert not p.onFork2(height)
        assert p.cemWindowLength(height) == 365
        assert p.cemMaxRewardReduction(height) == 50
    for height in (1000, 1001, 10 ** 9):
        assert p.onFork2(height)
        assert p.cemWindowLength(height) == 90
        assert p.cemMaxRewardReduction(height) == 80


def test_read_only():
    p = mainnet.params
    with pytest.raises(BitmarkError):
        p.DefaultPort = 1
    with pytest.raises(BitmarkError):
        p.Anything = 1
    with pytest.raises(BitmarkError):
        del p.Name
    with pytest.raises(TypeError):
        p.Base58Prefixes[Base58Type.PUBKEY_ADDRESS] = bytes([0])
    with pytest.raises(AttributeError):
        p.DNSSeeds.append(DNSSeed("x", "y"))
    assert p.DefaultPort == 9265


def test_derive_independent():
    derived = mainnet.params.derive(
        DefaultPort=1,
        Base58Prefixes={**mainnet.params.Base58Prefixes, Base58Type.SECRET_KEY: b"\x01"},
    )
    assert derived.DefaultPort == 1
    assert derived.base58Prefix(Base58Type.SECRET_KEY) == b"\x01"
    assert mainnet.params.DefaultPort == 9265
    assert mainnet.params.base58Prefix(Base58Type.SECRET_KEY) == bytes([213])
    assert derived.GenesisHash == mainnet.params.GenesisHash


def test_construction_checks():
    fields = mainnet.params.fields()
    assert set(fields) == set(FIELDS)

    missing = dict(fields)
    del missing["RPCPort"]
    with pytest.raises(BitmarkError):
        ChainParams(**missing)

    with pytest.raises(BitmarkError):
        ChainParams(Extra=1, **fields)

    with pytest.raises(BitmarkError):
        mainnet.params.derive(MessageStart=b"\x00\x01\x02")

    prefixes = dict(fields["Base58Prefixes"])
    del prefixes[Base58Type.EXT_SECRET_KEY]
    with pytest.raises(BitmarkError):
        mainnet.params.derive(Base58Prefixes=prefixes)

    with pytest.raises(BitmarkError):
        mainnet.params.base58Prefix(99)

    seed = mainnet.params.FixedSeeds[0]
    with pytest.raises(BitmarkError):
        mainnet.params.derive(FixedSeeds=[seed.netAddress()])
    # Seed IPs given as mutable buffers are stored as bytes.
    derived = mainnet.params.derive(FixedSeeds=[seed._replace(ip=ByteArray(seed.ip))])
    assert isinstance(derived.FixedSeeds[0].ip, bytes)
    assert derived.FixedSeeds == mainnet.params.FixedSeeds
