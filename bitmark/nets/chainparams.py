"""
Copyright (c) 2014, Project Bitmark
Copyright (c) 2020, The Decred developers
See LICENSE for details

ChainParams is the frozen record of one network's constants. The networks
are built from literals in the mainnet, testnet and regtest modules. Testnet
and regtest start from another network's record and override what differs,
using derive.
"""

from collections import namedtuple
from types import MappingProxyType

from bitmark import BitmarkError
from bitmark import calc
from bitmark.util.encode import ByteArray
from bitmark.wire import msgblock, netaddress, wire


class NetworkID:
    """
    The identifiers of the three networks.
    """

    MAIN = 0
    TESTNET = 1
    REGTEST = 2


class Base58Type:
    """
    The kinds of base58 encoded strings, each with its own prefix.
    """

    PUBKEY_ADDRESS = 0
    SCRIPT_ADDRESS = 1
    SECRET_KEY = 2
    EXT_PUBLIC_KEY = 3
    EXT_SECRET_KEY = 4


Base58Types = (
    Base58Type.PUBKEY_ADDRESS,
    Base58Type.SCRIPT_ADDRESS,
    Base58Type.SECRET_KEY,
    Base58Type.EXT_PUBLIC_KEY,
    Base58Type.EXT_SECRET_KEY,
)


# A DNS seeder. Looking up the host returns peer addresses.
DNSSeed = namedtuple("DNSSeed", "name host")


class SeedAddress(namedtuple("SeedAddress", "ip port services timestamp")):
    """
    A compiled-in seed peer. The IP is stored as bytes so the record, like
    the ChainParams holding it, can't be modified. Use netAddress for a
    wire-ready NetAddress.
    """

    __slots__ = ()

    def netAddress(self):
        """
        A new NetAddress for the seed. Changes to it don't reach the record.

        Returns:
            NetAddress: The peer address.
        """
        return netaddress.NetAddress(
            ip=self.ip, port=self.port, services=self.services, stamp=self.timestamp
        )

    def ipString(self):
        return self.netAddress().ipString()


FIELDS = (
    "Name",
    "NetworkID",
    "MessageStart",
    "AlertKey",
    "DefaultPort",
    "RPCPort",
    "PowLimit",
    "SubsidyHalvingInterval",
    "DataDir",
    "DNSSeeds",
    "FixedSeeds",
    "Base58Prefixes",
    "StrictChainID",
    "AuxpowChainID",
    "EquihashN",
    "EquihashK",
    "MineBlocksOnDemand",
    "RequireRPCPassword",
    "ForkHeight2",
    "GenesisBlockBytes",
    "GenesisHash",
)


def freeze(name, v):
    """
    Convert a field value to a form that can't be modified in place.
    """
    if name in ("MessageStart", "AlertKey", "GenesisBlockBytes"):
        return bytes(v)
    if name == "DNSSeeds":
        return tuple(v)
    if name == "FixedSeeds":
        return tuple(s._replace(ip=ByteArray(s.ip).bytes()) for s in v)
    if name == "Base58Prefixes":
        return MappingProxyType({k: bytes(p) for k, p in v.items()})
    return v


class ChainParams:
    """
    ChainParams holds the constants of one network instance. Every field is
    written once, in the constructor. Attempts to set or delete an attribute
    afterwards raise a BitmarkError, so the record can be shared by any
    number of readers.
    """

    def __init__(self, **fields):
        missing = [k for k in FIELDS if k not in fields]
        if missing:
            raise BitmarkError(f"missing chain parameters: {', '.join(missing)}")
        unknown = [k for k in fields if k not in FIELDS]
        if unknown:
            raise BitmarkError(f"unknown chain parameters: {', '.join(unknown)}")
        if len(fields["MessageStart"]) != wire.MessageStartSize:
            raise BitmarkError(
                f"message start must be {wire.MessageStartSize} bytes, got {len(fields['MessageStart'])}"
            )
        badSeeds = [s for s in fields["FixedSeeds"] if not isinstance(s, SeedAddress)]
        if badSeeds:
            raise BitmarkError(f"fixed seeds must be SeedAddress records, got {badSeeds!r}")
        missingPrefixes = [t for t in Base58Types if t not in fields["Base58Prefixes"]]
        if missingPrefixes:
            raise BitmarkError(f"missing base58 prefixes for types {missingPrefixes}")
        for k in FIELDS:
            object.__setattr__(self, k, freeze(k, fields[k]))

    def __setattr__(self, k, v):
        raise BitmarkError(f"cannot set {k}: chain parameters are read-only")

    def __delattr__(self, k):
        raise BitmarkError(f"cannot delete {k}: chain parameters are read-only")

    def __repr__(self):
        return f"ChainParams({self.Name})"

    def fields(self):
        """
        The record's fields as a new dict.

        Returns:
            dict: Field name to value.
        """
        return {k: getattr(self, k) for k in FIELDS}

    def derive(self, **overrides):
        """
        Build a new, independent record that starts from this one's values
        and replaces the provided fields. This record is not modified.

        Returns:
            ChainParams: The derived record.
        """
        fields = self.fields()
        fields["Base58Prefixes"] = dict(fields["Base58Prefixes"])
        fields.update(overrides)
        return ChainParams(**fields)

    def genesisBlock(self):
        """
        A copy of the genesis block. Each call decodes a fresh block, so
        callers are free to modify the result.

        Returns:
            MsgBlock: The genesis block.
        """
        return msgblock.MsgBlock.deserialize(self.GenesisBlockBytes)

    def base58Prefix(self, kind):
        """
        The prefix prepended to a base58 encoded string of the given kind.

        Args:
            kind (int): A Base58Type.

        Returns:
            bytes: The prefix.
        """
        try:
            return self.Base58Prefixes[kind]
        except KeyError:
            raise BitmarkError(f"unknown base58 type {kind}")

    @property
    def SubsidyInterimInterval(self):
        return calc.subsidyInterimInterval(self.SubsidyHalvingInterval)

    def onFork2(self, height):
        return calc.onFork2(self.ForkHeight2, height)

    def cemWindowLength(self, height):
        return calc.cemWindowLength(self.ForkHeight2, height)

    def cemMaxRewardReduction(self, height):
        return calc.cemMaxRewardReduction(self.ForkHeight2, height)
