"""
Copyright (c) 2014, Project Bitmark
Copyright (c) 2019-2020, The Decred developers
See LICENSE for details

Base58check encoding of addresses and keys, using the prefix table of a
network's ChainParams.
"""

from base58 import b58decode, b58encode

from bitmark import BitmarkError
from bitmark.crypto import crypto
from bitmark.nets.chainparams import Base58Type, Base58Types
from bitmark.util.encode import ByteArray


RIPEMD160_SIZE = 20

CHECKSUM_SIZE = 4


def b58CheckEncode(prefix, payload):
    """
    Encode the payload with its prefix and a trailing checksum.

    Args:
        prefix (bytes-like): The prefix.
        payload (bytes-like): The payload.

    Returns:
        str: The base58check encoded string.
    """
    b = ByteArray(prefix) + payload
    b += crypto.checksum(b.bytes())
    return b58encode(b.bytes()).decode()


def b58CheckDecode(s, prefixLen):
    """
    Decode the base58check encoded string, splitting off the prefix. An
    exception is raised if the checksum is invalid or missing.

    Args:
        s (str): The base58check encoded string.
        prefixLen (int): The length of the leading prefix.

    Returns:
        bytes: The prefix.
        ByteArray: Decoded bytes minus the prefix and trailing checksum.
    """
    try:
        decoded = b58decode(s)
    except ValueError as e:
        raise BitmarkError(f"invalid base58 string: {e}")
    if len(decoded) < prefixLen + CHECKSUM_SIZE:
        raise BitmarkError("decoded lacking prefix/checksum")
    includedCksum = decoded[len(decoded) - CHECKSUM_SIZE :]
    computedCksum = crypto.checksum(decoded[: len(decoded) - CHECKSUM_SIZE])
    if includedCksum != computedCksum:
        raise BitmarkError("checksum error")
    prefix = decoded[:prefixLen]
    payload = ByteArray(decoded[prefixLen : len(decoded) - CHECKSUM_SIZE])
    return prefix, payload


def encodeAddress(netParams, kind, payload):
    """
    Encode a payload as a base58check string of the given kind for the
    network.

    Args:
        netParams (ChainParams): The network parameters.
        kind (int): A Base58Type.
        payload (bytes-like): The hash, key or serialized extended key.

    Returns:
        str: The encoded string.
    """
    return b58CheckEncode(netParams.base58Prefix(kind), payload)


def decodeAddress(netParams, s):
    """
    Decode a base58check string encoded for the network, identifying its kind
    from the prefix. Prefixes are tried longest first.

    Args:
        netParams (ChainParams): The network parameters.
        s (str): The encoded string.

    Returns:
        int: The Base58Type.
        ByteArray: The payload.
    """
    kinds = sorted(Base58Types, key=lambda k: -len(netParams.base58Prefix(k)))
    for kind in kinds:
        prefix = netParams.base58Prefix(kind)
        try:
            decodedPrefix, payload = b58CheckDecode(s, len(prefix))
        except BitmarkError:
            continue
        if decodedPrefix == prefix:
            return kind, payload
    raise BitmarkError(f"{s} is not a {netParams.Name} encoded string")


def encodePubKeyHashAddress(netParams, pkHash):
    """
    A pay-to-pubkey-hash address for the network.

    Args:
        netParams (ChainParams): The network parameters.
        pkHash (bytes-like): The RIPEMD-160 hash of the SHA-256 of a pubkey.

    Returns:
        str: The address.
    """
    if len(pkHash) != RIPEMD160_SIZE:
        raise BitmarkError(f"pubkey hash must be {RIPEMD160_SIZE} bytes, got {len(pkHash)}")
    return encodeAddress(netParams, Base58Type.PUBKEY_ADDRESS, pkHash)
