"""
Copyright (c) 2014, Project Bitmark
Copyright (c) 2019-2020, The Decred developers
See LICENSE for details

Hashing functions for block and transaction identifiers.
"""

import hashlib

from bitmark.util.encode import ByteArray


HASH_SIZE = 32


def sha256(b):
    """
    A single SHA-256 digest.

    Args:
        b (byte-like): The bytes to hash.

    Returns:
        bytes: The 32-byte digest.
    """
    return hashlib.sha256(b).digest()


def hashH(b):
    """
    The double SHA-256 hash as a ByteArray, in internal (not displayed) byte
    order. Block headers and transactions are identified by this hash.

    Args:
        b (byte-like): The thing to hash.

    Returns:
        ByteArray: The hash.
    """
    return ByteArray(sha256(sha256(b)))


def checksum(b):
    """
    A base58check checksum.

    Args:
        b (byte-like): Bytes to obtain a checksum for.

    Returns:
        bytes: A 4-byte checksum.
    """
    return sha256(sha256(b))[:4]
