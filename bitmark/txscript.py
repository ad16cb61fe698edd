"""
Copyright (c) 2014, Project Bitmark
Copyright (c) 2019-2020, The Decred developers
See LICENSE for details

The subset of script construction needed to assemble coinbase and
pay-to-pubkey scripts.
"""

from bitmark import BitmarkError
from bitmark.util.encode import ByteArray


# fmt: off
OP_0         = 0x00
OP_DATA_1    = 0x01
OP_DATA_75   = 0x4B
OP_PUSHDATA1 = 0x4C
OP_PUSHDATA2 = 0x4D
OP_PUSHDATA4 = 0x4E
OP_1NEGATE   = 0x4F
OP_1         = 0x51
OP_16        = 0x60
OP_CHECKSIG  = 0xAC
# fmt: on

# Lengths of the two public key serializations.
PUBKEY_COMPRESSED_LEN = 33
PUBKEY_UNCOMPRESSED_LEN = 65


def scriptNumBytes(n):
    """
    scriptNumBytes returns a minimal little-endian sign-magnitude encoding
    for a signed integer, the way script numbers are stored.

    Args:
        n (int): The integer to encode.

    Returns:
        ByteArray: The encoded bytes.
    """
    if n == 0:
        return ByteArray()

    isNegative = n < 0
    if isNegative:
        n = -n

    result = ByteArray(length=9)
    i = 0
    while n > 0:
        result[i] = n & 0xFF
        n = n >> 8
        i += 1

    # A set high bit would read back as the sign, so an extra byte carries
    # the sign instead.
    if result[i - 1] & 0x80 != 0:
        extraByte = 0x00
        if isNegative:
            extraByte = 0x80
        result[i] = extraByte
        i += 1
    elif isNegative:
        result[i - 1] |= 0x80

    return result[:i]


def addData(data):
    """
    Prefaces data with the smallest data push opcode able to carry it. Unlike
    a minimal push, single-byte values are never collapsed to small integer
    opcodes, so the data always appears verbatim in the script.

    Args:
        data (bytes-like): Data to push.

    Returns:
        ByteArray: The data preceded with the push opcode.
    """
    dataLen = len(data) if data else 0
    b = ByteArray(b"")

    if dataLen < OP_PUSHDATA1:
        b += ByteArray(dataLen, length=1)
    elif dataLen <= 0xFF:
        b += OP_PUSHDATA1
        b += ByteArray(dataLen, length=1)
    elif dataLen <= 0xFFFF:
        b += OP_PUSHDATA2
        b += ByteArray(dataLen, length=2).littleEndian()
    else:
        b += OP_PUSHDATA4
        b += ByteArray(dataLen, length=4).littleEndian()
    if dataLen:
        b += data
    return b


def addInt(val):
    """
    addInt returns the passed integer in a form that can be pushed to the end
    of a script. Zero, -1 and 1 through 16 use their dedicated opcodes.

    Args:
        val (int): The integer to format.

    Returns:
        ByteArray: The formatted integer.
    """
    b = ByteArray(b"")

    if val == 0:
        b += ByteArray(OP_0, length=1)
        return b
    if val == -1 or (val >= 1 and val <= 16):
        b += OP_1 - 1 + val
        return b
    return addData(scriptNumBytes(val))


def isStrictPubKeyEncoding(pubKey):
    """
    Whether the bytes are a serialized public key in compressed or
    uncompressed form.

    Args:
        pubKey (bytes-like): The public key.

    Returns:
        bool: True if the key is in a recognized format.
    """
    if len(pubKey) == PUBKEY_COMPRESSED_LEN and pubKey[0] in (0x02, 0x03):
        return True
    if len(pubKey) == PUBKEY_UNCOMPRESSED_LEN and pubKey[0] == 0x04:
        return True
    return False


def payToPubKeyScript(serializedPubKey):
    """
    payToPubKeyScript creates a new script to pay a transaction output to a
    public key.

    Args:
        serializedPubKey (ByteArray): The pubkey bytes to pay to.

    Returns:
        ByteArray: The script that pays to the pubkey.
    """
    if not isStrictPubKeyEncoding(serializedPubKey):
        raise BitmarkError("serialized pubkey has incorrect encoding")
    script = ByteArray(b"")
    script += addData(serializedPubKey)
    script += OP_CHECKSIG
    return script


def coinbaseSigScript(bits, extraNonce, message):
    """
    coinbaseSigScript builds the signature script of a coinbase input. There
    is no previous output to unlock, so the script only carries the difficulty
    bits, an extra nonce and arbitrary message bytes.

    Args:
        bits (int): The difficulty bits, pushed as a script number.
        extraNonce (int): A single-byte value, pushed as raw data.
        message (bytes-like): The message to embed.

    Returns:
        ByteArray: The signature script.
    """
    if extraNonce < 0 or extraNonce > 0xFF:
        raise BitmarkError(f"extra nonce must fit in one byte, got {extraNonce}")
    script = addInt(bits)
    script += addData(ByteArray(extraNonce, length=1))
    script += addData(message)
    return script
