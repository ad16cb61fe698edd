"""
Copyright (c) 2014, Project Bitmark
Copyright (c) 2019-2020, The Decred developers
See LICENSE for details

Constants and common routines of the wire encoding.
"""

from bitmark import BitmarkError
from bitmark.util.encode import ByteArray


# fmt: off
MaxInt32  = (1 << 31) - 1
MinInt32  = -1 << 31
MaxInt64  = (1 << 63) - 1
MaxUint8  = (1 << 8) - 1
MaxUint16 = (1 << 16) - 1
MaxUint32 = (1 << 32) - 1
MaxUint64 = (1 << 64) - 1
# fmt: on

# MessageStartSize is the length of the magic bytes prefixing every wire
# message.
MessageStartSize = 4

# MaxMessagePayload is the maximum bytes a message can be regardless of other
# individual limits imposed by messages themselves.
MaxMessagePayload = 1024 * 1024 * 32  # 32MB

# ProtocolVersion is the protocol version these codecs implement.
ProtocolVersion = 70002

# NetAddressTimeVersion is the protocol version which added the
# timestamp field (pver >= NetAddressTimeVersion).
NetAddressTimeVersion = 31402

# SFNodeNetwork is a flag used to indicate a peer is a full node.
SFNodeNetwork = 1 << 0


def varIntSerializeSize(i):
    """
    The number of bytes writeVarInt needs to encode i.
    """
    if i < 0xFD:
        return 1

    # Discriminant 1 byte plus 2 bytes for the uint16.
    if i <= MaxUint16:
        return 3

    # Discriminant 1 byte plus 4 bytes for the uint32.
    if i <= MaxUint32:
        return 5

    # Discriminant 1 byte plus 8 bytes for the uint64.
    return 9


def writeVarInt(pver, val):
    """
    writeVarInt serializes val using a variable number of bytes depending
    on its value.

    Args:
        pver int: the protocol version.
        val int: the value to be serialized.

    Returns:
        ByteArray: The encoded integer.
    """
    if val < 0xFD:
        return ByteArray(val, length=1)

    if val <= MaxUint16:
        b = ByteArray(0xFD)
        b += ByteArray(val, length=2).littleEndian()
        return b

    if val <= MaxUint32:
        b = ByteArray(0xFE)
        b += ByteArray(val, length=4).littleEndian()
        return b

    b = ByteArray(0xFF)
    b += ByteArray(val, length=8).littleEndian()
    return b


def writeVarBytes(pver, inBytes):
    """
    writeVarBytes serializes a variable length byte array as a varInt
    containing the number of bytes, followed by the bytes themselves.
    """
    b = writeVarInt(pver, len(inBytes))
    b += inBytes
    return b


def readVarInt(b, pver):
    """
    readVarInt reads a variable length integer from b and returns it as an int.

    Args:
        b ByteArray: the encoded integer. The bytes are consumed.
        pver int: the protocol version (unused).
    """
    data = {
        0xFF: dict(pop_bytes=8, minRv=0x100000000,),
        0xFE: dict(pop_bytes=4, minRv=0x10000,),
        0xFD: dict(pop_bytes=2, minRv=0xFD,),
    }
    discriminant = b.pop(1).int()
    if discriminant not in data.keys():
        return discriminant
    rv = b.pop(data[discriminant]["pop_bytes"]).unLittle().int()
    # The encoding is not canonical if the value could have been
    # encoded using fewer bytes.
    minRv = data[discriminant]["minRv"]
    if rv < minRv:
        raise BitmarkError(
            "ReadVarInt noncanon error: {} - {} <= {}".format(rv, discriminant, minRv)
        )
    return rv


def readVarBytes(b, pver, maxAllowed, fieldName):
    """
    readVarBytes reads a variable length byte array. A byte array is encoded
    as a varInt containing the length of the array followed by the bytes
    themselves.

    Args:
        b ByteArray: the encoded bytes. The bytes are consumed.
        pver int: the protocol version.
        maxAllowed int: the maximum acceptable array length.
        fieldName str: the field name, for error messages.

    Returns:
        ByteArray: The decoded bytes.
    """
    count = readVarInt(b, pver)
    if count > maxAllowed:
        raise BitmarkError(
            f"{fieldName} is larger than the max allowed size [count {count}, max {maxAllowed}]"
        )
    return b.pop(count)
