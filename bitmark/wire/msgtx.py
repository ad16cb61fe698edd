"""
Copyright (c) 2014, Project Bitmark
Copyright (c) 2019-2020, The Decred developers
See LICENSE for details

Transaction messages, serialized the way the pre-segwit Bitcoin protocol
serializes them.
"""

from typing import List, Optional

from bitmark import BitmarkError
from bitmark.crypto import crypto
from bitmark.util.encode import ByteArray

from . import wire


# chainhash.HashSize
HASH_SIZE = 32

# TxVersion is the current latest supported transaction version.
TxVersion = 1

# MaxTxInSequenceNum is the maximum sequence number the sequence field
# of a transaction input can be.
MaxTxInSequenceNum = 0xFFFFFFFF

# MaxPrevOutIndex is the maximum index the index field of a previous
# outpoint can be. A coinbase input references it.
MaxPrevOutIndex = 0xFFFFFFFF

# COIN is the number of base units in one coin.
COIN = 100000000

# minTxInPayload is the minimum payload size for a transaction input.
# PreviousOutPoint.Hash + PreviousOutPoint.Index 4 bytes + Varint for
# SignatureScript length 1 byte + Sequence 4 bytes.
minTxInPayload = 9 + HASH_SIZE

# maxTxInPerMessage is the maximum number of transactions inputs that
# a transaction which fits into a message could possibly have.
maxTxInPerMessage = (wire.MaxMessagePayload // minTxInPayload) + 1

# MinTxOutPayload is the minimum payload size for a transaction output.
# Value 8 bytes + Varint for PkScript length 1 byte.
MinTxOutPayload = 9

# maxTxOutPerMessage is the maximum number of transactions outputs that
# a transaction which fits into a message could possibly have.
maxTxOutPerMessage = (wire.MaxMessagePayload // MinTxOutPayload) + 1


class OutPoint:
    """
    OutPoint defines a data type that is used to track previous transaction
    outputs.
    """

    def __init__(self, txHash: Optional[ByteArray], idx: int):
        self.hash = txHash if txHash else ByteArray(0, length=HASH_SIZE)
        self.index = idx

    def __eq__(self, other: "OutPoint") -> bool:
        return self.hash == other.hash and self.index == other.index

    def isNull(self) -> bool:
        """
        True for the outpoint a coinbase input spends, which references no
        real output.
        """
        return self.hash.iszero() and self.index == MaxPrevOutIndex

    def txid(self) -> str:
        return reversed(self.hash).hex()


class TxIn:
    """
    TxIn defines a transaction input.
    """

    def __init__(
        self,
        previousOutPoint: OutPoint,
        sequence: int = MaxTxInSequenceNum,
        signatureScript: Optional[ByteArray] = None,
    ):
        self.previousOutPoint = previousOutPoint
        self.sequence = sequence  # uint32
        self.signatureScript = signatureScript or ByteArray(b"")

    def __eq__(self, ti: "TxIn") -> bool:
        return (
            self.previousOutPoint == ti.previousOutPoint
            and self.sequence == ti.sequence
            and self.signatureScript == ti.signatureScript
        )

    def serializeSize(self) -> int:
        """
        serializeSize returns the number of bytes it would take to serialize the
        the transaction input.
        """
        # Outpoint Hash 32 bytes + Outpoint Index 4 bytes + Sequence 4 bytes +
        # serialized varint size for the length of SignatureScript +
        # SignatureScript bytes.
        scriptLen = len(self.signatureScript)
        return 40 + wire.varIntSerializeSize(scriptLen) + scriptLen


class TxOut:
    """
    TxOut defines a transaction output.
    """

    def __init__(self, value: int = 0, pkScript: Optional[ByteArray] = None):
        self.value = value
        self.pkScript = pkScript or ByteArray()

    def __eq__(self, to: "TxOut") -> bool:
        return self.value == to.value and self.pkScript == to.pkScript

    def serializeSize(self) -> int:
        """
        SerializeSize returns the number of bytes it would take to serialize the
        the transaction output.
        """
        return 8 + wire.varIntSerializeSize(len(self.pkScript)) + len(self.pkScript)


def readOutPoint(b: ByteArray, pver: int) -> OutPoint:
    """
    readOutPoint reads the next sequence of bytes from b as an OutPoint.
    """
    txHash = b.pop(HASH_SIZE)
    idx = b.pop(4).unLittle().int()
    return OutPoint(txHash=txHash, idx=idx)


def writeOutPoint(pver: int, op: OutPoint) -> ByteArray:
    """
    writeOutPoint encodes op using the protocol encoding for an OutPoint.
    """
    b = ByteArray(op.hash, length=HASH_SIZE)
    b += ByteArray(op.index, length=4).littleEndian()
    return b


def readTxIn(b: ByteArray, pver: int) -> TxIn:
    """
    readTxIn reads the next sequence of bytes from b as a transaction input.
    """
    op = readOutPoint(b, pver)
    script = wire.readVarBytes(
        b, pver, wire.MaxMessagePayload, "transaction input signature script"
    )
    sequence = b.pop(4).unLittle().int()
    return TxIn(previousOutPoint=op, sequence=sequence, signatureScript=script)


def writeTxIn(pver: int, ti: TxIn) -> ByteArray:
    """
    writeTxIn encodes ti using the protocol encoding for a transaction input.
    """
    b = writeOutPoint(pver, ti.previousOutPoint)
    b += wire.writeVarBytes(pver, ti.signatureScript)
    b += ByteArray(ti.sequence, length=4).littleEndian()
    return b


def readTxOut(b: ByteArray, pver: int) -> TxOut:
    """
    readTxOut reads the next sequence of bytes from b as a transaction output.
    """
    value = b.pop(8).unLittle().int()
    pkScript = wire.readVarBytes(
        b, pver, wire.MaxMessagePayload, "transaction output public key script"
    )
    return TxOut(value=value, pkScript=pkScript)


def writeTxOut(pver: int, to: TxOut) -> ByteArray:
    """
    writeTxOut encodes to into the protocol encoding for a transaction output.
    """
    b = ByteArray(to.value, length=8).littleEndian()
    b += wire.writeVarBytes(pver, to.pkScript)
    return b


class MsgTx:
    """
    MsgTx represents a tx message. Use the addTxIn and addTxOut functions to
    build up the list of transaction inputs and outputs.
    """

    def __init__(
        self,
        version: int = TxVersion,
        txIn: Optional[List[TxIn]] = None,
        txOut: Optional[List[TxOut]] = None,
        lockTime: int = 0,
    ):
        self.version = version
        self.txIn = txIn or []
        self.txOut = txOut or []
        self.lockTime = lockTime

    def __eq__(self, tx: "MsgTx") -> bool:
        return (
            self.version == tx.version
            and len(self.txIn) == len(tx.txIn)
            and len(self.txOut) == len(tx.txOut)
            and all((a == b for a, b in zip(self.txIn, tx.txIn)))
            and all((a == b for a, b in zip(self.txOut, tx.txOut)))
            and self.lockTime == tx.lockTime
        )

    def addTxIn(self, ti: TxIn):
        """addTxIn adds a transaction input to the message."""
        self.txIn.append(ti)

    def addTxOut(self, to: TxOut):
        """addTxOut adds a transaction output to the message."""
        self.txOut.append(to)

    def isCoinBase(self) -> bool:
        """
        A coinbase transaction has exactly one input, and that input spends
        the null outpoint.
        """
        return len(self.txIn) == 1 and self.txIn[0].previousOutPoint.isNull()

    def serializeSize(self) -> int:
        """
        serializeSize returns the number of bytes it would take to serialize
        the transaction.
        """
        # Version 4 bytes + LockTime 4 bytes + Serialized varint size for the
        # number of transaction inputs and outputs.
        n = (
            8
            + wire.varIntSerializeSize(len(self.txIn))
            + wire.varIntSerializeSize(len(self.txOut))
        )
        for txIn in self.txIn:
            n += txIn.serializeSize()
        for txOut in self.txOut:
            n += txOut.serializeSize()
        return n

    def hash(self) -> ByteArray:
        """
        hash generates the double sha256 hash of the serialized transaction.
        """
        expSize = self.serializeSize()
        toHash = self.serialize()
        if len(toHash) != expSize:
            raise BitmarkError(
                f"hash: expected {expSize}-byte serialization, got {len(toHash)} bytes"
            )
        return crypto.hashH(toHash.bytes())

    def txid(self) -> str:
        """
        The transaction ID in the reversed hex form in which it is displayed.
        """
        return self.hash().rhex()

    @staticmethod
    def btcDecode(b: ByteArray, pver: int) -> "MsgTx":
        """
        btcDecode decodes b using the protocol encoding. The bytes are consumed.
        """
        version = b.pop(4).unLittle().int()
        tx = MsgTx(version=version)

        count = wire.readVarInt(b, pver)
        # Prevent more input transactions than could possibly fit into a
        # message.
        if count > maxTxInPerMessage:
            raise BitmarkError(
                f"MsgTx.btcDecode: too many input transactions to fit into max message size [count {count}, max {maxTxInPerMessage}]"
            )
        for _ in range(count):
            tx.addTxIn(readTxIn(b, pver))

        count = wire.readVarInt(b, pver)
        if count > maxTxOutPerMessage:
            raise BitmarkError(
                f"MsgTx.btcDecode: too many output transactions to fit into max message size [count {count}, max {maxTxOutPerMessage}]"
            )
        for _ in range(count):
            tx.addTxOut(readTxOut(b, pver))

        tx.lockTime = b.pop(4).unLittle().int()
        return tx

    def btcEncode(self, pver: int) -> ByteArray:
        """
        btcEncode encodes the transaction using the protocol encoding.
        """
        b = ByteArray(self.version, length=4).littleEndian()

        b += wire.writeVarInt(pver, len(self.txIn))
        for ti in self.txIn:
            b += writeTxIn(pver, ti)

        b += wire.writeVarInt(pver, len(self.txOut))
        for to in self.txOut:
            b += writeTxOut(pver, to)

        b += ByteArray(self.lockTime, length=4).littleEndian()
        return b

    def serialize(self) -> ByteArray:
        """Serialize the MsgTx."""
        return self.btcEncode(0)

    @staticmethod
    def deserialize(b) -> "MsgTx":
        """
        Deserialize the MsgTx.

        Args:
            b (bytes-like): The serialized transaction.
        """
        return MsgTx.btcDecode(ByteArray(b), 0)
