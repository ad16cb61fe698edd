"""
Copyright (c) 2014, Project Bitmark
Copyright (c) 2019-2020, The Decred developers
See LICENSE for details

Block and block header messages.
"""

from bitmark import BitmarkError
from bitmark.crypto import crypto
from bitmark.util.encode import ByteArray

from . import wire
from .msgtx import MsgTx


# chainhash.HashSize
HASH_SIZE = 32

# BlockHeaderSize is the number of bytes in a serialized block header.
# Version 4 bytes + PrevBlock 32 bytes + MerkleRoot 32 bytes + Timestamp 4
# bytes + Bits 4 bytes + Nonce 4 bytes.
BlockHeaderSize = 80

# maxTxPerBlock is the maximum number of transactions that could possibly fit
# into a block.
maxTxPerBlock = (wire.MaxMessagePayload // 10) + 1


class BlockHeader:
    """
    BlockHeader defines information about a block and is used in the block
    (MsgBlock) and headers messages.
    """

    def __init__(
        self,
        version=1,
        prevBlock=None,
        merkleRoot=None,
        timestamp=0,
        bits=0,
        nonce=0,
    ):
        # version of the block.  This is not the same as the protocol version.
        self.version = version  # int32

        # hash of the previous block in the block chain.
        self.prevBlock = prevBlock or ByteArray(0, length=HASH_SIZE)

        # merkle tree reference to hash of all transactions for the block.
        self.merkleRoot = merkleRoot or ByteArray(0, length=HASH_SIZE)

        # time the block was created.  This is, unfortunately, encoded as a
        # uint32 on the wire and therefore is limited to 2106.
        self.timestamp = timestamp  # uint32

        # difficulty target for the block, in compact form.
        self.bits = bits  # uint32

        # nonce used to generate the block.
        self.nonce = nonce  # uint32

    @staticmethod
    def btcDecode(b, pver):
        """
        btcDecode decodes b using the protocol encoding. The bytes are consumed.

        Args:
            b (ByteArray): the bytes to decode.
            pver (int): the protocol version.
        """
        if len(b) < BlockHeaderSize:
            raise BitmarkError(
                f"block header too short: expected {BlockHeaderSize}, got {len(b)}"
            )
        bh = BlockHeader()
        bh.version = b.pop(4).unLittle().int()
        bh.prevBlock = b.pop(HASH_SIZE)
        bh.merkleRoot = b.pop(HASH_SIZE)
        bh.timestamp = b.pop(4).unLittle().int()
        bh.bits = b.pop(4).unLittle().int()
        bh.nonce = b.pop(4).unLittle().int()
        return bh

    def btcEncode(self, pver):
        """
        Args:
            pver (int): the protocol version.

        Returns:
            ByteArray: The encoded header.
        """
        b = ByteArray(0, length=BlockHeaderSize)
        i = 0
        b[i] = ByteArray(self.version, length=4).littleEndian()
        i += 4
        b[i] = ByteArray(self.prevBlock, length=HASH_SIZE)
        i += HASH_SIZE
        b[i] = ByteArray(self.merkleRoot, length=HASH_SIZE)
        i += HASH_SIZE
        b[i] = ByteArray(self.timestamp, length=4).littleEndian()
        i += 4
        b[i] = ByteArray(self.bits, length=4).littleEndian()
        i += 4
        b[i] = ByteArray(self.nonce, length=4).littleEndian()
        return b

    def serialize(self):
        """
        Serialize the BlockHeader.

        Returns:
            ByteArray: The serialized BlockHeader.
        """
        return self.btcEncode(0)

    @staticmethod
    def deserialize(b):
        """
        Args:
            b (bytes-like): the bytes to deserialize.
        """
        return BlockHeader.btcDecode(ByteArray(b), 0)

    def hash(self):
        """
        hash computes the block identifier hash for the given block header.
        """
        return crypto.hashH(self.serialize().bytes())

    def id(self):
        return self.hash().rhex()


def hashMerkleBranches(left, right):
    """
    The parent node of two merkle tree nodes.

    Args:
        left (ByteArray): The left child.
        right (ByteArray): The right child.

    Returns:
        ByteArray: The parent node.
    """
    return crypto.hashH((left + right).bytes())


def buildMerkleRoot(txHashes):
    """
    buildMerkleRoot computes the merkle root of the provided transaction
    hashes. At each level, a row with an odd number of nodes pairs its last
    node with itself. A single transaction is its own merkle root.

    Args:
        txHashes (list(ByteArray)): The transaction hashes in block order.

    Returns:
        ByteArray: The merkle root.
    """
    if len(txHashes) == 0:
        return ByteArray(0, length=HASH_SIZE)
    level = list(txHashes)
    while len(level) > 1:
        if len(level) % 2 == 1:
            level.append(level[-1])
        level = [
            hashMerkleBranches(level[i], level[i + 1]) for i in range(0, len(level), 2)
        ]
    return level[0]


class MsgBlock:
    """
    MsgBlock represents a block message. It is used to deliver block and
    transaction information.
    """

    def __init__(self, header=None, transactions=None):
        self.header = header or BlockHeader()
        self.transactions = transactions or []

    def addTransaction(self, tx):
        """
        addTransaction adds a transaction to the message.

        Args:
            tx (MsgTx): The transaction.
        """
        self.transactions.append(tx)

    def merkleRoot(self):
        """
        The merkle root of the block's transactions.

        Returns:
            ByteArray: The merkle root.
        """
        return buildMerkleRoot([tx.hash() for tx in self.transactions])

    def hash(self):
        """
        The block hash, which is the hash of the header.
        """
        return self.header.hash()

    def id(self):
        return self.header.id()

    def btcEncode(self, pver):
        b = self.header.btcEncode(pver)
        b += wire.writeVarInt(pver, len(self.transactions))
        for tx in self.transactions:
            b += tx.btcEncode(pver)
        return b

    @staticmethod
    def btcDecode(b, pver):
        """
        btcDecode decodes b using the protocol encoding. The bytes are consumed.

        Args:
            b (ByteArray): the bytes to decode.
            pver (int): the protocol version.
        """
        header = BlockHeader.btcDecode(b, pver)
        count = wire.readVarInt(b, pver)
        # Prevent more transactions than could possibly fit into a block.
        if count > maxTxPerBlock:
            raise BitmarkError(
                f"MsgBlock.btcDecode: too many transactions to fit into a block [count {count}, max {maxTxPerBlock}]"
            )
        block = MsgBlock(header=header)
        for _ in range(count):
            block.addTransaction(MsgTx.btcDecode(b, pver))
        return block

    def serialize(self):
        """
        Serialize the MsgBlock.

        Returns:
            ByteArray: The serialized block.
        """
        return self.btcEncode(0)

    @staticmethod
    def deserialize(b):
        """
        Args:
            b (bytes-like): the bytes to deserialize.
        """
        return MsgBlock.btcDecode(ByteArray(b), 0)
