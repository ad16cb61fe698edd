"""
Copyright (c) 2014, Project Bitmark
Copyright (c) 2019-2020, the Decred developers
See LICENSE for details
"""

import pytest

from bitmark import BitmarkError
from bitmark.crypto import crypto
from bitmark.nets import mainnet
from bitmark.util.encode import ByteArray, rba
from bitmark.wire import msgblock, msgtx


class TestBlockHeader:
    def make_block_header(self):
        # The Bitcoin genesis block header, which shares the header format.
        bh = msgblock.BlockHeader(
            version=1,
            prevBlock=ByteArray(0, length=32),
            merkleRoot=rba(
                "4a5e1e4baab89f3a32518a88c31bc87f618f76673e2cc77ab2127b7afdeda33b"
            ),
            timestamp=1231006505,
            bits=0x1D00FFFF,
            nonce=2083236893,
        )
        encoded = ByteArray(
            "0100000000000000000000000000000000000000000000000000000000000000"
            "000000003ba3edfd7a7b12b27ac72c3e67768f617fc81bc3888a51323a9fb8aa"
            "4b1e5e4a29ab5f49ffff001d1dac2b7c"
        )
        return bh, encoded

    def test_encode_decode(self):
        bh, encoded = self.make_block_header()
        b = bh.serialize()
        assert b == encoded
        assert len(b) == msgblock.BlockHeaderSize
        reBH = msgblock.BlockHeader.deserialize(b)
        assert bh.version == reBH.version
        assert bh.prevBlock == reBH.prevBlock
        assert bh.merkleRoot == reBH.merkleRoot
        assert bh.timestamp == reBH.timestamp
        assert bh.bits == reBH.bits
        assert bh.nonce == reBH.nonce
        assert bh.id() == reBH.id()

    def test_hash(self):
        bh, _ = self.make_block_header()
        assert bh.id() == "000000000019d6689c085ae165831e934ff763ae46a2a6c172b3f1b60a8ce26f"
        assert bh.hash() == rba(bh.id())

    def test_short_header(self):
        _, encoded = self.make_block_header()
        with pytest.raises(BitmarkError):
            msgblock.BlockHeader.deserialize(encoded[:79])


def test_buildMerkleRoot():
    a, b, c = (crypto.hashH(bytes([i])) for i in range(3))
    assert msgblock.buildMerkleRoot([]) == ByteArray(0, length=32)
    assert msgblock.buildMerkleRoot([a]) == a
    ab = crypto.hashH((a + b).bytes())
    assert msgblock.buildMerkleRoot([a, b]) == ab
    # The odd node out is paired with itself.
    cc = crypto.hashH((c + c).bytes())
    assert msgblock.buildMerkleRoot([a, b, c]) == crypto.hashH((ab + cc).bytes())
    assert msgblock.hashMerkleBranches(a, b) == ab


def test_msgblock():
    block = mainnet.params.genesisBlock()
    b = block.serialize()
    # Header + one-byte transaction count + the coinbase.
    assert len(b) == 80 + 1 + block.transactions[0].serializeSize()
    reBlock = msgblock.MsgBlock.deserialize(b)
    assert reBlock.id() == block.id()
    assert reBlock.transactions[0] == block.transactions[0]
    assert reBlock.merkleRoot() == reBlock.header.merkleRoot
    assert reBlock.hash() == reBlock.header.hash()

    block.addTransaction(msgtx.MsgTx())
    assert block.merkleRoot() != reBlock.merkleRoot()
