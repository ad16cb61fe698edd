"""
Copyright (c) 2014, Project Bitmark
Copyright (c) 2019-2020, The Decred developers
See LICENSE for details

Construction and verification of a network's genesis block. A genesis block
is built entirely from literals, and its hash is compared against the value
the network launched with. A mismatch means the literals were edited, and
the process must not continue.
"""

from bitmark import ChainParamsIntegrityError
from bitmark import txscript
from bitmark.util import helpers
from bitmark.util.encode import ByteArray, rba
from bitmark.wire import msgblock, msgtx


log = helpers.getLogger("GENESIS")

# Every genesis coinbase pushes the main network's difficulty bits and an
# extra nonce of 4 ahead of its message.
COINBASE_BITS = 486604799
COINBASE_EXTRA_NONCE = 4


def coinbaseTx(message, pubKey, reward):
    """
    coinbaseTx creates the single transaction of a genesis block.

    Args:
        message (str or bytes): The message embedded in the input script.
        pubKey (ByteArray): The public key the reward is paid to.
        reward (int): The output value, in base units.

    Returns:
        MsgTx: The coinbase transaction.
    """
    if isinstance(message, str):
        message = message.encode()
    tx = msgtx.MsgTx(version=msgtx.TxVersion)
    tx.addTxIn(
        msgtx.TxIn(
            previousOutPoint=msgtx.OutPoint(txHash=None, idx=msgtx.MaxPrevOutIndex),
            sequence=msgtx.MaxTxInSequenceNum,
            signatureScript=txscript.coinbaseSigScript(
                COINBASE_BITS, COINBASE_EXTRA_NONCE, message
            ),
        )
    )
    tx.addTxOut(
        msgtx.TxOut(value=reward, pkScript=txscript.payToPubKeyScript(pubKey))
    )
    return tx


def buildGenesisBlock(coinbase, timestamp, bits, nonce, version=1):
    """
    buildGenesisBlock assembles a block holding only the coinbase transaction.
    The previous block hash is zero.

    Args:
        coinbase (MsgTx): The coinbase transaction.
        timestamp (int): The header timestamp.
        bits (int): The header difficulty bits.
        nonce (int): The header nonce.
        version (int): The block version.

    Returns:
        MsgBlock: The genesis block.
    """
    block = msgblock.MsgBlock(transactions=[coinbase])
    block.header = msgblock.BlockHeader(
        version=version,
        prevBlock=ByteArray(0, length=msgblock.HASH_SIZE),
        merkleRoot=block.merkleRoot(),
        timestamp=timestamp,
        bits=bits,
        nonce=nonce,
    )
    return block


def checkGenesis(netName, block, wantHash, wantMerkleRoot=None):
    """
    checkGenesis verifies a genesis block against the hashes the network
    launched with. The expected values are given in their displayed
    (reversed) hex form.

    Args:
        netName (str): The network name, for diagnostics.
        block (MsgBlock): The genesis block.
        wantHash (str): The expected block hash.
        wantMerkleRoot (str): Optional. The expected merkle root.

    Returns:
        str: The verified block hash.

    Raises:
        ChainParamsIntegrityError: The block does not match.
    """
    blockHash = block.hash()
    if blockHash != rba(wantHash):
        msg = f"{netName} genesis hash mismatch: computed {blockHash.rhex()}, expected {wantHash}"
        log.critical(msg)
        raise ChainParamsIntegrityError(msg)
    if wantMerkleRoot is not None:
        merkleRoot = block.header.merkleRoot
        if merkleRoot != rba(wantMerkleRoot):
            msg = f"{netName} genesis merkle root mismatch: computed {merkleRoot.rhex()}, expected {wantMerkleRoot}"
            log.critical(msg)
            raise ChainParamsIntegrityError(msg)
    return blockHash.rhex()
