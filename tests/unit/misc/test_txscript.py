"""
Copyright (c) 2014, Project Bitmark
Copyright (c) 2019-2020, the Decred developers
See LICENSE for details
"""

import pytest

from bitmark import BitmarkError, txscript
from bitmark.util.encode import ByteArray


def test_scriptNumBytes():
    tests = [
        (0, ""),
        (1, "01"),
        (-1, "81"),
        (127, "7f"),
        (-127, "ff"),
        (128, "8000"),
        (-128, "8080"),
        (255, "ff00"),
        (256, "0001"),
        (-256, "0081"),
        (32767, "ff7f"),
        (32768, "008000"),
        (486604799, "ffff001d"),
        (2147483647, "ffffff7f"),
        (-2147483648, "00000080" + "80"),
    ]
    for n, want in tests:
        assert txscript.scriptNumBytes(n) == ByteArray(want), n


def test_addInt():
    assert txscript.addInt(0) == ByteArray("00")
    assert txscript.addInt(-1) == ByteArray("4f")
    assert txscript.addInt(1) == ByteArray("51")
    assert txscript.addInt(16) == ByteArray("60")
    assert txscript.addInt(17) == ByteArray("0111")
    assert txscript.addInt(486604799) == ByteArray("04ffff001d")


def test_addData():
    # Single small values are pushed as data, not as small integer opcodes.
    assert txscript.addData(b"\x04") == ByteArray("0104")
    assert txscript.addData(b"\x00") == ByteArray("0100")
    assert txscript.addData(b"") == ByteArray("00")
    assert txscript.addData(b"\xab" * 75) == ByteArray("4b" + "ab" * 75)
    assert txscript.addData(b"\xab" * 76) == ByteArray("4c4c" + "ab" * 76)
    assert txscript.addData(b"\xab" * 255) == ByteArray("4cff" + "ab" * 255)
    assert txscript.addData(b"\xab" * 256) == ByteArray("4d0001" + "ab" * 256)
    assert txscript.addData(b"\xab" * 0x10000) == ByteArray("4e00000100" + "ab" * 0x10000)


def test_payToPubKeyScript():
    compressed = ByteArray("02" + "11" * 32)
    assert txscript.payToPubKeyScript(compressed) == ByteArray("21" + compressed.hex() + "ac")
    uncompressed = ByteArray("04" + "22" * 64)
    assert txscript.payToPubKeyScript(uncompressed) == ByteArray("41" + uncompressed.hex() + "ac")
    with pytest.raises(BitmarkError):
        txscript.payToPubKeyScript(ByteArray("05" + "22" * 64))
    with pytest.raises(BitmarkError):
        txscript.payToPubKeyScript(ByteArray("02" + "11" * 31))


def test_coinbaseSigScript():
    script = txscript.coinbaseSigScript(486604799, 4, b"Testing Testnet")
    assert script == ByteArray("04ffff001d01040f" + b"Testing Testnet".hex())
    with pytest.raises(BitmarkError):
        txscript.coinbaseSigScript(486604799, 256, b"")
