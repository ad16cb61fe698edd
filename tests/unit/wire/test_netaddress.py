"""
Copyright (c) 2014, Project Bitmark
Copyright (c) 2019-2020, the Decred developers
See LICENSE for details
"""

import time

import pytest

from bitmark import BitmarkError
from bitmark.util.encode import ByteArray
from bitmark.wire import netaddress, wire


byteIP4 = bytes([127, 0, 0, 1])


def test_NetAddress():
    na = netaddress.NetAddress("127.0.0.1", 9265, services=0, stamp=1)
    assert na.ip == byteIP4
    assert na.port == 9265
    assert na.timestamp == 1
    assert na.ipString() == "127.0.0.1"
    assert na.services == 0

    na = netaddress.NetAddress(byteIP4, 9265)
    assert na.services == wire.SFNodeNetwork
    assert abs(na.timestamp - int(time.time())) < 5

    na = netaddress.NetAddress("::1", 9265)
    assert len(na.ip) == 16
    assert na.ipString() == "::1"

    with pytest.raises(BitmarkError):
        netaddress.NetAddress("not an ip", 9265)


def test_ipFromPackedInt():
    assert netaddress.ipFromPackedInt(0x0100007F) == byteIP4
    assert netaddress.ipFromPackedInt(0xAC1F1F0A) == bytes([10, 31, 31, 172])
    assert netaddress.ipFromPackedInt(0) == bytes(4)
    with pytest.raises(BitmarkError):
        netaddress.ipFromPackedInt(1 << 32)
    with pytest.raises(BitmarkError):
        netaddress.ipFromPackedInt(-1)


def test_NetAddressWire():
    na = netaddress.NetAddress(
        ip="127.0.0.1",
        port=8333,
        services=wire.SFNodeNetwork,
        stamp=0x495FAB29,  # 2009-01-03 12:15:05 -0600 CST
    )
    withStamp = ByteArray(
        "29ab5f49"  # Timestamp
        "0100000000000000"  # SFNodeNetwork
        "00000000000000000000ffff7f000001"  # IP 127.0.0.1
        "208d"  # Port 8333 in big-endian
    )
    b = netaddress.writeNetAddress(na, True)
    assert b == withStamp
    assert len(b) == netaddress.MaxNetAddressPayload
    assert netaddress.readNetAddress(b, True) == na
    # Reading doesn't consume the caller's bytes.
    assert len(b) == netaddress.MaxNetAddressPayload

    b = netaddress.writeNetAddress(na, False)
    assert b == withStamp[4:]
    reNA = netaddress.readNetAddress(b, False)
    assert reNA.timestamp == 0
    assert reNA.ip == na.ip
    assert reNA.port == na.port

    with pytest.raises(BitmarkError):
        netaddress.readNetAddress(withStamp, False)
