"""
Copyright (c) 2014, Project Bitmark
Copyright (c) 2020, the Decred developers
See LICENSE for details
"""

import socket
import time

from bitmark import BitmarkError
from bitmark.util.encode import ByteArray

from . import wire


MaxNetAddressPayload = 30

# Prefix for a IPv4 adderess encoded as 16 bytes.
ipv4to16prefix = ByteArray(0xFFFF, length=12)


class NetAddress:
    """
    NetAddress defines information about a peer on the network including the time
    it was last seen, the services it supports, its IP address, and port.
    """

    def __init__(self, ip, port, services=wire.SFNodeNetwork, stamp=None):
        """
        Args:
            ip (str or bytes-like): The peer's IP address.
            port (int): Port the peer is using.  This is encoded in big endian
                on the wire which differs from most everything else.
            services (int): Bitfield which identifies the services supported by
                the peer.
            stamp (int): Optional. Default: current time. The last time the peer
                was seen.
        """
        self.timestamp = stamp if stamp is not None else int(time.time())
        self.services = services

        # If the IP is a string, parse it to bytes.
        if isinstance(ip, str):
            ip = decodeStringIP(ip)
        self.ip = ByteArray(ip)

        self.port = port

    def __eq__(self, other):
        return (
            self.ip == other.ip
            and self.port == other.port
            and self.services == other.services
            and self.timestamp == other.timestamp
        )

    def __repr__(self):
        return f"NetAddress({self.ipString()}:{self.port}, stamp={self.timestamp})"

    def ipString(self):
        """
        The IP address in its conventional string form.

        Returns:
            str: The IP address.
        """
        if len(self.ip) == 4:
            return socket.inet_ntop(socket.AF_INET, self.ip.bytes())
        return socket.inet_ntop(socket.AF_INET6, self.ip.bytes())


def ipFromPackedInt(packed):
    """
    Decode an IPv4 address stored as a native uint32, the way seed lists are
    compiled into the node. The integer's little-endian bytes are the address
    octets, so 0x0100007f is 127.0.0.1.

    Args:
        packed (int): The packed address.

    Returns:
        ByteArray: The 4-byte address.
    """
    if packed < 0 or packed > wire.MaxUint32:
        raise BitmarkError(f"packed IPv4 address out of range: {packed}")
    return ByteArray(packed, length=4).littleEndian()


def readNetAddress(b, hasStamp):
    """
    Reads an encoded NetAddress from b depending on whether or not the
    timestamp is included per hasStamp. Some messages like version do not
    include the timestamp.

    Args:
        b (ByteArray): The encoded NetAddress.
        hasStamp (bool): Whether or not the NetAddress has a timestamp.

    Returns:
        NetAddress: The decoded NetAddress.
    """
    expLen = 30 if hasStamp else 26
    if len(b) != expLen:
        raise BitmarkError(
            f"readNetAddress wrong length (hasStamp={hasStamp}) expected {expLen}, got {len(b)}"
        )
    b = b.copy()

    stamp = b.pop(4).unLittle().int() if hasStamp else 0
    services = b.pop(8).unLittle().int()
    ip = b.pop(16)
    if ip[:12] == ipv4to16prefix:
        ip = ip[12:]

    # The port is big endian, unlike everything else.
    port = b.pop(2).int()

    return NetAddress(ip=ip, port=port, services=services, stamp=stamp)


def writeNetAddress(netAddr, hasStamp):
    """
    writeNetAddress serializes a NetAddress depending on whether or not the
    timestamp is included per hasStamp.

    Args:
        netAddr (NetAddress): The peer's NetAddress.
        hasStamp (bool): Whether to encode the timestamp.

    Returns:
        ByteArray: The encoded NetAddress.
    """
    b = (
        ByteArray(netAddr.timestamp, length=4).littleEndian()
        if hasStamp
        else ByteArray()
    )

    ip = netAddr.ip
    if len(ip) == 4:
        ip = ipv4to16prefix + ip

    b += ByteArray(netAddr.services, length=8).littleEndian()
    b += ByteArray(ip, length=16)
    b += ByteArray(netAddr.port, length=2)

    return b


def decodeStringIP(ip):
    """
    Parse an IP string to bytes.

    Args:
        ip (str): The string-encoded IP address.

    Returns:
        bytes-like: The byte-encoded IP address.
    """
    try:
        return socket.inet_pton(socket.AF_INET, ip)
    except OSError:
        pass
    try:
        return socket.inet_pton(socket.AF_INET6, ip)
    except OSError:
        raise BitmarkError(f"failed to decode IP {ip}")
