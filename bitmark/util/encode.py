"""
Copyright (c) 2014, Project Bitmark
Copyright (c) 2019-2020, The Decred developers
See LICENSE for details

A class that wraps bytearray and provides some convenient operators for the
wire codecs.
"""

from bitmark import BitmarkError


def intToBytes(i, signed=False):
    """
    Encodes an integer to the shortest big-endian bytes.

    Args:
        i (int): The integer.
        signed (bool): Whether to encode as a signed integer.

    Returns:
        bytearray: The encoded integer.
    """
    length = ((i + ((i * signed) < 0)).bit_length() + 7 + signed) // 8
    return bytearray(i.to_bytes(length, byteorder="big", signed=signed))


def intFromBytes(b, signed=False):
    """
    Decodes an integer from big-endian bytes.

    Args:
        b (bytes-like): The encoded integer.
        signed (bool): Whether to decode as a signed integer.

    Returns:
        int: The decoded integer.
    """
    return int.from_bytes(b, "big", signed=signed)


def decodeBA(b, copy=False):
    """
    Decode into a bytearray.

    Args:
        b (str, bytes-like, ByteArray, int, list(int)): The value to decode to
            a bytearray. Strings are interpreted as hexadecimal. Integers are
            minimally encoded to an unsigned integer.

    Returns:
        bytearray: The decoded bytes.
    """
    if isinstance(b, ByteArray):
        return bytearray(b.b) if copy else b.b
    if isinstance(b, bytearray):
        return bytearray(b) if copy else b
    if isinstance(b, bytes):
        return bytearray(b)
    if isinstance(b, int):
        return intToBytes(b) if b else bytearray([0])
    if isinstance(b, str):
        return bytearray.fromhex(b)
    if hasattr(b, "__iter__"):
        return bytearray(b)
    raise TypeError("decodeBA: unknown type %s" % type(b))


class ByteArray:
    """
    ByteArray is a bytearray manager. An integer argument to the constructor
    results in the shortest big-endian representation of the integer, where
    for bytearray an int argument results in a zero-valued bytearray of said
    length. To get a zero-padded ByteArray of length n, use the `length`
    keyword argument. Values are right-aligned in the padded buffer.
    """

    def __init__(self, b=b"", copy=True, length=None):
        if length:
            src = decodeBA(b)
            if len(src) > length:
                raise BitmarkError("decode: invalid length %i > %i" % (len(src), length))
            self.b = bytearray(length - len(src)) + src
        else:
            self.b = decodeBA(b, copy=copy)

    def __eq__(self, a):
        try:
            return bytearray.__eq__(self.b, decodeBA(a))
        except Exception:
            return False

    def __ne__(self, a):
        return not self.__eq__(a)

    def __lt__(self, a):
        return bytearray.__lt__(self.b, decodeBA(a))

    def __repr__(self):
        return "ByteArray(" + self.hex() + ")"

    def __len__(self):
        return len(self.b)

    def __add__(self, a):
        return ByteArray(self.b + decodeBA(a))

    def __iadd__(self, a):
        """append the bytes and return a new ByteArray"""
        return ByteArray(self.b + decodeBA(a))

    def __getitem__(self, k):
        if isinstance(k, slice):
            return ByteArray(self.b[k.start : k.stop : k.step], copy=False)
        return self.b[k]

    def __setitem__(self, i, v):
        v = decodeBA(v, copy=False)
        if i + len(v) > len(self.b):
            raise BitmarkError("source bytes too long")
        for j in range(len(v)):
            self.b[i + j] = v[j]

    def __reversed__(self):
        return ByteArray(bytearray(reversed(self.b)))

    def __hash__(self):
        """Enables ByteArray to be a dict key."""
        return hash(bytes(self.b))

    def hex(self):
        """
        A hexadecimal string representation of the bytes.

        Returns:
            str: The hex bytes.
        """
        return self.b.hex()

    def rhex(self):
        """
        A reversed hexadecimal string representation of the bytes. This is the
        form in which block and transaction hashes are displayed.

        Returns:
            str: The hex bytes.
        """
        return self.__reversed__().hex()

    def iszero(self):
        """
        True if all bytes are zero.
        """
        return all((v == 0 for v in self.b))

    def int(self):
        """The bytes as an integer."""
        return intFromBytes(self.b)

    def bytes(self):
        """The bytes as Python `bytes`."""
        return bytes(self.b)

    def unLittle(self):
        """A copy of the ByteArray, reversed."""
        return self.littleEndian()

    def littleEndian(self):
        """A copy of the ByteArray, reversed."""
        return ByteArray(reversed(self.b))

    def copy(self):
        """A copy of the ByteArray."""
        return ByteArray(self.b)

    def pop(self, n):
        """
        Remove n bytes from the beginning of the ByteArray, returning the bytes.
        """
        if n > len(self.b):
            raise BitmarkError(f"cannot pop {n} bytes from {len(self.b)}")
        b = self[:n]
        self.b = self.b[n:]
        return b


def rba(*a, **k):
    """
    Reversed ByteArray. All args and kwargs are passed to the ByteArray
    constructor. Useful for hashes given in their displayed (reversed) form.
    """
    return reversed(ByteArray(*a, **k))
