"""
Copyright (c) 2021, the mpspdz developers
See LICENSE for details

Byte helpers shared by the GFp codec and the fixture loader.
"""

from mpspdz import MpSpdzError


def intToBytes(i):
    """
    Minimally encode a non-negative integer as unsigned big-endian bytes. Zero
    encodes to an empty bytearray.

    Args:
        i (int): The integer.

    Returns:
        bytearray: The encoded integer.
    """
    return bytearray(i.to_bytes((i.bit_length() + 7) // 8, byteorder="big"))


def intFromBytes(b):
    """
    Decode an unsigned big-endian integer. The most significant bit is never
    treated as a sign bit.

    Args:
        b (bytes-like): The encoded integer.

    Returns:
        int: The decoded integer.
    """
    return int.from_bytes(b, "big", signed=False)


def intToFixedBytes(i, width):
    """
    Encode a non-negative integer as exactly width unsigned big-endian bytes.
    Shorter encodings are left-padded with zeros. Longer encodings keep only
    the low-order width bytes.

    Args:
        i (int): The integer.
        width (int): The output length.

    Returns:
        bytearray: The width-byte encoding.
    """
    b = intToBytes(i)
    bLen = len(b)
    if bLen > width:
        return b[bLen - width :]
    return bytearray(width - bLen) + b


def decodeBA(b, copy=False):
    """
    Decode into a bytearray.

    Args:
        b (str, bytes-like, int, list(int)): The value to decode to
            a bytearray. Strings are interpreted as hexadecimal. Integers are
            minimally encoded to an unsigned integer.

    Returns:
        bytearray: The decoded bytes.
    """
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


def splitWords(b, width):
    """
    Split concatenated fixed-width words. The input is not copied until the
    words are extracted.

    Args:
        b (bytes-like): The words. The length must be a multiple of width.
        width (int): The word length.

    Returns:
        list(bytes): The words, in order.
    """
    if len(b) % width:
        raise MpSpdzError(f"length {len(b)} is not a multiple of {width}")
    view = memoryview(b)
    return [bytes(view[i : i + width]) for i in range(0, len(view), width)]
