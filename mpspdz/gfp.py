"""
Copyright (c) 2021, the mpspdz developers
See LICENSE for details

Conversion between integers and the GFp representation of the MP-SPDZ
runtime. MP-SPDZ keeps field elements in Montgomery form as multiprecision
integers of two 8-byte limbs. Each limb is stored little-endian and the limbs
are stored least significant first.
"""

from mpspdz import MpSpdzError
from mpspdz.util import helpers
from mpspdz.util.encode import decodeBA, intFromBytes, intToFixedBytes, splitWords


# The size of a limb in the MP-SPDZ runtime.
LIMB_WIDTH = 8

# The size of a word in the MP-SPDZ runtime. A word holds one field element.
WORD_WIDTH = 2 * LIMB_WIDTH

# The size of a share (value, MAC) in the MP-SPDZ runtime.
SHARE_WIDTH = 2 * WORD_WIDTH

log = helpers.getLogger("GFP")


class GfpRangeError(MpSpdzError, ValueError):
    """
    A value to encode is negative or larger than the prime.
    """

    pass


class GfpLengthError(MpSpdzError, ValueError):
    """
    A byte representation does not have the length required for decoding.
    """

    pass


class MissingParameterError(MpSpdzError, ValueError):
    """
    A codec parameter was not provided.
    """

    pass


def reverseBytes(b):
    """
    Reverse a byte sequence.

    Args:
        b (bytes-like): The input bytes.

    Returns:
        bytearray: A new bytearray with the bytes in reverse order.
    """
    return bytearray(reversed(b))


def invertLimbEndianness(b):
    """
    Invert the byte order of each 8-byte limb of a word, from little-endian to
    big-endian or vice versa. The limb order is left untouched. MP-SPDZ stores
    limbs little-endian, so values read from the runtime need their limbs
    converted to big-endian, and values handed back need the reverse.

    Args:
        b (bytes-like): A WORD_WIDTH-byte word.

    Returns:
        bytearray: A new word with every limb in reverse byte order.
    """
    fixed = bytearray(WORD_WIDTH)
    for i in range(WORD_WIDTH // LIMB_WIDTH):
        start = i * LIMB_WIDTH
        fixed[start : start + LIMB_WIDTH] = reverseBytes(b[start : start + LIMB_WIDTH])
    return fixed


def swapLimbs(b):
    """
    Swap the two 8-byte limbs of a word, limb[0], limb[1] -> limb[1], limb[0].
    MP-SPDZ stores the least significant limb first.

    Args:
        b (bytes-like): A WORD_WIDTH-byte word.

    Returns:
        bytearray: A new word with the limbs swapped.
    """
    swapped = bytearray(WORD_WIDTH)
    swapped[LIMB_WIDTH:] = b[:LIMB_WIDTH]
    swapped[:LIMB_WIDTH] = b[LIMB_WIDTH:WORD_WIDTH]
    return swapped


def fromIntToMont(value, r, prime):
    """
    Convert an integer to its Montgomery form with respect to the auxiliary
    modulus r and the modulus prime.

    Args:
        value (int): The integer to convert.
        r (int): The auxiliary modulus R.
        prime (int): The modulus N.

    Returns:
        bytearray: The Montgomery form as WORD_WIDTH big-endian bytes. Only the
            low-order WORD_WIDTH bytes are kept.
    """
    return intToFixedBytes(value * r % prime, WORD_WIDTH)


def fromMontToInt(b, rInv, prime):
    """
    Convert a big-endian Montgomery form back to an integer modulo prime.

    Args:
        b (bytes-like): The Montgomery form as big-endian bytes.
        rInv (int): The inverse of the auxiliary modulus R modulo prime.
        prime (int): The modulus N.

    Returns:
        int: The integer, in the range [0, prime).
    """
    return intFromBytes(b) * rInv % prime


class GfpCodec:
    """
    GfpCodec converts integers to and from the MP-SPDZ GFp representation for
    a fixed modulus N, auxiliary modulus R and inverse R^-1 mod N. The three
    parameters are not checked for consistency. A GfpCodec is immutable and
    can be shared freely.
    """

    __slots__ = ("_prime", "_r", "_rInv")

    def __init__(self, prime, r, rInv):
        """
        Args:
            prime (int): Modulus N as used by the MP-SPDZ runtime.
            r (int): Auxiliary modulus R as used by the MP-SPDZ runtime.
            rInv (int): Multiplicative inverse of R modulo N.
        """
        for name, v in (("prime", prime), ("r", r), ("rInv", rInv)):
            if v is None:
                raise MissingParameterError(f"GfpCodec: {name} must not be None")
        object.__setattr__(self, "_prime", prime)
        object.__setattr__(self, "_r", r)
        object.__setattr__(self, "_rInv", rInv)
        log.debug("created codec for a %d-bit prime", prime.bit_length())

    @staticmethod
    def create(prime, r, rInv):
        """
        Create a GfpCodec. Equivalent to calling the constructor.

        Args:
            prime (int): Modulus N.
            r (int): Auxiliary modulus R.
            rInv (int): Multiplicative inverse of R modulo N.

        Returns:
            GfpCodec: The codec.
        """
        return GfpCodec(prime, r, rInv)

    @staticmethod
    def fromParams(params):
        """
        Create a GfpCodec from a parameter set such as mpspdz.params.gfp128.

        Args:
            params (module): An object with Prime, R and RInv attributes.

        Returns:
            GfpCodec: The codec.
        """
        return GfpCodec(params.Prime, params.R, params.RInv)

    def __setattr__(self, name, value):
        raise AttributeError(f"GfpCodec is immutable, cannot set {name}")

    def __delattr__(self, name):
        raise AttributeError(f"GfpCodec is immutable, cannot delete {name}")

    def __eq__(self, other):
        if not isinstance(other, GfpCodec):
            return NotImplemented
        return (self._prime, self._r, self._rInv) == (
            other._prime,
            other._r,
            other._rInv,
        )

    def __hash__(self):
        return hash((self._prime, self._r, self._rInv))

    def __repr__(self):
        return f"GfpCodec(prime={self._prime}, r={self._r}, rInv={self._rInv})"

    def getPrime(self):
        """Modulus N as used by the MP-SPDZ runtime."""
        return self._prime

    def getAuxiliaryModulus(self):
        """Auxiliary modulus R as used by the MP-SPDZ runtime."""
        return self._r

    def getInverseOfAuxiliaryModulus(self):
        """Multiplicative inverse of R modulo N."""
        return self._rInv

    def toGfp(self, value):
        """
        Convert an integer to the MP-SPDZ GFp representation.

        Args:
            value (int): The value to convert. Must be in [0, prime].

        Returns:
            bytes: The WORD_WIDTH-byte GFp representation.

        Raises:
            GfpRangeError: The value is larger than the prime or negative.
        """
        if value > self._prime:
            raise GfpRangeError(
                f"Value must not be larger than {self._prime}. Actual: {value}."
            )
        if value < 0:
            raise GfpRangeError(f"Value must not be negative. Actual: {value}.")
        mont = fromIntToMont(value, self._r, self._prime)
        return bytes(swapLimbs(invertLimbEndianness(mont)))

    def fromGfp(self, gfp):
        """
        Convert an MP-SPDZ GFp representation to an integer.

        Args:
            gfp (bytes-like): The WORD_WIDTH-byte GFp representation.

        Returns:
            int: The value, always in [0, prime).

        Raises:
            GfpLengthError: gfp is not WORD_WIDTH bytes long.
        """
        gfp = decodeBA(gfp)
        if len(gfp) != WORD_WIDTH:
            raise GfpLengthError(
                f"Gfp byte representation must have a length of {WORD_WIDTH}. "
                f"Actual: {len(gfp)}."
            )
        mont = invertLimbEndianness(swapLimbs(gfp))
        return fromMontToInt(mont, self._rInv, self._prime)

    def toGfpStream(self, values):
        """
        Convert a sequence of integers to concatenated GFp representations, as
        found in MP-SPDZ data files.

        Args:
            values (iterable(int)): The values to convert.

        Returns:
            bytes: len(values) * WORD_WIDTH bytes.
        """
        return b"".join(self.toGfp(v) for v in values)

    def fromGfpStream(self, b):
        """
        Convert concatenated GFp representations to a list of integers.

        Args:
            b (bytes-like): A multiple of WORD_WIDTH bytes.

        Returns:
            list(int): The decoded values, in order.

        Raises:
            GfpLengthError: The length of b is not a multiple of WORD_WIDTH.
        """
        stream = decodeBA(b)
        if len(stream) % WORD_WIDTH:
            raise GfpLengthError(
                f"Gfp stream length must be a multiple of {WORD_WIDTH}. "
                f"Actual: {len(stream)}."
            )
        return [self.fromGfp(word) for word in splitWords(stream, WORD_WIDTH)]

    def toShare(self, value, mac):
        """
        Convert a value and its MAC to the MP-SPDZ share representation.

        Args:
            value (int): The share value.
            mac (int): The MAC of the share.

        Returns:
            bytes: The SHARE_WIDTH-byte share, value word first.
        """
        return self.toGfp(value) + self.toGfp(mac)

    def fromShare(self, b):
        """
        Convert an MP-SPDZ share representation to its value and MAC.

        Args:
            b (bytes-like): The SHARE_WIDTH-byte share.

        Returns:
            tuple(int, int): The value and the MAC.

        Raises:
            GfpLengthError: b is not SHARE_WIDTH bytes long.
        """
        b = decodeBA(b)
        if len(b) != SHARE_WIDTH:
            raise GfpLengthError(
                f"Share byte representation must have a length of {SHARE_WIDTH}. "
                f"Actual: {len(b)}."
            )
        return self.fromGfp(b[:WORD_WIDTH]), self.fromGfp(b[WORD_WIDTH:])
