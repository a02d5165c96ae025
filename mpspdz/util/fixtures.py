"""
Copyright (c) 2021, the mpspdz developers
See LICENSE for details

Loads paired reference data. One file holds concatenated GFp words as written
by MP-SPDZ, the other holds the same values as newline-delimited decimal
integers.
"""

from mpspdz import MpSpdzError
from mpspdz.gfp import WORD_WIDTH
from mpspdz.util import helpers
from mpspdz.util.encode import splitWords


log = helpers.getLogger("FIXTURES")


class GfpPair:
    """
    A GFp word and the value it represents.
    """

    def __init__(self, gfp, value, prime):
        """
        Args:
            gfp (bytes-like): The WORD_WIDTH-byte GFp representation.
            value (int): The value as read. It is reduced modulo prime.
            prime (int): The field modulus.
        """
        self.gfp = bytes(gfp)
        self.value = value % prime

    def __repr__(self):
        return f"GfpPair(gfp={self.gfp.hex()}, value={self.value})"


def readGfps(path):
    """
    Read a file of concatenated GFp words.

    Args:
        path (str or Path): The file path.

    Returns:
        list(bytes): The WORD_WIDTH-byte words, in file order.
    """
    try:
        with open(path, "rb") as f:
            stream = f.read()
    except OSError as e:
        raise MpSpdzError(f"GFp data at {path} can not be opened: {e}")
    if len(stream) % WORD_WIDTH:
        raise MpSpdzError(
            f"GFp data at {path} ends with a partial word of "
            f"{len(stream) % WORD_WIDTH} bytes"
        )
    return splitWords(stream, WORD_WIDTH)


def readValues(path):
    """
    Read a file of newline-delimited decimal integers. Blank lines are skipped.

    Args:
        path (str or Path): The file path.

    Returns:
        list(int): The values, in file order.
    """
    try:
        with open(path, encoding="utf-8") as f:
            lines = f.read().splitlines()
    except OSError as e:
        raise MpSpdzError(f"human readable data at {path} can not be opened: {e}")
    values = []
    for i, line in enumerate(lines):
        line = line.strip()
        if not line:
            continue
        try:
            values.append(int(line))
        except ValueError:
            raise MpSpdzError(f"{path}:{i + 1}: not an integer: {line!r}")
    return values


def loadPairs(gfpPath, valuesPath, prime):
    """
    Load the GFp words and the human readable values and pair them by
    position.

    Args:
        gfpPath (str or Path): The file of concatenated GFp words.
        valuesPath (str or Path): The file of decimal values.
        prime (int): The field modulus the values are reduced by.

    Returns:
        list(GfpPair): The pairs, in file order.
    """
    gfps = readGfps(gfpPath)
    values = readValues(valuesPath)
    if len(gfps) != len(values):
        raise MpSpdzError(
            "number of read GFp values does not match number of human readable "
            f"values: {len(gfps)} != {len(values)}"
        )
    log.info(f"loaded {len(gfps)} GFp pairs from {gfpPath}")
    return [GfpPair(gfp, value, prime) for gfp, value in zip(gfps, values)]
