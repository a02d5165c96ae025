"""
Copyright (c) 2021, the mpspdz developers
See LICENSE for details
"""

import random

import pytest

from mpspdz.gfp import GfpCodec
from mpspdz.params import gfp128


# Seed initialization is delegated to tests.
# random.seed(0)


@pytest.fixture
def codec():
    return GfpCodec(gfp128.Prime, gfp128.R, gfp128.RInv)


@pytest.fixture
def identityCodec():
    """
    A codec with R = R^-1 = 1. Its GFp representation of a value below the
    prime is the value as a 16-byte little-endian integer.
    """
    return GfpCodec(gfp128.Prime, 1, 1)


@pytest.fixture
def randBytes():
    def _randBytes(low=0, high=50):
        return bytes(random.randint(0, 255) for _ in range(random.randint(low, high)))

    return _randBytes
