"""
Copyright (c) 2021, the mpspdz developers
See LICENSE for details
"""

import pytest

from mpspdz import MpSpdzError, params


def test_params():
    assert params.parse("gfp128") is params.gfp128

    with pytest.raises(MpSpdzError):
        params.parse("gfp0")


def test_gfp128():
    p = params.gfp128
    assert p.Name == "gfp128"
    assert p.Prime.bit_length() == 128
    assert p.R == 2 ** 128 % p.Prime
    assert p.R * p.RInv % p.Prime == 1
