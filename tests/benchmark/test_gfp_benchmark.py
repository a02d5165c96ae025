"""
Copyright (c) 2021, the mpspdz developers
See LICENSE for details
"""

from mpspdz.gfp import GfpCodec
from mpspdz.params import gfp128


V1 = 0x2A4F7D1C9B3E58A06F1D2C3B4A596877
V2 = 1234567890123456789


class Test_GfpCodec:
    def test_toGfp(self, benchmark):
        codec = GfpCodec.fromParams(gfp128)
        benchmark(codec.toGfp, V1)

    def test_fromGfp(self, benchmark):
        codec = GfpCodec.fromParams(gfp128)
        gfp = codec.toGfp(V1)
        benchmark(codec.fromGfp, gfp)

    def test_fromGfpStream(self, benchmark):
        codec = GfpCodec.fromParams(gfp128)
        stream = codec.toGfpStream([V1, V2] * 40000)
        benchmark(codec.fromGfpStream, stream)
