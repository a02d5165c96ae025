"""
Copyright (c) 2021, the mpspdz developers
See LICENSE for details

Conversion between Python integers and the GFp representation used by the
MP-SPDZ runtime.
"""


class MpSpdzError(Exception):
    pass
