"""
Copyright (c) 2021, the mpspdz developers
See LICENSE for details

gfp128 holds the parameters of the 128-bit prime field MP-SPDZ uses with
two-limb field elements.
"""

Name = "gfp128"

# Modulus N.
Prime = 198766463529478683931867765928436695041

# Auxiliary Montgomery modulus R = 2^128 mod N.
R = 141515903391459779531506841503331516415

# R^-1 mod N.
RInv = 133854242216446749056083838363708373830
