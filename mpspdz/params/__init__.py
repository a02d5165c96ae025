"""
Copyright (c) 2021, the mpspdz developers
See LICENSE for details
"""

from mpspdz import MpSpdzError

from . import gfp128


the_params = {p.Name: p for p in (gfp128,)}


def parse(name):
    """
    Get the codec parameters based on the parameter set name.

    Args:
        name (str): The parameter set name, e.g. "gfp128".

    Returns:
        module: The parameter set, with Name, Prime, R and RInv attributes.
    """
    try:
        return the_params[name]
    except KeyError:
        raise MpSpdzError(f"unrecognized parameter set {name}")
