"""
Copyright (c) 2021, the mpspdz developers
See LICENSE for details

Codec configuration. Parameters come from a named parameter set, an INI file,
or both, with explicit file values taking precedence.

    # mpspdz.conf
    params = gfp128
    prime = 198766463529478683931867765928436695041
"""

import configparser
import os

from appdirs import AppDirs

from mpspdz import MpSpdzError, params as gfpparams
from mpspdz.gfp import GfpCodec, MissingParameterError
from mpspdz.util import helpers


# Set the data directory in an OS-appropriate location.
_ad = AppDirs("MpSpdz", False)
DATA_DIR = _ad.user_data_dir

# The configuration file name.
CONFIG_NAME = "mpspdz.conf"
CONFIG_PATH = os.path.join(DATA_DIR, CONFIG_NAME)

# INI keys mapped to the codec parameter they set.
PARAM_KEYS = {"prime": "prime", "r": "r", "rinv": "rInv"}

# INI key naming a parameter set from mpspdz.params.
PARAMS_NAME_KEY = "params"

log = helpers.getLogger("CONFIG")


def parseInt(k, s):
    """
    Parse a decimal or 0x-prefixed hexadecimal integer setting.

    Args:
        k (str): The setting key, used in error messages.
        s (str): The raw value.

    Returns:
        int: The parsed value.
    """
    try:
        return int(s.strip().replace("_", ""), 0)
    except ValueError:
        raise MpSpdzError(f"invalid integer for {k}: {s!r}")


def readParams(path=None, paramsName=None):
    """
    Resolve the codec parameters.

    Args:
        path (str or Path): optional. An INI file with any of the keys params,
            prime, r and rinv. The file must exist if provided.
        paramsName (str): optional. A parameter set name. A params key in the
            file overrides it.

    Returns:
        dict: Keys prime, r and rInv. A key is None if it could not be
            resolved.
    """
    fileCfg = {}
    if path:
        try:
            fileCfg = helpers.readINI(path, list(PARAM_KEYS) + [PARAMS_NAME_KEY])
        except OSError as e:
            raise MpSpdzError(f"configuration at {path} can not be opened: {e}")
        except configparser.Error as e:
            raise MpSpdzError(f"malformed configuration at {path}: {e}")
        log.info(f"read codec configuration from {path}")
    paramsName = fileCfg.get(PARAMS_NAME_KEY, paramsName)

    res = dict.fromkeys(PARAM_KEYS.values())
    if paramsName:
        p = gfpparams.parse(paramsName.strip())
        res.update(prime=p.Prime, r=p.R, rInv=p.RInv)
    for k, attr in PARAM_KEYS.items():
        if k in fileCfg:
            res[attr] = parseInt(k, fileCfg[k])
    return res


def load(path=None, paramsName=None):
    """
    Build a GfpCodec from the configuration. With neither argument, the file
    at CONFIG_PATH is used.

    Args:
        path (str or Path): optional. The INI configuration file.
        paramsName (str): optional. A parameter set name.

    Returns:
        GfpCodec: The configured codec.

    Raises:
        MissingParameterError: A codec parameter could not be resolved.
    """
    if path is None and paramsName is None:
        if not os.path.isfile(CONFIG_PATH):
            raise MpSpdzError(f"no configuration file at {CONFIG_PATH}")
        path = CONFIG_PATH
    cfg = readParams(path, paramsName)
    missing = [k for k, attr in PARAM_KEYS.items() if cfg[attr] is None]
    if missing:
        raise MissingParameterError(f"missing codec parameters: {', '.join(missing)}")
    return GfpCodec(cfg["prime"], cfg["r"], cfg["rInv"])
