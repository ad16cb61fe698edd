"""
Copyright (c) 2014, Project Bitmark
Copyright (c) 2019-2020, the Decred developers
See LICENSE for details

Resolution of the active network from the configuration file and the command
line.
"""

import argparse
import os

from bitmark import nets
from bitmark.util import helpers


APP_NAME = "bitmark"

# The configuration file name.
CONFIG_NAME = "bitmark.conf"

# Boolean settings that may appear in the configuration file.
NET_KEYS = ("testnet", "regtest")

TRUE_VALUES = ("1", "true", "yes", "on")

log = helpers.getLogger("CONFIG")


def dataDir():
    """
    The application data directory.

    Returns:
        str: The directory path.
    """
    return helpers.appDataDir(APP_NAME)


def netDataDir(netParams):
    """
    The data directory of a network. Main network data lives in the
    application data directory itself.

    Args:
        netParams (ChainParams): The network parameters.

    Returns:
        str: The directory path.
    """
    if not netParams.DataDir:
        return dataDir()
    return os.path.join(dataDir(), netParams.DataDir)


def parseBool(v):
    """
    Interpret a configuration value as a boolean. A key given with no value,
    like `testnet=`, is set.
    """
    v = str(v).strip().lower()
    return v == "" or v in TRUE_VALUES


def readConfigFile(cfgPath=None):
    """
    Read the network flags from the configuration file. A missing file sets
    no flags.

    Args:
        cfgPath (str): Optional. Default: bitmark.conf in the data directory.

    Returns:
        dict: Flag name to bool, for the flags present in the file.
    """
    if cfgPath is None:
        cfgPath = os.path.join(dataDir(), CONFIG_NAME)
    if not os.path.isfile(cfgPath):
        return {}
    return {k: parseBool(v) for k, v in helpers.readINI(cfgPath, NET_KEYS).items()}


def parseArgs(argv=None):
    """
    Parse the network flags from the command line. Unknown arguments are
    ignored.

    Args:
        argv (list(str)): Optional. Default: sys.argv[1:].

    Returns:
        argparse.Namespace: The parsed flags.
    """
    parser = argparse.ArgumentParser(prog=APP_NAME)
    parser.add_argument("--testnet", action="store_true", help="use testnet")
    parser.add_argument("--regtest", action="store_true", help="use regtest")
    parser.add_argument("--conf", default=None, help="path to bitmark.conf")
    args, unknown = parser.parse_known_args(argv)
    if unknown:
        log.warning(f"ignoring unknown arguments: {unknown!r}")
    return args


def selectFromCommandLine(argv=None, cfgPath=None):
    """
    Look for the testnet and regtest flags and select the active network.
    The command line flags are added to those set in the configuration file.
    A command line flag can't unset a file's flag, so regtest=1 in the file
    with --testnet on the command line is an invalid combination.

    Args:
        argv (list(str)): Optional. Default: sys.argv[1:].
        cfgPath (str): Optional. The configuration file path. Default: the
            --conf argument, else bitmark.conf in the data directory.

    Returns:
        bool: False if an invalid combination is given.
    """
    args = parseArgs(argv)
    flags = readConfigFile(cfgPath if cfgPath else args.conf)
    if args.testnet:
        flags["testnet"] = True
    if args.regtest:
        flags["regtest"] = True
    return nets.selectFromFlags(flags.get("testnet", False), flags.get("regtest", False))
