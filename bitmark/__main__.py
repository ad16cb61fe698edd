"""
Copyright (c) 2014, Project Bitmark
Copyright (c) 2019-2020, the Decred developers
See LICENSE for details

Print the parameters of the network selected on the command line.

$ python -m bitmark --testnet
"""

import sys

from bitmark import config, nets
from bitmark.util import helpers


def main(argv=None):
    """
    Returns:
        int: The process exit status.
    """
    helpers.prepareLogging()
    if not config.selectFromCommandLine(argv):
        print("Error: invalid combination of -regtest and -testnet.", file=sys.stderr)
        return 1
    netParams = nets.params()
    print(f"network:       {netParams.Name}")
    print(f"genesis hash:  {netParams.GenesisHash}")
    print(f"message start: {netParams.MessageStart.hex()}")
    print(f"ports:         {netParams.DefaultPort} (p2p), {netParams.RPCPort} (rpc)")
    print(f"data dir:      {config.netDataDir(netParams)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
