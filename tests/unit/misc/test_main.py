"""
Copyright (c) 2014, Project Bitmark
Copyright (c) 2020, the Decred developers
See LICENSE for details
"""

import pytest

from bitmark import __main__ as cli, config
from bitmark.nets import mainnet, testnet


@pytest.fixture
def appDir(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "dataDir", lambda: str(tmp_path))
    return tmp_path


def test_main(appDir, restoreNet, capsys):
    assert cli.main([]) == 0
    out = capsys.readouterr().out
    assert mainnet.GenesisHash in out
    assert "f9beb4d9" in out

    assert cli.main(["--testnet"]) == 0
    out = capsys.readouterr().out
    assert testnet.GenesisHash in out
    assert testnet.DataDir in out

    assert cli.main(["--testnet", "--regtest"]) == 1
    captured = capsys.readouterr()
    assert "invalid combination" in captured.err
