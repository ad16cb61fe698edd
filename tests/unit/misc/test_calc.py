"""
Copyright (c) 2014, Project Bitmark
Copyright (c) 2019-2020, the Decred developers
See LICENSE for details
"""

from bitmark import calc


def test_onFork2():
    assert not calc.onFork2(100, 99)
    assert calc.onFork2(100, 100)
    assert calc.onFork2(100, 101)
    assert calc.onFork2(0, 0)


def test_cem_policy():
    forkHeight = 450000
    for height in (0, 1, forkHeight - 1):
        assert calc.cemWindowLength(forkHeight, height) == 365
        assert calc.cemMaxRewardReduction(forkHeight, height) == 50
    for height in (forkHeight, forkHeight + 1, 2 ** 40):
        assert calc.cemWindowLength(forkHeight, height) == 90
        assert calc.cemMaxRewardReduction(forkHeight, height) == 80


def test_subsidyInterimInterval():
    assert calc.subsidyInterimInterval(788000) == 394000
    assert calc.subsidyInterimInterval(150) == 75
    assert calc.subsidyInterimInterval(151) == 75
    assert calc.subsidyInterimInterval(1) == 0


def test_compactToBig():
    assert calc.compactToBig(0x1D00FFFF) == 0xFFFF << 208
    assert calc.compactToBig(0x207FFFFF) == 0x7FFFFF << 232
    assert calc.compactToBig(0x1E0FFFF0) == 0x0FFFF0 << 216
    assert calc.compactToBig(0x01003456) == 0
    assert calc.compactToBig(0x02123456) == 0x1234
    assert calc.compactToBig(0x03123456) == 0x123456
    assert calc.compactToBig(0x04923456) == -0x12345600
    assert calc.compactToBig(0) == 0
