"""
Copyright (c) 2014, Project Bitmark
Copyright (c) 2019-2020, the Decred developers
See LICENSE for details
"""

import pytest

from bitmark import nets
from bitmark.nets.chainparams import NetworkID
from bitmark.util import helpers


@pytest.fixture(scope="module")
def prepareLogger(request):
    helpers.prepareLogging()


@pytest.fixture
def restoreNet():
    """
    Tests that select a network get the main network back afterwards.
    """
    yield
    nets.select(NetworkID.MAIN)


@pytest.fixture
def fakeRand():
    """
    A deterministic stand-in for rando.randInt that returns queued values,
    recording the ranges it was asked for.
    """

    class FakeRand:
        def __init__(self):
            self.values = []
            self.calls = []

        def queue(self, *values):
            self.values.extend(values)

        def __call__(self, maxVal):
            self.calls.append(maxVal)
            return self.values.pop(0)

    return FakeRand()
