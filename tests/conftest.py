import pytest


class FakeClock:
    def __init__(self, now=0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms


class FixedRng:
    """Always picks the same shape and jitter."""
    def __init__(self, shape="T", jitter=0):
        self.shape = shape
        self.jitter = jitter

    def choice(self, seq):
        return self.shape if self.shape in seq else seq[0]

    def randrange(self, n):
        return min(self.jitter, n - 1)


@pytest.fixture
def clock():
    return FakeClock(1000)


@pytest.fixture
def rng():
    return FixedRng()
