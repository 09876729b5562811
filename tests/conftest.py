import random

import matplotlib
import pytest

matplotlib.use("Agg")


@pytest.fixture
def paged_out():
    return bytes([0x50, 0x61, 0x67, 0x65, 0x64, 0x4F, 0x75, 0x74, 0x21])


@pytest.fixture
def hello_world_block():
    # 1-M data codewords for "HELLO WORLD" in alphanumeric mode
    return bytes([32, 91, 11, 120, 209, 114, 220, 77, 67, 64, 236, 17, 236, 17, 236, 17])


def random_message(length, seed=0):
    rng = random.Random(seed * 100 + length)
    return bytes(rng.randrange(256) for _ in range(length))
