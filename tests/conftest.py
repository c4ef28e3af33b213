import numpy as np
import pytest


@pytest.fixture
def random_grid():
    rng = np.random.default_rng(1234)
    return rng.integers(0, 256, size=(7, 9, 3), dtype=np.uint8)


@pytest.fixture
def empty_grids():
    return [
        np.zeros((0, 0, 3), dtype=np.uint8),
        np.zeros((0, 5, 3), dtype=np.uint8),
        np.zeros((4, 0, 3), dtype=np.uint8),
    ]
