import numpy as np
import pytest


@pytest.fixture
def separable():
    """Two classes, four 2D samples each, split along the first axis."""
    X = np.array([
        [1.0, 2.0], [2.0, 1.0], [1.0, 1.0], [2.0, 2.0],
        [6.0, 2.0], [7.0, 1.0], [6.0, 1.0], [7.0, 2.0],
    ])
    y = np.array([0, 0, 0, 0, 1, 1, 1, 1])
    return X, y


@pytest.fixture
def three_classes():
    rng = np.random.default_rng(0)
    centers = np.array([[0.0, 0.0, 0.0, 0.0], [4.0, 1.0, 0.0, -2.0], [-3.0, 5.0, 1.0, 2.0]])
    X = np.vstack([c + rng.normal(size=(10, 4)) for c in centers])
    # non-contiguous labels on purpose
    y = np.repeat([40, -7, 3], 10)
    return X, y
