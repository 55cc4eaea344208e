import pytest

from milligrad.nn import Network


@pytest.fixture
def dataset():
    """Four-point regression set: 3 features, targets +-1."""
    X = [
        [2.0, 3.0, -1.0],
        [3.0, -1.0, 0.5],
        [0.5, 1.0, 1.0],
        [1.0, 1.0, -1.0],
    ]
    Y = [1.0, -1.0, -1.0, 1.0]
    return X, Y


@pytest.fixture
def model():
    return Network(3, [4, 4, 1], seed=42)
