import numpy as np
import pytest


@pytest.fixture
def points() -> np.ndarray:
    """A spread of sample points (avoiding the poles of tan) at which to check derivative identities."""
    return np.array([-3.0, -1.5, -0.5, 0.0, 0.25, 1.0, 2.0, 2.5])
