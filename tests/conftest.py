from pathlib import Path

import numpy as np
import pytest

DATA_DIR = Path(__file__).parent / 'data'


@pytest.fixture
def off_file():
    return DATA_DIR / 'alphacomplexdoc.off'


@pytest.fixture
def doc_points(off_file):
    from ripsflow.utils import read_off_points
    return read_off_points(off_file)


@pytest.fixture
def basis_points():
    """ Vertices of a regular 3-simplex: the unit basis vectors of R^4. """
    return [[0.0, 0.0, 0.0, 1.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [1.0, 0.0, 0.0, 0.0]]


@pytest.fixture
def random_cloud():
    rng = np.random.RandomState(42)
    return rng.rand(12, 2)
