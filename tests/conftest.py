import os
import sys

import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


SAMPLE_SERIES = [
    10.1, 11.2, 12.0, 11.8, 13.2, 13.9, 13.6,
    15.2, 17.5, 19.4, 21.0, 23.2, 24.4, 25.8,
]


@pytest.fixture
def sample_series():
    return list(SAMPLE_SERIES)


@pytest.fixture
def quadratic_series():
    # non-constant differences that grow linearly
    return [float(t * t) for t in range(12)]
