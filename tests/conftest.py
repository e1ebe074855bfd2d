"""
Pytest configuration and fixtures for mcdm-rank tests.
"""
import sys
from pathlib import Path

import numpy as np
import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from mcdm_rank.config import reset_config
from mcdm_rank.models import Alternative, Criterion


@pytest.fixture(autouse=True)
def fresh_config():
    """Every test starts and ends with the default configuration."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def sample_criteria():
    """Quality (benefit), Price (cost), Speed (benefit)."""
    return [
        Criterion('Quality', 'benefit', 0.4, id='q'),
        Criterion('Price', 'cost', 0.3, id='p'),
        Criterion('Speed', 'benefit', 0.3, id='s'),
    ]


@pytest.fixture
def sample_alternatives():
    """Four products scored on the sample criteria."""
    return [
        Alternative('P1', [0.8, 100, 5], id='p1'),
        Alternative('P2', [0.6, 150, 3], id='p2'),
        Alternative('P3', [0.4, 120, 4], id='p3'),
        Alternative('P4', [0.2, 80, 6], id='p4'),
    ]


@pytest.fixture
def random_problem():
    """Ten alternatives on five criteria with positive values."""
    rng = np.random.RandomState(42)
    criteria = [
        Criterion(f'C{j + 1:02d}', 'cost' if j % 2 else 'benefit', rng.uniform(0.5, 2.0))
        for j in range(5)
    ]
    alternatives = [
        Alternative(f'A{i + 1:02d}', rng.uniform(1.0, 10.0, size=5).tolist())
        for i in range(10)
    ]
    return alternatives, criteria
