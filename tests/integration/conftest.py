"""
Shared fixtures for integration tests.
"""

import pytest
import random
import numpy as np
from pathlib import Path


@pytest.fixture(autouse=True)
def set_random_seeds():
    """Set random seeds for reproducibility."""
    np.random.seed(42)
    random.seed(42)

    yield

    np.random.seed(None)
    random.seed(None)


@pytest.fixture
def example_config_file():
    """The configuration shipped with the example script."""
    return str(Path(__file__).parent.parent.parent / "examples" / "configs" / "config_network.ini")
