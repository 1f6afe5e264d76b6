"""Pytest configuration and shared fixtures."""

import pytest
import sys
from pathlib import Path

# Add the source directory to the Python path
src_dir = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_dir))


@pytest.fixture
def linear_config():
    """Linear squashing, 100 relaxation passes."""
    from neatgraph.run.config import Config
    config = Config()
    config.squash = 'linear'
    config.eval_iterations = 100
    return config


@pytest.fixture
def demo_network(linear_config):
    """
    2 inputs, 3 outputs and four links:
    0 => 2 (w=2), 1 => 2 (w=1), 0 => 3 (w=3), 1 => 3 (w=-1).
    Output node 4 has no inbound links.
    """
    from neatgraph.network import Network
    net = Network(2, 3, linear_config)
    for node_in, node_out, weight in [(0, 2, 2), (1, 2, 1), (0, 3, 3), (1, 3, -1)]:
        net.add_link(net.max_innovation(), node_in, node_out, weight)
    return net
