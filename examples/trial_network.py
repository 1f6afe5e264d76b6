#!/usr/bin/env python3
"""
Build a small network by hand and evaluate it.

Two inputs feed two of the three outputs; the third output has no inbound
links and keeps its initial value.

Usage:
    python examples/trial_network.py
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from neatgraph import Config, Network

CONFIG_FILE = Path(__file__).parent / "configs" / "config_network.ini"


def main():
    logging.basicConfig(level=logging.INFO,
                        format="[%(asctime)s][%(levelname)s] %(message)s")

    config = Config(str(CONFIG_FILE))
    net    = Network.from_config(config)

    # (source, destination, weight)
    for node_in, node_out, weight in [(0, 2, 2.0), (1, 2, 1.0), (0, 3, 3.0), (1, 3, -1.0)]:
        net.add_link(net.max_innovation(), node_in, node_out, weight)

    print(net)

    outputs = net.evaluate([2.0, -3.0])
    print(f"Outputs: [{', '.join(f'{v:g}' for v in outputs)}]")


if __name__ == '__main__':
    main()
