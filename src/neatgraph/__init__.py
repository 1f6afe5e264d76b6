"""
NEAT graph evaluation engine.

This package builds and evaluates the network encoded by a single NEAT
(NeuroEvolution of Augmenting Topologies) genome. Networks may contain cycles;
they are evaluated by a fixed number of relaxation passes, and every link carries
an innovation number so the structure stays compatible with evolutionary operators.

Main components:
- genotype:    Node and link records
- network:     The network itself (queries, link insertion, evaluation)
- run:         Configuration
- activations: Squashing functions

Example:
    >>> from neatgraph import Config, Network
    >>> net = Network(2, 1, Config())
    >>> net.add_link(net.max_innovation(), 0, 2, 0.5)
    1
    >>> net.evaluate([1.0, 0.0])
    [0.5]
"""

__version__ = "0.1.0"

from neatgraph.run.config import Config
from neatgraph.genotype import Link, Node, NodeType
from neatgraph.network import ArityMismatch, InvalidEndpointRole, Network

__all__ = [
    "Config",
    "Link",
    "Node",
    "NodeType",
    "Network",
    "ArityMismatch",
    "InvalidEndpointRole",
]
