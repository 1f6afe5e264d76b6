"""
NEAT Genotype Package

This package implements the records a network is made of: nodes and the
weighted links between them.

Modules:
    node: NodeType enumeration and Node class
    link: Link class

Exported Classes:
    NodeType: Enumeration for node types (INPUT, HIDDEN, OUTPUT)
    Node:     A node in the network, holding its current value
    Link:     A weighted connection between nodes, tagged with an innovation number
"""

from neatgraph.genotype.link import Link
from neatgraph.genotype.node import NodeType, Node

__all__ = ['Link',
           'Node',
           'NodeType']
