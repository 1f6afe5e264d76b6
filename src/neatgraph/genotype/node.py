"""
NEAT Node Module.

This module implements the Node record and NodeType enumeration
for the graph evaluation engine.

Classes:
    NodeType: Enumeration for node types (INPUT, HIDDEN, OUTPUT)
    Node:     A single node in the network, holding its current value
"""

from enum import Enum

class NodeType(Enum):
    """
    Nodes come in three types: input, hidden, output.
    """
    INPUT  = "I"
    HIDDEN = "H"
    OUTPUT = "O"

class Node:
    """
    A node in a Neural Network.

    The node ID equals the position of the node in the node sequence of the
    Network owning it. IDs are assigned on creation and never reused or
    renumbered; the node type is fixed for the lifetime of the node.

    Public Attributes:
        id:    Unique identifier for this node (its insertion index)
        type:  Type of node (INPUT, HIDDEN, or OUTPUT)
        value: The current activation of the node
    """

    def __init__(self,
                 node_id  : int,
                 node_type: NodeType,
                 value    : float = 0.0):
        """
        Parameters:
            node_id:   Unique identifier for this node
            node_type: Type of node (INPUT, HIDDEN, or OUTPUT)
            value:     Initial activation of the node
        """
        self.id   : int      = node_id
        self.type : NodeType = node_type
        self.value: float    = value

    def __repr__(self):
        return f"Node(node_id={self.id:03d}, node_type=NodeType.{self.type.name:6s}, value={self.value})"

    def __str__(self):
        return f"[{self.type.value}{self.id}] v={self.value:+.2f}"
