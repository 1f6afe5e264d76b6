"""
NEAT Link Module

This module implements the Link record for the graph evaluation engine.

Classes:
    Link: A weighted, directed connection between two nodes
"""

class Link:
    """
    A weighted connection between two nodes in a Neural Network.

    Each link represents a directed edge in the network graph, connecting a
    source node to a destination node with an associated weight. Links are
    identified by their innovation number, a historical marker assigned by
    whoever tracks innovations across the population.

    Links are never removed from a network: disabling a link is the only way
    to take it out of the computation, so its history is kept for crossover.

    Public Attributes:
        node_in:    ID of the source node
        node_out:   ID of the destination node
        weight:     Weight of the link
        enabled:    Whether this link takes part in evaluation
        innovation: Innovation number identifying this link
    """

    def __init__(self,
                 node_in   : int,
                 node_out  : int,
                 weight    : float,
                 innovation: int,
                 enabled   : bool = True):
        """
        Parameters:
            node_in:    ID of the source node
            node_out:   ID of the destination node
            weight:     Weight of the link
            innovation: Number identifying this link across the population
            enabled:    Whether this link takes part in evaluation
        """
        self.node_in   : int   = node_in
        self.node_out  : int   = node_out
        self.weight    : float = weight
        self.enabled   : bool  = enabled
        self.innovation: int   = innovation

    def __repr__(self):
        return (f"Link(node_in={self.node_in:03d}, node_out={self.node_out:03d},"
                f"weight={self.weight:+.6f}, enabled={self.enabled}, innovation={self.innovation:03d})")

    def __str__(self):
        s  = f"[{self.innovation:03d},{'E' if self.enabled else 'D'},"
        s += f"{self.node_in:02d}=>{self.node_out:02d},{self.weight:+.02f}]"
        return s
