"""
NEAT Network Package

This package implements the executable network: it owns the nodes and links,
validates structural changes and evaluates the graph by fixed-iteration relaxation.

Exported Classes:
    Network:             A directed, weighted, possibly cyclic network
    InvalidEndpointRole: Error raised by 'Network.add_link' for an invalid source/destination
    ArityMismatch:       Error raised by 'Network.evaluate' for a wrong number of inputs
"""

from neatgraph.network.network import ArityMismatch, InvalidEndpointRole, Network

__all__ = ['ArityMismatch',
           'InvalidEndpointRole',
           'Network']
