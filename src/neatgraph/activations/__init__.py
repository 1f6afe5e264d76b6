"""
Activations Package

This package provides the squashing functions applied to a node's weighted input sum.

Exported:
    activations:      Dictionary mapping squashing function names to functions
    activation_codes: Dictionary mapping squashing function names to 3-letter codes
    Individual squashing functions: linear_activation, sigmoid_activation,
                                    signed_sigmoid_activation, relu_activation
"""

from neatgraph.activations.basic_activations import (
    activations,
    activation_codes,
    linear_activation,
    sigmoid_activation,
    signed_sigmoid_activation,
    relu_activation
)

__all__ = [
    'activations',
    'activation_codes',
    'linear_activation',
    'sigmoid_activation',
    'signed_sigmoid_activation',
    'relu_activation'
]
