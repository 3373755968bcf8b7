"""
Activations Package

This package provides the activation functions applied to the nodes of a
decoded network. Every function comes in two numerically equivalent forms: a
scalar one (plain Python floats) and a vectorized one (numpy arrays).

Exported:
    activations:        Dictionary mapping names to ActivationFunction objects
    activation_codes:   Dictionary mapping names to 3-letter identifiers
    ActivationFunction: Named pair of the scalar and vectorized forms of a function
    get_activation:     Look up an ActivationFunction by name
"""

from phenonet.activations.basic_activations   import activation_codes
from phenonet.activations.activation_function import ActivationFunction, activations, get_activation

__all__ = [
    'activations',
    'activation_codes',
    'ActivationFunction',
    'get_activation'
]
