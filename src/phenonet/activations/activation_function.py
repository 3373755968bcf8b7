"""
Activation Function Module

Pairs each scalar activation function with its vectorized counterpart, so a
network can be given one object and use whichever form its execution path
calls for.

Classes:
    ActivationFunction: Named pair of (scalar, vectorized) forms of one function

Functions:
    get_activation: Look up an ActivationFunction by name
"""

from typing import Callable, NamedTuple
import numpy as np

from phenonet.activations.basic_activations      import activations as scalar_activations, activation_codes
from phenonet.activations.vectorized_activations import activations_vec

class ActivationFunction(NamedTuple):
    """
    A stateless elementwise nonlinearity, in scalar and vectorized form.

    Attributes:
        name:   Catalogue name (e.g. 'leaky_relu')
        code:   3-letter identifier, used when rendering networks
        fn:     Scalar form, float -> float
        fn_vec: Vectorized form, fn_vec(v, w=None), writes into 'w' (or 'v') and returns it

    Public Methods:
        fn_span(v, w=None): Apply the scalar form over a buffer, element by element
    """
    name  : str
    code  : str
    fn    : Callable[[float], float]
    fn_vec: Callable[..., np.ndarray]

    def fn_span(self, v: np.ndarray, w: np.ndarray | None = None) -> np.ndarray:
        """
        Apply the scalar form to every element of a buffer.

        Parameters:
            v: Buffer of pre-activation values
            w: Buffer receiving the post-activation values; if None, 'v' is overwritten

        Returns:
            The buffer holding the post-activation values
        """
        if w is None:
            w = v
        fn = self.fn
        for i in range(len(v)):
            w[i] = fn(float(v[i]))
        return w

    def __call__(self, x: float) -> float:
        return self.fn(x)

    def __repr__(self):
        return f"ActivationFunction({self.name!r})"

activations: dict[str, ActivationFunction] = {
    name: ActivationFunction(name, activation_codes[name], fn, activations_vec[name])
    for name, fn in scalar_activations.items()
    }

def get_activation(name: str) -> ActivationFunction:
    """
    Look up an activation function by name.

    Raises:
        ValueError: if there is no activation function with that name
    """
    try:
        return activations[name]
    except KeyError:
        raise ValueError(f"Unknown activation function '{name}'. "
                         f"Available: {', '.join(sorted(activations))}") from None
