"""
Cyclic Network Module

This module implements the executable form of a recurrent (cyclic) network.
Cyclic networks have no evaluation order that settles every node in one pass,
so each call performs a fixed number of synchronous relaxation iterations.
Node values persist between calls, giving the network a memory.

Classes:
    NetworkCyclic: Recurrent network relaxed for a fixed number of iterations per call
"""

import numpy as np
from typing import Sequence

from phenonet.activations            import ActivationFunction
from phenonet.graphs.directed_graph  import DirectedGraph
from phenonet.phenotype.network_base import NetworkBase

class NetworkCyclic(NetworkBase):
    """
    A cyclic network, evaluated by synchronous relaxation.

    Two buffers are kept: pre-activation sums and post-activation values. One
    iteration accumulates every connection's contribution, reading only the
    previous iteration's post-activation values, then activates every non-input
    node. Updates are therefore independent of connection order.

    Input nodes occupy [0, input_count), output nodes are fixed at
    [input_count, input_count + output_count).

    Post-activation values survive from one call to the next. Call 'reset()'
    between independent trials.

    Public Methods:
        activate(inputs): Run 'activation_count' iterations, return the outputs
        reset():          Zero all non-input node values

    Public Properties (in addition to NetworkBase's):
        activation_count: Number of relaxation iterations per call
    """

    def __init__(self,
                 graph           : DirectedGraph,
                 activation      : ActivationFunction,
                 activation_count: int,
                 vectorized      : bool = True,
                 bounded_output  : bool = False,
                 dtype           : type = np.float64):
        """
        Parameters:
            graph:            The graph to execute (may contain cycles)
            activation:       Activation function applied to every non-input node
            activation_count: Number of relaxation iterations per call (at least 1)
            vectorized:       Use the vectorized (numpy) path instead of the scalar one
            bounded_output:   Clamp output values to the interval [0, 1]
            dtype:            Numeric type of the working buffers
        """
        if activation_count < 1:
            raise ValueError(f"activation_count must be at least 1, got {activation_count}")

        super().__init__(graph, activation, vectorized, bounded_output, dtype)
        self._activation_count: int = activation_count

        self._pre_activation  = np.zeros(self._node_count, dtype=self._dtype)
        self._post_activation = np.zeros(self._node_count, dtype=self._dtype)

    @property
    def activation_count(self) -> int:
        return self._activation_count

    def activate(self, inputs: Sequence[float]) -> np.ndarray:
        inputs = self._check_inputs(inputs)
        ic  = self._input_count
        pre = self._pre_activation
        post = self._post_activation

        post[:ic] = inputs

        for _ in range(self._activation_count):
            pre.fill(0.0)
            self._accumulate(post, pre, 0, self._connection_count)

            # Inputs are never activated
            self._activation_fn(pre[ic:], post[ic:])

        # Bounding applies to the returned copy; the recurrent state stays unbounded
        return self._read_outputs(post[ic:ic + self._output_count].copy())

    def reset(self) -> None:
        self._pre_activation[self._input_count:] = 0.0
        self._post_activation[self._input_count:] = 0.0
