"""
Acyclic Network Module

This module implements the executable form of a feedforward (acyclic) network.
The network is evaluated with a single sweep over its layers: since every
connection goes from a lower layer to a higher one, all the inputs of a node
are final by the time its layer is reached. There is no iteration limit and
no internal state survives between calls.

Classes:
    NetworkAcyclic: Layered feedforward network over a dense working buffer
"""

import numpy as np
from typing import Sequence

from phenonet.activations           import ActivationFunction
from phenonet.graphs.acyclic        import AcyclicGraph
from phenonet.phenotype.network_base import NetworkBase

class NetworkAcyclic(NetworkBase):
    """
    An acyclic network, evaluated layer by layer in one forward sweep.

    The working buffer holds one value per node: pre-activation sums while a
    layer is being accumulated, post-activation values once the layer has been
    activated. Input nodes occupy [0, input_count); output nodes sit wherever
    their layer put them, as recorded by the AcyclicGraph.

    Nodes without incoming connections share layer 0 with the inputs and are
    never activated, so they hold 0.0 where NetworkCyclic would give f(0).

    Public Methods:
        activate(inputs): Run the network, return the outputs
        reset():          Zero the working buffer

    Public Properties (in addition to NetworkBase's):
        layer_count: Number of layers in the network
    """

    def __init__(self,
                 graph         : AcyclicGraph,
                 activation    : ActivationFunction,
                 vectorized    : bool = True,
                 bounded_output: bool = False,
                 dtype         : type = np.float64):
        """
        Parameters:
            graph:          The layered graph to execute
            activation:     Activation function applied to every non-input node
            vectorized:     Use the vectorized (numpy) path instead of the scalar one
            bounded_output: Clamp output values to the interval [0, 1]
            dtype:          Numeric type of the working buffer
        """
        super().__init__(graph, activation, vectorized, bounded_output, dtype)

        self._layer_array           = graph.layer_array
        self._output_node_idx_array = graph.output_node_idx_array

        # Working buffer, reused across calls
        self._activations = np.zeros(self._node_count, dtype=self._dtype)

    @property
    def layer_count(self) -> int:
        return len(self._layer_array)

    def activate(self, inputs: Sequence[float]) -> np.ndarray:
        inputs = self._check_inputs(inputs)
        values = self._activations

        values[:self._input_count] = inputs
        values[self._input_count:] = 0.0

        # Layer 0 holds the inputs (and any node nobody connects to); it is never activated.
        # Each layer is activated once all connections from earlier layers have been applied,
        # then its own outgoing connections are applied.
        node_start = 0
        conn_start = 0
        for layer_idx, layer in enumerate(self._layer_array):
            if layer_idx > 0:
                segment = values[node_start:layer.end_node_idx]
                self._activation_fn(segment)

            self._accumulate(values, values, conn_start, layer.end_connection_idx)

            node_start = layer.end_node_idx
            conn_start = layer.end_connection_idx

        return self._read_outputs(values[self._output_node_idx_array])

    def reset(self) -> None:
        self._activations.fill(0.0)
