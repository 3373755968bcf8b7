"""
Network Base Module

This module defines the abstract base class shared by the executable network
implementations (acyclic and cyclic). The two implementations share no
execution state; the base class only fixes the common interface and the
bookkeeping every network needs.

Classes:
    NetworkBase: Abstract base class defining the network interface
"""

import numpy as np
from abc    import ABC, abstractmethod
from typing import Sequence

from phenonet.activations           import ActivationFunction
from phenonet.graphs.directed_graph import DirectedGraph

class NetworkBase(ABC):
    """
    Abstract base class for executable networks.

    A network owns a working buffer that it overwrites on every call to
    'activate'. A network instance must therefore only ever be driven by one
    thread at a time; distinct instances are fully independent.

    The activation function is applied through one of two forms, chosen once at
    construction: the vectorized form (numpy, whole layer at a time) or the
    scalar form (one node at a time).

    Public Properties:
        input_count:      Number of input nodes
        output_count:     Number of output nodes
        node_count:       Total number of nodes
        connection_count: Number of connections
        activation:       The ActivationFunction applied to non-input nodes
        vectorized:       Whether the vectorized execution path is used
        bounded_output:   Whether outputs are clamped to [0, 1]
        dtype:            Numeric type of the working buffers

    Public Methods (must be implemented by subclasses):
        activate(inputs): Run the network and return its outputs
        reset():          Zero the network's internal state
    """

    def __init__(self,
                 graph         : DirectedGraph,
                 activation    : ActivationFunction,
                 vectorized    : bool = True,
                 bounded_output: bool = False,
                 dtype         : type = np.float64):
        """
        Parameters:
            graph:          The graph to execute
            activation:     Activation function applied to every non-input node
            vectorized:     Use the vectorized (numpy) path instead of the scalar one
            bounded_output: Clamp output values to the interval [0, 1]
            dtype:          Numeric type of the working buffers (float64 or float32)
        """
        self._input_count     : int                = graph.input_count
        self._output_count    : int                = graph.output_count
        self._node_count      : int                = graph.total_node_count
        self._connection_count: int                = graph.connection_count
        self._activation      : ActivationFunction = activation
        self._vectorized      : bool               = vectorized
        self._bounded_output  : bool               = bounded_output
        self._dtype           : np.dtype           = np.dtype(dtype)

        # Resolve the execution path once, not on every call
        self._activation_fn = activation.fn_vec if vectorized else activation.fn_span

        # Connection data, converted to the working precision
        self._source_ids = graph.source_ids
        self._target_ids = graph.target_ids
        self._weights    = graph.weights.astype(self._dtype)

        # Plain lists are far quicker than numpy arrays to index element by element
        if not vectorized:
            self._source_list = self._source_ids.tolist()
            self._target_list = self._target_ids.tolist()
            self._weight_list = self._weights.tolist()

    @property
    def input_count(self) -> int:
        return self._input_count

    @property
    def output_count(self) -> int:
        return self._output_count

    @property
    def node_count(self) -> int:
        return self._node_count

    @property
    def connection_count(self) -> int:
        return self._connection_count

    @property
    def activation(self) -> ActivationFunction:
        return self._activation

    @property
    def vectorized(self) -> bool:
        return self._vectorized

    @property
    def bounded_output(self) -> bool:
        return self._bounded_output

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    @abstractmethod
    def activate(self, inputs: Sequence[float]) -> np.ndarray:
        """
        Run the network on the given inputs.

        Parameters:
            inputs: One value per input node

        Returns:
            One value per output node, as a new array
        """
        pass

    @abstractmethod
    def reset(self) -> None:
        """Zero the network's internal state."""
        pass

    def __call__(self, inputs: Sequence[float]) -> np.ndarray:
        return self.activate(inputs)

    def _check_inputs(self, inputs: Sequence[float]) -> np.ndarray:
        """Convert inputs to a 1D array, verifying there is one value per input node."""
        inputs = np.asarray(inputs, dtype=self._dtype)
        if inputs.ndim != 1:
            raise ValueError(f"Input must be a 1D sequence, got {inputs.ndim}D")
        if len(inputs) != self._input_count:
            raise ValueError(f"Expected {self._input_count} inputs, got {len(inputs)}")
        return inputs

    def _accumulate(self, values: np.ndarray, sums: np.ndarray, start: int, end: int) -> None:
        """
        Add 'weight * values[source]' into 'sums[target]' for connections [start, end).

        Connections are applied in order on both paths. At double precision both
        produce the same sums; at single precision the scalar path multiplies in
        float64 before rounding, so the two may differ in the last bit.
        """
        if start == end:
            return

        if self._vectorized:
            src = self._source_ids[start:end]
            tgt = self._target_ids[start:end]
            np.add.at(sums, tgt, self._weights[start:end] * values[src])
        else:
            src, tgt, weights = self._source_list, self._target_list, self._weight_list
            for i in range(start, end):
                sums[tgt[i]] += weights[i] * values[src[i]]

    def _read_outputs(self, outputs: np.ndarray) -> np.ndarray:
        """Apply output bounding (if enabled) to a freshly copied output array."""
        if self._bounded_output:
            np.clip(outputs, 0.0, 1.0, out=outputs)
        return outputs

    def __repr__(self):
        return (f"{type(self).__name__}(inputs={self._input_count}, outputs={self._output_count}, "
                f"nodes={self._node_count}, connections={self._connection_count}, "
                f"activation={self._activation.name}, "
                f"path={'vectorized' if self._vectorized else 'scalar'}, dtype={self._dtype.name})")
