"""
Genome Decoder Module

Decoders translate a Genome into an executable network. Decoding happens in
two steps: first the genome's connections are normalized into a graph over
dense node indices (see 'phenonet.graphs'), then the network is built around
that graph.

Classes:
    GenomeDecoder:        Abstract base class for decoders
    GenomeDecoderAcyclic: Decodes to NetworkAcyclic
    GenomeDecoderCyclic:  Decodes to NetworkCyclic
"""

import logging
import numpy as np
from abc import ABC, abstractmethod

from phenonet.activations          import ActivationFunction
from phenonet.genotype             import Genome
from phenonet.graphs               import (AcyclicGraph, DirectedGraph, NodeIdMap,
                                           build_acyclic_graph, build_directed_graph)
from phenonet.phenotype            import NetworkAcyclic, NetworkBase, NetworkCyclic

logger = logging.getLogger(__name__)

class GenomeDecoder(ABC):
    """
    Abstract base class for genome decoders.

    A decoder is configured once (activation function, execution path, precision)
    and then decodes any number of genomes. Decoders hold no per-genome state, so
    one decoder may be shared by several threads or processes.

    Public Methods:
        decode(genome):      Build the executable network for a genome
        build_graph(genome): Build the graph and the node ID map without the network
    """

    def __init__(self,
                 activation    : ActivationFunction,
                 bounded_output: bool = False,
                 vectorized    : bool = True,
                 dtype         : type = np.float64):
        """
        Parameters:
            activation:     Activation function applied to every non-input node
            bounded_output: Clamp network outputs to the interval [0, 1]
            vectorized:     Build networks that use the vectorized (numpy) path
            dtype:          Numeric type of the network's buffers and weights
        """
        self.activation    : ActivationFunction = activation
        self.bounded_output: bool               = bounded_output
        self.vectorized    : bool               = vectorized
        self.dtype         : np.dtype           = np.dtype(dtype)

    @abstractmethod
    def build_graph(self, genome: Genome) -> tuple[DirectedGraph, NodeIdMap]:
        """
        Build the graph a network would execute, together with the map from genome
        node IDs to the graph's dense node indices.

        Raises:
            MalformedGenomeError: if a connection references an undeclared node
        """
        pass

    @abstractmethod
    def decode(self, genome: Genome) -> NetworkBase:
        """
        Decode a genome into an executable network.

        Raises:
            MalformedGenomeError: if a connection references an undeclared node
            CycleDetectedError:   if an acyclic network is requested for a cyclic graph
        """
        pass

    def _build_directed_graph(self, genome: Genome) -> tuple[DirectedGraph, NodeIdMap]:
        return build_directed_graph(genome.connection_triples(),
                                    genome.meta.input_count,
                                    genome.meta.output_count,
                                    genome.hidden_ids)

    def __repr__(self):
        return (f"{type(self).__name__}(activation={self.activation.name}, "
                f"bounded_output={self.bounded_output}, vectorized={self.vectorized}, "
                f"dtype={self.dtype.name})")

class GenomeDecoderAcyclic(GenomeDecoder):
    """
    Decodes genomes into acyclic (feedforward) networks.

    Output nodes are not pinned to fixed positions: like hidden nodes, they are
    placed according to their layer. The returned node ID map therefore only
    fixes the input node IDs.
    """

    def build_graph(self, genome: Genome) -> tuple[AcyclicGraph, NodeIdMap]:
        """
        Raises:
            MalformedGenomeError: if a connection references an undeclared node
            CycleDetectedError:   if the genome's connections form a cycle
        """
        graph, node_id_map = self._build_directed_graph(genome)
        return build_acyclic_graph(graph, node_id_map)

    def decode(self, genome: Genome) -> NetworkAcyclic:
        graph, _ = self.build_graph(genome)
        network  = NetworkAcyclic(graph,
                                  self.activation,
                                  vectorized     = self.vectorized,
                                  bounded_output = self.bounded_output,
                                  dtype          = self.dtype)
        logger.debug("Decoded %r", network)
        return network

class GenomeDecoderCyclic(GenomeDecoder):
    """
    Decodes genomes into cyclic (recurrent) networks.

    Input and output nodes keep their genome IDs as dense indices; hidden nodes
    follow them in ascending ID order.
    """

    def __init__(self,
                 activation      : ActivationFunction,
                 activation_count: int,
                 bounded_output  : bool = False,
                 vectorized      : bool = True,
                 dtype           : type = np.float64):
        """
        Parameters:
            activation:       Activation function applied to every non-input node
            activation_count: Number of relaxation iterations per network activation
            bounded_output:   Clamp network outputs to the interval [0, 1]
            vectorized:       Build networks that use the vectorized (numpy) path
            dtype:            Numeric type of the network's buffers and weights
        """
        if activation_count < 1:
            raise ValueError(f"activation_count must be at least 1, got {activation_count}")

        super().__init__(activation, bounded_output, vectorized, dtype)
        self.activation_count: int = activation_count

    def build_graph(self, genome: Genome) -> tuple[DirectedGraph, NodeIdMap]:
        return self._build_directed_graph(genome)

    def decode(self, genome: Genome) -> NetworkCyclic:
        graph, _ = self.build_graph(genome)
        network  = NetworkCyclic(graph,
                                 self.activation,
                                 self.activation_count,
                                 vectorized     = self.vectorized,
                                 bounded_output = self.bounded_output,
                                 dtype          = self.dtype)
        logger.debug("Decoded %r (activation_count=%d)", network, self.activation_count)
        return network
