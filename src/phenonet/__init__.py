"""
phenonet - NEAT genome decoding and network execution.

This package translates NEAT genomes (sparse node IDs, weighted directed
connections) into dense, array-based executable networks, and runs those
networks forward as part of fitness evaluation. Both feedforward (acyclic)
and recurrent (cyclic) networks are supported, each with a scalar and a
vectorized execution path.

Main components:
- genotype: Genome representation consumed by the decoders
- graphs: Node ID maps, directed graphs, layered execution plans
- activations: Activation functions in scalar and vectorized form
- phenotype: Executable network implementations (acyclic, cyclic)
- decoding: Genome decoders and decoder selection
- run: Configuration and genome list evaluation

Example:
    >>> from phenonet import Genome, decode
    >>> genome = Genome.from_dict({
    ...     'nodes': [{'id': 0, 'type': 'input'}, {'id': 1, 'type': 'input'}, {'id': 2, 'type': 'output'}],
    ...     'connections': [{'from': 0, 'to': 2, 'weight': 2.0}],
    ...     'activation': 'identity'})
    >>> decode(genome).activate([3.0, 0.0])
    array([6.])
"""

__version__ = "0.1.0"

# Import main classes for convenient access
from phenonet.errors      import DecodeError, MalformedGenomeError, CycleDetectedError
from phenonet.activations import ActivationFunction, activations, get_activation
from phenonet.genotype    import ConnectionGene, Genome, MetaGenome
from phenonet.graphs      import ArrayNodeIdMap, DictionaryNodeIdMap, NodeIdMap
from phenonet.phenotype   import NetworkAcyclic, NetworkBase, NetworkCyclic
from phenonet.decoding    import (GenomeDecoderAcyclic,
                                  GenomeDecoderCyclic,
                                  create_genome_decoder,
                                  create_genome_decoder_acyclic,
                                  create_genome_decoder_cyclic,
                                  decode,
                                  is_hardware_accelerated)
from phenonet.run         import Config, GenomeListEvaluator

__all__ = [
    "DecodeError",
    "MalformedGenomeError",
    "CycleDetectedError",
    "ActivationFunction",
    "activations",
    "get_activation",
    "ConnectionGene",
    "Genome",
    "MetaGenome",
    "NodeIdMap",
    "DictionaryNodeIdMap",
    "ArrayNodeIdMap",
    "NetworkBase",
    "NetworkAcyclic",
    "NetworkCyclic",
    "GenomeDecoderAcyclic",
    "GenomeDecoderCyclic",
    "create_genome_decoder",
    "create_genome_decoder_acyclic",
    "create_genome_decoder_cyclic",
    "decode",
    "is_hardware_accelerated",
    "Config",
    "GenomeListEvaluator",
]
