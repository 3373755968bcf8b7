"""
Decoding Package

Translation of genomes into executable networks, and selection of the
decoder to use.

Modules:
    genome_decoder:  GenomeDecoder base class and its acyclic/cyclic implementations
    decoder_factory: Factory functions selecting network class and execution path
    hardware:        Runtime probe for vectorized execution support

Exported:
    GenomeDecoder, GenomeDecoderAcyclic, GenomeDecoderCyclic
    create_genome_decoder, create_genome_decoder_acyclic, create_genome_decoder_cyclic
    decode, is_hardware_accelerated
"""

from phenonet.decoding.genome_decoder  import GenomeDecoder, GenomeDecoderAcyclic, GenomeDecoderCyclic
from phenonet.decoding.decoder_factory import (create_genome_decoder,
                                               create_genome_decoder_acyclic,
                                               create_genome_decoder_cyclic,
                                               decode)
from phenonet.decoding.hardware        import is_hardware_accelerated

__all__ = ['GenomeDecoder',
           'GenomeDecoderAcyclic',
           'GenomeDecoderCyclic',
           'create_genome_decoder',
           'create_genome_decoder_acyclic',
           'create_genome_decoder_cyclic',
           'decode',
           'is_hardware_accelerated']
