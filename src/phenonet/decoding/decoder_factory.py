"""
Decoder Factory Module

Factory functions choosing which decoder to build: acyclic or cyclic (from the
genome's meta information), and vectorized or scalar execution (from a runtime
hardware probe, unless explicitly suppressed).

Functions:
    create_genome_decoder_acyclic: Decoder producing NetworkAcyclic instances
    create_genome_decoder_cyclic:  Decoder producing NetworkCyclic instances
    create_genome_decoder:         Decoder matching a MetaGenome and a Config
    decode:                        One-shot decode of a single genome
"""

import logging
import numpy as np

from phenonet.activations              import ActivationFunction, get_activation
from phenonet.decoding.genome_decoder  import GenomeDecoder, GenomeDecoderAcyclic, GenomeDecoderCyclic
from phenonet.decoding.hardware        import is_hardware_accelerated
from phenonet.genotype                 import Genome, MetaGenome
from phenonet.phenotype                import NetworkBase
from phenonet.run.config               import Config

logger = logging.getLogger(__name__)

# Floating-point precision name => numpy type
PRECISIONS = {
    "double": np.float64,
    "single": np.float32
    }

def _resolve_activation(activation: ActivationFunction | str) -> ActivationFunction:
    if isinstance(activation, str):
        return get_activation(activation)
    return activation

def _resolve_dtype(precision: str) -> type:
    try:
        return PRECISIONS[precision]
    except KeyError:
        raise ValueError(f"Unknown precision '{precision}'. Use 'double' or 'single'.") from None

def _use_vectorized(suppress_hardware_acceleration: bool) -> bool:
    return not suppress_hardware_acceleration and is_hardware_accelerated()

def create_genome_decoder_acyclic(activation                    : ActivationFunction | str,
                                  bounded_output                : bool = False,
                                  suppress_hardware_acceleration: bool = False,
                                  precision                     : str  = "double") -> GenomeDecoderAcyclic:
    """
    Create a decoder that produces acyclic networks.

    Parameters:
        activation:                     Activation function, or its name
        bounded_output:                 Clamp network outputs to the interval [0, 1]
        suppress_hardware_acceleration: Always use the scalar execution path
        precision:                      'double' (float64) or 'single' (float32)
    """
    return GenomeDecoderAcyclic(_resolve_activation(activation),
                                bounded_output = bounded_output,
                                vectorized     = _use_vectorized(suppress_hardware_acceleration),
                                dtype          = _resolve_dtype(precision))

def create_genome_decoder_cyclic(activation                    : ActivationFunction | str,
                                 activation_count              : int,
                                 bounded_output                : bool = False,
                                 suppress_hardware_acceleration: bool = False,
                                 precision                     : str  = "double") -> GenomeDecoderCyclic:
    """
    Create a decoder that produces cyclic networks.

    Parameters:
        activation:                     Activation function, or its name
        activation_count:               Number of relaxation iterations per network activation
        bounded_output:                 Clamp network outputs to the interval [0, 1]
        suppress_hardware_acceleration: Always use the scalar execution path
        precision:                      'double' (float64) or 'single' (float32)
    """
    return GenomeDecoderCyclic(_resolve_activation(activation),
                               activation_count,
                               bounded_output = bounded_output,
                               vectorized     = _use_vectorized(suppress_hardware_acceleration),
                               dtype          = _resolve_dtype(precision))

def create_genome_decoder(meta: MetaGenome, config: Config | None = None) -> GenomeDecoder:
    """
    Create the decoder matching a population's MetaGenome.

    The network class follows 'meta.is_acyclic' and the activation function
    follows 'meta.activation_name'; everything else comes from the [DECODER]
    section of the configuration.

    Parameters:
        meta:   Properties shared by the genomes to decode
        config: Decoder settings; if None, the defaults are used
    """
    if config is None:
        config = Config()

    if meta.is_acyclic:
        decoder = create_genome_decoder_acyclic(meta.activation_fn,
                                                bounded_output                 = config.bounded_output,
                                                suppress_hardware_acceleration = config.suppress_hardware_acceleration,
                                                precision                      = config.precision)
    else:
        decoder = create_genome_decoder_cyclic(meta.activation_fn,
                                               config.activation_count,
                                               bounded_output                 = config.bounded_output,
                                               suppress_hardware_acceleration = config.suppress_hardware_acceleration,
                                               precision                      = config.precision)

    logger.debug("Selected %r", decoder)
    return decoder

def decode(genome: Genome, config: Config | None = None) -> NetworkBase:
    """
    Decode a single genome, selecting the decoder from its meta information.

    Raises:
        MalformedGenomeError: if a connection references an undeclared node
        CycleDetectedError:   if the genome must be acyclic but contains a cycle
    """
    return create_genome_decoder(genome.meta, config).decode(genome)
