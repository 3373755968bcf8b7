"""
Genome List Evaluator Module

Decodes a list of genomes and evaluates the fitness of the resulting networks,
serially or with CPU-based parallelization using joblib. This is the seam
between the decoders and whatever evolutionary loop drives them.
"""

import logging
from joblib import Parallel, delayed
from typing import Callable, Iterable, TYPE_CHECKING

from phenonet.errors import DecodeError
if TYPE_CHECKING:
    from phenonet.decoding  import GenomeDecoder
    from phenonet.genotype  import Genome
    from phenonet.phenotype import NetworkBase
    from phenonet.run.config import Config

logger = logging.getLogger(__name__)

class GenomeListEvaluator:
    """
    Evaluates the fitness of a list of genomes.

    Every genome is decoded into a fresh network which is handed to the
    'evaluate_fitness' callback. Networks are never shared between evaluations,
    so parallel evaluation is safe.

    Genomes that cannot be decoded (malformed, or cyclic where an acyclic network
    is required) are not retried: they receive 'null_fitness', so that the
    evolutionary algorithm discards them.

    Public Methods:
        evaluate(genomes): Return the fitness of each genome, in order

    Parallelization of fitness evaluation:
        num_jobs=1:  Serial evaluation (no parallelization)
        num_jobs>1:  Use specified number of parallel processes
        num_jobs=-1: Use all available CPU cores
    """

    def __init__(self,
                 decoder         : 'GenomeDecoder',
                 evaluate_fitness: Callable[['NetworkBase'], float],
                 num_jobs        : int   = 1,
                 null_fitness    : float = 0.0):
        """
        Parameters:
            decoder:          Decoder turning genomes into networks
            evaluate_fitness: Callback computing the fitness of a network
            num_jobs:         Number of parallel processes for fitness evaluation
            null_fitness:     Fitness assigned to genomes that cannot be decoded
        """
        self._decoder          = decoder
        self._evaluate_fitness = evaluate_fitness
        self._num_jobs         = num_jobs
        self._null_fitness     = null_fitness

    @classmethod
    def from_config(cls,
                    decoder         : 'GenomeDecoder',
                    evaluate_fitness: Callable[['NetworkBase'], float],
                    config          : 'Config') -> 'GenomeListEvaluator':
        """Create an evaluator using the [EVALUATION] settings of a Config."""
        return cls(decoder, evaluate_fitness, num_jobs=config.num_jobs, null_fitness=config.null_fitness)

    def evaluate(self, genomes: Iterable['Genome']) -> list[float]:
        """
        Evaluate the fitness of each genome.

        Parameters:
            genomes: The genomes to evaluate

        Returns:
            The fitness of each genome, in the same order
        """
        genomes = list(genomes)

        if self._num_jobs == 1:
            return [self._evaluate_one(genome) for genome in genomes]
        return Parallel(self._num_jobs)(delayed(self._evaluate_one)(genome) for genome in genomes)

    def _evaluate_one(self, genome: 'Genome') -> float:
        try:
            network = self._decoder.decode(genome)
        except DecodeError as e:
            logger.warning("Discarding genome %r: %s", genome, e)
            return self._null_fitness

        return self._evaluate_fitness(network)
